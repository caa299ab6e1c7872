# -*- coding: utf-8 -*-
"""
Common exceptions for the business objects layer.
"""


class SchemaError(ValueError):
    """Raised when an input file (text/JSON) violates the expected schema."""


class AmbiguousCostError(SchemaError):
    """Raised when two items share a cost but differ in weight."""


class StateValidationError(ValueError):
    """Raised when the in-memory state violates domain constraints."""


class PackageStateError(StateValidationError):
    """Raised when a package that already holds items is packed again."""


class PackingConsistencyError(RuntimeError):
    """Raised when a package refuses an item selected by a packer."""
