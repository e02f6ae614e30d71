"""
Custom exceptions for the colview.io module.

Purpose
- Provide IO-layer error types distinct from core frame errors (see colview.core.errors).

Boundaries
- colview.core raises FrameError subclasses for view/selection failures.
- colview.io raises Io* errors for storage-adapter concerns:
  - IoConfigError: invalid configuration values.
  - IoSchemaError: a column dtype has no ColumnType tag under strict typing.
  - IoReadError: a file is missing or has an unsupported format.
"""

from __future__ import annotations


class IoError(Exception):
    """
    Base class for IO-related errors in colview.io.

    Notes:
        Use this as a catch-all for IO-layer failures, distinct from colview.core errors.
    """


class IoConfigError(IoError):
    """
    Raised when IO configuration is invalid.

    Examples:
        - infer_schema_length < 1
        - csv_separator that is not a single character
    """


class IoSchemaError(IoError):
    """Raised when a column's dtype cannot be classified and strict typing is enabled."""


class IoReadError(IoError):
    """Raised when a table file cannot be found or its format is not supported."""
