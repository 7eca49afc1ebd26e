"""
InvestSmart exception hierarchy.

All investsmart exceptions inherit from InvestSmartError, making it easy for
consumers to catch library-level errors while still distinguishing specific
failure modes. Calculation routines never raise; they return
``Indeterminate.INDETERMINATE`` instead.
"""


class InvestSmartError(Exception):
    """Base exception class for all investsmart errors."""


class ConfigurationError(InvestSmartError):
    """Raised for configuration errors (missing keys, invalid values)."""


class StorageError(InvestSmartError):
    """Base exception for persistence provider errors."""


class StoragePermissionError(StorageError):
    """Raised when a storage operation is not permitted (unsafe key, denied write)."""


class RecordError(InvestSmartError):
    """Raised when a record cannot be built from the supplied fields."""
