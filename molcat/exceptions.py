"""
Exceptions and warnings raised by molcat.

Missing or unreadable files are reported with the built-in `FileNotFoundError` / `OSError`.
"""


class MolcatError(Exception):
    """Base exception for all molcat-specific errors."""
    pass


class NotFoundError(MolcatError, LookupError):
    """Raised when a molecule or transition is not present in a loaded catalog."""
    pass


class FormatError(MolcatError, ValueError):
    """Raised when a line of a transitions file cannot be parsed, i.e. the catalog is corrupt."""
    pass


class TruncationWarning(UserWarning):
    """Issued when a transitions file holds more accepted lines than the configured maximum."""
    pass
