"""Exceptions raised while reading, encoding or writing key bundles."""


class BundleError(Exception):
    """Base exception for key bundle errors."""

    pass


class ValidationError(BundleError):
    """Raised when a local precondition is violated (bad source or target)."""

    pass


class EncodingError(BundleError):
    """Raised when a filename or file content is not valid text."""

    pass


class DecodeError(BundleError):
    """Raised when a secret payload is not an object of string pairs."""

    pass


class FileSystemError(BundleError):
    """Raised when a local file cannot be listed, read, created or written."""

    def __init__(self, message: str, path=None, written=None):
        super().__init__(message)
        self.path = path
        # files created before the failure, left on disk
        self.written = list(written or [])
