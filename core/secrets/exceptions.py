"""Custom exceptions for secret stores."""


class StoreError(Exception):
    """Raised when the secret store fails (auth, transport, bad config)."""

    pass


class SecretNotFoundError(StoreError):
    """Raised when a secret does not exist or has no content."""

    pass
