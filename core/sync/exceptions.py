"""Control-flow exceptions for sync operations."""


class UserDecline(Exception):
    """Raised when the operator declines to overwrite the remote secret.

    Not an error: callers treat it as a successful early exit.
    """

    pass
