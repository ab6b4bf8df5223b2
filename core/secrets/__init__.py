"""Secret store backends."""

# Import backends to trigger registration
from core.secrets import aws_backend, file_backend  # noqa: F401

# Public API
from core.secrets.base import SecretStore
from core.secrets.exceptions import SecretNotFoundError, StoreError
from core.secrets.registry import create_backend, get_backend, register_backend

__all__ = [
    "SecretStore",
    "SecretNotFoundError",
    "StoreError",
    "create_backend",
    "get_backend",
    "register_backend",
]
