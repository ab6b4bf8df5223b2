"""Backend registry with decorator pattern."""

from core.secrets.exceptions import StoreError

BACKENDS = {}


def register_backend(name: str):
    """
    Decorator to register a backend class.

    Usage:
        @register_backend("aws")
        class AwsSecretStore(SecretStore):
            ...
    """

    def decorator(cls):
        BACKENDS[name] = cls
        return cls

    return decorator


def get_backend(name: str):
    """
    Get backend class by name.

    Args:
        name: Backend identifier (aws, file)

    Returns:
        Backend class (not instance)

    Raises:
        KeyError: If backend not registered
    """
    if name not in BACKENDS:
        available = ", ".join(sorted(BACKENDS)) or "none"
        raise KeyError(f"Unknown backend: '{name}'. Available: {available}")
    return BACKENDS[name]


def create_backend(name: str, **config):
    """
    Instantiate a registered backend.

    Raises:
        StoreError: If the backend is unknown or its config is invalid
    """
    try:
        backend_cls = get_backend(name)
    except KeyError as e:
        raise StoreError(e.args[0]) from e
    try:
        return backend_cls(**config)
    except TypeError as e:
        # Missing or unexpected argument (e.g., file backend needs path)
        raise StoreError(f"Backend '{name}' config error: {e}") from e
