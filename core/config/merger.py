"""Deep merge logic for layered settings."""

from typing import Optional


def deep_merge(base: dict, override: Optional[dict]) -> dict:
    """
    Deep merge two dictionaries. Override wins on conflicts.

    None values in override are skipped, so unset command-line options
    leave the lower layers alone.

    Example:
        base = {"aws": {"profile": "default", "region": "us-east-1"}}
        override = {"aws": {"profile": "work", "region": None}}
        result = {"aws": {"profile": "work", "region": "us-east-1"}}
    """
    result = base.copy()

    for key, value in (override or {}).items():
        if value is None:
            continue
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = value

    return result
