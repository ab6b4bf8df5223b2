"""Key bundle type and filename rules."""

from typing import Dict

# filename -> file content
Bundle = Dict[str, str]

PUBLIC_SUFFIXES = (".pub", ".public")

PUBLIC_MODE = 0o444
PRIVATE_MODE = 0o400


def check_filename(name: str) -> None:
    """
    Ensure a bundle key can be used as a plain filename.

    Raises:
        ValueError: If the name is empty, a dot entry, or contains a separator,
            or is not valid UTF-8 text
    """
    if not name:
        raise ValueError("filename is empty")
    try:
        name.encode("utf-8")
    except UnicodeEncodeError as e:
        raise ValueError(f"{name!r} is not valid utf-8 text") from e
    if name in (".", ".."):
        raise ValueError(f"'{name}' is not a file name")
    if "/" in name or "\0" in name:
        raise ValueError(f"'{name}' contains a path separator")


def file_mode(name: str) -> int:
    """Public keys are world-readable, everything else is owner-read-only."""
    if name.endswith(PUBLIC_SUFFIXES):
        return PUBLIC_MODE
    return PRIVATE_MODE


def sort_bundle(bundle: Bundle) -> Bundle:
    """Return a copy of the bundle ordered by filename."""
    return {name: bundle[name] for name in sorted(bundle)}
