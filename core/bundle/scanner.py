"""Directory scanner - reads a directory of key files into a bundle."""

import os
from pathlib import Path
from typing import Union

from core.bundle.exceptions import EncodingError, FileSystemError, ValidationError
from core.bundle.models import Bundle, sort_bundle
from core.utils.logging import get_logger

logger = get_logger(__name__)


def display_path(path: Union[str, Path]) -> str:
    """Render a path for messages, escaping bytes that are not valid UTF-8."""
    return str(path).encode("utf-8", "backslashreplace").decode("utf-8")


def scan_directory(indir: Union[str, Path]) -> Bundle:
    """
    Read every regular file directly under a directory.

    Subdirectories, symlinks and other special files are skipped. The scan
    stops at the first file that cannot be read as UTF-8 text, so callers
    never see a partial bundle.

    Args:
        indir: Directory containing the key files

    Returns:
        Bundle ordered by filename

    Raises:
        ValidationError: If indir is not a directory
        EncodingError: If a filename or file content is not valid UTF-8
        FileSystemError: If the directory or a file cannot be read
    """
    indir = Path(indir)
    if not indir.is_dir():
        raise ValidationError(
            f"Provided indir {display_path(indir)} is not a directory"
        )

    bundle: Bundle = {}
    try:
        with os.scandir(indir) as entries:
            for entry in entries:
                if not entry.is_file(follow_symlinks=False):
                    logger.debug(f"Skipping non-regular entry: {display_path(entry.path)}")
                    continue
                name = _entry_name(entry)
                bundle[name] = _read_text(entry.path)
    except OSError as e:
        raise FileSystemError(
            f"Failed to read {display_path(e.filename or indir)}: {e.strerror}",
            path=e.filename or indir,
        ) from e

    logger.info(f"Read {len(bundle)} files from {display_path(indir)}")
    return sort_bundle(bundle)


def _entry_name(entry: os.DirEntry) -> str:
    """Return the entry's filename, rejecting names that are not UTF-8."""
    try:
        entry.name.encode("utf-8")
    except UnicodeEncodeError as e:
        raise EncodingError(
            f"File {display_path(entry.path)} contains invalid utf-8 in its filename"
        ) from e
    return entry.name


def _read_text(path: str) -> str:
    with open(path, "rb") as f:
        data = f.read()
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as e:
        raise EncodingError(
            f"File {display_path(path)} does not contain valid utf-8 text"
        ) from e
