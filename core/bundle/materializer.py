"""Materializer - writes a bundle out to a directory as individual files."""

import os
from pathlib import Path
from typing import Dict, List, Union

from core.bundle.exceptions import EncodingError, FileSystemError, ValidationError
from core.bundle.models import Bundle, check_filename, file_mode
from core.bundle.scanner import display_path
from core.utils.logging import get_logger

logger = get_logger(__name__)


def prepare_output_dir(outdir: Union[str, Path]) -> Path:
    """
    Make sure outdir is an empty directory, creating it if missing.

    Raises:
        ValidationError: If outdir exists and is not an empty directory
        FileSystemError: If outdir cannot be inspected or created
    """
    outdir = Path(outdir)
    try:
        if outdir.exists() or outdir.is_symlink():
            if not outdir.is_dir() or any(outdir.iterdir()):
                raise ValidationError(
                    f"Provided outdir {display_path(outdir)} is not an empty directory"
                )
        else:
            outdir.mkdir(parents=True)
            logger.info(f"Created output directory {display_path(outdir)}")
    except OSError as e:
        raise FileSystemError(
            f"{display_path(outdir)}: {e.strerror}", path=outdir
        ) from e
    return outdir


def write_bundle(bundle: Bundle, outdir: Union[str, Path]) -> List[Path]:
    """
    Create one file per bundle entry under outdir.

    Files are created exclusively: an existing file is never overwritten.
    Names ending in .pub or .public get mode 0444, all others 0400. The mode
    is set on the open descriptor so the process umask cannot widen or
    narrow it.

    Not transactional: if a file fails, the files written before it stay.

    Returns:
        Paths of the created files, in filename order

    Raises:
        ValidationError: If a name is not a plain UTF-8 filename
        EncodingError: If a content is not valid UTF-8 text
        FileSystemError: On the first file that cannot be created or written
    """
    outdir = Path(outdir)
    encoded = _encode_entries(bundle)
    created: List[Path] = []

    for name, data in encoded.items():
        path = outdir / name
        mode = file_mode(name)
        try:
            fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_EXCL, mode)
        except OSError as e:
            raise FileSystemError(
                f"{display_path(path)}: {e.strerror}", path=path, written=created
            ) from e

        try:
            with os.fdopen(fd, "wb") as f:
                os.fchmod(f.fileno(), mode)
                f.write(data)
        except OSError as e:
            raise FileSystemError(
                f"{display_path(path)}: {e.strerror}",
                path=path,
                written=created + [path],
            ) from e

        logger.debug(f"Wrote {display_path(path)} with mode {oct(mode)}")
        created.append(path)

    logger.info(f"Wrote {len(created)} files to {display_path(outdir)}")
    return created


def _encode_entries(bundle: Bundle) -> Dict[str, bytes]:
    """Check every name and content before the first file is created."""
    encoded: Dict[str, bytes] = {}
    for name in sorted(bundle):
        try:
            check_filename(name)
        except ValueError as e:
            raise ValidationError(f"Cannot write bundle entry: {e}") from e
        try:
            encoded[name] = bundle[name].encode("utf-8")
        except UnicodeEncodeError as e:
            raise EncodingError(f"Content for '{name}' is not valid utf-8 text") from e
    return encoded
