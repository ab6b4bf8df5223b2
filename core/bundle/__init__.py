"""Key bundle encoding, scanning and materialization."""

from core.bundle.codec import decode, encode
from core.bundle.exceptions import (
    BundleError,
    DecodeError,
    EncodingError,
    FileSystemError,
    ValidationError,
)
from core.bundle.materializer import prepare_output_dir, write_bundle
from core.bundle.models import Bundle, file_mode
from core.bundle.scanner import scan_directory

__all__ = [
    "Bundle",
    "encode",
    "decode",
    "scan_directory",
    "prepare_output_dir",
    "write_bundle",
    "file_mode",
    "BundleError",
    "ValidationError",
    "EncodingError",
    "DecodeError",
    "FileSystemError",
]
