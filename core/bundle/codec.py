"""Key bundle codec - converts a bundle to and from a secret payload."""

import json

from core.bundle.exceptions import DecodeError
from core.bundle.models import Bundle, check_filename, sort_bundle


def encode(bundle: Bundle) -> str:
    """
    Serialize a bundle as pretty-printed JSON.

    Keys are sorted so the same bundle always yields the same payload.

    Example:
        encode({"id_rsa.pub": "ssh-rsa AAA", "id_rsa": "-----BEGIN..."})
        ->
        {
          "id_rsa": "-----BEGIN...",
          "id_rsa.pub": "ssh-rsa AAA"
        }
    """
    return json.dumps(bundle, indent=2, sort_keys=True, ensure_ascii=False)


def decode(text: str) -> Bundle:
    """
    Parse a secret payload into a bundle.

    Any valid JSON encoding of an object of string pairs is accepted.

    Raises:
        DecodeError: If the payload is not JSON, not an object, holds a
            non-string or non-UTF-8 value, or names a file that cannot be
            materialized
    """
    try:
        data = json.loads(text)
    except (json.JSONDecodeError, TypeError) as e:
        raise DecodeError(f"Secret payload is not valid JSON: {e}") from e

    if not isinstance(data, dict):
        raise DecodeError(
            f"Secret payload must be a JSON object, got {type(data).__name__}"
        )

    for name, content in data.items():
        try:
            check_filename(name)
        except ValueError as e:
            raise DecodeError(f"Secret payload has an invalid filename: {e}") from e
        if not isinstance(content, str):
            raise DecodeError(
                f"Value for '{name}' must be a string, got {type(content).__name__}"
            )
        try:
            content.encode("utf-8")
        except UnicodeEncodeError as e:
            raise DecodeError(f"Value for '{name}' is not valid utf-8 text") from e

    return sort_bundle(data)
