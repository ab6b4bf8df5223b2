"""File-based secret store."""

import json
import logging
import os
from pathlib import Path
from typing import Optional

from core.secrets.base import SecretStore
from core.secrets.exceptions import SecretNotFoundError, StoreError
from core.secrets.registry import register_backend

logger = logging.getLogger(__name__)


@register_backend("file")
class FileSecretStore(SecretStore):
    """
    Keeps secrets in a local JSON file, one entry per secret id.

    File format:
        {
            "ssh-keys": {
                "SecretString": "{\\n  \\"id_rsa\\": \\"...\\"\\n}",
                "VersionId": "3f0c..."
            }
        }

    As with Secrets Manager, the version id of a write is its request token.
    Replaying a token with the same payload is a no-op; replaying it with a
    different payload is rejected.
    """

    def __init__(self, path: str):
        """
        Args:
            path: Path to the JSON store file (created on first write)
        """
        self.file_path = Path(path).expanduser()

    def _load(self) -> dict:
        """Load all secrets from file; a missing file is an empty store."""
        if not self.file_path.exists():
            return {}

        try:
            with open(self.file_path) as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise StoreError(f"Invalid JSON in {self.file_path}: {e}") from e
        except OSError as e:
            raise StoreError(f"Failed to read {self.file_path}: {e}") from e

        if not isinstance(data, dict):
            raise StoreError(f"Invalid store format in {self.file_path}")
        for secret_id, entry in data.items():
            if not isinstance(entry, dict):
                raise StoreError(
                    f"Invalid entry for '{secret_id}' in {self.file_path}: expected an object"
                )
        return data

    def _save(self, data: dict) -> None:
        """Write the store through a temp file so readers never see half of it."""
        tmp_path = self.file_path.with_name(self.file_path.name + ".tmp")
        try:
            self.file_path.parent.mkdir(parents=True, exist_ok=True)
            fd = os.open(tmp_path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o600)
            with os.fdopen(fd, "w") as f:
                json.dump(data, f, indent=2, sort_keys=True)
            os.replace(tmp_path, self.file_path)
        except OSError as e:
            raise StoreError(f"Failed to write {self.file_path}: {e}") from e

    def fetch(self, secret_id: str) -> str:
        """
        Get the payload stored under secret_id.

        Raises:
            SecretNotFoundError: If the id is not in the file or has no payload
            StoreError: If the file cannot be read or parsed
        """
        secrets = self._load()
        if secret_id not in secrets:
            raise SecretNotFoundError(
                f"Secret '{secret_id}' not found in {self.file_path}"
            )

        payload = secrets[secret_id].get("SecretString")
        if payload is None:
            raise SecretNotFoundError(
                f"Expected SecretString for '{secret_id}' but did not get one"
            )
        return payload

    def replace(self, secret_id: str, payload: str, token: str) -> Optional[str]:
        """
        Store payload under secret_id, replacing any previous value.

        Raises:
            StoreError: If the token was already used for a different payload
        """
        secrets = self._load()
        current = secrets.get(secret_id, {})

        if current.get("VersionId") == token:
            if current.get("SecretString") != payload:
                raise StoreError(
                    f"Token {token} was already used for a different payload of '{secret_id}'"
                )
            logger.info(f"Secret '{secret_id}' already at version {token}")
            return token

        secrets[secret_id] = {"SecretString": payload, "VersionId": token}
        self._save(secrets)
        logger.info(f"Stored secret '{secret_id}' version {token} in {self.file_path}")
        return token

    def health_check(self) -> bool:
        """Check that the store file, or its parent directory, is present."""
        if self.file_path.exists():
            return self.file_path.is_file()
        return self.file_path.parent.is_dir()
