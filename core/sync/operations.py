"""Get and Put operations - move key bundles between disk and the store."""

import uuid
from pathlib import Path
from typing import Callable, List, Optional, Union

from core.bundle import codec
from core.bundle.materializer import prepare_output_dir, write_bundle
from core.bundle.scanner import display_path, scan_directory
from core.secrets.base import SecretStore
from core.sync.confirm import ConfirmationGate
from core.sync.exceptions import UserDecline
from core.utils.decorators import log_time
from core.utils.logging import get_logger

logger = get_logger(__name__)

DEFAULT_SECRET_ID = "ssh-keys"


def new_token() -> str:
    """Fresh idempotency token for one replace request."""
    return str(uuid.uuid4())


class KeySync:
    """
    Synchronizes a directory of SSH keys with one secret.

    Usage:
        sync = KeySync(store, ConfirmationGate(Console()), secret_id="ssh-keys")
        sync.get("restored-keys")
        version = sync.put("keys")
    """

    def __init__(
        self,
        store: SecretStore,
        gate: ConfirmationGate,
        secret_id: str = DEFAULT_SECRET_ID,
        token_factory: Callable[[], str] = new_token,
    ):
        self.store = store
        self.secret_id = secret_id
        self.gate = gate
        self.token_factory = token_factory

    @log_time
    def get(self, outdir: Union[str, Path]) -> List[Path]:
        """
        Materialize the secret into outdir.

        outdir is checked (or created) before the store is contacted. If a
        file fails to write, the files created before it are left on disk.

        Returns:
            Paths of the created files

        Raises:
            ValidationError: If outdir exists and is not an empty directory
            StoreError: If the secret cannot be fetched
            DecodeError: If the payload is not an object of string pairs
            FileSystemError: If a file cannot be created or written
        """
        outdir = prepare_output_dir(outdir)

        payload = self.store.fetch(self.secret_id)
        bundle = codec.decode(payload)
        logger.info(f"Secret '{self.secret_id}' holds {len(bundle)} files")

        return write_bundle(bundle, outdir)

    @log_time
    def put(self, indir: Union[str, Path]) -> Optional[str]:
        """
        Replace the secret with the files in indir, after confirmation.

        Returns:
            Version id reported by the store

        Raises:
            ValidationError: If indir is not a directory
            EncodingError: If a filename or file is not valid UTF-8
            UserDecline: If the operator answers no
            StoreError: If the store rejects the write
        """
        bundle = scan_directory(indir)

        if not self.gate.confirm(bundle.keys()):
            logger.info(f"Operator declined to overwrite '{self.secret_id}'")
            raise UserDecline(f"Declined to overwrite {self.secret_id}")

        payload = codec.encode(bundle)
        token = self.token_factory()
        logger.debug(
            f"Replacing '{self.secret_id}' with {len(bundle)} files from "
            f"{display_path(indir)} (token {token})"
        )

        return self.store.replace(self.secret_id, payload, token)
