"""Abstract base class for secret stores."""

from abc import ABC, abstractmethod
from typing import Optional


class SecretStore(ABC):
    """
    Abstract base class that all secret store backends must implement.

    A store holds exactly one opaque text payload per secret id. It knows
    nothing about the files inside the payload.
    """

    @abstractmethod
    def fetch(self, secret_id: str) -> str:
        """
        Retrieve the current payload of a secret.

        Args:
            secret_id: Identifier of the secret

        Returns:
            The secret payload as text

        Raises:
            SecretNotFoundError: If the secret doesn't exist or has no content
            StoreError: If the backend fails
        """
        pass

    @abstractmethod
    def replace(self, secret_id: str, payload: str, token: str) -> Optional[str]:
        """
        Overwrite the secret with a new payload.

        Args:
            secret_id: Identifier of the secret
            payload: New payload, replacing the old one entirely
            token: Idempotency token for this write

        Returns:
            Version id of the stored payload, if the store reports one

        Raises:
            StoreError: If the backend fails
        """
        pass

    @abstractmethod
    def health_check(self) -> bool:
        """
        Check if backend is accessible.

        Returns:
            True if healthy, False otherwise
        """
        pass
