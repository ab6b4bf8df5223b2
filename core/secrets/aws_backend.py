"""AWS Secrets Manager backend."""

import logging
from typing import Optional

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from core.secrets.base import SecretStore
from core.secrets.exceptions import SecretNotFoundError, StoreError
from core.secrets.registry import register_backend

logger = logging.getLogger(__name__)

DEFAULT_REGION = "us-east-1"


@register_backend("aws")
class AwsSecretStore(SecretStore):
    """
    Stores the payload as the SecretString of an AWS Secrets Manager secret.

    The boto3 client is created on first use so that building the store
    never touches credentials or the network.

    Usage:
        store = AwsSecretStore(profile="work", region="us-east-1")
        payload = store.fetch("ssh-keys")
    """

    def __init__(
        self,
        profile: Optional[str] = None,
        region: Optional[str] = DEFAULT_REGION,
        client=None,
    ):
        """
        Args:
            profile: AWS profile name (from ~/.aws/config); None for the default chain
            region: AWS region of the secret
            client: Pre-built secretsmanager client, mainly for tests
        """
        self.profile = profile
        self.region = region
        self._client = client

    @property
    def client(self):
        if self._client is None:
            try:
                session = boto3.Session(
                    profile_name=self.profile, region_name=self.region
                )
                self._client = session.client("secretsmanager")
            except BotoCoreError as e:
                raise StoreError(f"Failed to create AWS session: {e}") from e
            logger.debug(
                f"Created secretsmanager client (profile={self.profile}, region={self.region})"
            )
        return self._client

    def fetch(self, secret_id: str) -> str:
        """
        Get the SecretString of a secret.

        Raises:
            SecretNotFoundError: If the secret is missing or has no SecretString
            StoreError: On any other AWS failure
        """
        try:
            response = self.client.get_secret_value(SecretId=secret_id)
        except ClientError as e:
            if _error_code(e) == "ResourceNotFoundException":
                raise SecretNotFoundError(f"Secret '{secret_id}' not found") from e
            raise StoreError(f"Failed to get secret '{secret_id}': {e}") from e
        except BotoCoreError as e:
            raise StoreError(f"Failed to get secret '{secret_id}': {e}") from e

        payload = response.get("SecretString")
        if payload is None:
            raise SecretNotFoundError(
                f"Expected SecretString for '{secret_id}' but did not get one"
            )

        logger.info(f"Fetched secret '{secret_id}' (version {response.get('VersionId')})")
        return payload

    def replace(self, secret_id: str, payload: str, token: str) -> Optional[str]:
        """
        Put a new SecretString version, keyed by the request token.

        Raises:
            StoreError: On any AWS failure, including a missing secret
        """
        try:
            response = self.client.put_secret_value(
                SecretId=secret_id,
                SecretString=payload,
                ClientRequestToken=token,
            )
        except ClientError as e:
            if _error_code(e) == "ResourceNotFoundException":
                raise SecretNotFoundError(f"Secret '{secret_id}' not found") from e
            raise StoreError(f"Failed to put secret '{secret_id}': {e}") from e
        except BotoCoreError as e:
            raise StoreError(f"Failed to put secret '{secret_id}': {e}") from e

        version = response.get("VersionId")
        logger.info(f"Stored secret '{secret_id}' version {version}")
        return version

    def health_check(self) -> bool:
        """Check that credentials work by listing at most one secret."""
        try:
            self.client.list_secrets(MaxResults=1)
            return True
        except (StoreError, ClientError, BotoCoreError) as e:
            logger.warning(f"AWS health check failed: {e}")
            return False


def _error_code(error: ClientError) -> str:
    return error.response.get("Error", {}).get("Code", "")
