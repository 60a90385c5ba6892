"""Shared secret retrieval from SSM Parameter Store."""

import logging
from typing import Protocol

from botocore.exceptions import BotoCoreError, ClientError

from channel_relay.aws.clients import get_ssm_client
from channel_relay.errors import DependencyError, SecretNotFoundError

logger = logging.getLogger(__name__)


class SecretProvider(Protocol):
    """Reads a named secret value."""

    def get_parameter(self, name: str) -> str: ...


class SsmParameterStore:
    """SecretProvider backed by SSM SecureString parameters.

    The decrypted value is returned to the caller and never logged.
    """

    def __init__(self, client=None) -> None:
        self._client = client

    @property
    def client(self):
        if self._client is None:
            self._client = get_ssm_client()
        return self._client

    def get_parameter(self, name: str) -> str:
        """Fetch and decrypt parameter ``name``.

        Raises:
            SecretNotFoundError: The parameter does not exist.
            DependencyError: Any other SSM or transport failure.
        """
        try:
            response = self.client.get_parameter(Name=name, WithDecryption=True)
        except ClientError as exc:
            code = exc.response.get("Error", {}).get("Code", "")
            if code == "ParameterNotFound":
                raise SecretNotFoundError(f"SSM parameter not found: {name}") from exc
            logger.error("SSM GetParameter failed for %s: %s", name, code)
            raise DependencyError(f"SSM GetParameter failed for {name}: {code}") from exc
        except BotoCoreError as exc:
            logger.error("SSM GetParameter transport error for %s: %s", name, type(exc).__name__)
            raise DependencyError(f"SSM GetParameter failed for {name}") from exc

        value = response.get("Parameter", {}).get("Value")
        if value is None:
            raise DependencyError(f"SSM parameter {name} has no value")
        return value
