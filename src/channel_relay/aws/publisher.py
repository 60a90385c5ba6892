"""Publishing of relayed events to the SNS forwarding topic."""

import logging
from typing import Protocol

from botocore.exceptions import BotoCoreError, ClientError

from channel_relay.aws.clients import get_sns_client
from channel_relay.config import get_settings, require
from channel_relay.errors import DependencyError

logger = logging.getLogger(__name__)


class RelayPublisher(Protocol):
    """Hands a serialized event to the relay target."""

    def publish(self, message: str) -> None: ...


class SnsRelayPublisher:
    """RelayPublisher that publishes to a single SNS topic."""

    def __init__(self, topic_arn: str | None = None, client=None) -> None:
        self._topic_arn = topic_arn
        self._client = client

    @property
    def topic_arn(self) -> str:
        """Configured topic, read from AWS_SNS_TOPIC_ARN on first use if not given."""
        if self._topic_arn is None:
            self._topic_arn = require(get_settings(), "aws_sns_topic_arn")
        return self._topic_arn

    @property
    def client(self):
        if self._client is None:
            self._client = get_sns_client()
        return self._client

    def publish(self, message: str) -> None:
        """Publish ``message`` once. Raises DependencyError on any failure."""
        try:
            response = self.client.publish(TopicArn=self.topic_arn, Message=message)
        except ClientError as exc:
            code = exc.response.get("Error", {}).get("Code", "")
            logger.error("SNS Publish to %s failed: %s", self.topic_arn, code)
            raise DependencyError(f"SNS Publish failed: {code}") from exc
        except BotoCoreError as exc:
            logger.error("SNS Publish to %s transport error: %s", self.topic_arn, type(exc).__name__)
            raise DependencyError("SNS Publish failed") from exc

        logger.info("Published to %s (MessageId=%s)", self.topic_arn, response.get("MessageId"))
