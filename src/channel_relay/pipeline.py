"""Dispatch of Slack webhook requests and relayed channel batches.

Synchronous path (API Gateway):
    fetch signing secret -> verify signature -> classify -> reply or publish

Asynchronous path (SQS):
    decode each record -> forward each channel to the notifier

Any failure on the synchronous path aborts the request with the originating
error, so nothing is published for a request that is later rejected.
"""

import logging
import time
from typing import Callable

from pydantic import BaseModel

from channel_relay.aws.parameters import SecretProvider, SsmParameterStore
from channel_relay.aws.publisher import RelayPublisher, SnsRelayPublisher
from channel_relay.config import Settings, get_settings
from channel_relay.errors import AuthenticationError, ClassificationError, ClassificationKind
from channel_relay.models.aws import SqsEvent
from channel_relay.models.slack import ChannelCreated, SlackEvent, SlackResponse, UrlVerification
from channel_relay.models.verification import InboundRequest
from channel_relay.relay import decode_relay_record
from channel_relay.slack.events import classify
from channel_relay.slack.notifier import ChannelNotifier, SlackWebhookNotifier
from channel_relay.slack.verification import verify

logger = logging.getLogger(__name__)


class DispatchPipeline:
    """Verifies, classifies and acts on one Slack webhook request."""

    def __init__(
        self,
        secret_provider: SecretProvider,
        publisher: RelayPublisher,
        signing_secret_name: str,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self.secret_provider = secret_provider
        self.publisher = publisher
        self.signing_secret_name = signing_secret_name
        self.clock = clock

    def handle_request(self, request: InboundRequest) -> SlackResponse:
        """Authenticate and dispatch a request, returning the reply body for Slack.

        Raises:
            AuthenticationError: The signature or timestamp check failed.
            ClassificationError: The body is not a supported Slack payload.
            DependencyError: The secret could not be read or the publish failed.
        """
        secret = self.secret_provider.get_parameter(self.signing_secret_name)

        outcome = verify(request, secret, int(self.clock()))
        if not outcome.is_valid:
            logger.warning("Slack request rejected: %s", outcome.reason.value)
            raise AuthenticationError(outcome.reason)

        event = classify(request.body)
        return self._act(event)

    def _act(self, event: SlackEvent) -> SlackResponse:
        if isinstance(event, UrlVerification):
            logger.info("Answering url_verification challenge")
            return SlackResponse(challenge=event.challenge)

        if isinstance(event, ChannelCreated):
            channel = event.channel
            logger.info("Channel created: id=%s name=%s", channel.id, channel.name)
            self.publisher.publish(channel.model_dump_json())
            return SlackResponse()

        raise ClassificationError(ClassificationKind.UNRECOGNIZED_SHAPE)


class BatchResult(BaseModel):
    """Per-invocation counts for the SQS path."""

    forwarded: int = 0
    skipped: int = 0


class BatchPipeline:
    """Forwards every decodable channel in an SQS batch.

    Records are processed sequentially. A record that cannot be decoded is
    skipped; a forward failure propagates and fails the whole invocation,
    since SQS has no partial acknowledgement for this event source mapping.
    """

    def __init__(self, notifier: ChannelNotifier) -> None:
        self.notifier = notifier

    def handle_batch(self, event: SqsEvent) -> BatchResult:
        result = BatchResult()
        for record in event.records:
            channel = decode_relay_record(record)
            if channel is None:
                result.skipped += 1
                continue
            logger.info("Forwarding channel: id=%s name=%s", channel.id, channel.name)
            self.notifier.notify(channel)
            result.forwarded += 1

        logger.info(
            "Batch complete: %d forwarded, %d skipped", result.forwarded, result.skipped
        )
        return result


def build_dispatch_pipeline(settings: Settings | None = None) -> DispatchPipeline:
    """Wire the synchronous pipeline to SSM and SNS from settings."""
    settings = settings or get_settings()
    return DispatchPipeline(
        secret_provider=SsmParameterStore(),
        publisher=SnsRelayPublisher(),
        signing_secret_name=settings.signing_secret_parameter,
    )


def build_batch_pipeline(
    settings: Settings | None = None,
    secret_provider: SecretProvider | None = None,
) -> BatchPipeline:
    """Wire the batch pipeline to the Slack webhook whose URL is stored in SSM.

    The webhook URL is read once per call, i.e. once per invocation.
    """
    settings = settings or get_settings()
    secret_provider = secret_provider or SsmParameterStore()
    webhook_url = secret_provider.get_parameter(settings.webhook_url_parameter)
    return BatchPipeline(SlackWebhookNotifier.from_settings(webhook_url, settings))
