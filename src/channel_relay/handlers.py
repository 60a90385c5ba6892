"""AWS Lambda entry points.

``slack_events_handler`` sits behind an API Gateway proxy integration and
receives Slack Events API requests. ``channel_notification_handler`` consumes
the SQS queue subscribed to the relay topic.

Errors are re-raised so Lambda reports a failed invocation: API Gateway then
answers with a 5xx, and SQS redelivers the batch.
"""

import binascii
import logging

from channel_relay.config import get_settings
from channel_relay.errors import ClassificationError, ClassificationKind
from channel_relay.logging_config import configure_logging
from channel_relay.models.aws import ApiGatewayEvent, ApiGatewayResponse, SqsEvent
from channel_relay.models.verification import InboundRequest
from channel_relay.pipeline import build_batch_pipeline, build_dispatch_pipeline

logger = logging.getLogger(__name__)

_logging_configured = False


def _setup() -> None:
    """Configure logging once per execution environment."""
    global _logging_configured
    if not _logging_configured:
        configure_logging(get_settings().log_level)
        _logging_configured = True


def _inbound_request(event: ApiGatewayEvent) -> InboundRequest:
    try:
        return event.to_inbound_request()
    except (binascii.Error, UnicodeDecodeError) as exc:
        raise ClassificationError(ClassificationKind.MALFORMED_JSON, "undecodable proxy body") from exc


def slack_events_handler(event: dict, context) -> dict:
    """Handle one API Gateway proxy request carrying a Slack event."""
    _setup()
    request = _inbound_request(ApiGatewayEvent.model_validate(event))
    response = build_dispatch_pipeline().handle_request(request)
    return ApiGatewayResponse(
        status_code=200,
        headers={"Content-Type": "application/json"},
        body=response.model_dump_json(),
    ).to_dict()


def channel_notification_handler(event: dict, context) -> dict:
    """Handle one SQS batch of relayed channel_created events."""
    _setup()
    batch = SqsEvent.model_validate(event)
    logger.info("Received SQS batch of %d record(s)", len(batch.records))
    build_batch_pipeline().handle_batch(batch)
    return {}
