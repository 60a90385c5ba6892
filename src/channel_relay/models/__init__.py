"""Data models for the channel relay."""

from channel_relay.models.aws import (
    ApiGatewayEvent,
    ApiGatewayResponse,
    SnsNotification,
    SqsEvent,
    SqsRecord,
)
from channel_relay.models.slack import (
    Channel,
    ChannelCreated,
    EventCallback,
    SlackEvent,
    SlackResponse,
    UrlVerification,
)
from channel_relay.models.verification import (
    InboundRequest,
    VerificationFailure,
    VerificationOutcome,
)

__all__ = [
    "ApiGatewayEvent",
    "ApiGatewayResponse",
    "SnsNotification",
    "SqsEvent",
    "SqsRecord",
    "Channel",
    "ChannelCreated",
    "EventCallback",
    "SlackEvent",
    "SlackResponse",
    "UrlVerification",
    "InboundRequest",
    "VerificationFailure",
    "VerificationOutcome",
]
