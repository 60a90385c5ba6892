"""Exception hierarchy for the relay.

Messages never include the signing secret, computed MACs or raw signatures.
"""

from enum import Enum

from channel_relay.models.verification import VerificationFailure


class ChannelRelayError(Exception):
    """Base exception for channel-relay."""


class AuthenticationError(ChannelRelayError):
    """Request signature verification failed."""

    def __init__(self, reason: VerificationFailure) -> None:
        self.reason = reason
        super().__init__(f"Slack request verification failed: {reason.value}")


class ClassificationKind(str, Enum):
    """Why a payload could not be classified."""

    MALFORMED_JSON = "malformed_json"
    UNRECOGNIZED_SHAPE = "unrecognized_shape"


class ClassificationError(ChannelRelayError):
    """Payload is not one of the supported Slack event shapes."""

    def __init__(self, kind: ClassificationKind, detail: str = "") -> None:
        self.kind = kind
        message = f"Unable to classify Slack payload: {kind.value}"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)


class DependencyError(ChannelRelayError):
    """An external collaborator (SSM, SNS, Slack webhook) failed."""


class SecretNotFoundError(DependencyError):
    """The requested parameter does not exist in the parameter store."""


class ConfigurationError(ChannelRelayError):
    """A required environment value is missing."""
