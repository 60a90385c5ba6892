"""AWS collaborators: SSM parameter store and SNS relay target."""

from channel_relay.aws.clients import get_aws_client, reset_clients
from channel_relay.aws.parameters import SecretProvider, SsmParameterStore
from channel_relay.aws.publisher import RelayPublisher, SnsRelayPublisher

__all__ = [
    "RelayPublisher",
    "SecretProvider",
    "SnsRelayPublisher",
    "SsmParameterStore",
    "get_aws_client",
    "reset_clients",
]
