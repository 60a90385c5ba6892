"""boto3 client singletons.

Clients are created on first use with connect/read timeouts and a bounded
retry budget from settings, then cached for the lifetime of the Lambda
execution environment.
"""

import boto3
from botocore.config import Config

from channel_relay.config import get_settings, require

_clients: dict = {}


def get_aws_client(service_name: str):
    """Return a cached boto3 client for ``service_name``.

    Raises ConfigurationError if AWS_REGION is not set.
    """
    client = _clients.get(service_name)
    if client is None:
        settings = get_settings()
        region = require(settings, "aws_region")
        client = boto3.client(
            service_name,
            region_name=region,
            config=Config(
                connect_timeout=settings.aws_connect_timeout,
                read_timeout=settings.aws_read_timeout,
                retries={"total_max_attempts": settings.aws_max_attempts, "mode": "standard"},
            ),
        )
        _clients[service_name] = client
    return client


def get_ssm_client():
    """SSM Parameter Store client."""
    return get_aws_client("ssm")


def get_sns_client():
    """SNS client."""
    return get_aws_client("sns")


def reset_clients() -> None:
    """Reset the cached clients. Used for testing."""
    _clients.clear()
