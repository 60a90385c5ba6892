"""Decoding of channel events relayed through SNS and SQS.

Each SQS record body is an SNS notification serialized as JSON, and its
``Message`` field is the channel serialized as JSON again. Both layers are
unwrapped here so callers only ever see a typed Channel.
"""

import logging
from typing import TypeVar

from pydantic import BaseModel, ValidationError

from channel_relay.models.aws import SnsNotification, SqsRecord
from channel_relay.models.slack import Channel

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


def decode_json_string(text: str, model: type[ModelT]) -> ModelT:
    """Parse a JSON document held in a string into ``model``.

    Raises:
        ValueError: If ``text`` is not JSON or does not match ``model``.
            ``pydantic.ValidationError`` is a ValueError subclass.
    """
    return model.model_validate_json(text)


def decode_relay_record(record: SqsRecord) -> Channel | None:
    """Unwrap one SQS record into a Channel, or None if it cannot be decoded.

    Undecodable records are logged and skipped rather than failing the batch.
    """
    if record.body is None:
        logger.warning("Skipping SQS record %s: empty body", record.message_id)
        return None

    try:
        notification = decode_json_string(record.body, SnsNotification)
        return decode_json_string(notification.message, Channel)
    except ValidationError as exc:
        logger.warning(
            "Skipping SQS record %s: %d decode error(s), first at %s",
            record.message_id,
            exc.error_count(),
            ".".join(str(part) for part in exc.errors()[0]["loc"]) or "<root>",
        )
        return None
