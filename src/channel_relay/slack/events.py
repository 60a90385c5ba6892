"""Classification of verified Slack Events API payloads.

Slack does not put a single discriminant at the top level of every payload,
so the shapes are tried in a fixed order and the first that validates wins:

1. url_verification: ``challenge`` + ``token``
2. event callback: ``token`` + ``event`` whose ``type`` selects the variant

A payload carrying both a challenge and an event is therefore treated as a
handshake. Anything else, including unknown event types, is rejected.
"""

import json
import logging

from pydantic import BaseModel, ValidationError

from channel_relay.errors import ClassificationError, ClassificationKind
from channel_relay.models.slack import (
    ChannelCreated,
    EventCallback,
    SlackEvent,
    UrlVerification,
)

logger = logging.getLogger(__name__)


def classify(body: str | bytes) -> SlackEvent:
    """Decode a raw request body into a SlackEvent.

    Raises:
        ClassificationError: MALFORMED_JSON if the body is not a JSON object,
            UNRECOGNIZED_SHAPE if it matches none of the supported shapes.
    """
    try:
        payload = json.loads(body)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise ClassificationError(ClassificationKind.MALFORMED_JSON, exc.__class__.__name__) from exc

    if not isinstance(payload, dict):
        raise ClassificationError(ClassificationKind.MALFORMED_JSON, "expected a JSON object")

    handshake = _try_validate(UrlVerification, payload)
    if handshake is not None:
        return handshake

    callback = _try_validate(EventCallback, payload)
    if callback is not None:
        return ChannelCreated(channel=callback.event.channel)

    event = payload.get("event")
    event_type = event.get("type") if isinstance(event, dict) else None
    logger.warning("Unrecognized Slack payload (type=%s, event.type=%s)", payload.get("type"), event_type)
    raise ClassificationError(ClassificationKind.UNRECOGNIZED_SHAPE)


def _try_validate(model: type[BaseModel], payload: dict) -> BaseModel | None:
    try:
        return model.model_validate(payload)
    except ValidationError:
        return None
