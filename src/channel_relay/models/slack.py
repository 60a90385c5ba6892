"""Slack Events API payload models.

Slack distinguishes the handshake probe from regular event callbacks by the
fields present, so each shape is its own model and the classifier tries them
in a fixed order (see ``channel_relay.slack.events``).
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr


class Channel(BaseModel):
    """A Slack channel as carried by ``channel_created`` events."""

    model_config = ConfigDict(frozen=True)

    id: StrictStr = Field(min_length=1)
    name: StrictStr = Field(min_length=1)
    created: StrictInt = Field(ge=0)  # Unix seconds, unbounded int
    creator: StrictStr = Field(min_length=1)  # User ID


class UrlVerification(BaseModel):
    """Handshake probe sent when the Events API request URL is configured."""

    model_config = ConfigDict(frozen=True)

    challenge: StrictStr
    token: StrictStr


class ChannelCreatedContent(BaseModel):
    """Inner ``event`` object of a channel_created callback."""

    type: Literal["channel_created"]
    channel: Channel


class EventCallback(BaseModel):
    """Wrapper for regular events. Only channel_created is accepted."""

    token: StrictStr
    event: ChannelCreatedContent


class ChannelCreated(BaseModel):
    """A classified channel_created event."""

    model_config = ConfigDict(frozen=True)

    channel: Channel


SlackEvent = UrlVerification | ChannelCreated


class SlackResponse(BaseModel):
    """Body returned to Slack. ``challenge`` is null for everything but the handshake."""

    challenge: str | None = None
