"""Slack incoming-webhook notification for newly created channels.

Unlike a fire-and-forget notifier, failures here raise DependencyError: the
SQS batch must fail so the queue redelivers it.
"""

import logging
from datetime import datetime, timedelta, timezone
from typing import Protocol

from slack_sdk.webhook import WebhookClient

from channel_relay.config import Settings
from channel_relay.errors import DependencyError
from channel_relay.models.slack import Channel

logger = logging.getLogger(__name__)


class ChannelNotifier(Protocol):
    """Forwards one channel to its downstream destination."""

    def notify(self, channel: Channel) -> None: ...


def format_channel_message(channel: Channel, utc_offset_hours: int = 9) -> str:
    """Build the message text: a channel link followed by its creation time.

    Example: ``<#C1|general>, at 2023-11-15 07:13:20+09:00``
    """
    tz = timezone(timedelta(hours=utc_offset_hours))
    try:
        created = datetime.fromtimestamp(channel.created, tz=tz).isoformat(sep=" ")
    except (OverflowError, OSError, ValueError):
        created = str(channel.created)
    return f"<#{channel.id}|{channel.name}>, at {created}"


class SlackWebhookNotifier:
    """ChannelNotifier posting to a Slack incoming webhook."""

    def __init__(
        self,
        webhook_url: str,
        *,
        username: str = "Slack New Channel",
        icon_emoji: str = ":new_moon_with_face:",
        utc_offset_hours: int = 9,
        timeout: int = 10,
        client: WebhookClient | None = None,
    ) -> None:
        self.username = username
        self.icon_emoji = icon_emoji
        self.utc_offset_hours = utc_offset_hours
        self._client = client or WebhookClient(url=webhook_url, timeout=timeout)

    @classmethod
    def from_settings(cls, webhook_url: str, settings: Settings) -> "SlackWebhookNotifier":
        return cls(
            webhook_url,
            username=settings.notification_username,
            icon_emoji=settings.notification_icon_emoji,
            utc_offset_hours=settings.notification_utc_offset_hours,
            timeout=settings.webhook_timeout,
        )

    def notify(self, channel: Channel) -> None:
        """Post the channel notification.

        Raises:
            DependencyError: Transport failure or a non-200 webhook response.
        """
        payload = {
            "text": format_channel_message(channel, self.utc_offset_hours),
            "username": self.username,
            "icon_emoji": self.icon_emoji,
        }
        try:
            response = self._client.send_dict(payload)
        except OSError as exc:
            logger.error("Slack webhook transport error for channel %s: %s", channel.id, exc)
            raise DependencyError("Slack webhook request failed") from exc

        if response.status_code != 200:
            logger.error(
                "Slack webhook rejected channel %s: %s %s",
                channel.id,
                response.status_code,
                response.body,
            )
            raise DependencyError(f"Slack webhook returned {response.status_code}")
