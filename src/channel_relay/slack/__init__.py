"""Slack ingress: signature verification, event classification, routing, and webhook notifications."""

from channel_relay.slack.events import classify
from channel_relay.slack.notifier import (
    ChannelNotifier,
    SlackWebhookNotifier,
    format_channel_message,
)
from channel_relay.slack.verification import verify

__all__ = [
    "ChannelNotifier",
    "SlackWebhookNotifier",
    "classify",
    "format_channel_message",
    "verify",
]
