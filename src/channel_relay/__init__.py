"""Slack webhook authentication and channel event relay."""

__version__ = "0.1.0"
