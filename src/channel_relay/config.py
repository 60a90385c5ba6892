"""Application configuration via pydantic-settings."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

from channel_relay.errors import ConfigurationError


class Settings(BaseSettings):
    """Application settings loaded from environment variables and .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # AWS
    aws_region: str = ""
    aws_sns_topic_arn: str = ""
    aws_connect_timeout: float = 3.0
    aws_read_timeout: float = 5.0
    aws_max_attempts: int = 2

    # SSM parameter names
    signing_secret_parameter: str = "/slack-new-channel-notification/signing-secret"
    webhook_url_parameter: str = "/slack-new-channel-notification/slack-webhook-url"

    # Slack notification
    webhook_timeout: int = 10
    notification_username: str = "Slack New Channel"
    notification_icon_emoji: str = ":new_moon_with_face:"
    notification_utc_offset_hours: int = 9

    # App
    log_level: str = "INFO"


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings. Lazy initialization to avoid import-time errors."""
    return Settings()


def require(settings: Settings, field: str) -> str:
    """Return a required string setting, raising ConfigurationError if it is empty.

    The error names the environment variable rather than the value.
    """
    value = getattr(settings, field)
    if not value:
        raise ConfigurationError(f"{field.upper()} is not set")
    return value
