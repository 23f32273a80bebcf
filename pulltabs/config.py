"""Configuration for Pull Tabs."""

import socket

from pydantic import BaseModel, ConfigDict, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class NotifierConfig(BaseModel):
    """Process-wide notifier configuration, fixed after startup."""

    model_config = ConfigDict(frozen=True)

    label: str = "awaiting review"
    message: str = "A Pull Request requires review"
    # Empty secret disables signature verification.
    secret: str = ""
    slack_url: str = ""
    instance_id: str = Field(default_factory=socket.gethostname)
    delivery_timeout: float = 10.0

    @property
    def verification_enabled(self) -> bool:
        return bool(self.secret)


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # App
    environment: str = "development"
    debug: bool = False
    host: str = "0.0.0.0"
    port: int = 8080
    instance_id: str = Field(default_factory=socket.gethostname)

    # Notifier
    watched_label: str = "awaiting review"
    alert_message: str = "A Pull Request requires review"
    github_webhook_secret: str = ""

    # Slack incoming webhook
    slack_webhook_url: str = ""
    delivery_timeout: float = 10.0

    def to_notifier_config(self) -> NotifierConfig:
        """Build the immutable notifier configuration."""
        return NotifierConfig(
            label=self.watched_label,
            message=self.alert_message,
            secret=self.github_webhook_secret,
            slack_url=self.slack_webhook_url,
            instance_id=self.instance_id,
            delivery_timeout=self.delivery_timeout,
        )
