"""
Configuration settings for the order notifier
"""

from functools import lru_cache
from typing import Any, Mapping, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    """Application level settings"""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False, extra="ignore")

    database_url: str = Field(default="sqlite:///./orders.db")
    event_config_path: str = Field(default="event_config.yaml")
    log_level: str = Field(default="INFO")


@lru_cache()
def get_app_settings() -> AppSettings:
    """Get cached application settings instance"""
    return AppSettings()


class SlackNotificationSettings(BaseSettings):
    """Settings of the Slack notification plugin.

    Values usually come from the ``plugins.slack_notification`` section of the
    event configuration file. Environment variables prefixed with
    ``SLACK_NOTIFICATIONS_`` take precedence over the file.
    """

    model_config = SettingsConfigDict(
        env_prefix="SLACK_NOTIFICATIONS_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    webhook_url: str = Field(default="")
    timeout_seconds: float = Field(default=5.0, gt=0)
    notify_on_order_created: bool = Field(default=False)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls,
        init_settings,
        env_settings,
        dotenv_settings,
        file_secret_settings,
    ):
        # Environment wins over values read from the YAML file
        return env_settings, dotenv_settings, init_settings, file_secret_settings

    @property
    def enabled(self) -> bool:
        return bool(self.webhook_url.strip())


def load_slack_settings(file_values: Optional[Mapping[str, Any]] = None) -> SlackNotificationSettings:
    """Build the Slack settings from config file values plus environment overrides."""
    values = {key: value for key, value in (file_values or {}).items() if value is not None}
    return SlackNotificationSettings(**values)
