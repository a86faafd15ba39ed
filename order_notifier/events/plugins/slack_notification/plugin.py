"""Slack notification plugin implementation."""

from __future__ import annotations

import logging
from typing import Dict, List, Optional

from order_notifier.core.settings import SlackNotificationSettings, load_slack_settings
from order_notifier.events.config import EventConfig, EventConfigLoader
from order_notifier.events.interfaces import BaseEventHandler, EventHandlerPlugin
from order_notifier.events.plugins.slack_notification.handlers import (
    SettingsProvider,
    SlackOrderCreatedHandler,
    SlackOrderStatusHandler,
)
from order_notifier.events.plugins.slack_notification.webhook_client import SlackWebhookClient
from order_notifier.repository.interfaces import IOrderSnapshotReader

logger = logging.getLogger(__name__)


class SlackNotificationPlugin(EventHandlerPlugin):
    """Posts order status changes (and optionally new orders) to Slack."""

    config_key = "slack_notification"

    def __init__(
        self,
        *,
        snapshot_reader: IOrderSnapshotReader,
        settings_provider: SettingsProvider,
        client: Optional[SlackWebhookClient] = None,
    ) -> None:
        super().__init__()
        self._settings_provider = settings_provider
        client = client or SlackWebhookClient()
        self._handlers: List[BaseEventHandler] = [
            SlackOrderStatusHandler(
                snapshot_reader=snapshot_reader,
                settings_provider=settings_provider,
                client=client,
            ),
            SlackOrderCreatedHandler(
                snapshot_reader=snapshot_reader,
                settings_provider=settings_provider,
                client=client,
            ),
        ]

    def get_handlers(self) -> List[BaseEventHandler]:
        return self._handlers

    def get_metadata(self) -> Dict[str, object]:
        settings = self._settings_provider()
        return {
            **super().get_metadata(),
            "category": "notifications",
            "webhook_configured": settings.enabled,
            "notify_on_order_created": settings.notify_on_order_created,
        }

    async def on_load(self) -> None:
        if not self._settings_provider().enabled:
            logger.info("Slack webhook URL not configured; order notifications are off")


def build_settings_provider(config_loader: EventConfigLoader) -> SettingsProvider:
    """Settings are rebuilt on every call from the loaded config and the environment."""

    def _provider() -> SlackNotificationSettings:
        try:
            config = config_loader.load(use_cache=True)
        except FileNotFoundError:
            config = EventConfig()
        section = config.plugin_settings(SlackNotificationPlugin.config_key)
        return load_slack_settings(section.options())

    return _provider


def get_plugin(
    snapshot_reader: IOrderSnapshotReader, config_loader: EventConfigLoader
) -> SlackNotificationPlugin:
    return SlackNotificationPlugin(
        snapshot_reader=snapshot_reader,
        settings_provider=build_settings_provider(config_loader),
    )
