"""
Slack Notification Plugin

Forwards order lifecycle events to a Slack incoming webhook.
"""
from order_notifier.events.plugins.slack_notification.formatter import build_order_message
from order_notifier.events.plugins.slack_notification.handlers import (
    SlackOrderCreatedHandler,
    SlackOrderStatusHandler,
)
from order_notifier.events.plugins.slack_notification.plugin import (
    SlackNotificationPlugin,
    build_settings_provider,
    get_plugin,
)
from order_notifier.events.plugins.slack_notification.webhook_client import SlackWebhookClient

__all__ = [
    "SlackNotificationPlugin",
    "SlackOrderCreatedHandler",
    "SlackOrderStatusHandler",
    "SlackWebhookClient",
    "build_order_message",
    "build_settings_provider",
    "get_plugin",
]
