"""Handlers forwarding order events to Slack."""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Callable, Optional

from order_notifier.core.exceptions import NotFoundException
from order_notifier.core.settings import SlackNotificationSettings
from order_notifier.events.core.event import Event, EventType
from order_notifier.events.interfaces import BaseEventHandler
from order_notifier.events.plugins.slack_notification.formatter import build_order_message
from order_notifier.events.plugins.slack_notification.webhook_client import SlackWebhookClient
from order_notifier.repository.interfaces import IOrderSnapshotReader
from order_notifier.schemas.order_snapshot_schema import StatusTransition

logger = logging.getLogger(__name__)

SettingsProvider = Callable[[], SlackNotificationSettings]


class SlackOrderHandler(BaseEventHandler):
    """Shared flow: settings -> order snapshot -> message -> webhook."""

    def __init__(
        self,
        *,
        name: str,
        snapshot_reader: IOrderSnapshotReader,
        settings_provider: SettingsProvider,
        client: Optional[SlackWebhookClient] = None,
    ) -> None:
        super().__init__(name=name)
        self._snapshot_reader = snapshot_reader
        self._settings_provider = settings_provider
        self._client = client or SlackWebhookClient()

    async def notify(
        self,
        order_id: Any,
        transition: StatusTransition,
        settings: Optional[SlackNotificationSettings] = None,
    ) -> bool:
        """Send one notification; returns True only when Slack accepted it."""
        settings = settings or self._settings_provider()
        if not settings.enabled:
            logger.debug("Slack notifications disabled; order %s not notified", order_id)
            return False

        try:
            # Blocking database read, kept off the event loop
            snapshot = await asyncio.to_thread(self._snapshot_reader.get_snapshot, order_id)
        except NotFoundException as exc:
            logger.warning("Slack notification dropped: %s", exc.message)
            return False

        message = build_order_message(snapshot, transition)
        return await self._client.send(
            message,
            settings.webhook_url,
            timeout_seconds=settings.timeout_seconds,
        )


class SlackOrderStatusHandler(SlackOrderHandler):
    event_types = (EventType.ORDER_STATUS_CHANGED,)

    def __init__(self, *, name: str = "slack_order_status_handler", **kwargs: Any) -> None:
        super().__init__(name=name, **kwargs)

    async def handle(self, event: Event) -> None:
        order_id = _order_id(event)
        if order_id is None:
            return

        transition = StatusTransition(
            old_status=event.data.get("old_status"),
            new_status=event.data.get("new_status"),
        )
        await self.notify(order_id, transition)


class SlackOrderCreatedHandler(SlackOrderHandler):
    """Notifies new orders with the fixed transition "N/A" -> "new".

    Off unless ``notify_on_order_created`` is set, since stores that also
    emit a status change for new orders would otherwise post twice.
    """

    event_types = (EventType.ORDER_CREATED,)

    def __init__(self, *, name: str = "slack_order_created_handler", **kwargs: Any) -> None:
        super().__init__(name=name, **kwargs)

    async def handle(self, event: Event) -> None:
        order_id = _order_id(event)
        if order_id is None:
            return

        settings = self._settings_provider()
        if not settings.notify_on_order_created:
            logger.debug("Order created notifications off; order %s skipped", order_id)
            return

        await self.notify(order_id, StatusTransition.order_created(), settings)


def _order_id(event: Event) -> Optional[Any]:
    order_id = event.data.get("order_id")
    if order_id is None or not str(order_id).strip():
        logger.warning(
            "Event '%s' without order_id ignored (key %s)",
            event.event_type,
            event.idempotency_key,
        )
        return None
    return order_id
