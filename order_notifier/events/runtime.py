"""Runtime helpers to access the event system singletons."""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import Callable, Optional, Set

from sqlalchemy.orm import Session

from .config import EventConfig, EventConfigLoader
from .core.event import Event
from .core.event_bus import EventBus
from .core.exceptions import HandlerExecutionError
from .plugin_manager import PluginManager

logger = logging.getLogger(__name__)

_event_bus: Optional[EventBus] = None
_plugin_manager: Optional[PluginManager] = None
_config_loader: Optional[EventConfigLoader] = None
_pending_publishes: Set[asyncio.Task] = set()


def set_event_bus(event_bus: Optional[EventBus]) -> None:
    global _event_bus
    _event_bus = event_bus


def get_event_bus() -> EventBus:
    if _event_bus is None:
        raise RuntimeError("EventBus has not been initialised")
    return _event_bus


def set_plugin_manager(manager: Optional[PluginManager]) -> None:
    global _plugin_manager
    _plugin_manager = manager


def get_plugin_manager() -> PluginManager:
    if _plugin_manager is None:
        raise RuntimeError("PluginManager has not been initialised")
    return _plugin_manager


def set_config_loader(loader: Optional[EventConfigLoader]) -> None:
    global _config_loader
    _config_loader = loader


def get_config_loader() -> EventConfigLoader:
    if _config_loader is None:
        raise RuntimeError("Event configuration loader not initialised")
    return _config_loader


def emit_event(event: Event) -> None:
    """Publish an event on the configured bus.

    Inside a running loop the publish is scheduled as a task; otherwise it
    runs to completion before returning.
    """
    logger.debug("emit_event: type=%s data=%s", event.event_type, event.data)

    event_bus = get_event_bus()
    try:
        loop = asyncio.get_running_loop()
    except RuntimeError:
        asyncio.run(event_bus.publish(event))
        return
    task = loop.create_task(event_bus.publish(event))
    _pending_publishes.add(task)
    task.add_done_callback(_publish_done)


def _publish_done(task: asyncio.Task) -> None:
    _pending_publishes.discard(task)
    if task.cancelled():
        return
    exc = task.exception()
    if isinstance(exc, HandlerExecutionError):
        logger.error("Scheduled publish finished with handler errors: %s", exc)
    elif exc is not None:
        logger.error("Scheduled publish failed", exc_info=exc)


async def initialise_event_system(
    config_path: str | Path,
    session_factory: Callable[[], Session],
) -> PluginManager:
    """Build the bus, load the configuration and register the Slack plugin."""
    from order_notifier.events.plugins.slack_notification import get_plugin
    from order_notifier.repository import DatabaseOrderSnapshotReader

    loader = EventConfigLoader(config_path)
    try:
        loader.load()
    except FileNotFoundError:
        logger.warning("Event configuration %s not found; using defaults", loader.path)
        loader.use(EventConfig())

    event_bus = EventBus()
    manager = PluginManager(event_bus, loader)
    await manager.register(get_plugin(DatabaseOrderSnapshotReader(session_factory), loader))

    set_config_loader(loader)
    set_event_bus(event_bus)
    set_plugin_manager(manager)
    return manager


async def shutdown_event_system() -> None:
    if _plugin_manager is not None:
        await _plugin_manager.shutdown()
    set_plugin_manager(None)
    set_event_bus(None)
    set_config_loader(None)
