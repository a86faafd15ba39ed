"""Explicit registration of plugin handlers on the event bus."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field
from typing import Awaitable, Callable, Dict, List, Tuple

from .config import EventConfig, EventConfigLoader
from .core.event import Event
from .core.event_bus import EventBus
from .core.exceptions import PluginRegistrationError
from .interfaces import BaseEventHandler, EventHandlerPlugin

logger = logging.getLogger(__name__)

Subscription = Tuple[str, Callable[[Event], Awaitable[None]]]


@dataclass(slots=True)
class RegisteredPlugin:
    name: str
    instance: EventHandlerPlugin
    handlers: Dict[str, BaseEventHandler]
    subscriptions: List[Subscription] = field(default_factory=list)


class PluginManager:
    """Subscribe plugin handlers to the bus and gate them with the event config.

    Whether a plugin or handler is enabled is checked against the current
    configuration each time an event is dispatched. Handler errors are logged
    here and never propagate to the publisher.
    """

    def __init__(self, event_bus: EventBus, config_loader: EventConfigLoader) -> None:
        self._event_bus = event_bus
        self._config_loader = config_loader
        self._lock = asyncio.Lock()
        self._plugins: Dict[str, RegisteredPlugin] = {}

    async def register(self, plugin: EventHandlerPlugin) -> None:
        async with self._lock:
            if plugin.name in self._plugins:
                raise PluginRegistrationError(f"Plugin '{plugin.name}' is already registered")

            handlers = self._collect_handlers(plugin)
            registered = RegisteredPlugin(name=plugin.name, instance=plugin, handlers=handlers)

            for handler in handlers.values():
                for event_type in handler.event_types:
                    callback = self._make_callback(plugin.name, handler)
                    await self._event_bus.subscribe(event_type.value, callback)
                    registered.subscriptions.append((event_type.value, callback))

            self._plugins[plugin.name] = registered

        await plugin.on_load()
        logger.info(
            "Plugin '%s' registered with handlers %s", plugin.name, sorted(handlers)
        )

    async def unregister(self, plugin_name: str) -> None:
        async with self._lock:
            registered = self._plugins.pop(plugin_name, None)
            if registered is None:
                return
            for event_type, callback in registered.subscriptions:
                await self._event_bus.unsubscribe(event_type, callback)

        await registered.instance.on_unload()
        logger.info("Plugin '%s' unregistered", plugin_name)

    async def shutdown(self) -> None:
        for name in list(self._plugins):
            try:
                await self.unregister(name)
            except Exception:
                logger.exception("Failed to unregister plugin '%s'", name)

    async def reload(self) -> EventConfig:
        """Re-read the configuration file; registered handlers pick it up on the next event."""
        async with self._lock:
            config = self._config_loader.refresh()
        logger.info("Event configuration reloaded from %s", self._config_loader.path)
        return config

    def get_registered_plugins(self) -> Dict[str, RegisteredPlugin]:
        return dict(self._plugins)

    def get_status(self) -> Dict[str, Dict[str, object]]:
        config = self._current_config()
        return {
            name: {
                "enabled": config.is_plugin_enabled(name),
                "handlers": {
                    handler_name: config.is_handler_enabled(handler_name)
                    for handler_name in plugin.handlers
                },
                "metadata": plugin.instance.get_metadata(),
            }
            for name, plugin in self._plugins.items()
        }

    def _make_callback(
        self, plugin_name: str, handler: BaseEventHandler
    ) -> Callable[[Event], Awaitable[None]]:
        async def _callback(event: Event) -> None:
            await self._run_handler(plugin_name, handler, event)

        return _callback

    async def _run_handler(
        self, plugin_name: str, handler: BaseEventHandler, event: Event
    ) -> None:
        config = self._current_config()
        if not config.is_plugin_enabled(plugin_name):
            logger.debug("Plugin '%s' disabled; skipping '%s'", plugin_name, event.event_type)
            return
        if not config.is_handler_enabled(handler.name):
            logger.debug("Handler '%s' disabled; skipping '%s'", handler.name, event.event_type)
            return
        if not handler.can_handle(event):
            return

        try:
            await handler(event)
        except Exception:
            logger.exception(
                "Handler %s failed for event '%s'", handler.name, event.event_type
            )

    def _collect_handlers(self, plugin: EventHandlerPlugin) -> Dict[str, BaseEventHandler]:
        handlers = plugin.get_handlers()
        if not isinstance(handlers, list):
            raise TypeError("Plugin get_handlers() must return a list of handlers")

        taken = {name for registered in self._plugins.values() for name in registered.handlers}
        collected: Dict[str, BaseEventHandler] = {}
        for handler in handlers:
            if not isinstance(handler, BaseEventHandler):
                raise TypeError("Handler must inherit from BaseEventHandler")

            if handler.name in collected or handler.name in taken:
                logger.warning("Duplicate handler name '%s' detected; skipping", handler.name)
                continue

            collected[handler.name] = handler

        return collected

    def _current_config(self) -> EventConfig:
        try:
            return self._config_loader.load(use_cache=True)
        except FileNotFoundError:
            logger.warning(
                "Event configuration %s not found; using defaults", self._config_loader.path
            )
            return EventConfig()
