"""Interfaces for the event plugin system."""

from .base_event_handler import BaseEventHandler
from .event_handler_plugin import EventHandlerPlugin, PluginMetadata

__all__ = ["EventHandlerPlugin", "PluginMetadata", "BaseEventHandler"]
