"""Event system package."""

from .core.event import Event, EventType, order_created_event, order_status_changed_event
from .core.event_bus import EventBus
from .plugin_manager import PluginManager

__all__ = [
    "Event",
    "EventType",
    "EventBus",
    "PluginManager",
    "order_created_event",
    "order_status_changed_event",
]
