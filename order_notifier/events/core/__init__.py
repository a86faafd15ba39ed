"""Core components of the event system."""

from .event import Event, EventType, order_created_event, order_status_changed_event
from .event_bus import EventBus

__all__ = ["Event", "EventType", "EventBus", "order_created_event", "order_status_changed_event"]
