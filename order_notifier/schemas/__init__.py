from .order_event_schema import EventAcceptedResponseSchema, OrderCreatedSchema, OrderStatusChangedSchema
from .order_snapshot_schema import OrderSnapshot, PostalAddress, StatusTransition, format_person_name

__all__ = [
    "EventAcceptedResponseSchema",
    "OrderCreatedSchema",
    "OrderStatusChangedSchema",
    "OrderSnapshot",
    "PostalAddress",
    "StatusTransition",
    "format_person_name",
]
