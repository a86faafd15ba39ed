"""Definitions for events emitted by the store."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, Mapping, MutableMapping, Optional, Union


class EventType(str, Enum):
    """Types of order lifecycle events."""

    ORDER_STATUS_CHANGED = "order_status_changed"
    ORDER_CREATED = "order_created"


MetadataMapping = Mapping[str, Any]


@dataclass(frozen=True, slots=True)
class Event:
    """Event data structure shared across the event system."""

    event_type: str
    data: Dict[str, Any]
    metadata: MetadataMapping = field(default_factory=dict)
    timestamp: datetime = field(
        default_factory=lambda: datetime.now(timezone.utc)
    )

    def __post_init__(self) -> None:
        if isinstance(self.event_type, EventType):
            object.__setattr__(self, "event_type", self.event_type.value)

        if not isinstance(self.metadata, dict):
            object.__setattr__(self, "metadata", dict(self.metadata))

        if "idempotency_key" not in self.metadata:
            object.__setattr__(
                self,
                "metadata",
                {**self.metadata, "idempotency_key": self._generate_idempotency_key()},
            )

    @property
    def idempotency_key(self) -> str:
        return str(self.metadata.get("idempotency_key", ""))

    def with_metadata(self, **updates: Any) -> "Event":
        """Return a copy of the event with updated metadata."""

        merged: MutableMapping[str, Any] = dict(self.metadata)
        merged.update(updates)
        return Event(
            event_type=self.event_type,
            data=self.data,
            metadata=dict(merged),
            timestamp=self.timestamp,
        )

    def _generate_idempotency_key(self) -> str:
        order_id = self.data.get("order_id")
        prefix = f"{self.event_type}:{order_id}" if order_id is not None else self.event_type
        return f"{prefix}:{int(self.timestamp.timestamp() * 1_000_000)}"


def order_status_changed_event(
    order_id: Union[int, str],
    old_status: str,
    new_status: str,
    *,
    source: Optional[str] = None,
) -> Event:
    """Build the event published when an order moves between statuses."""

    return Event(
        event_type=EventType.ORDER_STATUS_CHANGED.value,
        data={
            "order_id": order_id,
            "old_status": old_status,
            "new_status": new_status,
        },
        metadata=_source_metadata(source),
    )


def order_created_event(
    order_id: Union[int, str], *, source: Optional[str] = None
) -> Event:
    """Build the event published when a new order is placed."""

    return Event(
        event_type=EventType.ORDER_CREATED.value,
        data={"order_id": order_id},
        metadata=_source_metadata(source),
    )


def _source_metadata(source: Optional[str]) -> Dict[str, Any]:
    return {"source": source} if source else {}
