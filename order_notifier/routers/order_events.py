"""Router receiving order lifecycle notifications from the store."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, status

from order_notifier.core.exceptions import ExceptionFactory
from order_notifier.events.core.event import Event, order_created_event, order_status_changed_event
from order_notifier.events.core.event_bus import EventBus
from order_notifier.events.core.exceptions import HandlerExecutionError
from order_notifier.events.runtime import get_event_bus
from order_notifier.schemas.order_event_schema import (
    EventAcceptedResponseSchema,
    OrderCreatedSchema,
    OrderStatusChangedSchema,
)

logger = logging.getLogger(__name__)

EVENT_SOURCE = "order_events_router"


def get_bus() -> EventBus:
    try:
        return get_event_bus()
    except RuntimeError as exc:
        raise ExceptionFactory.event_system_unavailable(str(exc)) from exc


router = APIRouter(prefix="/api/v1/events", tags=["Order Events"])


@router.post(
    "/orders/status-changed",
    status_code=status.HTTP_202_ACCEPTED,
    response_model=EventAcceptedResponseSchema,
    summary="Notify an order status change",
)
async def order_status_changed(
    payload: OrderStatusChangedSchema,
    event_bus: EventBus = Depends(get_bus),
):
    event = order_status_changed_event(
        payload.order_id,
        payload.old_status,
        payload.new_status,
        source=EVENT_SOURCE,
    )
    await _publish(event_bus, event)
    return _accepted(event)


@router.post(
    "/orders/created",
    status_code=status.HTTP_202_ACCEPTED,
    response_model=EventAcceptedResponseSchema,
    summary="Notify a newly created order",
)
async def order_created(
    payload: OrderCreatedSchema,
    event_bus: EventBus = Depends(get_bus),
):
    event = order_created_event(payload.order_id, source=EVENT_SOURCE)
    await _publish(event_bus, event)
    return _accepted(event)


async def _publish(event_bus: EventBus, event: Event) -> None:
    # The event counts as handled whatever its subscribers did with it
    try:
        await event_bus.publish(event)
    except HandlerExecutionError:
        logger.exception("Subscribers failed for event '%s'", event.idempotency_key)


def _accepted(event: Event) -> EventAcceptedResponseSchema:
    return EventAcceptedResponseSchema(
        message="Event accepted",
        event_type=event.event_type,
        idempotency_key=event.idempotency_key,
    )
