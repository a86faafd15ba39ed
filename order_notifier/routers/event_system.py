"""Router exposing management endpoints for the event system."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends

from order_notifier.core.exceptions import BaseApplicationException, ErrorCode, ExceptionFactory, NotFoundException
from order_notifier.events.core.event import EventType
from order_notifier.events.plugin_manager import PluginManager
from order_notifier.events.runtime import get_plugin_manager

logger = logging.getLogger(__name__)


def get_manager() -> PluginManager:
    try:
        return get_plugin_manager()
    except RuntimeError as exc:
        logger.warning("Plugin manager not initialised")
        raise ExceptionFactory.event_system_unavailable(str(exc)) from exc


router = APIRouter(prefix="/api/v1/events", tags=["Event System"])


@router.post(
    "/reload-config",
    summary="Reload the event configuration",
    response_description="Configuration reloaded",
)
async def reload_event_configuration(plugin_manager: PluginManager = Depends(get_manager)):
    try:
        config = await plugin_manager.reload()
    except FileNotFoundError as exc:
        raise NotFoundException("Event configuration", details={"reason": str(exc)}) from exc
    except ValueError as exc:
        raise BaseApplicationException(str(exc), ErrorCode.VALIDATION_ERROR) from exc

    return {"message": "Event configuration reloaded", "config": config.model_dump(mode="json")}


@router.get(
    "/plugins",
    summary="List event plugins",
    response_description="Current state of the registered plugins",
)
async def list_event_plugins(plugin_manager: PluginManager = Depends(get_manager)):
    return {"plugins": plugin_manager.get_status()}


@router.get(
    "/list",
    summary="List available events",
    response_description="Event types the service accepts",
)
async def get_events_list():
    events = [event_type.value for event_type in EventType]
    return {"events": events, "total": len(events)}
