"""
Assertion helpers for the API tests
"""
from typing import Any, Dict, List, Optional

from httpx import Response

from order_notifier.events.core.event import Event
from tests.conftest import EventBusSpy


def assert_error_response(
    response: Response,
    status_code: int,
    error_code: Optional[str] = None,
    message_contains: Optional[str] = None
):
    """
    Check that a response is an error body with the given details.

    Args:
        response: HTTP response
        status_code: expected status code
        error_code: expected error code (optional)
        message_contains: text the message must contain (optional)
    """
    assert response.status_code == status_code, \
        f"Expected status {status_code}, got {response.status_code}. Response: {response.text}"

    data = response.json()
    assert data["status_code"] == status_code, f"Body status mismatch. Got: {data}"

    if error_code:
        assert data.get("error_code") == error_code, \
            f"Expected error_code '{error_code}', got '{data.get('error_code')}'"

    if message_contains:
        assert message_contains.lower() in data["message"].lower(), \
            f"Message should contain '{message_contains}'. Got: {data['message']}"


def assert_accepted_response(response: Response, event_type: str) -> Dict[str, Any]:
    """Check a 202 body acknowledging an event of ``event_type``."""
    assert response.status_code == 202, \
        f"Expected status 202, got {response.status_code}. Response: {response.text}"

    data = response.json()
    assert data["message"] == "Event accepted"
    assert data["event_type"] == event_type
    assert data["idempotency_key"].startswith(f"{event_type}:"), data["idempotency_key"]
    return data


def assert_event_published(
    event_bus_spy: EventBusSpy,
    event_type: str,
    min_count: int = 1,
    check_data: Optional[Dict[str, Any]] = None
) -> List[Event]:
    """
    Check that at least ``min_count`` events of a type were published.

    Args:
        event_bus_spy: EventBus spy
        event_type: expected event type
        min_count: minimum number of events (default: 1)
        check_data: key/values one of the events must carry in event.data (optional)

    Returns:
        The matching events
    """
    events = event_bus_spy.get_events_by_type(event_type)

    assert len(events) >= min_count, \
        f"Expected at least {min_count} events of type '{event_type}', got {len(events)}"

    if check_data:
        assert any(
            all(event.data.get(k) == v for k, v in check_data.items()) for event in events
        ), f"No event of type '{event_type}' contains the expected data: {check_data}"

    return events


def assert_no_event_published(event_bus_spy: EventBusSpy, event_type: Optional[str] = None):
    """Check that no event (of ``event_type``, when given) was published."""
    if event_type is None:
        events = event_bus_spy.published_events
    else:
        events = event_bus_spy.get_events_by_type(event_type)
    assert len(events) == 0, \
        f"Expected no events of type '{event_type}', but found {len(events)}"
