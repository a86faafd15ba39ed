"""Plain-text rendering of order notifications."""

from __future__ import annotations

from typing import List

from order_notifier.schemas.order_snapshot_schema import (
    OrderSnapshot,
    PostalAddress,
    StatusTransition,
)


def build_order_message(snapshot: OrderSnapshot, transition: StatusTransition) -> str:
    """Render the notification text for one order event.

    The layout is fixed; empty fields render as empty strings in place and
    only the second address line is left out when it is empty. Every line,
    the last one included, ends with a newline. The text is sent as is, no
    markup escaping is applied.
    """
    lines: List[str] = [
        f"Order #{snapshot.order_id} status changed from "
        f"{transition.old_status} to {transition.new_status}",
        f"Order Total: {snapshot.total}",
        f"Billing Name: {snapshot.billing_name}",
        f"Billing Email: {snapshot.billing_email}",
        f"Billing Phone: {snapshot.billing_phone}",
        "",
        "Billing Address:",
        *_address_lines(snapshot.billing_address),
        "",
        f"Shipping Name: {snapshot.shipping_name}",
        "Shipping Address:",
        *_address_lines(snapshot.shipping_address),
    ]
    return "".join(f"{line}\n" for line in lines)


def _address_lines(address: PostalAddress) -> List[str]:
    lines = [address.address_1]
    if address.address_2:
        lines.append(address.address_2)
    lines.append(f"{address.city}, {address.state} {address.postcode}")
    return lines
