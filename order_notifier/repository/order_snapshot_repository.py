"""Repository loading the order data needed by notifications."""

from decimal import Decimal, InvalidOperation
from typing import Callable, Optional

from sqlalchemy.orm import Session, joinedload, load_only

from order_notifier.core.exceptions import ExceptionFactory
from order_notifier.models.address import Address
from order_notifier.models.customer import Customer
from order_notifier.models.order import Order
from order_notifier.repository.interfaces import IOrderSnapshotReader, OrderId
from order_notifier.schemas.order_snapshot_schema import OrderSnapshot, PostalAddress

_ADDRESS_COLUMNS = (
    Address.id_address,
    Address.firstname,
    Address.lastname,
    Address.address1,
    Address.address2,
    Address.city,
    Address.state,
    Address.postcode,
    Address.phone,
)


class OrderSnapshotRepository(IOrderSnapshotReader):
    """Builds OrderSnapshot objects from the store tables."""

    def __init__(self, session: Session):
        self.session = session

    def get_snapshot(self, order_id: OrderId) -> OrderSnapshot:
        order = self._load_order(order_id)
        if order is None:
            raise ExceptionFactory.order_not_found(order_id)

        billing = order.address_invoice
        shipping = order.address_delivery
        customer = order.customer

        billing_first_name = billing.firstname if billing else None
        billing_last_name = billing.lastname if billing else None
        # Guest checkouts may store the name only on the customer record
        if not billing_first_name and not billing_last_name and customer:
            billing_first_name = customer.firstname
            billing_last_name = customer.lastname

        return OrderSnapshot(
            order_id=order.id_order,
            total=format_total(order.total_paid),
            billing_first_name=billing_first_name,
            billing_last_name=billing_last_name,
            billing_email=customer.email if customer else None,
            billing_phone=billing.phone if billing else None,
            billing_address=_to_postal_address(billing),
            shipping_first_name=shipping.firstname if shipping else None,
            shipping_last_name=shipping.lastname if shipping else None,
            shipping_address=_to_postal_address(shipping),
        )

    def _load_order(self, order_id: OrderId) -> Optional[Order]:
        try:
            key = int(str(order_id).strip())
        except ValueError:
            return None

        return (
            self.session.query(Order)
            .options(
                load_only(
                    Order.id_order,
                    Order.id_customer,
                    Order.id_address_invoice,
                    Order.id_address_delivery,
                    Order.total_paid,
                ),
                joinedload(Order.address_invoice).options(load_only(*_ADDRESS_COLUMNS)),
                joinedload(Order.address_delivery).options(load_only(*_ADDRESS_COLUMNS)),
                joinedload(Order.customer).options(
                    load_only(
                        Customer.id_customer,
                        Customer.firstname,
                        Customer.lastname,
                        Customer.email,
                    )
                ),
            )
            .filter(Order.id_order == key)
            .first()
        )


class DatabaseOrderSnapshotReader(IOrderSnapshotReader):
    """Opens a dedicated session for every lookup so each event reads fresh data."""

    def __init__(self, session_factory: Callable[[], Session]):
        self._session_factory = session_factory

    def get_snapshot(self, order_id: OrderId) -> OrderSnapshot:
        db = self._session_factory()
        try:
            return OrderSnapshotRepository(db).get_snapshot(order_id)
        finally:
            db.close()


def format_total(value) -> str:
    """Render an order total with two decimals; unknown totals become ''."""
    if value is None:
        return ""
    try:
        return str(Decimal(str(value)).quantize(Decimal("0.01")))
    except InvalidOperation:
        return str(value)


def _to_postal_address(address: Optional[Address]) -> PostalAddress:
    if address is None:
        return PostalAddress()
    return PostalAddress(
        address_1=address.address1,
        address_2=address.address2,
        city=address.city,
        state=address.state,
        postcode=address.postcode,
    )
