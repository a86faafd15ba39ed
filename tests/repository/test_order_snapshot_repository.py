import pytest
from sqlalchemy.orm import sessionmaker

from order_notifier.core.exceptions import ErrorCode, NotFoundException
from order_notifier.models import Address, Customer, Order
from order_notifier.repository import DatabaseOrderSnapshotReader, OrderSnapshotRepository
from order_notifier.repository.order_snapshot_repository import format_total


def _seed_order(db_session, *, separate_shipping: bool = False, billing_name: bool = True) -> Order:
    customer = Customer(firstname="John", lastname="Doe", email="john.doe@example.com")
    db_session.add(customer)
    db_session.flush()

    billing = Address(
        id_customer=customer.id_customer,
        firstname="John" if billing_name else None,
        lastname="Doe" if billing_name else None,
        address1="1 Main St",
        address2=None,
        city="Springfield",
        state="IL",
        postcode="62704",
        phone="555-0100",
    )
    db_session.add(billing)
    db_session.flush()

    shipping = billing
    if separate_shipping:
        shipping = Address(
            id_customer=customer.id_customer,
            firstname="Jane",
            lastname="Roe",
            address1="9 Elm Rd",
            address2="Apt 4",
            city="Chicago",
            state="IL",
            postcode="60601",
        )
        db_session.add(shipping)
        db_session.flush()

    order = Order(
        id_order=1001,
        reference="ABCDEF",
        id_customer=customer.id_customer,
        id_address_invoice=billing.id_address,
        id_address_delivery=shipping.id_address,
        status="processing",
        total_paid=49.99,
    )
    db_session.add(order)
    db_session.commit()
    return order


def test_snapshot_reads_billing_and_shipping(db_session):
    _seed_order(db_session, separate_shipping=True)

    snapshot = OrderSnapshotRepository(db_session).get_snapshot(1001)

    assert snapshot.order_id == "1001"
    assert snapshot.total == "49.99"
    assert snapshot.billing_name == "John Doe"
    assert snapshot.billing_email == "john.doe@example.com"
    assert snapshot.billing_phone == "555-0100"
    assert snapshot.billing_address.address_1 == "1 Main St"
    assert snapshot.billing_address.address_2 == ""
    assert snapshot.billing_address.city == "Springfield"
    assert snapshot.shipping_name == "Jane Roe"
    assert snapshot.shipping_address.address_2 == "Apt 4"
    assert snapshot.shipping_address.postcode == "60601"


def test_snapshot_accepts_string_ids(db_session):
    _seed_order(db_session)

    snapshot = OrderSnapshotRepository(db_session).get_snapshot(" 1001 ")

    assert snapshot.order_id == "1001"


def test_billing_name_falls_back_to_customer(db_session):
    _seed_order(db_session, billing_name=False)

    snapshot = OrderSnapshotRepository(db_session).get_snapshot(1001)

    assert snapshot.billing_name == "John Doe"


def test_order_without_addresses_renders_empty_fields(db_session):
    db_session.add(Order(id_order=5))
    db_session.commit()
    assert db_session.query(Order.total_paid).filter(Order.id_order == 5).scalar() is None

    snapshot = OrderSnapshotRepository(db_session).get_snapshot(5)

    assert snapshot.total == ""
    assert snapshot.billing_name == ""
    assert snapshot.billing_email == ""
    assert snapshot.shipping_address.city == ""


@pytest.mark.parametrize("order_id", [404, "not-a-number", ""])
def test_unknown_order_raises_not_found(db_session, order_id):
    _seed_order(db_session)

    with pytest.raises(NotFoundException) as exc_info:
        OrderSnapshotRepository(db_session).get_snapshot(order_id)

    assert exc_info.value.error_code == ErrorCode.ORDER_NOT_FOUND.value
    assert exc_info.value.status_code == 404


def test_database_reader_uses_fresh_session(db_session):
    _seed_order(db_session)
    reader = DatabaseOrderSnapshotReader(sessionmaker(bind=db_session.get_bind()))

    first = reader.get_snapshot(1001)
    db_session.query(Order).filter(Order.id_order == 1001).update({"total_paid": 75})
    db_session.commit()
    second = reader.get_snapshot(1001)

    assert first.total == "49.99"
    assert second.total == "75.00"


@pytest.mark.parametrize(
    "value, expected",
    [
        (49.99, "49.99"),
        (10, "10.00"),
        ("12.5", "12.50"),
        (None, ""),
        ("n/a", "n/a"),
        (float("inf"), "inf"),
        (1e30, "1e+30"),
    ],
)
def test_format_total(value, expected):
    assert format_total(value) == expected
