from .address import Address
from .customer import Customer
from .order import Order

__all__ = ["Address", "Customer", "Order"]
