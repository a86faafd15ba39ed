from sqlalchemy.orm import relationship
from sqlalchemy import Column, Integer, String

from ..database import Base


class Customer(Base):
    """
        SQLAlchemy model for the 'customers' table.

        Only the columns needed to address a notification are mapped; the table
        belongs to the store and is never written by this service.

        Attributes:
            id_customer (Column): primary key of the customer.
            firstname (Column): first name, up to 100 characters.
            lastname (Column): last name, up to 100 characters.
            email (Column): contact email, unique per customer.
    """
    __tablename__ = "customers"

    id_customer = Column(Integer, primary_key=True, index=True)
    firstname = Column(String(100))
    lastname = Column(String(100))
    email = Column(String(150), unique=True)

    addresses = relationship("Address", back_populates="customer")
    orders = relationship("Order", back_populates="customer")
