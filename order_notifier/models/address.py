from sqlalchemy import Integer, Column, String, ForeignKey
from sqlalchemy.orm import relationship

from order_notifier.database import Base


class Address(Base):
    __tablename__ = "addresses"

    id_address = Column(Integer, primary_key=True, index=True)
    id_customer = Column(Integer, ForeignKey("customers.id_customer"))
    company = Column(String(255))
    firstname = Column(String(255))
    lastname = Column(String(255))
    address1 = Column(String(128))
    address2 = Column(String(128))
    state = Column(String(128))
    postcode = Column(String(12))
    city = Column(String(64))
    phone = Column(String(32))

    customer = relationship("Customer", back_populates="addresses")
