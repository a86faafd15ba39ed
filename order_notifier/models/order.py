from sqlalchemy import Integer, Column, Date, Float, ForeignKey, String
from sqlalchemy.orm import relationship

from order_notifier.database import Base


class Order(Base):
    __tablename__ = "orders"

    id_order = Column(Integer, primary_key=True, index=True)
    reference = Column(String(32), nullable=True)
    id_customer = Column(Integer, ForeignKey("customers.id_customer"), index=True, nullable=True)
    id_address_invoice = Column(Integer, ForeignKey("addresses.id_address"), index=True, nullable=True)
    id_address_delivery = Column(Integer, ForeignKey("addresses.id_address"), index=True, nullable=True)
    status = Column(String(64), nullable=True)
    total_paid = Column(Float, nullable=True)
    date_add = Column(Date)

    # Relationships
    customer = relationship("Customer", back_populates="orders")
    address_invoice = relationship("Address", foreign_keys=[id_address_invoice])
    address_delivery = relationship("Address", foreign_keys=[id_address_delivery])
