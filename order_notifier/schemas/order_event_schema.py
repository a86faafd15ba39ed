from typing import Union

from pydantic import BaseModel, Field


class OrderCreatedSchema(BaseModel):
    order_id: Union[int, str] = Field(..., description="Identifier of the order in the store")


class OrderStatusChangedSchema(OrderCreatedSchema):
    old_status: str = Field(..., description="Status label before the change")
    new_status: str = Field(..., description="Status label after the change")


class EventAcceptedResponseSchema(BaseModel):
    message: str
    event_type: str
    idempotency_key: str
