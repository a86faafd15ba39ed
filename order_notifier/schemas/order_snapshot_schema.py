"""Read-only views of an order used to build notifications."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _to_text(value: Any) -> str:
    if value is None:
        return ""
    return str(value)


def format_person_name(first_name: str, last_name: str) -> str:
    """Join first and last name with a single space, trimmed.

    >>> format_person_name("John", "Doe")
    'John Doe'
    >>> format_person_name("", "")
    ''
    """
    return f"{first_name or ''} {last_name or ''}".strip()


class PostalAddress(BaseModel):
    model_config = ConfigDict(frozen=True)

    address_1: str = ""
    address_2: str = ""
    city: str = ""
    state: str = ""
    postcode: str = ""

    @field_validator("*", mode="before")
    @classmethod
    def normalise_text(cls, value: Any) -> str:
        return _to_text(value)


class OrderSnapshot(BaseModel):
    """Point-in-time read of the order fields shown in a notification."""

    model_config = ConfigDict(frozen=True)

    order_id: str = Field(..., min_length=1)
    total: str = ""
    billing_first_name: str = ""
    billing_last_name: str = ""
    billing_email: str = ""
    billing_phone: str = ""
    billing_address: PostalAddress = Field(default_factory=PostalAddress)
    shipping_first_name: str = ""
    shipping_last_name: str = ""
    shipping_address: PostalAddress = Field(default_factory=PostalAddress)

    @field_validator(
        "order_id",
        "total",
        "billing_first_name",
        "billing_last_name",
        "billing_email",
        "billing_phone",
        "shipping_first_name",
        "shipping_last_name",
        mode="before",
    )
    @classmethod
    def normalise_text(cls, value: Any) -> str:
        return _to_text(value)

    @property
    def billing_name(self) -> str:
        return format_person_name(self.billing_first_name, self.billing_last_name)

    @property
    def shipping_name(self) -> str:
        return format_person_name(self.shipping_first_name, self.shipping_last_name)


class StatusTransition(BaseModel):
    """The (old, new) status pair that triggered a notification.

    Labels are free text defined by the store; nothing is validated here.
    """

    model_config = ConfigDict(frozen=True)

    old_status: str = ""
    new_status: str = ""

    @field_validator("old_status", "new_status", mode="before")
    @classmethod
    def normalise_text(cls, value: Any) -> str:
        return _to_text(value)

    @classmethod
    def order_created(cls) -> "StatusTransition":
        return cls(old_status="N/A", new_status="new")
