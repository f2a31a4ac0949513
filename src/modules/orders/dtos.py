"""Order DTOs for the Service Layer.

Framework-agnostic data transfer objects using Pydantic v2.
These are the contracts between the API layer (views) and the
Service layer.  DTOs are immutable (``frozen=True``) and are only
built from ``validated_data`` of the input serializers, which are the
single validation gate for request payloads.

- ``AddressDTO``: an order's address.
- ``OrderLineDTO``: a single line item.
- ``OrderDTO``: a full order (create and update input).

Attribute names are snake_case; the camelCase aliases (``firstName``,
``orderLines``) are accepted too.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Any, List, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from modules.orders.constants import OrderStatus


class AddressDTO(BaseModel):
    """Immutable DTO for an order address."""

    model_config = ConfigDict(frozen=True)

    address1: str
    address2: str = ""
    city: str
    state: str
    zip: str

    @field_validator("address2", mode="before")
    @classmethod
    def missing_address2_is_blank(cls, v: Any) -> Any:
        return "" if v is None else v


class OrderLineDTO(BaseModel):
    """Immutable DTO for a single order line."""

    model_config = ConfigDict(frozen=True)

    brand: str
    model: str
    cost: Decimal
    quantity: int


class OrderDTO(BaseModel):
    """Immutable DTO for order create/update requests.

    ``status`` holds the persisted code (``PROC``...) or ``None`` when
    the client did not send one.  The service decides what to do with
    it: creation always overrides it with PROCESSING.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    status: Optional[str] = None
    first_name: str = Field(alias="firstName")
    last_name: str = Field(alias="lastName")
    email: str
    phone: str = ""
    address: AddressDTO
    order_lines: List[OrderLineDTO] = Field(alias="orderLines")
    tax: Decimal
    shipping: Decimal

    @field_validator("status", mode="before")
    @classmethod
    def status_name_to_code(cls, v: Any) -> Any:
        if isinstance(v, str) and v in OrderStatus.names:
            return OrderStatus.from_name(v).value
        return v

    @field_validator("phone", mode="before")
    @classmethod
    def missing_phone_is_blank(cls, v: Any) -> Any:
        return "" if v is None else v

    @classmethod
    def from_validated_data(cls, data: Mapping[str, Any]) -> OrderDTO:
        return cls.model_validate(dict(data))
