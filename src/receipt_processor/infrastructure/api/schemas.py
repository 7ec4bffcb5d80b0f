"""Request/response models for the receipts API.

Field names on the wire are camelCase; the models expose snake_case
attributes and convert to application DTOs with ``to_spec()``.
"""

from __future__ import annotations

from datetime import date, time
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_core import PydanticCustomError

from receipt_processor.application.dto import ItemSpec, ReceiptSpec


class ItemPayload(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    short_description: str = Field(alias="shortDescription")
    price: Decimal

    @field_validator("short_description")
    @classmethod
    def _description_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise PydanticCustomError(
                "blank", "Short description is required and must not be blank."
            )
        return value

    @field_validator("price")
    @classmethod
    def _price_not_negative(cls, value: Decimal) -> Decimal:
        if value < 0:
            raise PydanticCustomError("negative", "Price must be positive or zero.")
        return value

    def to_spec(self) -> ItemSpec:
        return ItemSpec(short_description=self.short_description, price=self.price)


class ReceiptPayload(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    retailer: str
    purchase_date: date = Field(alias="purchaseDate")
    purchase_time: time = Field(alias="purchaseTime")
    items: list[ItemPayload]
    total: Decimal

    @field_validator("retailer")
    @classmethod
    def _retailer_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise PydanticCustomError(
                "blank", "Retailer name is required and must not be blank."
            )
        return value

    @field_validator("purchase_time")
    @classmethod
    def _time_is_local(cls, value: time) -> time:
        if value.tzinfo is not None:
            raise PydanticCustomError(
                "timezone", "Purchase time must not include a time zone."
            )
        return value

    @field_validator("items")
    @classmethod
    def _items_not_empty(cls, value: list[ItemPayload]) -> list[ItemPayload]:
        if not value:
            raise PydanticCustomError("empty", "Items list must not be empty.")
        return value

    @field_validator("total")
    @classmethod
    def _total_not_negative(cls, value: Decimal) -> Decimal:
        if value < 0:
            raise PydanticCustomError(
                "negative", "Total amount must be positive or zero."
            )
        return value

    def to_spec(self) -> ReceiptSpec:
        return ReceiptSpec(
            retailer=self.retailer,
            purchase_date=self.purchase_date,
            purchase_time=self.purchase_time,
            items=[item.to_spec() for item in self.items],
            total=self.total,
        )


class ProcessResponse(BaseModel):
    id: str


class PointsResponse(BaseModel):
    points: int


class HealthResponse(BaseModel):
    status: str
    receipts: int
