"""Item: one line on a receipt."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from receipt_processor.domain.exceptions import ValidationError
from receipt_processor.domain.model.value_objects import Money


@dataclass
class Item:
    """A purchased item.

    Every assignment is validated, including the ones made by the
    generated ``__init__``, so an Item can never hold a blank
    description or a non-Money price.
    """

    short_description: str
    price: Money

    def __setattr__(self, name: str, value: Any) -> None:
        if name == "short_description":
            if not isinstance(value, str) or not value.strip():
                raise ValidationError("Short description must not be blank")
        elif name == "price":
            if not isinstance(value, Money):
                raise ValidationError(
                    f"Item price must be Money, got {type(value).__name__}"
                )
        super().__setattr__(name, value)

    @property
    def trimmed_description(self) -> str:
        return self.short_description.strip()
