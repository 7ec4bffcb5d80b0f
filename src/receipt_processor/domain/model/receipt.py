"""Receipt aggregate.

A Receipt is the unit the store keeps and the points calculator scores.
It owns its items and is validated on every assignment, so no invalid
Receipt can ever reach the store.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import date, datetime, time
from typing import Any

from receipt_processor.domain.exceptions import ValidationError
from receipt_processor.domain.model.item import Item
from receipt_processor.domain.model.value_objects import Money


def _new_receipt_id() -> str:
    return str(uuid.uuid4())


@dataclass
class Receipt:
    """Aggregate root for a single shopping transaction.

    Invariants:
    - ``retailer`` is never blank
    - ``items`` is always a tuple of Item (possibly empty); replace it
      wholesale to change the lines
    - ``total`` is non-negative (guaranteed by Money)
    - ``id`` is assigned once and never changes

    Item prices are not reconciled against ``total``.
    """

    retailer: str
    purchase_date: date
    purchase_time: time
    items: tuple[Item, ...]
    total: Money
    id: str = field(default_factory=_new_receipt_id)

    def __setattr__(self, name: str, value: Any) -> None:
        validator = _VALIDATORS.get(name)
        if validator is not None:
            value = validator(self, value)
        super().__setattr__(name, value)

    @property
    def item_count(self) -> int:
        return len(self.items)


# ---------------------------------------------------------------------------
# Field validators; each returns the value to store
# ---------------------------------------------------------------------------


def _validate_id(receipt: Receipt, value: Any) -> str:
    if "id" in receipt.__dict__:
        raise AttributeError(f"Receipt id '{receipt.id}' cannot be reassigned")
    if not isinstance(value, str) or not value:
        raise ValidationError("Receipt id must be a non-empty string")
    return value


def _validate_retailer(receipt: Receipt, value: Any) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError("Retailer must not be blank")
    return value


def _validate_purchase_date(receipt: Receipt, value: Any) -> date:
    # datetime is a date subclass; a timestamp is not a calendar date.
    if not isinstance(value, date) or isinstance(value, datetime):
        raise ValidationError("Purchase date must be a date")
    return value


def _validate_purchase_time(receipt: Receipt, value: Any) -> time:
    if not isinstance(value, time):
        raise ValidationError("Purchase time must be a time of day")
    if value.tzinfo is not None:
        raise ValidationError("Purchase time must not carry a time zone")
    return value


def _validate_items(receipt: Receipt, value: Any) -> tuple[Item, ...]:
    if value is None or isinstance(value, (str, bytes)):
        raise ValidationError("Items must be a list of Item")
    try:
        items = tuple(value)
    except TypeError as exc:
        raise ValidationError("Items must be a list of Item") from exc
    for index, item in enumerate(items):
        if not isinstance(item, Item):
            raise ValidationError(
                f"Item {index} must be an Item, got {type(item).__name__}"
            )
    return items


def _validate_total(receipt: Receipt, value: Any) -> Money:
    if not isinstance(value, Money):
        raise ValidationError(
            f"Receipt total must be Money, got {type(value).__name__}"
        )
    return value


_VALIDATORS = {
    "id": _validate_id,
    "retailer": _validate_retailer,
    "purchase_date": _validate_purchase_date,
    "purchase_time": _validate_purchase_time,
    "items": _validate_items,
    "total": _validate_total,
}
