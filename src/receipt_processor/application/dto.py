"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the CLI/HTTP layers and the application layer
without exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, time
from decimal import Decimal


@dataclass(frozen=True)
class ItemSpec:
    """Input: one line of a submitted receipt."""

    short_description: str
    price: Decimal


@dataclass(frozen=True)
class ReceiptSpec:
    """Input: a receipt as submitted, already parsed into typed values."""

    retailer: str
    purchase_date: date
    purchase_time: time
    items: list[ItemSpec]
    total: Decimal


@dataclass(frozen=True)
class RuleScoreDTO:
    """Output: one rule's contribution."""

    rule: str
    points: int


@dataclass(frozen=True)
class PointsDTO:
    """Output: a receipt's score and how it was reached."""

    receipt_id: str
    points: int
    breakdown: list[RuleScoreDTO]
