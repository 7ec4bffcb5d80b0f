"""Domain service: Points Calculator.

Scores a Receipt by summing seven independent rules.  The calculator
holds no state, so one instance can be shared by any number of threads
as long as the receipt it scores is not mutated mid-call.

Rules (in summation order):
  1. one point per ASCII letter or digit in the retailer name
  2. 50 points if the total is a round dollar amount
  3. 25 points if the total is a multiple of 0.25
  4. 5 points for every two items
  5. ceil(price * 0.2) for each item whose trimmed description length
     is a multiple of 3
  6. 6 points if the purchase day is odd
  7. 10 points if the purchase time is strictly between 14:00 and 16:00
"""

from __future__ import annotations

import logging
import math
import re
from dataclasses import dataclass
from datetime import time
from decimal import Decimal
from fractions import Fraction

from receipt_processor.domain.exceptions import ValidationError
from receipt_processor.domain.model.item import Item
from receipt_processor.domain.model.receipt import Receipt

logger = logging.getLogger(__name__)

_ALPHANUMERIC = re.compile(r"[A-Za-z0-9]")

ROUND_DOLLAR_POINTS = 50
QUARTER_MULTIPLE_POINTS = 25
QUARTER = Decimal("0.25")
POINTS_PER_ITEM_PAIR = 5
DESCRIPTION_LENGTH_DIVISOR = 3
DESCRIPTION_PRICE_MULTIPLIER = Decimal("0.2")
ODD_DAY_POINTS = 6
AFTERNOON_POINTS = 10
AFTERNOON_START = time(14, 0)
AFTERNOON_END = time(16, 0)


@dataclass(frozen=True)
class RuleScore:
    """Contribution of a single rule to a receipt's score."""

    rule: str
    points: int


class PointsCalculator:

    def calculate(self, receipt: Receipt) -> int:
        """Return the total points awarded for *receipt*."""
        return self.total(receipt, self.breakdown(receipt))

    def total(self, receipt: Receipt, scores: list[RuleScore]) -> int:
        """Sum a breakdown of *receipt* and log the result."""
        points = sum(score.points for score in scores)
        logger.info("Receipt '%s' scored %d points", receipt.id, points)
        return points

    def breakdown(self, receipt: Receipt) -> list[RuleScore]:
        """Return every rule's contribution, in summation order."""
        if receipt is None:
            raise ValidationError("Receipt cannot be None")

        scores = [
            RuleScore("retailer_name", self.retailer_name_points(receipt)),
            RuleScore("round_dollar_total", self.round_dollar_points(receipt)),
            RuleScore("quarter_multiple_total", self.quarter_multiple_points(receipt)),
            RuleScore("item_pairs", self.item_pair_points(receipt)),
            RuleScore("item_descriptions", self.item_description_points(receipt)),
            RuleScore("odd_purchase_day", self.odd_day_points(receipt)),
            RuleScore("afternoon_purchase", self.afternoon_points(receipt)),
        ]
        for score in scores:
            logger.debug(
                "Receipt '%s': rule %s -> %d", receipt.id, score.rule, score.points
            )
        return scores

    # --- Rules ----------------------------------------------------------------

    def retailer_name_points(self, receipt: Receipt) -> int:
        return len(_ALPHANUMERIC.findall(receipt.retailer))

    def round_dollar_points(self, receipt: Receipt) -> int:
        return ROUND_DOLLAR_POINTS if receipt.total.is_whole() else 0

    def quarter_multiple_points(self, receipt: Receipt) -> int:
        if receipt.total.is_multiple_of(QUARTER):
            return QUARTER_MULTIPLE_POINTS
        return 0

    def item_pair_points(self, receipt: Receipt) -> int:
        return receipt.item_count // 2 * POINTS_PER_ITEM_PAIR

    def item_description_points(self, receipt: Receipt) -> int:
        return sum(self._description_points(item) for item in receipt.items)

    def odd_day_points(self, receipt: Receipt) -> int:
        return ODD_DAY_POINTS if receipt.purchase_date.day % 2 == 1 else 0

    def afternoon_points(self, receipt: Receipt) -> int:
        if AFTERNOON_START < receipt.purchase_time < AFTERNOON_END:
            return AFTERNOON_POINTS
        return 0

    # --- Internal helpers -----------------------------------------------------

    @staticmethod
    def _description_points(item: Item) -> int:
        if len(item.trimmed_description) % DESCRIPTION_LENGTH_DIVISOR != 0:
            return 0
        # Exact product, always rounded up: 2.4 -> 3.
        return math.ceil(Fraction(item.price.amount) * Fraction(DESCRIPTION_PRICE_MULTIPLIER))
