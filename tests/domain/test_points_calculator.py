"""Unit tests for the PointsCalculator domain service.

Each rule is exercised on its own, then the whole calculator is checked
against the two reference receipts.
"""

import logging
from datetime import date, time

import pytest

from receipt_processor.domain.exceptions import ValidationError
from receipt_processor.domain.model.value_objects import Money
from receipt_processor.domain.service.points_calculator import PointsCalculator, RuleScore
from tests.builders import (
    make_item,
    make_receipt,
    mm_corner_market_receipt,
    target_receipt,
)


@pytest.fixture
def calculator() -> PointsCalculator:
    return PointsCalculator()


# ── Rule 1: retailer name ────────────────────────────────────────────────────


class TestRetailerNameRule:

    @pytest.mark.parametrize(
        "retailer, expected",
        [
            ("Target", 6),
            ("M&M Corner Market", 14),
            ("Walgreens 24/7", 12),
            ("&-!", 0),
            ("Café ☕", 3),
        ],
    )
    def test_counts_ascii_alphanumerics(self, calculator, retailer, expected):
        receipt = make_receipt(retailer=retailer)
        assert calculator.retailer_name_points(receipt) == expected


# ── Rules 2 and 3: total amount ──────────────────────────────────────────────


class TestTotalRules:

    def test_round_dollar(self, calculator):
        receipt = make_receipt(total="9.00")
        assert calculator.round_dollar_points(receipt) == 50

    def test_not_round_dollar(self, calculator):
        receipt = make_receipt(total="9.01")
        assert calculator.round_dollar_points(receipt) == 0

    def test_quarter_multiple(self, calculator):
        receipt = make_receipt(total="9.75")
        assert calculator.quarter_multiple_points(receipt) == 25

    def test_not_quarter_multiple(self, calculator):
        receipt = make_receipt(total="9.10")
        assert calculator.quarter_multiple_points(receipt) == 0

    def test_round_dollar_and_quarter_stack(self, calculator):
        receipt = make_receipt(total="9.00")
        points = calculator.round_dollar_points(receipt) + calculator.quarter_multiple_points(receipt)
        assert points == 75

    def test_zero_total_earns_both(self, calculator):
        receipt = make_receipt(total="0")
        assert calculator.round_dollar_points(receipt) == 50
        assert calculator.quarter_multiple_points(receipt) == 25

    def test_huge_total_earns_both(self, calculator):
        receipt = make_receipt(total="1E+30")
        assert calculator.round_dollar_points(receipt) == 50
        assert calculator.quarter_multiple_points(receipt) == 25


# ── Rule 4: item pairs ───────────────────────────────────────────────────────


class TestItemPairRule:

    @pytest.mark.parametrize(
        "count, expected",
        [(0, 0), (1, 0), (2, 5), (3, 5), (4, 10), (12, 30), (99, 245)],
    )
    def test_five_points_per_pair(self, calculator, count, expected):
        receipt = make_receipt(items=[make_item() for _ in range(count)])
        assert calculator.item_pair_points(receipt) == expected


# ── Rule 5: item descriptions ────────────────────────────────────────────────


class TestItemDescriptionRule:

    @pytest.mark.parametrize(
        "description, price, expected",
        [
            ("Emils Cheese Pizza", "12.25", 3),
            ("Mountain Dew 12PK", "5.99", 0),
            ("   Klarbrunn 12-PK 12 FL OZ  ", "12.00", 3),
            ("abc", "5.99", 2),
            ("abc", "10.00", 2),
            ("abc", "0", 0),
            ("abc", "5.000000000000000000000000001", 2),
            ("abc", "12345678901234567890123456789", 2469135780246913578024691358),
        ],
    )
    def test_single_item(self, calculator, description, price, expected):
        receipt = make_receipt(items=[make_item(description, price)])
        assert calculator.item_description_points(receipt) == expected

    def test_rounds_up_not_half_even(self, calculator):
        # 12.00 * 0.2 = 2.4 and 2.5 * 0.2 = 0.5; both round up.
        receipt = make_receipt(items=[make_item("abc", "12.00"), make_item("xyz", "2.50")])
        assert calculator.item_description_points(receipt) == 3 + 1

    def test_sums_over_items(self, calculator):
        receipt = target_receipt()
        assert calculator.item_description_points(receipt) == 6

    def test_no_items(self, calculator):
        receipt = make_receipt(items=[])
        assert calculator.item_description_points(receipt) == 0


# ── Rule 6: odd purchase day ─────────────────────────────────────────────────


class TestOddDayRule:

    @pytest.mark.parametrize(
        "day, expected",
        [
            (date(2022, 1, 1), 6),
            (date(2022, 3, 20), 0),
            (date(2022, 1, 31), 6),
            (date(2024, 2, 29), 6),
            (date(2022, 6, 30), 0),
        ],
    )
    def test_odd_days_score(self, calculator, day, expected):
        receipt = make_receipt(purchase_date=day)
        assert calculator.odd_day_points(receipt) == expected


# ── Rule 7: afternoon purchase ───────────────────────────────────────────────


class TestAfternoonRule:

    @pytest.mark.parametrize(
        "at, expected",
        [
            (time(13, 59), 0),
            (time(14, 0), 0),
            (time(14, 0, 1), 10),
            (time(14, 1), 10),
            (time(15, 59), 10),
            (time(16, 0), 0),
            (time(16, 1), 0),
        ],
    )
    def test_window_is_exclusive(self, calculator, at, expected):
        receipt = make_receipt(purchase_time=at)
        assert calculator.afternoon_points(receipt) == expected


# ── Whole calculator ─────────────────────────────────────────────────────────


class TestCalculate:

    def test_target_receipt(self, calculator):
        assert calculator.calculate(target_receipt()) == 28

    def test_mm_corner_market_receipt(self, calculator):
        assert calculator.calculate(mm_corner_market_receipt()) == 109

    def test_none_receipt_rejected(self, calculator):
        with pytest.raises(ValidationError, match="cannot be None"):
            calculator.calculate(None)

    def test_result_is_non_negative_int(self, calculator):
        points = calculator.calculate(make_receipt(retailer="!!!", total="0.01", items=[]))
        assert isinstance(points, int)
        assert points == 0

    def test_breakdown_is_ordered_and_sums_to_total(self, calculator):
        receipt = mm_corner_market_receipt()
        scores = calculator.breakdown(receipt)
        assert scores == [
            RuleScore("retailer_name", 14),
            RuleScore("round_dollar_total", 50),
            RuleScore("quarter_multiple_total", 25),
            RuleScore("item_pairs", 10),
            RuleScore("item_descriptions", 0),
            RuleScore("odd_purchase_day", 0),
            RuleScore("afternoon_purchase", 10),
        ]
        assert sum(s.points for s in scores) == calculator.calculate(receipt)

    def test_changing_total_only_moves_total_rules(self, calculator):
        receipt = mm_corner_market_receipt()
        before = {s.rule: s.points for s in calculator.breakdown(receipt)}

        receipt.total = Money.of("9.01")
        after = {s.rule: s.points for s in calculator.breakdown(receipt)}

        changed = {rule for rule in before if before[rule] != after[rule]}
        assert changed == {"round_dollar_total", "quarter_multiple_total"}
        assert calculator.calculate(receipt) == 109 - 75

    def test_shared_calculator_is_deterministic(self, calculator):
        receipt = target_receipt()
        assert {calculator.calculate(receipt) for _ in range(10)} == {28}

    def test_total_sums_breakdown_and_logs_once(self, calculator, caplog):
        receipt = target_receipt()
        scores = calculator.breakdown(receipt)
        with caplog.at_level(logging.INFO, logger="receipt_processor.domain.service.points_calculator"):
            assert calculator.total(receipt, scores) == 28
        scored = [r for r in caplog.records if "scored" in r.getMessage()]
        assert len(scored) == 1
        assert receipt.id in scored[0].getMessage()
