"""Application service: Get Points use case (query)."""

from __future__ import annotations

from receipt_processor.application.dto import PointsDTO, RuleScoreDTO
from receipt_processor.domain.exceptions import EntityNotFoundError
from receipt_processor.domain.repository.receipt_repository import ReceiptRepository
from receipt_processor.domain.service.points_calculator import PointsCalculator


class GetPointsHandler:

    def __init__(
        self,
        receipt_repo: ReceiptRepository,
        calculator: PointsCalculator,
    ) -> None:
        self._receipt_repo = receipt_repo
        self._calculator = calculator

    def handle(self, receipt_id: str) -> PointsDTO:
        receipt = self._receipt_repo.find_by_id(receipt_id)
        if receipt is None:
            raise EntityNotFoundError("Receipt not found")

        scores = self._calculator.breakdown(receipt)
        points = self._calculator.total(receipt, scores)
        return PointsDTO(
            receipt_id=receipt.id,
            points=points,
            breakdown=[RuleScoreDTO(rule=s.rule, points=s.points) for s in scores],
        )
