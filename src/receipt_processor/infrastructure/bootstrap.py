"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

import logging

from receipt_processor.domain.repository.receipt_repository import ReceiptRepository
from receipt_processor.domain.service.points_calculator import PointsCalculator
from receipt_processor.infrastructure.persistence.in_memory_receipt_repository import (
    InMemoryReceiptRepository,
)

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str | int = "INFO") -> None:
    if isinstance(level, str):
        level = level.upper()
    logging.basicConfig(level=level, format=LOG_FORMAT)


def receipt_repository() -> ReceiptRepository:
    """Return a new, empty receipt store."""
    return InMemoryReceiptRepository()


def points_calculator() -> PointsCalculator:
    return PointsCalculator()
