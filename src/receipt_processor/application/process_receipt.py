"""Application service: Process Receipt use case.

Turns a submitted ReceiptSpec into a Receipt aggregate (which enforces
every invariant), stores it and hands back the generated ID.
"""

from __future__ import annotations

import logging

from receipt_processor.application.dto import ReceiptSpec
from receipt_processor.domain.model.item import Item
from receipt_processor.domain.model.receipt import Receipt
from receipt_processor.domain.model.value_objects import Money
from receipt_processor.domain.repository.receipt_repository import ReceiptRepository

logger = logging.getLogger(__name__)


class ProcessReceiptHandler:

    def __init__(self, receipt_repo: ReceiptRepository) -> None:
        self._receipt_repo = receipt_repo

    def handle(self, spec: ReceiptSpec) -> str:
        """Store a new receipt and return its ID."""
        items = [
            Item(short_description=item.short_description, price=Money.of(item.price))
            for item in spec.items
        ]
        receipt = Receipt(
            retailer=spec.retailer,
            purchase_date=spec.purchase_date,
            purchase_time=spec.purchase_time,
            items=items,
            total=Money.of(spec.total),
        )
        self._receipt_repo.save(receipt)
        logger.info(
            "Processed receipt '%s' from %s with %d items",
            receipt.id,
            receipt.retailer,
            receipt.item_count,
        )
        return receipt.id
