"""Abstract repository for the Receipt aggregate.

Defined in the domain layer so the domain never depends on
infrastructure. The concrete in-memory store lives in the
infrastructure layer.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from receipt_processor.domain.exceptions import ValidationError
from receipt_processor.domain.model.receipt import Receipt


class ReceiptRepository(ABC):

    @abstractmethod
    def save(self, receipt: Receipt) -> None:
        """Insert or replace the receipt stored under ``receipt.id``."""

    @abstractmethod
    def find_by_id(self, receipt_id: str) -> Receipt | None:
        """Return the receipt with this ID, or None if there is none."""

    @abstractmethod
    def find_all(self) -> dict[str, Receipt]:
        """Return a snapshot of every stored receipt keyed by ID."""

    @abstractmethod
    def delete_by_id(self, receipt_id: str) -> bool:
        """Remove a receipt; return True if one was removed."""

    @abstractmethod
    def exists_by_id(self, receipt_id: str) -> bool:
        """Return True if a receipt with this ID is stored."""

    @abstractmethod
    def count(self) -> int:
        """Return the number of stored receipts."""

    # --- Argument checks shared by implementations ----------------------------

    @staticmethod
    def _require_receipt(receipt: Receipt | None) -> Receipt:
        if receipt is None:
            raise ValidationError("Receipt cannot be None")
        return receipt

    @staticmethod
    def _require_id(receipt_id: str | None) -> str:
        if not receipt_id:
            raise ValidationError("Receipt ID cannot be empty")
        return receipt_id
