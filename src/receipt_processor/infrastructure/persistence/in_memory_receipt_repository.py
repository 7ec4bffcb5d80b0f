"""Thread-safe in-memory implementation of ReceiptRepository.

Receipts live for the lifetime of the process; nothing is written to
disk.  A single lock guards the dict, so every single-key operation is
linearizable across threads.
"""

from __future__ import annotations

import logging
import threading

from receipt_processor.domain.model.receipt import Receipt
from receipt_processor.domain.repository.receipt_repository import ReceiptRepository

logger = logging.getLogger(__name__)


class InMemoryReceiptRepository(ReceiptRepository):

    def __init__(self) -> None:
        self._store: dict[str, Receipt] = {}
        self._lock = threading.Lock()

    # --- ReceiptRepository interface ------------------------------------------

    def save(self, receipt: Receipt) -> None:
        receipt = self._require_receipt(receipt)
        with self._lock:
            self._store[receipt.id] = receipt
        logger.info("Receipt '%s' saved", receipt.id)

    def find_by_id(self, receipt_id: str) -> Receipt | None:
        receipt_id = self._require_id(receipt_id)
        with self._lock:
            receipt = self._store.get(receipt_id)
        if receipt is None:
            logger.info("Receipt '%s' not found", receipt_id)
        return receipt

    def find_all(self) -> dict[str, Receipt]:
        with self._lock:
            snapshot = dict(self._store)
        logger.debug("Returning snapshot of %d receipts", len(snapshot))
        return snapshot

    def delete_by_id(self, receipt_id: str) -> bool:
        receipt_id = self._require_id(receipt_id)
        with self._lock:
            removed = self._store.pop(receipt_id, None)
        if removed is None:
            logger.info("Receipt '%s' not found, nothing deleted", receipt_id)
            return False
        logger.info("Receipt '%s' deleted", receipt_id)
        return True

    def exists_by_id(self, receipt_id: str) -> bool:
        receipt_id = self._require_id(receipt_id)
        with self._lock:
            return receipt_id in self._store

    def count(self) -> int:
        with self._lock:
            return len(self._store)
