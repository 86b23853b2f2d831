"""
In-Memory Storage Implementation

Keeps saved histories in a dict. Used by tests, and by the frontends
when no data directory is configured.
"""

from typing import Sequence

from src.models.transaction import Transaction
from src.services.storage.interface import NotFoundError, TransactionStorageInterface


class InMemoryTransactionStorage(TransactionStorageInterface):
    """Dict-backed storage. Histories are copied in and out."""

    def __init__(self):
        self._histories: dict[str, list[Transaction]] = {}

    def save(self, identifier: str, transactions: Sequence[Transaction]) -> None:
        self._histories[identifier] = list(transactions)

    def load(self, identifier: str) -> list[Transaction]:
        try:
            return list(self._histories[identifier])
        except KeyError:
            raise NotFoundError(f"Nothing saved under {identifier!r}")

    def __contains__(self, identifier: str) -> bool:
        return identifier in self._histories
