"""
Abstract Storage Interface

DESIGN DECISION: The ledger never writes files itself. It is handed a
storage object that implements this interface. This allows us to:
1. Use in-memory storage for testing
2. Swap the JSON file for another format later
3. Keep balance rules decoupled from persistence

The interface is intentionally tiny: save a whole history, load a whole
history. There are no partial updates.
"""

from abc import ABC, abstractmethod
from typing import Sequence

from src.models.transaction import Transaction


class TransactionStorageInterface(ABC):
    """
    Abstract interface for transaction history storage.

    Any storage implementation must preserve transaction order and the
    exact amount and date of every transaction across save and load.
    """

    @abstractmethod
    def save(self, identifier: str, transactions: Sequence[Transaction]) -> None:
        """
        Save a full transaction history, overwriting anything stored
        under the same identifier.

        Args:
            identifier: Where to store the history (e.g. a file path)
            transactions: The history, in ledger order

        Raises:
            StorageError: If save fails
        """
        pass

    @abstractmethod
    def load(self, identifier: str) -> list[Transaction]:
        """
        Load a previously saved transaction history.

        Args:
            identifier: Where the history was stored

        Returns:
            The history, in the order it was saved

        Raises:
            NotFoundError: If nothing is stored under identifier
            CorruptDataError: If the stored data cannot be decoded
            StorageError: If the backend cannot be read
        """
        pass


class StorageError(Exception):
    """Base exception for storage operations."""
    pass


class NotFoundError(StorageError):
    """Nothing stored under the requested identifier."""
    pass


class CorruptDataError(StorageError):
    """Stored data exists but is not a valid transaction history."""
    pass
