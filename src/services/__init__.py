"""Services package."""

from src.services.clock import Clock, FixedClock, SystemClock
from src.services.storage import (
    CorruptDataError,
    InMemoryTransactionStorage,
    JsonFileTransactionStorage,
    NotFoundError,
    StorageError,
    TransactionStorageInterface,
)

__all__ = [
    # Clock
    "Clock",
    "FixedClock",
    "SystemClock",
    # Storage services
    "CorruptDataError",
    "InMemoryTransactionStorage",
    "JsonFileTransactionStorage",
    "NotFoundError",
    "StorageError",
    "TransactionStorageInterface",
]
