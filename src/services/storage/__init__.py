"""
Storage Services Package

Provides the abstract transaction storage interface and its
implementations: a JSON file backend and an in-memory backend.
"""

from src.services.storage.interface import (
    CorruptDataError,
    NotFoundError,
    StorageError,
    TransactionStorageInterface,
)
from src.services.storage.json_file import JsonFileTransactionStorage
from src.services.storage.memory import InMemoryTransactionStorage

__all__ = [
    # Interface
    "TransactionStorageInterface",
    # Exceptions
    "CorruptDataError",
    "NotFoundError",
    "StorageError",
    # Implementations
    "InMemoryTransactionStorage",
    "JsonFileTransactionStorage",
]
