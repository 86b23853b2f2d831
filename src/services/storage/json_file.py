"""
JSON File Storage Implementation

DESIGN DECISION: Histories are stored as one JSON document per file:

    {
      "format_version": 1,
      "saved_at": "2024-01-05T10:00:00",
      "transactions": [{"amount": 100, "date": "2024-01-05"}, ...]
    }

The document is parsed back through pydantic, so a file with a missing
field, a fractional amount or a bad date is reported as corrupt instead
of producing half a history.
"""

from datetime import datetime
from pathlib import Path
from typing import Optional, Sequence

from pydantic import BaseModel, Field, ValidationError

from src.models.transaction import Transaction
from src.services.storage.interface import (
    CorruptDataError,
    NotFoundError,
    StorageError,
    TransactionStorageInterface,
)


FORMAT_VERSION = 1


class TransactionFile(BaseModel):
    """On-disk layout of a saved history."""

    format_version: int = Field(
        default=FORMAT_VERSION,
        description="Layout version of the document"
    )
    saved_at: datetime = Field(
        default_factory=datetime.now,
        description="When the file was written"
    )
    transactions: list[Transaction] = Field(
        default_factory=list,
        description="Transactions in ledger order"
    )


class JsonFileTransactionStorage(TransactionStorageInterface):
    """
    File-backed transaction storage.

    Relative identifiers are resolved against base_dir when one is
    given, otherwise against the current working directory.
    """

    def __init__(self, base_dir: Optional[Path] = None, encoding: str = "utf-8"):
        self._base_dir = Path(base_dir) if base_dir is not None else None
        self._encoding = encoding

    def resolve(self, identifier: str) -> Path:
        """Map an identifier to the file it refers to."""
        path = Path(identifier).expanduser()
        if not path.is_absolute() and self._base_dir is not None:
            path = self._base_dir / path
        return path

    def save(self, identifier: str, transactions: Sequence[Transaction]) -> None:
        path = self.resolve(identifier)
        document = TransactionFile(transactions=list(transactions))
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(document.model_dump_json(indent=2), encoding=self._encoding)
        except OSError as e:
            raise StorageError(f"{path}: {e.strerror or e}") from e

    def load(self, identifier: str) -> list[Transaction]:
        path = self.resolve(identifier)
        try:
            raw = path.read_text(encoding=self._encoding)
        except FileNotFoundError as e:
            raise NotFoundError(f"{path} (No such file or directory)") from e
        except (OSError, UnicodeDecodeError) as e:
            raise StorageError(f"{path}: {e}") from e

        try:
            document = TransactionFile.model_validate_json(raw)
        except ValidationError as e:
            raise CorruptDataError(
                f"{path} is not a valid transaction file ({e.error_count()} errors)"
            ) from e

        if document.format_version != FORMAT_VERSION:
            raise CorruptDataError(
                f"{path} has unsupported format version {document.format_version}"
            )
        return list(document.transactions)
