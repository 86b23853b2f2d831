"""
Tests for the transaction storage backends.
"""

import json

import pytest
from datetime import date

from src.models.transaction import Transaction
from src.services.storage import (
    CorruptDataError,
    InMemoryTransactionStorage,
    JsonFileTransactionStorage,
    NotFoundError,
    StorageError,
)


@pytest.fixture
def history():
    return [
        Transaction(amount=100, date=date(2024, 1, 5)),
        Transaction(amount=-40, date=date(2024, 2, 29)),
        Transaction(amount=7, date=date(2023, 12, 31)),
    ]


class TestJsonFileStorage:
    """Tests for JsonFileTransactionStorage."""

    def test_round_trip_preserves_order_and_values(self, tmp_path, history):
        storage = JsonFileTransactionStorage(base_dir=tmp_path)
        storage.save("ledger.json", history)
        assert storage.load("ledger.json") == history

    def test_file_layout(self, tmp_path, history):
        storage = JsonFileTransactionStorage(base_dir=tmp_path)
        storage.save("ledger.json", history[:1])
        document = json.loads((tmp_path / "ledger.json").read_text(encoding="utf-8"))
        assert document["format_version"] == 1
        assert "saved_at" in document
        assert document["transactions"] == [{"amount": 100, "date": "2024-01-05"}]

    def test_save_overwrites(self, tmp_path, history):
        storage = JsonFileTransactionStorage(base_dir=tmp_path)
        storage.save("ledger.json", history)
        storage.save("ledger.json", history[1:2])
        assert storage.load("ledger.json") == history[1:2]

    def test_empty_history_round_trip(self, tmp_path):
        storage = JsonFileTransactionStorage(base_dir=tmp_path)
        storage.save("empty.json", [])
        assert storage.load("empty.json") == []

    def test_relative_names_resolve_under_base_dir(self, tmp_path, history):
        storage = JsonFileTransactionStorage(base_dir=tmp_path / "data")
        storage.save("nested/ledger.json", history)
        assert (tmp_path / "data" / "nested" / "ledger.json").exists()

    def test_absolute_path_ignores_base_dir(self, tmp_path, history):
        storage = JsonFileTransactionStorage(base_dir=tmp_path / "data")
        target = tmp_path / "elsewhere.json"
        storage.save(str(target), history)
        assert target.exists()
        assert storage.load(str(target)) == history

    def test_missing_file(self, tmp_path):
        storage = JsonFileTransactionStorage(base_dir=tmp_path)
        with pytest.raises(NotFoundError):
            storage.load("nope.json")

    def test_missing_file_is_a_storage_error(self, tmp_path):
        storage = JsonFileTransactionStorage(base_dir=tmp_path)
        with pytest.raises(StorageError):
            storage.load("nope.json")

    @pytest.mark.parametrize(
        "content",
        [
            "not json at all",
            '{"format_version": 1, "transactions": [{"amount": 1.5, "date": "2024-01-05"}]}',
            '{"format_version": 1, "transactions": [{"amount": 10, "date": "2024-13-01"}]}',
            '{"format_version": 1, "transactions": [{"date": "2024-01-05"}]}',
            '{"format_version": 2, "transactions": []}',
        ],
    )
    def test_corrupt_file(self, tmp_path, content):
        (tmp_path / "bad.json").write_text(content, encoding="utf-8")
        storage = JsonFileTransactionStorage(base_dir=tmp_path)
        with pytest.raises(CorruptDataError):
            storage.load("bad.json")

    def test_save_to_a_directory_fails(self, tmp_path, history):
        (tmp_path / "taken").mkdir()
        storage = JsonFileTransactionStorage(base_dir=tmp_path)
        with pytest.raises(StorageError):
            storage.save("taken", history)


class TestInMemoryStorage:
    """Tests for InMemoryTransactionStorage."""

    def test_round_trip(self, history):
        storage = InMemoryTransactionStorage()
        storage.save("a", history)
        assert storage.load("a") == history
        assert "a" in storage

    def test_missing(self):
        with pytest.raises(NotFoundError):
            InMemoryTransactionStorage().load("a")

    def test_histories_are_copied(self, history):
        storage = InMemoryTransactionStorage()
        storage.save("a", history)
        history.append(Transaction(amount=1, date=date(2024, 1, 1)))
        loaded = storage.load("a")
        loaded.clear()
        assert len(storage.load("a")) == 3
