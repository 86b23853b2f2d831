"""
Tests for settings and component wiring.
"""

import pytest
from pathlib import Path

from pydantic import ValidationError

from src.audit import AuditLogger
from src.config import AppSettings, LedgerSettings, get_settings, validate_all_settings
from src.ledger import Ledger
from src.models.audit import AuditEventBuilder
from src.orchestrator import create_app_components
from src.services.storage import InMemoryTransactionStorage, JsonFileTransactionStorage


class TestSettings:
    """Tests for pydantic-settings configuration."""

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("LEDGER_DATA_DIR")
        settings = LedgerSettings()
        assert settings.customer_id == "JD123"
        assert settings.data_dir == Path(".data")
        assert settings.default_filename == "transactions.json"
        assert settings.date_format == "%Y-%m-%d"

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("LEDGER_CUSTOMER_ID", "AB999")
        monkeypatch.setenv("LEDGER_DEFAULT_FILENAME", "  mine.json ")
        settings = get_settings().ledger
        assert settings.customer_id == "AB999"
        assert settings.default_filename == "mine.json"

    def test_blank_default_filename_rejected(self, monkeypatch):
        monkeypatch.setenv("LEDGER_DEFAULT_FILENAME", "   ")
        with pytest.raises(ValidationError):
            LedgerSettings()

    def test_log_level(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "info")
        assert AppSettings().log_level == "INFO"
        monkeypatch.setenv("DEBUG_MODE", "true")
        assert AppSettings().effective_log_level == "DEBUG"

    def test_bad_log_level(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "loud")
        with pytest.raises(ValidationError):
            AppSettings()
        results = validate_all_settings()
        assert results["ledger"] is True
        assert results["app"] is False
        assert "app_error" in results

    def test_get_settings_is_cached(self):
        assert get_settings() is get_settings()


class TestAppComponents:
    """Tests for create_app_components."""

    def test_file_storage_under_data_dir(self, tmp_path, clock):
        ledger, storage, audit_logger = create_app_components(clock=clock)
        assert isinstance(ledger, Ledger)
        assert isinstance(storage, JsonFileTransactionStorage)
        assert storage.resolve("x.json") == tmp_path / "data" / "x.json"

        ledger.deposit(10)
        ledger.save_to(storage, "x.json")
        assert (tmp_path / "data" / "x.json").exists()
        assert audit_logger.events[-1].customer_id == "JD123"

    def test_memory_storage(self):
        _, storage, _ = create_app_components(use_file_storage=False)
        assert isinstance(storage, InMemoryTransactionStorage)

    def test_explicit_storage_wins(self):
        explicit = InMemoryTransactionStorage()
        _, storage, _ = create_app_components(storage=explicit)
        assert storage is explicit


class TestAuditLogger:
    """Tests for AuditLogger."""

    def test_stamps_customer_id(self):
        logger = AuditLogger(customer_id="JD123")
        assert logger.log(AuditEventBuilder.withdrawal_rejected(5, 0)) is True
        assert logger.events[0].customer_id == "JD123"

    def test_keeps_existing_customer_id(self):
        logger = AuditLogger(customer_id="JD123")
        event = AuditEventBuilder.deposit_ignored(0).model_copy(update={"customer_id": "X"})
        logger.log(event)
        assert logger.events[0].customer_id == "X"

    def test_trail_can_be_disabled(self):
        logger = AuditLogger(keep_trail=False)
        assert logger.log(AuditEventBuilder.deposit_ignored(0)) is True
        assert logger.events == []

    def test_trail_is_capped(self):
        logger = AuditLogger(max_events=3)
        for amount in range(5):
            logger.log(AuditEventBuilder.deposit_ignored(-amount))
        assert len(logger.events) == 3
        assert [e.details["amount"] for e in logger.events] == [-2, -3, -4]
