"""
Shared fixtures.

Settings are read from the environment and cached, so every test gets
its own data directory and a fresh settings cache.
"""

from datetime import date
from pathlib import Path

import pytest

from src.audit import AuditLogger
from src.config import get_settings
from src.ledger import Ledger
from src.services.clock import FixedClock
from src.services.storage import InMemoryTransactionStorage


@pytest.fixture(autouse=True)
def _isolate_settings(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("LEDGER_DATA_DIR", str(tmp_path / "data"))
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock(date(2024, 1, 5))


@pytest.fixture
def storage() -> InMemoryTransactionStorage:
    return InMemoryTransactionStorage()


@pytest.fixture
def audit_logger() -> AuditLogger:
    return AuditLogger(customer_id="JD123")


@pytest.fixture
def ledger(clock: FixedClock, audit_logger: AuditLogger) -> Ledger:
    return Ledger(customer_id="JD123", clock=clock, audit_logger=audit_logger)
