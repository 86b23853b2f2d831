"""
Data Models Package

This package contains all Pydantic models used in the Personal Ledger.
Everything the ledger stores or returns conforms to these schemas.
"""

from src.models.transaction import (
    LedgerOutcome,
    LedgerResult,
    Transaction,
)
from src.models.audit import (
    AuditEvent,
    AuditEventBuilder,
    AuditEventType,
    AuditSeverity,
)

__all__ = [
    # Ledger models
    "LedgerOutcome",
    "LedgerResult",
    "Transaction",
    # Audit models
    "AuditEvent",
    "AuditEventBuilder",
    "AuditEventType",
    "AuditSeverity",
]
