"""
Audit Models for Personal Ledger

Every balance change, rejected request, save and load is logged.
This provides:
1. Traceability of how the balance got where it is
2. Debugging information when a file fails to load
3. A visible record of balance/history divergence after a load

DESIGN DECISION: Audit events are append-only. We never delete or modify them.
"""

from datetime import date, datetime
from enum import Enum
from typing import Any, Optional
from uuid import UUID, uuid4

from pydantic import BaseModel, Field


class AuditEventType(str, Enum):
    """Types of ledger events we audit."""
    # Balance changes
    DEPOSIT_APPLIED = "deposit_applied"
    DEPOSIT_IGNORED = "deposit_ignored"
    WITHDRAWAL_APPLIED = "withdrawal_applied"
    WITHDRAWAL_REJECTED = "withdrawal_rejected"

    # Persistence
    TRANSACTIONS_SAVED = "transactions_saved"
    SAVE_FAILED = "save_failed"
    TRANSACTIONS_LOADED = "transactions_loaded"
    LOAD_FAILED = "load_failed"
    BALANCE_DIVERGED = "balance_diverged"

    # Queries
    QUERY_EXECUTED = "query_executed"


class AuditSeverity(str, Enum):
    """Severity level for audit events."""
    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


class AuditEvent(BaseModel):
    """
    A single audit event.

    Every ledger operation creates exactly one of these, except load,
    which may add a BALANCE_DIVERGED warning after it.
    """

    # Identity
    event_id: UUID = Field(
        default_factory=uuid4,
        description="Unique event identifier"
    )
    timestamp: datetime = Field(
        default_factory=datetime.now,
        description="When the event occurred (local time)"
    )

    # Event classification
    event_type: AuditEventType = Field(
        ...,
        description="Type of event"
    )
    severity: AuditSeverity = Field(
        default=AuditSeverity.INFO,
        description="Event severity"
    )

    # Which ledger this is about
    customer_id: Optional[str] = Field(
        default=None,
        description="Owner of the ledger"
    )

    # Correlation - one id per caller action
    correlation_id: Optional[UUID] = Field(
        default=None,
        description="ID to correlate the events of one caller action"
    )

    description: str = Field(
        ...,
        description="Human-readable description of what happened"
    )
    details: dict[str, Any] = Field(
        default_factory=dict,
        description="Additional event-specific data"
    )
    error_message: Optional[str] = None

    def to_log_dict(self) -> dict:
        """
        Convert to a dictionary suitable for structured logging.
        """
        return {
            "event_id": str(self.event_id),
            "timestamp": self.timestamp.isoformat(),
            "event_type": self.event_type.value,
            "severity": self.severity.value,
            "customer_id": self.customer_id,
            "correlation_id": str(self.correlation_id) if self.correlation_id else None,
            "description": self.description,
            "details": self.details,
            "error_message": self.error_message,
        }


class AuditEventBuilder:
    """
    Helper class to build audit events for ledger operations.

    Usage:
        event = AuditEventBuilder.deposit_applied(100, 100, txn_date)
        event = AuditEventBuilder.load_failed("backup.json", "not found")
    """

    @staticmethod
    def deposit_applied(
        amount: int,
        balance: int,
        transaction_date: date,
        correlation_id: Optional[UUID] = None,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.DEPOSIT_APPLIED,
            correlation_id=correlation_id,
            description=f"Deposited {amount}",
            details={
                "amount": amount,
                "balance": balance,
                "date": transaction_date.isoformat(),
            },
        )

    @staticmethod
    def deposit_ignored(
        amount: int,
        correlation_id: Optional[UUID] = None,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.DEPOSIT_IGNORED,
            severity=AuditSeverity.DEBUG,
            correlation_id=correlation_id,
            description=f"Ignored non-positive deposit of {amount}",
            details={"amount": amount},
        )

    @staticmethod
    def withdrawal_applied(
        amount: int,
        balance: int,
        transaction_date: date,
        correlation_id: Optional[UUID] = None,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.WITHDRAWAL_APPLIED,
            correlation_id=correlation_id,
            description=f"Withdrew {amount}",
            details={
                "amount": amount,
                "balance": balance,
                "date": transaction_date.isoformat(),
            },
        )

    @staticmethod
    def withdrawal_rejected(
        amount: int,
        balance: int,
        correlation_id: Optional[UUID] = None,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.WITHDRAWAL_REJECTED,
            severity=AuditSeverity.WARNING,
            correlation_id=correlation_id,
            description=f"Rejected withdrawal of {amount} against balance {balance}",
            details={
                "amount": amount,
                "balance": balance,
            },
        )

    @staticmethod
    def transactions_saved(
        path: str,
        count: int,
        correlation_id: Optional[UUID] = None,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.TRANSACTIONS_SAVED,
            correlation_id=correlation_id,
            description=f"Saved {count} transactions",
            details={"path": path, "count": count},
        )

    @staticmethod
    def save_failed(
        path: str,
        error_message: str,
        correlation_id: Optional[UUID] = None,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.SAVE_FAILED,
            severity=AuditSeverity.ERROR,
            correlation_id=correlation_id,
            description="Could not save transactions",
            error_message=error_message,
            details={"path": path},
        )

    @staticmethod
    def transactions_loaded(
        path: str,
        count: int,
        correlation_id: Optional[UUID] = None,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.TRANSACTIONS_LOADED,
            correlation_id=correlation_id,
            description=f"Loaded {count} transactions",
            details={"path": path, "count": count},
        )

    @staticmethod
    def load_failed(
        path: str,
        error_message: str,
        discarded: int,
        correlation_id: Optional[UUID] = None,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.LOAD_FAILED,
            severity=AuditSeverity.ERROR,
            correlation_id=correlation_id,
            description="Could not load transactions, history cleared",
            error_message=error_message,
            details={"path": path, "discarded": discarded},
        )

    @staticmethod
    def balance_diverged(
        balance: int,
        history_total: int,
        correlation_id: Optional[UUID] = None,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.BALANCE_DIVERGED,
            severity=AuditSeverity.WARNING,
            correlation_id=correlation_id,
            description="Balance no longer matches transaction history",
            details={
                "balance": balance,
                "history_total": history_total,
                "difference": balance - history_total,
            },
        )

    @staticmethod
    def query_executed(
        description: str,
        result_count: int,
        correlation_id: Optional[UUID] = None,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.QUERY_EXECUTED,
            severity=AuditSeverity.DEBUG,
            correlation_id=correlation_id,
            description=f"Query returned {result_count} results",
            details={
                "query": description,
                "result_count": result_count,
            },
        )
