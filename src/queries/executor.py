"""
Query Execution Engine

DESIGN DECISION: History queries are plain data. A TransactionQuery
says WHAT to select (everything, one day, one month, one year); the
executor applies it to a history and never reorders or copies entries.

Filtering guarantees:
- Output order is ledger order
- Matching is exact on calendar fields, no ranges, no time zones
- Month and year are NOT range-checked here; an impossible month just
  matches nothing
"""

from datetime import date
from enum import Enum
from typing import Iterable, Optional

from pydantic import BaseModel, Field, model_validator

from src.models.transaction import Transaction


class QueryScope(str, Enum):
    """Which part of the history a query selects."""
    ALL = "all"
    DAY = "day"
    MONTH = "month"
    YEAR = "year"


class TransactionQuery(BaseModel):
    """
    A date-based history query.

    Built through the class methods rather than directly, so the right
    fields are always set for each scope.
    """

    scope: QueryScope = Field(
        default=QueryScope.ALL,
        description="Which part of the history to select"
    )
    on_date: Optional[date] = Field(
        default=None,
        description="Day to match (DAY scope)"
    )
    year: Optional[int] = Field(
        default=None,
        description="Year to match (MONTH and YEAR scopes)"
    )
    month: Optional[int] = Field(
        default=None,
        description="Month number to match (MONTH scope)"
    )

    @model_validator(mode="after")
    def check_scope_fields(self) -> "TransactionQuery":
        if self.scope == QueryScope.DAY and self.on_date is None:
            raise ValueError("A day query needs a date")
        if self.scope in (QueryScope.MONTH, QueryScope.YEAR) and self.year is None:
            raise ValueError(f"A {self.scope.value} query needs a year")
        if self.scope == QueryScope.MONTH and self.month is None:
            raise ValueError("A month query needs a month")
        return self

    @classmethod
    def everything(cls) -> "TransactionQuery":
        return cls(scope=QueryScope.ALL)

    @classmethod
    def on_day(cls, on_date: date) -> "TransactionQuery":
        return cls(scope=QueryScope.DAY, on_date=on_date)

    @classmethod
    def in_month(cls, year: int, month: int) -> "TransactionQuery":
        return cls(scope=QueryScope.MONTH, year=year, month=month)

    @classmethod
    def in_year(cls, year: int) -> "TransactionQuery":
        return cls(scope=QueryScope.YEAR, year=year)

    def matches(self, transaction: Transaction) -> bool:
        if self.scope == QueryScope.DAY:
            return transaction.date == self.on_date
        if self.scope == QueryScope.MONTH:
            return (
                transaction.date.year == self.year
                and transaction.date.month == self.month
            )
        if self.scope == QueryScope.YEAR:
            return transaction.date.year == self.year
        return True

    def heading(self) -> Optional[str]:
        """Heading printed above the results; None for the full history."""
        if self.scope == QueryScope.DAY:
            return f"Transactions on {self.on_date.isoformat()}:"
        if self.scope == QueryScope.MONTH:
            return f"Transactions in {self.year}-{self.month:02d}:"
        if self.scope == QueryScope.YEAR:
            return f"Transactions in {self.year}:"
        return None


class QueryExecutor:
    """
    Applies TransactionQuery objects to a transaction history.

    GUARANTEES:
    - Only returns transactions that are in the history
    - Preserves insertion order
    - Returns an empty list, never None, when nothing matches
    """

    def execute(
        self,
        query: TransactionQuery,
        transactions: Iterable[Transaction],
    ) -> list[Transaction]:
        return [t for t in transactions if query.matches(t)]
