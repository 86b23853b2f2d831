"""
Core Data Models for Personal Ledger

These models define the schemas for everything the ledger produces:
1. Transaction - one immutable balance change
2. LedgerResult - the answer to every ledger operation

DESIGN DECISION: Amounts are plain integers. A positive amount is a
deposit, a negative amount is a withdrawal. There is no currency and no
fractional part.
"""

from datetime import date as dt_date
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, StrictInt


# =============================================================================
# TRANSACTION
# =============================================================================

class Transaction(BaseModel):
    """
    A single dated balance change.

    Transactions are frozen: once created they are never modified.
    They only disappear when the whole history is replaced by a load.
    """
    model_config = ConfigDict(frozen=True)

    amount: StrictInt = Field(
        ...,
        description="Signed amount (positive = deposit, negative = withdrawal)"
    )
    date: dt_date = Field(
        ...,
        description="Calendar day the transaction was applied"
    )

    @property
    def is_deposit(self) -> bool:
        return self.amount > 0

    @property
    def is_withdrawal(self) -> bool:
        return self.amount < 0

    def describe(self) -> str:
        """One-line display form used by every frontend."""
        return f"Amount: {self.amount} Date: {self.date.isoformat()}"


# =============================================================================
# OPERATION RESULTS
# =============================================================================

class LedgerOutcome(str, Enum):
    """
    How a ledger operation ended.

    None of these are fatal. The caller is expected to carry on.
    """
    OK = "ok"
    INVALID_AMOUNT = "invalid_amount"          # amount <= 0, ignored
    INSUFFICIENT_FUNDS = "insufficient_funds"  # withdrawal larger than balance
    STORAGE_ERROR = "storage_error"            # save/load failed
    EMPTY_RESULT = "empty_result"              # listing matched nothing


class LedgerResult(BaseModel):
    """
    Result of a ledger operation.

    Mutating operations report the balance after the call.
    Listing operations carry the matching transactions in ledger order.
    """

    outcome: LedgerOutcome = Field(
        default=LedgerOutcome.OK,
        description="How the operation ended"
    )
    message: str = Field(
        default="",
        description="Human-readable confirmation or failure reason"
    )
    description: Optional[str] = Field(
        default=None,
        description="Heading describing what was queried"
    )
    balance: int = Field(
        ...,
        description="Balance after the operation"
    )
    transactions: list[Transaction] = Field(
        default_factory=list,
        description="Matching transactions, in insertion order"
    )

    @property
    def success(self) -> bool:
        return self.outcome in (LedgerOutcome.OK, LedgerOutcome.EMPTY_RESULT)

    @property
    def data_found(self) -> bool:
        return len(self.transactions) > 0

    @property
    def result_count(self) -> int:
        return len(self.transactions)

    def lines(self) -> list[str]:
        """Render the result the way the console shell prints it."""
        output = []
        if self.description:
            output.append(self.description)
        output.extend(t.describe() for t in self.transactions)
        if self.message:
            output.append(self.message)
        return output
