"""
Ledger

The ledger owns one account balance and its transaction history.
It is the only thing allowed to change either.

RULES:
1. Deposits must be positive; anything else is ignored
2. Withdrawals must be positive and covered by the balance
3. Every accepted change appends one Transaction dated "today"
4. Loading a history replaces the transactions but leaves the balance
   alone (see load_from)

Every operation returns a LedgerResult instead of printing or raising,
so any frontend can present the outcome its own way.
"""

from datetime import date
from typing import Optional
from uuid import UUID

from src.audit import AuditLogger
from src.models.audit import AuditEventBuilder
from src.models.transaction import LedgerOutcome, LedgerResult, Transaction
from src.queries import QueryExecutor, TransactionQuery
from src.services.clock import Clock, SystemClock
from src.services.storage import StorageError, TransactionStorageInterface


NO_TRANSACTIONS_MESSAGE = "No transactions executed."
NO_MATCHES_MESSAGE = "No transactions found."
INSUFFICIENT_FUNDS_MESSAGE = "Insufficient funds or invalid amount."
INVALID_DEPOSIT_MESSAGE = "Deposit amount must be positive."
SAVED_MESSAGE = "Transactions have been saved to file."


class Ledger:
    """
    Single-account ledger.

    Not thread-safe: operations are expected one at a time from a
    single caller.
    """

    def __init__(
        self,
        customer_id: Optional[str] = None,
        clock: Optional[Clock] = None,
        audit_logger: Optional[AuditLogger] = None,
    ):
        self.customer_id = customer_id
        self._clock = clock or SystemClock()
        self._audit_logger = audit_logger
        self._executor = QueryExecutor()
        self._balance = 0
        self._transactions: list[Transaction] = []

    # -------------------------------------------------------------------------
    # State
    # -------------------------------------------------------------------------

    @property
    def balance(self) -> int:
        return self._balance

    @property
    def transactions(self) -> tuple[Transaction, ...]:
        """The history in insertion order (read-only view)."""
        return tuple(self._transactions)

    def get_balance(self) -> int:
        return self._balance

    def history_total(self) -> int:
        """Sum of all transaction amounts currently in the history."""
        return sum(t.amount for t in self._transactions)

    @property
    def is_consistent(self) -> bool:
        """
        True while the balance equals the history total.

        Only a load can make this False.
        """
        return self._balance == self.history_total()

    # -------------------------------------------------------------------------
    # Balance changes
    # -------------------------------------------------------------------------

    def deposit(self, amount: int, correlation_id: Optional[UUID] = None) -> LedgerResult:
        """
        Add amount to the balance.

        A non-positive amount is not an error: nothing changes and the
        result says INVALID_AMOUNT.
        """
        if amount <= 0:
            self._audit(AuditEventBuilder.deposit_ignored(amount, correlation_id))
            return self._result(LedgerOutcome.INVALID_AMOUNT, INVALID_DEPOSIT_MESSAGE)

        transaction = self._append(amount)
        self._audit(
            AuditEventBuilder.deposit_applied(
                amount, self._balance, transaction.date, correlation_id
            )
        )
        return self._result(
            LedgerOutcome.OK,
            f"Deposited: {amount}",
        )

    def withdraw(self, amount: int, correlation_id: Optional[UUID] = None) -> LedgerResult:
        """
        Take amount off the balance.

        Rejected, with no state change, unless 0 < amount <= balance.
        """
        if amount <= 0 or amount > self._balance:
            self._audit(
                AuditEventBuilder.withdrawal_rejected(amount, self._balance, correlation_id)
            )
            return self._result(LedgerOutcome.INSUFFICIENT_FUNDS, INSUFFICIENT_FUNDS_MESSAGE)

        transaction = self._append(-amount)
        self._audit(
            AuditEventBuilder.withdrawal_applied(
                amount, self._balance, transaction.date, correlation_id
            )
        )
        return self._result(
            LedgerOutcome.OK,
            f"Withdrawn: {amount}",
        )

    def _append(self, amount: int) -> Transaction:
        transaction = Transaction(amount=amount, date=self._clock.today())
        self._balance += amount
        self._transactions.append(transaction)
        return transaction

    # -------------------------------------------------------------------------
    # History queries
    # -------------------------------------------------------------------------

    def list_all_transactions(self) -> LedgerResult:
        return self._query(TransactionQuery.everything(), NO_TRANSACTIONS_MESSAGE)

    def list_transactions_on_date(self, on_date: date) -> LedgerResult:
        return self._query(TransactionQuery.on_day(on_date))

    def list_transactions_in_month(self, year: int, month: int) -> LedgerResult:
        return self._query(TransactionQuery.in_month(year, month))

    def list_transactions_in_year(self, year: int) -> LedgerResult:
        return self._query(TransactionQuery.in_year(year))

    def _query(
        self,
        query: TransactionQuery,
        empty_message: str = NO_MATCHES_MESSAGE,
    ) -> LedgerResult:
        matches = self._executor.execute(query, self._transactions)
        description = query.heading()
        self._audit(
            AuditEventBuilder.query_executed(
                description or "all transactions", len(matches)
            )
        )
        if not matches:
            return self._result(
                LedgerOutcome.EMPTY_RESULT, empty_message, description=description
            )
        return self._result(
            LedgerOutcome.OK, transactions=matches, description=description
        )

    # -------------------------------------------------------------------------
    # Persistence
    # -------------------------------------------------------------------------

    def save_to(
        self,
        storage: TransactionStorageInterface,
        path: str,
        correlation_id: Optional[UUID] = None,
    ) -> LedgerResult:
        """Write the whole history through storage. Ledger state is untouched."""
        try:
            storage.save(path, list(self._transactions))
        except StorageError as e:
            self._audit(AuditEventBuilder.save_failed(path, str(e), correlation_id))
            return self._result(
                LedgerOutcome.STORAGE_ERROR, f"Could not save to file: {e}"
            )

        self._audit(
            AuditEventBuilder.transactions_saved(
                path, len(self._transactions), correlation_id
            )
        )
        return self._result(LedgerOutcome.OK, SAVED_MESSAGE)

    def load_from(
        self,
        storage: TransactionStorageInterface,
        path: str,
        correlation_id: Optional[UUID] = None,
    ) -> LedgerResult:
        """
        Replace the history with the one stored at path.

        On failure the history is cleared, not kept. In both cases the
        balance is left as it was, so it can stop matching the history.
        This is long-standing behaviour that callers may rely on; it is
        reported through a BALANCE_DIVERGED audit event, not corrected.
        """
        try:
            loaded = storage.load(path)
        except StorageError as e:
            discarded = len(self._transactions)
            self._transactions = []
            self._audit(
                AuditEventBuilder.load_failed(path, str(e), discarded, correlation_id)
            )
            self._check_consistency(correlation_id)
            return self._result(
                LedgerOutcome.STORAGE_ERROR, f"Could not load from file: {e}"
            )

        self._transactions = list(loaded)
        self._audit(
            AuditEventBuilder.transactions_loaded(path, len(loaded), correlation_id)
        )
        self._check_consistency(correlation_id)
        return self._result(
            LedgerOutcome.OK,
            f"Loaded {len(loaded)} transactions.",
        )

    def _check_consistency(self, correlation_id: Optional[UUID]) -> None:
        if not self.is_consistent:
            self._audit(
                AuditEventBuilder.balance_diverged(
                    self._balance, self.history_total(), correlation_id
                )
            )

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------

    def _result(
        self,
        outcome: LedgerOutcome,
        message: str = "",
        transactions: Optional[list[Transaction]] = None,
        description: Optional[str] = None,
    ) -> LedgerResult:
        return LedgerResult(
            outcome=outcome,
            message=message,
            description=description,
            balance=self._balance,
            transactions=transactions or [],
        )

    def _audit(self, event) -> None:
        if self._audit_logger:
            self._audit_logger.log(event)
