"""
Console Menu

The interactive text frontend. It owns all prompting and printing and
calls the ledger one operation per menu choice.

DESIGN PRINCIPLES:
1. Keep asking until the input is valid, then call the ledger once
2. Print whatever the ledger result says, nothing more
3. Never exit on a failed operation; only "0" (or end of input) exits
"""

from typing import Callable, Optional, TypeVar

from src.audit import create_correlation_id
from src.config import get_settings
from src.ledger import Ledger
from src.models.transaction import LedgerResult
from src.orchestrator import create_app_components
from src.services.storage import TransactionStorageInterface
from src.validation import InputValidationError, InputValidator


T = TypeVar("T")

MENU = (
    "\n1: Check balance"
    "\n2: Deposit"
    "\n3: Withdraw"
    "\n4: Show transaction history"
    "\n5: Show transaction history by day"
    "\n6: Show transaction history by month"
    "\n7: Show transaction history by year"
    "\n8: Save transactions"
    "\n9: Load transactions"
    "\n0: Exit"
)

EXIT_CHOICE = "0"


class LedgerShell:
    """
    Menu loop driving a Ledger.

    input_func and output_func default to input() and print(); tests
    pass scripted replacements.
    """

    def __init__(
        self,
        ledger: Ledger,
        storage: TransactionStorageInterface,
        validator: Optional[InputValidator] = None,
        input_func: Callable[[str], str] = input,
        output_func: Callable[[str], None] = print,
        default_filename: Optional[str] = None,
    ):
        self._ledger = ledger
        self._storage = storage
        self._validator = validator or InputValidator()
        self._input = input_func
        self._output = output_func
        self._default_filename = default_filename
        self._actions: dict[str, Callable[[], None]] = {
            "1": self.show_balance,
            "2": self.deposit,
            "3": self.withdraw,
            "4": self.show_history,
            "5": self.show_history_by_day,
            "6": self.show_history_by_month,
            "7": self.show_history_by_year,
            "8": self.save,
            "9": self.load,
        }

    def run(self) -> None:
        """Show the menu and dispatch choices until the user exits."""
        while True:
            self._output(MENU)
            try:
                choice = self._ask("Choose an action to perform: ", self._validator.parse_choice)
            except EOFError:
                self._output("Exiting...")
                return

            if choice == EXIT_CHOICE:
                self._output("Exiting...")
                return

            action = self._actions.get(choice)
            if action is None:
                self._output("Invalid choice. Please try again.")
                continue

            try:
                action()
            except EOFError:
                self._output("Exiting...")
                return

    # -------------------------------------------------------------------------
    # Actions
    # -------------------------------------------------------------------------

    def show_balance(self) -> None:
        self._output(f"Balance: {self._ledger.get_balance()}")

    def deposit(self) -> None:
        amount = self._ask("Enter amount: ", self._validator.parse_amount)
        self._print(self._ledger.deposit(amount, correlation_id=create_correlation_id()))

    def withdraw(self) -> None:
        amount = self._ask("Enter amount: ", self._validator.parse_amount)
        self._print(self._ledger.withdraw(amount, correlation_id=create_correlation_id()))

    def show_history(self) -> None:
        self._print(self._ledger.list_all_transactions())

    def show_history_by_day(self) -> None:
        on_date = self._ask(
            f"Enter date ({self._validator.date_format_hint}): ",
            self._validator.parse_date,
        )
        self._print(self._ledger.list_transactions_on_date(on_date))

    def show_history_by_month(self) -> None:
        year = self._ask("Enter year (e.g. 2024): ", self._validator.parse_year)
        month = self._ask("Enter month (1-12): ", self._validator.parse_month)
        self._print(self._ledger.list_transactions_in_month(year, month))

    def show_history_by_year(self) -> None:
        year = self._ask("Enter year (e.g. 2024): ", self._validator.parse_year)
        self._print(self._ledger.list_transactions_in_year(year))

    def save(self) -> None:
        filename = self._ask_filename()
        self._print(
            self._ledger.save_to(self._storage, filename, correlation_id=create_correlation_id())
        )

    def load(self) -> None:
        filename = self._ask_filename()
        self._print(
            self._ledger.load_from(self._storage, filename, correlation_id=create_correlation_id())
        )

    # -------------------------------------------------------------------------
    # Prompting
    # -------------------------------------------------------------------------

    def _ask(self, prompt: str, parse: Callable[[str], T]) -> T:
        """Prompt until parse accepts the answer. EOFError propagates."""
        while True:
            raw = self._input(prompt)
            try:
                return parse(raw)
            except InputValidationError as e:
                self._output(str(e))

    def _ask_filename(self) -> str:
        prompt = "Enter filename: "
        if self._default_filename:
            prompt = f"Enter filename [{self._default_filename}]: "
        return self._ask(
            prompt,
            lambda raw: self._validator.parse_filename(raw, self._default_filename),
        )

    def _print(self, result: LedgerResult) -> None:
        for line in result.lines():
            self._output(line)


def main() -> None:
    """Console entry point (`personal-ledger`)."""
    settings = get_settings().ledger
    ledger, storage, _ = create_app_components(use_file_storage=True)
    shell = LedgerShell(
        ledger=ledger,
        storage=storage,
        validator=InputValidator(settings.date_format),
        default_filename=settings.default_filename,
    )
    shell.run()


if __name__ == "__main__":
    main()
