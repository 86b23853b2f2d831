"""
Tests for the console menu, driven by scripted input.
"""

import pytest
from datetime import date

from src.models.transaction import Transaction
from src.shell import LedgerShell
from src.validation import InputValidator


class ScriptedConsole:
    """Feeds answers to prompts and records everything printed."""

    def __init__(self, answers):
        self._answers = list(answers)
        self.prompts = []
        self.output = []

    def input(self, prompt):
        self.prompts.append(prompt)
        if not self._answers:
            raise EOFError
        return self._answers.pop(0)

    def print(self, line):
        self.output.append(line)


def run_shell(ledger, storage, answers, default_filename=None):
    console = ScriptedConsole(answers)
    LedgerShell(
        ledger=ledger,
        storage=storage,
        validator=InputValidator(date_format="%Y-%m-%d"),
        input_func=console.input,
        output_func=console.print,
        default_filename=default_filename,
    ).run()
    return console


class TestLedgerShell:
    """Tests for LedgerShell menu handling."""

    def test_deposit_withdraw_session(self, ledger, storage):
        console = run_shell(
            ledger, storage, ["2", "100", "1", "3", "150", "3", "50", "4", "0"]
        )
        assert "Deposited: 100" in console.output
        assert "Balance: 100" in console.output
        assert "Insufficient funds or invalid amount." in console.output
        assert "Withdrawn: 50" in console.output
        assert "Amount: 100 Date: 2024-01-05" in console.output
        assert "Amount: -50 Date: 2024-01-05" in console.output
        assert console.output[-1] == "Exiting..."
        assert ledger.get_balance() == 50

    def test_menu_is_shown_before_each_choice(self, ledger, storage):
        console = run_shell(ledger, storage, ["1", "0"])
        menus = [line for line in console.output if "1: Check balance" in line]
        assert len(menus) == 2

    def test_invalid_choice(self, ledger, storage):
        console = run_shell(ledger, storage, ["x", "0"])
        assert "Invalid choice. Please try again." in console.output

    def test_amount_is_reprompted_until_valid(self, ledger, storage):
        console = run_shell(ledger, storage, ["2", "abc", "-5", "20", "0"])
        assert "Invalid input. Please enter a valid integer amount." in console.output
        assert "Amount must be greater than zero." in console.output
        assert console.prompts.count("Enter amount: ") == 3
        assert ledger.get_balance() == 20

    def test_empty_history(self, ledger, storage):
        console = run_shell(ledger, storage, ["4", "0"])
        assert "No transactions executed." in console.output

    def test_history_by_day(self, ledger, storage, clock):
        ledger.deposit(10)
        clock.set(date(2024, 2, 1))
        ledger.deposit(20)
        console = run_shell(ledger, storage, ["5", "bad", "2024-02-01", "0"])
        assert "Invalid date format. Please try again." in console.output
        assert "Enter date (yyyy-MM-dd): " in console.prompts
        assert "Transactions on 2024-02-01:" in console.output
        assert "Amount: 20 Date: 2024-02-01" in console.output
        assert "Amount: 10 Date: 2024-01-05" not in console.output

    def test_history_by_month_reprompts_month(self, ledger, storage):
        ledger.deposit(10)
        console = run_shell(ledger, storage, ["6", "2024", "13", "1", "0"])
        assert "Month must be between 1 and 12." in console.output
        assert "Transactions in 2024-01:" in console.output
        assert "Amount: 10 Date: 2024-01-05" in console.output

    def test_history_by_year_without_matches(self, ledger, storage):
        ledger.deposit(10)
        console = run_shell(ledger, storage, ["7", "1999", "0"])
        assert "Transactions in 1999:" in console.output
        assert "No transactions found." in console.output

    def test_save_and_load(self, ledger, storage):
        ledger.deposit(10)
        console = run_shell(ledger, storage, ["8", "backup.json", "0"])
        assert "Transactions have been saved to file." in console.output
        assert storage.load("backup.json") == [Transaction(amount=10, date=date(2024, 1, 5))]

        storage.save("other.json", [])
        console = run_shell(ledger, storage, ["9", "other.json", "1", "0"])
        assert "Loaded 0 transactions." in console.output
        assert "Balance: 10" in console.output
        assert ledger.transactions == ()

    def test_load_missing_file(self, ledger, storage):
        console = run_shell(ledger, storage, ["9", "missing.json", "0"])
        assert any(line.startswith("Could not load from file:") for line in console.output)

    def test_blank_filename_uses_default(self, ledger, storage):
        console = run_shell(ledger, storage, ["8", "", "0"], default_filename="transactions.json")
        assert "Enter filename [transactions.json]: " in console.prompts
        assert "transactions.json" in storage

    def test_end_of_input_exits(self, ledger, storage):
        console = run_shell(ledger, storage, ["2"])
        assert console.output[-1] == "Exiting..."
        assert ledger.get_balance() == 0


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
