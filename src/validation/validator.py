"""
Input Validation

DESIGN DECISION: The ledger trusts its arguments. Everything a user
types is checked here first, by the frontend, before any ledger call.

Each parse_* method either returns a clean value or raises
InputValidationError with a message that can be shown as-is. It
NEVER silently fixes input (no rounding, no clamping); the frontend
re-prompts instead.
"""

from datetime import date, datetime
from typing import Optional

from src.config import get_settings


MIN_MONTH = 1
MAX_MONTH = 12


class InputValidationError(ValueError):
    """User input that cannot be passed to the ledger."""
    pass


class InputValidator:
    """
    Parses raw text typed at a prompt into ledger arguments.
    """

    def __init__(self, date_format: Optional[str] = None):
        """
        Args:
            date_format: strptime format for dates. Defaults to the
                         configured LEDGER_DATE_FORMAT.
        """
        self.date_format = date_format or get_settings().ledger.date_format

    def parse_choice(self, raw: str) -> str:
        """First non-blank character of the input."""
        text = raw.strip()
        if not text:
            raise InputValidationError("Please choose an action.")
        return text[0]

    def parse_amount(self, raw: str) -> int:
        """A strictly positive whole amount."""
        try:
            amount = int(raw.strip())
        except ValueError:
            raise InputValidationError(
                "Invalid input. Please enter a valid integer amount."
            )
        if amount <= 0:
            raise InputValidationError("Amount must be greater than zero.")
        return amount

    def parse_date(self, raw: str) -> date:
        text = raw.strip()
        try:
            parsed = datetime.strptime(text, self.date_format).date()
        except ValueError:
            raise InputValidationError("Invalid date format. Please try again.")
        # strptime accepts unpadded fields; the format demands zero padding
        if parsed.strftime(self.date_format) != text:
            raise InputValidationError("Invalid date format. Please try again.")
        return parsed

    def parse_year(self, raw: str) -> int:
        try:
            return int(raw.strip())
        except ValueError:
            raise InputValidationError("Invalid input. Please enter a valid year.")

    def parse_month(self, raw: str) -> int:
        try:
            month = int(raw.strip())
        except ValueError:
            raise InputValidationError("Invalid input. Please enter a valid month.")
        if not MIN_MONTH <= month <= MAX_MONTH:
            raise InputValidationError(
                f"Month must be between {MIN_MONTH} and {MAX_MONTH}."
            )
        return month

    def parse_filename(self, raw: str, default: Optional[str] = None) -> str:
        """A file name; blank input falls back to default when one is given."""
        name = raw.strip()
        if not name:
            if default:
                return default
            raise InputValidationError("Please enter a file name.")
        return name

    @property
    def date_format_hint(self) -> str:
        """Human form of the date format, e.g. yyyy-MM-dd."""
        return (
            self.date_format
            .replace("%Y", "yyyy")
            .replace("%m", "MM")
            .replace("%d", "dd")
        )
