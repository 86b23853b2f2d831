"""Input validation package."""

from src.validation.validator import InputValidationError, InputValidator

__all__ = ["InputValidationError", "InputValidator"]
