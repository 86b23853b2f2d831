"""Console frontend package."""

from src.shell.menu import LedgerShell, main

__all__ = ["LedgerShell", "main"]
