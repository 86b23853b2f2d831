"""Query execution package."""

from src.queries.executor import QueryExecutor, QueryScope, TransactionQuery

__all__ = ["QueryExecutor", "QueryScope", "TransactionQuery"]
