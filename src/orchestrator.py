"""
Main Orchestrator for Personal Ledger

This module wires the components together for the frontends:
settings → clock → storage → audit logger → ledger.

DESIGN DECISION: Frontends never construct storage or ledgers
themselves. They call create_app_components() and only talk to the
objects it returns, so tests can swap any piece.
"""

from typing import Optional

import structlog

from src.audit import AuditLogger, configure_logging
from src.config import get_settings
from src.ledger import Ledger
from src.services.clock import Clock
from src.services.storage import (
    InMemoryTransactionStorage,
    JsonFileTransactionStorage,
    TransactionStorageInterface,
)


logger = structlog.get_logger("src.orchestrator")


def create_app_components(
    use_file_storage: bool = True,
    clock: Optional[Clock] = None,
    storage: Optional[TransactionStorageInterface] = None,
) -> tuple[Ledger, TransactionStorageInterface, AuditLogger]:
    """
    Factory function to create all application components.

    Args:
        use_file_storage: Save histories as JSON files under the
                    configured data directory. Set to False to keep
                    them in memory (tests, demos).
        clock: Date source for new transactions. Defaults to the
               system clock.
        storage: Explicit storage backend; overrides use_file_storage.

    Returns:
        (ledger, storage, audit_logger)
    """
    settings = get_settings()
    ledger_settings = settings.ledger
    configure_logging(settings.app.effective_log_level)

    if storage is None:
        if use_file_storage:
            storage = JsonFileTransactionStorage(base_dir=ledger_settings.data_dir)
        else:
            storage = InMemoryTransactionStorage()

    audit_logger = AuditLogger(customer_id=ledger_settings.customer_id)
    ledger = Ledger(
        customer_id=ledger_settings.customer_id,
        clock=clock,
        audit_logger=audit_logger,
    )

    logger.info(
        "components_created",
        customer_id=ledger_settings.customer_id,
        storage=type(storage).__name__,
    )
    return ledger, storage, audit_logger
