"""
Audit Logger

Every ledger operation is logged. This provides:
1. Traceability of every balance change
2. Debugging capability for failed saves and loads
3. A trail the frontends can show to the user

The audit logger:
- Is synchronous, like the ledger itself
- Never raises (a failing log must not break a deposit)
- Supports correlation IDs to trace the events of one caller action
"""

import logging
from collections import deque
from typing import Optional
from uuid import UUID, uuid4

import structlog

from src.models.audit import AuditEvent, AuditSeverity


# Configure structlog for local logging
structlog.configure(
    processors=[
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
        structlog.processors.JSONRenderer()
    ],
    wrapper_class=structlog.stdlib.BoundLogger,
    context_class=dict,
    logger_factory=structlog.stdlib.LoggerFactory(),
    cache_logger_on_first_use=True,
)


def configure_logging(level: str = "INFO") -> None:
    """
    Route structlog output to stderr at the given level.

    structlog renders the JSON line; stdlib logging only decides
    whether it is emitted and where it goes.
    """
    logging.basicConfig(format="%(message)s", level=level.upper())
    logging.getLogger("src").setLevel(level.upper())


class AuditLogger:
    """
    Central audit logging service.

    Logs events both to:
    1. Structured local log (for debugging)
    2. An in-memory trail (for frontends and tests)
    """

    def __init__(
        self,
        customer_id: Optional[str] = None,
        keep_trail: bool = True,
        max_events: int = 500,
    ):
        """
        Initialize audit logger.

        Args:
            customer_id: Stamped onto every event that has none.
            keep_trail: If False, events are only logged, not retained.
            max_events: Size of the trail; the oldest events are dropped first.
        """
        self._customer_id = customer_id
        self._keep_trail = keep_trail
        self._events: deque[AuditEvent] = deque(maxlen=max_events)
        self._logger = structlog.get_logger("src.audit")

    @property
    def events(self) -> list[AuditEvent]:
        """Events logged so far, oldest first."""
        return list(self._events)

    def log(self, event: AuditEvent) -> bool:
        """
        Log an audit event.

        Returns True if the event was recorded.
        """
        if event.customer_id is None and self._customer_id is not None:
            event = event.model_copy(update={"customer_id": self._customer_id})

        log_dict = event.to_log_dict()
        try:
            if event.severity == AuditSeverity.ERROR:
                self._logger.error("audit_event", **log_dict)
            elif event.severity == AuditSeverity.WARNING:
                self._logger.warning("audit_event", **log_dict)
            elif event.severity == AuditSeverity.DEBUG:
                self._logger.debug("audit_event", **log_dict)
            else:
                self._logger.info("audit_event", **log_dict)
        except Exception as e:
            # Log failure but don't raise
            logging.getLogger(__name__).error(
                "audit logging failed for %s: %s", event.event_id, e
            )
            return False

        if self._keep_trail:
            self._events.append(event)
        return True

    def clear(self) -> None:
        self._events.clear()


def create_correlation_id() -> UUID:
    """
    Create a new correlation ID for tracking related events.

    Use this at the start of a new caller action (e.g. a menu choice)
    and pass it through every ledger call made for it.
    """
    return uuid4()
