"""Logging infrastructure with scan id tracking.

This module configures console logging for backup-selector and tags every
record emitted during an enumeration pass with the id of that pass, so the
lines of interleaved or repeated scans can be told apart.
"""

import contextvars
import logging
import sys
import uuid
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Final, override

# Scan id context variable for tracking log records of one enumeration pass
scan_id_var: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "scan_id",
    default=None,
)

# Log format constants
DEFAULT_LOG_FORMAT: Final[str] = "%(asctime)s - %(name)s - %(levelname)s - [%(scan_id)s] - %(message)s"


class ScanIDFilter(logging.Filter):
    """Logging filter that adds the current scan id to log records."""

    @override
    def filter(self, record: logging.LogRecord) -> bool:
        """Add scan id to log record from ContextVar.

        Args:
            record: Log record to enhance with the scan id

        Returns:
            True to allow the record to be logged
        """
        # An explicit extra={"scan_id": ...} takes precedence over the context
        if not hasattr(record, "scan_id"):
            scan_id = scan_id_var.get()
            record.scan_id = scan_id if scan_id is not None else "N/A"
        return True


def configure_logging(
    *,
    log_level: str = "INFO",
    enable_console: bool = True,
) -> None:
    """Configure application logging.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        enable_console: Enable console output handler on stderr

    Example:
        >>> configure_logging(log_level="DEBUG")
        >>> logger = logging.getLogger(__name__)
        >>> logger.info("Scan started", extra={"root": "/data"})
    """
    root_logger = logging.getLogger()

    level = getattr(logging, log_level.upper(), logging.INFO)  # pyright: ignore[reportAny]  # logging level lookup
    root_logger.setLevel(level)  # pyright: ignore[reportAny]

    # Remove existing handlers to avoid duplicates
    root_logger.handlers.clear()

    if enable_console:
        # stderr keeps stdout free for the selected item listing
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(logging.Formatter(DEFAULT_LOG_FORMAT))
        console_handler.addFilter(ScanIDFilter())
        root_logger.addHandler(console_handler)


def new_scan_id() -> str:
    return uuid.uuid4().hex[:12]


def get_scan_id() -> str | None:
    return scan_id_var.get()


@contextmanager
def scan_context(scan_id: str | None = None) -> Iterator[str]:
    """Run a block under a scan id, restoring the previous id afterwards.

    Args:
        scan_id: Explicit id; a fresh one is generated when omitted

    Yields:
        The active scan id
    """
    active = scan_id or new_scan_id()
    token = scan_id_var.set(active)
    try:
        yield active
    finally:
        scan_id_var.reset(token)
