"""Append-only audit trail.

One line per action: ``[<timestamp>] <Action>: <details>``. Writing is best
effort; a handler failure is reported by ``logging`` and never reaches the
operation that triggered it.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Protocol

from ..core.constants import LOG_TIME_FORMAT

AUDIT_LOGGER = "attendance_tracker.audit"

logger = logging.getLogger(__name__)


class AuditSink(Protocol):
    """Narrow interface the services log through."""

    def record(self, action: str, details: str) -> None:
        raise NotImplementedError


class AuditLog:
    def __init__(self, log_file: Path, *, logger_name: str = AUDIT_LOGGER):
        # Owned by this instance and never registered with the logging manager.
        self._logger = logging.Logger(logger_name)
        self._logger.setLevel(logging.INFO)
        self._logger.propagate = False

        self._handler = logging.FileHandler(str(log_file), mode="a", encoding="utf-8", delay=True)
        self._handler.setFormatter(logging.Formatter("[%(asctime)s] %(message)s", datefmt=LOG_TIME_FORMAT))
        self._logger.addHandler(self._handler)

    def record(self, action: str, details: str) -> None:
        try:
            self._logger.info("%s: %s", action, details)
        except OSError as exc:
            # FileHandler opens lazily and does not route open failures through handleError.
            logger.warning("Audit log unavailable: %s", exc)

    def close(self) -> None:
        self._logger.removeHandler(self._handler)
        self._handler.close()
