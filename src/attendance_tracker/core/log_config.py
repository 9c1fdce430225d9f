"""Diagnostics logging for the attendance tracker.

The audit trail lives in :mod:`attendance_tracker.audit`; this module only
configures the stderr logger used for warnings and debugging output.
"""

from __future__ import annotations

import logging
import sys

PACKAGE_LOGGER = "attendance_tracker"

_configured = False


def configure_logging(level: str = "WARNING") -> None:
    """Attach a single stderr handler to the package logger."""

    global _configured
    if _configured:
        return

    handler = logging.StreamHandler(stream=sys.stderr)
    handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(getattr(logging, str(level).upper(), logging.WARNING))
    logger.addHandler(handler)

    _configured = True
