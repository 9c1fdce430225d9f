from __future__ import annotations

from enum import Enum


class AttendanceStatus(str, Enum):
    """Presence status stored in a snapshot file."""

    PRESENT = "present"
    ABSENT = "absent"
