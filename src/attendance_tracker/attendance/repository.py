from __future__ import annotations

from datetime import date
from pathlib import Path
from typing import Optional, Protocol, Sequence, Tuple

from .model import AttendanceRecord, AttendanceSnapshot


class SnapshotRepository(Protocol):
    def get(self, day: date) -> Optional[AttendanceSnapshot]:
        raise NotImplementedError

    def save(self, snapshot: AttendanceSnapshot) -> None:
        """Replace the whole snapshot for ``snapshot.day``."""

        raise NotImplementedError

    def list_dates(self) -> Sequence[date]:
        raise NotImplementedError

    def write_person_history(self, person_id: str, rows: Sequence[Tuple[date, AttendanceRecord]]) -> Path:
        raise NotImplementedError

    def delete_person_history(self, person_id: str) -> bool:
        raise NotImplementedError
