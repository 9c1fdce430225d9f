from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Dict, List, Optional

from ..core.enums import AttendanceStatus
from ..roster.model import Person


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one person's status inside a snapshot."""

    person_id: str
    status: AttendanceStatus
    timestamp: str


@dataclass(frozen=True)
class AttendanceSnapshot:
    """All attendance records for one calendar date, keyed by person id."""

    day: date
    records: Dict[str, AttendanceRecord] = field(default_factory=dict)

    def present_ids(self) -> List[str]:
        return [pid for pid, r in self.records.items() if r.status == AttendanceStatus.PRESENT]

    def status_of(self, person_id: str) -> Optional[AttendanceStatus]:
        record = self.records.get(person_id)
        return record.status if record else None


@dataclass(frozen=True)
class RecordingResult:
    day: date
    present: int
    absent: int


@dataclass(frozen=True)
class SnapshotRow:
    """Read-model for the per-date report; name is None for a removed person."""

    person_id: str
    name: Optional[str]
    status: AttendanceStatus
    timestamp: str


@dataclass(frozen=True)
class PersonSummary:
    person: Person
    present_days: int
    absent_days: int

    @property
    def total_days(self) -> int:
        return self.present_days + self.absent_days

    @property
    def rate(self) -> float:
        if not self.total_days:
            return 0.0
        return round(100.0 * self.present_days / self.total_days, 1)
