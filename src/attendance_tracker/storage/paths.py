from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from pathlib import Path

from ..core.constants import DATE_FORMAT, RECORD_SUFFIX


@dataclass(frozen=True)
class StoragePaths:
    """Every file location the tracker touches.

    Built once from settings and handed to each component at construction.
    """

    data_dir: Path
    roster_file: Path
    attendance_dir: Path
    log_file: Path

    @classmethod
    def from_config(cls, data_config: dict) -> "StoragePaths":
        data_dir = Path(data_config["data_dir"]).expanduser()

        def _resolve(key: str, default: str) -> Path:
            value = data_config.get(key) or default
            path = Path(value).expanduser()
            return path if path.is_absolute() else data_dir / path

        return cls(
            data_dir=data_dir,
            roster_file=_resolve("roster_file", "students.csv"),
            attendance_dir=_resolve("attendance_dir", "attendance"),
            log_file=_resolve("log_file", "attendance.log"),
        )

    def snapshot_path(self, day: date) -> Path:
        return self.attendance_dir / f"{day.strftime(DATE_FORMAT)}{RECORD_SUFFIX}"

    def person_history_path(self, person_id: str) -> Path:
        return self.attendance_dir / f"{person_id}{RECORD_SUFFIX}"
