from __future__ import annotations

from datetime import datetime

import pytest

from attendance_tracker.storage.bootstrap import initialize_storage
from attendance_tracker.storage.paths import StoragePaths
from attendance_tracker.storage.record_store import RecordStore


class ListAudit:
    def __init__(self):
        self.entries: list[tuple[str, str]] = []

    def record(self, action: str, details: str) -> None:
        self.entries.append((action, details))

    def actions(self) -> list[str]:
        return [action for action, _ in self.entries]


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2024, 1, 10, 9, 15, 0)


@pytest.fixture
def audit() -> ListAudit:
    return ListAudit()


@pytest.fixture
def store() -> RecordStore:
    return RecordStore()


@pytest.fixture
def paths(tmp_path, store) -> StoragePaths:
    paths = StoragePaths.from_config({"data_dir": str(tmp_path / "data")})
    initialize_storage(paths, store)
    return paths
