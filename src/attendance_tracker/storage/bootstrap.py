from __future__ import annotations

import os
from pathlib import Path

from ..core.constants import DIR_MODE, FILE_MODE, ROSTER_FIELDS
from ..core.exceptions import StorageError
from .paths import StoragePaths
from .record_store import RecordStore


def _ensure_dir(path: Path) -> None:
    if not path.is_dir():
        path.mkdir(parents=True, exist_ok=True)
        os.chmod(path, DIR_MODE)


def _ensure_file(path: Path) -> None:
    if not path.is_file():
        path.touch()
        os.chmod(path, FILE_MODE)


def initialize_storage(paths: StoragePaths, store: RecordStore) -> None:
    """Create the data directories, the roster file and the log file if missing.

    Idempotent. Raises StorageError when anything cannot be created; callers treat
    that as fatal.
    """

    try:
        _ensure_dir(paths.data_dir)
        _ensure_dir(paths.attendance_dir)
        _ensure_dir(paths.roster_file.parent)
        _ensure_dir(paths.log_file.parent)
        _ensure_file(paths.log_file)
    except OSError as exc:
        raise StorageError(f"Unable to initialize data directory {paths.data_dir}: {exc}") from exc

    if not store.exists(paths.roster_file):
        store.overwrite(paths.roster_file, ROSTER_FIELDS, [])
