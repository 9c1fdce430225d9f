"""Flat delimited record files.

Every file starts with a header line naming its fields; the header is skipped
on read and written again whenever a file is created or rewritten. Nothing in
here knows about people or attendance.
"""

from __future__ import annotations

import csv
import logging
import os
import stat
import tempfile
from pathlib import Path
from typing import Iterable, List, Mapping, Sequence

from ..core.constants import FIELD_DELIMITER, FILE_MODE
from ..core.exceptions import StorageError

logger = logging.getLogger(__name__)

Record = Mapping[str, str]


def _row(fields: Sequence[str], record: Record) -> list[str]:
    return [str(record[name]) for name in fields]


class RecordStore:
    def __init__(self, *, delimiter: str = FIELD_DELIMITER, file_mode: int = FILE_MODE):
        self._delimiter = delimiter
        self._file_mode = file_mode

    def _format(self) -> dict:
        # Plain unquoted lines: a double quote in a value is an ordinary character.
        return {
            "delimiter": self._delimiter,
            "quoting": csv.QUOTE_NONE,
            "quotechar": None,
            "escapechar": None,
        }

    def _writer(self, fh):
        return csv.writer(fh, lineterminator="\n", **self._format())

    def exists(self, path: Path) -> bool:
        return Path(path).is_file()

    def read_all(self, path: Path, fields: Sequence[str]) -> List[dict]:
        path = Path(path)
        if not path.is_file():
            return []

        records: List[dict] = []
        try:
            with path.open("r", encoding="utf-8", newline="") as fh:
                reader = csv.reader(fh, **self._format())
                next(reader, None)
                for row in reader:
                    if not row:
                        continue
                    if len(row) != len(fields):
                        logger.warning("Skipping malformed line %d in %s", reader.line_num, path)
                        continue
                    records.append(dict(zip(fields, row)))
        except OSError as exc:
            raise StorageError(f"Unable to read {path}: {exc}") from exc
        return records

    def append_one(self, path: Path, fields: Sequence[str], record: Record) -> None:
        path = Path(path)
        try:
            if not path.is_file():
                self.overwrite(path, fields, [record])
                return
            with path.open("a", encoding="utf-8", newline="") as fh:
                self._writer(fh).writerow(_row(fields, record))
        except (OSError, csv.Error) as exc:
            raise StorageError(f"Unable to append to {path}: {exc}") from exc

    def overwrite(self, path: Path, fields: Sequence[str], records: Iterable[Record]) -> None:
        """Replace ``path`` with a header plus ``records`` in one step.

        The new content goes to a scratch file next to the target and is moved
        into place with ``os.replace``, so a crash leaves the old file intact.
        """

        path = Path(path)
        mode = self._file_mode
        tmp_name = None
        try:
            if path.is_file():
                mode = stat.S_IMODE(path.stat().st_mode)
            with tempfile.NamedTemporaryFile(
                "w",
                encoding="utf-8",
                newline="",
                dir=str(path.parent),
                prefix=f".{path.name}.",
                suffix=".tmp",
                delete=False,
            ) as tmp:
                tmp_name = tmp.name
                writer = self._writer(tmp)
                writer.writerow(list(fields))
                for record in records:
                    writer.writerow(_row(fields, record))
                tmp.flush()
                os.fsync(tmp.fileno())
            os.chmod(tmp_name, mode)
            os.replace(tmp_name, path)
            tmp_name = None
        except (OSError, csv.Error) as exc:
            raise StorageError(f"Unable to write {path}: {exc}") from exc
        finally:
            if tmp_name and os.path.exists(tmp_name):
                os.unlink(tmp_name)

    def delete(self, path: Path) -> bool:
        path = Path(path)
        try:
            path.unlink()
        except FileNotFoundError:
            return False
        except OSError as exc:
            raise StorageError(f"Unable to delete {path}: {exc}") from exc
        return True

    def list_names(self, directory: Path, suffix: str) -> List[str]:
        """Return file names in ``directory`` ending in ``suffix``, without the suffix."""
        directory = Path(directory)
        if not directory.is_dir():
            return []
        try:
            return sorted(p.name[: -len(suffix)] for p in directory.iterdir() if p.is_file() and p.name.endswith(suffix))
        except OSError as exc:
            raise StorageError(f"Unable to list {directory}: {exc}") from exc
