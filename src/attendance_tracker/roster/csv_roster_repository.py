from __future__ import annotations

from typing import List, Optional

from ..core.constants import ROSTER_FIELDS
from ..storage.paths import StoragePaths
from ..storage.record_store import RecordStore
from .model import Person
from .repository import RosterRepository


def _to_person(row: dict) -> Person:
    return Person(
        person_id=row["id"],
        name=row["name"],
        email=row["email"],
        class_name=row["class"],
    )


def _to_row(person: Person) -> dict:
    return {
        "id": person.person_id,
        "name": person.name,
        "email": person.email,
        "class": person.class_name,
    }


class CsvRosterRepository(RosterRepository):
    def __init__(self, store: RecordStore, paths: StoragePaths):
        self._store = store
        self._path = paths.roster_file

    def list_all(self) -> List[Person]:
        return [_to_person(row) for row in self._store.read_all(self._path, ROSTER_FIELDS)]

    def get_by_id(self, person_id: str) -> Optional[Person]:
        # Compare the key field exactly; "S1" must not match "S10".
        for person in self.list_all():
            if person.person_id == person_id:
                return person
        return None

    def add(self, person: Person) -> None:
        self._store.append_one(self._path, ROSTER_FIELDS, _to_row(person))

    def delete_by_id(self, person_id: str) -> Optional[Person]:
        people = self.list_all()
        removed = next((p for p in people if p.person_id == person_id), None)
        if removed is None:
            return None

        remaining = [_to_row(p) for p in people if p.person_id != person_id]
        self._store.overwrite(self._path, ROSTER_FIELDS, remaining)
        return removed
