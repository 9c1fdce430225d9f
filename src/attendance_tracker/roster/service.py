from __future__ import annotations

from typing import List

from ..audit import AuditSink
from ..common.validators import require_email, require_non_empty, require_person_id, require_plain_field
from ..core.exceptions import DuplicateError, NotFoundError, ValidationError
from ..sync.service import ConsistencyGuard
from .model import Person
from .repository import RosterRepository


class RosterService:
    """Use case: manage the roster (add, list, delete)."""

    def __init__(self, roster: RosterRepository, guard: ConsistencyGuard, audit: AuditSink):
        self._roster = roster
        self._guard = guard
        self._audit = audit

    def add_person(self, *, person_id: str, name: str, email: str, class_name: str) -> Person:
        fields = {"ID": person_id, "Name": name, "Email": email, "Class": class_name}
        if not all(value and value.strip() for value in fields.values()):
            raise ValidationError("All fields are required")
        for label, value in fields.items():
            require_plain_field(value, label)

        require_person_id(person_id)
        require_email(email)

        if self._roster.get_by_id(person_id):
            raise DuplicateError(f"Person with ID '{person_id}' already exists")

        person = Person(person_id=person_id, name=name, email=email, class_name=class_name)
        self._roster.add(person)
        self._audit.record("Add Person", f"Added person {person_id}: {name} ({class_name})")
        return person

    def list_people(self) -> List[Person]:
        people = list(self._roster.list_all())
        self._audit.record("List People", f"Listed {len(people)} people")
        return people

    def get_person(self, person_id: str) -> Person:
        person = self._roster.get_by_id(person_id)
        if not person:
            raise NotFoundError(f"Person with ID '{person_id}' not found")
        return person

    def delete_person(self, person_id: str) -> str:
        person_id = require_non_empty(person_id, "ID")

        removed = self._roster.delete_by_id(person_id)
        if removed is None:
            raise NotFoundError(f"Person with ID '{person_id}' not found")

        self._guard.cascade_delete(person_id)
        self._audit.record("Delete Person", f"Deleted person {person_id}: {removed.name}")
        return removed.name
