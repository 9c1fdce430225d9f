from __future__ import annotations

from typing import Optional

import pytest

from attendance_tracker.core.exceptions import DuplicateError, FormatError, NotFoundError, ValidationError
from attendance_tracker.roster.model import Person
from attendance_tracker.roster.service import RosterService


class InMemoryRoster:
    def __init__(self, people=None):
        self.people: list[Person] = list(people or [])

    def get_by_id(self, person_id: str) -> Optional[Person]:
        return next((p for p in self.people if p.person_id == person_id), None)

    def list_all(self):
        return list(self.people)

    def add(self, person: Person) -> None:
        self.people.append(person)

    def delete_by_id(self, person_id: str) -> Optional[Person]:
        person = self.get_by_id(person_id)
        if person:
            self.people.remove(person)
        return person


class FakeGuard:
    def __init__(self):
        self.cascaded: list[str] = []

    def cascade_delete(self, person_id: str) -> bool:
        self.cascaded.append(person_id)
        return True


ANN = Person(person_id="S1", name="Ann", email="a@b.com", class_name="10A")


def make_service(audit, people=None):
    roster = InMemoryRoster(people)
    guard = FakeGuard()
    return RosterService(roster, guard, audit), roster, guard


def test_add_person_appends_and_logs(audit):
    svc, roster, _ = make_service(audit)

    person = svc.add_person(person_id="S1", name="Ann", email="a@b.com", class_name="10A")

    assert person == ANN
    assert roster.people == [ANN]
    assert audit.entries == [("Add Person", "Added person S1: Ann (10A)")]


def test_add_duplicate_id_does_not_touch_roster(audit):
    svc, roster, _ = make_service(audit, [ANN])

    with pytest.raises(DuplicateError):
        svc.add_person(person_id="S1", name="Other", email="o@b.com", class_name="11B")

    assert roster.people == [ANN]
    assert audit.entries == []


def test_id_sharing_a_prefix_is_not_a_duplicate(audit):
    svc, roster, _ = make_service(audit, [Person("S10", "Ten", "t@b.com", "10A")])

    svc.add_person(person_id="S1", name="Ann", email="a@b.com", class_name="10A")

    assert [p.person_id for p in roster.people] == ["S10", "S1"]


def test_id_lookup_is_case_sensitive(audit):
    svc, roster, _ = make_service(audit, [ANN])

    svc.add_person(person_id="s1", name="Lower", email="l@b.com", class_name="10A")

    assert len(roster.people) == 2


@pytest.mark.parametrize("field", ["person_id", "name", "email", "class_name"])
def test_missing_field_raises_validation_error(audit, field):
    svc, roster, _ = make_service(audit)
    values = {"person_id": "S1", "name": "Ann", "email": "a@b.com", "class_name": "10A"}
    values[field] = "  "

    with pytest.raises(ValidationError):
        svc.add_person(**values)

    assert roster.people == []


def test_malformed_email_raises_format_error(audit):
    svc, roster, _ = make_service(audit)

    with pytest.raises(FormatError):
        svc.add_person(person_id="S1", name="Ann", email="not-an-email", class_name="10A")

    assert roster.people == []


def test_non_alphanumeric_id_raises_format_error(audit):
    svc, _, _ = make_service(audit)

    with pytest.raises(FormatError):
        svc.add_person(person_id="S-1", name="Ann", email="a@b.com", class_name="10A")


def test_delimiter_in_field_is_rejected(audit):
    svc, roster, _ = make_service(audit)

    with pytest.raises(FormatError):
        svc.add_person(person_id="S1", name="Smith, Ann", email="a@b.com", class_name="10A")

    assert roster.people == []


def test_list_people_returns_roster_in_order(audit):
    bob = Person("S2", "Bob", "b@b.com", "10B")
    svc, _, _ = make_service(audit, [ANN, bob])

    assert svc.list_people() == [ANN, bob]
    assert audit.actions() == ["List People"]


def test_delete_person_cascades_and_returns_name(audit):
    svc, roster, guard = make_service(audit, [ANN])

    assert svc.delete_person("S1") == "Ann"
    assert roster.people == []
    assert guard.cascaded == ["S1"]
    assert audit.entries == [("Delete Person", "Deleted person S1: Ann")]


def test_delete_unknown_id_raises_not_found(audit):
    svc, roster, guard = make_service(audit, [ANN])

    with pytest.raises(NotFoundError):
        svc.delete_person("S2")

    assert roster.people == [ANN]
    assert guard.cascaded == []


def test_get_person_unknown_raises(audit):
    svc, _, _ = make_service(audit)

    with pytest.raises(NotFoundError):
        svc.get_person("S1")


def test_delete_blank_id_raises_validation_before_lookup(audit):
    svc, roster, guard = make_service(audit, [ANN])

    with pytest.raises(ValidationError):
        svc.delete_person("  ")

    assert roster.people == [ANN]
    assert guard.cascaded == []
    assert audit.entries == []
