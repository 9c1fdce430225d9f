from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Person


class RosterRepository(Protocol):
    """Repository interface for the roster.

    Note: services depend on this interface, not on the file format.
    """

    def get_by_id(self, person_id: str) -> Optional[Person]:
        raise NotImplementedError

    def list_all(self) -> Sequence[Person]:
        raise NotImplementedError

    def add(self, person: Person) -> None:
        raise NotImplementedError

    def delete_by_id(self, person_id: str) -> Optional[Person]:
        """Remove the person and return it, or None if there was no such id."""

        raise NotImplementedError
