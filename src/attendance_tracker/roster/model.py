from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Person:
    """Domain entity: one roster entry.

    Note: Plain data object, no file access.
    """

    person_id: str
    name: str
    email: str
    class_name: str
