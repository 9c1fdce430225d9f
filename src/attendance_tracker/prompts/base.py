from __future__ import annotations

from typing import List, Optional, Protocol, Sequence, Set, Tuple


class Prompt(Protocol):
    """Blocking request/response boundary with the operator.

    Every call returns the submitted value, or None when the operator cancels.
    Callers treat None as "do nothing", never as an error.
    """

    def form(self, title: str, labels: Sequence[str]) -> Optional[List[str]]:
        raise NotImplementedError

    def menu(self, title: str, options: Sequence[Tuple[str, str]]) -> Optional[str]:
        """``options`` are (key, label) pairs; returns the chosen key."""

        raise NotImplementedError

    def checklist(self, title: str, options: Sequence[Tuple[str, str, bool]]) -> Optional[Set[str]]:
        """``options`` are (key, label, checked) triples; returns the selected keys."""

        raise NotImplementedError

    def text(self, title: str, label: str, default: str = "") -> Optional[str]:
        raise NotImplementedError

    def confirm(self, title: str, question: str) -> Optional[bool]:
        raise NotImplementedError

    def message(self, title: str, text: str) -> None:
        raise NotImplementedError
