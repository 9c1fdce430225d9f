from __future__ import annotations

import logging
from typing import Callable, Dict, List, Optional, Tuple

from ..common.datetime_utils import now_local, resolve_day
from ..container import Container
from ..core.constants import DATE_FORMAT
from ..core.enums import AttendanceStatus
from ..core.exceptions import DomainError, EmptyRosterError, NotFoundError
from ..prompts.base import Prompt
from .formatters import format_people, format_snapshot, format_summary

logger = logging.getLogger(__name__)

APP_TITLE = "Attendance Tracker"
EXIT = "exit"


class AttendanceMenu:
    """Top-level menu loop.

    Each action runs until it succeeds, fails with a DomainError or is
    cancelled; control always comes back to the main menu.
    """

    def __init__(self, container: Container, prompt: Prompt):
        self._c = container
        self._prompt = prompt
        self._actions: Dict[str, Tuple[str, Callable[[], None]]] = {
            "add": ("Add Person", self.add_person),
            "list": ("List People", self.list_people),
            "delete": ("Delete Person", self.delete_person),
            "take": ("Take Attendance", self.take_attendance),
            "view": ("View Attendance", self.view_attendance),
            "summary": ("Attendance Summary", self.attendance_summary),
            "export": ("Export History", self.export_history),
            "reconcile": ("Reconcile Snapshot", self.reconcile_snapshot),
        }

    def run(self) -> None:
        options = [(key, label) for key, (label, _) in self._actions.items()]
        options.append((EXIT, "Exit"))
        while True:
            choice = self._prompt.menu(APP_TITLE, options)
            if choice is None or choice == EXIT:
                self._c.audit.record("System", "Exited attendance tracker")
                return
            self.dispatch(choice)

    def dispatch(self, key: str) -> None:
        _, handler = self._actions[key]
        try:
            handler()
        except DomainError as e:
            self.show_error(str(e))

    def show_error(self, message: str) -> None:
        logger.debug("operation failed: %s", message)
        self._prompt.message("Error", message)
        self._c.audit.record("Error", message)

    def show_success(self, message: str) -> None:
        self._prompt.message("Success", message)
        self._c.audit.record("Success", message)

    def _choose_person(self, title: str) -> Optional[str]:
        people = self._c.roster_repo.list_all()
        if not people:
            raise EmptyRosterError("No people on the roster. Add people first.")
        return self._prompt.menu(title, [(p.person_id, f"{p.person_id} - {p.name} ({p.class_name})") for p in people])

    def _choose_recorded_date(self, title: str) -> Optional[str]:
        days = self._c.attendance_service.list_recorded_dates()
        if not days:
            raise NotFoundError("No attendance has been recorded yet")
        labels = [d.strftime(DATE_FORMAT) for d in reversed(days)]
        return self._prompt.menu(title, [(label, label) for label in labels])

    def add_person(self) -> None:
        values = self._prompt.form("Add New Person", ["ID", "Name", "Email", "Class"])
        if values is None:
            return
        person_id, name, email, class_name = values
        person = self._c.roster_service.add_person(
            person_id=person_id,
            name=name,
            email=email,
            class_name=class_name,
        )
        self.show_success(f"Person '{person.name}' has been added successfully")

    def list_people(self) -> None:
        people = self._c.roster_service.list_people()
        self._prompt.message("People", format_people(people))

    def delete_person(self) -> None:
        person_id = self._choose_person("Delete Person")
        if person_id is None:
            return
        confirmed = self._prompt.confirm("Delete Person", f"Delete '{person_id}' and their attendance history file?")
        if not confirmed:
            return
        name = self._c.roster_service.delete_person(person_id)
        self.show_success(f"Person '{name}' has been deleted")

    def take_attendance(self) -> None:
        today = now_local().date().strftime(DATE_FORMAT)
        raw = self._prompt.text("Take Attendance", "Date (YYYY-MM-DD)", default=today)
        if raw is None:
            return
        day = resolve_day(raw)

        prior = self._c.attendance_service.open_snapshot_for_date(day)
        if not prior:
            raise EmptyRosterError("No people on the roster. Add people first.")

        people = {p.person_id: p for p in self._c.roster_repo.list_all()}
        options: List[Tuple[str, str, bool]] = []
        for person_id, status in prior.items():
            person = people.get(person_id)
            label = f"{person_id} - {person.name} ({person.class_name})" if person else person_id
            options.append((person_id, label, status == AttendanceStatus.PRESENT))

        selected = self._prompt.checklist(f"Mark present for {day.strftime(DATE_FORMAT)}", options)
        if selected is None:
            return

        result = self._c.attendance_service.record_attendance(day, selected)
        self.show_success(
            f"Attendance for {result.day.strftime(DATE_FORMAT)} saved: "
            f"{result.present} present, {result.absent} absent"
        )

    def view_attendance(self) -> None:
        day = self._choose_recorded_date("View Attendance")
        if day is None:
            return
        rows = self._c.attendance_service.snapshot_report(day)
        self._prompt.message(f"Attendance for {day}", format_snapshot(rows))

    def attendance_summary(self) -> None:
        person_id = self._choose_person("Attendance Summary")
        if person_id is None:
            return
        summary = self._c.attendance_service.person_summary(person_id)
        self._prompt.message("Attendance Summary", format_summary(summary))

    def export_history(self) -> None:
        person_id = self._choose_person("Export History")
        if person_id is None:
            return
        path = self._c.attendance_service.export_person_history(person_id)
        self.show_success(f"History for '{person_id}' exported to {path}")

    def reconcile_snapshot(self) -> None:
        day = self._choose_recorded_date("Reconcile Snapshot")
        if day is None:
            return
        confirmed = self._prompt.confirm("Reconcile Snapshot", f"Align {day} with the current roster?")
        if not confirmed:
            return
        result = self._c.guard.reconcile_snapshot_with_roster(day)
        if not result.changed:
            self._prompt.message("Reconcile Snapshot", f"{day} already matches the roster")
            return
        self.show_success(f"Reconciled {day}: added {len(result.added)}, dropped {len(result.dropped)}")
