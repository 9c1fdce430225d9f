"""Plain-text tables for the terminal menu."""

from __future__ import annotations

from typing import List, Sequence

from ..attendance.model import PersonSummary, SnapshotRow
from ..roster.model import Person


def format_table(header: Sequence[str], rows: Sequence[Sequence[str]]) -> str:
    table: List[Sequence[str]] = [header, *rows]
    widths = [max(len(row[idx]) for row in table) for idx in range(len(header))]

    def format_row(row: Sequence[str]) -> str:
        return " | ".join(value.ljust(widths[idx]) for idx, value in enumerate(row)).rstrip()

    divider = "-+-".join("-" * width for width in widths)
    lines = [format_row(header), divider]
    lines.extend(format_row(row) for row in rows)
    return "\n".join(lines)


def format_people(people: Sequence[Person]) -> str:
    if not people:
        return "No people registered."
    return format_table(
        ["ID", "Name", "Email", "Class"],
        [[p.person_id, p.name, p.email, p.class_name] for p in people],
    )


def format_snapshot(rows: Sequence[SnapshotRow]) -> str:
    if not rows:
        return "No records for this date."
    return format_table(
        ["ID", "Name", "Status", "Time"],
        [[r.person_id, r.name or "(removed)", r.status.value, r.timestamp] for r in rows],
    )


def format_summary(summary: PersonSummary) -> str:
    p = summary.person
    return "\n".join(
        [
            f"{p.name} ({p.person_id}, {p.class_name})",
            f"Days recorded: {summary.total_days}",
            f"Present: {summary.present_days}",
            f"Absent: {summary.absent_days}",
            f"Attendance rate: {summary.rate:.1f}%",
        ]
    )
