"""click-based implementation of the operator prompts.

Ctrl-C or Ctrl-D at any prompt cancels the whole form/menu/checklist.
"""

from __future__ import annotations

from typing import List, Optional, Sequence, Set, Tuple

import click

from .base import Prompt

_NONE_SELECTED = "-"


def _title(title: str) -> None:
    click.echo()
    click.secho(title, bold=True)
    click.secho("-" * len(title), dim=True)


def _parse_selection(raw: str, count: int) -> Optional[List[int]]:
    raw = raw.strip()
    if raw == _NONE_SELECTED:
        return []
    picked: List[int] = []
    for part in raw.replace(" ", ",").split(","):
        if not part:
            continue
        if not part.isdigit() or not 1 <= int(part) <= count:
            return None
        picked.append(int(part))
    return picked


class TerminalPrompt(Prompt):
    def form(self, title: str, labels: Sequence[str]) -> Optional[List[str]]:
        _title(title)
        values: List[str] = []
        try:
            for label in labels:
                values.append(click.prompt(label, default="", show_default=False))
        except click.Abort:
            click.echo()
            return None
        return values

    def menu(self, title: str, options: Sequence[Tuple[str, str]]) -> Optional[str]:
        _title(title)
        for idx, (_, label) in enumerate(options, start=1):
            click.echo(f"  {idx}. {label}")
        click.echo("  0. Back")
        try:
            choice = click.prompt("Choose", type=click.IntRange(0, len(options)))
        except click.Abort:
            click.echo()
            return None
        if choice == 0:
            return None
        return options[choice - 1][0]

    def checklist(self, title: str, options: Sequence[Tuple[str, str, bool]]) -> Optional[Set[str]]:
        _title(title)
        for idx, (_, label, checked) in enumerate(options, start=1):
            mark = "x" if checked else " "
            click.echo(f"  [{mark}] {idx}. {label}")

        default = ",".join(str(idx) for idx, (_, _, checked) in enumerate(options, start=1) if checked)
        while True:
            try:
                raw = click.prompt(
                    f"Selected numbers, comma-separated ('{_NONE_SELECTED}' for none)",
                    default=default or _NONE_SELECTED,
                )
            except click.Abort:
                click.echo()
                return None
            picked = _parse_selection(raw, len(options))
            if picked is not None:
                return {options[idx - 1][0] for idx in picked}
            click.secho(f"Enter numbers between 1 and {len(options)}.", fg="red")

    def text(self, title: str, label: str, default: str = "") -> Optional[str]:
        _title(title)
        try:
            return click.prompt(label, default=default, show_default=bool(default))
        except click.Abort:
            click.echo()
            return None

    def confirm(self, title: str, question: str) -> Optional[bool]:
        _title(title)
        try:
            return click.confirm(question, default=False)
        except click.Abort:
            click.echo()
            return None

    def message(self, title: str, text: str) -> None:
        colour = {"Error": "red", "Success": "green"}.get(title)
        click.echo()
        click.secho(f"{title}:", fg=colour, bold=True)
        click.echo(text)
