from __future__ import annotations

import importlib
from pathlib import Path
from typing import Optional

import click
from dotenv import load_dotenv

from config import get_settings_module

from .container import Container, build_container
from .core.constants import DATE_FORMAT
from .core.exceptions import DomainError, StorageError
from .core.log_config import configure_logging
from .menu.controller import AttendanceMenu
from .prompts.terminal import TerminalPrompt
from .storage.bootstrap import initialize_storage


def create_container(data_dir: Optional[Path] = None) -> Container:
    """Load settings, build the container and prepare the data directory.

    Raises StorageError when the data directory cannot be prepared.
    """

    load_dotenv(override=False)
    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)

    configure_logging(getattr(settings, "LOG_LEVEL", "WARNING"))
    data_config = dict(getattr(settings, "DATA_CONFIG"))
    if data_dir is not None:
        data_config["data_dir"] = str(data_dir)

    container = build_container(data_config=data_config)

    # Helpful startup info to show which files are in use.
    if bool(getattr(settings, "DEBUG", False)):
        click.echo(f"[attendance-tracker] settings={settings_module} data={container.paths.data_dir}", err=True)

    initialize_storage(container.paths, container.store)
    container.audit.record("System", "Initialized attendance tracker system")
    return container


@click.group(invoke_without_command=True)
@click.option(
    "--data-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Directory holding the roster, snapshots and audit log.",
)
@click.pass_context
def cli(ctx: click.Context, data_dir: Optional[Path]) -> None:
    """Track daily attendance for a roster of people."""

    try:
        container = create_container(data_dir)
    except StorageError as exc:
        raise click.ClickException(str(exc))

    ctx.obj = container
    ctx.call_on_close(container.audit.close)

    if ctx.invoked_subcommand is None:
        AttendanceMenu(container, TerminalPrompt()).run()


@cli.command()
@click.argument("day")
@click.pass_obj
def reconcile(container: Container, day: str) -> None:
    """Align the snapshot for DAY (YYYY-MM-DD) with the current roster."""

    try:
        result = container.guard.reconcile_snapshot_with_roster(day)
    except DomainError as exc:
        container.audit.record("Error", str(exc))
        raise click.ClickException(str(exc))

    label = result.day.strftime(DATE_FORMAT)
    if not result.changed:
        click.echo(f"{label} already matches the roster")
        return
    for person_id in result.added:
        click.echo(f"added   {person_id} (absent)")
    for person_id in result.dropped:
        click.echo(f"dropped {person_id}")
    container.audit.record("Success", f"Reconciled {label}")


def main() -> None:
    cli()


if __name__ == "__main__":  # pragma: no cover
    main()
