"""CLI principal (Typer + Rich).

Por qué una CLI delgada:
- Los comandos solo parsean opciones, construyen el dominio y pintan.
- Toda la semántica (nombres derivados, igualdad, tiradas) vive en `core/`.
"""

from __future__ import annotations

import logging
from pathlib import Path

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape

from adapters.json_exporter import export_roll_report_json
from adapters.random_sources import UniformTenSource
from cli import doctor
from cli.logging_setup import configure_logging
from cli.ui_components import (
    build_faces_table,
    build_name_panel,
    build_rolls_table,
    print_banner,
)
from core.config import MAX_ROLLS, AppSettings
from core.domain.errors import InvalidDieError
from core.domain.models import PlainPerson, RollReport, Vessel
from core.services.dice import Die
from core.services.naming import describe_entity

app = typer.Typer(
    no_args_is_help=True,
    help="Protocols, computed properties and equality, one command at a time.",
)
app.add_typer(doctor.app, name="doctor")

_console = Console()
logger = logging.getLogger(__name__)


def _load_settings() -> AppSettings:
    try:
        return AppSettings()
    except ValidationError as exc:
        _console.print(f"[red]Invalid configuration:[/red] {escape(str(exc))}")
        raise typer.Exit(code=1) from exc


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
    banner: bool = typer.Option(True, "--banner/--no-banner", help="Show the welcome banner."),
) -> None:
    settings = _load_settings()
    configure_logging("DEBUG" if verbose else settings.log_level)
    if banner:
        print_banner(_console)


@app.command()
def person(full_name: str = typer.Argument(..., help="Full name, stored as given.")) -> None:
    """Show a person's full name."""

    entity = PlainPerson(full_name=full_name)
    _console.print(build_name_panel("Person", describe_entity(entity)))


@app.command()
def vessel(
    name: str = typer.Argument(..., help="Vessel name."),
    prefix: str | None = typer.Option(None, "--prefix", "-p", help="Registry prefix, e.g. USS."),
) -> None:
    """Show a vessel's derived full name."""

    entity = Vessel(name=name, prefix=prefix)
    _console.print(build_name_panel("Vessel", describe_entity(entity)))


@app.command()
def compare(
    name_a: str = typer.Argument(..., help="First vessel name."),
    name_b: str = typer.Argument(..., help="Second vessel name."),
    prefix_a: str | None = typer.Option(None, "--prefix-a", help="Prefix of the first vessel."),
    prefix_b: str | None = typer.Option(None, "--prefix-b", help="Prefix of the second vessel."),
) -> None:
    """Compare two vessels by their derived full names."""

    first = Vessel(name=name_a, prefix=prefix_a)
    second = Vessel(name=name_b, prefix=prefix_b)
    logger.debug("comparing %r with %r", first.full_name, second.full_name)

    if first == second:
        _console.print(f"[green]Same vessel![/green] ({first.full_name})")
    else:
        _console.print(f"[yellow]Different vessels.[/yellow] ({first.full_name} / {second.full_name})")


@app.command()
def roll(
    sides: int | None = typer.Option(None, "--sides", "-s", help="Faces on the die (default from settings)."),
    count: int | None = typer.Option(
        None,
        "--count",
        "-n",
        min=0,
        max=MAX_ROLLS,
        help="Number of rolls (default from settings).",
    ),
    seed: int | None = typer.Option(None, "--seed", help="Seed for reproducible rolls."),
    json_out: Path | None = typer.Option(None, "--json-out", help="Write the session to a JSON file."),
) -> None:
    """Roll a die backed by a 1-10 random source."""

    settings = _load_settings()
    sides = settings.default_sides if sides is None else sides
    count = settings.default_rolls if count is None else count
    seed = settings.seed if seed is None else seed

    try:
        die = Die(sides, UniformTenSource(seed=seed))
        rolls = die.roll_many(count)
    except InvalidDieError as exc:
        raise typer.BadParameter(str(exc)) from exc

    report = RollReport(sides=die.sides, rolls=rolls, seed=seed)
    _console.print(build_rolls_table(report))

    if json_out is not None:
        path = export_roll_report_json(report=report, output_path=json_out)
        _console.print(f"[green]Saved session to:[/green] {path}")


@app.command()
def faces(
    sides: int | None = typer.Option(None, "--sides", "-s", help="Faces on the die (default from settings)."),
) -> None:
    """Show which face each possible draw (1-10) lands on."""

    settings = _load_settings()
    sides = settings.default_sides if sides is None else sides
    try:
        die = Die(sides, UniformTenSource())
    except InvalidDieError as exc:
        raise typer.BadParameter(str(exc)) from exc
    _console.print(build_faces_table(die))


def run() -> None:
    app()
