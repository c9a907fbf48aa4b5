"""Doctor command for environment diagnostics."""

from __future__ import annotations

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from adapters.random_sources import UniformTenSource
from core.config import AppSettings, get_user_env_file
from core.domain.models import PlainPerson, Vessel
from core.interfaces.naming import NamedEntity
from core.interfaces.randomness import RandomSource

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


def _check_conformance() -> list[tuple[str, bool, str]]:
    """Verify the built-in variants still satisfy their capabilities."""

    checks: list[tuple[str, bool, str]] = []
    for label, obj, protocol in (
        ("PlainPerson", PlainPerson(full_name="doctor"), NamedEntity),
        ("Vessel", Vessel(name="doctor", prefix="HMS"), NamedEntity),
        ("UniformTenSource", UniformTenSource(seed=0), RandomSource),
    ):
        ok = isinstance(obj, protocol)
        checks.append((label, ok, protocol.__name__))
    return checks


def _check_source_range(samples: int = 1_000) -> tuple[bool, str]:
    source = UniformTenSource(seed=0)
    allowed = set(range(UniformTenSource.LOW, UniformTenSource.HIGH + 1))
    seen = {source.random() for _ in range(samples)}
    if seen <= allowed:
        return True, f"{len(seen)} distinct values in {samples} draws"
    return False, f"out of range values: {sorted(seen - allowed)}"


@app.command()
def run() -> None:
    """Run baseline diagnostics and show recommended fixes."""

    try:
        settings = AppSettings()
    except ValidationError as exc:
        _console.print(f"[red]Invalid configuration:[/red] {escape(str(exc))}")
        raise typer.Exit(code=1) from exc

    table = Table(title="Protocol Basics Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    # Config
    table.add_row("Default sides", "OK", str(settings.default_sides))
    table.add_row("Default rolls", "OK", str(settings.default_rolls))
    if settings.seed is None:
        table.add_row("Seed", "OPTIONAL", "No seed set -> process entropy")
    else:
        table.add_row("Seed", "OK", str(settings.seed))
    table.add_row("User config", "OK" if get_user_env_file().exists() else "OPTIONAL", str(get_user_env_file()))

    # Capabilities
    for label, ok, protocol_name in _check_conformance():
        table.add_row(f"{label} conformance", "OK" if ok else "FAIL", protocol_name)

    ok_range, detail_range = _check_source_range()
    table.add_row("Source range", "OK" if ok_range else "FAIL", detail_range)

    _console.print(table)
