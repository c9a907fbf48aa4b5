"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- Permite reutilizar tablas/paneles en múltiples comandos.
"""

from __future__ import annotations

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.domain.models import RollReport
from core.services.dice import Die


def print_banner(console: Console) -> None:
    """Imprime el banner de bienvenida."""

    title = Text("PROTOCOL BASICS", style="bold cyan")
    subtitle = Text("Capacidades • Propiedades calculadas • Igualdad", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def build_rolls_table(report: RollReport) -> Table:
    """Tabla con las tiradas de una sesión."""

    table = Table(title=f"d{report.sides} rolls")
    table.add_column("#", style="dim", justify="right")
    table.add_column("Face", style="bright_green", justify="right")
    for index, face in enumerate(report.rolls, start=1):
        table.add_row(str(index), str(face))
    if report.rolls:
        table.add_section()
        table.add_row("Total", str(report.total), style="bold")
    return table


def build_faces_table(die: Die) -> Table:
    """Tabla draw -> face para todos los valores posibles del generador."""

    table = Table(title=f"{die.describe()} face mapping")
    table.add_column("Draw", style="cyan", justify="right")
    table.add_column("Face", style="bright_green", justify="right")
    for draw in range(1, 11):
        table.add_row(str(draw), str(die.face_for(draw)))
    return table


def build_name_panel(kind: str, full_name: str) -> Panel:
    """Panel con el nombre completo de una entidad."""

    body = Text(full_name, style="bold white")
    return Panel(body, title=Text(kind, style="bold yellow"), border_style="yellow")
