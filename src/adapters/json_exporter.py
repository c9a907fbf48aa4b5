"""Exportación JSON de sesiones de tiradas.

Por qué JSON:
- Interoperabilidad con otras herramientas y notebooks.
- Permite guardar una sesión (con su semilla) para reproducirla después.
"""

from __future__ import annotations

from pathlib import Path

from core.domain.models import RollReport


def export_roll_report_json(*, report: RollReport, output_path: Path) -> Path:
    """Guarda la sesión como JSON UTF-8 (indentado, con salto de línea final)."""

    output_path.parent.mkdir(parents=True, exist_ok=True)
    with output_path.open("w", encoding="utf-8") as fh:
        fh.write(report.model_dump_json(indent=2))
        fh.write("\n")
    return output_path
