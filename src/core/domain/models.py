"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Nos da validación estricta y documentación autocontenida (Field).
- Facilita la serialización de resultados (p.ej. sesiones de tiradas) a JSON.

Nota:
- `PlainPerson` y `Vessel` cumplen `NamedEntity` por estructura, no por herencia.
"""

from __future__ import annotations

from datetime import datetime, timezone

from pydantic import BaseModel, Field, computed_field
from pydantic.config import ConfigDict


class PlainPerson(BaseModel):
    """Una persona cuyo nombre completo se guarda tal cual."""

    model_config = ConfigDict(frozen=True)

    full_name: str = Field(
        ...,
        description="Nombre completo almacenado; no se transforma.",
    )


class Vessel(BaseModel):
    """Una nave con nombre y prefijo opcional (p.ej. 'USS').

    `full_name` se deriva en cada acceso; no hay caché.
    """

    model_config = ConfigDict(validate_assignment=True)

    name: str = Field(
        ...,
        description="Nombre propio de la nave.",
    )
    prefix: str | None = Field(
        default=None,
        description="Prefijo de registro, si lo tiene.",
    )

    @computed_field  # type: ignore[prop-decorator]
    @property
    def full_name(self) -> str:
        if self.prefix is not None:
            return f"{self.prefix} {self.name}"
        return self.name

    def same_vessel(self, other: Vessel) -> bool:
        """Dos naves son la misma si su nombre derivado coincide.

        Es más grueso que la igualdad campo a campo: `Vessel(name="A B")` y
        `Vessel(name="B", prefix="A")` son iguales.
        """

        return self.full_name == other.full_name

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vessel):
            return NotImplemented
        return self.same_vessel(other)

    # La igualdad depende de campos mutables.
    __hash__ = None  # type: ignore[assignment]


class RollReport(BaseModel):
    """Resultado de una sesión de tiradas de dado."""

    sides: int = Field(
        ...,
        gt=0,
        description="Caras del dado usado.",
    )
    rolls: list[int] = Field(
        default_factory=list,
        description="Caras obtenidas, en orden de tirada.",
    )
    seed: int | None = Field(
        default=None,
        description="Semilla del generador (None si se usó entropía del proceso).",
    )
    generated_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="Momento de la sesión (UTC).",
    )

    @property
    def total(self) -> int:
        return sum(self.rolls)
