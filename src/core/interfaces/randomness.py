"""Contrato de fuentes de números aleatorios."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class RandomSource(Protocol):
    """Contrato mínimo para un generador.

    Reglas de diseño:
    - `random` no recibe argumentos.
    - Devuelve un entero uniforme en {1..10}; nunca falla.
    """

    def random(self) -> int:
        """Devuelve un entero en el rango cerrado [1, 10]."""

        ...
