"""Contrato de entidades con nombre.

Por qué Protocol:
- Define un contrato estructural (duck typing) sin herencia rígida.
- Una persona guarda su nombre; una nave lo calcula. Ambas cumplen igual.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class NamedEntity(Protocol):
    """Cualquier cosa con un `full_name` de solo lectura.

    Reglas:
    - Leer `full_name` no tiene efectos secundarios.
    - Lecturas repetidas devuelven el mismo valor mientras no cambie el estado.
    """

    @property
    def full_name(self) -> str:
        ...
