"""Interfaces/abstracciones del Core.

Por qué:
- Define contratos (Protocol) que implementan las variantes concretas.
- Permite invertir dependencias: los consumidores dependen de capacidades,
  no de clases.
"""

from core.interfaces.naming import NamedEntity
from core.interfaces.randomness import RandomSource

__all__ = ["NamedEntity", "RandomSource"]
