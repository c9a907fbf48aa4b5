"""Fuente aleatoria: enteros uniformes de 1 a 10.

El generador se inyecta (o se crea con semilla) para que las tiradas sean
reproducibles en tests y en la CLI (`--seed`).
"""

from __future__ import annotations

import logging
import random

from core.interfaces.randomness import RandomSource

logger = logging.getLogger(__name__)


class UniformTenSource(RandomSource):
    """Devuelve enteros uniformes en [1, 10]."""

    LOW = 1
    HIGH = 10

    def __init__(self, rng: random.Random | None = None, *, seed: int | None = None) -> None:
        if rng is not None and seed is not None:
            raise ValueError("pass either rng or seed, not both")
        self._rng = rng if rng is not None else random.Random(seed)

    def random(self) -> int:
        value = self._rng.randint(self.LOW, self.HIGH)
        logger.debug("uniform-ten draw=%d", value)
        return value
