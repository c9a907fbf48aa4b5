"""Die: a consumer typed by capability, not by concrete generator.

The die never builds its generator; any object satisfying
`core.interfaces.randomness.RandomSource` can be injected.
"""

from __future__ import annotations

import logging
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from core.domain.errors import InvalidDieError
from core.interfaces.randomness import RandomSource

logger = logging.getLogger(__name__)


class Die(BaseModel):
    """A die with a fixed number of sides and an injected random source.

    `roll()` maps a draw in {1..10} to a face with `(draw % sides) + 1`.
    The draw is never shifted to {0..9}, so faces are only uniform when
    `sides` divides 10. With six sides a draw of 6 gives face 1 and a draw
    of 1 gives face 2.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True, extra="forbid")

    sides: int = Field(..., description="Number of faces; must be > 0.")
    generator: RandomSource = Field(..., description="Injected source of draws in {1..10}.")

    def __init__(self, sides: Any, generator: Any) -> None:
        try:
            super().__init__(sides=sides, generator=generator)
        except ValidationError as exc:
            raise InvalidDieError(_first_error(exc)) from exc

    @field_validator("sides", mode="before")
    @classmethod
    def _check_sides(cls, value: Any) -> int:
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValueError(f"sides must be an integer, got {value!r}")
        if value <= 0:
            raise ValueError(f"sides must be > 0, got {value}")
        return value

    def face_for(self, draw: int) -> int:
        """Face shown for a given generator draw."""

        return (draw % self.sides) + 1

    def roll(self) -> int:
        draw = self.generator.random()
        face = self.face_for(draw)
        logger.debug("%s draw=%d face=%d", self.describe(), draw, face)
        return face

    def roll_many(self, count: int) -> list[int]:
        if count < 0:
            raise InvalidDieError(f"count must be >= 0, got {count}")
        return [self.roll() for _ in range(count)]

    def describe(self) -> str:
        return f"d{self.sides}"


def _first_error(exc: ValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return str(exc)
    first = errors[0]
    loc = ".".join(str(part) for part in first.get("loc", ()))
    msg = first.get("msg", "invalid value")
    return f"{loc}: {msg}" if loc else msg
