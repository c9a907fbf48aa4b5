"""Helpers that consume the naming capability by protocol."""

from __future__ import annotations

from core.interfaces.naming import NamedEntity


def describe_entity(entity: NamedEntity) -> str:
    """Return the display name of anything that satisfies `NamedEntity`."""

    if not isinstance(entity, NamedEntity):
        raise TypeError(f"{type(entity).__name__} does not expose a full_name")
    return entity.full_name
