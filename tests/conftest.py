from __future__ import annotations

from collections.abc import Iterable
from itertools import cycle

import pytest


class ScriptedSource:
    """RandomSource that replays a fixed sequence of draws."""

    def __init__(self, draws: Iterable[int]) -> None:
        self._draws = cycle(list(draws))
        self.calls = 0

    def random(self) -> int:
        self.calls += 1
        return next(self._draws)


@pytest.fixture
def scripted_source():
    return ScriptedSource


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    """Keep user .env files and PROTOCOL_BASICS_* variables out of tests."""

    for key in ("DEFAULT_SIDES", "DEFAULT_ROLLS", "SEED", "LOG_LEVEL"):
        monkeypatch.delenv(f"PROTOCOL_BASICS_{key}", raising=False)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    monkeypatch.chdir(tmp_path)
