from __future__ import annotations

import random
from collections import Counter

import pytest

from adapters.random_sources import UniformTenSource
from core.interfaces.randomness import RandomSource


def test_satisfies_random_source():
    assert isinstance(UniformTenSource(), RandomSource)


def test_draws_stay_in_range_and_are_roughly_uniform():
    source = UniformTenSource(seed=1234)
    counts = Counter(source.random() for _ in range(10_000))

    assert set(counts) == set(range(1, 11))
    for value in range(1, 11):
        assert 800 <= counts[value] <= 1200


def test_seed_makes_draws_reproducible():
    a = UniformTenSource(seed=42)
    b = UniformTenSource(seed=42)
    assert [a.random() for _ in range(20)] == [b.random() for _ in range(20)]


def test_injected_generator_is_used():
    rng = random.Random(7)
    expected = random.Random(7).randint(1, 10)
    assert UniformTenSource(rng).random() == expected


def test_rng_and_seed_are_exclusive():
    with pytest.raises(ValueError):
        UniformTenSource(random.Random(1), seed=1)
