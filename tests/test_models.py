from __future__ import annotations

import pytest
from pydantic import ValidationError

from core.domain.models import PlainPerson, RollReport, Vessel
from core.interfaces.naming import NamedEntity


@pytest.mark.parametrize("name", ["Johnny Hicks", "Ben", "", "  spaced  "])
def test_plain_person_returns_stored_name(name):
    assert PlainPerson(full_name=name).full_name == name


def test_plain_person_is_immutable():
    person = PlainPerson(full_name="Ben")
    with pytest.raises(ValidationError):
        person.full_name = "Other"


def test_vessel_without_prefix_uses_name():
    assert Vessel(name="Serenity").full_name == "Serenity"


def test_vessel_with_prefix_joins_with_space():
    assert Vessel(name="Enterprise", prefix="USS").full_name == "USS Enterprise"


def test_vessel_full_name_tracks_mutation():
    ship = Vessel(name="Enterprise")
    assert ship.full_name == "Enterprise"
    ship.prefix = "USS"
    assert ship.full_name == "USS Enterprise"
    ship.name = "Defiant"
    assert ship.full_name == "USS Defiant"
    ship.prefix = None
    assert ship.full_name == "Defiant"


def test_vessel_full_name_is_dumped():
    dumped = Vessel(name="Enterprise", prefix="USS").model_dump()
    assert dumped == {"name": "Enterprise", "prefix": "USS", "full_name": "USS Enterprise"}


def test_both_variants_satisfy_named_entity():
    assert isinstance(PlainPerson(full_name="Ben"), NamedEntity)
    assert isinstance(Vessel(name="Serenity"), NamedEntity)


class TestVesselEquality:
    def test_distinct_objects_with_same_name_are_equal(self):
        a = Vessel(name="Enterprise", prefix="USS")
        b = Vessel(name="Enterprise", prefix="USS")
        assert a is not b
        assert a == b

    def test_equality_ignores_how_the_name_is_split(self):
        assert Vessel(name="USS Enterprise") == Vessel(name="Enterprise", prefix="USS")

    def test_different_names_are_not_equal(self):
        assert Vessel(name="Enterprise", prefix="USS") != Vessel(name="Serenity")
        assert Vessel(name="Enterprise", prefix="USS") != Vessel(name="Enterprise")

    def test_same_vessel_matches_operator(self):
        a = Vessel(name="Enterprise", prefix="USS")
        b = Vessel(name="Serenity")
        assert a.same_vessel(b) is (a == b) is False
        assert a.same_vessel(a) is True

    def test_comparison_with_other_types_is_false(self):
        ship = Vessel(name="Ben")
        assert ship != PlainPerson(full_name="Ben")
        assert ship != "Ben"

    def test_vessel_is_unhashable(self):
        with pytest.raises(TypeError):
            hash(Vessel(name="Serenity"))

    def test_no_ordering(self):
        with pytest.raises(TypeError):
            Vessel(name="A") < Vessel(name="B")  # noqa: B015


def test_roll_report_total_and_validation():
    report = RollReport(sides=6, rolls=[2, 3, 6])
    assert report.total == 11
    assert report.seed is None
    assert report.generated_at.tzinfo is not None
    with pytest.raises(ValidationError):
        RollReport(sides=0)
