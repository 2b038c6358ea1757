"""Unit tests for data models."""

import pytest

from tredit.errors import InvalidChallenge
from tredit.models.challenge import (
    ChallengeKind,
    ChallengeStatus,
    RandomPlaceType,
    RepetitionRange,
    ValidatedChallenge,
)
from tredit.models.raw import RawRecord
from tredit.models.reference import ChallengeSet, Zone, ZoneInput


def _make_challenge(**kwargs) -> ValidatedChallenge:
    """Minimal valid placed challenge."""
    defaults = {
        "kind": ChallengeKind.UNSPEZIFISCH,
        "status": ChallengeStatus.APPROVED,
        "sets": [1],
        "title": "Hop",
        "description": "Hop on one leg",
    }
    defaults.update(kwargs)
    return ValidatedChallenge(**defaults)


class TestEnums:
    """Tests for the closed challenge enums."""

    def test_placeless_kinds(self) -> None:
        placeless = {k for k in ChallengeKind if k.is_placeless}
        assert placeless == {ChallengeKind.KAFF, ChallengeKind.ZKAFF}
        assert len(ChallengeKind) == 6

    def test_importable_statuses(self) -> None:
        importable = {s for s in ChallengeStatus if s.is_importable}
        assert importable == {ChallengeStatus.APPROVED, ChallengeStatus.REFACTOR}
        assert len(ChallengeStatus) == 6

    def test_markers(self) -> None:
        assert RandomPlaceType.ZONE.marker == "%z"
        assert RandomPlaceType.S_BAHN_ZONE.marker == "%s"

    def test_str_is_sheet_value(self) -> None:
        assert str(ChallengeKind.ZKAFF) == "ZKaff"
        assert str(ChallengeStatus.TO_SORT) == "ToSort"


class TestRepetitionRange:
    """Tests for the half-open repetition range."""

    def test_half_open(self) -> None:
        reps = RepetitionRange(start=1, end=3)
        assert 1 in reps
        assert 2 in reps
        assert 3 not in reps
        assert len(reps) == 2
        assert reps.to_range() == range(1, 3)

    def test_default_is_empty(self) -> None:
        reps = RepetitionRange()
        assert len(reps) == 0
        assert 0 not in reps


class TestCheckValidity:
    """Tests for ValidatedChallenge.check_validity."""

    def test_valid_placed(self) -> None:
        _make_challenge().check_validity()

    def test_valid_placeless(self) -> None:
        _make_challenge(
            kind=ChallengeKind.ZKAFF, title=None, description=None, place="Gurbrü"
        ).check_validity()

    def test_placeless_without_place(self) -> None:
        challenge = _make_challenge(kind=ChallengeKind.KAFF, title=None, description=None)
        with pytest.raises(InvalidChallenge) as exc:
            challenge.check_validity()
        assert exc.value.field == "place"

    def test_placeless_with_random_place(self) -> None:
        challenge = _make_challenge(
            kind=ChallengeKind.KAFF,
            title=None,
            description=None,
            place="Ins",
            random_place=RandomPlaceType.ZONE,
        )
        with pytest.raises(InvalidChallenge) as exc:
            challenge.check_validity()
        assert exc.value.field == "random_place"

    def test_placed_with_place(self) -> None:
        with pytest.raises(InvalidChallenge):
            _make_challenge(place="Bern").check_validity()

    def test_placed_without_description(self) -> None:
        with pytest.raises(InvalidChallenge):
            _make_challenge(description=None).check_validity()

    def test_no_sets(self) -> None:
        with pytest.raises(InvalidChallenge) as exc:
            _make_challenge(sets=[]).check_validity()
        assert exc.value.field == "sets"

    def test_negative_bias(self) -> None:
        with pytest.raises(InvalidChallenge) as exc:
            _make_challenge(bias_sun=-0.5).check_validity()
        assert exc.value.field == "bias_sun"

    def test_infinite_bias(self) -> None:
        with pytest.raises(InvalidChallenge):
            _make_challenge(bias_sat=float("inf")).check_validity()

    def test_negative_grade(self) -> None:
        with pytest.raises(InvalidChallenge) as exc:
            _make_challenge(grade=-1).check_validity()
        assert exc.value.field == "grade"

    def test_negative_min_reps(self) -> None:
        with pytest.raises(InvalidChallenge) as exc:
            _make_challenge(repetitions=RepetitionRange(start=-1, end=2)).check_validity()
        assert exc.value.field == "min_reps"

    def test_negative_points_allowed(self) -> None:
        """Points may be negative: a penalty challenge."""
        _make_challenge(additional_points=-10).check_validity()


class TestSerialization:
    """Tests for JSON round trips used by the store."""

    def test_json_dump_uses_sheet_values(self) -> None:
        data = _make_challenge(random_place=RandomPlaceType.S_BAHN_ZONE).model_dump(mode="json")
        assert data["kind"] == "Unspezifisch"
        assert data["status"] == "Approved"
        assert data["random_place"] == "SBahnZone"
        assert data["repetitions"] == {"start": 0, "end": 0}
        assert data["id"] is None

    def test_model_validate_restores(self) -> None:
        original = _make_challenge(zone=[3, 4], translated_titles={"de_ch": "Hüpf"})
        restored = ValidatedChallenge.model_validate(original.model_dump(mode="json"))
        assert restored == original

    def test_frozen_containers_dump_as_plain_json(self) -> None:
        data = _make_challenge(zone=[3, 4], translated_titles={"de_ch": "Hüpf"}).model_dump(mode="json")
        assert data["sets"] == [1]
        assert data["zone"] == [3, 4]
        assert type(data["translated_titles"]) is dict
        assert data["translated_titles"] == {"de_ch": "Hüpf"}
        assert data["translated_descriptions"] == {}


class TestReferenceModels:
    """Tests for raw and reference models."""

    def test_raw_record_defaults_empty(self) -> None:
        assert RawRecord().data == {}

    def test_zone_extends_zone_input(self) -> None:
        zone = Zone(id=5, **ZoneInput(zone=110, mongus=True).model_dump())
        assert zone.zone == 110
        assert zone.mongus is True
        assert zone.s_bahn_zone is False

    def test_challenge_set(self) -> None:
        assert ChallengeSet(id=1, name="og").name == "og"
