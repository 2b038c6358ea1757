"""Challenge enums and the validated challenge model."""

import math
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator

from tredit.errors import InvalidChallenge


class ChallengeKind(str, Enum):
    """Challenge type as written in the `challenge_type` column."""

    KAFF = "Kaff"
    ZKAFF = "ZKaff"
    ORTSSPEZIFISCH = "Ortsspezifisch"
    REGIONSSPEZIFISCH = "Regionsspezifisch"
    UNSPEZIFISCH = "Unspezifisch"
    ZONEABLE = "Zoneable"

    @property
    def is_placeless(self) -> bool:
        """Kaff-style challenges name a bare place instead of title/description."""
        return self in PLACELESS_KINDS

    def __str__(self) -> str:
        return self.value


PLACELESS_KINDS = frozenset({ChallengeKind.KAFF, ChallengeKind.ZKAFF})


class ChallengeStatus(str, Enum):
    """Editorial status of a sheet row."""

    APPROVED = "Approved"
    REFACTOR = "Refactor"
    EDITED = "Edited"
    REJECTED = "Rejected"
    GLORIOUS = "Glorious"
    TO_SORT = "ToSort"

    @property
    def is_importable(self) -> bool:
        return self in (ChallengeStatus.APPROVED, ChallengeStatus.REFACTOR)

    def __str__(self) -> str:
        return self.value


class RandomPlaceType(str, Enum):
    """Placeholder the engine replaces with a random zone name."""

    ZONE = "Zone"
    S_BAHN_ZONE = "SBahnZone"

    @property
    def marker(self) -> str:
        return RANDOM_PLACE_MARKERS[self]

    def __str__(self) -> str:
        return self.value


# Checked in this order
RANDOM_PLACE_MARKERS: dict[RandomPlaceType, str] = {
    RandomPlaceType.ZONE: "%z",
    RandomPlaceType.S_BAHN_ZONE: "%s",
}


class RepetitionRange(BaseModel):
    """Half-open range [start, end) of how often a challenge may be repeated."""

    model_config = ConfigDict(frozen=True)

    start: int = 0
    end: int = 0

    def __contains__(self, value: int) -> bool:
        return self.start <= value < self.end

    def __len__(self) -> int:
        return max(0, self.end - self.start)

    def to_range(self) -> range:
        return range(self.start, self.end)


_NON_NEGATIVE_FIELDS = (
    "walking_time",
    "stationary_time",
    "station_distance",
    "time_to_hb",
    "departures",
)


class ValidatedChallenge(BaseModel):
    """
    Challenge ready to be handed to the engine.
    Immutable, including the set, zone and translation containers;
    `id` stays None until the engine stores it.
    """

    model_config = ConfigDict(frozen=True)

    kind: ChallengeKind
    sets: tuple[int, ...] = Field(default=(), description="Challenge set ids")
    status: ChallengeStatus

    title: Optional[str] = None
    description: Optional[str] = None
    place: Optional[str] = None

    kaffskala: Optional[int] = None
    grade: Optional[int] = None
    zone: tuple[int, ...] = Field(default=(), description="Zone ids")

    bias_sat: float = 1.0
    bias_sun: float = 1.0
    walking_time: int = 0
    stationary_time: int = 0
    additional_points: int = 0
    repetitions: RepetitionRange = Field(default_factory=RepetitionRange)
    points_per_rep: int = 0
    station_distance: int = 0
    time_to_hb: int = 0
    departures: int = 0

    dead_end: bool = False
    no_disembark: bool = False
    fixed: bool = False
    in_perimeter_override: Optional[bool] = None

    random_place: Optional[RandomPlaceType] = None
    translated_titles: Mapping[str, str] = Field(default_factory=dict, validate_default=True)
    translated_descriptions: Mapping[str, str] = Field(default_factory=dict, validate_default=True)

    comment: str = ""
    id: Optional[int] = None

    @field_validator("translated_titles", "translated_descriptions", mode="after")
    @classmethod
    def _freeze_translations(cls, value: Mapping[str, str]) -> Mapping[str, str]:
        return MappingProxyType(dict(value))

    @field_serializer("translated_titles", "translated_descriptions")
    def _dump_translations(self, value: Mapping[str, str]) -> dict[str, str]:
        return dict(value)

    def check_validity(self) -> None:
        """
        Raise InvalidChallenge if the challenge is structurally unusable.

        Rules: placeless kinds carry a place and neither title nor description;
        placed kinds carry title and description and no place; random places
        only on placed kinds; at least one set; repetitions start <= end;
        biases finite and non-negative; counts, times and distances
        non-negative.
        """
        if self.kind.is_placeless:
            if self.place is None:
                raise InvalidChallenge("place", f"{self.kind} challenge needs a place")
            if self.title is not None:
                raise InvalidChallenge("title", f"{self.kind} challenge can't have a title")
            if self.description is not None:
                raise InvalidChallenge(
                    "description", f"{self.kind} challenge can't have a description"
                )
            if self.random_place is not None:
                raise InvalidChallenge(
                    "random_place", f"{self.kind} challenge can't have a random place"
                )
        else:
            if self.title is None or self.description is None:
                raise InvalidChallenge(
                    "title", f"{self.kind} challenge needs a title and a description"
                )
            if self.place is not None:
                raise InvalidChallenge("place", f"{self.kind} challenge can't have a place")

        if not self.sets:
            raise InvalidChallenge("sets", "challenge belongs to no challenge set")

        if self.repetitions.start < 0:
            raise InvalidChallenge("min_reps", "can't be negative")
        if self.repetitions.start > self.repetitions.end:
            raise InvalidChallenge(
                "max_reps",
                f"{self.repetitions.end} is smaller than min_reps {self.repetitions.start}",
            )

        for name in ("bias_sat", "bias_sun"):
            value = getattr(self, name)
            if not math.isfinite(value) or value < 0:
                raise InvalidChallenge(name, f"{value} is not a usable weight")

        for name in ("kaffskala", "grade"):
            value = getattr(self, name)
            if value is not None and value < 0:
                raise InvalidChallenge(name, "can't be negative")

        for name in _NON_NEGATIVE_FIELDS:
            if getattr(self, name) < 0:
                raise InvalidChallenge(name, "can't be negative")
