"""Data models for sheet rows, reference data and validated challenges."""

from tredit.models.challenge import (
    ChallengeKind,
    ChallengeStatus,
    RandomPlaceType,
    RepetitionRange,
    ValidatedChallenge,
)
from tredit.models.raw import RawRecord
from tredit.models.reference import ChallengeSet, Zone, ZoneConnection, ZoneInput

__all__ = [
    "ChallengeKind",
    "ChallengeSet",
    "ChallengeStatus",
    "RandomPlaceType",
    "RawRecord",
    "RepetitionRange",
    "ValidatedChallenge",
    "Zone",
    "ZoneConnection",
    "ZoneInput",
]
