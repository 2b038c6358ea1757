"""Abstract interface to the engine that owns challenges and reference data."""

from abc import ABC, abstractmethod

from tredit.models.challenge import ValidatedChallenge
from tredit.models.reference import ChallengeSet, Zone, ZoneConnection, ZoneInput


class EngineClient(ABC):
    """
    Everything the importer needs from the engine.
    Implementations raise EngineError when a request cannot be completed.
    """

    @abstractmethod
    def get_challenge_sets(self) -> list[ChallengeSet]:
        pass

    @abstractmethod
    def add_challenge_set(self, name: str) -> ChallengeSet:
        pass

    @abstractmethod
    def get_zones(self) -> list[Zone]:
        pass

    @abstractmethod
    def add_zone(self, zone: ZoneInput) -> Zone:
        pass

    @abstractmethod
    def add_minutes_to(self, connection: ZoneConnection) -> None:
        """Store the travel time between two zones."""
        pass

    @abstractmethod
    def add_raw_challenge(self, challenge: ValidatedChallenge) -> int:
        """Store a validated challenge and return the id assigned to it."""
        pass

    @abstractmethod
    def get_raw_challenges(self) -> list[ValidatedChallenge]:
        pass

    @abstractmethod
    def delete_all_challenges(self) -> int:
        """Delete every stored challenge. Returns how many were deleted."""
        pass
