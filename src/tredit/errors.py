"""Errors raised while turning sheet rows into challenges."""

from typing import Any, Optional


class RecordError(ValueError):
    """Base class for row-local failures. Never fatal to a batch."""


class FieldMissing(RecordError):
    """Column is not present in the row at all."""

    def __init__(self, field: str):
        self.field = field
        super().__init__(f'field "{field}" not found')


class FieldMalformed(RecordError):
    """Column is present but its text does not convert to the target type."""

    def __init__(self, field: str, target: Any, value: str):
        self.field = field
        self.target = target
        self.value = value
        type_name = getattr(target, "__name__", str(target))
        super().__init__(f"couldn't parse {field} ({value!r}) into {type_name}")


class UnknownChallengeSet(RecordError):
    """A name in the `sets` column matches no known challenge set."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"couldn't find challenge set {name!r}")


class UnknownZone(RecordError):
    """A number in the `zone` column matches no known zone."""

    def __init__(self, zone: int):
        self.zone = zone
        super().__init__(f"couldn't find zone {zone} in known zones")


class MissingPlace(RecordError):
    """Placeless challenge kind without a place."""

    def __init__(self, kind: Any):
        self.kind = kind
        super().__init__(f"challenge type is {kind}, but there is no place")


class PlacedChallengeShapeViolation(RecordError):
    """Placed challenge kind without title and description, or with a place."""

    def __init__(self, kind: Any):
        self.kind = kind
        super().__init__(
            f"challenge type is {kind}, but either title or description "
            "are missing or place is present"
        )


class PlaceholderOnPlacelessChallenge(RecordError):
    """Random place marker on a challenge kind that has a fixed place."""

    def __init__(self, kind: Any, marker: Any):
        self.kind = kind
        self.marker = marker
        super().__init__(f"challenge type is {kind} but it has random place {marker}")


class InvalidChallenge(RecordError):
    """Constructed challenge fails its structural validity check."""

    def __init__(self, field: Optional[str], reason: str):
        self.field = field
        self.reason = reason
        super().__init__(f"{field}: {reason}" if field else reason)


class EngineError(RuntimeError):
    """The engine collaborator could not complete a request."""
