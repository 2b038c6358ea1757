"""Reference data owned by the engine: challenge sets, zones, connections."""

from pydantic import BaseModel, Field


class ChallengeSet(BaseModel):
    """Named group of challenges; sheet rows refer to sets by name."""

    id: int
    name: str


class ZoneInput(BaseModel):
    """Zone as described by the zone sheet, before the engine assigns an id."""

    zone: int = Field(..., description="Public fare zone number, e.g. 110")
    num_conn_zones: int = 0
    num_connections: int = 0
    train_through: bool = False
    mongus: bool = False
    s_bahn_zone: bool = False


class Zone(ZoneInput):
    """Zone known to the engine. Sheet rows refer to zones by `zone` number."""

    id: int


class ZoneConnection(BaseModel):
    """Travel time between two engine zones, by internal id."""

    from_zone: int
    to_zone: int
    minutes: int
