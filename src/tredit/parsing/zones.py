"""Parse zone sheet and distance sheet rows."""

from typing import Iterable

from tredit.errors import UnknownZone
from tredit.models.reference import Zone, ZoneConnection, ZoneInput

from . import columns as col
from .fields import Record, parse_bool, parse_to
from .record import index_zones


def parse_zone_row(record: Record, s_bahn_zones: Iterable[int] = ()) -> ZoneInput:
    """
    Zone sheet row -> ZoneInput. S-Bahn membership comes from configuration.
    The two flag columns use the same boolean reader as challenge rows.
    """
    number = parse_to(record, col.ZONE_NUMBER, int)
    return ZoneInput(
        zone=number,
        num_conn_zones=parse_to(record, col.ZONE_NUM_CONN_ZONES, int),
        num_connections=parse_to(record, col.ZONE_NUM_CONNECTIONS, int),
        train_through=parse_bool(record, col.ZONE_TRAIN_THROUGH),
        mongus=parse_bool(record, col.ZONE_MONGUS),
        s_bahn_zone=number in set(s_bahn_zones),
    )


def parse_connection_row(record: Record, zones: Iterable[Zone]) -> ZoneConnection:
    """Distance sheet row -> ZoneConnection between internal zone ids."""
    zone_index = index_zones(zones)
    ids = []
    for field in (col.DISTANCE_FROM, col.DISTANCE_TO):
        number = parse_to(record, field, int)
        if number not in zone_index:
            raise UnknownZone(number)
        ids.append(zone_index[number])
    return ZoneConnection(
        from_zone=ids[0],
        to_zone=ids[1],
        minutes=parse_to(record, col.DISTANCE_MINUTES, int),
    )
