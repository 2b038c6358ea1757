"""Row parsing: typed field readers, challenge validation, reference rows."""

from tredit.parsing.record import validate_record
from tredit.parsing.zones import parse_connection_row, parse_zone_row

__all__ = ["parse_connection_row", "parse_zone_row", "validate_record"]
