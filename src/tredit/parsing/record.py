"""Turn one challenge sheet row into a ValidatedChallenge."""

from typing import Iterable, Optional

from tredit.errors import (
    MissingPlace,
    PlacedChallengeShapeViolation,
    PlaceholderOnPlacelessChallenge,
    UnknownChallengeSet,
    UnknownZone,
)
from tredit.models.challenge import (
    RANDOM_PLACE_MARKERS,
    ChallengeKind,
    ChallengeStatus,
    RandomPlaceType,
    RepetitionRange,
    ValidatedChallenge,
)
from tredit.models.reference import ChallengeSet, Zone

from . import columns as col
from .fields import (
    Record,
    convert,
    get_text,
    parse_bool,
    parse_text_option,
    parse_to,
    parse_to_option,
    parse_to_or,
    split_list,
)


def index_challenge_sets(challenge_sets: Iterable[ChallengeSet]) -> dict[str, int]:
    """Map set name -> id. The first set with a given name wins."""
    index: dict[str, int] = {}
    for challenge_set in challenge_sets:
        index.setdefault(challenge_set.name, challenge_set.id)
    return index


def index_zones(zones: Iterable[Zone]) -> dict[int, int]:
    """Map public zone number -> internal zone id. The first zone wins."""
    index: dict[int, int] = {}
    for zone in zones:
        index.setdefault(zone.zone, zone.id)
    return index


def resolve_sets(text: str, set_index: dict[str, int]) -> list[int]:
    """Resolve a comma-separated list of set names, keeping order and duplicates."""
    ids = []
    for name in split_list(text):
        if name not in set_index:
            raise UnknownChallengeSet(name)
        ids.append(set_index[name])
    return ids


def resolve_zones(text: str, zone_index: dict[int, int]) -> list[int]:
    """Resolve a comma-separated list of zone numbers. Blank cell means no zones."""
    text = text.strip()
    if not text:
        return []
    ids = []
    for token in split_list(text):
        number = convert(col.ZONE, token, int)
        if number not in zone_index:
            raise UnknownZone(number)
        ids.append(zone_index[number])
    return ids


def check_shape(
    kind: ChallengeKind,
    title: Optional[str],
    description: Optional[str],
    place: Optional[str],
) -> None:
    """Placeless kinds need a place; placed kinds need title and description and no place."""
    if kind.is_placeless:
        if place is None:
            raise MissingPlace(kind)
    elif title is None or description is None or place is not None:
        raise PlacedChallengeShapeViolation(kind)


def detect_random_place(*texts: Optional[str]) -> Optional[RandomPlaceType]:
    """First marker found, scanning texts in order and markers in declaration order."""
    for text in texts:
        if not text:
            continue
        for place_type, marker in RANDOM_PLACE_MARKERS.items():
            if marker in text:
                return place_type
    return None


def read_translations(record: Record, locale_columns: dict[str, str]) -> dict[str, str]:
    translations = {}
    for locale, field in locale_columns.items():
        text = parse_to_option(record, field, str)
        if text is not None:
            translations[locale] = text
    return translations


def validate_record(
    record: Record,
    challenge_sets: Iterable[ChallengeSet],
    zones: Iterable[Zone],
) -> Optional[ValidatedChallenge]:
    """
    Validate one challenge sheet row.

    Returns None for rows whose status says they are not ready for import.
    Raises a RecordError subclass for anything else that does not hold up;
    no partially built challenge ever escapes.
    """
    status = parse_to(record, col.STATUS, ChallengeStatus)
    if not status.is_importable:
        return None

    kind = parse_to(record, col.CHALLENGE_TYPE, ChallengeKind)
    sets = resolve_sets(get_text(record, col.SETS), index_challenge_sets(challenge_sets))

    title = parse_text_option(record, col.TITLE)
    description = parse_text_option(record, col.DESCRIPTION)
    place = parse_text_option(record, col.PLACE)
    check_shape(kind, title, description, place)

    random_place = detect_random_place(title, description)
    if random_place is not None and kind.is_placeless:
        raise PlaceholderOnPlacelessChallenge(kind, random_place)

    zone_ids = resolve_zones(get_text(record, col.ZONE), index_zones(zones))

    translated_titles = read_translations(record, col.TRANSLATED_TITLES)
    translated_descriptions = read_translations(record, col.TRANSLATED_DESCRIPTIONS)

    challenge = ValidatedChallenge(
        kind=kind,
        sets=sets,
        status=status,
        title=title,
        description=description,
        place=place,
        kaffskala=parse_to_option(record, col.KAFFSKALA, int),
        grade=parse_to_option(record, col.GRADE, int),
        zone=zone_ids,
        bias_sat=parse_to_or(record, col.BIAS_SAT, float, 1.0),
        bias_sun=parse_to_or(record, col.BIAS_SUN, float, 1.0),
        walking_time=parse_to_or(record, col.WALKING_TIME, int, 0),
        stationary_time=parse_to_or(record, col.STATIONARY_TIME, int, 0),
        additional_points=parse_to_or(record, col.ADDITIONAL_POINTS, int, 0),
        repetitions=RepetitionRange(
            start=parse_to_or(record, col.MIN_REPS, int, 0),
            end=parse_to_or(record, col.MAX_REPS, int, 0),
        ),
        points_per_rep=parse_to_or(record, col.POINTS_PER_REP, int, 0),
        station_distance=parse_to_or(record, col.STATION_DISTANCE, int, 0),
        time_to_hb=parse_to_or(record, col.TIME_TO_HB, int, 0),
        departures=parse_to_or(record, col.DEPARTURES, int, 0),
        dead_end=parse_bool(record, col.DEAD_END),
        no_disembark=parse_bool(record, col.NO_DISEMBARK),
        fixed=parse_bool(record, col.FIXED_POINTS),
        in_perimeter_override=parse_bool(record, col.IN_PERIMETER),
        random_place=random_place,
        translated_titles=translated_titles,
        translated_descriptions=translated_descriptions,
        comment=parse_to(record, col.COMMENT, str),
    )

    challenge.check_validity()
    return challenge
