"""Import orchestration: reference data sync → validate rows → persist challenges."""

import logging
from dataclasses import dataclass, field
from typing import Iterable, Mapping, Union

from tredit.config import ImportSettings
from tredit.engine.base import EngineClient
from tredit.errors import EngineError, RecordError
from tredit.models.challenge import ValidatedChallenge
from tredit.models.raw import RawRecord
from tredit.models.reference import ChallengeSet, Zone
from tredit.parsing import parse_connection_row, parse_zone_row, validate_record
from tredit.sheets.base import SheetSource

logger = logging.getLogger(__name__)

Row = Union[RawRecord, Mapping[str, str]]


@dataclass
class ImportReport:
    """Outcome of validating and persisting one batch of challenge rows."""

    rows_read: int = 0
    skipped: int = 0
    accepted: list[ValidatedChallenge] = field(default_factory=list)
    failures: list[tuple[int, RecordError]] = field(default_factory=list)
    stored_ids: list[int] = field(default_factory=list)
    store_failures: list[tuple[int, EngineError]] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failures and not self.store_failures


def _row_data(row: Row) -> Mapping[str, str]:
    return row.data if isinstance(row, RawRecord) else row


def import_records(
    records: Iterable[Row],
    challenge_sets: list[ChallengeSet],
    zones: list[Zone],
) -> ImportReport:
    """
    Validate every row in order. Bad rows are logged and recorded, never fatal.
    Row indexes are 0-based positions in `records`.
    """
    report = ImportReport()
    for index, row in enumerate(records):
        report.rows_read += 1
        try:
            challenge = validate_record(_row_data(row), challenge_sets, zones)
        except RecordError as e:
            logger.warning("Error while parsing line %d: %s", index, e)
            report.failures.append((index, e))
            continue
        if challenge is None:
            report.skipped += 1
        else:
            report.accepted.append(challenge)
    logger.info(
        "Parsed %d rows: %d accepted, %d skipped, %d failed",
        report.rows_read,
        len(report.accepted),
        report.skipped,
        len(report.failures),
    )
    return report


def persist_challenges(engine: EngineClient, report: ImportReport) -> ImportReport:
    """Hand accepted challenges to the engine one at a time. Earlier successes stay."""
    for position, challenge in enumerate(report.accepted):
        try:
            report.stored_ids.append(engine.add_raw_challenge(challenge))
        except EngineError as e:
            logger.warning("Could not store challenge %d: %s", position, e)
            report.store_failures.append((position, e))
    return report


def sync_challenge_sets(engine: EngineClient, sheet_sets: list[str]) -> list[ChallengeSet]:
    """Create configured sets the engine lacks; return only the configured sets."""
    known = {s.name for s in engine.get_challenge_sets()}
    for name in sheet_sets:
        if name not in known:
            logger.info("Adding missing challenge set %s", name)
            try:
                engine.add_challenge_set(name)
            except EngineError as e:
                logger.warning("Could not add challenge set %s: %s", name, e)
                continue
            known.add(name)
    return [s for s in engine.get_challenge_sets() if s.name in sheet_sets]


def sync_zones(
    engine: EngineClient,
    source: SheetSource,
    settings: ImportSettings,
) -> list[Zone]:
    """Add zones from the zone sheet that the engine does not know yet."""
    known = {z.zone for z in engine.get_zones()}
    for index, row in enumerate(source.fetch(settings.zone_sheet_url)):
        try:
            zone = parse_zone_row(row.data, settings.s_bahn_zones)
        except RecordError as e:
            logger.warning("Skipping zone sheet line %d: %s", index, e)
            continue
        if zone.zone in known:
            continue
        try:
            engine.add_zone(zone)
        except EngineError as e:
            logger.warning("Could not add zone %d: %s", zone.zone, e)
            continue
        known.add(zone.zone)
    return engine.get_zones()


def sync_connections(
    engine: EngineClient,
    source: SheetSource,
    settings: ImportSettings,
    zones: list[Zone],
) -> int:
    """Add travel times from the distance sheet. Returns how many were added."""
    added = 0
    for index, row in enumerate(source.fetch(settings.distance_sheet_url)):
        try:
            connection = parse_connection_row(row.data, zones)
        except RecordError as e:
            logger.warning("Skipping distance sheet line %d: %s", index, e)
            continue
        try:
            engine.add_minutes_to(connection)
        except EngineError as e:
            logger.warning("Could not add connection on distance sheet line %d: %s", index, e)
            continue
        added += 1
    return added


def run_import(
    engine: EngineClient,
    source: SheetSource,
    settings: ImportSettings,
) -> ImportReport:
    """
    Full sheet import, in order: challenge sets, zones, zone connections,
    then challenges. Sheet fetch errors (httpx.HTTPError) propagate; engine
    errors on single items are logged and that item is skipped.
    """
    challenge_sets = sync_challenge_sets(engine, settings.sheet_sets)
    zones = sync_zones(engine, source, settings)
    connections = sync_connections(engine, source, settings, zones)
    logger.info(
        "Reference data: %d challenge sets, %d zones, %d connections added",
        len(challenge_sets),
        len(zones),
        connections,
    )

    records = source.fetch(settings.challenge_sheet_url)
    report = import_records(records, challenge_sets, zones)
    return persist_challenges(engine, report)
