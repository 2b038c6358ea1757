"""SQLite-backed engine: challenge sets, zones, connections, challenges and import runs."""

import json
import sqlite3
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

from tredit.engine.base import EngineClient
from tredit.errors import EngineError
from tredit.models.challenge import ValidatedChallenge
from tredit.models.reference import ChallengeSet, Zone, ZoneConnection, ZoneInput


class ImportRun:
    """Record of an import run."""

    def __init__(
        self,
        id: int,
        started_at: datetime,
        finished_at: Optional[datetime],
        status: str,
        rows_read: int,
        rows_accepted: int,
        rows_skipped: int,
        rows_failed: int,
        challenges_stored: int,
    ):
        self.id = id
        self.started_at = started_at
        self.finished_at = finished_at
        self.status = status
        self.rows_read = rows_read
        self.rows_accepted = rows_accepted
        self.rows_skipped = rows_skipped
        self.rows_failed = rows_failed
        self.challenges_stored = challenges_stored


class SqliteEngine(EngineClient):
    """
    Local stand-in for the game engine's challenge database.
    Challenges are stored as JSON payloads; ids come from SQLite.
    """

    def __init__(self, db_path: str | Path = "tredit.db"):
        self._db_path = Path(db_path)
        self._ensure_schema()

    def _connection(self) -> sqlite3.Connection:
        conn = sqlite3.connect(self._db_path)
        conn.row_factory = sqlite3.Row
        conn.execute("PRAGMA foreign_keys = ON")
        return conn

    def _ensure_schema(self) -> None:
        schema_path = Path(__file__).parent / "schema.sql"
        with self._connection() as conn:
            conn.executescript(schema_path.read_text())

    def _execute(self, sql: str, params: tuple = ()) -> sqlite3.Cursor:
        try:
            with self._connection() as conn:
                return conn.execute(sql, params)
        except sqlite3.Error as e:
            raise EngineError(f"{self._db_path}: {e}") from e

    def _query(self, sql: str, params: tuple = ()) -> list[sqlite3.Row]:
        try:
            with self._connection() as conn:
                return conn.execute(sql, params).fetchall()
        except sqlite3.Error as e:
            raise EngineError(f"{self._db_path}: {e}") from e

    def get_challenge_sets(self) -> list[ChallengeSet]:
        rows = self._query("SELECT id, name FROM challenge_sets ORDER BY id")
        return [ChallengeSet(id=r["id"], name=r["name"]) for r in rows]

    def add_challenge_set(self, name: str) -> ChallengeSet:
        cursor = self._execute("INSERT INTO challenge_sets (name) VALUES (?)", (name,))
        return ChallengeSet(id=cursor.lastrowid or 0, name=name)

    def get_zones(self) -> list[Zone]:
        rows = self._query("SELECT * FROM zones ORDER BY id")
        return [
            Zone(
                id=r["id"],
                zone=r["zone"],
                num_conn_zones=r["num_conn_zones"],
                num_connections=r["num_connections"],
                train_through=bool(r["train_through"]),
                mongus=bool(r["mongus"]),
                s_bahn_zone=bool(r["s_bahn_zone"]),
            )
            for r in rows
        ]

    def add_zone(self, zone: ZoneInput) -> Zone:
        cursor = self._execute(
            """
            INSERT INTO zones (zone, num_conn_zones, num_connections, train_through, mongus, s_bahn_zone)
            VALUES (?, ?, ?, ?, ?, ?)
            """,
            (
                zone.zone,
                zone.num_conn_zones,
                zone.num_connections,
                int(zone.train_through),
                int(zone.mongus),
                int(zone.s_bahn_zone),
            ),
        )
        return Zone(id=cursor.lastrowid or 0, **zone.model_dump())

    def add_minutes_to(self, connection: ZoneConnection) -> None:
        self._execute(
            """
            INSERT OR REPLACE INTO zone_connections (from_zone, to_zone, minutes)
            VALUES (?, ?, ?)
            """,
            (connection.from_zone, connection.to_zone, connection.minutes),
        )

    def get_connections(self) -> list[ZoneConnection]:
        rows = self._query("SELECT * FROM zone_connections ORDER BY from_zone, to_zone")
        return [
            ZoneConnection(from_zone=r["from_zone"], to_zone=r["to_zone"], minutes=r["minutes"])
            for r in rows
        ]

    def add_raw_challenge(self, challenge: ValidatedChallenge) -> int:
        data = json.dumps(challenge.model_dump(mode="json", exclude={"id"}))
        now = datetime.now(timezone.utc).isoformat()
        cursor = self._execute(
            "INSERT INTO challenges (kind, status, data, created_at) VALUES (?, ?, ?, ?)",
            (challenge.kind.value, challenge.status.value, data, now),
        )
        return cursor.lastrowid or 0

    def get_raw_challenges(self) -> list[ValidatedChallenge]:
        rows = self._query("SELECT id, data FROM challenges ORDER BY id")
        return [
            ValidatedChallenge.model_validate({**json.loads(r["data"]), "id": r["id"]})
            for r in rows
        ]

    def delete_all_challenges(self) -> int:
        cursor = self._execute("DELETE FROM challenges")
        return cursor.rowcount

    def start_run(self) -> ImportRun:
        """Record start of an import run. Returns ImportRun with id."""
        now = datetime.now(timezone.utc).isoformat()
        cursor = self._execute(
            "INSERT INTO import_runs (started_at, status) VALUES (?, 'running')",
            (now,),
        )
        return ImportRun(
            id=cursor.lastrowid or 0,
            started_at=datetime.fromisoformat(now),
            finished_at=None,
            status="running",
            rows_read=0,
            rows_accepted=0,
            rows_skipped=0,
            rows_failed=0,
            challenges_stored=0,
        )

    def finish_run(
        self,
        run_id: int,
        rows_read: int,
        rows_accepted: int,
        rows_skipped: int,
        rows_failed: int,
        challenges_stored: int,
        status: str = "completed",
    ) -> None:
        """Record completion of an import run."""
        now = datetime.now(timezone.utc).isoformat()
        self._execute(
            """
            UPDATE import_runs SET finished_at = ?, status = ?, rows_read = ?, rows_accepted = ?,
                rows_skipped = ?, rows_failed = ?, challenges_stored = ?
            WHERE id = ?
            """,
            (now, status, rows_read, rows_accepted, rows_skipped, rows_failed, challenges_stored, run_id),
        )

    def get_runs(self) -> list[ImportRun]:
        rows = self._query("SELECT * FROM import_runs ORDER BY id")
        return [
            ImportRun(
                id=r["id"],
                started_at=datetime.fromisoformat(r["started_at"]),
                finished_at=datetime.fromisoformat(r["finished_at"]) if r["finished_at"] else None,
                status=r["status"],
                rows_read=r["rows_read"],
                rows_accepted=r["rows_accepted"],
                rows_skipped=r["rows_skipped"],
                rows_failed=r["rows_failed"],
                challenges_stored=r["challenges_stored"],
            )
            for r in rows
        ]
