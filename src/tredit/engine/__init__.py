"""Engine collaborators: reference data lookup and challenge persistence."""

from tredit.engine.base import EngineClient
from tredit.engine.sqlite_store import ImportRun, SqliteEngine

__all__ = ["EngineClient", "ImportRun", "SqliteEngine"]
