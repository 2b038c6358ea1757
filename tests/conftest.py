"""Pytest fixtures for tredit tests."""

import csv
import tempfile
from io import StringIO
from pathlib import Path

import pytest

from tredit.models.reference import ChallengeSet, Zone


def _build_csv(rows: list[dict]) -> str:
    """Build CSV string from list of row dicts."""
    if not rows:
        return ""
    out = StringIO()
    writer = csv.DictWriter(out, fieldnames=rows[0].keys())
    writer.writeheader()
    writer.writerows(rows)
    return out.getvalue()


@pytest.fixture
def challenge_sets() -> list[ChallengeSet]:
    """Reference challenge sets as the engine returns them."""
    return [
        ChallengeSet(id=1, name="A"),
        ChallengeSet(id=2, name="base"),
        ChallengeSet(id=3, name="family"),
    ]


@pytest.fixture
def zones() -> list[Zone]:
    """Reference zones: public number -> internal id."""
    return [
        Zone(id=11, zone=110),
        Zone(id=12, zone=120),
        Zone(id=13, zone=154, s_bahn_zone=True),
    ]


@pytest.fixture
def placed_row() -> dict[str, str]:
    """Minimal placed challenge row (all optional columns left out)."""
    return {
        "status": "Approved",
        "challenge_type": "Ortsspezifisch",
        "sets": "A",
        "title": "go to %z",
        "description": "x",
        "place": "",
        "zone": "",
        "dead_end": "false",
        "no_disembark": "false",
        "fixed_points": "true",
        "in_perim": "true",
        "comment": "",
    }


@pytest.fixture
def placeless_row() -> dict[str, str]:
    """Kaff challenge row: a bare place, no title/description."""
    return {
        "status": "Refactor",
        "challenge_type": "Kaff",
        "sets": "base, family",
        "title": "",
        "description": "",
        "place": "  Hinterfultigen ",
        "zone": "110, 154",
        "dead_end": "TRUE",
        "no_disembark": "0",
        "fixed_points": "False",
        "in_perim": "1",
        "comment": "needs a photo",
    }


@pytest.fixture
def full_sheet_row() -> dict[str, str]:
    """Placed challenge row with every column of the challenge sheet."""
    return {
        "status": "Approved",
        "challenge_type": "Zoneable",
        "sets": "base",
        "title": "Sing in %s",
        "description": "Sing a song on the platform",
        "place": "",
        "zone": "120",
        "title_de_ch": "Sing in %s",
        "description_de_ch": "Sing es Lied uf em Perron",
        "title_en_uk": "Sing in %s",
        "description_en_uk": "",
        "title_fr_ch": "Chante à %s",
        "description_fr_ch": "Chante une chanson sur le quai",
        "kaffskala": "",
        "grade": "3",
        "bias_sat": "0.5",
        "bias_sun": "",
        "walking_time": "5",
        "stationary_time": "10",
        "additional_points": "20",
        "min_reps": "1",
        "max_reps": "4",
        "points_per_rep": "15",
        "station_distance": "300",
        "time_to_hb": "25",
        "departures": "4",
        "dead_end": "false",
        "no_disembark": "true",
        "fixed_points": "false",
        "in_perim": "false",
        "comment": "loud",
    }


@pytest.fixture
def temp_db_path() -> Path:
    """Temporary engine database."""
    with tempfile.NamedTemporaryFile(suffix=".db", delete=False) as f:
        path = Path(f.name)
    yield path
    path.unlink(missing_ok=True)
