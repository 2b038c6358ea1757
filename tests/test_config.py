"""Unit tests for ImportSettings."""

from pathlib import Path

from tredit.config import DEFAULT_SHEET_SETS, ImportSettings, load_settings
from tredit.sheets.constants import CHALLENGE_SHEET


class TestImportSettings:
    """Tests for settings defaults, YAML loading and env overrides."""

    def test_defaults(self) -> None:
        settings = ImportSettings()
        assert settings.challenge_sheet_url == CHALLENGE_SHEET
        assert settings.sheet_sets == DEFAULT_SHEET_SETS
        assert 154 in settings.s_bahn_zones
        assert settings.db_path == Path("tredit.db")

    def test_from_yaml_nested_sheets(self, tmp_path: Path) -> None:
        path = tmp_path / "settings.yaml"
        path.write_text(
            """
db_path: /tmp/game.db
sheets:
  challenge: https://example.com/challenges.csv
sheet_sets: [og, base]
s_bahn_zones: [110]
"""
        )
        settings = ImportSettings.from_yaml(path)
        assert settings.challenge_sheet_url == "https://example.com/challenges.csv"
        assert settings.db_path == Path("/tmp/game.db")
        assert settings.sheet_sets == ["og", "base"]
        assert settings.s_bahn_zones == [110]
        assert settings.zone_sheet_url == ImportSettings().zone_sheet_url

    def test_from_yaml_flat_keys(self, tmp_path: Path) -> None:
        path = tmp_path / "settings.yaml"
        path.write_text("zone_sheet_url: https://example.com/zones.csv\n")
        settings = ImportSettings.from_yaml(path)
        assert settings.zone_sheet_url == "https://example.com/zones.csv"

    def test_empty_yaml(self, tmp_path: Path) -> None:
        path = tmp_path / "settings.yaml"
        path.write_text("")
        assert ImportSettings.from_yaml(path) == ImportSettings()

    def test_env_overrides(self) -> None:
        settings = ImportSettings().with_env(
            {"TREDIT_DB": "other.db", "TREDIT_DISTANCE_SHEET": "https://example.com/d.csv", "TREDIT_ZONE_SHEET": ""}
        )
        assert settings.db_path == Path("other.db")
        assert settings.distance_sheet_url == "https://example.com/d.csv"
        assert settings.zone_sheet_url == ImportSettings().zone_sheet_url

    def test_load_settings_reads_environment(self, monkeypatch) -> None:
        monkeypatch.setenv("TREDIT_CHALLENGE_SHEET", "https://example.com/c.csv")
        assert load_settings().challenge_sheet_url == "https://example.com/c.csv"
