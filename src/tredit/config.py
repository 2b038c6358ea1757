"""Import settings: where the sheets live and which reference data to seed."""

import os
from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, Field

from tredit.sheets.constants import CHALLENGE_SHEET, DISTANCE_SHEET, ZONE_SHEET

DEFAULT_SHEET_SETS = [
    "og",
    "geso",
    "family",
    "transit_specialist",
    "off_with_the_hinges",
    "physical",
    "base",
]

DEFAULT_S_BAHN_ZONES = [
    110, 112, 117, 120, 121, 132, 133, 134, 141, 142, 151, 154, 155, 156, 180, 181,
]

ENV_OVERRIDES = {
    "TREDIT_DB": "db_path",
    "TREDIT_CHALLENGE_SHEET": "challenge_sheet_url",
    "TREDIT_ZONE_SHEET": "zone_sheet_url",
    "TREDIT_DISTANCE_SHEET": "distance_sheet_url",
}


class ImportSettings(BaseModel):
    """Settings for one import run."""

    db_path: Path = Field(default=Path("tredit.db"), description="Engine SQLite database")

    challenge_sheet_url: str = CHALLENGE_SHEET
    zone_sheet_url: str = ZONE_SHEET
    distance_sheet_url: str = DISTANCE_SHEET

    sheet_sets: list[str] = Field(
        default_factory=lambda: list(DEFAULT_SHEET_SETS),
        description="Challenge sets the sheet may refer to; missing ones are created",
    )
    s_bahn_zones: list[int] = Field(
        default_factory=lambda: list(DEFAULT_S_BAHN_ZONES),
        description="Zone numbers served by the S-Bahn",
    )

    @classmethod
    def from_yaml(cls, path: str | Path) -> "ImportSettings":
        """Load settings from YAML. Supports a nested `sheets:` block or flat keys."""
        data = yaml.safe_load(Path(path).read_text()) or {}
        sheets = data.get("sheets") or {}
        flat: dict = {}
        for key in ("challenge", "zone", "distance"):
            url = sheets.get(key, data.get(f"{key}_sheet_url"))
            if url:
                flat[f"{key}_sheet_url"] = url
        for key in ("db_path", "sheet_sets", "s_bahn_zones"):
            if data.get(key) is not None:
                flat[key] = data[key]
        return cls.model_validate(flat)

    def with_env(self, environ: Optional[dict[str, str]] = None) -> "ImportSettings":
        """Return a copy with TREDIT_* environment variables applied."""
        environ = os.environ if environ is None else environ
        update = {
            field: environ[name]
            for name, field in ENV_OVERRIDES.items()
            if environ.get(name)
        }
        if "db_path" in update:
            update["db_path"] = Path(update["db_path"])
        return self.model_copy(update=update)


def load_settings(path: Optional[str | Path] = None) -> ImportSettings:
    """Defaults, then the YAML file if given, then the environment."""
    settings = ImportSettings.from_yaml(path) if path else ImportSettings()
    return settings.with_env()
