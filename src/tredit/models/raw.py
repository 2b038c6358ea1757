"""Raw sheet row representation before validation."""

from pydantic import BaseModel, ConfigDict, Field


class RawRecord(BaseModel):
    """
    Untyped row from a published sheet.
    Sheet sources populate this from CSV rows; every value is text.
    """

    model_config = ConfigDict(extra="allow")

    data: dict[str, str] = Field(default_factory=dict)
