# streamcatalog/models/competitors.py
from pydantic import BaseModel, ConfigDict

from .enums import CompetitorPattern


class Competitors(BaseModel):
    """The two sides of a match as parsed from its title."""

    model_config = ConfigDict(frozen=True)

    competitor1: str
    competitor2: str = ""
    pattern_used: CompetitorPattern = CompetitorPattern.UNKNOWN

    @property
    def text(self) -> str:
        return f"{self.competitor1} {self.competitor2}".strip()
