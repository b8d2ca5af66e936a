from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class SupplierFields(BaseModel):
    """Fields an adapter pulled out of one raw supplier record, still unrepaired."""

    model_config = ConfigDict(frozen=True)

    title: Optional[str] = None
    sport_label: Optional[str] = None
    tournament: str = ""
    # Seconds, milliseconds or an ISO string; repaired by the normalizer
    raw_timestamp: Any = None
    streams: List[str] = Field(default_factory=list)
    home_team: Optional[str] = None
    away_team: Optional[str] = None
    is_live: bool = False


class NormalizedMatch(BaseModel):
    """One supplier record in the canonical per-source shape."""

    model_config = ConfigDict(
        frozen=True, alias_generator=to_camel, populate_by_name=True
    )

    source: str
    match_title: str
    sport: str
    tournament: str = ""
    unix_timestamp: int
    # Supplier name -> ordered, de-duplicated stream URLs
    streams_by_source: Dict[str, List[str]] = Field(default_factory=dict)
    quality_score: int = Field(100, ge=0, le=100)

    # Structured competitors when the supplier provides team objects
    home_team: Optional[str] = None
    away_team: Optional[str] = None

    is_live: bool = False
    timestamp_repaired: bool = False
    timestamp_plausible: bool = True

    @property
    def match_date(self) -> str:
        """UTC calendar date of the start time (YYYY-MM-DD)."""
        return datetime.fromtimestamp(self.unix_timestamp, tz=timezone.utc).strftime(
            "%Y-%m-%d"
        )

    @property
    def stream_count(self) -> int:
        return sum(len(urls) for urls in self.streams_by_source.values())

    def __str__(self) -> str:
        return f"[{self.source}] {self.match_title} ({self.sport}, {self.unix_timestamp})"
