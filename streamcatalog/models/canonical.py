from typing import Dict, List, Tuple

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from .match import NormalizedMatch


class MatchCluster(BaseModel):
    """Records from one fingerprint bucket judged to describe the same event."""

    model_config = ConfigDict(frozen=True)

    fingerprint: str
    members: Tuple[NormalizedMatch, ...]

    @property
    def size(self) -> int:
        return len(self.members)

    @property
    def seed(self) -> NormalizedMatch:
        return self.members[0]

    def with_member(self, match: NormalizedMatch) -> "MatchCluster":
        return MatchCluster(fingerprint=self.fingerprint, members=self.members + (match,))


class CanonicalMatch(BaseModel):
    """Single merged representation of a cluster, as consumed by the UI."""

    model_config = ConfigDict(
        frozen=True, alias_generator=to_camel, populate_by_name=True
    )

    # Identity fields, copied from the cluster's base record
    match_title: str
    sport: str
    tournament: str = ""
    unix_timestamp: int

    streams_by_source: Dict[str, List[str]] = Field(default_factory=dict)
    merged: bool = False
    merged_count: int = Field(1, ge=1)
    confidence: float = Field(1.0, ge=0, le=1)
    contributing_sources: List[str] = Field(default_factory=list)

    @property
    def stream_count(self) -> int:
        return sum(len(urls) for urls in self.streams_by_source.values())
