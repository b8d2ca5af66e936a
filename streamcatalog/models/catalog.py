from typing import Any, Dict, List

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from .canonical import CanonicalMatch


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class CatalogSummary(_CamelModel):
    total_matches: int = 0
    merged_count: int = 0
    individual_count: int = 0


class SportStats(_CamelModel):
    total: int = 0
    merged: int = 0
    individual: int = 0


class Catalog(_CamelModel):
    """The unified dataset handed to the UI and export collaborators."""

    processed_at: str
    summary: CatalogSummary = Field(default_factory=CatalogSummary)
    matches: List[CanonicalMatch] = Field(default_factory=list)

    # Reporting extras
    sport_breakdown: Dict[str, SportStats] = Field(default_factory=dict)
    confidence_breakdown: Dict[str, int] = Field(default_factory=dict)
    supplier_counts: Dict[str, int] = Field(default_factory=dict)

    def matches_for_sport(self, sport: str) -> List[CanonicalMatch]:
        """Canonical matches of one sport; 'all' returns everything."""
        if sport == "all":
            return list(self.matches)
        return [match for match in self.matches if match.sport == sport]

    def available_sports(self) -> List[str]:
        return sorted({match.sport for match in self.matches})

    def to_json_dict(self) -> Dict[str, Any]:
        """JSON-serializable dump using the camelCase output field names."""
        return self.model_dump(mode="json", by_alias=True)
