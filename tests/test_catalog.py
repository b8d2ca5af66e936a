"""Unit tests for the Catalog Assembler and the Catalog model."""
from datetime import datetime, timezone

import pytest

from streamcatalog.catalog.assembler import CatalogAssembler, format_processed_at
from streamcatalog.models.canonical import CanonicalMatch

from conftest import NOW

PROCESSED_AT = datetime(2023, 11, 15, 12, 0, tzinfo=timezone.utc)


def canonical(title: str, sport: str, unix_timestamp: int, merged: bool = False, **kwargs) -> CanonicalMatch:
    sources = kwargs.pop("sources", ["tom", "sarah"] if merged else ["tom"])
    return CanonicalMatch(
        match_title=title,
        sport=sport,
        unix_timestamp=unix_timestamp,
        streams_by_source={source: [f"https://{source}.example/x"] for source in sources},
        merged=merged,
        merged_count=len(sources),
        confidence=kwargs.pop("confidence", 0.95 if merged else 1.0),
        contributing_sources=sources,
        **kwargs,
    )


@pytest.fixture
def catalog():
    matches = [
        canonical("Late Game", "Basketball", NOW + 7200),
        canonical("Arsenal vs Chelsea", "Football", NOW, merged=True),
        canonical("Early Game", "Basketball", NOW - 3600, merged=True, sources=["tom", "sarah", "wendy"], confidence=1.0),
        canonical("Tie Second", "Tennis", NOW),
    ]
    return CatalogAssembler().assemble(
        matches, processed_at=PROCESSED_AT, supplier_counts={"tom": 4, "sarah": 2}
    )


class TestAssembler:
    def test_sorted_by_timestamp_stable(self, catalog):
        """Ties keep their incoming order."""
        assert [m.match_title for m in catalog.matches] == [
            "Early Game",
            "Arsenal vs Chelsea",
            "Tie Second",
            "Late Game",
        ]

    def test_summary(self, catalog):
        assert catalog.summary.total_matches == 4
        assert catalog.summary.merged_count == 2
        assert catalog.summary.individual_count == 2

    def test_processed_at(self, catalog):
        assert catalog.processed_at == "2023-11-15T12:00:00.000Z"

    def test_sport_breakdown(self, catalog):
        basketball = catalog.sport_breakdown["Basketball"]
        assert (basketball.total, basketball.merged, basketball.individual) == (2, 1, 1)
        assert list(catalog.sport_breakdown.keys()) == ["Basketball", "Football", "Tennis"]

    def test_confidence_breakdown_counts_merged_only(self, catalog):
        assert catalog.confidence_breakdown == {"high": 2, "medium": 0, "low": 0, "veryLow": 0}

    def test_supplier_counts(self, catalog):
        assert catalog.supplier_counts == {"tom": 4, "sarah": 2}

    def test_empty(self):
        catalog = CatalogAssembler().assemble([], processed_at=PROCESSED_AT)
        assert catalog.matches == []
        assert catalog.summary.total_matches == 0
        assert catalog.available_sports() == []
        assert catalog.to_json_dict()["matches"] == []


class TestCatalogModel:
    def test_json_uses_camel_case(self, catalog):
        dumped = catalog.to_json_dict()

        assert set(dumped) >= {"processedAt", "summary", "matches"}
        assert dumped["summary"] == {"totalMatches": 4, "mergedCount": 2, "individualCount": 2}
        assert set(dumped["matches"][0]) == {
            "matchTitle",
            "sport",
            "tournament",
            "unixTimestamp",
            "streamsBySource",
            "merged",
            "mergedCount",
            "confidence",
            "contributingSources",
        }

    def test_matches_for_sport(self, catalog):
        assert [m.match_title for m in catalog.matches_for_sport("Basketball")] == ["Early Game", "Late Game"]
        assert len(catalog.matches_for_sport("all")) == 4
        assert catalog.matches_for_sport("Cricket") == []

    def test_available_sports(self, catalog):
        assert catalog.available_sports() == ["Basketball", "Football", "Tennis"]


def test_format_processed_at_naive_is_utc():
    assert format_processed_at(datetime(2024, 5, 1, 8, 30, 15, 123456)) == "2024-05-01T08:30:15.123Z"
