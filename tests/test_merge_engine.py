"""Unit tests for MergeEngine clustering and canonical record construction.

Test Strategy:
1. Similar records from different suppliers within the time window merge
2. Threshold is inclusive; time window is enforced
3. Base record selection, stream union and confidence follow the source count rules
"""
import pytest

from streamcatalog.config.sport_profiles import DEFAULT_PROFILE, SportProfile
from streamcatalog.matching.merge_engine import (
    MergeEngine,
    confidence_for_sources,
    confidence_level,
)
from streamcatalog.matching.similarity import SimilarityEngine
from streamcatalog.models.enums import ConfidenceLevel

from conftest import NOW


@pytest.fixture
def engine() -> MergeEngine:
    return MergeEngine()


def engine_with_tennis_threshold(threshold: float) -> MergeEngine:
    profiles = {
        "Tennis": SportProfile(
            merge_threshold=threshold,
            max_time_difference_minutes=120,
            pattern_bonus=0.15,
        )
    }
    return MergeEngine(SimilarityEngine(profiles=profiles, default_profile=DEFAULT_PROFILE))


class TestClustering:
    def test_similar_records_merge(self, engine, make_match):
        a = make_match("A", "Roger Federer vs Rafael Nadal", "Tennis")
        b = make_match("B", "R. Federer vs R. Nadal", "Tennis", unix_timestamp=NOW + 900)

        result = engine.cluster_and_merge([a, b])

        assert len(result) == 1
        merged = result[0]
        assert merged.merged is True
        assert merged.merged_count == 2
        assert merged.contributing_sources == ["A", "B"]
        assert merged.confidence == 0.95

    def test_outside_time_window_stays_apart(self, engine, make_match):
        a = make_match("A", "Roger Federer vs Rafael Nadal", "Tennis")
        b = make_match("B", "R. Federer vs R. Nadal", "Tennis", unix_timestamp=NOW + 3 * 3600)

        result = engine.cluster_and_merge([a, b])

        assert len(result) == 2
        assert not any(match.merged for match in result)

    def test_threshold_is_inclusive(self, make_match):
        """A pair scoring exactly at the threshold merges."""
        a = make_match("A", "Roger Federer vs Rafael Nadal", "Tennis")
        b = make_match("B", "R. Federer vs R. Nadal", "Tennis")

        assert len(engine_with_tennis_threshold(0.5).cluster_and_merge([a, b])) == 1
        assert len(engine_with_tennis_threshold(0.51).cluster_and_merge([a, b])) == 2

    def test_same_source_never_merges(self, engine, make_match):
        a = make_match("tom", "Arsenal vs Chelsea", "Football")
        b = make_match("tom", "Arsenal vs Chelsea", "Football", streams=["https://tom.example/other"])

        result = engine.cluster_and_merge([a, b])

        assert len(result) == 2
        assert all(match.merged_count == 1 for match in result)

    def test_each_record_joins_one_cluster(self, engine, make_match):
        matches = [
            make_match("tom", "Arsenal vs Chelsea", "Football"),
            make_match("sarah", "Arsenal vs Chelsea", "Football"),
            make_match("wendy", "Arsenal vs Chelsea", "Football"),
            make_match("tom", "Arsenal vs Chelsea", "Football", unix_timestamp=NOW + 600),
        ]
        clusters = engine.cluster(matches)

        assert [cluster.size for cluster in clusters] == [3, 1]
        assert sum(cluster.size for cluster in clusters) == len(matches)

    def test_one_record_per_supplier_under_foreign_seed(self, engine, make_match):
        """Two sarah records that both match a tom seed do not share its cluster."""
        matches = [
            make_match("tom", "Arsenal vs Chelsea", "Football"),
            make_match("sarah", "Arsenal vs Chelsea", "Football"),
            make_match("sarah", "Arsenal vs Chelsea", "Football", unix_timestamp=NOW + 300),
        ]
        clusters = engine.cluster(matches)

        assert [[m.source for m in cluster.members] for cluster in clusters] == [
            ["tom", "sarah"],
            ["sarah"],
        ]
        result = engine.cluster_and_merge(matches)
        assert [match.merged_count for match in result] == [2, 1]
        assert result[1].contributing_sources == ["sarah"]

    def test_output_follows_seed_order(self, engine, make_match):
        matches = [
            make_match("tom", "Lakers vs Celtics", "Basketball"),
            make_match("tom", "Arsenal vs Chelsea", "Football"),
            make_match("wendy", "Lakers vs Celtics", "Basketball"),
        ]
        result = engine.cluster_and_merge(matches)
        assert [match.match_title for match in result] == ["Lakers vs Celtics", "Arsenal vs Chelsea"]

    def test_empty_input(self, engine):
        assert engine.cluster_and_merge([]) == []


class TestCanonicalRecord:
    def test_singleton(self, engine, make_match):
        match = make_match("tom", "Monaco Grand Prix", "Racing", tournament="F1")
        result = engine.cluster_and_merge([match])[0]

        assert result.merged is False
        assert result.merged_count == 1
        assert result.confidence == 1.0
        assert result.contributing_sources == ["tom"]
        assert result.streams_by_source == match.streams_by_source
        assert result.tournament == "F1"

    def test_base_is_highest_quality(self, engine, make_match):
        low = make_match("tom", "Arsenal - Chelsea FC", "Football", quality_score=80)
        high = make_match(
            "wendy", "Arsenal vs Chelsea", "Football", unix_timestamp=NOW + 300, quality_score=100
        )
        result = engine.cluster_and_merge([low, high])[0]

        assert result.match_title == "Arsenal vs Chelsea"
        assert result.unix_timestamp == NOW + 300
        assert list(result.streams_by_source.keys()) == ["wendy", "tom"]
        assert result.contributing_sources == ["tom", "wendy"]

    def test_base_tie_goes_to_earliest(self, engine, make_match):
        first = make_match("tom", "Arsenal vs Chelsea", "Football", tournament="EPL")
        second = make_match("sarah", "Arsenal vs Chelsea", "Football", tournament="Premier League")
        result = engine.cluster_and_merge([first, second])[0]
        assert result.tournament == "EPL"

    def test_three_sources_full_confidence(self, engine, make_match):
        matches = [
            make_match(source, "Lakers vs Celtics", "Basketball")
            for source in ("tom", "sarah", "wendy")
        ]
        result = engine.cluster_and_merge(matches)[0]

        assert result.merged_count == 3
        assert result.confidence == 1.0
        assert result.contributing_sources == ["tom", "sarah", "wendy"]

    def test_streams_union_without_loss(self, engine, make_match):
        a = make_match("tom", "Lakers vs Celtics", "Basketball", streams=["https://t.example/1", "https://t.example/2"])
        b = make_match("wendy", "Lakers vs Celtics", "Basketball", streams=["https://w.example/1"])
        result = engine.cluster_and_merge([a, b])[0]

        assert result.streams_by_source == {
            "tom": ["https://t.example/1", "https://t.example/2"],
            "wendy": ["https://w.example/1"],
        }

    def test_union_deduplicates_per_key(self, make_match):
        a = make_match("tom", "X vs Y", streams_by_source={"tom": ["https://t.example/1"]})
        b = make_match(
            "sarah",
            "X vs Y",
            streams_by_source={"tom": ["https://t.example/1", "https://t.example/2"], "sarah": []},
        )
        assert MergeEngine.union_streams([a, b]) == {
            "tom": ["https://t.example/1", "https://t.example/2"],
            "sarah": [],
        }


class TestConfidence:
    @pytest.mark.parametrize("sources,expected", [(1, 0.9), (2, 0.95), (3, 1.0), (5, 1.0)])
    def test_confidence_for_sources(self, sources, expected):
        assert confidence_for_sources(sources) == expected

    @pytest.mark.parametrize(
        "confidence,level",
        [
            (1.0, ConfidenceLevel.HIGH),
            (0.8, ConfidenceLevel.HIGH),
            (0.7, ConfidenceLevel.MEDIUM),
            (0.55, ConfidenceLevel.LOW),
            (0.2, ConfidenceLevel.VERY_LOW),
        ],
    )
    def test_confidence_level(self, confidence, level):
        assert confidence_level(confidence) == level
