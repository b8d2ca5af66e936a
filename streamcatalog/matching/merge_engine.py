from typing import Dict, List, Optional, Sequence, Tuple

from loguru import logger

from streamcatalog.models.canonical import CanonicalMatch, MatchCluster
from streamcatalog.models.competitors import Competitors
from streamcatalog.models.enums import ConfidenceLevel
from streamcatalog.models.match import NormalizedMatch

from .similarity import SimilarityEngine, fingerprint

SINGLE_CONFIDENCE = 1.0
# Distinct contributing sources -> confidence; fewer than two falls back to the floor
SOURCE_COUNT_CONFIDENCE = {2: 0.95}
MANY_SOURCES = 3
MANY_SOURCES_CONFIDENCE = 1.0
CONFIDENCE_FLOOR = 0.9

CONFIDENCE_LEVELS: Tuple[Tuple[float, ConfidenceLevel], ...] = (
    (0.8, ConfidenceLevel.HIGH),
    (0.65, ConfidenceLevel.MEDIUM),
    (0.55, ConfidenceLevel.LOW),
)


def confidence_for_sources(source_count: int) -> float:
    if source_count >= MANY_SOURCES:
        return MANY_SOURCES_CONFIDENCE
    return SOURCE_COUNT_CONFIDENCE.get(source_count, CONFIDENCE_FLOOR)


def confidence_level(confidence: float) -> ConfidenceLevel:
    for floor, level in CONFIDENCE_LEVELS:
        if confidence >= floor:
            return level
    return ConfidenceLevel.VERY_LOW


class MergeEngine:
    """Greedy first-fit clustering of normalized matches and merging into canonical records.

    Matches are bucketed by (date, fingerprint). Inside a bucket, the first
    unclustered record seeds a cluster and every later unclustered record that
    is similar enough to the seed and close enough in time joins it, unless its
    supplier is already present. A record joins at most one cluster, so the
    result depends on input order.
    """

    def __init__(self, similarity: Optional[SimilarityEngine] = None):
        self.similarity = similarity or SimilarityEngine()

    def cluster_and_merge(self, matches: Sequence[NormalizedMatch]) -> List[CanonicalMatch]:
        clusters = self.cluster(matches)
        canonical = [self.merge(cluster) for cluster in clusters]

        merged = sum(1 for match in canonical if match.merged)
        logger.info(
            f"Merged {len(matches)} normalized matches into {len(canonical)} canonical "
            f"matches ({merged} merged, {len(canonical) - merged} individual)."
        )
        return canonical

    def cluster(self, matches: Sequence[NormalizedMatch]) -> List[MatchCluster]:
        """Partitions matches into clusters, ordered by each cluster's seed position."""
        if not matches:
            return []

        competitors = [self.similarity.extractor.extract(match) for match in matches]

        buckets: Dict[Tuple[str, str], List[int]] = {}
        for index, match in enumerate(matches):
            key = (match.match_date, fingerprint(match, competitors[index]))
            buckets.setdefault(key, []).append(index)
        logger.debug(f"Bucketed {len(matches)} matches into {len(buckets)} fingerprint groups")

        seeded: List[Tuple[int, MatchCluster]] = []
        for (_, bucket_fingerprint), indices in buckets.items():
            remaining = indices
            while remaining:
                seed_index, candidates = remaining[0], remaining[1:]
                cluster = MatchCluster(
                    fingerprint=bucket_fingerprint, members=(matches[seed_index],)
                )
                leftover: List[int] = []
                for index in candidates:
                    # One record per supplier in a cluster
                    if any(m.source == matches[index].source for m in cluster.members):
                        leftover.append(index)
                    elif self.should_merge(
                        matches[seed_index],
                        matches[index],
                        competitors[seed_index],
                        competitors[index],
                    ):
                        cluster = cluster.with_member(matches[index])
                    else:
                        leftover.append(index)
                seeded.append((seed_index, cluster))
                remaining = leftover

        seeded.sort(key=lambda item: item[0])
        return [cluster for _, cluster in seeded]

    def should_merge(
        self,
        seed: NormalizedMatch,
        candidate: NormalizedMatch,
        seed_competitors: Optional[Competitors] = None,
        candidate_competitors: Optional[Competitors] = None,
    ) -> bool:
        """Similarity at or above the pair's threshold and start times inside its window."""
        profile = self.similarity.profile_for_pair(seed, candidate)
        minutes_apart = abs(seed.unix_timestamp - candidate.unix_timestamp) / 60
        if minutes_apart > profile.max_time_difference_minutes:
            return False

        score = self.similarity.score(seed, candidate, seed_competitors, candidate_competitors)
        if score >= profile.merge_threshold:
            logger.debug(
                f"Merging [{candidate.source}] '{candidate.match_title}' into "
                f"[{seed.source}] '{seed.match_title}' "
                f"(score {score:.3f} >= {profile.merge_threshold}, {minutes_apart:.0f} min apart)"
            )
            return True
        return False

    def merge(self, cluster: MatchCluster) -> CanonicalMatch:
        """Builds the canonical record for one cluster."""
        if cluster.size == 1:
            match = cluster.seed
            return CanonicalMatch(
                match_title=match.match_title,
                sport=match.sport,
                tournament=match.tournament,
                unix_timestamp=match.unix_timestamp,
                streams_by_source={
                    source: list(urls) for source, urls in match.streams_by_source.items()
                },
                merged=False,
                merged_count=1,
                confidence=SINGLE_CONFIDENCE,
                contributing_sources=[match.source],
            )

        # max() keeps the first of equal scores, i.e. the earliest input record
        base = max(cluster.members, key=lambda member: member.quality_score)
        others = [member for member in cluster.members if member is not base]

        sports = {member.sport for member in cluster.members}
        if len(sports) > 1:
            logger.debug(
                f"Cluster '{cluster.fingerprint}' disagrees on sport {sorted(sports)}; "
                f"keeping base sport '{base.sport}'"
            )

        contributing: List[str] = []
        for member in cluster.members:
            if member.source not in contributing:
                contributing.append(member.source)

        return CanonicalMatch(
            match_title=base.match_title,
            sport=base.sport,
            tournament=base.tournament,
            unix_timestamp=base.unix_timestamp,
            streams_by_source=self.union_streams([base, *others]),
            merged=True,
            merged_count=cluster.size,
            confidence=confidence_for_sources(len(contributing)),
            contributing_sources=contributing,
        )

    @staticmethod
    def union_streams(members: Sequence[NormalizedMatch]) -> Dict[str, List[str]]:
        """Per-supplier union of stream URLs, first occurrence wins."""
        union: Dict[str, List[str]] = {}
        for member in members:
            for source, urls in member.streams_by_source.items():
                target = union.setdefault(source, [])
                for url in urls:
                    if url not in target:
                        target.append(url)
        return union
