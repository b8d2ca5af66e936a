from datetime import datetime, timezone
from typing import Dict, Iterable, Mapping, Optional

from loguru import logger

from streamcatalog.matching.merge_engine import confidence_level
from streamcatalog.models.canonical import CanonicalMatch
from streamcatalog.models.catalog import Catalog, CatalogSummary, SportStats
from streamcatalog.models.enums import ConfidenceLevel


def format_processed_at(moment: Optional[datetime] = None) -> str:
    """ISO-8601 UTC string with millisecond precision, e.g. '2024-05-01T12:00:00.000Z'."""
    moment = moment or datetime.now(timezone.utc)
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    moment = moment.astimezone(timezone.utc)
    return moment.strftime("%Y-%m-%dT%H:%M:%S.") + f"{moment.microsecond // 1000:03d}Z"


class CatalogAssembler:
    """Packages canonical matches into the catalog consumed by the UI. No merge logic."""

    def assemble(
        self,
        canonical: Iterable[CanonicalMatch],
        processed_at: Optional[datetime] = None,
        supplier_counts: Optional[Mapping[str, int]] = None,
    ) -> Catalog:
        # sorted() is stable, so equal start times keep merge order
        matches = sorted(canonical, key=lambda match: match.unix_timestamp)
        merged = sum(1 for match in matches if match.merged)

        catalog = Catalog(
            processed_at=format_processed_at(processed_at),
            summary=CatalogSummary(
                total_matches=len(matches),
                merged_count=merged,
                individual_count=len(matches) - merged,
            ),
            matches=matches,
            sport_breakdown=self._sport_breakdown(matches),
            confidence_breakdown=self._confidence_breakdown(matches),
            supplier_counts=dict(supplier_counts or {}),
        )
        logger.info(
            f"Assembled catalog: {catalog.summary.total_matches} matches "
            f"({catalog.summary.merged_count} merged, "
            f"{catalog.summary.individual_count} individual) across "
            f"{len(catalog.sport_breakdown)} sports."
        )
        return catalog

    def _sport_breakdown(self, matches: Iterable[CanonicalMatch]) -> Dict[str, SportStats]:
        counts: Dict[str, Dict[str, int]] = {}
        for match in matches:
            stats = counts.setdefault(match.sport, {"total": 0, "merged": 0, "individual": 0})
            stats["total"] += 1
            stats["merged" if match.merged else "individual"] += 1
        return {sport: SportStats(**stats) for sport, stats in sorted(counts.items())}

    def _confidence_breakdown(self, matches: Iterable[CanonicalMatch]) -> Dict[str, int]:
        breakdown = {level.value: 0 for level in ConfidenceLevel}
        for match in matches:
            if match.merged:
                breakdown[confidence_level(match.confidence).value] += 1
        return breakdown
