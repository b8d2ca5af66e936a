from datetime import datetime, timezone
from typing import Any, Mapping, Optional

from loguru import logger

from streamcatalog.catalog.assembler import CatalogAssembler
from streamcatalog.matching.merge_engine import MergeEngine
from streamcatalog.models.catalog import Catalog
from streamcatalog.normalization.normalizer import Normalizer


class PipelineError(Exception):
    """An unexpected failure inside the reconciliation run. The run produced no result."""

    pass


class ReconciliationPipeline:
    """Raw supplier payloads -> normalized matches -> clusters -> catalog.

    A run is a pure transform over its input: no state is kept between runs,
    and the same input in the same order with the same ``now`` yields the same
    catalog.
    """

    def __init__(
        self,
        normalizer: Optional[Normalizer] = None,
        merge_engine: Optional[MergeEngine] = None,
        assembler: Optional[CatalogAssembler] = None,
    ):
        self.normalizer = normalizer or Normalizer()
        self.merge_engine = merge_engine or MergeEngine()
        self.assembler = assembler or CatalogAssembler()

    def run(self, raw_data_by_supplier: Mapping[str, Any], now: Optional[int] = None) -> Catalog:
        """Runs the whole reconciliation.

        Args:
            raw_data_by_supplier: supplier name -> raw payload, in the order
                                  records should be considered for clustering.
            now: unix seconds used for timestamp repair and as ``processedAt``;
                 the current time when omitted.

        Raises:
            PipelineError: on any unexpected exception; malformed records are
                           skipped and never raise.
        """
        if now is None:
            now = int(datetime.now(timezone.utc).timestamp())
        processed_at = datetime.fromtimestamp(now, tz=timezone.utc)

        try:
            normalized = self.normalizer.normalize(raw_data_by_supplier, now=now)
            if not normalized.matches:
                logger.warning("No normalized matches across all suppliers; catalog will be empty.")
            canonical = self.merge_engine.cluster_and_merge(normalized.matches)
            supplier_counts = {
                supplier: stats.seen for supplier, stats in normalized.supplier_stats.items()
            }
            return self.assembler.assemble(
                canonical, processed_at=processed_at, supplier_counts=supplier_counts
            )
        except Exception as e:
            logger.exception(f"Reconciliation run failed: {e}")
            raise PipelineError(f"Reconciliation run failed: {e}") from e
