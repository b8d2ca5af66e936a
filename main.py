import sys
from typing import Any, Dict

from streamcatalog.logging.setup import setup_logging
from streamcatalog.config.settings import settings

setup_logging()

from loguru import logger

from streamcatalog.models.catalog import Catalog
from streamcatalog.pipeline import PipelineError, ReconciliationPipeline
from streamcatalog.storage.snapshot import (
    SnapshotError,
    load_supplier_snapshots,
    write_catalog,
)

from rich import print
from rich.panel import Panel


def render_summary(catalog: Catalog) -> Panel:
    lines = [
        f"[bold]Processed at:[/bold] {catalog.processed_at}",
        f"[bold]Total matches:[/bold] {catalog.summary.total_matches}",
        f"[bold]Merged:[/bold] {catalog.summary.merged_count}",
        f"[bold]Individual:[/bold] {catalog.summary.individual_count}",
        f"[bold]Streams:[/bold] {sum(match.stream_count for match in catalog.matches)}",
        "",
        "[bold]Records per supplier:[/bold]",
    ]
    for supplier, count in catalog.supplier_counts.items():
        lines.append(f"  {supplier}: {count}")
    if catalog.sport_breakdown:
        lines.append("")
        lines.append("[bold]By sport:[/bold]")
        for sport, stats in catalog.sport_breakdown.items():
            lines.append(
                f"  {sport}: {stats.total} ({stats.merged} merged, {stats.individual} individual)"
            )
    return Panel("\n".join(lines), title="Stream Catalog", expand=False)


def main() -> int:
    """Loads supplier snapshots, reconciles them and writes the catalog dump."""
    logger.info("Starting Stream Catalog - Load, Reconcile, and Export")

    raw_data: Dict[str, Any] = load_supplier_snapshots(
        settings.suppliers, settings.supplier_data_dir
    )
    logger.info(
        f"Loaded snapshots for suppliers: "
        f"{[supplier for supplier, payload in raw_data.items() if payload]}"
    )

    try:
        catalog = ReconciliationPipeline().run(raw_data)
    except PipelineError as e:
        logger.error(f"Reconciliation failed, no catalog produced: {e}")
        return 1

    try:
        output_path = write_catalog(catalog, settings.output_path)
    except SnapshotError as e:
        logger.error(f"{e}")
        return 1

    print(render_summary(catalog))
    logger.success(f"Catalog written to {output_path}")
    return 0


if __name__ == "__main__":
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        logger.info("Execution interrupted by user (KeyboardInterrupt).")
        sys.exit(0)
