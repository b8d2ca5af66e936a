import json
from pathlib import Path
from typing import Any, Dict, Iterable, Optional

from loguru import logger

from streamcatalog.config.settings import settings
from streamcatalog.models.catalog import Catalog


class SnapshotError(Exception):
    """A supplier snapshot could not be read or the catalog dump could not be written."""

    pass


def snapshot_path(supplier: str, data_dir: Optional[Path] = None) -> Path:
    return Path(data_dir or settings.supplier_data_dir) / f"{supplier}-data.json"


def load_supplier_snapshot(supplier: str, data_dir: Optional[Path] = None) -> Any:
    """Reads '<supplier>-data.json'; None when the file does not exist.

    Raises:
        SnapshotError: the file exists but cannot be read or is not valid JSON.
    """
    path = snapshot_path(supplier, data_dir)
    if not path.exists():
        logger.warning(f"No snapshot for supplier '{supplier}' at {path}")
        return None
    try:
        with open(path, "r", encoding="utf-8") as f:
            payload = json.load(f)
    except json.JSONDecodeError as e:
        raise SnapshotError(f"Invalid JSON in {path}: {e}") from e
    except OSError as e:
        raise SnapshotError(f"Could not read {path}: {e}") from e
    logger.debug(f"Loaded snapshot for '{supplier}' from {path}")
    return payload


def load_supplier_snapshots(
    suppliers: Optional[Iterable[str]] = None, data_dir: Optional[Path] = None
) -> Dict[str, Any]:
    """Loads snapshots for each supplier in order. Unreadable snapshots count as empty."""
    raw_data: Dict[str, Any] = {}
    for supplier in suppliers if suppliers is not None else settings.suppliers:
        try:
            raw_data[supplier] = load_supplier_snapshot(supplier, data_dir)
        except SnapshotError as e:
            logger.error(f"Treating supplier '{supplier}' as empty: {e}")
            raw_data[supplier] = None
    return raw_data


def write_catalog(catalog: Catalog, path: Optional[Path] = None) -> Path:
    """Writes the catalog as an indented JSON dump and returns the path written.

    Raises:
        SnapshotError: the file could not be written.
    """
    target = Path(path or settings.output_path)
    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        with open(target, "w", encoding="utf-8") as f:
            json.dump(catalog.to_json_dict(), f, indent=2, ensure_ascii=False)
    except (OSError, TypeError) as e:
        raise SnapshotError(f"Failed to write catalog to {target}: {e}") from e
    logger.info(f"Wrote catalog with {catalog.summary.total_matches} matches to {target}")
    return target
