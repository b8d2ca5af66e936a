from abc import ABC, abstractmethod
from typing import Any, Dict, Iterator, List, Mapping, Optional, Sequence, Tuple

from loguru import logger

from streamcatalog.config.settings import settings
from streamcatalog.models.match import SupplierFields
from streamcatalog.normalization.errors import MalformedRecordError

_MISSING = object()


def get_path(record: Mapping[str, Any], path: str) -> Any:
    """Resolves a dotted path ('league.name') against nested mappings; None when absent."""
    current: Any = record
    for key in path.split("."):
        if not isinstance(current, Mapping):
            return None
        current = current.get(key, _MISSING)
        if current is _MISSING:
            return None
    return current


class BaseAdapter(ABC):
    """Abstract base class for supplier adapters.

    An adapter knows one supplier's payload layout and turns each raw record
    into ``SupplierFields``. It never repairs values; that is the
    normalizer's job.
    """

    supplier: str = "unknown"

    # Target field -> ordered candidate paths; first present, non-null value wins
    field_paths: Dict[str, Tuple[str, ...]] = {}

    def __init__(self, embed_url_template: Optional[str] = None):
        self.embed_url_template = embed_url_template or settings.embed_url_template

    def records(self, payload: Any) -> Iterator[Any]:
        """Yields raw records from a list, a {'matches': [...]} wrapper or a date-keyed map."""
        if payload is None:
            return
        if isinstance(payload, list):
            yield from payload
            return
        if not isinstance(payload, Mapping):
            logger.warning(
                f"Unsupported payload type for {self.supplier}: {type(payload).__name__}"
            )
            return

        for wrapper_key in ("matches", "events"):
            wrapped = payload.get(wrapper_key)
            if isinstance(wrapped, list):
                yield from wrapped
                return
            if isinstance(wrapped, Mapping):
                yield from self._flatten_date_map(wrapped)
                return

        # A bare date-keyed map
        yield from self._flatten_date_map(payload)

    def _flatten_date_map(self, date_map: Mapping[str, Any]) -> Iterator[Any]:
        for day, day_records in date_map.items():
            if isinstance(day_records, list):
                yield from day_records
            else:
                logger.debug(
                    f"Skipping non-list entry '{day}' in {self.supplier} payload"
                )

    def field_value(self, record: Mapping[str, Any], field: str) -> Any:
        for path in self.field_paths.get(field, ()):
            value = get_path(record, path)
            if value is not None:
                return value
        return None

    def field_text(self, record: Mapping[str, Any], field: str) -> Optional[str]:
        value = self.field_value(record, field)
        if value is None:
            return None
        if isinstance(value, Mapping):
            value = value.get("name")
        text = str(value).strip() if value is not None else ""
        return text or None

    def extract(self, record: Any) -> SupplierFields:
        """Validates the record shape and delegates to the supplier-specific extraction."""
        if not isinstance(record, Mapping):
            raise MalformedRecordError(
                f"{self.supplier} record is not an object: {type(record).__name__}"
            )
        return self._extract(record)

    @abstractmethod
    def _extract(self, record: Mapping[str, Any]) -> SupplierFields:
        """Pulls the target fields out of one supplier record."""
        pass

    def accepts(self, fields: SupplierFields) -> bool:
        """Whether an extracted record should be ingested at all."""
        return True

    # --- Shared helpers ---

    def _teams(self, record: Mapping[str, Any]) -> Tuple[Optional[str], Optional[str]]:
        home = self.field_text(record, "home_team")
        away = self.field_text(record, "away_team")
        if home and away:
            return home, away
        return None, None

    def _stream_urls(self, value: Any) -> List[str]:
        """Renders URL strings, {url} objects and {source, id} descriptors into URLs."""
        if value is None:
            return []
        items: Sequence[Any] = value if isinstance(value, list) else [value]
        urls: List[str] = []
        for item in items:
            url = self._stream_url(item)
            if url is not None:
                urls.append(url)
        return urls

    def _stream_url(self, item: Any) -> Optional[str]:
        if isinstance(item, str):
            return item.strip()
        if isinstance(item, Mapping):
            if item.get("url"):
                return str(item["url"]).strip()
            if item.get("source") is not None and item.get("id") is not None:
                return self.embed_url_template.format(
                    source=item["source"], id=item["id"]
                )
        logger.debug(f"Unrecognized stream descriptor from {self.supplier}: {item!r}")
        return None
