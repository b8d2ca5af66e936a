# streamcatalog/suppliers/tom_adapter.py
from typing import Any, Mapping

from streamcatalog.models.enums import Supplier
from streamcatalog.models.match import SupplierFields
from .base_adapter import BaseAdapter


class TomAdapter(BaseAdapter):
    """Adapter for the 'tom' feed.

    Payload: {"events": {"YYYY-MM-DD": [record, ...]}}. Records carry a flat
    'match' title ("A - B"), unix seconds, a sport label, a tournament and a
    list of channel URLs.
    """

    supplier: str = Supplier.TOM.value

    field_paths = {
        "title": ("match", "title"),
        "sport": ("sport", "category"),
        "timestamp": ("unix_timestamp", "timestamp"),
        "tournament": ("tournament", "league"),
        "streams": ("channels", "streams"),
    }

    def _extract(self, record: Mapping[str, Any]) -> SupplierFields:
        return SupplierFields(
            title=self.field_text(record, "title"),
            sport_label=self.field_text(record, "sport"),
            tournament=self.field_text(record, "tournament") or "",
            raw_timestamp=self.field_value(record, "timestamp"),
            streams=self._stream_urls(self.field_value(record, "streams")),
        )
