# streamcatalog/suppliers/wendy_adapter.py
from typing import Any, Mapping

from streamcatalog.models.enums import Supplier
from streamcatalog.models.match import SupplierFields
from .base_adapter import BaseAdapter


class WendyAdapter(BaseAdapter):
    """Adapter for the 'wendy' feed.

    Payload: a list of matches (or {"matches": [...]}) with home/away team
    objects, millisecond timestamps, a nested league and {url} streams.
    Matches without streams are not ingested.
    """

    supplier: str = Supplier.WENDY.value

    field_paths = {
        "title": ("title", "match"),
        "sport": ("sportCategory", "sport", "wendySport", "category"),
        "timestamp": ("timestamp", "date", "startTime"),
        "tournament": ("league.name", "league", "tournament"),
        "streams": ("streams",),
        "home_team": ("teams.home.name",),
        "away_team": ("teams.away.name",),
    }

    def _extract(self, record: Mapping[str, Any]) -> SupplierFields:
        home, away = self._teams(record)
        return SupplierFields(
            title=self.field_text(record, "title"),
            sport_label=self.field_text(record, "sport"),
            tournament=self.field_text(record, "tournament") or "",
            raw_timestamp=self.field_value(record, "timestamp"),
            streams=self._stream_urls(self.field_value(record, "streams")),
            home_team=home,
            away_team=away,
            is_live=str(record.get("status", "")).lower() == "live",
        )

    def accepts(self, fields: SupplierFields) -> bool:
        return bool(fields.streams)
