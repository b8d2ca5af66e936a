# streamcatalog/suppliers/sarah_adapter.py
from typing import Any, Mapping

from streamcatalog.models.enums import Supplier
from streamcatalog.models.match import SupplierFields
from .base_adapter import BaseAdapter


class SarahAdapter(BaseAdapter):
    """Adapter for the 'sarah' feed.

    Payload: a list of matches (or {"matches": [...]}). Start times are in
    milliseconds, the sport is a category slug ('american-football') and
    streams are {source, id} pairs rendered through the embed URL template.
    """

    supplier: str = Supplier.SARAH.value

    field_paths = {
        "title": ("title", "match"),
        "sport": ("category", "sport"),
        "timestamp": ("date", "timestamp"),
        "tournament": ("tournament", "league.name"),
        "streams": ("sources",),
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
