# streamcatalog/suppliers/generic_adapter.py
from typing import Any, Mapping

from streamcatalog.models.match import SupplierFields
from .base_adapter import BaseAdapter


class GenericAdapter(BaseAdapter):
    """Fallback adapter for suppliers without a dedicated layout.

    Reads the common field names seen across feeds. Must be registered
    explicitly under the supplier's name.
    """

    field_paths = {
        "title": ("match", "title", "name", "event", "fixture"),
        "sport": ("sport", "category", "sportCategory", "type"),
        "timestamp": (
            "unix_timestamp",
            "timestamp",
            "date",
            "time",
            "datetime",
            "startTime",
        ),
        "tournament": ("tournament", "league.name", "league", "competition", "series"),
        "streams": ("channels", "streams", "sources", "urls", "links"),
        "home_team": ("teams.home.name", "home_team", "homeTeam"),
        "away_team": ("teams.away.name", "away_team", "awayTeam"),
    }

    def __init__(self, supplier: str, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.supplier = supplier

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
