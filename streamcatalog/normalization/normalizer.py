import math
from datetime import datetime, timezone
from typing import Any, Dict, List, Mapping, Optional

from loguru import logger
from pydantic import BaseModel, Field

from streamcatalog.classification.sport_classifier import SportClassifier
from streamcatalog.config.settings import settings
from streamcatalog.models.enums import Sport
from streamcatalog.models.match import NormalizedMatch, SupplierFields
from streamcatalog.suppliers.base_adapter import BaseAdapter
from streamcatalog.suppliers.sarah_adapter import SarahAdapter
from streamcatalog.suppliers.tom_adapter import TomAdapter
from streamcatalog.suppliers.wendy_adapter import WendyAdapter
from streamcatalog.utils.misc_utils import (
    CANONICAL_SEPARATOR,
    collapse_whitespace,
    standardize_separators,
)

from .errors import MalformedRecordError, NormalizationError

DEFAULT_TITLE = "Unknown Match"
PLACEHOLDER_TITLES = {"unknown match", "unknown", "tbd", "tba", "n/a"}

# Values above this are milliseconds
MILLISECONDS_CUTOFF = 1_000_000_000_000
# 9999-12-31T23:59:59Z, the last second a datetime can represent
MAX_TIMESTAMP = 253_402_300_799

# Quality score weights; bonuses lift a complete record from the base up to 100
QUALITY_BASE = 90
TITLE_PENALTY = 30
SPORT_PENALTY = 20
TIMESTAMP_REPAIRED_PENALTY = 20
NO_STREAMS_PENALTY = 20
IMPLAUSIBLE_TIMESTAMP_PENALTY = 15
MULTI_STREAM_BONUS = 5
VS_TITLE_BONUS = 5


class SupplierStats(BaseModel):
    seen: int = 0
    normalized: int = 0
    failed: int = 0
    dropped: int = 0  # Extracted fine but rejected by the adapter (e.g. no streams)


class NormalizationResult(BaseModel):
    matches: List[NormalizedMatch] = Field(default_factory=list)
    supplier_stats: Dict[str, SupplierStats] = Field(default_factory=dict)

    @property
    def failed(self) -> int:
        return sum(stats.failed for stats in self.supplier_stats.values())


def default_adapters() -> Dict[str, BaseAdapter]:
    return {
        adapter.supplier: adapter
        for adapter in (TomAdapter(), SarahAdapter(), WendyAdapter())
    }


class Normalizer:
    """Turns raw per-supplier records into NormalizedMatch objects.

    Supplier quirks live in the adapters; this class only dispatches to the
    right adapter, repairs missing values, classifies the sport and scores
    completeness.
    """

    def __init__(
        self,
        classifier: Optional[SportClassifier] = None,
        adapters: Optional[Mapping[str, BaseAdapter]] = None,
        plausible_past_days: Optional[int] = None,
        plausible_future_days: Optional[int] = None,
        missing_timestamp_offset_minutes: Optional[int] = None,
        min_stream_url_length: Optional[int] = None,
    ):
        self.classifier = classifier or SportClassifier()
        self.adapters: Dict[str, BaseAdapter] = dict(
            adapters if adapters is not None else default_adapters()
        )
        self.plausible_past_seconds = 86400 * (
            settings.plausible_past_days
            if plausible_past_days is None
            else plausible_past_days
        )
        self.plausible_future_seconds = 86400 * (
            settings.plausible_future_days
            if plausible_future_days is None
            else plausible_future_days
        )
        self.missing_timestamp_offset_seconds = 60 * (
            settings.missing_timestamp_offset_minutes
            if missing_timestamp_offset_minutes is None
            else missing_timestamp_offset_minutes
        )
        self.min_stream_url_length = (
            settings.min_stream_url_length
            if min_stream_url_length is None
            else min_stream_url_length
        )
        logger.info(
            f"Normalizer initialized with adapters for: {list(self.adapters.keys())}"
        )

    def normalize(
        self, raw_data_by_supplier: Mapping[str, Any], now: Optional[int] = None
    ) -> NormalizationResult:
        """Normalizes every supplier payload, in mapping order.

        Args:
            raw_data_by_supplier: supplier name -> payload (a list of records,
                                  a {'matches': [...]} wrapper or a date-keyed map).
            now: reference unix time for timestamp repair and plausibility.

        Returns:
            The normalized matches in input order plus per-supplier counts.
        """
        now = self._resolve_now(now)
        result = NormalizationResult()

        logger.info(
            f"Starting normalization for suppliers: {list(raw_data_by_supplier.keys())}"
        )

        for supplier, payload in raw_data_by_supplier.items():
            stats = result.supplier_stats.setdefault(supplier, SupplierStats())
            adapter = self.adapters.get(supplier)
            if adapter is None:
                logger.warning(
                    f"Normalization not implemented for supplier: {supplier}, skipping."
                )
                continue
            if not payload:
                logger.warning(
                    f"No raw data received for {supplier}, skipping normalization."
                )
                continue

            for index, raw_record in enumerate(adapter.records(payload)):
                stats.seen += 1
                try:
                    match = self.normalize_record(raw_record, supplier, now=now)
                except NormalizationError as e:
                    stats.failed += 1
                    logger.warning(f"Skipping malformed {supplier} record #{index}: {e}")
                    continue

                if match is None:
                    stats.dropped += 1
                    continue
                stats.normalized += 1
                result.matches.append(match)

            logger.debug(
                f"{supplier}: {stats.seen} seen, {stats.normalized} normalized, "
                f"{stats.failed} failed, {stats.dropped} dropped"
            )

        logger.info(
            f"Normalization complete. Produced {len(result.matches)} normalized matches "
            f"({result.failed} malformed records skipped)."
        )
        return result

    def normalize_record(
        self, raw_record: Any, supplier: str, now: Optional[int] = None
    ) -> Optional[NormalizedMatch]:
        """Normalizes one raw record; None when the adapter declines the record.

        Raises:
            MalformedRecordError: the record cannot be read by its adapter.
            NormalizationError: no adapter is registered for the supplier.
        """
        adapter = self.adapters.get(supplier)
        if adapter is None:
            raise NormalizationError(f"No adapter registered for supplier '{supplier}'")
        now = self._resolve_now(now)

        try:
            fields = adapter.extract(raw_record)
        except MalformedRecordError:
            raise
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            raise MalformedRecordError(
                f"Could not read {supplier} record: {type(e).__name__}: {e}"
            ) from e
        if not adapter.accepts(fields):
            logger.debug(f"{supplier} declined record: {fields.title!r}")
            return None

        title, title_defaulted = self._build_title(fields)
        sport = self.classifier.classify(fields)
        timestamp = self._parse_timestamp(fields.raw_timestamp)
        repaired = timestamp is None
        if repaired:
            timestamp = now if fields.is_live else now + self.missing_timestamp_offset_seconds
            logger.debug(
                f"Repaired missing/invalid timestamp {fields.raw_timestamp!r} for "
                f"{supplier} '{title}' -> {timestamp}"
            )
        plausible = self._is_plausible(timestamp, now)
        if not plausible:
            logger.warning(
                f"Implausible timestamp {timestamp} for {supplier} '{title}', flagging low quality."
            )
        streams = self._clean_streams(fields.streams)

        quality = self._quality_score(
            title=title,
            title_defaulted=title_defaulted,
            sport=sport,
            timestamp_repaired=repaired,
            timestamp_plausible=plausible,
            stream_count=len(streams),
        )

        return NormalizedMatch(
            source=supplier,
            match_title=title,
            sport=sport,
            tournament=collapse_whitespace(fields.tournament),
            unix_timestamp=timestamp,
            streams_by_source={supplier: streams},
            quality_score=quality,
            home_team=fields.home_team,
            away_team=fields.away_team,
            is_live=fields.is_live,
            timestamp_repaired=repaired,
            timestamp_plausible=plausible,
        )

    # --- Field repair helpers ---

    def _resolve_now(self, now: Optional[int]) -> int:
        if now is not None:
            return int(now)
        return int(datetime.now(timezone.utc).timestamp())

    def _build_title(self, fields: SupplierFields) -> "tuple[str, bool]":
        """Returns (title, defaulted)."""
        if fields.home_team and fields.away_team:
            home = collapse_whitespace(fields.home_team)
            away = collapse_whitespace(fields.away_team)
            return f"{home}{CANONICAL_SEPARATOR}{away}", False

        title = standardize_separators(fields.title or "")
        if not title or title.lower() in PLACEHOLDER_TITLES:
            return DEFAULT_TITLE, True
        return title, False

    def _parse_timestamp(self, value: Any) -> Optional[int]:
        """Unix seconds from seconds, milliseconds or an ISO string; None if unusable."""
        if value is None or isinstance(value, bool):
            return None

        if isinstance(value, str):
            text = value.strip()
            if not text:
                return None
            try:
                value = float(text)
            except ValueError:
                return self._in_range(self._parse_iso(text))

        if isinstance(value, (int, float)):
            if not math.isfinite(value) or value == 0:
                return None
            if abs(value) > MILLISECONDS_CUTOFF:
                return self._in_range(math.floor(value / 1000))
            return self._in_range(math.floor(value))

        logger.debug(f"Unsupported timestamp type: {type(value).__name__}")
        return None

    def _in_range(self, timestamp: Optional[int]) -> Optional[int]:
        """None for timestamps before the epoch or past the last representable date."""
        if timestamp is None:
            return None
        if not 0 < timestamp <= MAX_TIMESTAMP:
            logger.warning(f"Timestamp {timestamp} is outside the calendar range, treating as missing.")
            return None
        return timestamp

    def _parse_iso(self, text: str) -> Optional[int]:
        try:
            # fromisoformat() only accepts a trailing 'Z' from Python 3.11
            if text.endswith(("Z", "z")):
                text = text[:-1] + "+00:00"
            dt = datetime.fromisoformat(text)
            if dt.tzinfo is None:
                dt = dt.replace(tzinfo=timezone.utc)
            return math.floor(dt.timestamp())
        except (ValueError, OverflowError) as e:
            logger.warning(f"Could not parse datetime string with ISO format: {text} ({e})")
            return None

    def _is_plausible(self, timestamp: int, now: int) -> bool:
        return (
            now - self.plausible_past_seconds
            <= timestamp
            <= now + self.plausible_future_seconds
        )

    def _clean_streams(self, streams: List[str]) -> List[str]:
        """Drops invalid entries and duplicate URLs, keeping first occurrence order."""
        cleaned: List[str] = []
        for stream in streams:
            if not isinstance(stream, str) or len(stream) < self.min_stream_url_length:
                logger.debug(f"Dropping invalid stream entry: {stream!r}")
                continue
            if stream not in cleaned:
                cleaned.append(stream)
        return cleaned

    def _quality_score(
        self,
        title: str,
        title_defaulted: bool,
        sport: str,
        timestamp_repaired: bool,
        timestamp_plausible: bool,
        stream_count: int,
    ) -> int:
        score = QUALITY_BASE
        if title_defaulted:
            score -= TITLE_PENALTY
        if sport == Sport.OTHER.value:
            score -= SPORT_PENALTY
        if timestamp_repaired:
            score -= TIMESTAMP_REPAIRED_PENALTY
        if not timestamp_plausible:
            score -= IMPLAUSIBLE_TIMESTAMP_PENALTY
        if stream_count == 0:
            score -= NO_STREAMS_PENALTY
        if stream_count >= 2:
            score += MULTI_STREAM_BONUS
        if CANONICAL_SEPARATOR in title:
            score += VS_TITLE_BONUS
        return max(0, min(100, score))
