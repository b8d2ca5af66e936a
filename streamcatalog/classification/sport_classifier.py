import re
from typing import AbstractSet, Iterable, Mapping, Optional, Pattern

from loguru import logger

from streamcatalog.models.enums import Sport
from streamcatalog.models.match import SupplierFields
from streamcatalog.utils.misc_utils import collapse_whitespace, title_case

from . import tables


def _phrase_pattern(phrases: Iterable[str]) -> Optional[Pattern[str]]:
    """Whole-word alternation over phrases, longest first."""
    ordered = sorted({p.lower() for p in phrases if p}, key=len, reverse=True)
    if not ordered:
        return None
    alternation = "|".join(re.escape(p) for p in ordered)
    return re.compile(rf"(?<![a-z0-9])(?:{alternation})(?![a-z0-9])")


class SportClassifier:
    """Maps supplier sport labels and match text onto the canonical sport taxonomy.

    Lookups are exact (aliases) or whole-word (team names and competition
    indicators); nothing here is fuzzy or trained.
    """

    def __init__(
        self,
        aliases: Mapping[str, str] = tables.SPORT_ALIASES,
        college_teams: AbstractSet[str] = tables.COLLEGE_FOOTBALL_TEAMS,
        competition_indicators: AbstractSet[str] = tables.COMPETITION_INDICATORS,
        ambiguous_labels: AbstractSet[str] = tables.AMBIGUOUS_LABELS,
        placeholder_labels: AbstractSet[str] = tables.PLACEHOLDER_LABELS,
        competing_sport_markers: AbstractSet[str] = tables.COMPETING_SPORT_MARKERS,
    ):
        self.aliases = {k.lower().strip(): v for k, v in aliases.items()}
        self.ambiguous_labels = frozenset(l.lower() for l in ambiguous_labels)
        self.placeholder_labels = frozenset(l.lower() for l in placeholder_labels)
        self._team_pattern = _phrase_pattern(college_teams)
        self._indicator_pattern = _phrase_pattern(competition_indicators)
        self._veto_pattern = _phrase_pattern(competing_sport_markers)
        logger.debug(
            f"SportClassifier initialized with {len(self.aliases)} aliases, "
            f"{len(college_teams)} college team names and "
            f"{len(competition_indicators)} competition indicators."
        )

    def classify(self, record: SupplierFields) -> str:
        """Canonical sport for one adapter-extracted record."""
        return self.classify_text(record.sport_label, record.title, record.tournament)

    def classify_text(
        self,
        sport_label: Optional[str],
        title: Optional[str] = None,
        tournament: Optional[str] = None,
    ) -> str:
        label = collapse_whitespace(sport_label).lower() if sport_label else ""
        usable = label not in self.placeholder_labels

        if usable and label not in self.ambiguous_labels:
            return self.map_label(label)

        search_text = f"{title or ''} {tournament or ''}".lower()
        if self.is_american_football(search_text):
            logger.debug(
                f"Detected American Football from content: '{title}' "
                f"(label: {sport_label!r})"
            )
            return Sport.AMERICAN_FOOTBALL.value

        if usable:
            return self.map_label(label)
        return Sport.OTHER.value

    def map_label(self, label: str) -> str:
        """Alias lookup; unmapped labels are title-cased."""
        key = collapse_whitespace(label).lower()
        if not key or key in self.placeholder_labels:
            return Sport.OTHER.value
        mapped = self.aliases.get(key)
        if mapped:
            return mapped
        logger.debug(f"Sport label not in alias table, passing through: '{label}'")
        return title_case(key)

    def is_american_football(self, text: str) -> bool:
        """College/American football detection over lower-cased title and tournament text."""
        if not text:
            return False
        if self._indicator_pattern and self._indicator_pattern.search(text):
            return True
        if self._team_pattern and self._team_pattern.search(text):
            # A bare team name is not enough when another sport is named
            return not (self._veto_pattern and self._veto_pattern.search(text))
        return False
