import re
from typing import Optional, Pattern, Sequence, Tuple

from loguru import logger

from streamcatalog.models.competitors import Competitors
from streamcatalog.models.enums import CompetitorPattern, Sport
from streamcatalog.models.match import NormalizedMatch

# Titles reach here already standardized to " vs ", but raw " - " is still accepted
_SEP = r"\s+(?:-|vs)\s+"
_WORD = r"[^\W\d_][\w'’\-]*"
_INITIAL = r"[^\W\d_]\."

_TENNIS_PATTERNS: Tuple[Tuple[CompetitorPattern, Pattern[str]], ...] = (
    # "Roger Federer vs Rafael Nadal"
    (
        CompetitorPattern.TENNIS_SINGLES,
        re.compile(rf"^({_WORD}(?:\s+{_WORD})+){_SEP}({_WORD}(?:\s+{_WORD})+)$"),
    ),
    # "J.Murray/B.Soares vs R.Ram/J.Salisbury"
    (
        CompetitorPattern.TENNIS_DOUBLES,
        re.compile(
            rf"^({_INITIAL}\s?{_WORD}\s?/\s?{_INITIAL}\s?{_WORD})"
            rf"{_SEP}"
            rf"({_INITIAL}\s?{_WORD}\s?/\s?{_INITIAL}\s?{_WORD})$"
        ),
    ),
    # "R. Federer vs R. Nadal"
    (
        CompetitorPattern.TENNIS_INITIAL_LAST,
        re.compile(rf"^({_INITIAL}\s?{_WORD}){_SEP}({_INITIAL}\s?{_WORD})$"),
    ),
)

TENNIS_SEPARATORS = (" - ", " vs ", " / ")
TEAM_SEPARATORS = (" - ", " vs ")
DEFAULT_SEPARATORS = (" - ", " vs ", " / ", " @ ")

TEAM_SPORTS = frozenset(
    {
        Sport.AMERICAN_FOOTBALL.value,
        Sport.BASKETBALL.value,
        Sport.FOOTBALL.value,
    }
)


def split_on_first(title: str, separators: Sequence[str]) -> Optional[Tuple[str, str]]:
    """Splits at the earliest occurrence of any separator; None when none occurs."""
    lowered = title.lower()
    best: Optional[Tuple[int, str]] = None
    for separator in separators:
        index = lowered.find(separator)
        if index != -1 and (best is None or index < best[0]):
            best = (index, separator)
    if best is None:
        return None
    index, separator = best
    left = title[:index].strip()
    right = title[index + len(separator) :].strip()
    if not left or not right:
        return None
    return left, right


class CompetitorExtractor:
    """Parses a normalized match into its two competitors with sport-specific rules."""

    def extract(self, match: NormalizedMatch) -> Competitors:
        title = match.match_title.strip()

        if match.sport == Sport.TENNIS.value:
            competitors = self._extract_tennis(title)
        elif match.sport in TEAM_SPORTS:
            competitors = self._extract_team(match, title)
        else:
            competitors = self._split(title, DEFAULT_SEPARATORS)

        if competitors.pattern_used == CompetitorPattern.UNKNOWN:
            logger.debug(f"No competitor separator found in '{title}'")
        return competitors

    def _extract_tennis(self, title: str) -> Competitors:
        for pattern_used, pattern in _TENNIS_PATTERNS:
            found = pattern.match(title)
            if found:
                return Competitors(
                    competitor1=found.group(1).strip(),
                    competitor2=found.group(2).strip(),
                    pattern_used=pattern_used,
                )
        return self._split(title, TENNIS_SEPARATORS)

    def _extract_team(self, match: NormalizedMatch, title: str) -> Competitors:
        if match.home_team and match.away_team:
            return Competitors(
                competitor1=match.home_team.strip(),
                competitor2=match.away_team.strip(),
                pattern_used=CompetitorPattern.TEAMS_OBJECT,
            )
        return self._split(title, TEAM_SEPARATORS)

    def _split(self, title: str, separators: Sequence[str]) -> Competitors:
        parts = split_on_first(title, separators)
        if parts is None:
            return Competitors(competitor1=title)
        return Competitors(
            competitor1=parts[0],
            competitor2=parts[1],
            pattern_used=CompetitorPattern.SEPARATOR,
        )
