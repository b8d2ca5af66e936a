import re
from typing import Dict, FrozenSet, Optional

from loguru import logger

from streamcatalog.config.sport_profiles import (
    DEFAULT_PROFILE,
    SPORT_PROFILES,
    SportProfile,
    profile_for,
)
from streamcatalog.models.competitors import Competitors
from streamcatalog.models.enums import Sport
from streamcatalog.models.match import NormalizedMatch
from streamcatalog.normalization.normalizer import DEFAULT_TITLE
from streamcatalog.utils.misc_utils import (
    canonicalize_team_name,
    canonicalize_tournament,
    collapse_whitespace,
    tokenize,
)

from .competitors import TEAM_SPORTS, CompetitorExtractor

TOURNAMENT_MATCH_BOOST = 0.2
TOURNAMENT_KEYWORD_BOOST = 0.1

# Only pair scores above this are logged
_LOG_SCORE_FLOOR = 0.2

# "R. Federer", "J.Murray/B.Soares"
_TENNIS_NAMING_RE = re.compile(r"(?<![\w.])[^\W\d_]\.|/")
_TEAM_INDICATORS = frozenset({"fc", "united", "city", "club", "athletic", "real"})


def _competitor_key(competitor: str) -> str:
    tokens = tokenize(canonicalize_team_name(competitor), min_length=1)
    return tokens[-1] if tokens else ""


def fingerprint(match: NormalizedMatch, competitors: Competitors) -> str:
    """Coarse bucket key: UTC date plus the sorted surname/last-word of each competitor.

    Pure and deterministic. 'Roger Federer vs Rafael Nadal' and 'R. Nadal vs R. Federer'
    on the same day share a key.
    """
    keys = sorted(
        key
        for key in (
            _competitor_key(competitors.competitor1),
            _competitor_key(competitors.competitor2),
        )
        if key
    )
    return collapse_whitespace("|".join([match.match_date, *keys]).lower())


class SimilarityEngine:
    """Pairwise similarity between normalized matches from different suppliers."""

    def __init__(
        self,
        profiles: Optional[Dict[str, SportProfile]] = None,
        default_profile: Optional[SportProfile] = None,
        extractor: Optional[CompetitorExtractor] = None,
    ):
        self.profiles = SPORT_PROFILES if profiles is None else profiles
        self.default_profile = DEFAULT_PROFILE if default_profile is None else default_profile
        self.extractor = extractor or CompetitorExtractor()

    def profile_for_pair(self, a: NormalizedMatch, b: NormalizedMatch) -> SportProfile:
        """The shared sport's profile; the default profile when the sports disagree."""
        if a.sport == b.sport:
            return profile_for(a.sport, self.profiles, self.default_profile)
        return self.default_profile

    def fingerprint(self, match: NormalizedMatch, competitors: Optional[Competitors] = None) -> str:
        return fingerprint(match, competitors or self.extractor.extract(match))

    def score(
        self,
        a: NormalizedMatch,
        b: NormalizedMatch,
        competitors_a: Optional[Competitors] = None,
        competitors_b: Optional[Competitors] = None,
    ) -> float:
        """Similarity in [0, 1]. Symmetric, and 0 for records from the same supplier."""
        if a.source == b.source:
            return 0.0
        # Placeholder titles carry no identity to compare
        if a.match_title == DEFAULT_TITLE or b.match_title == DEFAULT_TITLE:
            return 0.0

        profile = self.profile_for_pair(a, b)
        competitors_a = competitors_a or self.extractor.extract(a)
        competitors_b = competitors_b or self.extractor.extract(b)

        tokens_a = self._tokens(competitors_a, profile)
        tokens_b = self._tokens(competitors_b, profile)
        base = self.token_overlap(tokens_a, tokens_b)

        score = base
        if base > 0:
            score += self._tournament_boost(a.tournament, b.tournament, profile)
            score += self._pattern_bonus(a, b, profile)
        score = max(0.0, min(1.0, score))

        if score > _LOG_SCORE_FLOOR:
            logger.debug(
                f"Similarity {score:.3f} (base {base:.3f}) between "
                f"[{a.source}] '{a.match_title}' and [{b.source}] '{b.match_title}'"
            )
        return score

    @staticmethod
    def token_overlap(tokens_a: FrozenSet[str], tokens_b: FrozenSet[str]) -> float:
        """Common tokens (equal or containing one another) over the larger set size.

        The common count is taken in both directions and the smaller one is used,
        so swapping the arguments never changes the result.
        """
        if not tokens_a or not tokens_b:
            return 0.0

        def matched(source: FrozenSet[str], target: FrozenSet[str]) -> int:
            return sum(
                1
                for token in source
                if any(token == other or token in other or other in token for other in target)
            )

        common = min(matched(tokens_a, tokens_b), matched(tokens_b, tokens_a))
        return common / max(len(tokens_a), len(tokens_b))

    def _tokens(self, competitors: Competitors, profile: SportProfile) -> FrozenSet[str]:
        text = " ".join(
            canonicalize_team_name(name)
            for name in (competitors.competitor1, competitors.competitor2)
            if name
        )
        return frozenset(tokenize(text, min_length=profile.min_token_length))

    def _tournament_boost(self, tournament_a: str, tournament_b: str, profile: SportProfile) -> float:
        first = canonicalize_tournament(tournament_a)
        second = canonicalize_tournament(tournament_b)
        if not first or not second:
            return 0.0
        if first == second or first in second or second in first:
            return TOURNAMENT_MATCH_BOOST
        for keyword in profile.tournament_keywords:
            if keyword in first and keyword in second:
                return TOURNAMENT_KEYWORD_BOOST
        return 0.0

    def _pattern_bonus(self, a: NormalizedMatch, b: NormalizedMatch, profile: SportProfile) -> float:
        if not profile.pattern_bonus or a.sport != b.sport:
            return 0.0
        if a.sport == Sport.TENNIS.value:
            matched = all(_TENNIS_NAMING_RE.search(m.match_title) for m in (a, b))
        elif a.sport in TEAM_SPORTS:
            matched = all(
                _TEAM_INDICATORS.intersection(tokenize(m.match_title, min_length=2))
                for m in (a, b)
            )
        else:
            matched = False
        return profile.pattern_bonus if matched else 0.0
