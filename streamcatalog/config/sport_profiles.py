from typing import Dict, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

from streamcatalog.models.enums import Sport


class SportProfile(BaseModel):
    """Merge and scoring parameters for one sport."""

    model_config = ConfigDict(frozen=True)

    merge_threshold: float = Field(..., ge=0, le=1)
    max_time_difference_minutes: int = Field(..., ge=0)
    # Tokens shorter than this are ignored when scoring
    min_token_length: int = 2
    tournament_keywords: Tuple[str, ...] = ()
    # Added when both titles show the sport's naming pattern
    pattern_bonus: float = 0.0


DEFAULT_PROFILE = SportProfile(
    merge_threshold=0.30,
    max_time_difference_minutes=120,
)

SPORT_PROFILES: Dict[str, SportProfile] = {
    Sport.TENNIS.value: SportProfile(
        merge_threshold=0.35,
        max_time_difference_minutes=120,
        min_token_length=2,
        tournament_keywords=("atp", "wta", "itf", "challenger", "open"),
        pattern_bonus=0.15,
    ),
    Sport.AMERICAN_FOOTBALL.value: SportProfile(
        merge_threshold=0.45,
        max_time_difference_minutes=60,
        min_token_length=3,
        tournament_keywords=("ncaa", "college", "bowl", "conference", "nfl"),
        pattern_bonus=0.1,
    ),
    Sport.FOOTBALL.value: SportProfile(
        merge_threshold=0.50,
        max_time_difference_minutes=90,
        min_token_length=3,
        tournament_keywords=("premier", "la liga", "serie", "champions", "europa"),
        pattern_bonus=0.1,
    ),
    Sport.BASKETBALL.value: SportProfile(
        merge_threshold=0.40,
        max_time_difference_minutes=180,
        min_token_length=3,
        tournament_keywords=("nba", "euroleague", "playoffs", "finals"),
        pattern_bonus=0.1,
    ),
}


def profile_for(
    sport: Optional[str],
    profiles: Optional[Dict[str, SportProfile]] = None,
    default: Optional[SportProfile] = None,
) -> SportProfile:
    """Returns the profile for a sport, or the default profile when none is configured."""
    table = SPORT_PROFILES if profiles is None else profiles
    fallback = DEFAULT_PROFILE if default is None else default
    if not sport:
        return fallback
    return table.get(sport, fallback)
