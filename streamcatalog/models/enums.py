from enum import Enum


class Sport(str, Enum):
    """Canonical sport names. Unmapped supplier labels pass through title-cased."""

    FOOTBALL = "Football"
    AMERICAN_FOOTBALL = "American Football"
    AUSTRALIAN_FOOTBALL = "Australian Football"
    BASKETBALL = "Basketball"
    BASEBALL = "Baseball"
    ICE_HOCKEY = "Ice Hockey"
    TENNIS = "Tennis"
    TABLE_TENNIS = "Table Tennis"
    CRICKET = "Cricket"
    RUGBY = "Rugby"
    GOLF = "Golf"
    BOXING = "Boxing"
    MMA = "MMA"
    FIGHTING = "Fighting"
    WRESTLING = "Wrestling"
    RACING = "Racing"
    MOTORSPORT = "Motorsport"
    VOLLEYBALL = "Volleyball"
    BEACH_VOLLEYBALL = "Beach Volleyball"
    BADMINTON = "Badminton"
    HANDBALL = "Handball"
    SNOOKER = "Snooker"
    DARTS = "Darts"
    CYCLING = "Cycling"
    ATHLETICS = "Athletics"
    SWIMMING = "Swimming"
    WATER_POLO = "Water Polo"
    FUTSAL = "Futsal"
    OTHER = "Other"


class Supplier(str, Enum):
    TOM = "tom"
    SARAH = "sarah"
    WENDY = "wendy"
    # Add other suppliers as needed


class CompetitorPattern(str, Enum):
    """How a title was split into two competitors."""

    TENNIS_SINGLES = "tennis_singles"
    TENNIS_DOUBLES = "tennis_doubles"
    TENNIS_INITIAL_LAST = "tennis_initial_last"
    TEAMS_OBJECT = "teams_object"
    SEPARATOR = "separator"
    UNKNOWN = "unknown"


class ConfidenceLevel(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"
    VERY_LOW = "veryLow"
