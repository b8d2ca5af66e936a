"""Static lookup tables used by the sport classifier.

The tables are plain immutable data so they can be swapped or extended by
passing different ones to ``SportClassifier``.
"""

from types import MappingProxyType
from typing import FrozenSet, Mapping

from streamcatalog.models.enums import Sport

# Supplier sport/category label (lower-cased, trimmed) -> canonical sport
SPORT_ALIASES: Mapping[str, str] = MappingProxyType(
    {
        "football": Sport.FOOTBALL.value,
        "soccer": Sport.FOOTBALL.value,
        "association football": Sport.FOOTBALL.value,
        "futbol": Sport.FOOTBALL.value,
        "futsal": Sport.FUTSAL.value,
        "american football": Sport.AMERICAN_FOOTBALL.value,
        "american-football": Sport.AMERICAN_FOOTBALL.value,
        "college football": Sport.AMERICAN_FOOTBALL.value,
        "ncaa football": Sport.AMERICAN_FOOTBALL.value,
        "ncaaf": Sport.AMERICAN_FOOTBALL.value,
        "nfl": Sport.AMERICAN_FOOTBALL.value,
        "australian football": Sport.AUSTRALIAN_FOOTBALL.value,
        "australian-football": Sport.AUSTRALIAN_FOOTBALL.value,
        "aussie rules": Sport.AUSTRALIAN_FOOTBALL.value,
        "afl": Sport.AUSTRALIAN_FOOTBALL.value,
        "basketball": Sport.BASKETBALL.value,
        "nba": Sport.BASKETBALL.value,
        "baseball": Sport.BASEBALL.value,
        "mlb": Sport.BASEBALL.value,
        "hockey": Sport.ICE_HOCKEY.value,
        "ice hockey": Sport.ICE_HOCKEY.value,
        "ice-hockey": Sport.ICE_HOCKEY.value,
        "nhl": Sport.ICE_HOCKEY.value,
        "tennis": Sport.TENNIS.value,
        "table tennis": Sport.TABLE_TENNIS.value,
        "table-tennis": Sport.TABLE_TENNIS.value,
        "ping pong": Sport.TABLE_TENNIS.value,
        "cricket": Sport.CRICKET.value,
        "rugby": Sport.RUGBY.value,
        "rugby union": Sport.RUGBY.value,
        "rugby league": Sport.RUGBY.value,
        "golf": Sport.GOLF.value,
        "golf challenge": Sport.GOLF.value,
        "dp world tour": Sport.GOLF.value,
        "boxing": Sport.BOXING.value,
        "mma": Sport.MMA.value,
        "ufc": Sport.MMA.value,
        "fight": Sport.FIGHTING.value,
        "fighting": Sport.FIGHTING.value,
        "wrestling": Sport.WRESTLING.value,
        "wwe": Sport.WRESTLING.value,
        "formula 1": Sport.RACING.value,
        "f1": Sport.RACING.value,
        "nascar": Sport.RACING.value,
        "motogp": Sport.RACING.value,
        "feature race": Sport.RACING.value,
        "racing": Sport.RACING.value,
        "motorsport": Sport.MOTORSPORT.value,
        "motor-sport": Sport.MOTORSPORT.value,
        "motor sports": Sport.MOTORSPORT.value,
        "motor-sports": Sport.MOTORSPORT.value,
        "moto-sports": Sport.MOTORSPORT.value,
        "moto sports": Sport.MOTORSPORT.value,
        "volleyball": Sport.VOLLEYBALL.value,
        "beach volleyball": Sport.BEACH_VOLLEYBALL.value,
        "badminton": Sport.BADMINTON.value,
        "handball": Sport.HANDBALL.value,
        "snooker": Sport.SNOOKER.value,
        "pool": Sport.SNOOKER.value,
        "billiards": Sport.SNOOKER.value,
        "darts": Sport.DARTS.value,
        "cycling": Sport.CYCLING.value,
        "tour de france": Sport.CYCLING.value,
        "athletics": Sport.ATHLETICS.value,
        "track and field": Sport.ATHLETICS.value,
        "track & field": Sport.ATHLETICS.value,
        "swimming": Sport.SWIMMING.value,
        "water polo": Sport.WATER_POLO.value,
    }
)

# Labels that name more than one sport; content detection decides
AMBIGUOUS_LABELS: FrozenSet[str] = frozenset({"football"})

# Labels that carry no information
PLACEHOLDER_LABELS: FrozenSet[str] = frozenset(
    {"", "other", "null", "undefined", "none", "unknown", "n/a", "sports", "sport"}
)

COLLEGE_FOOTBALL_TEAMS: FrozenSet[str] = frozenset(
    {
        # ACC
        "boston college", "clemson", "duke", "florida state", "georgia tech",
        "louisville", "miami", "nc state", "north carolina", "pittsburgh",
        "smu", "stanford", "syracuse", "virginia", "virginia tech",
        "wake forest", "california",
        # American
        "army", "charlotte", "east carolina", "florida atlantic", "memphis",
        "navy", "north texas", "rice", "south florida", "temple", "tulane",
        "tulsa", "uab", "utsa",
        # Big 12
        "arizona state", "arizona", "byu", "baylor", "cincinnati", "colorado",
        "houston", "iowa state", "kansas", "kansas state", "oklahoma state",
        "tcu", "texas tech", "ucf", "utah", "west virginia",
        # Big Ten
        "illinois", "indiana", "iowa", "maryland", "michigan state", "michigan",
        "minnesota", "nebraska", "northwestern", "ohio state", "oregon",
        "penn state", "purdue", "rutgers", "ucla", "usc", "washington",
        "wisconsin",
        # Conference USA
        "delaware", "florida international", "fiu", "jacksonville state",
        "kennesaw state", "liberty", "louisiana tech", "middle tennessee",
        "missouri state", "new mexico state", "sam houston", "utep",
        "western kentucky",
        # Independents
        "notre dame", "uconn",
        # MAC
        "akron", "ball state", "bowling green", "buffalo", "central michigan",
        "eastern michigan", "kent state", "massachusetts", "miami (oh)",
        "northern illinois", "ohio", "toledo", "western michigan",
        # Mountain West
        "air force", "boise state", "colorado state", "fresno state", "hawaii",
        "nevada", "new mexico", "san diego state", "san jose state", "unlv",
        "utah state", "wyoming",
        # Pac-12
        "oregon state", "washington state",
        # SEC
        "alabama", "arkansas", "auburn", "florida", "georgia", "kentucky",
        "lsu", "mississippi state", "missouri", "oklahoma", "ole miss",
        "south carolina", "tennessee", "texas a&m", "texas", "vanderbilt",
        # Sun Belt
        "app state", "appalachian state", "arkansas state", "coastal carolina",
        "georgia southern", "georgia state", "james madison", "louisiana",
        "marshall", "old dominion", "south alabama", "southern miss",
        "texas state", "troy", "ul monroe",
        # Nicknames
        "crimson tide", "buckeyes", "wolverines", "longhorns", "sooners",
        "fighting irish", "seminoles", "nittany lions", "gators", "volunteers",
        "razorbacks", "gamecocks", "commodores", "aggies", "cornhuskers",
        "hawkeyes", "badgers", "golden gophers", "boilermakers",
        "scarlet knights", "terrapins", "fighting illini", "hoosiers",
        "trojans", "beavers", "sun devils", "buffaloes", "utes", "cyclones",
        "jayhawks", "mountaineers", "red raiders", "horned frogs", "bearcats",
        "yellow jackets", "demon deacons", "hokies", "tar heels",
        "wolfpack", "blue devils", "golden bears", "mustangs", "green wave",
        "golden hurricane", "mean green", "roadrunners", "black knights",
        "midshipmen", "rainbow warriors", "wolf pack", "aztecs", "chippewas",
        "golden flashes", "zips", "redhawks", "chanticleers", "ragin cajuns",
        "warhawks", "thundering herd", "hilltoppers", "blue raiders",
        "bearkats", "blue hens", "huskies", "cougars", "spartans",
    }
)

# Competition/tournament markers that imply (college) American football
COMPETITION_INDICATORS: FrozenSet[str] = frozenset(
    {
        "college football", "ncaa football", "ncaaf", "ncaa", "fbs", "fcs",
        "bowl game", "cfp", "college football playoff",
        "rose bowl", "orange bowl", "sugar bowl", "cotton bowl", "peach bowl",
        "fiesta bowl", "citrus bowl", "outback bowl", "gator bowl",
        "holiday bowl", "alamo bowl", "las vegas bowl",
        "big ten", "big 12", "pac-12", "sec", "acc", "aac",
        "mountain west", "mac", "conference usa", "sun belt",
        "nfl", "super bowl", "pro bowl",
    }
)

# Markers of a competing sport that veto a bare team-name hit
COMPETING_SPORT_MARKERS: FrozenSet[str] = frozenset(
    {"soccer", "basketball", "volleyball", "baseball", "hockey", "fc", "cf", "nba", "nhl", "mlb"}
)
