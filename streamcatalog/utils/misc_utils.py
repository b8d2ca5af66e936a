# streamcatalog/utils/misc_utils.py
import re
import unicodedata
from typing import List

CANONICAL_SEPARATOR = " vs "

# A dash with whitespace on at least one side; intra-word hyphens are kept
_DASH_SEPARATOR_RE = re.compile(r"\s+[-–—]+\s*|\s*[-–—]+\s+")
# " v ", " vs. ", " VS " and similar spellings of versus
_VERSUS_RE = re.compile(r"\s+(?:vs?\.?|versus)\s+", re.IGNORECASE)
_WHITESPACE_RE = re.compile(r"\s+")
_TOKEN_SPLIT_RE = re.compile(r"[.\-/\s]+")

_TEAM_AFFIX_RE = re.compile(r"^(?:fc|afc|cf|sc)\s+|\s+(?:fc|afc|cf|sc)$")

# Whole-name replacements applied after affix stripping
_TEAM_ALIASES = {
    "man utd": "manchester utd",
    "man united": "manchester utd",
    "man city": "manchester city",
    "spurs": "tottenham",
    "korea": "south korea",
    "north korea": "korea dpr",
    "dpr korea": "korea dpr",
    "usa": "united states",
    "u.s.a.": "united states",
    "uk": "united kingdom",
    "u.k.": "united kingdom",
}

_TOURNAMENT_ALIASES = (
    (re.compile(r"\b(?:uefa )?(?:champions league|ucl)\b"), "uefa champions league"),
    (re.compile(r"\b(?:english )?(?:premier league|epl)\b"), "english premier league"),
)


def collapse_whitespace(text: str) -> str:
    return _WHITESPACE_RE.sub(" ", text).strip()


def standardize_separators(title: str) -> str:
    """Rewrites dash and versus separators to the canonical ' vs '. Idempotent."""
    if not title:
        return ""
    standardized = _DASH_SEPARATOR_RE.sub(CANONICAL_SEPARATOR, f" {title} ")
    standardized = _VERSUS_RE.sub(CANONICAL_SEPARATOR, standardized)
    return collapse_whitespace(standardized)


def fold_accents(text: str) -> str:
    """'Dončić' -> 'Doncic'."""
    normalized = unicodedata.normalize("NFKD", text)
    return normalized.encode("ascii", "ignore").decode("ascii")


def canonicalize_team_name(name: str) -> str:
    """Lower-cased, accent-folded team/player name with common variants unified."""
    if not name:
        return ""
    canonical = collapse_whitespace(fold_accents(name).lower())
    if canonical in _TEAM_ALIASES:
        return _TEAM_ALIASES[canonical]
    canonical = _TEAM_AFFIX_RE.sub("", canonical).strip()
    if canonical.endswith(" united"):
        canonical = canonical[: -len(" united")] + " utd"
    return _TEAM_ALIASES.get(canonical, canonical)


def canonicalize_tournament(tournament: str) -> str:
    if not tournament:
        return ""
    canonical = collapse_whitespace(tournament.lower())
    for pattern, replacement in _TOURNAMENT_ALIASES:
        canonical = pattern.sub(replacement, canonical)
    return canonical


def tokenize(text: str, min_length: int = 2) -> List[str]:
    """Splits on whitespace, dots, dashes and slashes; keeps tokens of at least min_length."""
    return [
        token
        for token in _TOKEN_SPLIT_RE.split(text.lower())
        if len(token) >= min_length
    ]


def title_case(text: str) -> str:
    """'motor-sports' -> 'Motor-Sports'."""
    return collapse_whitespace(text).title()
