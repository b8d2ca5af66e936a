"""Shared fixtures for the stream catalog test suite."""
from typing import Callable, Dict, List, Optional

import pytest

from streamcatalog.models.match import NormalizedMatch

# 2023-11-15T12:00:00Z; keeps +/- a few hours on the same UTC date
NOW = 1_700_049_600


@pytest.fixture
def make_match() -> Callable[..., NormalizedMatch]:
    """Factory for NormalizedMatch records with sensible defaults."""

    def _make(
        source: str,
        title: str,
        sport: str = "Other",
        unix_timestamp: int = NOW,
        streams: Optional[List[str]] = None,
        quality_score: int = 100,
        tournament: str = "",
        home_team: Optional[str] = None,
        away_team: Optional[str] = None,
        streams_by_source: Optional[Dict[str, List[str]]] = None,
    ) -> NormalizedMatch:
        if streams_by_source is None:
            slug = title.lower().replace(" ", "-")
            streams_by_source = {
                source: streams if streams is not None else [f"https://{source}.example/{slug}"]
            }
        return NormalizedMatch(
            source=source,
            match_title=title,
            sport=sport,
            tournament=tournament,
            unix_timestamp=unix_timestamp,
            streams_by_source=streams_by_source,
            quality_score=quality_score,
            home_team=home_team,
            away_team=away_team,
        )

    return _make


@pytest.fixture
def tom_payload() -> dict:
    return {
        "events": {
            "2023-11-15": [
                {
                    "match": "Arsenal - Chelsea",
                    "unix_timestamp": NOW,
                    "sport": "soccer",
                    "tournament": " Premier League ",
                    "channels": [
                        "https://tom.example/arsenal-chelsea",
                        "https://tom.example/arsenal-chelsea",
                        "x",
                        None,
                    ],
                },
                {
                    "match": "Roger Federer - Rafael Nadal",
                    "unix_timestamp": NOW + 3600,
                    "sport": "Tennis",
                    "tournament": "ATP Finals",
                    "channels": ["https://tom.example/fed-nadal"],
                },
            ]
        }
    }


@pytest.fixture
def sarah_payload() -> list:
    return [
        {
            "title": "Ohio State vs Michigan",
            "category": "american-football",
            "date": NOW * 1000,
            "teams": {"home": {"name": "Ohio State"}, "away": {"name": "Michigan"}},
            "sources": [{"source": "alpha", "id": "ohio-michigan"}],
        },
        {
            "title": "R. Federer - R. Nadal",
            "category": "tennis",
            "date": (NOW + 3600 + 900) * 1000,
            "sources": [
                {"source": "alpha", "id": "fed-nadal"},
                {"source": "bravo", "id": "fed-nadal"},
            ],
        },
    ]


@pytest.fixture
def wendy_payload() -> dict:
    return {
        "matches": [
            {
                "title": "Arsenal vs Chelsea",
                "teams": {"home": {"name": "Arsenal"}, "away": {"name": "Chelsea"}},
                "sportCategory": "football",
                "timestamp": (NOW + 600) * 1000,
                "league": {"name": "EPL"},
                "streams": [{"url": "https://wendy.example/ars-che"}],
            },
            {
                "title": "Lakers vs Celtics",
                "sportCategory": "basketball",
                "timestamp": NOW * 1000,
                "streams": [],
            },
        ]
    }
