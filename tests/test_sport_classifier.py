"""Unit tests for SportClassifier.

Test Strategy:
1. Explicit supplier labels map through the alias table
2. Missing or ambiguous labels fall back to college-football detection
3. Everything else ends up as "Other"
"""
import pytest

from streamcatalog.classification.sport_classifier import SportClassifier
from streamcatalog.models.match import SupplierFields


@pytest.fixture
def classifier() -> SportClassifier:
    return SportClassifier()


class TestLabelMapping:
    """Explicit supplier labels."""

    @pytest.mark.parametrize(
        "label,expected",
        [
            ("soccer", "Football"),
            ("UFC", "MMA"),
            ("  Ice-Hockey ", "Ice Hockey"),
            ("american-football", "American Football"),
            ("nba", "Basketball"),
            ("Tennis", "Tennis"),
        ],
    )
    def test_alias_lookup(self, classifier, label, expected):
        """Should map known aliases case-insensitively after trimming."""
        assert classifier.classify_text(label) == expected

    def test_unmapped_label_is_title_cased(self, classifier):
        """Should pass unknown but usable labels through title-cased."""
        assert classifier.classify_text("motor boats") == "Motor Boats"

    def test_explicit_label_beats_team_names(self, classifier):
        """A non-ambiguous label wins over college team names in the title."""
        assert (
            classifier.classify_text("soccer", "Alabama Crimson Tide vs Georgia Bulldogs")
            == "Football"
        )

    def test_injected_alias_table(self):
        """Tables are configuration injected at construction."""
        classifier = SportClassifier(aliases={"footy": "Australian Football"})
        assert classifier.classify_text("Footy") == "Australian Football"


class TestContentDetection:
    """College / American football detection from title and tournament."""

    def test_missing_label_with_college_teams(self, classifier):
        """Should detect American Football from college team names."""
        record = SupplierFields(title="Alabama Crimson Tide vs Georgia Bulldogs")
        assert classifier.classify(record) == "American Football"

    def test_ambiguous_football_label_overridden(self, classifier):
        """A generic 'football' label is overridden by a college team hit."""
        assert classifier.classify_text("football", "Ohio State vs Michigan") == "American Football"

    def test_ambiguous_football_label_without_hit(self, classifier):
        """A generic 'football' label with no college hint stays Football."""
        assert classifier.classify_text("football", "Arsenal vs Chelsea") == "Football"

    def test_competition_indicator_in_tournament(self, classifier):
        """Competition indicators in the tournament classify the record."""
        assert classifier.classify_text(None, "Team A vs Team B", "NCAA Week 12") == "American Football"

    def test_competing_sport_marker_vetoes_team_hit(self, classifier):
        """A team-name hit alongside another sport's marker is not American Football."""
        assert classifier.classify_text(None, "Miami FC vs Louisville City") == "Other"

    def test_team_names_match_whole_words_only(self, classifier):
        """'texans' must not match the college team 'texas'."""
        assert classifier.is_american_football("the texans come to town") is False


class TestFallback:
    """Records with nothing usable."""

    def test_no_label_no_known_team(self, classifier):
        """Should classify as Other when no label and no college-team token."""
        assert classifier.classify_text(None, "Real Madrid vs Barcelona") == "Other"

    def test_everything_missing(self, classifier):
        assert classifier.classify(SupplierFields()) == "Other"

    @pytest.mark.parametrize("label", ["", "unknown", "null", "Other"])
    def test_placeholder_labels(self, classifier, label):
        """Placeholder labels are treated as missing."""
        assert classifier.classify_text(label, "Some Event") == "Other"
