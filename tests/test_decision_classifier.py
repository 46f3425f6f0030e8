# tests/test_decision_classifier.py

"""
Decision Classifier Tests - five-bucket and team three-bucket thresholds
"""

import pytest

from decision_matrix.scoring.decision_classifier import (
    DECISION_COLORS,
    get_decision,
    get_team_decision,
)


class TestGetDecision:
    """Tests for the five-bucket classifier."""

    @pytest.mark.parametrize(
        "score,label",
        [
            (0.9, "Full Speed Ahead"),
            (0.75, "Proceed Strategically"),
            (0.56, "Implement with Oversight"),
            (0.4, "Request Clarification"),
            (0.2, "Delay or Disengage"),
        ],
    )
    def test_each_bucket(self, score, label):
        """A score inside each band gets that band's label."""
        assert get_decision(score).text == label

    @pytest.mark.parametrize(
        "threshold,at,above",
        [
            (0.85, "Proceed Strategically", "Full Speed Ahead"),
            (0.65, "Implement with Oversight", "Proceed Strategically"),
            (0.55, "Request Clarification", "Implement with Oversight"),
            (0.35, "Delay or Disengage", "Request Clarification"),
        ],
    )
    def test_threshold_falls_into_lower_bucket(self, threshold, at, above):
        """Comparisons are strict: a score equal to a threshold takes the lower bucket."""
        assert get_decision(threshold).text == at
        assert get_decision(threshold + 0.001).text == above
        assert get_decision(threshold + 0.000001).text == above

    @pytest.mark.parametrize(
        "score,label",
        [
            (0, "Delay or Disengage"),
            (1, "Full Speed Ahead"),
            (-0.1, "Delay or Disengage"),
            (-100.0, "Delay or Disengage"),
            (1.1, "Full Speed Ahead"),
            (100.0, "Full Speed Ahead"),
        ],
    )
    def test_out_of_range_scores(self, score, label):
        """Scores outside [0, 1] resolve to the extreme buckets."""
        assert get_decision(score).text == label

    def test_colors(self):
        """Every bucket carries its fixed colour."""
        assert get_decision(0.9).color == "#22c55e"
        assert get_decision(0.75).color == "#4ade80"
        assert get_decision(0.6).color == "#a3e635"
        assert get_decision(0.45).color == "#facc15"
        assert get_decision(0.2).color == "#f87171"

    def test_decision_colors_table(self):
        """DECISION_COLORS covers the five labels in confidence order."""
        assert list(DECISION_COLORS) == [
            "Full Speed Ahead",
            "Proceed Strategically",
            "Implement with Oversight",
            "Request Clarification",
            "Delay or Disengage",
        ]


class TestGetTeamDecision:
    """Tests for the team dashboard three-bucket classifier."""

    @pytest.mark.parametrize(
        "score,label,color",
        [
            (0.9, "Proceed Strategically", "#4ade80"),
            (0.651, "Proceed Strategically", "#4ade80"),
            (0.65, "Request Clarification", "#facc15"),
            (0.451, "Request Clarification", "#facc15"),
            (0.45, "Delay or Disengage", "#f87171"),
            (-1.0, "Delay or Disengage", "#f87171"),
        ],
    )
    def test_team_buckets(self, score, label, color):
        """Three buckets with strict thresholds at 0.65 and 0.45."""
        decision = get_team_decision(score)
        assert decision.text == label
        assert decision.color == color

    def test_variants_differ(self):
        """The team classifier is not the five-bucket one."""
        assert get_team_decision(0.9).text != get_decision(0.9).text
        assert get_team_decision(0.6).text != get_decision(0.6).text
