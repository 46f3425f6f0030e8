"""
Decision Classifier
-------------------
Maps a scalar score to an ordered decision bucket with a display colour.

Buckets are checked top-down with strict ``>``, so a score sitting exactly on
a threshold falls into the lower bucket (0.85 -> Proceed Strategically).

Five-bucket model (six-factor dashboard):
    score > 0.85   Full Speed Ahead            #22c55e
    score > 0.65   Proceed Strategically       #4ade80
    score > 0.55   Implement with Oversight    #a3e635
    score > 0.35   Request Clarification       #facc15
    otherwise      Delay or Disengage          #f87171

Three-bucket model (team dashboard):
    score > 0.65   Proceed Strategically       #4ade80
    score > 0.45   Request Clarification       #facc15
    otherwise      Delay or Disengage          #f87171
"""
from typing import Dict, Tuple

from decision_matrix.models.decision import Decision
from decision_matrix.models.enumerations import DecisionLabel

FULL_SPEED_AHEAD = Decision(text=DecisionLabel.FULL_SPEED_AHEAD.value, color="#22c55e")
PROCEED_STRATEGICALLY = Decision(text=DecisionLabel.PROCEED_STRATEGICALLY.value, color="#4ade80")
IMPLEMENT_WITH_OVERSIGHT = Decision(text=DecisionLabel.IMPLEMENT_WITH_OVERSIGHT.value, color="#a3e635")
REQUEST_CLARIFICATION = Decision(text=DecisionLabel.REQUEST_CLARIFICATION.value, color="#facc15")
DELAY_OR_DISENGAGE = Decision(text=DecisionLabel.DELAY_OR_DISENGAGE.value, color="#f87171")

# (exclusive lower bound, decision), highest first
DECISION_THRESHOLDS: Tuple[Tuple[float, Decision], ...] = (
    (0.85, FULL_SPEED_AHEAD),
    (0.65, PROCEED_STRATEGICALLY),
    (0.55, IMPLEMENT_WITH_OVERSIGHT),
    (0.35, REQUEST_CLARIFICATION),
)

TEAM_DECISION_THRESHOLDS: Tuple[Tuple[float, Decision], ...] = (
    (0.65, PROCEED_STRATEGICALLY),
    (0.45, REQUEST_CLARIFICATION),
)

DECISION_COLORS: Dict[str, str] = {
    d.text: d.color
    for d in (
        FULL_SPEED_AHEAD,
        PROCEED_STRATEGICALLY,
        IMPLEMENT_WITH_OVERSIGHT,
        REQUEST_CLARIFICATION,
        DELAY_OR_DISENGAGE,
    )
}


def _classify(
    score: float,
    thresholds: Tuple[Tuple[float, Decision], ...],
    fallback: Decision,
) -> Decision:
    for lower_bound, decision in thresholds:
        if score > lower_bound:
            return decision
    return fallback


def get_decision(score: float) -> Decision:
    """
    Five-bucket decision for a score. Total over all reals.

    Examples:
        >>> get_decision(0.85).text
        'Proceed Strategically'
        >>> get_decision(0.851).text
        'Full Speed Ahead'
    """
    return _classify(score, DECISION_THRESHOLDS, DELAY_OR_DISENGAGE)


def get_team_decision(score: float) -> Decision:
    """Three-bucket decision used by the team dashboard."""
    return _classify(score, TEAM_DECISION_THRESHOLDS, DELAY_OR_DISENGAGE)
