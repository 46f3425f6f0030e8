"""
Public Opinion Calculator
-------------------------
Scores a composite "general public" weight vector and spreads the result over
all five decisions, modelling population-level disagreement instead of a
single deterministic choice.

Distribution rules, one band per decision bucket (same strict thresholds):

    band            primary                    primary value
    score > 0.85    Full Speed Ahead           clamp(score × 0.8,       0.60, 0.95)
    score > 0.65    Proceed Strategically      clamp(score × 0.7,       0.50, 0.90)
    score > 0.55    Implement with Oversight   clamp(score × 0.6,       0.40, 0.85)
    score > 0.35    Request Clarification      clamp((1 − score) × 0.6, 0.30, 0.80)
    otherwise       Delay or Disengage         clamp((1 − score) × 0.8, 0.50, 0.90)

What the primary leaves over cascades through the other labels: each takes a
fixed share of what is still unassigned, and the last label takes the rest.
Every probability is rounded to 3 decimals, so the five values sum to 1
within 0.005.

The displayed colour of the public result is looked up from a fixed
representative score of the winning label (0.9 / 0.75 / 0.6 / 0.45 / 0.2),
not from the raw public score.
"""
from dataclasses import dataclass
from typing import Dict, Optional, Tuple

import structlog

from decision_matrix.models.decision import PublicOpinionResult
from decision_matrix.models.enumerations import DecisionLabel
from decision_matrix.models.factors import Weights
from decision_matrix.scoring.decision_classifier import get_decision
from decision_matrix.scoring.score_calculator import VectorLike, calculate_score
from decision_matrix.scoring.utils import clamp, round_score

logger = structlog.get_logger(__name__)

PUBLIC_OPINION_WEIGHTS = Weights(
    data_quality=0.12,           # relies more on intuition than on data
    roi_visibility=0.32,         # strong focus on clear, immediate returns
    autonomy_scope=0.08,         # prefers guidance over autonomy
    time_pressure=0.28,          # urgency and FOMO weigh heavily
    social_complexity=-0.22,     # avoids social complexity
    psychological_safety=0.15,
)

_FULL = DecisionLabel.FULL_SPEED_AHEAD
_PROCEED = DecisionLabel.PROCEED_STRATEGICALLY
_IMPLEMENT = DecisionLabel.IMPLEMENT_WITH_OVERSIGHT
_CLARIFY = DecisionLabel.REQUEST_CLARIFICATION
_DISENGAGE = DecisionLabel.DELAY_OR_DISENGAGE

# Output order of the probability mapping; also the argmax tie-break order
PROBABILITY_ORDER: Tuple[DecisionLabel, ...] = (_FULL, _PROCEED, _IMPLEMENT, _CLARIFY, _DISENGAGE)

REPRESENTATIVE_SCORES: Dict[DecisionLabel, float] = {
    _FULL: 0.9,
    _PROCEED: 0.75,
    _IMPLEMENT: 0.6,
    _CLARIFY: 0.45,
    _DISENGAGE: 0.2,
}


@dataclass(frozen=True)
class ProbabilityBand:
    """Distribution rule for scores above `lower_bound` (None = catch-all)."""
    lower_bound: Optional[float]
    primary: DecisionLabel
    multiplier: float
    use_complement: bool               # f(score) = (1 − score) × multiplier
    floor: float
    cap: float
    cascade: Tuple[Tuple[DecisionLabel, float], ...]
    remainder: DecisionLabel

    def primary_value(self, score: float) -> float:
        base = (1 - score) if self.use_complement else score
        return clamp(base * self.multiplier, self.floor, self.cap)


PROBABILITY_BANDS: Tuple[ProbabilityBand, ...] = (
    ProbabilityBand(
        lower_bound=0.85, primary=_FULL, multiplier=0.8, use_complement=False,
        floor=0.6, cap=0.95,
        cascade=((_PROCEED, 0.6), (_IMPLEMENT, 0.7), (_CLARIFY, 0.8)),
        remainder=_DISENGAGE,
    ),
    ProbabilityBand(
        lower_bound=0.65, primary=_PROCEED, multiplier=0.7, use_complement=False,
        floor=0.5, cap=0.9,
        cascade=((_FULL, 0.3), (_IMPLEMENT, 0.5), (_CLARIFY, 0.7)),
        remainder=_DISENGAGE,
    ),
    ProbabilityBand(
        lower_bound=0.55, primary=_IMPLEMENT, multiplier=0.6, use_complement=False,
        floor=0.4, cap=0.85,
        cascade=((_PROCEED, 0.4), (_FULL, 0.1), (_CLARIFY, 0.7)),
        remainder=_DISENGAGE,
    ),
    ProbabilityBand(
        lower_bound=0.35, primary=_CLARIFY, multiplier=0.6, use_complement=True,
        floor=0.3, cap=0.8,
        cascade=((_IMPLEMENT, 0.3), (_PROCEED, 0.2), (_FULL, 0.05)),
        remainder=_DISENGAGE,
    ),
    ProbabilityBand(
        lower_bound=None, primary=_DISENGAGE, multiplier=0.8, use_complement=True,
        floor=0.5, cap=0.9,
        cascade=((_CLARIFY, 0.6), (_IMPLEMENT, 0.3), (_PROCEED, 0.1)),
        remainder=_FULL,
    ),
)


def _select_band(score: float) -> ProbabilityBand:
    for band in PROBABILITY_BANDS:
        if band.lower_bound is None or score > band.lower_bound:
            return band
    return PROBABILITY_BANDS[-1]


def get_public_probabilities(score: float) -> Dict[str, float]:
    """
    Probability of each decision label for a public-opinion score.

    Total over all finite reals: values are each in [0, 1] and sum to 1
    within rounding (3 decimals per value).

    Examples:
        >>> probs = get_public_probabilities(0.9)
        >>> max(probs, key=probs.get)
        'Full Speed Ahead'
    """
    band = _select_band(score)

    shares: Dict[DecisionLabel, float] = {}
    primary = band.primary_value(score)
    shares[band.primary] = primary

    unassigned = 1 - primary
    for label, fraction in band.cascade:
        share = unassigned * fraction
        shares[label] = share
        unassigned = unassigned - share
    shares[band.remainder] = unassigned

    return {label.value: round_score(shares[label]) for label in PROBABILITY_ORDER}


def most_likely_decision(probabilities: Dict[str, float]) -> str:
    """Label with the highest probability; the first one wins a tie."""
    return max(probabilities.items(), key=lambda item: item[1])[0]


def get_representative_color(label: str) -> str:
    """Colour of the bucket a typical score for `label` lands in."""
    try:
        representative = REPRESENTATIVE_SCORES[DecisionLabel(label)]
    except ValueError:
        representative = REPRESENTATIVE_SCORES[_DISENGAGE]
    return get_decision(representative).color


def calculate_public_opinion(
    inputs: VectorLike,
    weights: Weights = PUBLIC_OPINION_WEIGHTS,
) -> PublicOpinionResult:
    """
    Score the public-opinion weights and build the decision distribution.

    Args:
        inputs: Current scenario inputs.
        weights: Public weight vector (defaults to PUBLIC_OPINION_WEIGHTS).

    Returns:
        PublicOpinionResult with the rounded score, probabilities, the most
        likely label and its representative colour.
    """
    score = round_score(calculate_score(weights, inputs))
    probabilities = get_public_probabilities(score)
    most_likely = most_likely_decision(probabilities)
    color = get_representative_color(most_likely)

    logger.debug(
        "public_opinion_calculated",
        score=score,
        most_likely=most_likely,
        probability=probabilities[most_likely],
    )

    return PublicOpinionResult(
        score=score,
        probabilities=probabilities,
        most_likely=most_likely,
        color=color,
    )
