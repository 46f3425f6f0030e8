# scoring/team_simulation.py
"""
Team Dashboard Simulation (five-factor model)

Four analytical archetypes scored on the five-factor vector (no
psychological safety) and classified with the three-bucket team classifier:

    score > 0.65 → Proceed Strategically
    score > 0.45 → Request Clarification
    otherwise    → Delay or Disengage

Team vectors and six-factor vectors do not mix; scoring one against the
other raises ShapeMismatchException.
"""

from typing import List

import structlog

from decision_matrix.models.archetype import TeamArchetypeProfile
from decision_matrix.models.decision import SimulationResult
from decision_matrix.models.factors import TeamWeights
from decision_matrix.scoring.decision_classifier import get_team_decision
from decision_matrix.scoring.score_calculator import VectorLike, calculate_score
from decision_matrix.scoring.utils import round_score

logger = structlog.get_logger(__name__)

TEAM_ARCHETYPES: List[TeamArchetypeProfile] = [
    TeamArchetypeProfile(
        name="INTJ",
        weights=TeamWeights(
            data_quality=0.35, roi_visibility=0.30, autonomy_scope=0.20,
            time_pressure=0.10, social_complexity=-0.15,
        ),
    ),
    TeamArchetypeProfile(
        name="ISTJ",
        weights=TeamWeights(
            data_quality=0.40, roi_visibility=0.20, autonomy_scope=0.15,
            time_pressure=0.15, social_complexity=-0.10,
        ),
    ),
    TeamArchetypeProfile(
        name="ENTJ",
        weights=TeamWeights(
            data_quality=0.25, roi_visibility=0.35, autonomy_scope=0.20,
            time_pressure=0.15, social_complexity=-0.05,
        ),
    ),
    TeamArchetypeProfile(
        name="INTP",
        weights=TeamWeights(
            data_quality=0.40, roi_visibility=0.15, autonomy_scope=0.20,
            time_pressure=0.05, social_complexity=-0.10,
        ),
    ),
]


def calculate_team_results(inputs: VectorLike) -> List[SimulationResult]:
    """
    Score the four team archetypes against five-factor inputs.

    Args:
        inputs: TeamInputs, or a mapping over the five team factor keys.

    Returns:
        One SimulationResult per team archetype, in TEAM_ARCHETYPES order.
    """
    results = []
    for archetype in TEAM_ARCHETYPES:
        score = round_score(calculate_score(archetype.weights, inputs))
        decision = get_team_decision(score)
        results.append(
            SimulationResult(
                name=archetype.name,
                score=score,
                decision=decision.text,
                color=decision.color,
            )
        )

    logger.debug("team_simulation_completed", archetypes=len(results))
    return results
