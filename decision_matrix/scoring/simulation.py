"""
Archetype Simulation
--------------------
Runs every catalogued archetype against one Inputs snapshot and tallies the
plurality decision.

    score    = round3(calculate_score(profile.weights, inputs))
    decision = get_decision(score)

Results follow registry order. The majority winner is the label with the
highest count; on a tie the label seen first wins. Its colour is copied from
the first result carrying that label, not looked up again.
"""
from typing import Dict, List, Optional, Sequence

import structlog

from decision_matrix.mbti.registry import get_archetype_profiles
from decision_matrix.models.archetype import ArchetypeProfile
from decision_matrix.models.decision import MajorityDecision, SimulationResult
from decision_matrix.scoring.decision_classifier import get_decision
from decision_matrix.scoring.score_calculator import VectorLike, calculate_score
from decision_matrix.scoring.utils import round_score

logger = structlog.get_logger(__name__)

# Shown when there is nothing to tally
NEUTRAL_COLOR = "#6b7280"


def calculate_results(
    inputs: VectorLike,
    profiles: Optional[Sequence[ArchetypeProfile]] = None,
) -> List[SimulationResult]:
    """
    Score and classify each archetype for one Inputs snapshot.

    Args:
        inputs: Scenario inputs covering every factor key.
        profiles: Archetypes to evaluate; defaults to the sixteen-type registry.

    Returns:
        One SimulationResult per profile, in profile order.
    """
    if profiles is None:
        profiles = get_archetype_profiles()

    results = []
    for profile in profiles:
        score = round_score(calculate_score(profile.weights, inputs))
        decision = get_decision(score)
        results.append(
            SimulationResult(
                name=profile.name,
                score=score,
                decision=decision.text,
                color=decision.color,
            )
        )

    logger.debug("simulation_completed", archetypes=len(results))
    return results


def tally_decisions(results: Sequence[SimulationResult]) -> Dict[str, int]:
    """Decision label -> count, labels in first-seen order."""
    counts: Dict[str, int] = {}
    for result in results:
        counts[result.decision] = counts.get(result.decision, 0) + 1
    return counts


def calculate_majority_decision(results: Sequence[SimulationResult]) -> MajorityDecision:
    """
    Plurality decision across a batch of results.

    Examples:
        >>> calculate_majority_decision([])
        MajorityDecision(decision='', color='#6b7280', counts={})
    """
    if not results:
        return MajorityDecision(decision="", color=NEUTRAL_COLOR, counts={})

    counts = tally_decisions(results)
    # max() keeps the first of equal maxima
    winner = max(counts.items(), key=lambda item: item[1])[0]
    color = next(r.color for r in results if r.decision == winner)

    logger.debug("majority_calculated", votes=counts[winner], total=len(results))
    return MajorityDecision(decision=winner, color=color, counts=counts)
