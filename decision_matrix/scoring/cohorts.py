"""
Cohort Grouping
---------------
Rolls per-archetype simulation results up into the cohorts of a scheme
(Hogwarts houses or Dunder Mifflin departments).

Per cohort:
    count           results that belong to it
    decisions       decision label -> count
    average_score   Σ score / count (0.0 for an empty cohort)
    majority        label with the highest count; on a tie the label seen
                    later wins. "No decision" for an empty cohort.

Results whose archetype is not assigned in the scheme are skipped.
"""
from typing import Dict, Sequence, Union

import structlog

from decision_matrix.core.exceptions import UnknownCohortSchemeException
from decision_matrix.mbti.cohorts import COHORT_MEMBERSHIP, COHORT_SCHEMES
from decision_matrix.models.cohort import CohortSummary
from decision_matrix.models.decision import SimulationResult
from decision_matrix.models.enumerations import CohortScheme, MBTIType

logger = structlog.get_logger(__name__)

NO_DECISION = "No decision"


def _resolve_scheme(scheme: Union[str, CohortScheme]) -> CohortScheme:
    if isinstance(scheme, CohortScheme):
        return scheme
    try:
        return CohortScheme(str(scheme).strip().lower())
    except ValueError:
        raise UnknownCohortSchemeException(str(scheme)) from None


def _cohort_majority(decisions: Dict[str, int]) -> str:
    if not decisions:
        return NO_DECISION
    entries = list(decisions.items())
    best = entries[0]
    for entry in entries[1:]:
        best = best if best[1] > entry[1] else entry
    return best[0]


def group_results(
    results: Sequence[SimulationResult],
    scheme: Union[str, CohortScheme],
) -> Dict[str, CohortSummary]:
    """
    Group simulation results by cohort.

    Args:
        results: Per-archetype results (names are MBTI type codes).
        scheme: "houses" or "departments".

    Returns:
        Cohort name -> CohortSummary, every cohort of the scheme present,
        in display order.

    Raises:
        UnknownCohortSchemeException: scheme is not a known cohort scheme.
    """
    resolved = _resolve_scheme(scheme)
    cohorts = COHORT_SCHEMES[resolved]
    membership = COHORT_MEMBERSHIP[resolved]

    summaries = {name: CohortSummary(name=name, color=info.color) for name, info in cohorts.items()}
    totals = {name: 0.0 for name in cohorts}

    skipped = 0
    for result in results:
        try:
            member = membership[MBTIType(result.name)]
        except (ValueError, KeyError):
            skipped += 1
            continue
        summary = summaries[member.cohort]
        summary.count += 1
        summary.types.append(result.name)
        summary.characters.extend(member.characters)
        summary.decisions[result.decision] = summary.decisions.get(result.decision, 0) + 1
        totals[member.cohort] += result.score

    for name, summary in summaries.items():
        if summary.count > 0:
            summary.average_score = totals[name] / summary.count
        summary.majority_decision = _cohort_majority(summary.decisions)

    logger.debug("cohorts_grouped", scheme=resolved.value, results=len(results), skipped=skipped)
    return summaries
