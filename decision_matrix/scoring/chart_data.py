"""
Chart Data
----------
Shapes weights and public-opinion output into the row format the dashboard
charts consume. No scoring happens here.

Radar rows, one per factor:
    {"factor": "Data Quality", "INTJ": 0.32, "INTP": 0.36, ...}

Probability rows, one per decision in PROBABILITY_ORDER:
    {"decision": "Full Speed Ahead", "probability": 0.72, "color": "#22c55e"}
"""
import math
from typing import Any, Dict, List, Optional, Sequence

from pydantic import BaseModel, ConfigDict

from decision_matrix.mbti.registry import get_archetype_profiles, get_descriptions
from decision_matrix.models.archetype import ArchetypeProfile
from decision_matrix.models.decision import PublicOpinionResult
from decision_matrix.models.factors import FACTOR_INFO, TEAM_FACTOR_INFO, Weights
from decision_matrix.scoring.decision_classifier import DECISION_COLORS
from decision_matrix.scoring.public_opinion import PROBABILITY_ORDER, PUBLIC_OPINION_WEIGHTS
from decision_matrix.scoring.team_simulation import TEAM_ARCHETYPES

PUBLIC_OPINION_SERIES = "Public Opinion"


class ArchetypeSimilarity(BaseModel):
    """Archetype whose weights point the same way as a reference vector."""
    model_config = ConfigDict(frozen=True)

    type: str
    similarity: float
    description: str
    color: str


def format_radar_data(
    profiles: Optional[Sequence[ArchetypeProfile]] = None,
    public_weights: Optional[Weights] = None,
) -> List[Dict[str, Any]]:
    """
    One radar row per factor with every archetype's weight on that factor.

    Args:
        profiles: Archetypes to plot; defaults to the sixteen-type registry.
        public_weights: When given, each row also carries a "Public Opinion"
            series with these weights.
    """
    if profiles is None:
        profiles = get_archetype_profiles()

    rows = []
    for key, info in FACTOR_INFO.items():
        row: Dict[str, Any] = {"factor": info.label}
        for profile in profiles:
            row[profile.name] = profile.weights[key]
        if public_weights is not None:
            row[PUBLIC_OPINION_SERIES] = public_weights[key]
        rows.append(row)
    return rows


def format_team_radar_data() -> List[Dict[str, Any]]:
    """Radar rows for the four team archetypes on the five-factor model."""
    rows = []
    for key, info in TEAM_FACTOR_INFO.items():
        row: Dict[str, Any] = {"factor": info.label}
        for archetype in TEAM_ARCHETYPES:
            row[archetype.name] = archetype.weights[key]
        rows.append(row)
    return rows


def format_probability_series(public_opinion: PublicOpinionResult) -> List[Dict[str, Any]]:
    """Bar-chart rows for the public-opinion distribution, coloured per decision."""
    return [
        {
            "decision": label.value,
            "probability": public_opinion.probabilities[label.value],
            "color": DECISION_COLORS[label.value],
        }
        for label in PROBABILITY_ORDER
    ]


def _cosine_similarity(a: Sequence[float], b: Sequence[float]) -> float:
    dot = 0.0
    norm_a = 0.0
    norm_b = 0.0
    for x, y in zip(a, b):
        dot += x * y
        norm_a += x * x
        norm_b += y * y
    if norm_a == 0 or norm_b == 0:
        return 0.0
    return dot / (math.sqrt(norm_a) * math.sqrt(norm_b))


def find_most_similar_archetype(
    weights: Weights = PUBLIC_OPINION_WEIGHTS,
    profiles: Optional[Sequence[ArchetypeProfile]] = None,
) -> ArchetypeSimilarity:
    """
    Archetype with the highest cosine similarity to `weights`.

    The first archetype wins a tie. With no profiles the result is empty
    with similarity 0.
    """
    if profiles is None:
        profiles = get_archetype_profiles()
    if not profiles:
        return ArchetypeSimilarity(type="", similarity=0.0, description="", color="")

    descriptions = get_descriptions()
    reference = [value for _, value in weights.items()]

    best: Optional[ArchetypeSimilarity] = None
    for profile in profiles:
        candidate = [profile.weights[key] for key, _ in weights.items()]
        similarity = _cosine_similarity(candidate, reference)
        if best is None or similarity > best.similarity:
            description = descriptions.get(profile.name)
            best = ArchetypeSimilarity(
                type=profile.name,
                similarity=similarity,
                description=description.name if description else profile.name,
                color=description.color if description else "",
            )
    return best
