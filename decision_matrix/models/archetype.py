from typing import Dict, List

from pydantic import BaseModel, ConfigDict, Field

from decision_matrix.models.enumerations import FactorKey
from decision_matrix.models.factors import TeamWeights, Weights


class ArchetypeProfile(BaseModel):
    """Name plus six-factor weights of one archetype."""
    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1)
    weights: Weights


class TeamArchetypeProfile(BaseModel):
    """Archetype profile on the five-factor team model."""
    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1)
    weights: TeamWeights


class ScientificFactors(BaseModel):
    model_config = ConfigDict(frozen=True)

    key_traits: List[str]
    decision_process: str
    strengths: List[str]
    challenges: List[str]
    historical_context: str
    # Not every archetype has a write-up for every factor
    factor_responses: Dict[FactorKey, str] = Field(default_factory=dict)
    research_insight: str


class MBTIDescription(BaseModel):
    """Descriptive text and chart colour of one archetype."""
    model_config = ConfigDict(frozen=True)

    name: str
    description: str
    color: str = Field(
        ...,
        pattern=r"^#[0-9a-fA-F]{6}$",
        description="Colour used for every chart encoding of the archetype",
    )
    scientific_factors: ScientificFactors
