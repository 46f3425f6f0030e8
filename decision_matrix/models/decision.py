from typing import Dict

from pydantic import BaseModel, ConfigDict, Field


class Decision(BaseModel):
    """A decision bucket: display label plus its colour."""
    model_config = ConfigDict(frozen=True)

    text: str
    color: str = Field(pattern=r"^#[0-9a-fA-F]{6}$")


class SimulationResult(BaseModel):
    """Score and decision of one archetype for one Inputs snapshot."""
    model_config = ConfigDict(frozen=True)

    name: str
    score: float
    decision: str
    color: str  # colour of the decision bucket, not of the archetype


class PublicOpinionResult(BaseModel):
    """Public-opinion composite: score, distribution over decisions, argmax."""
    model_config = ConfigDict(frozen=True)

    score: float
    probabilities: Dict[str, float]
    most_likely: str
    color: str


class MajorityDecision(BaseModel):
    """Plurality decision across a batch of simulation results."""
    model_config = ConfigDict(frozen=True)

    decision: str
    color: str
    counts: Dict[str, int] = Field(default_factory=dict)
