from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class CohortMembership(BaseModel):
    """Where one archetype sits in a cohort scheme."""
    model_config = ConfigDict(frozen=True)

    cohort: str
    color: str = Field(pattern=r"^#[0-9a-fA-F]{6}$")
    traits: List[str]
    role: Optional[str] = None
    characters: List[str] = Field(default_factory=list)


class CohortInfo(BaseModel):
    """Display text for one cohort."""
    model_config = ConfigDict(frozen=True)

    name: str
    color: str = Field(pattern=r"^#[0-9a-fA-F]{6}$")
    description: Optional[str] = None
    motto: Optional[str] = None
    characteristics: List[str] = Field(default_factory=list)
    characters: List[str] = Field(default_factory=list)


class CohortSummary(BaseModel):
    """Simulation results of one cohort rolled up."""
    name: str
    color: str
    count: int = 0
    types: List[str] = Field(default_factory=list)
    decisions: Dict[str, int] = Field(default_factory=dict)
    average_score: float = 0.0
    majority_decision: str = "No decision"
    characters: List[str] = Field(default_factory=list)
