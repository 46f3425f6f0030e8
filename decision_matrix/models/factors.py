"""
Factor Models - Decision Matrix
decision_matrix/models/factors.py

Fixed-field factor vectors and the factor metadata shown next to the sliders.

Weights and Inputs are records, not dicts: every factor key is a declared
field, so a vector can never be built with a key missing. Plain mappings are
converted with ``from_mapping``, which raises ShapeMismatchException instead of
letting a missing key drop out of the dot product.
"""

from enum import Enum
from typing import Dict, Iterator, List, Mapping, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field

from decision_matrix.core.exceptions import ShapeMismatchException
from decision_matrix.models.enumerations import FactorKey, TeamFactorKey


def _key_name(key: Union[str, Enum]) -> str:
    return key.value if isinstance(key, Enum) else str(key)


class FactorVector(BaseModel):
    """Base for complete, immutable factor-key -> number records."""

    model_config = ConfigDict(frozen=True, extra="forbid", allow_inf_nan=False)

    @classmethod
    def factor_keys(cls) -> List[str]:
        """Factor keys in declaration order (the order scores are summed in)."""
        return list(cls.model_fields)

    @classmethod
    def from_mapping(cls, values: Mapping[Union[str, Enum], float]):
        """Build a vector from a plain mapping, rejecting missing or extra keys."""
        named = {_key_name(k): v for k, v in values.items()}
        expected = set(cls.factor_keys())
        missing = expected - set(named)
        extra = set(named) - expected
        if missing or extra:
            raise ShapeMismatchException(missing=missing, extra=extra)
        return cls(**named)

    def __getitem__(self, key: Union[str, Enum]) -> float:
        name = _key_name(key)
        if name not in type(self).model_fields:
            raise KeyError(name)
        return getattr(self, name)

    def items(self) -> Iterator[Tuple[str, float]]:
        for name in self.factor_keys():
            yield name, getattr(self, name)

    def as_dict(self) -> Dict[str, float]:
        return dict(self.items())


class Weights(FactorVector):
    """Six-factor weight vector. Sign gives direction, magnitude gives influence."""
    data_quality: float
    roi_visibility: float
    autonomy_scope: float
    time_pressure: float
    social_complexity: float
    psychological_safety: float


class Inputs(Weights):
    """Six-factor scenario inputs, each normalised to [0, 1]."""
    data_quality: float = Field(ge=0, le=1)
    roi_visibility: float = Field(ge=0, le=1)
    autonomy_scope: float = Field(ge=0, le=1)
    time_pressure: float = Field(ge=0, le=1)
    social_complexity: float = Field(ge=0, le=1)
    psychological_safety: float = Field(ge=0, le=1)


class TeamWeights(FactorVector):
    """Five-factor weight vector used by the team dashboard."""
    data_quality: float
    roi_visibility: float
    autonomy_scope: float
    time_pressure: float
    social_complexity: float


class TeamInputs(TeamWeights):
    data_quality: float = Field(ge=0, le=1)
    roi_visibility: float = Field(ge=0, le=1)
    autonomy_scope: float = Field(ge=0, le=1)
    time_pressure: float = Field(ge=0, le=1)
    social_complexity: float = Field(ge=0, le=1)


class FactorInfo(BaseModel):
    """Display text for one factor. Carries no computational weight."""
    model_config = ConfigDict(frozen=True)

    label: str
    description: str
    low_desc: str
    high_desc: str


FACTOR_INFO: Dict[FactorKey, FactorInfo] = {
    FactorKey.DATA_QUALITY: FactorInfo(
        label="Data Quality",
        description=(
            "How reliable, complete, and accurate is the available information? Research shows "
            "data quality significantly impacts decision confidence and outcomes."
        ),
        low_desc="Unreliable, incomplete, or dubious data sources",
        high_desc="Complete, verified, and trustworthy data with clear provenance",
    ),
    FactorKey.ROI_VISIBILITY: FactorInfo(
        label="ROI Visibility",
        description=(
            "How clear and measurable are the expected returns? Behavioral economics research "
            "emphasizes the importance of clear outcome metrics."
        ),
        low_desc="Unclear benefits, hard to measure outcomes",
        high_desc="Clear, quantifiable returns with specific success metrics",
    ),
    FactorKey.AUTONOMY_SCOPE: FactorInfo(
        label="Autonomy & Scope",
        description=(
            "How much control will you have over execution? Self-determination theory shows "
            "autonomy is crucial for motivation and decision quality."
        ),
        low_desc="Dependent on others with limited control over implementation",
        high_desc="Full authority within well-defined boundaries and clear accountability",
    ),
    FactorKey.TIME_PRESSURE: FactorInfo(
        label="Time Pressure",
        description=(
            "How urgent is this decision? Research on decision-making under pressure shows "
            "varying impacts across personality types and complexity levels."
        ),
        low_desc="Plenty of time for deliberation, minimal urgency",
        high_desc="Immediate decision required, high time pressure",
    ),
    FactorKey.SOCIAL_COMPLEXITY: FactorInfo(
        label="Social Complexity",
        description=(
            "How many stakeholders are involved and how aligned are they? Team dynamics "
            "research shows stakeholder alignment significantly affects implementation success."
        ),
        low_desc="Few stakeholders with aligned interests and clear communication",
        high_desc="Many stakeholders with conflicting agendas and complex dynamics",
    ),
    FactorKey.PSYCHOLOGICAL_SAFETY: FactorInfo(
        label="Psychological Safety",
        description=(
            "Can team members express concerns and ideas without fear of negative consequences? "
            "Google's Project Aristotle identified this as the top factor for team effectiveness."
        ),
        low_desc="Low trust environment, fear of speaking up or making mistakes",
        high_desc="High trust environment where diverse perspectives are welcomed and valued",
    ),
}

# Shorter tooltip text used by the team dashboard
TEAM_FACTOR_INFO: Dict[TeamFactorKey, FactorInfo] = {
    TeamFactorKey.DATA_QUALITY: FactorInfo(
        label="Data Quality",
        description="How reliable, complete, and accurate is the available information?",
        low_desc="Unreliable, incomplete, or dubious data",
        high_desc="Complete, verified, and trustworthy data",
    ),
    TeamFactorKey.ROI_VISIBILITY: FactorInfo(
        label="ROI Visibility",
        description="How clear and measurable are the expected returns?",
        low_desc="Unclear benefits, hard to measure outcomes",
        high_desc="Clear, quantifiable returns with specific metrics",
    ),
    TeamFactorKey.AUTONOMY_SCOPE: FactorInfo(
        label="Autonomy & Scope",
        description="How much control will you have over execution?",
        low_desc="Dependent on others with limited control",
        high_desc="Full authority within well-defined boundaries",
    ),
    TeamFactorKey.TIME_PRESSURE: FactorInfo(
        label="Time Pressure",
        description="How urgent is this decision?",
        low_desc="Plenty of time, minimal urgency",
        high_desc="Immediate decision required, high urgency",
    ),
    TeamFactorKey.SOCIAL_COMPLEXITY: FactorInfo(
        label="Social Complexity",
        description="How many stakeholders are involved and how aligned are they?",
        low_desc="Few stakeholders with aligned interests",
        high_desc="Many stakeholders with conflicting agendas",
    ),
}
