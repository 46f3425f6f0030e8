"""
Preset Scenarios - Decision Matrix
decision_matrix/models/scenarios.py

Default slider positions and one-click preset scenarios for both the
six-factor dashboard and the five-factor team dashboard. Every preset is a
complete, validated Inputs record.
"""

from typing import Dict, List

from pydantic import BaseModel, ConfigDict

from decision_matrix.core.exceptions import UnknownScenarioException
from decision_matrix.models.factors import Inputs, TeamInputs


class PresetScenario(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    description: str
    category: str
    inputs: Inputs


# =============================================================================
# SIX-FACTOR DASHBOARD
# =============================================================================

DEFAULT_INPUTS = Inputs(
    data_quality=0.8,
    roi_visibility=0.6,
    autonomy_scope=0.7,
    time_pressure=0.3,
    social_complexity=0.2,
    psychological_safety=0.6,
)

PRESET_SCENARIOS: Dict[str, Inputs] = {
    "Buying a Car": Inputs(
        data_quality=0.8, roi_visibility=0.7, autonomy_scope=0.6,
        time_pressure=0.4, social_complexity=0.3, psychological_safety=0.2,
    ),
    "Moving to a New City": Inputs(
        data_quality=0.6, roi_visibility=0.5, autonomy_scope=0.8,
        time_pressure=0.4, social_complexity=0.7, psychological_safety=0.5,
    ),
    "Starting a Side Hustle": Inputs(
        data_quality=0.7, roi_visibility=0.6, autonomy_scope=0.9,
        time_pressure=0.3, social_complexity=0.5, psychological_safety=0.4,
    ),
    "Home Renovation": Inputs(
        data_quality=0.8, roi_visibility=0.7, autonomy_scope=0.5,
        time_pressure=0.4, social_complexity=0.6, psychological_safety=0.3,
    ),
    "Career Development": Inputs(
        data_quality=0.7, roi_visibility=0.8, autonomy_scope=0.6,
        time_pressure=0.5, social_complexity=0.4, psychological_safety=0.7,
    ),
    "Major Purchase": Inputs(
        data_quality=0.8, roi_visibility=0.7, autonomy_scope=0.4,
        time_pressure=0.3, social_complexity=0.2, psychological_safety=0.1,
    ),
    "Health & Fitness": Inputs(
        data_quality=0.6, roi_visibility=0.5, autonomy_scope=0.9,
        time_pressure=0.4, social_complexity=0.3, psychological_safety=0.6,
    ),
    "Relationship Decision": Inputs(
        data_quality=0.5, roi_visibility=0.4, autonomy_scope=0.7,
        time_pressure=0.6, social_complexity=0.8, psychological_safety=0.9,
    ),
}

PRESET_DESCRIPTIONS: Dict[str, str] = {
    "Buying a Car": (
        "Deciding whether to purchase a new or used car, considering budget, needs, "
        "and long-term value"
    ),
    "Moving to a New City": (
        "Evaluating a potential move, weighing job opportunities, cost of living, "
        "and quality of life"
    ),
    "Starting a Side Hustle": (
        "Assessing the viability of starting a part-time business or freelance work"
    ),
    "Home Renovation": (
        "Planning home improvements, balancing budget, functionality, and aesthetic goals"
    ),
    "Career Development": (
        "Choosing between different professional development paths or educational "
        "opportunities"
    ),
    "Major Purchase": (
        "Making a significant financial decision like buying electronics, furniture, "
        "or appliances"
    ),
    "Health & Fitness": "Deciding on a new health routine, diet plan, or fitness program",
    "Relationship Decision": "Navigating important relationship choices or commitments",
}

PRESET_CATEGORIES: Dict[str, List[str]] = {
    "Career Choices": [
        "Moving to a New City",
        "Career Development",
        "Starting a Side Hustle",
    ],
    "Financial Decisions": [
        "Buying a Car",
        "Major Purchase",
        "Home Renovation",
    ],
    "Personal Growth": ["Health & Fitness"],
    "Relationships": ["Relationship Decision"],
}

PRESET_CATEGORY_DESCRIPTIONS: Dict[str, str] = {
    "Career Choices": "Explore options related to jobs and professional moves.",
    "Financial Decisions": "Evaluate significant purchases and investments.",
    "Personal Growth": "Focus on health, wellness, and self-improvement.",
    "Relationships": "Considerations for important relationships.",
}


def get_preset_category(name: str) -> str:
    """Category a preset belongs to."""
    for category, names in PRESET_CATEGORIES.items():
        if name in names:
            return category
    raise UnknownScenarioException(name)


def get_preset_scenario(name: str) -> PresetScenario:
    """
    Look up a preset by its display name.

    Raises:
        UnknownScenarioException: name is not one of PRESET_SCENARIOS.
    """
    inputs = PRESET_SCENARIOS.get(name)
    if inputs is None:
        raise UnknownScenarioException(name)
    return PresetScenario(
        name=name,
        description=PRESET_DESCRIPTIONS[name],
        category=get_preset_category(name),
        inputs=inputs,
    )


def list_preset_scenarios() -> List[PresetScenario]:
    return [get_preset_scenario(name) for name in PRESET_SCENARIOS]


# =============================================================================
# FIVE-FACTOR TEAM DASHBOARD
# =============================================================================

TEAM_DEFAULT_INPUTS = TeamInputs(
    data_quality=0.8,
    roi_visibility=0.6,
    autonomy_scope=0.7,
    time_pressure=0.3,
    social_complexity=0.2,
)

TEAM_PRESET_SCENARIOS: Dict[str, TeamInputs] = {
    "High Quality Data": TeamInputs(
        data_quality=0.9, roi_visibility=0.6, autonomy_scope=0.7,
        time_pressure=0.3, social_complexity=0.2,
    ),
    "Time Critical": TeamInputs(
        data_quality=0.6, roi_visibility=0.5, autonomy_scope=0.4,
        time_pressure=0.9, social_complexity=0.3,
    ),
    "Limited Information": TeamInputs(
        data_quality=0.3, roi_visibility=0.4, autonomy_scope=0.5,
        time_pressure=0.6, social_complexity=0.4,
    ),
    "Complex Stakeholders": TeamInputs(
        data_quality=0.5, roi_visibility=0.6, autonomy_scope=0.4,
        time_pressure=0.2, social_complexity=0.8,
    ),
}

TEAM_PRESET_DESCRIPTIONS: Dict[str, str] = {
    "High Quality Data": "Scenario with reliable, complete data and clear metrics for evaluation",
    "Time Critical": "Urgent decision needed with significant time pressure and immediate impact",
    "Limited Information": (
        "Decision context with incomplete or uncertain data and unclear outcomes"
    ),
    "Complex Stakeholders": (
        "Multiple stakeholders involved with diverse and potentially conflicting interests"
    ),
}
