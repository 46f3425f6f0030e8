"""
routers/simulation.py - Decision Matrix endpoints (six-factor dashboard)

Endpoints:
  GET  /api/v1/factors                            - Factor keys with display text
  GET  /api/v1/scenarios                          - Default inputs, presets, categories
  GET  /api/v1/scenarios/{name}                   - One preset scenario
  GET  /api/v1/archetypes                         - Ordered archetype profiles
  GET  /api/v1/archetypes/{mbti_type}             - Profile, description, famous people
  GET  /api/v1/charts/radar                       - Radar chart rows
  POST /api/v1/simulations                        - Run all archetypes + public opinion
  POST /api/v1/simulations/cohorts/{scheme}       - Results grouped by house / department
  GET  /api/v1/public-opinion/probabilities       - Distribution for a public score
  GET  /api/v1/public-opinion/closest-archetype   - Archetype most like the public weights
"""

from typing import Any, Dict, List

import structlog
from fastapi import APIRouter, Query
from pydantic import BaseModel

from decision_matrix.config import settings
from decision_matrix.mbti.registry import create, get_archetype_profiles, get_descriptions, get_famous_people
from decision_matrix.models.archetype import MBTIDescription
from decision_matrix.models.cohort import CohortSummary
from decision_matrix.models.decision import MajorityDecision, PublicOpinionResult, SimulationResult
from decision_matrix.models.factors import FACTOR_INFO, Inputs, Weights
from decision_matrix.models.scenarios import (
    DEFAULT_INPUTS,
    PRESET_CATEGORIES,
    PRESET_CATEGORY_DESCRIPTIONS,
    PresetScenario,
    get_preset_scenario,
    list_preset_scenarios,
)
from decision_matrix.scoring.chart_data import (
    ArchetypeSimilarity,
    find_most_similar_archetype,
    format_probability_series,
    format_radar_data,
)
from decision_matrix.scoring.cohorts import group_results
from decision_matrix.scoring.public_opinion import (
    PUBLIC_OPINION_WEIGHTS,
    calculate_public_opinion,
    get_public_probabilities,
    most_likely_decision,
)
from decision_matrix.scoring.simulation import calculate_majority_decision, calculate_results

logger = structlog.get_logger(__name__)

router = APIRouter(prefix=settings.API_V1_PREFIX, tags=["Decision Matrix"])


# =====================================================================
# Response Models
# =====================================================================

class FactorResponse(BaseModel):
    key: str
    label: str
    description: str
    low_desc: str
    high_desc: str


class PresetCategory(BaseModel):
    name: str
    description: str
    presets: List[str]


class ScenariosResponse(BaseModel):
    default_inputs: Inputs
    presets: List[PresetScenario]
    categories: List[PresetCategory]


class ArchetypeSummary(BaseModel):
    name: str
    weights: Weights
    color: str


class ArchetypeDetail(ArchetypeSummary):
    description: MBTIDescription
    famous_people: List[str]


class SimulationResponse(BaseModel):
    results: List[SimulationResult]
    majority: MajorityDecision
    public_opinion: PublicOpinionResult
    probability_series: List[Dict[str, Any]]


class CohortResponse(BaseModel):
    scheme: str
    cohorts: List[CohortSummary]


class ProbabilitiesResponse(BaseModel):
    score: float
    probabilities: Dict[str, float]
    most_likely: str


# =====================================================================
# Catalog
# =====================================================================

@router.get("/factors", response_model=List[FactorResponse], summary="List decision factors")
async def list_factors():
    return [
        FactorResponse(key=key.value, **info.model_dump())
        for key, info in FACTOR_INFO.items()
    ]


@router.get("/scenarios", response_model=ScenariosResponse, summary="Default inputs and preset scenarios")
async def list_scenarios():
    categories = [
        PresetCategory(name=name, description=PRESET_CATEGORY_DESCRIPTIONS[name], presets=presets)
        for name, presets in PRESET_CATEGORIES.items()
    ]
    return ScenariosResponse(
        default_inputs=DEFAULT_INPUTS,
        presets=list_preset_scenarios(),
        categories=categories,
    )


@router.get("/scenarios/{name}", response_model=PresetScenario, summary="Get one preset scenario")
async def get_scenario(name: str):
    return get_preset_scenario(name)


@router.get("/archetypes", response_model=List[ArchetypeSummary], summary="List archetype profiles")
async def list_archetypes():
    descriptions = get_descriptions()
    return [
        ArchetypeSummary(name=p.name, weights=p.weights, color=descriptions[p.name].color)
        for p in get_archetype_profiles()
    ]


@router.get("/archetypes/{mbti_type}", response_model=ArchetypeDetail, summary="Get one archetype")
async def get_archetype(mbti_type: str):
    archetype = create(mbti_type)
    return ArchetypeDetail(
        name=archetype.name,
        weights=archetype.weights,
        color=archetype.description.color,
        description=archetype.description,
        famous_people=get_famous_people(archetype.mbti_type),
    )


@router.get("/charts/radar", summary="Radar chart rows of archetype weights")
async def radar_chart(
    include_public: bool = Query(False, description="Add a 'Public Opinion' series"),
) -> List[Dict[str, Any]]:
    return format_radar_data(public_weights=PUBLIC_OPINION_WEIGHTS if include_public else None)


# =====================================================================
# Simulation
# =====================================================================

@router.post("/simulations", response_model=SimulationResponse, summary="Run a decision simulation")
async def run_simulation(inputs: Inputs):
    results = calculate_results(inputs)
    majority = calculate_majority_decision(results)
    public_opinion = calculate_public_opinion(inputs)

    logger.info(
        "simulation_requested",
        majority=majority.decision,
        public_most_likely=public_opinion.most_likely,
    )
    return SimulationResponse(
        results=results,
        majority=majority,
        public_opinion=public_opinion,
        probability_series=format_probability_series(public_opinion),
    )


@router.post(
    "/simulations/cohorts/{scheme}",
    response_model=CohortResponse,
    summary="Run a simulation and group results by cohort",
)
async def run_cohort_simulation(scheme: str, inputs: Inputs):
    groups = group_results(calculate_results(inputs), scheme)
    logger.info("cohort_simulation_requested", scheme=scheme, cohorts=len(groups))
    return CohortResponse(scheme=scheme.strip().lower(), cohorts=list(groups.values()))


# =====================================================================
# Public Opinion
# =====================================================================

@router.get(
    "/public-opinion/probabilities",
    response_model=ProbabilitiesResponse,
    summary="Decision distribution for a public-opinion score",
)
async def public_probabilities(
    score: float = Query(..., allow_inf_nan=False, description="Public-opinion score"),
):
    probabilities = get_public_probabilities(score)
    return ProbabilitiesResponse(
        score=score,
        probabilities=probabilities,
        most_likely=most_likely_decision(probabilities),
    )


@router.get(
    "/public-opinion/closest-archetype",
    response_model=ArchetypeSimilarity,
    summary="Archetype whose weights are most similar to the public's",
)
async def closest_archetype():
    return find_most_similar_archetype(PUBLIC_OPINION_WEIGHTS)
