"""
routers/team.py - Team dashboard endpoints (five-factor, three-bucket model)

Endpoints:
  GET  /api/v1/team/factors       - Five factor keys with short display text
  GET  /api/v1/team/scenarios     - Default inputs and the four presets
  GET  /api/v1/team/charts/radar  - Radar rows for the four team archetypes
  POST /api/v1/team/simulations   - Score the four team archetypes

Mounted only when ENABLE_TEAM_DASHBOARD is set.
"""

from typing import Any, Dict, List

import structlog
from fastapi import APIRouter
from pydantic import BaseModel

from decision_matrix.config import settings
from decision_matrix.models.decision import MajorityDecision, SimulationResult
from decision_matrix.models.factors import TEAM_FACTOR_INFO, TeamInputs
from decision_matrix.models.scenarios import (
    TEAM_DEFAULT_INPUTS,
    TEAM_PRESET_DESCRIPTIONS,
    TEAM_PRESET_SCENARIOS,
)
from decision_matrix.routers.simulation import FactorResponse
from decision_matrix.scoring.chart_data import format_team_radar_data
from decision_matrix.scoring.simulation import calculate_majority_decision
from decision_matrix.scoring.team_simulation import calculate_team_results

logger = structlog.get_logger(__name__)

router = APIRouter(prefix=f"{settings.API_V1_PREFIX}/team", tags=["Team Dashboard"])


class TeamPreset(BaseModel):
    name: str
    description: str
    inputs: TeamInputs


class TeamScenariosResponse(BaseModel):
    default_inputs: TeamInputs
    presets: List[TeamPreset]


class TeamSimulationResponse(BaseModel):
    results: List[SimulationResult]
    majority: MajorityDecision


@router.get("/factors", response_model=List[FactorResponse], summary="List team factors")
async def list_team_factors():
    return [
        FactorResponse(key=key.value, **info.model_dump())
        for key, info in TEAM_FACTOR_INFO.items()
    ]


@router.get("/scenarios", response_model=TeamScenariosResponse, summary="Team presets")
async def list_team_scenarios():
    presets = [
        TeamPreset(name=name, description=TEAM_PRESET_DESCRIPTIONS[name], inputs=inputs)
        for name, inputs in TEAM_PRESET_SCENARIOS.items()
    ]
    return TeamScenariosResponse(default_inputs=TEAM_DEFAULT_INPUTS, presets=presets)


@router.get("/charts/radar", summary="Radar chart rows of team archetype weights")
async def team_radar_chart() -> List[Dict[str, Any]]:
    return format_team_radar_data()


@router.post("/simulations", response_model=TeamSimulationResponse, summary="Run a team simulation")
async def run_team_simulation(inputs: TeamInputs):
    results = calculate_team_results(inputs)
    majority = calculate_majority_decision(results)
    logger.info("team_simulation_requested", majority=majority.decision)
    return TeamSimulationResponse(results=results, majority=majority)
