# tests/conftest.py

"""
Pytest Fixtures - Shared inputs, weights and the API client

REFERENCE INPUTS:
- default_inputs: the dashboard's initial slider positions (0.8, 0.6, 0.7, 0.3, 0.2, 0.6)
- half_inputs:    every factor at 0.5
- full_public_inputs: the end-to-end public-opinion scenario (1, 1, 0, 1, 0, 1)
"""

import pytest
from fastapi.testclient import TestClient

from decision_matrix.main import app
from decision_matrix.models.decision import SimulationResult
from decision_matrix.models.factors import Inputs, TeamInputs, Weights
from decision_matrix.models.scenarios import DEFAULT_INPUTS, TEAM_DEFAULT_INPUTS


# =============================================================================
# FASTAPI TEST CLIENT FIXTURE
# =============================================================================

@pytest.fixture(scope="module")
def client():
    """Create a TestClient for FastAPI application."""
    with TestClient(app) as test_client:
        yield test_client


# =============================================================================
# INPUT FIXTURES
# =============================================================================

@pytest.fixture
def default_inputs():
    """Initial slider positions of the six-factor dashboard."""
    return DEFAULT_INPUTS


@pytest.fixture
def default_inputs_payload():
    """Default inputs as a JSON request body."""
    return DEFAULT_INPUTS.model_dump()


@pytest.fixture
def half_inputs():
    """Every factor at 0.5."""
    return Inputs(
        data_quality=0.5,
        roi_visibility=0.5,
        autonomy_scope=0.5,
        time_pressure=0.5,
        social_complexity=0.5,
        psychological_safety=0.5,
    )


@pytest.fixture
def full_public_inputs():
    """Inputs of the end-to-end public-opinion scenario."""
    return Inputs(
        data_quality=1,
        roi_visibility=1,
        autonomy_scope=0,
        time_pressure=1,
        social_complexity=0,
        psychological_safety=1,
    )


@pytest.fixture
def team_default_inputs():
    """Initial slider positions of the five-factor team dashboard."""
    return TEAM_DEFAULT_INPUTS


@pytest.fixture
def team_inputs_payload():
    return TeamInputs(
        data_quality=0.6,
        roi_visibility=0.5,
        autonomy_scope=0.4,
        time_pressure=0.9,
        social_complexity=0.3,
    ).model_dump()


# =============================================================================
# WEIGHT FIXTURES
# =============================================================================

@pytest.fixture
def uniform_weights():
    """0.2 on four factors, 0.1 on the last two."""
    return Weights(
        data_quality=0.2,
        roi_visibility=0.2,
        autonomy_scope=0.2,
        time_pressure=0.2,
        social_complexity=0.1,
        psychological_safety=0.1,
    )


# =============================================================================
# RESULT FIXTURES
# =============================================================================

@pytest.fixture
def sample_results():
    """Three results, two of them Proceed Strategically."""
    return [
        SimulationResult(name="A", score=0.8, decision="Proceed Strategically", color="#4ade80"),
        SimulationResult(name="B", score=0.82, decision="Proceed Strategically", color="#4ade80"),
        SimulationResult(name="C", score=0.45, decision="Request Clarification", color="#facc15"),
    ]
