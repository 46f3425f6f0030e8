"""
Core Package - Decision Matrix
decision_matrix/core/__init__.py

Core infrastructure: exceptions.
"""

from decision_matrix.core.exceptions import (
    ScoringException,
    ShapeMismatchException,
    UnknownArchetypeException,
    UnknownCohortSchemeException,
    UnknownScenarioException,
)

__all__ = [
    "ScoringException",
    "ShapeMismatchException",
    "UnknownArchetypeException",
    "UnknownCohortSchemeException",
    "UnknownScenarioException",
]
