"""
Custom Exceptions - Decision Matrix
decision_matrix/core/exceptions.py

Exception classes raised by the scoring engine and the archetype registry.
"""

from typing import Iterable


class ScoringException(Exception):
    """Base exception for scoring engine operations."""

    pass


class UnknownArchetypeException(ScoringException):
    """Archetype identifier is not part of the MBTI catalog."""

    def __init__(self, archetype: str):
        self.archetype = archetype
        super().__init__(f"Unknown MBTI type: {archetype}")


class ShapeMismatchException(ScoringException):
    """Weights and inputs do not cover the same factor keys."""

    def __init__(self, missing: Iterable[str] = (), extra: Iterable[str] = ()):
        self.missing = sorted(missing)
        self.extra = sorted(extra)
        parts = []
        if self.missing:
            parts.append(f"missing factors: {', '.join(self.missing)}")
        if self.extra:
            parts.append(f"unexpected factors: {', '.join(self.extra)}")
        super().__init__("Factor key mismatch (" + "; ".join(parts) + ")")


class UnknownScenarioException(ScoringException):
    """Preset scenario name not found."""

    def __init__(self, scenario: str):
        self.scenario = scenario
        super().__init__(f"Unknown preset scenario: {scenario}")


class UnknownCohortSchemeException(ScoringException):
    """Cohort grouping scheme not found."""

    def __init__(self, scheme: str):
        self.scheme = scheme
        super().__init__(f"Unknown cohort scheme: {scheme}")
