# tests/test_property_based.py
"""
Property-Based Tests

Hypothesis tests with max_examples=500, covering:
  - score calculator bounds, scaling and determinism
  - classifier totality and monotonicity
  - public-opinion distribution normalisation and argmax
  - majority and cohort tallies
"""

import math

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from decision_matrix.mbti.registry import get_archetype_profiles
from decision_matrix.models.enumerations import DecisionLabel
from decision_matrix.models.factors import Inputs, Weights
from decision_matrix.scoring.cohorts import group_results
from decision_matrix.scoring.decision_classifier import get_decision, get_team_decision
from decision_matrix.scoring.public_opinion import (
    calculate_public_opinion,
    get_public_probabilities,
    get_representative_color,
    most_likely_decision,
)
from decision_matrix.scoring.score_calculator import calculate_score
from decision_matrix.scoring.simulation import calculate_majority_decision, calculate_results
from decision_matrix.scoring.utils import round_score

# ---------------------------------------------------------------------------
# Shared strategies
# ---------------------------------------------------------------------------

FACTOR_KEYS = Weights.factor_keys()
LABEL_ORDER = [label.value for label in DecisionLabel]

unit_st = st.floats(min_value=0.0, max_value=1.0, allow_nan=False, allow_infinity=False)
weight_st = st.floats(min_value=-1.0, max_value=1.0, allow_nan=False, allow_infinity=False)
score_st = st.floats(min_value=-1e6, max_value=1e6, allow_nan=False, allow_infinity=False)


@st.composite
def inputs_st(draw):
    """Draw a complete Inputs record with every factor in [0, 1]."""
    return Inputs(**{key: draw(unit_st) for key in FACTOR_KEYS})


@st.composite
def weights_st(draw):
    return Weights(**{key: draw(weight_st) for key in FACTOR_KEYS})


# ---------------------------------------------------------------------------
# Score calculator
# ---------------------------------------------------------------------------

@given(weights=weights_st(), inputs=inputs_st())
@settings(max_examples=500)
def test_score_bounded_by_weight_magnitude(weights, inputs):
    """|score| never exceeds Σ|w| when inputs are in [0, 1]."""
    bound = sum(abs(w) for _, w in weights.items())
    assert abs(calculate_score(weights, inputs)) <= bound + 1e-9


@given(weights=weights_st(), inputs=inputs_st())
@settings(max_examples=500)
def test_score_scales_with_weights(weights, inputs):
    """Doubling every weight doubles the score."""
    doubled = Weights(**{key: 2 * value for key, value in weights.items()})
    assert calculate_score(doubled, inputs) == pytest.approx(2 * calculate_score(weights, inputs), abs=1e-9)


@given(inputs=inputs_st())
@settings(max_examples=500)
def test_simulation_deterministic(inputs):
    """The same inputs always give identical results."""
    assert calculate_results(inputs) == calculate_results(inputs)


@given(inputs=inputs_st())
@settings(max_examples=500)
def test_mapping_and_record_agree(inputs):
    """Scoring a plain mapping equals scoring the record it came from."""
    for profile in get_archetype_profiles():
        assert calculate_score(profile.weights, inputs.as_dict()) == calculate_score(profile.weights, inputs)


@given(value=score_st)
@settings(max_examples=500)
def test_round_score_within_half_unit(value):
    assert abs(round_score(value) - value) <= 0.0005 + 1e-9 * max(1.0, abs(value))


@given(value=st.floats(allow_nan=False, allow_infinity=False))
@settings(max_examples=500)
def test_round_score_total_over_finite_floats(value):
    """Any finite float rounds to a finite float, however large."""
    rounded = round_score(value)
    assert math.isfinite(rounded)
    assert abs(rounded - value) <= 0.0005 + 1e-15 * abs(value)


# ---------------------------------------------------------------------------
# Classifier
# ---------------------------------------------------------------------------

@given(a=score_st, b=score_st)
@settings(max_examples=500)
def test_classifier_monotone(a, b):
    """A higher score never gets a less confident decision."""
    low, high = sorted((a, b))
    assert LABEL_ORDER.index(get_decision(high).text) <= LABEL_ORDER.index(get_decision(low).text)


@given(a=score_st, b=score_st)
@settings(max_examples=500)
def test_team_classifier_monotone(a, b):
    low, high = sorted((a, b))
    assert LABEL_ORDER.index(get_team_decision(high).text) <= LABEL_ORDER.index(get_team_decision(low).text)


# ---------------------------------------------------------------------------
# Public opinion
# ---------------------------------------------------------------------------

@given(score=score_st)
@settings(max_examples=500)
def test_probabilities_normalised(score):
    """Every value in [0, 1], five labels, total 1 within rounding."""
    probs = get_public_probabilities(score)
    assert list(probs) == LABEL_ORDER
    assert all(0.0 <= p <= 1.0 for p in probs.values())
    assert sum(probs.values()) == pytest.approx(1.0, abs=5e-3)


@given(inputs=inputs_st())
@settings(max_examples=500)
def test_public_opinion_argmax(inputs):
    """most_likely carries the highest probability and its representative colour."""
    result = calculate_public_opinion(inputs)
    assert result.probabilities[result.most_likely] == max(result.probabilities.values())
    assert result.most_likely == most_likely_decision(result.probabilities)
    assert result.color == get_representative_color(result.most_likely)


# ---------------------------------------------------------------------------
# Majority and cohorts
# ---------------------------------------------------------------------------

@given(inputs=inputs_st())
@settings(max_examples=500)
def test_majority_counts_total(inputs):
    """Majority counts add up to the sixteen results, and the winner has the top count."""
    majority = calculate_majority_decision(calculate_results(inputs))
    assert sum(majority.counts.values()) == 16
    assert majority.counts[majority.decision] == max(majority.counts.values())


@given(inputs=inputs_st(), scheme=st.sampled_from(["houses", "departments"]))
@settings(max_examples=500)
def test_cohorts_partition_results(inputs, scheme):
    """Every archetype lands in exactly one cohort."""
    groups = group_results(calculate_results(inputs), scheme)
    types = [t for summary in groups.values() for t in summary.types]
    assert sorted(types) == sorted(p.name for p in get_archetype_profiles())
