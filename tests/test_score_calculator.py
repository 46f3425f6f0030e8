# tests/test_score_calculator.py

"""
Score Calculator Tests - weighted linear score and factor-key shape checks
"""

import math

import pytest

from decision_matrix.core.exceptions import ShapeMismatchException
from decision_matrix.models.factors import Inputs, TeamInputs, TeamWeights, Weights
from decision_matrix.scoring.score_calculator import calculate_score
from decision_matrix.scoring.utils import clamp, round_score


class TestCalculateScore:
    """Tests for calculate_score."""

    def test_uniform_weights_half_inputs(self, uniform_weights, half_inputs):
        """0.2/0.1 weights against 0.5 inputs score 0.5."""
        assert calculate_score(uniform_weights, half_inputs) == pytest.approx(0.5)

    def test_equal_sixths(self, half_inputs):
        """Weights of 1/6 each against 0.5 inputs score 0.5."""
        weights = Weights(**{key: 1 / 6 for key in Weights.factor_keys()})
        assert calculate_score(weights, half_inputs) == pytest.approx(0.5)

    def test_extreme_inputs_stay_in_unit_interval(self, uniform_weights):
        """Inputs at 0 and 1 with non-negative weights stay within [0, 1]."""
        inputs = Inputs(
            data_quality=0, roi_visibility=1, autonomy_scope=0,
            time_pressure=1, social_complexity=0, psychological_safety=1,
        )
        score = calculate_score(uniform_weights, inputs)
        assert 0.0 <= score <= 1.0
        assert score == pytest.approx(0.5)

    def test_negative_weight_reduces_score(self):
        """A negative social-complexity weight lowers the score as complexity rises."""
        weights = Weights(
            data_quality=0.3, roi_visibility=0.3, autonomy_scope=0.2,
            time_pressure=0.1, social_complexity=-0.2, psychological_safety=0.1,
        )
        low = Inputs(
            data_quality=0.8, roi_visibility=0.7, autonomy_scope=0.6,
            time_pressure=0.5, social_complexity=0.1, psychological_safety=0.8,
        )
        high = low.model_copy(update={"social_complexity": 0.9})
        assert math.isfinite(calculate_score(weights, high))
        assert calculate_score(weights, high) < calculate_score(weights, low)

    def test_matches_manual_dot_product(self, default_inputs):
        """Score equals the term-by-term sum in factor order."""
        weights = Weights(
            data_quality=0.32, roi_visibility=0.28, autonomy_scope=0.22,
            time_pressure=0.08, social_complexity=-0.12, psychological_safety=0.15,
        )
        expected = 0.0
        for key in Weights.factor_keys():
            expected += weights[key] * default_inputs[key]
        assert calculate_score(weights, default_inputs) == expected

    def test_plain_mappings_accepted(self, uniform_weights):
        """Complete plain mappings are accepted on either side."""
        inputs = {key: 0.5 for key in Weights.factor_keys()}
        assert calculate_score(uniform_weights.as_dict(), inputs) == pytest.approx(0.5)

    def test_out_of_range_mapping_not_rejected(self, uniform_weights):
        """Plain mappings are only shape-checked; the score is not bounded."""
        inputs = {key: 10.0 for key in Weights.factor_keys()}
        assert calculate_score(uniform_weights, inputs) == pytest.approx(10.0)

    def test_team_vectors(self):
        """Five-factor weights and inputs score over five terms."""
        weights = TeamWeights(
            data_quality=0.2, roi_visibility=0.2, autonomy_scope=0.2,
            time_pressure=0.2, social_complexity=0.2,
        )
        inputs = TeamInputs(
            data_quality=0.5, roi_visibility=0.5, autonomy_scope=0.5,
            time_pressure=0.5, social_complexity=0.5,
        )
        assert calculate_score(weights, inputs) == pytest.approx(0.5)


class TestShapeMismatch:
    """Tests for factor-key mismatches."""

    def test_missing_key_in_mapping(self, uniform_weights):
        """A mapping without psychological_safety is rejected, not scored as zero."""
        inputs = {key: 0.5 for key in Weights.factor_keys() if key != "psychological_safety"}
        with pytest.raises(ShapeMismatchException) as exc_info:
            calculate_score(uniform_weights, inputs)
        assert exc_info.value.missing == ["psychological_safety"]
        assert exc_info.value.extra == []

    def test_extra_key_in_mapping(self, uniform_weights):
        """An unknown factor key is rejected."""
        inputs = {key: 0.5 for key in Weights.factor_keys()}
        inputs["budget"] = 0.5
        with pytest.raises(ShapeMismatchException) as exc_info:
            calculate_score(uniform_weights, inputs)
        assert exc_info.value.extra == ["budget"]
        assert "budget" in str(exc_info.value)

    def test_team_weights_with_six_factor_inputs(self, half_inputs):
        """Team weights cannot be scored against six-factor inputs."""
        weights = TeamWeights(
            data_quality=0.2, roi_visibility=0.2, autonomy_scope=0.2,
            time_pressure=0.2, social_complexity=0.2,
        )
        with pytest.raises(ShapeMismatchException) as exc_info:
            calculate_score(weights, half_inputs)
        assert exc_info.value.extra == ["psychological_safety"]

    def test_team_weights_with_six_factor_mapping(self):
        """A six-key mapping against team weights is rejected."""
        weights = TeamWeights(
            data_quality=0.2, roi_visibility=0.2, autonomy_scope=0.2,
            time_pressure=0.2, social_complexity=0.2,
        )
        inputs = {key: 0.5 for key in Weights.factor_keys()}
        with pytest.raises(ShapeMismatchException):
            calculate_score(weights, inputs)


class TestRoundScore:
    """Tests for 3-decimal rounding."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            (0.6675, 0.667),
            (0.0005, 0.001),
            (0.0625, 0.063),
            (-0.0625, -0.063),
            (1.0005, 1.0),
            (0.12345, 0.123),
            (0.87, 0.87),
        ],
    )
    def test_round_half_up_on_exact_binary_value(self, value, expected):
        """Rounding uses the exact binary value, ties away from zero."""
        assert round_score(value) == expected

    def test_clamp(self):
        """clamp bounds a value on both sides."""
        assert clamp(1.5) == 1.0
        assert clamp(-0.5) == 0.0
        assert clamp(0.72, 0.6, 0.95) == 0.72
        assert clamp(0.3, 0.6, 0.95) == 0.6

    @pytest.mark.parametrize("value", [1e25, 6e30, -1e300, 1.7e308])
    def test_large_magnitudes_round_without_error(self, value):
        """Integral floats far beyond 28 significant digits come back unchanged."""
        assert round_score(value) == value

    @pytest.mark.parametrize("value", [float("inf"), float("-inf")])
    def test_overflowed_sums_pass_through(self, value):
        assert round_score(value) == value
