"""
Score Calculator
----------------
Weighted linear confidence score of one weight vector against one input
snapshot.

Formula:
    score = Σ_k weights[k] × inputs[k]     over every factor key k

The score is not bounded by construction: weights may be negative and are
not normalised. With the catalogued weights and inputs in [0, 1] it stays
roughly within [0, 1].
"""
from typing import Mapping, Type, Union

import structlog

from decision_matrix.core.exceptions import ShapeMismatchException
from decision_matrix.models.factors import FactorVector, TeamWeights, Weights

logger = structlog.get_logger(__name__)

VectorLike = Union[FactorVector, Mapping[str, float]]


def _vector_family(*vectors: VectorLike) -> Type[FactorVector]:
    """Vector type plain mappings are checked against: team if either side is team."""
    for vector in vectors:
        if isinstance(vector, TeamWeights):
            return TeamWeights
    return Weights


def _as_vector(values: VectorLike, family: Type[FactorVector]) -> FactorVector:
    if isinstance(values, FactorVector):
        return values
    return family.from_mapping(values)


def calculate_score(weights: VectorLike, inputs: VectorLike) -> float:
    """
    Dot product of weights and inputs over the full factor-key set.

    Args:
        weights: Weights/TeamWeights, or a plain mapping covering the same keys.
        inputs: Inputs/TeamInputs, or a plain mapping covering the same keys.

    Returns:
        Unrounded score.

    Raises:
        ShapeMismatchException: a mapping is missing or adds a factor key, or
            weights and inputs come from different factor variants.

    Examples:
        >>> w = Weights(data_quality=0.2, roi_visibility=0.2, autonomy_scope=0.2,
        ...             time_pressure=0.2, social_complexity=0.1, psychological_safety=0.1)
        >>> i = Inputs(data_quality=0.5, roi_visibility=0.5, autonomy_scope=0.5,
        ...            time_pressure=0.5, social_complexity=0.5, psychological_safety=0.5)
        >>> round(calculate_score(w, i), 6)
        0.5
    """
    family = _vector_family(weights, inputs)
    weights_vec = _as_vector(weights, family)
    inputs_vec = _as_vector(inputs, family)

    weight_keys = weights_vec.factor_keys()
    input_keys = inputs_vec.factor_keys()
    if weight_keys != input_keys:
        raise ShapeMismatchException(
            missing=set(weight_keys) - set(input_keys),
            extra=set(input_keys) - set(weight_keys),
        )

    # Sequential sum in factor order
    total = 0.0
    for key in input_keys:
        total += getattr(weights_vec, key) * getattr(inputs_vec, key)

    logger.debug("score_calculated", factors=len(input_keys), score=total)
    return total
