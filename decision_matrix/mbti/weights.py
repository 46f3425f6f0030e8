"""
mbti/weights.py - archetype decision weights

One six-factor weight vector per MBTI type, in catalog order.

ENTP, INFJ, ENFJ, ENFP, ESTJ, ESFJ and ESTP were profiled on the five-factor
model and have no psychological-safety weight of their own; they carry an
explicit 0.0 so their score equals their five-factor dot product.
"""
from typing import Dict

from decision_matrix.models.enumerations import MBTIType
from decision_matrix.models.factors import Weights

ARCHETYPE_WEIGHTS: Dict[MBTIType, Weights] = {
    MBTIType.INTJ: Weights(
        data_quality=0.32, roi_visibility=0.28, autonomy_scope=0.22,
        time_pressure=0.08, social_complexity=-0.12, psychological_safety=0.15,
    ),
    MBTIType.INTP: Weights(
        data_quality=0.36, roi_visibility=0.14, autonomy_scope=0.22,
        time_pressure=0.06, social_complexity=-0.08, psychological_safety=0.18,
    ),
    MBTIType.ENTJ: Weights(
        data_quality=0.24, roi_visibility=0.34, autonomy_scope=0.22,
        time_pressure=0.14, social_complexity=-0.04, psychological_safety=0.16,
    ),
    MBTIType.ENTP: Weights(
        data_quality=0.25, roi_visibility=0.2, autonomy_scope=0.15,
        time_pressure=0.1, social_complexity=0.1, psychological_safety=0.0,
    ),
    MBTIType.INFJ: Weights(
        data_quality=0.25, roi_visibility=0.15, autonomy_scope=0.15,
        time_pressure=0.05, social_complexity=0.2, psychological_safety=0.0,
    ),
    MBTIType.INFP: Weights(
        data_quality=0.18, roi_visibility=0.12, autonomy_scope=0.24,
        time_pressure=-0.08, social_complexity=0.22, psychological_safety=0.32,
    ),
    MBTIType.ENFJ: Weights(
        data_quality=0.15, roi_visibility=0.2, autonomy_scope=0.1,
        time_pressure=0.15, social_complexity=0.3, psychological_safety=0.0,
    ),
    MBTIType.ENFP: Weights(
        data_quality=0.1, roi_visibility=0.15, autonomy_scope=0.25,
        time_pressure=0.1, social_complexity=0.2, psychological_safety=0.0,
    ),
    MBTIType.ISTJ: Weights(
        data_quality=0.35, roi_visibility=0.22, autonomy_scope=0.16,
        time_pressure=0.14, social_complexity=-0.08, psychological_safety=0.12,
    ),
    MBTIType.ISFJ: Weights(
        data_quality=0.28, roi_visibility=0.14, autonomy_scope=0.06,
        time_pressure=0.18, social_complexity=0.12, psychological_safety=0.25,
    ),
    MBTIType.ESTJ: Weights(
        data_quality=0.3, roi_visibility=0.3, autonomy_scope=0.15,
        time_pressure=0.2, social_complexity=-0.05, psychological_safety=0.0,
    ),
    MBTIType.ESFJ: Weights(
        data_quality=0.2, roi_visibility=0.2, autonomy_scope=0.05,
        time_pressure=0.2, social_complexity=0.25, psychological_safety=0.0,
    ),
    MBTIType.ISTP: Weights(
        data_quality=0.24, roi_visibility=0.16, autonomy_scope=0.28,
        time_pressure=0.14, social_complexity=-0.04, psychological_safety=0.10,
    ),
    MBTIType.ISFP: Weights(
        data_quality=0.14, roi_visibility=0.12, autonomy_scope=0.24,
        time_pressure=0.08, social_complexity=0.12, psychological_safety=0.26,
    ),
    MBTIType.ESTP: Weights(
        data_quality=0.1, roi_visibility=0.2, autonomy_scope=0.25,
        time_pressure=0.2, social_complexity=0.15, psychological_safety=0.0,
    ),
    MBTIType.ESFP: Weights(
        data_quality=0.11, roi_visibility=0.16, autonomy_scope=0.16,
        time_pressure=0.18, social_complexity=0.18, psychological_safety=0.24,
    ),
}
