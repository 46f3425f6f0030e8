from enum import Enum


class FactorKey(str, Enum):
    DATA_QUALITY = "data_quality"
    ROI_VISIBILITY = "roi_visibility"
    AUTONOMY_SCOPE = "autonomy_scope"
    TIME_PRESSURE = "time_pressure"
    SOCIAL_COMPLEXITY = "social_complexity"
    PSYCHOLOGICAL_SAFETY = "psychological_safety"


class TeamFactorKey(str, Enum):
    """Five-factor set used by the team dashboard (no psychological safety)."""
    DATA_QUALITY = "data_quality"
    ROI_VISIBILITY = "roi_visibility"
    AUTONOMY_SCOPE = "autonomy_scope"
    TIME_PRESSURE = "time_pressure"
    SOCIAL_COMPLEXITY = "social_complexity"


class DecisionLabel(str, Enum):
    # Ordered from most to least confident
    FULL_SPEED_AHEAD = "Full Speed Ahead"
    PROCEED_STRATEGICALLY = "Proceed Strategically"
    IMPLEMENT_WITH_OVERSIGHT = "Implement with Oversight"
    REQUEST_CLARIFICATION = "Request Clarification"
    DELAY_OR_DISENGAGE = "Delay or Disengage"


class MBTIType(str, Enum):
    INTJ = "INTJ"
    INTP = "INTP"
    ENTJ = "ENTJ"
    ENTP = "ENTP"
    INFJ = "INFJ"
    INFP = "INFP"
    ENFJ = "ENFJ"
    ENFP = "ENFP"
    ISTJ = "ISTJ"
    ISFJ = "ISFJ"
    ESTJ = "ESTJ"
    ESFJ = "ESFJ"
    ISTP = "ISTP"
    ISFP = "ISFP"
    ESTP = "ESTP"
    ESFP = "ESFP"


class CohortScheme(str, Enum):
    HOUSES = "houses"
    DEPARTMENTS = "departments"
