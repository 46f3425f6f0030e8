# mbti/registry.py
"""
MBTI Archetype Registry

Closed catalog of the sixteen archetypes: one weight vector (weights.py) and
one description (data/descriptions.json) per type. Iteration order is the
catalog order of MBTIType and is the order every batch result follows.
"""

import json
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Dict, List, Tuple, Union

import structlog

from decision_matrix.core.exceptions import UnknownArchetypeException
from decision_matrix.mbti.examples import FAMOUS_PEOPLE_BY_MBTI
from decision_matrix.mbti.weights import ARCHETYPE_WEIGHTS
from decision_matrix.models.archetype import ArchetypeProfile, MBTIDescription
from decision_matrix.models.enumerations import MBTIType
from decision_matrix.models.factors import Weights

logger = structlog.get_logger(__name__)

DESCRIPTIONS_PATH = Path(__file__).parent / "data" / "descriptions.json"


@dataclass(frozen=True)
class MBTIArchetype:
    """One catalogued archetype: identifier, weights and description."""
    mbti_type: MBTIType
    weights: Weights
    description: MBTIDescription

    @property
    def name(self) -> str:
        return self.mbti_type.value

    def to_profile(self) -> ArchetypeProfile:
        return ArchetypeProfile(name=self.name, weights=self.weights)


def _resolve_type(mbti_type: Union[str, MBTIType]) -> MBTIType:
    if isinstance(mbti_type, MBTIType):
        return mbti_type
    try:
        return MBTIType(str(mbti_type).strip().upper())
    except ValueError:
        logger.warning("unknown_archetype", archetype=str(mbti_type))
        raise UnknownArchetypeException(str(mbti_type)) from None


@lru_cache(maxsize=1)
def _load_descriptions() -> Dict[str, MBTIDescription]:
    raw = json.loads(DESCRIPTIONS_PATH.read_text(encoding="utf-8"))
    return {t.value: MBTIDescription.model_validate(raw[t.value]) for t in MBTIType}


def get_descriptions() -> Dict[str, MBTIDescription]:
    """Descriptions of all sixteen archetypes keyed by type, in catalog order."""
    return dict(_load_descriptions())


def get_all_types() -> List[str]:
    return [t.value for t in MBTIType]


def create(mbti_type: Union[str, MBTIType]) -> MBTIArchetype:
    """
    Look up one archetype by identifier (case-insensitive, surrounding
    whitespace ignored).

    Raises:
        UnknownArchetypeException: identifier is not one of the sixteen types;
            carries the identifier exactly as passed.
    """
    resolved = _resolve_type(mbti_type)
    return MBTIArchetype(
        mbti_type=resolved,
        weights=ARCHETYPE_WEIGHTS[resolved],
        description=_load_descriptions()[resolved.value],
    )


@lru_cache(maxsize=1)
def _profiles() -> Tuple[ArchetypeProfile, ...]:
    return tuple(create(t).to_profile() for t in MBTIType)


def get_archetype_profiles() -> List[ArchetypeProfile]:
    """Weight profiles of all sixteen archetypes in catalog order."""
    return list(_profiles())


def get_famous_people(mbti_type: Union[str, MBTIType]) -> List[str]:
    """Five well-known people commonly typed as `mbti_type`."""
    return list(FAMOUS_PEOPLE_BY_MBTI[_resolve_type(mbti_type)])
