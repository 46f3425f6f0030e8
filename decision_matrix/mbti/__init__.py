"""
mbti/ - MBTI archetype catalog

Modules:
    weights.py   - Six-factor decision weights per archetype
    registry.py  - Lookup/factory over the sixteen archetypes and their descriptions
    examples.py  - Well-known people per archetype
"""

from decision_matrix.mbti.registry import (
    MBTIArchetype,
    create,
    get_all_types,
    get_archetype_profiles,
    get_descriptions,
    get_famous_people,
)

__all__ = [
    "MBTIArchetype",
    "create",
    "get_all_types",
    "get_archetype_profiles",
    "get_descriptions",
    "get_famous_people",
]
