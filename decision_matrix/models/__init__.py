"""
models/ - Decision Matrix data model

Modules:
    enumerations.py  - Factor keys, decision labels, MBTI types, cohort schemes
    factors.py       - Fixed-field Weights/Inputs vectors and factor metadata
    decision.py      - Decision buckets and simulation outputs
    archetype.py     - Archetype profiles and MBTI descriptions
    scenarios.py     - Default inputs and preset scenarios
"""
