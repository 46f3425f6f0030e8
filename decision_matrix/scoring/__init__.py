"""
scoring/ - Decision scoring engine

Modules:
    utils.py                - Rounding and clamping helpers
    score_calculator.py     - Weighted linear score of weights against inputs
    decision_classifier.py  - Five-bucket and three-bucket (team) decision classifiers
    public_opinion.py       - Public-opinion probability model
    simulation.py           - Batch archetype evaluation and majority decision
    team_simulation.py      - Four-archetype, five-factor team variant
    cohorts.py              - Grouping of results by house / department
    chart_data.py           - Radar and probability chart rows, closest archetype
"""
