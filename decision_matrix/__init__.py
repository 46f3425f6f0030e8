"""
Decision Matrix - MBTI archetype and public-opinion decision scoring engine.
"""

__version__ = "1.0.0"
