"""
Recovery Progress - Source Package

The calculation engine behind a recovery dashboard: sober day counts,
milestones, money saved, savings-goal countdowns and wellness trends.

DESIGN PRINCIPLES:
1. Every engine function is pure: inputs and an explicit "now" in, values out
2. No data yet is a valid state, never an error
3. No silent corrections to stored data
4. Formatting belongs to the presentation layer
"""

__version__ = "1.0.0"
__author__ = "Recovery Progress Team"
