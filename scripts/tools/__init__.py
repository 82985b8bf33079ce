"""
Planning Tools Package

Command-line tools around the planning engine.

Core modules:
- plan_cli: Run the workout, progression and nutrition planners on a JSON snapshot
"""

__version__ = "0.1.0"
