"""Deterministic daily training and nutrition planning engine."""

__version__ = "0.1.0"
