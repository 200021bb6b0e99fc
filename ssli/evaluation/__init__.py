"""Evaluation engine."""
