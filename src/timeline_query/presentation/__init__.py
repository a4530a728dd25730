"""Presentation layer: integration points for front ends and test harnesses."""
