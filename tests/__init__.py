"""
Test suite for fraction-engine

Contains:
- tests/unit/          : Unit tests for the rational engine, contracts and calculator
"""
