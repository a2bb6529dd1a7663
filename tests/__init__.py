"""
Test suite for regcalc

Contains:
- tests/unit/          : Unit and property-based tests for individual modules
"""
