"""
Test suite for percent

Contains:
- tests/unit/          : Unit and property-based tests for individual modules
"""
