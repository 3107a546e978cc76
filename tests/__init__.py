"""
Test suite for decimal-bigint

Contains:
- tests/unit/          : Unit and property tests for individual modules
"""
