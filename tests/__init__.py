"""
Test suite for positive

Contains:
- tests/unit/          : Unit tests for individual modules
"""
