"""
Test suite for numtheory-core

Contains:
- tests/unit/          : Unit tests for individual modules
"""
