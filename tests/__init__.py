"""
Test suite for ats-wad-math

Contains:
- tests/unit/          : Unit tests for individual modules
"""
