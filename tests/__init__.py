"""
Test suite for cmplxlib

Contains:
- tests/unit/          : Unit tests for individual modules
"""
