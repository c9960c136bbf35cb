"""
Test suite for coincidence-detector

Contains:
- tests/unit/          : Unit tests for individual modules
"""
