"""
Test suite for jalali

Contains:
- tests/unit/          : Unit tests for individual modules
"""
