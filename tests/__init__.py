"""
Test suite for cladosf

Contains:
- tests/unit/          : Unit tests for individual modules
"""
