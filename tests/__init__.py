"""
Test suite for matrix-rref-inverse

Contains:
- tests/unit/          : Unit tests for individual modules
"""
