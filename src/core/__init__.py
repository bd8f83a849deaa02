"""
Core math primitives, domain models and contracts.

This module contains the elimination engine and its numerical safeguards,
independent of any presentation layer.
"""
