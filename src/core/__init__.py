"""
Core math primitives and complex value types.

This module contains the foundational building blocks: the Complex scalar,
elementary complex functions and fixed-size complex vectors.
"""
