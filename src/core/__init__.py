"""
Core domain models and exact-arithmetic primitives.

This module contains the foundational building blocks of the subset count:
immutable value objects and pure integer algorithms with no I/O.
"""
