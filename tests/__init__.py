"""
Test suite for subset-count

Contains:
- tests/unit/          : Unit tests for math primitives, domain tables and the pipeline
"""
