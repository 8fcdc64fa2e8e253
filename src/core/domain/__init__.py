"""
Domain models and value objects.

Contains the immutable tables produced by each counting stage:
BinomialTable, ColumnResidueMatrix, ResidueTotals.
"""

from src.core.domain.binomial_table import BinomialTable
from src.core.domain.residue_matrix import ColumnResidueMatrix
from src.core.domain.residue_totals import ResidueTotals

__all__ = [
    "BinomialTable",
    "ColumnResidueMatrix",
    "ResidueTotals",
]
