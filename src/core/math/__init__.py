"""
Core math modules для subset-count

Точная целочисленная арифметика подсчёта подмножеств по остатку суммы.
"""

# Consistency primitives
from src.core.math.consistency import (
    ConsistencyCheckFailure,
    check_exact_total,
    power_of_two,
    validate_non_negative_int,
    validate_positive_int,
)

# Binomial table builder
from src.core.math.binomial import (
    CHECK_BINOMIAL_DIVISION,
    CHECK_BINOMIAL_SUM,
    DEFAULT_COLUMN_ROWS,
    build_binomial_table,
    verify_binomial_table,
)

# Column-residue aggregator
from src.core.math.residues import (
    CHECK_MATRIX_ROW_SUM,
    DEFAULT_MODULUS,
    aggregate_column_residues,
    verify_residue_matrix,
)

# Cross-column combiner
from src.core.math.combiner import (
    CHECK_GRAND_TOTAL,
    combine_columns,
    verify_residue_totals,
)

__all__ = [
    # Consistency — Exceptions
    "ConsistencyCheckFailure",
    # Consistency — Functions
    "check_exact_total",
    "power_of_two",
    "validate_non_negative_int",
    "validate_positive_int",
    # Binomial — Constants
    "CHECK_BINOMIAL_DIVISION",
    "CHECK_BINOMIAL_SUM",
    "DEFAULT_COLUMN_ROWS",
    # Binomial — Functions
    "build_binomial_table",
    "verify_binomial_table",
    # Residues — Constants
    "CHECK_MATRIX_ROW_SUM",
    "DEFAULT_MODULUS",
    # Residues — Functions
    "aggregate_column_residues",
    "verify_residue_matrix",
    # Combiner — Constants
    "CHECK_GRAND_TOTAL",
    # Combiner — Functions
    "combine_columns",
    "verify_residue_totals",
]
