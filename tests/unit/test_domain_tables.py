"""
Tests for immutable counting tables (Pydantic models)

Покрывает:
- BinomialTable: форма rows + 1, неотрицательность, доступ по индексу
- ColumnResidueMatrix: форма modulus × modulus, суммы строк
- ResidueTotals: длина modulus, divisible_count / grand_total
- Immutability (frozen=True)
"""

import pytest
from pydantic import ValidationError

from src.core.domain import BinomialTable, ColumnResidueMatrix, ResidueTotals


# =============================================================================
# BINOMIAL TABLE
# =============================================================================


def test_binomial_table_valid():
    """Корректная таблица C(3, k)."""
    table = BinomialTable(rows=3, coefficients=(1, 3, 3, 1))
    assert table.coefficient(2) == 3
    assert table.total() == 8


def test_binomial_table_accepts_list_input():
    """Список приводится к tuple."""
    table = BinomialTable(rows=1, coefficients=[1, 1])
    assert table.coefficients == (1, 1)


def test_binomial_table_big_ints():
    """Коэффициенты за пределами int64 сохраняются точно."""
    big = 2 ** 300 + 1
    table = BinomialTable(rows=2, coefficients=(1, big, 1))
    assert table.coefficient(1) == big


def test_binomial_table_wrong_length():
    with pytest.raises(ValidationError, match="rows \\+ 1"):
        BinomialTable(rows=3, coefficients=(1, 3, 1))


def test_binomial_table_negative_coefficient():
    with pytest.raises(ValidationError, match="non-negative"):
        BinomialTable(rows=1, coefficients=(1, -1))


def test_binomial_table_negative_rows():
    with pytest.raises(ValidationError):
        BinomialTable(rows=-1, coefficients=())


def test_binomial_table_index_out_of_range():
    table = BinomialTable(rows=1, coefficients=(1, 1))
    with pytest.raises(IndexError):
        table.coefficient(2)


def test_binomial_table_immutability():
    """Тест immutability BinomialTable (frozen=True)."""
    table = BinomialTable(rows=1, coefficients=(1, 1))
    with pytest.raises(ValidationError, match="frozen"):
        table.rows = 5  # type: ignore


# =============================================================================
# COLUMN RESIDUE MATRIX
# =============================================================================


def test_residue_matrix_valid():
    matrix = ColumnResidueMatrix(rows=1, modulus=2, counts=((2, 0), (1, 1)))
    assert matrix.row(1) == (1, 1)
    assert matrix.row_total(0) == 2
    assert matrix.total() == 4


def test_residue_matrix_wrong_row_count():
    with pytest.raises(ValidationError, match="must have 2 rows"):
        ColumnResidueMatrix(rows=1, modulus=2, counts=((2, 0),))


def test_residue_matrix_ragged_row():
    with pytest.raises(ValidationError, match="row 1 must have 2 entries"):
        ColumnResidueMatrix(rows=1, modulus=2, counts=((2, 0), (1, 1, 0)))


def test_residue_matrix_negative_cell():
    with pytest.raises(ValidationError, match="non-negative"):
        ColumnResidueMatrix(rows=1, modulus=2, counts=((2, 0), (3, -1)))


def test_residue_matrix_zero_modulus():
    with pytest.raises(ValidationError):
        ColumnResidueMatrix(rows=1, modulus=0, counts=())


def test_residue_matrix_immutability():
    """Тест immutability ColumnResidueMatrix (frozen=True)."""
    matrix = ColumnResidueMatrix(rows=0, modulus=1, counts=((1,),))
    with pytest.raises(ValidationError, match="frozen"):
        matrix.modulus = 2  # type: ignore


# =============================================================================
# RESIDUE TOTALS
# =============================================================================


def test_residue_totals_accessors():
    totals = ResidueTotals(rows=1, modulus=5, totals=(8, 6, 6, 6, 6))
    assert totals.divisible_count() == 8
    assert totals.grand_total() == 32
    assert totals.count_for(3) == 6
    assert totals.count_for(5) == 8


def test_residue_totals_wrong_length():
    with pytest.raises(ValidationError, match="must have 5 entries"):
        ResidueTotals(rows=1, modulus=5, totals=(8, 6, 6, 6))


def test_residue_totals_negative():
    with pytest.raises(ValidationError, match="non-negative"):
        ResidueTotals(rows=1, modulus=2, totals=(3, -1))


def test_residue_totals_equality():
    """Frozen модели сравниваются по значению."""
    a = ResidueTotals(rows=1, modulus=2, totals=(2, 2))
    b = ResidueTotals(rows=1, modulus=2, totals=(2, 2))
    assert a == b
