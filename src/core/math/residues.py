"""
Residues — Column-Residue Aggregator

Множество {1, ..., rows × modulus} раскладывается на modulus колонок чисел
с одинаковым остатком:

         1,    2,    3,    4,    5
         6,    7,    8,    9,   10
       ...
      1996, 1997, 1998, 1999, 2000

Каждое число колонки с остатком r вносит r в сумму по модулю modulus.
Выбор ровно k чисел колонки вносит (k × r) mod modulus, и таких выборов
C(rows, k). Суммируя по k, получаем строку r матрицы вкладов.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Строка r соответствует колонке с остатком r (r = 0 — кратные modulus)
2. Каждая строка суммируется в 2^rows: ни одна колонка не пропущена и не
   посчитана дважды
"""

from typing import Final

from src.core.domain.binomial_table import BinomialTable
from src.core.domain.residue_matrix import ColumnResidueMatrix
from src.core.math.consistency import (
    check_exact_total,
    power_of_two,
    validate_positive_int,
)

DEFAULT_MODULUS: Final[int] = 5

CHECK_MATRIX_ROW_SUM: Final[str] = "residue_matrix_row_sum"


def aggregate_column_residues(
    table: BinomialTable,
    modulus: int = DEFAULT_MODULUS,
) -> ColumnResidueMatrix:
    """
    Построение матрицы counts[r][c] из таблицы биномов.

    counts[r][(k × r) mod modulus] += C(rows, k) для всех r, k.

    Args:
        table: Проверенная таблица C(rows, k)
        modulus: Модуль (он же количество колонок), ≥ 1

    Returns:
        ColumnResidueMatrix формы modulus × modulus

    Raises:
        ValueError: если modulus < 1

    Examples:
        >>> from src.core.math.binomial import build_binomial_table
        >>> aggregate_column_residues(build_binomial_table(1), 5).counts[2]
        (1, 0, 1, 0, 0)
    """
    validate_positive_int(modulus, "modulus")

    counts = [[0] * modulus for _ in range(modulus)]

    for residue in range(modulus):
        row = counts[residue]
        for k, coefficient in enumerate(table.coefficients):
            contribution = (k * residue) % modulus
            row[contribution] += coefficient

    return ColumnResidueMatrix(
        rows=table.rows,
        modulus=modulus,
        counts=tuple(tuple(row) for row in counts),
    )


def verify_residue_matrix(matrix: ColumnResidueMatrix) -> None:
    """
    Проверка, что каждая строка матрицы суммируется в 2^rows.

    Raises:
        ConsistencyCheckFailure: при расхождении в любой строке
    """
    expected = power_of_two(matrix.rows)

    for residue in range(matrix.modulus):
        check_exact_total(
            f"{CHECK_MATRIX_ROW_SUM}[{residue}]",
            actual=matrix.row_total(residue),
            expected=expected,
        )
