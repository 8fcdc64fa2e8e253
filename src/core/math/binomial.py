"""
Binomial — Exact Binomial Table Builder

Модуль строит строку биномиальных коэффициентов C(rows, k), k = 0..rows,
в точной целочисленной арифметике (Python int, arbitrary precision).

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Никакого округления: каждое деление рекуррентности точное,
   ненулевой остаток → ConsistencyCheckFailure
2. Σ C(rows, k) == 2^rows, иначе → ConsistencyCheckFailure
3. Результат детерминирован и неизменяем (BinomialTable, frozen)

ФОРМУЛЫ:
    C(rows, 0) = 1
    C(rows, k) = C(rows, k - 1) × (rows - k + 1) / k
    Σ_k C(rows, k) = 2^rows
"""

from typing import Final

from src.core.domain.binomial_table import BinomialTable
from src.core.math.consistency import (
    ConsistencyCheckFailure,
    check_exact_total,
    power_of_two,
    validate_non_negative_int,
)

# Размер колонки по умолчанию: {1, ..., 2000} = 5 колонок по 400 чисел
DEFAULT_COLUMN_ROWS: Final[int] = 400

CHECK_BINOMIAL_SUM: Final[str] = "binomial_sum"
CHECK_BINOMIAL_DIVISION: Final[str] = "binomial_exact_division"


# =============================================================================
# BUILDER
# =============================================================================


def build_binomial_table(rows: int = DEFAULT_COLUMN_ROWS) -> BinomialTable:
    """
    Построение таблицы C(rows, k) мультипликативной рекуррентностью.

    Произведение C(k - 1) × (rows - k + 1) всегда делится на k нацело,
    поэтому деление выполняется через divmod с проверкой остатка.

    Args:
        rows: Размер колонки n (n ≥ 0)

    Returns:
        BinomialTable с rows + 1 коэффициентами

    Raises:
        ValueError: если rows отрицательный или не int
        ConsistencyCheckFailure: если деление неточное или сумма != 2^rows

    Examples:
        >>> build_binomial_table(4).coefficients
        (1, 4, 6, 4, 1)
        >>> build_binomial_table(0).coefficients
        (1,)
    """
    validate_non_negative_int(rows, "rows")

    coefficients = [1]
    current = 1

    for k in range(1, rows + 1):
        numerator = current * (rows - k + 1)
        current, remainder = divmod(numerator, k)
        if remainder != 0:
            raise ConsistencyCheckFailure(
                CHECK_BINOMIAL_DIVISION,
                expected=0,
                actual=remainder,
                message=f"C({rows}, {k}) recurrence left remainder {remainder}",
            )
        coefficients.append(current)

    table = BinomialTable(rows=rows, coefficients=tuple(coefficients))
    verify_binomial_table(table)

    return table


def verify_binomial_table(table: BinomialTable) -> None:
    """
    Проверка Σ C(rows, k) == 2^rows.

    Args:
        table: Таблица биномиальных коэффициентов

    Raises:
        ConsistencyCheckFailure: если сумма отличается от 2^rows
    """
    check_exact_total(
        CHECK_BINOMIAL_SUM,
        actual=table.total(),
        expected=power_of_two(table.rows),
    )
