"""
Combiner — Cross-Column Enumeration

Полное подмножество {1, ..., rows × modulus} — независимый выбор внутри
каждой из modulus колонок. Остаток суммы подмножества равен сумме остатков
вкладов колонок по модулю modulus.

Перебор — дерево глубины modulus (уровень i читает строку i матрицы),
ветвление modulus на каждом уровне:
    product' = product × counts[level][n]
    residue' = (residue + n) mod modulus
На листе (level == modulus) product зачисляется в totals[residue].

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Состояние рекурсии передаётся аргументами; общего изменяемого
   состояния между ветвями нет (каждый вызов возвращает свой вектор)
2. Ветвь с product == 0 отбрасывается сразу (только оптимизация,
   результат не меняется)
3. Σ totals == 2^(rows × modulus), иначе → ConsistencyCheckFailure

Для констант по умолчанию (5 × 400): 5^5 = 3125 листьев.
"""

from typing import Final

from src.core.domain.residue_matrix import ColumnResidueMatrix
from src.core.domain.residue_totals import ResidueTotals
from src.core.math.consistency import check_exact_total, power_of_two

CHECK_GRAND_TOTAL: Final[str] = "grand_total"


# =============================================================================
# RECURSION
# =============================================================================


def _combine_from_level(
    counts: tuple[tuple[int, ...], ...],
    modulus: int,
    level: int,
    product: int,
    residue: int,
) -> list[int]:
    """
    Частичные суммы по остаткам для поддерева, начинающегося с level.

    Args:
        counts: Строки матрицы вкладов
        modulus: Модуль (глубина дерева)
        level: Текущая колонка (0..modulus)
        product: Число подмножеств уже выбранных колонок
        residue: Остаток суммы уже выбранных колонок

    Returns:
        Вектор длины modulus с вкладом поддерева в каждый остаток
    """
    partial = [0] * modulus

    # Нулевое произведение не даст вклада ни в один лист
    if product == 0:
        return partial

    if level == modulus:
        partial[residue] = product
        return partial

    row = counts[level]
    for n in range(modulus):
        subtree = _combine_from_level(
            counts,
            modulus,
            level + 1,
            product * row[n],
            (residue + n) % modulus,
        )
        for r, value in enumerate(subtree):
            partial[r] += value

    return partial


# =============================================================================
# PUBLIC API
# =============================================================================


def combine_columns(matrix: ColumnResidueMatrix) -> ResidueTotals:
    """
    Перебор комбинаций вкладов всех колонок.

    Args:
        matrix: Матрица вкладов колонок (строка r — колонка с остатком r)

    Returns:
        ResidueTotals: число подмножеств для каждого остатка суммы

    Raises:
        ConsistencyCheckFailure: если Σ totals != 2^(rows × modulus)

    Examples:
        >>> from src.core.math.binomial import build_binomial_table
        >>> from src.core.math.residues import aggregate_column_residues
        >>> matrix = aggregate_column_residues(build_binomial_table(1), 5)
        >>> combine_columns(matrix).totals
        (8, 6, 6, 6, 6)
    """
    totals = _combine_from_level(
        matrix.counts,
        matrix.modulus,
        level=0,
        product=1,
        residue=0,
    )

    result = ResidueTotals(
        rows=matrix.rows,
        modulus=matrix.modulus,
        totals=tuple(totals),
    )
    verify_residue_totals(result)

    return result


def verify_residue_totals(totals: ResidueTotals) -> None:
    """
    Проверка Σ totals == 2^(rows × modulus).

    Raises:
        ConsistencyCheckFailure: при расхождении
    """
    check_exact_total(
        CHECK_GRAND_TOTAL,
        actual=totals.grand_total(),
        expected=power_of_two(totals.rows * totals.modulus),
    )
