"""Pipeline — последовательный запуск стадий подсчёта.

Стадии (фиксированный порядок, без ветвлений):
1. Binomial table builder: C(rows, k), проверка Σ == 2^rows
2. Column-residue aggregator: матрица modulus × modulus, проверка строк
3. Cross-column combiner: перебор колонок, проверка Σ == 2^(rows × modulus)

ConsistencyCheckFailure из любой стадии не перехватывается и
пробрасывается вызывающему коду.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from src.core.domain.binomial_table import BinomialTable
from src.core.domain.residue_matrix import ColumnResidueMatrix
from src.core.domain.residue_totals import ResidueTotals
from src.core.math.binomial import build_binomial_table
from src.core.math.combiner import combine_columns
from src.core.math.residues import (
    DEFAULT_MODULUS,
    aggregate_column_residues,
    verify_residue_matrix,
)
from src.counting.config import APP_NAME, DEFAULT_ROWS, SubsetCountConfig

logger = logging.getLogger(APP_NAME)


@dataclass(frozen=True)
class SubsetCountResult:
    """Результат полного подсчёта."""

    config: SubsetCountConfig
    binomial_table: BinomialTable
    residue_matrix: ColumnResidueMatrix
    residue_totals: ResidueTotals

    # Число подмножеств с суммой, делящейся на modulus
    answer: int

    details: str


class SubsetCountPipeline:
    """Подсчёт подмножеств {1, ..., rows × modulus} с суммой ≡ 0 (mod modulus).

    Pipeline stateless: каждый run() строит все таблицы заново, поэтому
    повторные запуски дают идентичный результат.
    """

    def __init__(self, config: Optional[SubsetCountConfig] = None):
        """
        Args:
            config: параметры задачи (default: 2000 чисел, модуль 5)
        """
        self.config = config or SubsetCountConfig()

    def run(self) -> SubsetCountResult:
        """Выполнение всех стадий.

        Returns:
            SubsetCountResult с промежуточными таблицами и ответом

        Raises:
            ConsistencyCheckFailure: если любая самопроверка не прошла
        """
        rows = self.config.rows
        modulus = self.config.modulus

        # 1. Биномиальные коэффициенты
        table = build_binomial_table(rows)
        logger.info(
            "Binomial table built: rows=%d, %d coefficients, sum verified as 2^%d",
            rows, len(table.coefficients), rows,
        )

        # 2. Матрица вкладов колонок
        matrix = aggregate_column_residues(table, modulus)
        verify_residue_matrix(matrix)
        logger.info("Column-residue matrix built: %dx%d, row sums verified", modulus, modulus)
        for residue in range(modulus):
            logger.debug(
                "Column residue %d: contribution digits=%s",
                residue, [len(str(value)) for value in matrix.row(residue)],
            )

        # 3. Перебор колонок
        totals = combine_columns(matrix)
        logger.info(
            "Cross-column combination done: grand total verified as 2^%d",
            self.config.set_size,
        )
        for residue, value in enumerate(totals.totals):
            logger.debug("Subsets with sum = %d (mod %d): %d", residue, modulus, value)

        answer = totals.divisible_count()

        return SubsetCountResult(
            config=self.config,
            binomial_table=table,
            residue_matrix=matrix,
            residue_totals=totals,
            answer=answer,
            details=(
                f"set=1..{self.config.set_size}, modulus={modulus}, "
                f"answer has {len(str(answer))} digits"
            ),
        )


def count_divisible_subsets(rows: int = DEFAULT_ROWS, modulus: int = DEFAULT_MODULUS) -> int:
    """Число подмножеств {1, ..., rows × modulus} с суммой, делящейся на modulus."""
    config = SubsetCountConfig(rows=rows, modulus=modulus)
    return SubsetCountPipeline(config).run().answer
