"""
Тесты для Binomial — Exact Binomial Table Builder

Проверяемые инварианты:
1. C(400, k) совпадает с math.comb для всех k
2. Симметрия C(n, k) == C(n, n - k)
3. Σ C(400, k) == 2^400 точно
4. Испорченная таблица → ConsistencyCheckFailure
5. Детерминизм
"""

import math

import pytest

from src.core.domain.binomial_table import BinomialTable
from src.core.math.binomial import (
    CHECK_BINOMIAL_SUM,
    DEFAULT_COLUMN_ROWS,
    build_binomial_table,
    verify_binomial_table,
)
from src.core.math.consistency import ConsistencyCheckFailure


@pytest.fixture(scope="module")
def table_400():
    """Таблица C(400, k) по умолчанию."""
    return build_binomial_table()


class TestBuildBinomialTable:
    """Тесты build_binomial_table."""

    def test_default_rows(self, table_400):
        """По умолчанию строится колонка из 400 чисел."""
        assert DEFAULT_COLUMN_ROWS == 400
        assert table_400.rows == 400
        assert len(table_400.coefficients) == 401

    def test_matches_math_comb(self, table_400):
        """Каждый коэффициент равен math.comb(400, k)."""
        for k in range(401):
            assert table_400.coefficient(k) == math.comb(400, k)

    def test_symmetry(self, table_400):
        """C(400, k) == C(400, 400 - k)."""
        for k in range(401):
            assert table_400.coefficients[k] == table_400.coefficients[400 - k]

    def test_sum_is_power_of_two(self, table_400):
        """Σ C(400, k) == 2^400 без усечения."""
        assert table_400.total() == 2 ** 400

    def test_edges(self, table_400):
        """C(n, 0) = C(n, n) = 1, C(n, 1) = n."""
        assert table_400.coefficients[0] == 1
        assert table_400.coefficients[-1] == 1
        assert table_400.coefficients[1] == 400

    def test_central_coefficient_is_big(self, table_400):
        """Центральный коэффициент ~ 10^119: проверка отсутствия переполнения."""
        central = table_400.coefficient(200)
        assert central == math.comb(400, 200)
        assert central > 10 ** 118

    def test_small_rows(self):
        """Малые строки треугольника Паскаля."""
        assert build_binomial_table(0).coefficients == (1,)
        assert build_binomial_table(1).coefficients == (1, 1)
        assert build_binomial_table(4).coefficients == (1, 4, 6, 4, 1)
        assert build_binomial_table(6).coefficients == (1, 6, 15, 20, 15, 6, 1)

    def test_negative_rows_rejected(self):
        """rows < 0 — ошибка вызывающего кода, а не consistency failure."""
        with pytest.raises(ValueError):
            build_binomial_table(-1)

    def test_deterministic(self):
        """Повторное построение даёт идентичную таблицу."""
        assert build_binomial_table(50) == build_binomial_table(50)


class TestVerifyBinomialTable:
    """Тесты verify_binomial_table."""

    def test_valid_table_passes(self):
        verify_binomial_table(BinomialTable(rows=3, coefficients=(1, 3, 3, 1)))

    def test_corrupted_table_fails(self):
        """Σ = 5 != 2^2 → failure."""
        corrupted = BinomialTable(rows=2, coefficients=(1, 2, 2))

        with pytest.raises(ConsistencyCheckFailure) as exc_info:
            verify_binomial_table(corrupted)

        assert exc_info.value.check_name == CHECK_BINOMIAL_SUM
        assert exc_info.value.expected == 4
        assert exc_info.value.actual == 5
