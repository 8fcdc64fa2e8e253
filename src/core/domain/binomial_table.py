"""
BinomialTable — Таблица биномиальных коэффициентов

Immutable Pydantic модель: строка треугольника Паскаля C(rows, k), k = 0..rows.
Используется как неизменяемый value object, передаваемый по ссылке в
агрегатор остатков колонок.

Модель проверяет только форму (длина rows + 1) и знак коэффициентов.
Инвариант Σ C(rows, k) == 2^rows — post-condition построителя таблицы
(src.core.math.binomial.verify_binomial_table).
"""

from pydantic import BaseModel, Field, field_validator


# =============================================================================
# BINOMIAL TABLE MODEL
# =============================================================================


class BinomialTable(BaseModel):
    """
    Строка биномиальных коэффициентов C(rows, k).

    Immutable модель (frozen=True): после построения таблица только читается.
    """

    rows: int = Field(..., ge=0, description="Размер колонки (n в C(n, k))")
    coefficients: tuple[int, ...] = Field(
        ..., description="C(rows, k) для k = 0..rows (точные int)"
    )

    model_config = {"frozen": True}  # Immutable

    @field_validator("coefficients")
    @classmethod
    def validate_shape_and_sign(cls, v: tuple[int, ...], info) -> tuple[int, ...]:
        """Проверка длины rows + 1 и неотрицательности коэффициентов"""
        if "rows" in info.data:
            rows = info.data["rows"]
            if len(v) != rows + 1:
                raise ValueError(
                    f"coefficients must have rows + 1 = {rows + 1} entries, got {len(v)}"
                )
        for k, value in enumerate(v):
            if value < 0:
                raise ValueError(f"coefficient C(n, {k}) must be non-negative, got {value}")
        return v

    def coefficient(self, k: int) -> int:
        """
        Коэффициент C(rows, k).

        Args:
            k: Количество выбранных элементов колонки (0..rows)

        Returns:
            Число способов выбрать ровно k элементов из колонки

        Raises:
            IndexError: Если k вне диапазона 0..rows
        """
        if not 0 <= k <= self.rows:
            raise IndexError(f"k must be in 0..{self.rows}, got {k}")
        return self.coefficients[k]

    def total(self) -> int:
        """
        Сумма всех коэффициентов (для корректной таблицы равна 2^rows).

        Returns:
            Σ C(rows, k)
        """
        return sum(self.coefficients)
