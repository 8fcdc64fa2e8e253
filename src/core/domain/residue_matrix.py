"""
ColumnResidueMatrix — Матрица вкладов колонок по остаткам

Immutable Pydantic модель размера modulus × modulus.

Множество {1, ..., rows × modulus} раскладывается на modulus колонок:
колонка r содержит rows чисел, сравнимых с r по модулю modulus
(колонка 0 — кратные modulus). Ячейка [r][c] — число подмножеств колонки r,
сумма элементов которых даёт остаток c.

Инвариант: сумма каждой строки равна 2^rows (разбиение всех подмножеств
колонки по остатку вклада).
"""

from pydantic import BaseModel, Field, field_validator


# =============================================================================
# RESIDUE MATRIX MODEL
# =============================================================================


class ColumnResidueMatrix(BaseModel):
    """
    Матрица counts[r][c]: колонка с остатком r → вклад с остатком c.

    Immutable модель (frozen=True), строится агрегатором один раз.
    """

    rows: int = Field(..., ge=0, description="Количество чисел в каждой колонке")
    modulus: int = Field(..., ge=1, description="Модуль (и количество колонок)")
    counts: tuple[tuple[int, ...], ...] = Field(
        ..., description="counts[r][c] (точные int), форма modulus × modulus"
    )

    model_config = {"frozen": True}  # Immutable

    @field_validator("counts")
    @classmethod
    def validate_square_non_negative(
        cls, v: tuple[tuple[int, ...], ...], info
    ) -> tuple[tuple[int, ...], ...]:
        """Проверка формы modulus × modulus и неотрицательности ячеек"""
        if "modulus" in info.data:
            modulus = info.data["modulus"]
            if len(v) != modulus:
                raise ValueError(f"counts must have {modulus} rows, got {len(v)}")
            for r, row in enumerate(v):
                if len(row) != modulus:
                    raise ValueError(
                        f"counts row {r} must have {modulus} entries, got {len(row)}"
                    )
        for r, row in enumerate(v):
            for c, value in enumerate(row):
                if value < 0:
                    raise ValueError(f"counts[{r}][{c}] must be non-negative, got {value}")
        return v

    def row(self, residue: int) -> tuple[int, ...]:
        """Строка матрицы для колонки с базовым остатком residue."""
        return self.counts[residue]

    def row_total(self, residue: int) -> int:
        """Сумма строки (для корректной матрицы равна 2^rows)."""
        return sum(self.counts[residue])

    def total(self) -> int:
        """Сумма всех ячеек (для корректной матрицы равна modulus × 2^rows)."""
        return sum(sum(row) for row in self.counts)
