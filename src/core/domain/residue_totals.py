"""
ResidueTotals — Итоговое распределение подмножеств по остатку суммы

Immutable Pydantic модель: totals[r] — число подмножеств множества
{1, ..., rows × modulus}, сумма элементов которых сравнима с r по модулю.

Инвариант: Σ totals == 2^(rows × modulus).
"""

from pydantic import BaseModel, Field, field_validator


class ResidueTotals(BaseModel):
    """Результат перебора колонок, индексированный остатком суммы."""

    rows: int = Field(..., ge=0, description="Количество чисел в каждой колонке")
    modulus: int = Field(..., ge=1, description="Модуль")
    totals: tuple[int, ...] = Field(..., description="Число подмножеств для каждого остатка")

    model_config = {"frozen": True}  # Immutable

    @field_validator("totals")
    @classmethod
    def validate_length_and_sign(cls, v: tuple[int, ...], info) -> tuple[int, ...]:
        """Проверка длины modulus и неотрицательности"""
        if "modulus" in info.data and len(v) != info.data["modulus"]:
            raise ValueError(
                f"totals must have {info.data['modulus']} entries, got {len(v)}"
            )
        for r, value in enumerate(v):
            if value < 0:
                raise ValueError(f"totals[{r}] must be non-negative, got {value}")
        return v

    def count_for(self, residue: int) -> int:
        """Число подмножеств с суммой ≡ residue (mod modulus)."""
        return self.totals[residue % self.modulus]

    def divisible_count(self) -> int:
        """Число подмножеств, сумма которых делится на modulus."""
        return self.totals[0]

    def grand_total(self) -> int:
        """Общее число подмножеств (для корректного результата 2^(rows × modulus))."""
        return sum(self.totals)
