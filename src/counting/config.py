"""Конфигурация подсчёта подмножеств.

Константы задачи фиксированы: множество {1, ..., rows × modulus},
по умолчанию {1, ..., 2000} и модуль 5. Переменные окружения не читаются.
"""

from dataclasses import dataclass
from typing import Final

from src.core.math.binomial import DEFAULT_COLUMN_ROWS
from src.core.math.consistency import (
    power_of_two,
    validate_non_negative_int,
    validate_positive_int,
)
from src.core.math.residues import DEFAULT_MODULUS

# Имя логгера приложения
APP_NAME: Final[str] = "subset-count"

DEFAULT_ROWS: Final[int] = DEFAULT_COLUMN_ROWS
DEFAULT_LOG_LEVEL: Final[str] = "INFO"
LOG_FORMAT: Final[str] = "%(asctime)s %(levelname)s %(name)s %(message)s"


@dataclass(frozen=True)
class SubsetCountConfig:
    """Параметры задачи.

    - rows: количество чисел в каждой колонке (400)
    - modulus: модуль делимости и количество колонок (5)
    """
    rows: int = DEFAULT_ROWS
    modulus: int = DEFAULT_MODULUS

    def __post_init__(self) -> None:
        validate_non_negative_int(self.rows, "rows")
        validate_positive_int(self.modulus, "modulus")

    @property
    def set_size(self) -> int:
        """Размер множества {1, ..., rows × modulus}."""
        return self.rows * self.modulus

    @property
    def expected_grand_total(self) -> int:
        """Общее число подмножеств: 2^(rows × modulus)."""
        return power_of_two(self.set_size)
