"""Counting — запуск подсчёта подмножеств по остатку суммы.

- config: константы задачи и логирования
- pipeline: последовательный запуск стадий src.core.math
- main: точка входа процесса (две строки в stdout)
"""

from .config import APP_NAME, SubsetCountConfig
from .pipeline import SubsetCountPipeline, SubsetCountResult, count_divisible_subsets

__all__ = [
    "APP_NAME",
    "SubsetCountConfig",
    "SubsetCountPipeline",
    "SubsetCountResult",
    "count_divisible_subsets",
]
