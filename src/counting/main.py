"""Точка входа: печать числа подмножеств {1, ..., 2000} с суммой, делящейся на 5.

stdout содержит ровно две строки: описание и десятичный ответ.
Логи пишутся в stderr. Аргументы и переменные окружения не используются.

Коды завершения:
- 0: успех
- 1: провал самопроверки (ConsistencyCheckFailure), ответ не печатается
"""

import logging
import sys

from src.core.math.consistency import ConsistencyCheckFailure
from src.counting.config import APP_NAME, DEFAULT_LOG_LEVEL, LOG_FORMAT
from src.counting.pipeline import SubsetCountPipeline

EXIT_OK = 0
EXIT_CONSISTENCY_FAILURE = 1


def main() -> int:
    """Один запуск подсчёта с константами по умолчанию."""
    logging.basicConfig(
        level=getattr(logging, DEFAULT_LOG_LEVEL, logging.INFO),
        format=LOG_FORMAT,
    )
    logger = logging.getLogger(APP_NAME)

    pipeline = SubsetCountPipeline()
    logger.info(
        "Counting subsets of 1..%d with sum divisible by %d",
        pipeline.config.set_size, pipeline.config.modulus,
    )

    try:
        result = pipeline.run()
    except ConsistencyCheckFailure as e:
        logger.critical(
            "Aborting: %s (check=%s)", e, e.check_name,
        )
        return EXIT_CONSISTENCY_FAILURE

    logger.info("Done: %s", result.details)

    print("Number of subsets whose sum is divisible by", result.config.modulus, ":")
    print(result.answer)

    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
