"""
Consistency — Exact Integer Invariants

Модуль содержит примитивы самопроверки точной (arbitrary-precision)
арифметики подсчёта подмножеств:
- Единственное доменное исключение ConsistencyCheckFailure
- Точное вычисление 2^n
- Сравнение итоговых сумм без округления
- Валидация неотрицательных целых параметров

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Любое расхождение контрольной суммы → ConsistencyCheckFailure (фатально)
2. Никаких float: все сравнения выполняются над int
3. Ошибки вызывающей стороны (некорректные константы) → ValueError,
   а не ConsistencyCheckFailure
"""


# =============================================================================
# EXCEPTIONS
# =============================================================================


class ConsistencyCheckFailure(Exception):
    """
    Критическое нарушение внутренней согласованности вычисления.

    Сигнализирует о дефекте арифметики (рекуррентность биномов, агрегация,
    перебор колонок), а не об ошибке входных данных. Восстановление не
    предусмотрено: результат не публикуется, процесс завершается с ошибкой.

    Attributes:
        check_name: Имя проверки (например, 'binomial_sum')
        expected: Ожидаемое точное значение
        actual: Фактически полученное значение
    """

    def __init__(self, check_name: str, expected: int, actual: int, message: str = ""):
        self.check_name = check_name
        self.expected = expected
        self.actual = actual
        details = message or f"expected {expected}, got {actual}"
        super().__init__(f"Consistency check '{check_name}' failed: {details}")


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def validate_non_negative_int(value: int, name: str) -> None:
    """
    Валидация, что значение является неотрицательным int.

    bool отвергается явно, хотя формально является подклассом int.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        ValueError: Если value не int или value < 0
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{name} must be an int, got {type(value).__name__}")

    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")


def validate_positive_int(value: int, name: str) -> None:
    """
    Валидация, что значение является положительным int.

    Raises:
        ValueError: Если value не int или value < 1
    """
    validate_non_negative_int(value, name)

    if value < 1:
        raise ValueError(f"{name} must be positive, got {value}")


# =============================================================================
# ТОЧНЫЕ КОНТРОЛЬНЫЕ СУММЫ
# =============================================================================


def power_of_two(exponent: int) -> int:
    """
    Точное 2^exponent.

    Args:
        exponent: Неотрицательный показатель степени

    Returns:
        2^exponent как int

    Examples:
        >>> power_of_two(0)
        1
        >>> power_of_two(10)
        1024
    """
    validate_non_negative_int(exponent, "exponent")
    return 1 << exponent


def check_exact_total(check_name: str, actual: int, expected: int) -> None:
    """
    Проверка точного совпадения контрольной суммы.

    Args:
        check_name: Имя проверки (попадает в диагностику)
        actual: Вычисленная сумма
        expected: Ожидаемая сумма

    Raises:
        ConsistencyCheckFailure: Если actual != expected
    """
    if actual != expected:
        raise ConsistencyCheckFailure(check_name, expected=expected, actual=actual)
