"""
Numerical Safeguards — проверки входов для теоретико-числовых примитивов

Модуль собирает общие проверки, которые используют continued_fraction,
integer_arithmetic и permutations:
- Проверка float на конечность (NaN/Inf)
- Epsilon-сравнения float с учётом машинной точности
- Приведение к целому индексу (operator.index) без молчаливого усечения
- Проверки доменов: неотрицательные / положительные целые, число членов, непустота

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Нарушение домена всегда поднимает исключение из src.core.errors
2. float и bool никогда не принимаются там, где ожидается целое
3. Все проверки чистые: вход не модифицируется
"""

import math
import operator
from typing import Any, Final, Sized

from src.core.errors import EmptyInputError, InvalidArgumentError, OutOfRangeError

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Относительная толерантность для сравнения float (round-trip проверок)
EPS_FLOAT_COMPARE_REL: Final[float] = 1e-9

# Абсолютная толерантность для сравнения float
EPS_FLOAT_COMPARE_ABS: Final[float] = 1e-12


# =============================================================================
# FLOAT
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Returns:
        True если значение finite
    """
    return math.isfinite(value)


def is_close(
    a: float,
    b: float,
    rel_tol: float = EPS_FLOAT_COMPARE_REL,
    abs_tol: float = EPS_FLOAT_COMPARE_ABS,
) -> bool:
    """
    Сравнение float с учётом машинной точности.

    Алгоритм:
        abs(a - b) <= max(rel_tol * max(abs(a), abs(b)), abs_tol)

    Examples:
        >>> is_close(0.1 + 0.2, 0.3)
        True
        >>> is_close(1.0, 1.1)
        False
    """
    return math.isclose(a, b, rel_tol=rel_tol, abs_tol=abs_tol)


# =============================================================================
# ЦЕЛЫЕ
# =============================================================================


def as_index(value: Any, operation: str, name: str) -> int:
    """
    Приведение значения к int через operator.index.

    Принимает int и любые integral-типы (например, numpy.int64).
    float (даже 3.0) и bool отклоняются: усечение должно быть явным.

    Args:
        value: Проверяемое значение
        operation: Имя операции (для ошибки)
        name: Имя параметра (для ошибки)

    Raises:
        InvalidArgumentError: если значение не целое

    Examples:
        >>> as_index(7, "gcd", "m")
        7
    """
    if isinstance(value, bool):
        raise InvalidArgumentError(operation, f"{name} must be an integer, got bool")
    try:
        return operator.index(value)
    except TypeError:
        raise InvalidArgumentError(
            operation, f"{name} must be an integer, got {type(value).__name__}"
        ) from None


def require_non_negative(value: Any, operation: str, name: str) -> int:
    """
    Валидация неотрицательного целого.

    Raises:
        InvalidArgumentError: если значение не целое или < 0
    """
    result = as_index(value, operation, name)
    if result < 0:
        raise InvalidArgumentError(operation, f"{name} must be non-negative, got {result}")
    return result


def require_positive(value: Any, operation: str, name: str) -> int:
    """
    Валидация положительного целого.

    Raises:
        InvalidArgumentError: если значение не целое или < 0
        OutOfRangeError: если значение == 0
    """
    result = require_non_negative(value, operation, name)
    if result == 0:
        raise OutOfRangeError(operation, f"{name} must be positive, got 0")
    return result


def require_term_count(n: Any, operation: str) -> int:
    """
    Валидация запрошенного числа членов разложения.

    Raises:
        InvalidArgumentError: если n не целое
        OutOfRangeError: если n <= 0 (запрошено ноль членов)
    """
    result = as_index(n, operation, "n")
    if result <= 0:
        raise OutOfRangeError(operation, f"number of terms must be positive, got {result}")
    return result


def require_non_empty(values: Sized, operation: str, name: str = "values") -> None:
    """
    Валидация непустой последовательности.

    Raises:
        EmptyInputError: если последовательность пуста
    """
    if len(values) == 0:
        raise EmptyInputError(operation, f"{name} must contain at least one element")
