"""
Continued Fraction — простые цепные дроби

Прямое и обратное преобразование между вещественным числом и
ограниченной последовательностью членов простой цепной дроби:

    x = a0 + 1/(a1 + 1/(a2 + ...))

- to_continued_fraction: итеративное выделение целой части и обращение
  дробного остатка, не более n шагов
- from_continued_fraction: обратная рекуррентность справа налево
- continued_fraction_convergents / continued_fraction_to_fraction:
  точные подходящие дроби p_k/q_k (fractions.Fraction)

РАННЕЕ ЗАВЕРШЕНИЕ (не ошибка):
    Разложение останавливается, когда остаток стал ровно нулём (обратное
    значение не finite) или обратное значение превысило cut. Первое
    ловит конечные разложения рациональных чисел, второе отсекает
    члены, порождённые ошибкой округления float.

ФОРМУЛЫ:
    h_k = a_k * h_{k-1} + h_{k-2},   h_{-1} = 1, h_{-2} = 0
    q_k = a_k * q_{k-1} + q_{k-2},   q_{-1} = 0, q_{-2} = 1
"""

import math
from dataclasses import dataclass
from fractions import Fraction
from typing import Final, Optional, Sequence

from src.core.errors import InvalidArgumentError
from src.core.math.numerical_safeguards import (
    as_index,
    is_valid_float,
    require_non_empty,
    require_term_count,
)

# =============================================================================
# ПАРАМЕТРЫ
# =============================================================================

# Порог расходимости: разложение останавливается, когда следующий
# обратный остаток больше cut
DEFAULT_CUT: Final[float] = 1e5

# Число членов по умолчанию для ContinuedFraction.from_real
DEFAULT_MAX_TERMS: Final[int] = 20


@dataclass(frozen=True)
class ContinuedFractionConfig:
    """Политика разложения в цепную дробь."""

    # Максимальное число членов
    max_terms: int = DEFAULT_MAX_TERMS

    # Порог расходимости (см. DEFAULT_CUT)
    cut: float = DEFAULT_CUT


# =============================================================================
# X -> CF
# =============================================================================


def to_continued_fraction(x: float, n: int, cut: float = DEFAULT_CUT) -> list[int]:
    """
    Разложение вещественного числа в простую цепную дробь.

    Args:
        x: Вещественное число (finite)
        n: Максимальное число членов (> 0)
        cut: Порог расходимости: остановка, когда следующий обратный
            остаток больше cut

    Returns:
        Список членов длины от 1 до n; элемент 0 — целая часть (floor),
        может быть отрицательным. Если разложение короче n, возвращается
        более короткий список.

    Raises:
        OutOfRangeError: если n <= 0
        InvalidArgumentError: если x не finite (или не представим в float)
            или cut не положительный

    Examples:
        >>> to_continued_fraction(0.75, 10)
        [0, 1, 3]
        >>> to_continued_fraction(math.pi, 5)
        [3, 7, 15, 1, 292]
        >>> to_continued_fraction(-2.5, 10)
        [-3, 2]
    """
    n = require_term_count(n, "to_continued_fraction")

    try:
        x = float(x)
    except OverflowError:
        raise InvalidArgumentError(
            "to_continued_fraction", "x is too large for float arithmetic"
        ) from None

    if not is_valid_float(x):
        raise InvalidArgumentError("to_continued_fraction", f"x must be finite, got {x}")

    if math.isnan(cut) or cut <= 0:
        raise InvalidArgumentError("to_continued_fraction", f"cut must be positive, got {cut}")

    terms: list[int] = []
    for _ in range(n):
        integer_part = math.floor(x)
        terms.append(integer_part)

        remainder = x - integer_part
        if remainder == 0:
            # 1/0 -> не finite: разложение конечно
            break

        x = 1.0 / remainder
        if not is_valid_float(x) or x > cut:
            break

    return terms


# =============================================================================
# CF -> X
# =============================================================================


def _considered_terms(cf: Sequence[int], n: Optional[int], operation: str) -> list[int]:
    """Проверка cf и n, возврат первых n членов как int (n > len(cf) -> все члены)."""
    require_non_empty(cf, operation, "cf")

    if n is None:
        n = len(cf)
    else:
        n = min(require_term_count(n, operation), len(cf))

    return [as_index(term, operation, f"cf[{i}]") for i, term in enumerate(cf[:n])]


def _reciprocal(value: float) -> float:
    """1/value в арифметике IEEE: 1/0 -> inf, 1/inf -> 0."""
    if value == 0:
        return math.inf
    return 1.0 / value


def from_continued_fraction(cf: Sequence[int], n: Optional[int] = None) -> float:
    """
    Вещественное значение простой цепной дроби.

    Вычисляется обратной рекуррентностью (справа налево):
        tmp = 1 / cf[n-1]
        tmp = 1 / (tmp + cf[i]),  i = n-2 .. 1
        x = cf[0] + tmp

    Нулевой частичный знаменатель даёт бесконечный промежуточный tmp,
    который на следующем шаге обращается в 0. Ошибкой является только
    бесконечное итоговое значение.

    Args:
        cf: Члены цепной дроби (непустые, целые)
        n: Число учитываемых членов; None или n > len(cf) -> все члены

    Returns:
        Значение в арифметике float. Для точного результата
        используйте continued_fraction_to_fraction.

    Raises:
        EmptyInputError: если cf пустой
        OutOfRangeError: если n <= 0
        InvalidArgumentError: если член не целый, значение бесконечно
            (деление на ноль) или член не представим в float

    Examples:
        >>> from_continued_fraction([0, 1, 3])
        0.75
        >>> from_continued_fraction([3, 7, 15], n=1)
        3.0
        >>> from_continued_fraction([1, 0, 2])
        3.0
    """
    terms = _considered_terms(cf, n, "from_continued_fraction")

    try:
        # Вырожденный случай: целое число
        if len(terms) == 1:
            return float(terms[0])

        tmp = _reciprocal(float(terms[-1]))
        for term in reversed(terms[1:-1]):
            tmp = _reciprocal(tmp + term)
        result = terms[0] + tmp
    except OverflowError:
        raise InvalidArgumentError(
            "from_continued_fraction", f"term too large for float arithmetic in {terms}"
        ) from None

    if not is_valid_float(result):
        raise InvalidArgumentError(
            "from_continued_fraction", f"division by zero while evaluating {terms}"
        )

    return result


# =============================================================================
# ТОЧНЫЕ ПОДХОДЯЩИЕ ДРОБИ
# =============================================================================


def _convergent_pairs(terms: list[int]) -> list[tuple[int, int]]:
    """Пары (h_k, q_k) прямой рекуррентности, q_k может быть 0."""
    h_prev, h = 0, 1
    q_prev, q = 1, 0
    pairs: list[tuple[int, int]] = []
    for term in terms:
        h_prev, h = h, term * h + h_prev
        q_prev, q = q, term * q + q_prev
        pairs.append((h, q))
    return pairs


def continued_fraction_convergents(
    cf: Sequence[int], n: Optional[int] = None
) -> list[Fraction]:
    """
    Конечные подходящие дроби p_k/q_k для первых n членов.

    Промежуточные подходящие дроби с q_k == 0 (бесконечные, возникают
    при нулевом члене после cf[0]) пропускаются. Последняя подходящая
    дробь всегда равна continued_fraction_to_fraction(cf, n).

    Raises:
        EmptyInputError: если cf пустой
        OutOfRangeError: если n <= 0
        InvalidArgumentError: если знаменатель последней подходящей дроби равен нулю

    Examples:
        >>> [str(c) for c in continued_fraction_convergents([3, 7, 15, 1])]
        ['3', '22/7', '333/106', '355/113']
        >>> [str(c) for c in continued_fraction_convergents([1, 0, 2])]
        ['1', '3']
    """
    terms = _considered_terms(cf, n, "continued_fraction_convergents")

    pairs = _convergent_pairs(terms)
    if pairs[-1][1] == 0:
        raise InvalidArgumentError(
            "continued_fraction_convergents", f"zero denominator evaluating {terms}"
        )

    return [Fraction(h, q) for h, q in pairs if q != 0]


def continued_fraction_to_fraction(cf: Sequence[int], n: Optional[int] = None) -> Fraction:
    """
    Точное рациональное значение цепной дроби (последняя подходящая дробь).

    Raises:
        EmptyInputError: если cf пустой
        OutOfRangeError: если n <= 0
        InvalidArgumentError: если значение бесконечно (q == 0)

    Examples:
        >>> continued_fraction_to_fraction([0, 2, 3])
        Fraction(3, 7)
        >>> continued_fraction_to_fraction([1, 0, 2])
        Fraction(3, 1)
    """
    terms = _considered_terms(cf, n, "continued_fraction_to_fraction")

    h, q = _convergent_pairs(terms)[-1]
    if q == 0:
        raise InvalidArgumentError(
            "continued_fraction_to_fraction", f"zero denominator evaluating {terms}"
        )
    return Fraction(h, q)
