"""
Integer Arithmetic — GCD / LCM над неотрицательными целыми

- gcd(m, n): итеративный алгоритм Евклида
- gcd_list(values): левая свёртка gcd
- lcm(m, n): m // gcd(m, n) * n
- lcm_list(values): левая свёртка lcm

СОГЛАШЕНИЯ (вырожденные случаи, часть контракта):
1. gcd(0, n) = n, gcd(m, 0) = m, gcd(0, 0) = 0
2. gcd([a]) = a
3. lcm([a]) = a, для положительного a
4. lcm с нулевым операндом не определён -> OutOfRangeError, а не 0

lcm_list сворачивает попарно, а не делит произведение всех элементов на
их общий gcd: формула product / gcd верна только для двух чисел
(для [2, 4, 8] она даёт 32 вместо 8) и раздувает промежуточное значение.
"""

from typing import Sequence

from src.core.math.numerical_safeguards import (
    require_non_empty,
    require_non_negative,
    require_positive,
)


# =============================================================================
# GCD
# =============================================================================


def _euclid(m: int, n: int) -> int:
    if m == 0 or n == 0:
        return max(m, n)

    while n:
        m, n = n, m % n
    return m


def gcd(m: int, n: int) -> int:
    """
    Наибольший общий делитель двух неотрицательных целых.

    Raises:
        InvalidArgumentError: если операнд не целый или отрицательный

    Examples:
        >>> gcd(12, 18)
        6
        >>> gcd(0, 5)
        5
        >>> gcd(0, 0)
        0
    """
    m = require_non_negative(m, "gcd", "m")
    n = require_non_negative(n, "gcd", "n")
    return _euclid(m, n)


def gcd_list(values: Sequence[int]) -> int:
    """
    Наибольший общий делитель списка неотрицательных целых.

    Args:
        values: Непустой список

    Returns:
        gcd всех элементов; для одного элемента — сам элемент

    Raises:
        EmptyInputError: если список пуст
        InvalidArgumentError: если элемент не целый или отрицательный

    Examples:
        >>> gcd_list([12, 18, 30])
        6
        >>> gcd_list([7])
        7
    """
    require_non_empty(values, "gcd_list")

    result = require_non_negative(values[0], "gcd_list", "values[0]")
    if len(values) == 1:  # gcd([a]) = a
        return result

    for i in range(1, len(values)):
        result = _euclid(result, require_non_negative(values[i], "gcd_list", f"values[{i}]"))
    return result


# =============================================================================
# LCM
# =============================================================================


def lcm(m: int, n: int) -> int:
    """
    Наименьшее общее кратное двух положительных целых.

    Деление выполняется до умножения: m // gcd(m, n) * n.

    Raises:
        OutOfRangeError: если любой операнд равен 0
        InvalidArgumentError: если операнд не целый или отрицательный

    Examples:
        >>> lcm(4, 6)
        12
        >>> lcm(7, 13)
        91
    """
    m = require_positive(m, "lcm", "m")
    n = require_positive(n, "lcm", "n")
    return m // _euclid(m, n) * n


def lcm_list(values: Sequence[int]) -> int:
    """
    Наименьшее общее кратное списка положительных целых.

    Raises:
        EmptyInputError: если список пуст
        OutOfRangeError: если любой элемент равен 0
        InvalidArgumentError: если элемент не целый или отрицательный

    Examples:
        >>> lcm_list([2, 3, 4])
        12
        >>> lcm_list([2, 4, 8])
        8
    """
    require_non_empty(values, "lcm_list")

    operands = [require_positive(v, "lcm_list", f"values[{i}]") for i, v in enumerate(values)]
    if len(operands) == 1:  # lcm([a]) = a
        return operands[0]

    result = operands[0]
    for value in operands[1:]:
        result = result // _euclid(result, value) * value
    return result
