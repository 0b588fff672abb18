"""
Тесты для Integer Arithmetic — GCD / LCM

Проверяемые инварианты:
1. gcd симметричен, gcd(0, n) = n, gcd(m, m) = m
2. lcm(m, n) * gcd(m, n) == m * n
3. Соглашения для одноэлементных списков: gcd([a]) = a, lcm([a]) = a
4. Ошибки: пустой список, нулевой операнд lcm, отрицательные и не-целые
"""

import pytest

from src.core.errors import (
    EmptyInputError,
    ErrorKind,
    InvalidArgumentError,
    OutOfRangeError,
)
from src.core.math.integer_arithmetic import gcd, gcd_list, lcm, lcm_list


# =============================================================================
# ТЕСТЫ: gcd
# =============================================================================


class TestGcd:
    """Тесты gcd(m, n)."""

    def test_known_values(self):
        assert gcd(12, 18) == 6
        assert gcd(17, 5) == 1
        assert gcd(100, 75) == 25
        assert gcd(2**40, 2**35 * 3) == 2**35

    def test_zero_conventions(self):
        """gcd(0, n) = n, gcd(m, 0) = m, gcd(0, 0) = 0."""
        assert gcd(0, 9) == 9
        assert gcd(9, 0) == 9
        assert gcd(0, 0) == 0

    def test_symmetry(self):
        for m in range(0, 30):
            for n in range(0, 30):
                assert gcd(m, n) == gcd(n, m)

    def test_idempotent(self):
        for m in (1, 2, 7, 144, 10**12):
            assert gcd(m, m) == m

    def test_divides_both(self):
        for m, n in [(48, 180), (1071, 462), (270, 192)]:
            d = gcd(m, n)
            assert m % d == 0
            assert n % d == 0

    def test_negative_raises(self):
        with pytest.raises(InvalidArgumentError, match="non-negative") as exc_info:
            gcd(-4, 6)

        assert exc_info.value.operation == "gcd"

    def test_non_integer_raises(self):
        with pytest.raises(InvalidArgumentError, match="must be an integer"):
            gcd(4.0, 6)
        with pytest.raises(InvalidArgumentError, match="got bool"):
            gcd(True, 6)


class TestGcdList:
    """Тесты gcd_list(values)."""

    def test_fold(self):
        assert gcd_list([12, 18, 30]) == 6
        assert gcd_list([0, 0, 5]) == 5
        assert gcd_list([7, 14, 21, 28]) == 7

    def test_singleton_convention(self):
        """gcd([a]) = a."""
        for a in (0, 1, 13, 10**9):
            assert gcd_list([a]) == a

    def test_tuple_input(self):
        assert gcd_list((8, 12)) == 4

    def test_empty_raises(self):
        with pytest.raises(EmptyInputError) as exc_info:
            gcd_list([])

        assert exc_info.value.kind == ErrorKind.EMPTY_INPUT
        assert exc_info.value.operation == "gcd_list"

    def test_negative_element_raises(self):
        with pytest.raises(InvalidArgumentError, match=r"values\[2\]"):
            gcd_list([4, 8, -2])


# =============================================================================
# ТЕСТЫ: lcm
# =============================================================================


class TestLcm:
    """Тесты lcm(m, n)."""

    def test_known_values(self):
        assert lcm(4, 6) == 12
        assert lcm(7, 13) == 91
        assert lcm(1, 1) == 1
        assert lcm(21, 6) == 42

    def test_gcd_identity(self):
        """lcm(m, n) * gcd(m, n) == m * n."""
        for m in range(1, 40):
            for n in range(1, 40):
                assert lcm(m, n) * gcd(m, n) == m * n

    def test_large_values_exact(self):
        m = 2**62 - 1
        n = 2**61 - 1
        assert lcm(m, n) * gcd(m, n) == m * n

    def test_zero_operand_raises(self):
        """lcm с нулём отклоняется, а не возвращает 0."""
        with pytest.raises(InvalidArgumentError):
            lcm(5, 0)

        with pytest.raises(OutOfRangeError) as exc_info:
            lcm(0, 5)

        assert exc_info.value.kind == ErrorKind.OUT_OF_RANGE
        assert exc_info.value.operation == "lcm"

    def test_negative_raises(self):
        with pytest.raises(InvalidArgumentError, match="non-negative"):
            lcm(-3, 5)


class TestLcmList:
    """Тесты lcm_list(values)."""

    def test_fold(self):
        assert lcm_list([2, 3, 4]) == 12
        assert lcm_list([4, 6]) == 12
        assert lcm_list(list(range(1, 21))) == 232792560

    def test_three_or_more_values_folded_pairwise(self):
        """product / gcd неверна для трёх значений, свёртка даёт верный ответ."""
        assert lcm_list([2, 4, 8]) == 8
        assert lcm_list([6, 10, 15]) == 30

    def test_singleton_convention(self):
        """lcm([a]) = a."""
        for a in (1, 5, 10**12):
            assert lcm_list([a]) == a

    def test_empty_raises(self):
        with pytest.raises(EmptyInputError):
            lcm_list([])

    def test_zero_element_raises(self):
        with pytest.raises(InvalidArgumentError):
            lcm_list([4, 0, 6])

        with pytest.raises(OutOfRangeError, match=r"values\[1\]"):
            lcm_list([4, 0])

    def test_singleton_zero_raises(self):
        with pytest.raises(OutOfRangeError):
            lcm_list([0])
