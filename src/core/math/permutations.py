"""
Permutations — алгебра перестановок индексов

Перестановка размера N — вектор, в котором каждое значение из {0, ..., N-1}
встречается ровно один раз: позиция — прообраз, значение — образ.

- invert_permutation(perm): result[perm[i]] = i
- compose_permutations(perm, sigma): result[i] = perm[sigma[i]]
  (perm ∘ sigma: сначала sigma, затем perm)

Проверка валидности вынесена в PermutationChecker и передаётся в операции
параметром, поэтому алгебра не зависит от того, как решается валидность.
По умолчанию используется BijectionChecker.

Входные векторы не модифицируются; каждая операция возвращает новый список.
"""

from typing import Any, Protocol, Sequence

from src.core.errors import InvalidArgumentError, InvalidPermutationError
from src.core.math.numerical_safeguards import require_non_negative


# =============================================================================
# VALIDITY
# =============================================================================


def is_valid_permutation(perm: Sequence[Any]) -> bool:
    """
    Проверка, что вектор является биекцией {0, ..., N-1} на себя.

    Пустой вектор — валидная перестановка размера 0.
    bool и float не считаются индексами.

    Examples:
        >>> is_valid_permutation([2, 0, 1])
        True
        >>> is_valid_permutation([0, 0])
        False
        >>> is_valid_permutation([1, 2])
        False
    """
    size = len(perm)
    seen = [False] * size
    for value in perm:
        if isinstance(value, bool) or not hasattr(value, "__index__"):
            return False
        index = value.__index__()
        if index < 0 or index >= size or seen[index]:
            return False
        seen[index] = True
    return True


class PermutationChecker(Protocol):
    """Проверка валидности перестановки."""

    def is_valid(self, perm: Sequence[Any]) -> bool:
        ...


class BijectionChecker:
    """PermutationChecker по умолчанию: is_valid_permutation."""

    def is_valid(self, perm: Sequence[Any]) -> bool:
        return is_valid_permutation(perm)


DEFAULT_CHECKER: PermutationChecker = BijectionChecker()


def _require_valid(
    perm: Sequence[Any], checker: PermutationChecker, operation: str, name: str
) -> list[int]:
    if not checker.is_valid(perm):
        raise InvalidPermutationError(operation, f"{name} is not a valid permutation: {list(perm)}")
    return [value.__index__() for value in perm]


# =============================================================================
# ALGEBRA
# =============================================================================


def identity_permutation(size: int) -> list[int]:
    """
    Тождественная перестановка [0, 1, ..., size-1].

    Raises:
        InvalidArgumentError: если size не целое или отрицательное
    """
    size = require_non_negative(size, "identity_permutation", "size")
    return list(range(size))


def invert_permutation(
    perm: Sequence[int], checker: PermutationChecker = DEFAULT_CHECKER
) -> list[int]:
    """
    Обратная перестановка.

    Args:
        perm: Перестановка
        checker: Проверка валидности (default: BijectionChecker)

    Returns:
        Перестановка inv такая, что inv[perm[i]] = i

    Raises:
        InvalidPermutationError: если checker отклонил perm

    Examples:
        >>> invert_permutation([2, 0, 1])
        [1, 2, 0]
    """
    mapping = _require_valid(perm, checker, "invert_permutation", "perm")

    result = [0] * len(mapping)
    for i, image in enumerate(mapping):
        result[image] = i
    return result


def compose_permutations(
    perm: Sequence[int],
    sigma: Sequence[int],
    checker: PermutationChecker = DEFAULT_CHECKER,
) -> list[int]:
    """
    Композиция перестановок perm ∘ sigma = perm(sigma).

    Args:
        perm: Перестановка, применяемая второй
        sigma: Перестановка, применяемая первой
        checker: Проверка валидности (default: BijectionChecker)

    Returns:
        result[i] = perm[sigma[i]]

    Raises:
        InvalidPermutationError: если checker отклонил perm или sigma
        InvalidArgumentError: если размеры не совпадают

    Examples:
        >>> compose_permutations([1, 0, 2], [2, 0, 1])
        [2, 1, 0]
    """
    outer = _require_valid(perm, checker, "compose_permutations", "perm")
    inner = _require_valid(sigma, checker, "compose_permutations", "sigma")

    if len(outer) != len(inner):
        raise InvalidArgumentError(
            "compose_permutations",
            f"size mismatch: len(perm)={len(outer)}, len(sigma)={len(inner)}",
        )

    return [outer[image] for image in inner]
