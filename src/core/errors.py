"""
Errors — единая иерархия ошибок теоретико-числового ядра

Каждая ошибка несёт:
- kind: тип нарушения (ErrorKind)
- operation: имя операции, в которой нарушение обнаружено

Вызывающий код различает "пустой список", "ноль членов", "невалидная
перестановка" и "вырожденный аргумент" по типу исключения или по kind,
без разбора текста сообщения.

Иерархия:
    NumberTheoryError (ValueError)
    ├── InvalidArgumentError
    │   └── OutOfRangeError
    ├── EmptyInputError
    └── InvalidPermutationError

OutOfRangeError является частным случаем InvalidArgumentError: ноль членов
разложения и нулевой операнд LCM ловятся как любой из двух типов.
"""

from enum import Enum
from typing import ClassVar


class ErrorKind(str, Enum):
    """Тип нарушения контракта."""

    OUT_OF_RANGE = "OUT_OF_RANGE"
    EMPTY_INPUT = "EMPTY_INPUT"
    INVALID_PERMUTATION = "INVALID_PERMUTATION"
    INVALID_ARGUMENT = "INVALID_ARGUMENT"


class NumberTheoryError(ValueError):
    """
    Базовая ошибка ядра.

    Args:
        operation: Имя операции-источника (например, "lcm_list")
        detail: Дополнительное описание (optional)
    """

    kind: ClassVar[ErrorKind] = ErrorKind.INVALID_ARGUMENT

    def __init__(self, operation: str, detail: str = "") -> None:
        self.operation = operation
        self.detail = detail
        message = f"{operation}(): {self.kind.value}"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)


class InvalidArgumentError(NumberTheoryError):
    """Вырожденный или некорректный аргумент (несовпадение размеров, не-целое и т.п.)."""

    kind = ErrorKind.INVALID_ARGUMENT


class OutOfRangeError(InvalidArgumentError):
    """Аргумент вне допустимого диапазона (ноль членов, нулевой операнд LCM)."""

    kind = ErrorKind.OUT_OF_RANGE


class EmptyInputError(NumberTheoryError):
    """Пустая последовательность там, где нужен хотя бы один элемент."""

    kind = ErrorKind.EMPTY_INPUT


class InvalidPermutationError(NumberTheoryError):
    """Вектор не прошёл проверку валидности перестановки."""

    kind = ErrorKind.INVALID_PERMUTATION
