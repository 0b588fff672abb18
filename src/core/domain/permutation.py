"""
Permutation — модель перестановки индексов

Immutable Pydantic модель. Валидность (биекция {0, ..., N-1}) проверяется
при создании, поэтому операции над моделью не могут получить невалидный вход.
"""

from pydantic import BaseModel, Field, StrictInt, field_validator

from src.core.math.permutations import (
    compose_permutations,
    identity_permutation,
    invert_permutation,
    is_valid_permutation,
)


class Permutation(BaseModel):
    """
    Перестановка: mapping[i] — образ индекса i.
    """

    mapping: list[StrictInt] = Field(..., description="Образы индексов 0..N-1")

    model_config = {"frozen": True}

    @field_validator("mapping")
    @classmethod
    def _check_bijection(cls, value: list[int]) -> list[int]:
        if not is_valid_permutation(value):
            raise ValueError(f"mapping is not a valid permutation: {value}")
        return value

    @classmethod
    def identity(cls, size: int) -> "Permutation":
        return cls(mapping=identity_permutation(size))

    @property
    def size(self) -> int:
        return len(self.mapping)

    def inverse(self) -> "Permutation":
        return Permutation(mapping=invert_permutation(self.mapping))

    def compose(self, other: "Permutation") -> "Permutation":
        """Композиция self ∘ other: сначала other, затем self."""
        return Permutation(mapping=compose_permutations(self.mapping, other.mapping))
