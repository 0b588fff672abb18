"""
ContinuedFraction — модель простой цепной дроби

Immutable Pydantic модель над списком членов [a0, a1, ..., a_m].
Обёртка над src.core.math.continued_fraction для сериализации в JSON
и передачи разложения как значения.
"""

from fractions import Fraction
from typing import Optional

from pydantic import BaseModel, Field, StrictInt

from src.core.math.continued_fraction import (
    ContinuedFractionConfig,
    continued_fraction_convergents,
    continued_fraction_to_fraction,
    from_continued_fraction,
    to_continued_fraction,
)


class ContinuedFraction(BaseModel):
    """
    Простая цепная дробь a0 + 1/(a1 + 1/(a2 + ...)).

    terms[0] — целая часть (может быть отрицательной).
    """

    terms: list[StrictInt] = Field(
        ..., min_length=1, description="Члены цепной дроби, terms[0] — целая часть"
    )

    model_config = {"frozen": True}

    @classmethod
    def from_real(
        cls, x: float, config: Optional[ContinuedFractionConfig] = None
    ) -> "ContinuedFraction":
        """Разложение x согласно политике config (default: ContinuedFractionConfig())."""
        config = config or ContinuedFractionConfig()
        return cls(terms=to_continued_fraction(x, config.max_terms, config.cut))

    def __len__(self) -> int:
        return len(self.terms)

    def value(self, n: Optional[int] = None) -> float:
        """Значение float по первым n членам (None -> все)."""
        return from_continued_fraction(self.terms, n)

    def to_fraction(self, n: Optional[int] = None) -> Fraction:
        """Точное рациональное значение по первым n членам."""
        return continued_fraction_to_fraction(self.terms, n)

    def convergents(self) -> list[Fraction]:
        return continued_fraction_convergents(self.terms)
