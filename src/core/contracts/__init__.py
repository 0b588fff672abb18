"""
Contract Validation Module

Валидация JSON payload значений ядра (цепные дроби, перестановки).
"""

from .validators import (
    ContinuedFractionValidator,
    ContractValidator,
    PermutationValidator,
    SchemaRegistry,
    validate_continued_fraction,
    validate_permutation,
)

__all__ = [
    # Classes
    "SchemaRegistry",
    "ContractValidator",
    "ContinuedFractionValidator",
    "PermutationValidator",
    # Functions
    "validate_continued_fraction",
    "validate_permutation",
]
