"""
Domain models and value objects.

Immutable Pydantic wrappers over continued fractions and permutations.
"""

from src.core.domain.continued_fraction import ContinuedFraction
from src.core.domain.permutation import Permutation

__all__ = [
    "ContinuedFraction",
    "Permutation",
]
