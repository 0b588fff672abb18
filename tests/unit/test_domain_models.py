"""
Tests for Pydantic value models

- ContinuedFraction: разложение, значение, точная дробь, JSON
- Permutation: валидация биекции, обращение, композиция, JSON
"""

import math
from fractions import Fraction

import pytest
from pydantic import ValidationError

from src.core.domain import ContinuedFraction, Permutation
from src.core.errors import InvalidArgumentError
from src.core.math import is_valid_permutation
from src.core.math.continued_fraction import ContinuedFractionConfig


# =============================================================================
# ContinuedFraction
# =============================================================================


class TestContinuedFractionModel:
    """ContinuedFraction модель."""

    def test_from_real_default_config(self):
        cf = ContinuedFraction.from_real(0.75)
        assert cf.terms == [0, 1, 3]
        assert len(cf) == 3

    def test_from_real_with_config(self):
        cf = ContinuedFraction.from_real(math.pi, ContinuedFractionConfig(max_terms=2))
        assert cf.terms == [3, 7]

        cf = ContinuedFraction.from_real(math.pi, ContinuedFractionConfig(max_terms=10, cut=100))
        assert cf.terms == [3, 7, 15, 1]

    def test_value_and_fraction(self):
        cf = ContinuedFraction(terms=[3, 7, 15, 1])
        assert cf.value() == pytest.approx(355 / 113)
        assert cf.value(n=2) == pytest.approx(22 / 7)
        assert cf.to_fraction() == Fraction(355, 113)
        assert cf.to_fraction(n=1) == Fraction(3)
        assert cf.convergents()[-1] == Fraction(355, 113)

    def test_empty_terms_rejected(self):
        with pytest.raises(ValidationError):
            ContinuedFraction(terms=[])

    def test_bool_terms_rejected(self):
        with pytest.raises(ValidationError):
            ContinuedFraction(terms=[True, 2])

    def test_frozen(self):
        cf = ContinuedFraction(terms=[1, 2])
        with pytest.raises(ValidationError):
            cf.terms = [3]

    def test_json_round_trip(self):
        cf = ContinuedFraction(terms=[-3, 2])
        restored = ContinuedFraction.model_validate_json(cf.model_dump_json())
        assert restored == cf
        assert cf.model_dump() == {"terms": [-3, 2]}


# =============================================================================
# Permutation
# =============================================================================


class TestPermutationModel:
    """Permutation модель."""

    def test_valid_mapping(self):
        p = Permutation(mapping=[2, 0, 1])
        assert p.size == 3

    def test_invalid_mapping_rejected(self):
        with pytest.raises(ValidationError, match="not a valid permutation"):
            Permutation(mapping=[0, 0])

        with pytest.raises(ValidationError):
            Permutation(mapping=[1, 2])

    def test_bool_and_float_entries_rejected(self):
        """Модель согласована с is_valid_permutation: bool и float не индексы."""
        assert not is_valid_permutation([True, False])
        with pytest.raises(ValidationError):
            Permutation(mapping=[True, False])
        with pytest.raises(ValidationError):
            Permutation(mapping=[1.0, 0.0])

    def test_identity(self):
        assert Permutation.identity(3).mapping == [0, 1, 2]
        assert Permutation.identity(0).size == 0

    def test_inverse(self):
        p = Permutation(mapping=[2, 0, 1])
        assert p.inverse().mapping == [1, 2, 0]
        assert p.inverse().inverse() == p

    def test_compose_order(self):
        """self ∘ other: сначала other."""
        perm = Permutation(mapping=[1, 0, 2])
        sigma = Permutation(mapping=[2, 0, 1])
        assert perm.compose(sigma).mapping == [2, 1, 0]
        assert perm.compose(perm.inverse()) == Permutation.identity(3)

    def test_compose_size_mismatch(self):
        with pytest.raises(InvalidArgumentError, match="size mismatch"):
            Permutation(mapping=[1, 0]).compose(Permutation.identity(3))

    def test_json_round_trip(self):
        p = Permutation(mapping=[3, 1, 0, 2])
        restored = Permutation.model_validate_json(p.model_dump_json())
        assert restored == p

    def test_json_invalid_payload_rejected(self):
        with pytest.raises(ValidationError):
            Permutation.model_validate_json('{"mapping": [1, 1]}')
