"""
Core math modules для numtheory-core

Теоретико-числовые примитивы: цепные дроби, GCD/LCM, алгебра перестановок.
"""

# Numerical Safeguards
from src.core.math.numerical_safeguards import (
    # Epsilon constants
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    # Float checks
    is_close,
    is_valid_float,
    # Integer validation
    as_index,
    require_non_empty,
    require_non_negative,
    require_positive,
    require_term_count,
)

# Continued Fractions
from src.core.math.continued_fraction import (
    DEFAULT_CUT,
    DEFAULT_MAX_TERMS,
    ContinuedFractionConfig,
    continued_fraction_convergents,
    continued_fraction_to_fraction,
    from_continued_fraction,
    to_continued_fraction,
)

# GCD / LCM
from src.core.math.integer_arithmetic import (
    gcd,
    gcd_list,
    lcm,
    lcm_list,
)

# Permutations
from src.core.math.permutations import (
    DEFAULT_CHECKER,
    BijectionChecker,
    PermutationChecker,
    compose_permutations,
    identity_permutation,
    invert_permutation,
    is_valid_permutation,
)

__all__ = [
    # Numerical Safeguards — Epsilon constants
    "EPS_FLOAT_COMPARE_ABS",
    "EPS_FLOAT_COMPARE_REL",
    # Numerical Safeguards — Float checks
    "is_close",
    "is_valid_float",
    # Numerical Safeguards — Integer validation
    "as_index",
    "require_non_empty",
    "require_non_negative",
    "require_positive",
    "require_term_count",
    # Continued Fractions
    "DEFAULT_CUT",
    "DEFAULT_MAX_TERMS",
    "ContinuedFractionConfig",
    "continued_fraction_convergents",
    "continued_fraction_to_fraction",
    "from_continued_fraction",
    "to_continued_fraction",
    # GCD / LCM
    "gcd",
    "gcd_list",
    "lcm",
    "lcm_list",
    # Permutations
    "DEFAULT_CHECKER",
    "BijectionChecker",
    "PermutationChecker",
    "compose_permutations",
    "identity_permutation",
    "invert_permutation",
    "is_valid_permutation",
]
