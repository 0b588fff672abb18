"""
Core number-theoretic primitives, value models, and contracts.

Everything here is pure and stateless: continued fractions, GCD/LCM and
permutation algebra, with a shared error hierarchy in src.core.errors.
"""
