"""
Tests for the bounded integer primitives

Checked:
1. Domain limits and membership
2. Checked arithmetic reports overflow instead of wrapping
3. Saturating arithmetic clamps to the limits
4. Exact integer square roots
5. Parity and divisibility flags
"""

import pytest

from symalg.numeric import (
    INT_MAX,
    INT_MIN,
    checked_add,
    checked_div,
    checked_mul,
    checked_neg,
    checked_sub,
    in_domain,
    is_even,
    is_factor_of,
    is_int,
    is_odd,
    is_perfect_square,
    saturate,
    saturating_add,
    saturating_mul,
    sqrt_i,
)


# =============================================================================
# Domain
# =============================================================================


class TestDomain:
    """The 32-bit signed domain."""

    def test_limits(self):
        assert INT_MAX == 2147483647
        assert INT_MIN == -2147483648

    def test_membership(self):
        assert in_domain(0)
        assert in_domain(INT_MAX)
        assert in_domain(INT_MIN)
        assert not in_domain(INT_MAX + 1)
        assert not in_domain(INT_MIN - 1)

    def test_is_int_excludes_bools_and_floats(self):
        assert is_int(3)
        assert not is_int(True)
        assert not is_int(3.0)

    def test_saturate(self):
        assert saturate(10) == 10
        assert saturate(INT_MAX + 100) == INT_MAX
        assert saturate(INT_MIN - 100) == INT_MIN


# =============================================================================
# Checked and saturating arithmetic
# =============================================================================


class TestCheckedArithmetic:
    """Checked operations return None when the exact result leaves the domain."""

    def test_add(self):
        assert checked_add(2, 3) == 5
        assert checked_add(INT_MAX, 1) is None
        assert checked_add(INT_MIN, -1) is None
        assert checked_add(INT_MIN, INT_MAX) == -1

    def test_neg(self):
        assert checked_neg(5) == -5
        assert checked_neg(INT_MAX) == -INT_MAX
        assert checked_neg(INT_MIN) is None

    def test_sub(self):
        assert checked_sub(3, 5) == -2
        assert checked_sub(INT_MIN, 1) is None
        assert checked_sub(0, INT_MIN) is None

    def test_mul(self):
        assert checked_mul(-7, 6) == -42
        assert checked_mul(65536, 65536) is None
        assert checked_mul(INT_MIN, 1) == INT_MIN
        assert checked_mul(INT_MIN, -1) is None

    def test_div_truncates_toward_zero(self):
        assert checked_div(7, 2) == 3
        assert checked_div(-7, 2) == -3
        assert checked_div(7, -2) == -3
        assert checked_div(-7, -2) == 3

    def test_div_failures(self):
        assert checked_div(1, 0) is None
        assert checked_div(INT_MIN, -1) is None


class TestSaturatingArithmetic:
    """Saturating operations clamp to the nearest limit."""

    def test_add(self):
        assert saturating_add(1, 2) == 3
        assert saturating_add(INT_MAX, 1) == INT_MAX
        assert saturating_add(INT_MIN, -1) == INT_MIN

    def test_mul_follows_sign_of_true_product(self):
        assert saturating_mul(65536, 65536) == INT_MAX
        assert saturating_mul(-65536, 65536) == INT_MIN
        assert saturating_mul(-65536, -65536) == INT_MAX


# =============================================================================
# Roots and flags
# =============================================================================


class TestSqrtI:
    """Exact integer square roots."""

    def test_negative_has_no_root(self):
        assert sqrt_i(-1) is None
        assert sqrt_i(-4) is None

    def test_zero_and_one(self):
        assert sqrt_i(0) == 0
        assert sqrt_i(1) == 1

    @pytest.mark.parametrize("root", [2, 3, 10, 99, 46340])
    def test_perfect_squares(self, root):
        assert sqrt_i(root * root) == root

    @pytest.mark.parametrize("n", [2, 3, 8, 15, 99, INT_MAX])
    def test_non_squares(self, n):
        assert sqrt_i(n) is None
        assert not is_perfect_square(n)


class TestFlags:
    """Parity is sign independent; divisibility excludes zero divisors."""

    def test_parity(self):
        assert is_odd(3) and is_odd(-3)
        assert is_even(0) and is_even(-4)
        assert not is_odd(INT_MIN)

    def test_factor_of(self):
        assert is_factor_of(3, 12)
        assert is_factor_of(-3, 12)
        assert not is_factor_of(5, 12)
        assert not is_factor_of(0, 12)
        assert is_factor_of(7, 0)
