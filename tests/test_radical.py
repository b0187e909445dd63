"""
Tests for radicals and the radical reducer

Checked:
1. Construction surface: Radical(coef, rad), Radical.of, Radical.whole
2. Negative radicands are Complex, zero and unit radicands are integers
3. Perfect squares reduce to Numbers
4. The greatest perfect square is pulled out of the radicand
5. Overflow of the coefficient while extracting
"""

import pytest

from symalg.atoms import Number
from symalg.exceptions import ConstructionError
from symalg.exprs import Radical, greatest_square_factor, simplify_radical
from symalg.numeric import INT_MAX, INT_MIN


# =============================================================================
# Construction
# =============================================================================


class TestRadicalConstruction:
    """Radicals hold two bounded integers."""

    def test_defaults(self):
        assert Radical() == Radical(1, 1)
        assert Radical.of(5) == Radical(1, 5)
        assert Radical.whole(7) == Radical(7, 1)

    def test_rejects_out_of_domain(self):
        with pytest.raises(ConstructionError):
            Radical(INT_MAX + 1, 2)
        with pytest.raises(ConstructionError):
            Radical(1, 2.0)

    def test_structural_equality(self):
        assert Radical(2, 2) == Radical(2, 2)
        assert Radical(2, 2) != Radical(1, 8)
        assert Radical(3, 1) != Number(3)
        assert hash(Radical(2, 3)) == hash(Radical(2, 3))

    def test_squared(self):
        assert Radical(2, 3).squared() == 12
        assert Radical(-2, 3).squared() == 12
        assert Radical(2 ** 20, 2 ** 20).squared().is_positive_huge()

    def test_sign(self):
        assert Radical(3, 2).is_positive()
        assert Radical(-3, 2).is_negative()
        assert Radical(1, -1).sign() is None


# =============================================================================
# Reducer
# =============================================================================


class TestRadicalSimplify:
    """Reduction to canonical form."""

    def test_negative_radicand_is_complex(self):
        assert Radical(1, -1).simplify().is_complex()
        assert Radical(5, -4).simplify().is_complex()

    def test_zero(self):
        assert Radical(7, 0).simplify() == 0
        assert Radical(0, 5).simplify() == 0

    def test_unit_radicand(self):
        assert Radical(7, 1).simplify() == 7
        assert Radical(-7, 1).simplify() == -7

    def test_perfect_square(self):
        assert Radical(5, 9).simplify() == 15
        assert Radical(-2, 4).simplify() == -4

    def test_extraction(self):
        assert Radical(1, 8).simplify() == Radical(2, 2)
        assert Radical(3, 12).simplify() == Radical(6, 3)
        assert Radical(1, 72).simplify() == Radical(6, 2)

    def test_sign_is_preserved(self):
        assert Radical(-1, 8).simplify() == Radical(-2, 2)

    def test_square_free_is_unchanged(self):
        assert Radical(1, 2).simplify() == Radical(1, 2)
        assert Radical(4, 30).simplify() == Radical(4, 30)

    def test_overflowing_square_extracts_from_radicand(self):
        assert Radical(50000, 8).simplify() == Radical(100000, 2)

    def test_overflowing_coefficient(self):
        assert Radical(INT_MAX, 4).simplify().is_positive_huge()
        assert Radical(INT_MIN, 4).simplify().is_negative_huge()
        assert Radical(INT_MAX, 8).simplify().is_positive_huge()

    def test_idempotent(self):
        once = Radical(3, 50).simplify()
        assert once == Radical(15, 2)
        assert once.simplify() == once

    def test_simplify_radical_directly(self):
        assert simplify_radical(2, 2) == Radical(2, 2)
        assert simplify_radical(1, 16) == Number(4)


class TestGreatestSquareFactor:
    """root * root * cofactor == n with the largest possible root."""

    @pytest.mark.parametrize("n,root,cofactor", [
        (8, 2, 2),
        (72, 6, 2),
        (7, 1, 7),
        (36, 6, 1),
        (1, 1, 1),
    ])
    def test_examples(self, n, root, cofactor):
        assert greatest_square_factor(n) == (root, cofactor)
