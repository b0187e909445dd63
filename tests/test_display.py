"""
Tests for the display contract and display options

Checked:
1. Glyph rendering of every atom and expression
2. ASCII fallbacks, per call and through the environment
3. Rich presentation in panels
"""

import pytest
from rich.panel import Panel
from rich.text import Text

from symalg.atoms import (
    Complex,
    Epsilon,
    Huge,
    NegativeEpsilon,
    NegativeHuge,
    Number,
    Undefined,
    Unknown,
)
from symalg.env import environment
from symalg.exprs import ComplexNumber, Fraction, Radical
from symalg.output import RichSym, in_panel, styled
from symalg.utils import irange, show


@pytest.fixture
def ascii_mode():
    environment.on_ascii_only()
    yield environment
    environment.off_ascii_only()


# =============================================================================
# Glyphs
# =============================================================================


class TestGlyphRendering:
    """Default rendering uses the mathematical glyphs."""

    @pytest.mark.parametrize("value,text", [
        (Number(42), "42"),
        (Number(-7), "-7"),
        (Complex, "𝑖"),
        (Undefined, "∅"),
        (Huge, "𝓗"),
        (NegativeHuge, "-𝓗"),
        (Epsilon, "ε"),
        (NegativeEpsilon, "-ε"),
        (Unknown, "?"),
    ])
    def test_atoms(self, value, text):
        assert str(value) == text

    def test_fractions(self):
        assert str(Fraction(1, 2)) == "1/2"
        assert str(Fraction(Huge, 2)) == "𝓗/2"
        assert str(Fraction(-3, Epsilon)) == "-3/ε"

    @pytest.mark.parametrize("coef,rad,text", [
        (3, 1, "3"),
        (1, 5, "√5"),
        (3, 5, "3√5"),
        (-1, 5, "-1√5"),
    ])
    def test_radicals(self, coef, rad, text):
        assert str(Radical(coef, rad)) == text

    @pytest.mark.parametrize("real,imag,text", [
        (2, 3, "2+3𝑖"),
        (2, -1, "2-𝑖"),
        (0, 1, "𝑖"),
        (0, -4, "-4𝑖"),
        (5, 0, "5"),
    ])
    def test_complex_numbers(self, real, imag, text):
        assert str(ComplexNumber(real, imag)) == text


# =============================================================================
# ASCII fallbacks
# =============================================================================


class TestAsciiRendering:
    """ASCII fallbacks, per call or globally."""

    @pytest.mark.parametrize("value,text", [
        (Complex, "i"),
        (Undefined, "undefined"),
        (Huge, "H"),
        (NegativeHuge, "-H"),
        (Epsilon, "eps"),
        (NegativeEpsilon, "-eps"),
        (Unknown, "?"),
        (Radical(1, 5), "sqrt(5)"),
        (Radical(3, 5), "3*sqrt(5)"),
        (ComplexNumber(2, 3), "2+3i"),
        (Fraction(Huge, 2), "H/2"),
    ])
    def test_per_call(self, value, text):
        assert value.render(ascii_only=True) == text

    def test_environment(self, ascii_mode):
        assert str(Huge) == "H"
        assert str(Radical(2, 3)) == "2*sqrt(3)"

    def test_explicit_glyphs_override_environment(self, ascii_mode):
        assert Huge.render(ascii_only=False) == "𝓗"


# =============================================================================
# Rich output
# =============================================================================


class TestRichOutput:
    """Panels for interactive use, plain strings in ASCII mode."""

    def test_in_panel(self):
        assert isinstance(in_panel("x"), Panel)

    def test_in_panel_ascii(self, ascii_mode):
        assert in_panel("x") == "x"

    def test_styled(self):
        assert styled(Huge).style == "symalg.sentinel"
        assert styled(Radical(1, 2)).style == "symalg.radical"
        assert isinstance(styled(Number(1)), Text)

    def test_rich_sym(self):
        rich = RichSym(Fraction(1, 2), title="half")
        assert isinstance(rich.__symalg_repr__(), Panel)
        assert str(RichSym(Number(3))) == "3"

    def test_rich_sym_ascii(self, ascii_mode):
        assert RichSym(Huge).__symalg_repr__() == "H"

    def test_show(self):
        assert show(Number(3), print_it=False) == "3"
        assert show([Number(1), Huge], print_it=False) == "[1, 𝓗]"

    def test_console_str(self):
        assert environment.console_str("5").strip() == "5"


class TestEnvironment:
    """Theme and session switches."""

    def test_dark_and_bright_modes(self):
        environment.on_dark_mode()
        assert environment.dark_mode
        environment.on_bright_mode()
        assert not environment.dark_mode

    def test_interactive_mode(self):
        was_interactive = environment.is_interactive
        try:
            environment.interactive_mode(ascii=True)
            assert environment.is_interactive
            assert environment.ascii_only
            environment.interactive_mode()
            assert environment.ascii_only
        finally:
            environment.is_interactive = was_interactive
            environment.off_ascii_only()


class TestIrange:
    """Inclusive ranges."""

    def test_forms(self):
        assert list(irange(3)) == [1, 2, 3]
        assert list(irange(2, 6, step=2)) == [2, 4, 6]
        assert list(irange(5, 1, step=-2)) == [5, 3, 1]
        assert list(irange(1, 5, exclude={2, 4})) == [1, 3, 5]
