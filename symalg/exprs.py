# Expressions: compound values that simplify to an atom or a canonical form
#
# Fraction   num/den over two atoms
# Radical    coef * sqrt(rad) over two bounded integers
# ComplexNumber  real + imag i over two bounded integers
#
# Simplification never mutates; it returns a new Sym, and simplifying a
# canonical value returns an equal one. Equality is structural and does not
# simplify, so a Fraction never equals a Radical even when both denote the
# same number, and an expression holding a sentinel equals nothing.

from __future__ import annotations

import logging

from dataclasses       import dataclass
from typing            import Optional

from symalg.atoms      import (Atom, Complex, Number, Undefined, Unknown,
                               as_atom, bounded, huge_of_sign, epsilon_of_sign, one)
from symalg.env        import environment
from symalg.exceptions import ConstructionError
from symalg.factor     import factors, gcf
from symalg.numeric    import (INT_MAX, INT_MIN, checked_div, checked_mul,
                               in_domain, is_factor_of, is_int, sqrt_i)
from symalg.sym        import Sym

logger = logging.getLogger(__name__)


#
# Helpers
#

def bounded_int(x, role: str) -> int:
    if not is_int(x):
        raise ConstructionError(f'The {role} must be an integer, got {x!r}.')
    if not in_domain(x):
        raise ConstructionError(f'The {role} {x} lies outside [{INT_MIN}, {INT_MAX}].')
    return x

def int_sign(n: int) -> int:
    return (n > 0) - (n < 0)


#
# Expressions
#

class Expr(Sym):
    "A compound algebraic value that can be simplified."

    def is_expr(self) -> bool:
        return True

    def expr(self) -> Expr:
        return self

    def is_fraction(self) -> bool:
        return False

    def is_radical(self) -> bool:
        return False

    def is_complex_number(self) -> bool:
        return False

    def simplify(self) -> Sym:
        raise NotImplementedError

    def simplified(self) -> Sym:
        "Alias for simplify; values are immutable so nothing is consumed."
        return self.simplify()


@dataclass(frozen=True, eq=False, init=False)
class Fraction(Expr):
    """A fraction num/den whose parts are atoms.

    Fraction(num, den) accepts atoms or integers; Fraction() is 1/1.

    """
    num: Atom
    den: Atom

    def __init__(self, num: Atom | int = 1, den: Atom | int = 1) -> None:
        object.__setattr__(self, 'num', as_atom(num))
        object.__setattr__(self, 'den', as_atom(den))

    @classmethod
    def from_ints(cls, num: int, den: int) -> Fraction:
        return cls(Number(num), Number(den))

    @classmethod
    def from_atoms(cls, num: Atom, den: Atom) -> Fraction:
        if not isinstance(num, Atom) or not isinstance(den, Atom):
            raise ConstructionError(f'A fraction is built from two atoms, got {num!r} and {den!r}.')
        return cls(num, den)

    def is_fraction(self) -> bool:
        return True

    def sign(self) -> Optional[int]:
        num_sign = self.num.sign()
        den_sign = self.den.sign()
        if num_sign is None or den_sign is None or den_sign == 0:
            return None
        if num_sign == 0:
            return 0
        return 1 if (num_sign > 0) == (den_sign > 0) else -1

    def simplify(self) -> Sym:
        return simplify_fraction(self.num, self.den)

    def render(self, ascii_only: Optional[bool] = None) -> str:
        return f'{self.num.render(ascii_only)}/{self.den.render(ascii_only)}'

    def __repr__(self) -> str:
        return f'Fraction({self.num!r}, {self.den!r})'

    def __eq__(self, other) -> bool:
        if isinstance(other, Fraction):
            return self.num == other.num and self.den == other.den
        if isinstance(other, Sym):
            return False
        return NotImplemented

    def __hash__(self) -> int:
        return hash(('Fraction', self.num, self.den))


@dataclass(frozen=True, eq=False)
class Radical(Expr):
    """The square root coef * sqrt(rad) of bounded integers.

    Radical(coef, rad); Radical.of(rad) has coefficient 1 and
    Radical.whole(n) is the whole number n as a radical (radicand 1).

    """
    coef: int = 1
    rad: int = 1

    def __post_init__(self):
        bounded_int(self.coef, 'radical coefficient')
        bounded_int(self.rad, 'radicand')

    @classmethod
    def of(cls, rad: int) -> Radical:
        return cls(1, rad)

    @classmethod
    def whole(cls, n: int) -> Radical:
        return cls(n, 1)

    def is_radical(self) -> bool:
        return True

    def squared(self) -> Atom:
        "The square of the radical, coef^2 * rad, as an atom (Huge-class on overflow)."
        return bounded(self.coef * self.coef * self.rad)

    def sign(self) -> Optional[int]:
        if self.rad < 0:
            return None
        if self.rad == 0:
            return 0
        return int_sign(self.coef)

    def simplify(self) -> Sym:
        return simplify_radical(self.coef, self.rad)

    def render(self, ascii_only: Optional[bool] = None) -> str:
        if ascii_only is None:
            ascii_only = environment.ascii_only
        if self.rad == 1:
            return str(self.coef)
        root = f'sqrt({self.rad})' if ascii_only else f'√{self.rad}'
        if self.coef == 1:
            return root
        return f'{self.coef}*{root}' if ascii_only else f'{self.coef}{root}'

    def __eq__(self, other) -> bool:
        if isinstance(other, Radical):
            return self.coef == other.coef and self.rad == other.rad
        if isinstance(other, Sym):
            return False
        return NotImplemented

    def __hash__(self) -> int:
        return hash(('Radical', self.coef, self.rad))


@dataclass(frozen=True, eq=False)
class ComplexNumber(Expr):
    "The complex number real + imag i over bounded integers."
    real: int = 0
    imag: int = 1

    def __post_init__(self):
        bounded_int(self.real, 'real part')
        bounded_int(self.imag, 'imaginary part')

    def is_complex_number(self) -> bool:
        return True

    def sign(self) -> Optional[int]:
        if self.imag == 0:
            return int_sign(self.real)
        return None

    def simplify(self) -> Sym:
        return simplify_complex(self.real, self.imag)

    def render(self, ascii_only: Optional[bool] = None) -> str:
        if ascii_only is None:
            ascii_only = environment.ascii_only
        if self.imag == 0:
            return str(self.real)

        unit = 'i' if ascii_only else '𝑖'
        text = str(self.real) if self.real != 0 else ''
        if self.imag < 0:
            text += '-'
        elif self.real != 0:
            text += '+'
        if abs(self.imag) != 1:
            text += str(abs(self.imag))
        return text + unit

    def __eq__(self, other) -> bool:
        if isinstance(other, ComplexNumber):
            return self.real == other.real and self.imag == other.imag
        if isinstance(other, Sym):
            return False
        return NotImplemented

    def __hash__(self) -> int:
        return hash(('ComplexNumber', self.real, self.imag))


#
# Fraction Reducer
#

def reduce_ratio(n: int, d: int) -> Sym:
    "Reduces n/d for bounded integers n and d, with d nonzero."
    positive = (n >= 0) == (d >= 0)

    if is_factor_of(d, n):
        quotient = checked_div(n, d)
        if quotient is None:
            logger.debug('Exact quotient %d/%d overflows; reduced to Huge.', n, d)
            return huge_of_sign(positive)
        return Number(quotient)

    # Sign moves to the numerator; magnitudes are divided by their gcf
    g = gcf([abs(n), abs(d)])
    top = abs(n) // g
    bottom = abs(d) // g
    top_atom = bounded(top if positive else -top)
    bottom_atom = bounded(bottom)

    if top_atom.is_number() and bottom_atom.is_number():
        if bottom == 1:
            return top_atom
        return Fraction(top_atom, bottom_atom)
    # -INT_MIN does not fit: reduce again with the overflowing part as a sentinel
    return simplify_fraction(top_atom, bottom_atom)

def simplify_fraction(num: Atom, den: Atom) -> Sym:
    """Reduces num/den to its canonical Sym.

    Rules are tried in order and the first match wins:
      1. Complex on either side dominates.
      2. Undefined on either side, or a zero denominator, is Undefined.
      3. A zero numerator is 0.
      4. A denominator of 1 leaves the numerator.
      5. Unknown on either side is Unknown.
      6. Huge- or Epsilon-class over a Number keeps its class; the sign flips
         when the denominator is negative.
      7. Number over Number divides exactly or reduces by the gcf, with the
         sign carried by the numerator.
      8. Huge-class over Huge-class is Huge-class by sign agreement.
      9. Number or Epsilon-class over Huge-class is Epsilon-class.
     10. Anything over Epsilon-class is Huge-class, except Epsilon-class
         over Epsilon-class, whose ratio cannot be recovered: Unknown.

    """
    if num.is_complex() or den.is_complex():
        return Complex
    if num.is_undefined() or den.is_undefined() or den.is_zero():
        return Undefined
    if num.is_zero():
        return Number(0)
    if den == one:
        return num
    if num.is_unknown() or den.is_unknown():
        return Unknown

    positive = num.is_positive() == den.is_positive()

    if (num.is_huge() or num.is_epsilon()) and den.is_number():
        return -num if num.is_positive() != den.is_positive() else num

    if isinstance(num, Number) and isinstance(den, Number):
        return reduce_ratio(num.value, den.value)

    if num.is_huge() and den.is_huge():
        return huge_of_sign(positive)

    if den.is_huge():
        return epsilon_of_sign(positive)

    # den is Epsilon-class
    if num.is_epsilon():
        logger.debug('Ratio of two epsilons %r/%r is Unknown.', num, den)
        return Unknown
    return huge_of_sign(positive)


#
# Radical Reducer
#

def greatest_square_factor(n: int) -> tuple[int, int]:
    """Finds the greatest perfect square dividing n > 0.

    Returns (root, cofactor) with root * root * cofactor == n, searching
    every factor pair of n in both orders. The pair (1, n) always
    qualifies, so the search cannot come up empty.

    """
    best_root, best_cofactor = 1, n
    for f in factors(n):
        for a, b in ((f.common, f.associated), (f.associated, f.common)):
            a_root = sqrt_i(a)
            if a_root is not None and a_root > best_root:
                best_root, best_cofactor = a_root, b
    return best_root, best_cofactor

def simplify_radical(coef: int, rad: int) -> Sym:
    """Reduces coef * sqrt(rad) to its canonical Sym.

    A negative radicand is Complex, a zero radicand (or coefficient) is 0,
    and a radicand of 1 leaves the coefficient. A perfect square radicand
    gives a Number. Otherwise the greatest perfect square is pulled out of
    coef^2 * rad, leaving a radicand with no square factor above 1. The
    coefficient keeps its sign.

    """
    if rad < 0:
        return Complex
    if rad == 0 or coef == 0:
        return Number(0)
    if rad == 1:
        return Number(coef)

    sign = int_sign(coef)
    root = sqrt_i(rad)
    if root is not None:
        product = checked_mul(coef, root)
        if product is None:
            return huge_of_sign(sign > 0)
        return Number(product)

    square = coef * coef * rad
    if in_domain(square):
        new_root, new_rad = greatest_square_factor(square)
        return Radical(sign * new_root, new_rad)

    # coef^2 * rad overflows: extract from the radicand alone
    rad_root, new_rad = greatest_square_factor(rad)
    new_coef = checked_mul(coef, rad_root)
    if new_coef is None:
        logger.debug('Coefficient of %d*sqrt(%d) overflows on extraction.', coef, rad)
        return huge_of_sign(sign > 0)
    return Radical(new_coef, new_rad)


#
# Complex Reducer
#

def simplify_complex(real: int, imag: int) -> Sym:
    if imag == 0:
        return Number(real)
    return ComplexNumber(real, imag)


#
# Info tags
#

setattr(simplify_fraction, '__info__', 'simplify::fraction')
setattr(simplify_radical, '__info__', 'simplify::radical')
setattr(simplify_complex, '__info__', 'simplify::complex')
