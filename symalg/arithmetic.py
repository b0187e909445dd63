# Closed arithmetic over algebraic values
#
# Every operator takes two Syms and returns a Sym, whatever the inputs:
# overflow, division by zero and loss of information are values, not
# errors. Operands are simplified first, so the tables below only ever see
# canonical forms:
#
#   Atom           a Number or a sentinel
#   Fraction       Number/Number with a positive denominator of at least 2
#   Radical        a nonzero coefficient and a square-free radicand of at least 2
#   ComplexNumber  a nonzero imaginary part
#
# The placeholder Complex dominates everything, then Undefined. Combinations
# that have no representation give Unknown.

from __future__ import annotations

import logging

from typing            import Optional, Union

from symalg.atoms      import (Atom, Complex, Epsilon, Huge, NegativeHuge, Number, Undefined, Unknown,
                               bounded, epsilon_of_sign, huge_of_sign, negate_atom, one, zero)
from symalg.exceptions import ConstructionError
from symalg.exprs      import (ComplexNumber, Fraction, Radical,
                               simplify_complex, simplify_fraction, simplify_radical)
from symalg.factor     import gcf
from symalg.numeric    import (INT_MAX, INT_MIN, checked_add, checked_div, checked_mul,
                               checked_neg, checked_sub, is_even, is_factor_of, is_int,
                               saturating_add, saturating_mul)
from symalg.parsing.sym_strings import parse_sym
from symalg.sym        import Sym
from symalg.utils      import some

logger = logging.getLogger(__name__)


#
# Conversion
#

def promote(x) -> Optional[Sym]:
    "Converts an operator operand to a Sym, or returns None if it cannot take part."
    if isinstance(x, Sym):
        return x
    if is_int(x):
        return bounded(x)
    return None

def as_sym(x: Union[Sym, int, str]) -> Sym:
    """Converts x to an algebraic value.

    Integers become Numbers, or Huge/NegativeHuge outside the bounded domain.
    Strings are read as displayed values (see parse_sym) and are not
    simplified. Syms are returned unchanged.

    """
    if isinstance(x, str):
        return parse_sym(x)
    sym = promote(x)
    if sym is None:
        raise ConstructionError(f'Cannot convert {x!r} to an algebraic value.')
    return sym


#
# Classification Helpers
#

def is_sentinel(x: Sym) -> bool:
    return isinstance(x, Atom) and x.is_sentinel()

def is_huge(x: Sym) -> bool:
    return isinstance(x, Atom) and x.is_huge()

def is_epsilon(x: Sym) -> bool:
    return isinstance(x, Atom) and x.is_epsilon()

def is_unknown(x: Sym) -> bool:
    return isinstance(x, Atom) and x.is_unknown()

def is_zero_number(x: Sym) -> bool:
    return isinstance(x, Number) and x.value == 0

def dominant(a: Sym, b: Sym) -> Optional[Atom]:
    "Complex wins over everything, then Undefined; otherwise None."
    atoms = [x for x in (a, b) if isinstance(x, Atom)]
    if some(lambda x: x.is_complex(), atoms):
        return Complex
    if some(lambda x: x.is_undefined(), atoms):
        return Undefined
    return None

def at_least_one(x: Sym) -> Optional[bool]:
    """Is the magnitude of a nonzero value at least one? None when unknowable.

    Huge-class values and radicals are; Epsilon-class values are not;
    fractions compare their parts.

    """
    if isinstance(x, Number):
        return abs(x.value) >= 1
    if is_huge(x):
        return True
    if is_epsilon(x):
        return False
    if isinstance(x, Fraction):
        num, den = x.num.number(), x.den.number()
        if num is None or den is None:
            return None
        return abs(num) >= abs(den)
    if isinstance(x, Radical):
        return x.rad > 0 and x.coef * x.coef * x.rad >= 1
    return None

def agree(a: Sym, b: Sym) -> bool:
    "Is the product or quotient of a and b positive by the sign convention?"
    return a.is_positive() == b.is_positive()

def saturated(n: int) -> Atom:
    "Maps a saturated result to the sentinel of its side."
    if n == INT_MAX:
        return Huge
    if n == INT_MIN:
        return NegativeHuge
    return Number(n)

def unknown(message: str, *args) -> Atom:
    logger.debug(message, *args)
    return Unknown

def fraction_parts(x: Sym) -> tuple[Number, Number]:
    "Numerator and denominator of a Number or a canonical Fraction."
    if isinstance(x, Fraction):
        return x.num, x.den
    return x, one

def complex_parts(x: Sym) -> tuple[int, int]:
    if isinstance(x, ComplexNumber):
        return x.real, x.imag
    return x.value, 0

def complex_result(real: Optional[int], imag: Optional[int]) -> Sym:
    if real is None or imag is None:
        logger.debug('Complex number component leaves the bounded domain.')
        return Complex
    return simplify_complex(real, imag)

def is_complex_operand(x: Sym) -> bool:
    return isinstance(x, (ComplexNumber, Number))


#
# Negation
#

def neg(x: Sym) -> Sym:
    """Negates any value.

    Atoms swap sides (-INT_MIN is Huge); fractions negate the numerator,
    radicals the coefficient, and complex numbers both parts.

    """
    x = x.simplify()
    if isinstance(x, Atom):
        return negate_atom(x)
    if isinstance(x, Fraction):
        return simplify_fraction(negate_atom(x.num), x.den)
    if isinstance(x, Radical):
        coef = checked_neg(x.coef)
        if coef is None:
            return Huge
        return Radical(coef, x.rad)
    if isinstance(x, ComplexNumber):
        return complex_result(checked_neg(x.real), checked_neg(x.imag))
    return Unknown


#
# Addition and Subtraction
#

def add_numbers(a: int, b: int) -> Atom:
    total = checked_add(a, b)
    if total is not None:
        return Number(total)
    logger.debug('Sum %d + %d saturates.', a, b)
    return saturated(saturating_add(a, b))

def add_huge(h: Atom, x: Sym) -> Atom:
    "Huge-class plus a finite value of known sign."
    if is_huge(x):
        if h.type == x.type:
            return h
        return unknown('Sum of opposite huge values %r + %r is Unknown.', h, x)
    if x.sign() is None:
        return Unknown
    toward = x.is_zero() or (x.is_positive() if h.is_positive_huge() else x.is_negative())
    if toward:
        return h
    return unknown('Sum %r + %r falls back from the huge side.', h, x)

def add_epsilon(e: Atom, x: Sym) -> Sym:
    "Epsilon-class plus a value that is not Huge-class."
    if is_epsilon(x):
        if e.type == x.type:
            return e
        return unknown('Sum of opposite epsilons %r + %r is Unknown.', e, x)
    if x.is_zero():
        return e
    return x

def add(a: Sym, b: Sym) -> Sym:
    """Adds two values.

    Numbers add with overflow checking; a sum past the bounded domain is
    Huge or NegativeHuge. Fractions and Numbers add over a common
    denominator, radicals with equal radicands add coefficients. Huge-class
    values absorb operands of their own sign, epsilons are absorbed by any
    nonzero operand. Sums with no representation are Unknown.

    """
    a, b = a.simplify(), b.simplify()
    result = dominant(a, b)
    if result is not None:
        return result

    if isinstance(a, ComplexNumber) or isinstance(b, ComplexNumber):
        if is_complex_operand(a) and is_complex_operand(b):
            (ar, ai), (br, bi) = complex_parts(a), complex_parts(b)
            return complex_result(checked_add(ar, br), checked_add(ai, bi))
        return Complex

    if is_unknown(a) or is_unknown(b):
        return Unknown
    if isinstance(a, Number) and isinstance(b, Number):
        return add_numbers(a.value, b.value)
    if is_huge(a):
        return add_huge(a, b)
    if is_huge(b):
        return add_huge(b, a)
    if is_epsilon(a):
        return add_epsilon(a, b)
    if is_epsilon(b):
        return add_epsilon(b, a)
    if is_zero_number(a):
        return b
    if is_zero_number(b):
        return a

    if isinstance(a, (Number, Fraction)) and isinstance(b, (Number, Fraction)):
        (p, q), (r, s) = fraction_parts(a), fraction_parts(b)
        num, den = add(mul(p, s), mul(r, q)), mul(q, s)
        if is_sentinel(num) and is_sentinel(den):
            return unknown('Sum %r + %r overflows in numerator and denominator.', a, b)
        return div(num, den)

    if isinstance(a, Radical) and isinstance(b, Radical) and a.rad == b.rad:
        coef = checked_add(a.coef, b.coef)
        if coef is None:
            return huge_of_sign(a.coef > 0)
        return simplify_radical(coef, a.rad)

    return unknown('Sum %r + %r has no representation.', a, b)

def sub(a: Sym, b: Sym) -> Sym:
    """Subtracts b from a by adding its negation.

    Negating INT_MIN leaves the domain, so a Number minus Number(INT_MIN)
    is NegativeHuge rather than an attempt to recover the lost value.

    """
    a, b = a.simplify(), b.simplify()
    if isinstance(a, Number) and isinstance(b, Number):
        if b.value == INT_MIN:
            logger.debug('Subtracting %d from %d overflows on negation.', INT_MIN, a.value)
            return NegativeHuge
        return add_numbers(a.value, -b.value)
    return add(a, neg(b))


#
# Multiplication
#

def mul_numbers(a: int, b: int) -> Atom:
    product = checked_mul(a, b)
    if product is not None:
        return Number(product)
    logger.debug('Product %d * %d saturates.', a, b)
    return saturated(saturating_mul(a, b))

def mul_huge(h: Atom, x: Sym) -> Atom:
    "Huge-class times a nonzero finite value."
    big = at_least_one(x)
    if big is None or not big:
        return unknown('Product %r * %r of huge and small is Unknown.', h, x)
    return huge_of_sign(agree(h, x))

def mul_radical(r: Radical, x: Union[Radical, Number]) -> Sym:
    other_coef, other_rad = (x.coef, x.rad) if isinstance(x, Radical) else (x.value, 1)
    coef = checked_mul(r.coef, other_coef)
    if coef is None:
        logger.debug('Radical coefficient %d * %d overflows.', r.coef, other_coef)
        return huge_of_sign((r.coef > 0) == (other_coef > 0))
    rad = checked_mul(r.rad, other_rad)
    if rad is None:
        return unknown('Radicand %d * %d overflows.', r.rad, other_rad)
    return simplify_radical(coef, rad)

def mul(a: Sym, b: Sym) -> Sym:
    """Multiplies two values.

    Zero absorbs every finite value. Numbers multiply with overflow
    checking. A Huge-class value times anything of magnitude at least one
    stays Huge-class, while an Epsilon-class value times anything finite
    but Huge stays Epsilon-class; the sign follows sign agreement. Fractions
    are cross-cancelled before their parts multiply, and radicals multiply
    coefficients and radicands.

    """
    a, b = a.simplify(), b.simplify()
    result = dominant(a, b)
    if result is not None:
        return result

    if isinstance(a, ComplexNumber) or isinstance(b, ComplexNumber):
        if is_complex_operand(a) and is_complex_operand(b):
            (ar, ai), (br, bi) = complex_parts(a), complex_parts(b)
            products = [checked_mul(ar, br), checked_mul(ai, bi), checked_mul(ar, bi), checked_mul(ai, br)]
            if None in products:
                return complex_result(None, None)
            rr, ii, ri, ir = products
            return complex_result(checked_sub(rr, ii), checked_add(ri, ir))
        return Complex

    if is_zero_number(a) or is_zero_number(b):
        return zero
    if is_unknown(a) or is_unknown(b):
        return Unknown
    if isinstance(a, Number) and isinstance(b, Number):
        return mul_numbers(a.value, b.value)
    if is_huge(a):
        return mul_huge(a, b)
    if is_huge(b):
        return mul_huge(b, a)
    if is_epsilon(a) or is_epsilon(b):
        return epsilon_of_sign(agree(a, b))

    if isinstance(a, (Number, Fraction)) and isinstance(b, (Number, Fraction)):
        (p, q), (r, s) = fraction_parts(a), fraction_parts(b)
        g1 = gcf([p.value, s.value])
        g2 = gcf([r.value, q.value])
        num = mul(Number(p.value // g1), Number(r.value // g2))
        den = mul(Number(q.value // g2), Number(s.value // g1))
        if is_sentinel(num) and is_sentinel(den):
            return unknown('Product %r * %r overflows in numerator and denominator.', a, b)
        return div(num, den)

    if isinstance(a, Radical) and isinstance(b, (Radical, Number)):
        return mul_radical(a, b)
    if isinstance(b, Radical) and isinstance(a, Number):
        return mul_radical(b, a)

    return unknown('Product %r * %r has no representation.', a, b)


#
# Division
#

def div_radical(r: Radical, x: Sym) -> Sym:
    "A radical over a Number or a radical, when everything divides evenly."
    if isinstance(x, Number):
        coef, rad = x.value, 1
    elif isinstance(x, Radical):
        coef, rad = x.coef, x.rad
    elif is_huge(x):
        return epsilon_of_sign(agree(r, x))
    elif is_epsilon(x):
        return huge_of_sign(agree(r, x))
    else:
        return unknown('Quotient %r / %r has no representation.', r, x)

    if not is_factor_of(coef, r.coef) or not is_factor_of(rad, r.rad):
        return unknown('Quotient %r / %r is not exact.', r, x)
    new_coef = checked_div(r.coef, coef)
    if new_coef is None:
        return Huge
    return simplify_radical(new_coef, r.rad // rad)

def div(a: Sym, b: Sym) -> Sym:
    """Divides a by b.

    Two atoms form a Fraction that the fraction reducer simplifies, so
    division by zero is Undefined, by Huge gives Epsilon and by Epsilon
    gives Huge. Dividing by a fraction multiplies by its reciprocal.
    Radicals divide only when coefficients and radicands divide evenly.

    """
    a, b = a.simplify(), b.simplify()
    result = dominant(a, b)
    if result is not None:
        return result

    if isinstance(a, ComplexNumber) or isinstance(b, ComplexNumber):
        if isinstance(a, ComplexNumber) and isinstance(b, Number):
            if b.value == 0:
                return Undefined
            if is_factor_of(b.value, a.real) and is_factor_of(b.value, a.imag):
                return complex_result(checked_div(a.real, b.value), checked_div(a.imag, b.value))
        return Complex

    if b.is_zero():
        return Undefined
    if isinstance(a, Atom) and isinstance(b, Atom):
        return simplify_fraction(a, b)
    if isinstance(b, Fraction):
        return mul(a, Fraction(b.den, b.num))
    if isinstance(a, Fraction) and isinstance(b, Atom):
        return simplify_fraction(a.num, mul(a.den, b))
    if isinstance(a, Radical):
        return div_radical(a, b)
    if is_zero_number(a):
        return zero

    return unknown('Quotient %r / %r has no representation.', a, b)


#
# Exponentiation
#

def settle(partial: Atom, base: Sym, remaining: int) -> Atom:
    """Finishes a power once the running product has become a sentinel.

    One more multiplication shows the class the product keeps from here on;
    only its sign can still alternate, which the parity of the remaining
    count decides.

    """
    if remaining == 0 or not partial.is_defined() or partial.is_unknown():
        return partial
    after = mul(partial, base)
    if is_unknown(after):
        return after
    return partial if is_even(remaining) else after

def repeated_product(base: Sym, count: int) -> Sym:
    result: Sym = one
    for done in range(1, count + 1):
        result = mul(result, base)
        if is_sentinel(result):
            return settle(result, base, count - done)
    return result

def power_of(base: Sym, count: int) -> Sym:
    "base ** count for count >= 1; the cycles of -1 and of the units of i go by parity."
    if isinstance(base, Number) and base.value in (0, 1):
        return base
    if isinstance(base, Number) and base.value == -1:
        return Number(-1) if count & 1 else one
    if isinstance(base, Radical):
        square = base.squared()
        half = power_of(square, count // 2) if count >= 2 else one
        return mul(half, base) if count & 1 else half
    if isinstance(base, ComplexNumber) and base.real == 0 and abs(base.imag) == 1:
        turn = count % 4
        if turn == 0:
            return one
        if turn == 2:
            return Number(-1)
        return base if turn == 1 else neg(base)
    return repeated_product(base, count)

def pow_sentinel_exponent(base: Sym, exponent: Atom) -> Atom:
    if exponent.is_unknown() or base.sign() is None:
        return Unknown
    if base.is_negative():
        if exponent.is_epsilon():
            return Complex
        return unknown('Parity of %r is unknown for the negative base %r.', exponent, base)
    if exponent.is_epsilon():
        return unknown('%r ** %r is Unknown.', base, exponent)

    big = at_least_one(base)
    if big is None:
        return Unknown
    grows = big == exponent.is_positive_huge()
    return Huge if grows else Epsilon

def pow_fraction_exponent(base: Sym, exponent: Fraction) -> Sym:
    if base.sign() is None:
        return Unknown
    if base.is_negative():
        return Complex
    if isinstance(base, Number) and exponent.den == 2:
        raised = pow(base, exponent.num)
        if isinstance(raised, Number):
            return simplify_radical(1, raised.value)
        if is_huge(raised) or is_epsilon(raised):
            return raised
    return unknown('%r ** %r has no representation.', base, exponent)

def pow(base: Sym, exponent: Sym) -> Sym:
    """Raises base to exponent.

    Complex and then Undefined dominate, and a base of 0 or 1 is returned
    unchanged. An integer exponent multiplies the base by itself, so
    overflow turns into a sentinel midway and the sentinel carries on;
    a negative exponent takes the reciprocal. A sentinel exponent hides
    its parity: negative bases give Unknown, positive bases grow or shrink
    by whether they are above or below one. Half-integer exponents of a
    Number give radicals. Other exponents are Unknown for positive bases
    and Complex for negative ones.

    """
    base, exponent = base.simplify(), exponent.simplify()
    result = dominant(base, exponent)
    if result is not None:
        return result
    if isinstance(base, Number) and base.value in (0, 1):
        return base

    if isinstance(exponent, Number):
        e = exponent.value
        if e == 0:
            return one
        raised = power_of(base, abs(e))
        return raised if e > 0 else div(one, raised)

    if isinstance(base, ComplexNumber):
        return Complex
    if isinstance(exponent, Atom):
        return pow_sentinel_exponent(base, exponent)
    if isinstance(exponent, Fraction):
        return pow_fraction_exponent(base, exponent)
    if isinstance(exponent, ComplexNumber):
        return Complex

    if base.sign() is None:
        return Unknown
    if base.is_negative():
        return Complex
    return unknown('%r ** %r has no representation.', base, exponent)


#
# Info tags
#

setattr(as_sym, '__info__', 'values::conversion')
setattr(neg, '__info__', 'arithmetic')
setattr(add, '__info__', 'arithmetic')
setattr(sub, '__info__', 'arithmetic')
setattr(mul, '__info__', 'arithmetic')
setattr(div, '__info__', 'arithmetic')
setattr(pow, '__info__', 'arithmetic')
