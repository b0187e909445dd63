from __future__        import annotations

from parsy import (
    ParseError,
    fail,
    peek,
    regex,
    seq,
    string,
    string_from,
    success,
    whitespace,
)

from symalg.atoms                import ASCII_GLYPHS, GLYPHS, SENTINELS, Complex, Number
from symalg.exceptions           import ParseFailure
from symalg.exprs                import ComplexNumber, Fraction, Radical
from symalg.numeric              import INT_MAX, INT_MIN, in_domain, integer_re
from symalg.parsing.parsy_adjust import generate, parse_error_message, with_desc, with_label
from symalg.sym                  import Sym

#
# Reads the display text of values back into unsimplified values. Both the
# glyph and the ASCII renderings are accepted:
#
#   17  -3  𝓗  -H  ε  -eps  ∅  undefined  ?  i
#   2/3  -𝓗/4  √5  -√5  3√5  sqrt(5)  3*sqrt(5)  2+3𝑖  -i  4i
#
# A bare i is the Complex placeholder atom, since that is how it displays.
#


#
# Basic Combinators
#

GLYPH_SENTINELS = {text: SENTINELS[variant]
                   for glyphs in (GLYPHS, ASCII_GLYPHS)
                   for variant, text in glyphs.items()}

in_range = f'an integer between {INT_MIN} and {INT_MAX}'

ws = with_label('whitespace', whitespace).optional()
sign_p = string_from('+', '-')
unit_p = with_label('the imaginary unit i', string_from('i', '𝑖'))

@generate
def bounded_integer():
    n = yield regex(integer_re).map(int)
    if not in_domain(n):
        return fail(in_range)
    return n

@generate
def bounded_natural():
    n = yield regex(r'0|[1-9][0-9]*').map(int)
    if not in_domain(n):
        return fail(in_range)
    return n

integer_p = with_label('an integer', bounded_integer)
sentinel_p = with_label('a sentinel such as 𝓗 or eps',
                        string_from(*GLYPH_SENTINELS).map(GLYPH_SENTINELS.__getitem__))
atom_p = with_desc('an atom', sentinel_p | integer_p.map(Number))


#
# Compound Values
#

fraction_p = with_desc('a fraction', seq(atom_p << string('/'), atom_p).combine(Fraction))

radicand_p = with_label('a square root √r or sqrt(r)',
                        (string('√') >> integer_p) | (string('sqrt(') >> integer_p << string(')')))
coefficient_p = (integer_p << string('*').optional()) | string('-').result(-1) | success(1)

@generate('a radical')
def radical_p():
    coef = yield coefficient_p
    rad = yield radicand_p
    return Radical(coef, rad)

@generate('a complex number')
def complex_p():
    real = yield (integer_p << peek(sign_p)).optional()
    sign = yield sign_p.optional()
    magnitude = yield bounded_natural.optional()
    yield unit_p

    if real is None and sign is None and magnitude is None:
        return Complex
    imag = 1 if magnitude is None else magnitude
    return ComplexNumber(real or 0, -imag if sign == '-' else imag)


#
# Main Parser
#

sym_p = ws >> (fraction_p | complex_p | radical_p | atom_p) << ws

def parse_sym(s: str, rich=False, short=False) -> Sym:
    """Reads a displayed value, glyph or ASCII form, back into a Sym.

    The result is not simplified: '4/2' reads as the Fraction 4/2. Raises
    ParseFailure, with a message pointing at the offending character, when
    the text is not a value.

    """
    try:
        return sym_p.parse(s)
    except ParseError as e:
        raise ParseFailure(parse_error_message(e, rich, short))


#
# Info tags
#

setattr(parse_sym, '__info__', 'values::parsing')
