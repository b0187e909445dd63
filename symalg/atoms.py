# Atoms: indivisible algebraic values
#
# An atom is either an exact bounded integer (Number) or one of a fixed set
# of sentinel class markers standing in for values the integer domain cannot
# hold: overflow (Huge), underflow of magnitude (Epsilon), division by zero
# (Undefined), square roots of negatives (Complex), and results whose class
# was lost (Unknown).
#
# Only a Number carries enough information to be compared. A sentinel marks
# a class of values, not a value, so sentinels compare unequal to everything,
# themselves included (Undefined behaves like a floating-point NaN). Use the
# is_* predicates, or same_variant, to ask which marker an atom is.

from __future__ import annotations

from dataclasses       import dataclass, field
from enum              import Enum, auto
from typing            import Literal, Optional

from symalg.env        import environment
from symalg.exceptions import ConstructionError
from symalg.numeric    import INT_MAX, INT_MIN, checked_neg, in_domain, is_int
from symalg.sym        import Sym


class AtomType(Enum):
    NUMBER = auto()
    COMPLEX = auto()
    UNDEFINED = auto()
    HUGE = auto()
    NEGATIVE_HUGE = auto()
    EPSILON = auto()
    NEGATIVE_EPSILON = auto()
    UNKNOWN = auto()


GLYPHS = {
    AtomType.COMPLEX: '𝑖',
    AtomType.UNDEFINED: '∅',
    AtomType.HUGE: '𝓗',
    AtomType.NEGATIVE_HUGE: '-𝓗',
    AtomType.EPSILON: 'ε',
    AtomType.NEGATIVE_EPSILON: '-ε',
    AtomType.UNKNOWN: '?',
}

ASCII_GLYPHS = {
    AtomType.COMPLEX: 'i',
    AtomType.UNDEFINED: 'undefined',
    AtomType.HUGE: 'H',
    AtomType.NEGATIVE_HUGE: '-H',
    AtomType.EPSILON: 'eps',
    AtomType.NEGATIVE_EPSILON: '-eps',
    AtomType.UNKNOWN: '?',
}

SIGNS: dict[AtomType, Optional[int]] = {
    AtomType.COMPLEX: None,
    AtomType.UNDEFINED: None,
    AtomType.HUGE: 1,
    AtomType.NEGATIVE_HUGE: -1,
    AtomType.EPSILON: 1,
    AtomType.NEGATIVE_EPSILON: -1,
    AtomType.UNKNOWN: None,
}


#
# Atoms
#

class Atom(Sym):
    "An indivisible algebraic value: a Number or a sentinel."
    type: AtomType

    def is_atom(self) -> bool:
        return True

    def atom(self) -> Atom:
        return self

    def number(self) -> Optional[int]:
        "The integer value of a Number, otherwise None."
        return None

    def is_variant(self, variant: AtomType) -> bool:
        return self.type == variant

    def is_number(self) -> bool:
        return self.type == AtomType.NUMBER

    def is_sentinel(self) -> bool:
        return self.type != AtomType.NUMBER

    def is_complex(self) -> bool:
        return self.type == AtomType.COMPLEX

    def is_undefined(self) -> bool:
        return self.type == AtomType.UNDEFINED

    def is_defined(self) -> bool:
        "Is this a finite real value (possibly of unknown class)? False for Complex and Undefined."
        return self.type not in (AtomType.COMPLEX, AtomType.UNDEFINED)

    def is_huge(self) -> bool:
        return self.type in (AtomType.HUGE, AtomType.NEGATIVE_HUGE)

    def is_positive_huge(self) -> bool:
        return self.type == AtomType.HUGE

    def is_negative_huge(self) -> bool:
        return self.type == AtomType.NEGATIVE_HUGE

    def is_epsilon(self) -> bool:
        return self.type in (AtomType.EPSILON, AtomType.NEGATIVE_EPSILON)

    def is_positive_epsilon(self) -> bool:
        return self.type == AtomType.EPSILON

    def is_negative_epsilon(self) -> bool:
        return self.type == AtomType.NEGATIVE_EPSILON

    def is_unknown(self) -> bool:
        return self.type == AtomType.UNKNOWN

    def __neg__(self) -> Atom:
        return negate_atom(self)


@dataclass(frozen=True, eq=False)
class Number(Atom):
    "An exact integer within the bounded domain."
    value: int
    type: Literal[AtomType.NUMBER] = field(default=AtomType.NUMBER, init=False, repr=False)

    def __post_init__(self):
        if not is_int(self.value):
            raise ConstructionError(f'A Number requires an integer value, got {self.value!r}.')
        if not in_domain(self.value):
            raise ConstructionError(f'The integer {self.value} lies outside [{INT_MIN}, {INT_MAX}]; '
                                    'use bounded() to obtain the corresponding sentinel.')

    def number(self) -> int:
        return self.value

    def sign(self) -> int:
        return (self.value > 0) - (self.value < 0)

    def render(self, ascii_only: Optional[bool] = None) -> str:
        return str(self.value)

    def __int__(self) -> int:
        return self.value

    def __index__(self) -> int:
        return self.value

    def __eq__(self, other) -> bool:
        if isinstance(other, Number):
            return self.value == other.value
        if is_int(other):
            return self.value == other
        if isinstance(other, Sym):
            return False
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.value)


@dataclass(frozen=True, eq=False)
class Sentinel(Atom):
    "A class marker for a value outside what a Number can represent."
    type: AtomType

    def __post_init__(self):
        if self.type == AtomType.NUMBER:
            raise ConstructionError('A sentinel cannot be of the Number variant.')

    def sign(self) -> Optional[int]:
        return SIGNS[self.type]

    def render(self, ascii_only: Optional[bool] = None) -> str:
        if ascii_only is None:
            ascii_only = environment.ascii_only
        return (ASCII_GLYPHS if ascii_only else GLYPHS)[self.type]

    def __repr__(self) -> str:
        return SENTINEL_NAMES[self.type]

    def __eq__(self, other) -> bool:
        if isinstance(other, Sym) or is_int(other):
            return False
        return NotImplemented

    def __hash__(self) -> int:
        return object.__hash__(self)


Complex = Sentinel(AtomType.COMPLEX)
Undefined = Sentinel(AtomType.UNDEFINED)
Huge = Sentinel(AtomType.HUGE)
NegativeHuge = Sentinel(AtomType.NEGATIVE_HUGE)
Epsilon = Sentinel(AtomType.EPSILON)
NegativeEpsilon = Sentinel(AtomType.NEGATIVE_EPSILON)
Unknown = Sentinel(AtomType.UNKNOWN)

SENTINEL_NAMES = {
    AtomType.COMPLEX: 'Complex',
    AtomType.UNDEFINED: 'Undefined',
    AtomType.HUGE: 'Huge',
    AtomType.NEGATIVE_HUGE: 'NegativeHuge',
    AtomType.EPSILON: 'Epsilon',
    AtomType.NEGATIVE_EPSILON: 'NegativeEpsilon',
    AtomType.UNKNOWN: 'Unknown',
}

SENTINELS = {
    AtomType.COMPLEX: Complex,
    AtomType.UNDEFINED: Undefined,
    AtomType.HUGE: Huge,
    AtomType.NEGATIVE_HUGE: NegativeHuge,
    AtomType.EPSILON: Epsilon,
    AtomType.NEGATIVE_EPSILON: NegativeEpsilon,
    AtomType.UNKNOWN: Unknown,
}

zero = Number(0)
one = Number(1)


#
# Constructors and Helpers
#

def sentinel(variant: AtomType) -> Sentinel:
    "Returns the sentinel singleton of the given variant."
    if variant == AtomType.NUMBER:
        raise ConstructionError('Numbers are not sentinels; construct them with Number(n).')
    return SENTINELS[variant]

def bounded(n: int) -> Atom:
    """Converts an arbitrary Python integer to the atom that denotes it.

    Integers inside the domain become Numbers; larger ones become Huge and
    smaller ones NegativeHuge.

    """
    if not is_int(n):
        raise ConstructionError(f'Cannot convert {n!r} to a bounded integer atom.')
    if n > INT_MAX:
        return Huge
    if n < INT_MIN:
        return NegativeHuge
    return Number(n)

def huge_of_sign(positive: bool) -> Sentinel:
    return Huge if positive else NegativeHuge

def epsilon_of_sign(positive: bool) -> Sentinel:
    return Epsilon if positive else NegativeEpsilon

def negate_atom(atom: Atom) -> Atom:
    """Negates an atom, swapping the sides of the signed sentinels.

    Complex, Undefined, and Unknown have no sign and are returned as is.
    Negating INT_MIN leaves the domain and gives Huge.

    """
    if isinstance(atom, Number):
        negated = checked_neg(atom.value)
        return Number(negated) if negated is not None else Huge
    if atom.is_huge():
        return huge_of_sign(atom.is_negative_huge())
    if atom.is_epsilon():
        return epsilon_of_sign(atom.is_negative_epsilon())
    return atom

def as_atom(x) -> Atom:
    "Converts an int or an Atom to an Atom; ints must be in the bounded domain."
    if isinstance(x, Atom):
        return x
    if is_int(x):
        return Number(x)
    raise ConstructionError(f'Expected an integer or an atom, got {x!r}.')

def same_variant(a: Sym, b: Sym) -> bool:
    "Are a and b the same kind of value? Compares sentinel markers by variant, not by value."
    if isinstance(a, Atom) and isinstance(b, Atom):
        return a.type == b.type
    return type(a) is type(b)


#
# Info tags
#

setattr(bounded, '__info__', 'values::atoms')
setattr(sentinel, '__info__', 'values::atoms')
setattr(same_variant, '__info__', 'values::atoms')
