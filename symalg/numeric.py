# Bounded integers and the small number-theoretic predicates built on them
#
# Python integers never overflow, so the machine-word domain that the
# algebra works over is enforced here explicitly. Every primitive either
# stays inside [INT_MIN, INT_MAX] or reports that it could not; the
# arithmetic layer maps the failures to sentinel values.

from __future__  import annotations

from typing            import Optional
from typing_extensions import TypeAlias, TypeGuard


#
# Constants
#

INT_BITS = 32
INT_MAX = 2 ** (INT_BITS - 1) - 1
INT_MIN = -2 ** (INT_BITS - 1)

BoundedInt: TypeAlias = int   # An int known to lie in [INT_MIN, INT_MAX]

integer_re = r'-?(?:0|[1-9][0-9]*)'


#
# Domain Checks
#

def is_int(x) -> TypeGuard[int]:
    "Is x a genuine integer (bools excluded)?"
    return isinstance(x, int) and not isinstance(x, bool)

def in_domain(n: int) -> bool:
    "Does n fit in the bounded integer domain?"
    return INT_MIN <= n <= INT_MAX

def saturate(n: int) -> BoundedInt:
    "Clamps an arbitrary integer to the bounded domain."
    if n > INT_MAX:
        return INT_MAX
    if n < INT_MIN:
        return INT_MIN
    return n


#
# Checked and Saturating Arithmetic
#
# The checked_* functions return None when the exact result leaves the
# domain; the saturating_* functions clamp it. Inputs are assumed bounded.

def checked_add(a: BoundedInt, b: BoundedInt) -> Optional[BoundedInt]:
    total = a + b
    return total if in_domain(total) else None

def checked_neg(a: BoundedInt) -> Optional[BoundedInt]:
    return -a if in_domain(-a) else None

def checked_sub(a: BoundedInt, b: BoundedInt) -> Optional[BoundedInt]:
    diff = a - b
    return diff if in_domain(diff) else None

def checked_mul(a: BoundedInt, b: BoundedInt) -> Optional[BoundedInt]:
    prod = a * b
    return prod if in_domain(prod) else None

def checked_div(a: BoundedInt, b: BoundedInt) -> Optional[BoundedInt]:
    """Exact quotient a / b truncated toward zero, or None on overflow.

    Division by zero also returns None; callers decide what it means.
    The only overflowing case in a two's-complement domain is INT_MIN / -1.

    """
    if b == 0:
        return None
    q = abs(a) // abs(b)
    if (a < 0) != (b < 0):
        q = -q
    return q if in_domain(q) else None

def saturating_add(a: BoundedInt, b: BoundedInt) -> BoundedInt:
    return saturate(a + b)

def saturating_mul(a: BoundedInt, b: BoundedInt) -> BoundedInt:
    return saturate(a * b)


#
# Roots
#

def sqrt_i(n: int) -> Optional[int]:
    """Returns the exact integer square root of n, if it has one.

    Negative numbers have no real root and give None; the caller decides
    whether that means an imaginary value. Zero and one are their own roots.
    Larger values are scanned linearly from 2, stopping as soon as the
    candidate's square passes n.

    """
    if n < 0:
        return None
    if n in (0, 1):
        return n

    root = 2
    while True:
        square = root * root
        if square == n:
            return root
        if square > n:
            return None
        root += 1

def is_perfect_square(n: int) -> bool:
    return sqrt_i(n) is not None


#
# Numeric Flags
#

def is_odd(n: int) -> bool:
    "Parity by the low bit; negative odd numbers are odd."
    return n & 1 == 1

def is_even(n: int) -> bool:
    return n & 1 == 0

def is_factor_of(d: int, n: int) -> bool:
    "Does d evenly divide n? Zero divides nothing."
    return d != 0 and n % d == 0


#
# Info tags
#

setattr(sqrt_i, '__info__', 'numeric::roots')
setattr(is_perfect_square, '__info__', 'numeric::roots')
setattr(is_odd, '__info__', 'numeric::flags')
setattr(is_even, '__info__', 'numeric::flags')
