# Factoring of bounded integers by trial division
#
# Trial division stops at the square root, which is cheap enough over the
# bounded integers the algebra works with. The set-valued routines treat an
# empty input as a broken precondition of the caller, not as data.

from __future__ import annotations

from collections.abc   import Collection, Generator
from dataclasses       import dataclass

from symalg.atoms      import Huge, Number
from symalg.exceptions import ContractViolation
from symalg.numeric    import checked_mul, in_domain, is_factor_of
from symalg.utils      import every, irange


#
# Factor Records
#

@dataclass(frozen=True)
class CommonFactor:
    "A factor shared by several numbers, with the cofactor of each."
    common: int
    associated: tuple[int, ...]

@dataclass(frozen=True)
class Factor:
    "A single factor of a number and its cofactor: common * associated == n."
    common: int
    associated: int

    @classmethod
    def from_common(cls, cf: CommonFactor) -> Factor:
        if len(cf.associated) != 1:
            raise ContractViolation(f'A Factor pairs one number, got {len(cf.associated)}.')
        return cls(cf.common, cf.associated[0])


#
# Helpers
#

def require_nonempty(ns: Collection[int], operation: str) -> None:
    if len(ns) == 0:
        raise ContractViolation(f'{operation} requires at least one integer, got an empty set.')


#
# Factoring
#

def divisors(m: int) -> list[int]:
    """Positive divisors of m >= 0 in increasing order; 0 has none listed.

    Trial division only runs up to the square root; each small divisor
    found also yields its large partner.

    """
    small: list[int] = []
    large: list[int] = []
    candidate = 1
    while candidate * candidate <= m:
        if m % candidate == 0:
            small.append(candidate)
            if candidate * candidate != m:
                large.append(m // candidate)
        candidate += 1
    return small + large[::-1]

def iter_common_factors(ns: Collection[int]) -> Generator[CommonFactor, None, None]:
    """Lazily yields the factors shared by every number in ns, smallest first.

    The first item is always the trivial factor 1. The remaining candidates
    are the divisors of the smallest magnitude in ns, from 2 upward.

    """
    require_nonempty(ns, 'common_factors')
    ns = tuple(ns)
    yield CommonFactor(1, ns)

    smallest = min(abs(n) for n in ns)
    for candidate in divisors(smallest):
        if candidate >= 2 and every(lambda n: n % candidate == 0, ns):
            yield CommonFactor(candidate, tuple(n // candidate for n in ns))

def common_factors(ns: Collection[int]) -> list[CommonFactor]:
    """Returns the factors common to all of ns, each paired with the cofactors.

    Raises ContractViolation if ns is empty.

    """
    return list(iter_common_factors(ns))

def iter_factors(n: int) -> Generator[Factor, None, None]:
    for cf in iter_common_factors([n]):
        yield Factor.from_common(cf)

def factors(n: int) -> list[Factor]:
    """Returns the (factor, cofactor) pairs of n, starting with (1, n).

    Factors are the positive divisors of |n| found by trial division, so
    factors(-12) pairs 1, 2, 3, 4, 6, 12 with -12, -6, -4, -3, -2, -1.

    """
    return list(iter_factors(n))

def gcf(ns: Collection[int]) -> int:
    """Greatest common factor of ns, scanning down the divisors of the smallest magnitude.

    Returns 1 when nothing larger divides every element (including when
    the smallest magnitude is 0). Raises ContractViolation if ns is empty.

    """
    require_nonempty(ns, 'gcf')
    smallest = min(abs(n) for n in ns)
    for candidate in reversed(divisors(smallest)):
        if every(lambda n: is_factor_of(candidate, n), ns):
            return candidate
    return 1

def lcm(ns: Collection[int]):
    """Least common multiple of ns as an atom: a Number, or Huge on overflow.

    The running product of the inputs is computed first with checked
    multiplication; if it overflows the answer is Huge even when the true
    least common multiple would fit (two equal large powers of two, say).
    Otherwise the multiples of the largest magnitude, up to the product,
    are scanned for the first one every input divides.
    Raises ContractViolation if ns is empty.

    """
    require_nonempty(ns, 'lcm')
    magnitudes = [abs(n) for n in ns]
    if 0 in magnitudes:
        return Number(0)

    product = 1
    for m in magnitudes:
        next_product = checked_mul(product, m) if in_domain(m) else None
        if next_product is None:
            return Huge
        product = next_product

    largest = max(magnitudes)
    for candidate in irange(largest, product, step=largest):
        if every(lambda m: candidate % m == 0, magnitudes):
            return Number(candidate)
    return Number(product)


#
# Numeric Flags that need a factor search
#

def is_prime(n: int) -> bool:
    """Is n prime? 0 and +/-1 are neither prime nor composite; the sign is ignored.

    Trial division up to the square root of |n|, stopping at the first
    factor found.

    """
    m = abs(n)
    if m < 2:
        return False
    candidate = 2
    while candidate * candidate <= m:
        if m % candidate == 0:
            return False
        candidate += 1
    return True

def is_composite(n: int) -> bool:
    m = abs(n)
    if m < 2:
        return False
    return not is_prime(m)


#
# Info tags
#

setattr(factors, '__info__', 'factoring')
setattr(common_factors, '__info__', 'factoring')
setattr(gcf, '__info__', 'factoring')
setattr(lcm, '__info__', 'factoring')
setattr(is_prime, '__info__', 'numeric::flags')
setattr(is_composite, '__info__', 'numeric::flags')
