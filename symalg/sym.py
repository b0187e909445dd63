from __future__ import annotations

from typing            import Optional

from symalg.env        import environment


#
# Generic Algebraic Values
#
# A Sym is either an Atom (a number or a sentinel class marker) or an Expr
# (a compound value that simplifies to an Atom or a canonical Expr). Every
# arithmetic operator accepts and returns Syms; plain ints on either side of
# an operator are promoted. Values are immutable.
#

def _arithmetic():
    # arithmetic imports the atom and expression modules, which subclass Sym
    from symalg import arithmetic
    return arithmetic

class Sym:
    "Base of all algebraic values: see Atom and Expr."

    def is_atom(self) -> bool:
        return False

    def is_expr(self) -> bool:
        return False

    def atom(self):
        "Returns this value if it is an Atom, otherwise None."
        return None

    def expr(self):
        "Returns this value if it is an Expr, otherwise None."
        return None

    def sign(self) -> Optional[int]:
        """Returns 1, 0, or -1 for values with a known sign, otherwise None.

        Sentinels past the integer range carry their side as a sign; Complex,
        Undefined, and Unknown have none.

        """
        return None

    def is_positive(self) -> bool:
        "Zero counts as positive, as do Huge and Epsilon."
        return self.sign() in (0, 1)

    def is_negative(self) -> bool:
        return self.sign() == -1

    def is_zero(self) -> bool:
        return self.sign() == 0

    def simplify(self) -> Sym:
        return self

    def render(self, ascii_only: Optional[bool] = None) -> str:
        raise NotImplementedError

    def __str__(self) -> str:
        return self.render()

    def __symalg_repr__(self) -> str:
        return self.render(environment.ascii_only)

    #
    # Operators
    #

    def __neg__(self):
        return _arithmetic().neg(self)

    def __pos__(self):
        return self

    def __add__(self, other):
        arith = _arithmetic()
        other = arith.promote(other)
        if other is None:
            return NotImplemented
        return arith.add(self, other)

    def __radd__(self, other):
        arith = _arithmetic()
        other = arith.promote(other)
        if other is None:
            return NotImplemented
        return arith.add(other, self)

    def __sub__(self, other):
        arith = _arithmetic()
        other = arith.promote(other)
        if other is None:
            return NotImplemented
        return arith.sub(self, other)

    def __rsub__(self, other):
        arith = _arithmetic()
        other = arith.promote(other)
        if other is None:
            return NotImplemented
        return arith.sub(other, self)

    def __mul__(self, other):
        arith = _arithmetic()
        other = arith.promote(other)
        if other is None:
            return NotImplemented
        return arith.mul(self, other)

    def __rmul__(self, other):
        arith = _arithmetic()
        other = arith.promote(other)
        if other is None:
            return NotImplemented
        return arith.mul(other, self)

    def __truediv__(self, other):
        arith = _arithmetic()
        other = arith.promote(other)
        if other is None:
            return NotImplemented
        return arith.div(self, other)

    def __rtruediv__(self, other):
        arith = _arithmetic()
        other = arith.promote(other)
        if other is None:
            return NotImplemented
        return arith.div(other, self)

    def __pow__(self, other):
        arith = _arithmetic()
        other = arith.promote(other)
        if other is None:
            return NotImplemented
        return arith.pow(self, other)

    def __rpow__(self, other):
        arith = _arithmetic()
        other = arith.promote(other)
        if other is None:
            return NotImplemented
        return arith.pow(other, self)
