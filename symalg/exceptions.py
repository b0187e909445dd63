from __future__ import annotations

class SymalgException(Exception):
    "Base exception for errors raised by the algebra library."
    pass

class SymalgInternalException(SymalgException):
    "Base exception for internal conditions in the library."
    pass

class ConstructionError(SymalgInternalException):
    "A problem was encountered creating a value."
    pass

class ContractViolation(SymalgInternalException, AssertionError):
    "A caller broke the precondition of a library routine, e.g., an empty set of integers to factor."
    pass

class ParseFailure(SymalgException):
    "Text could not be read as an algebraic value."
    pass
