from __future__ import annotations

from parsy     import (
    Parser,
    ParseError,
    Result,
)
from collections.abc   import Iterable
from functools         import wraps


#
# Helpers
#

def join_nl(terms: Iterable[str], *, sep: str = ", ", last_sep=', or ', prefixes=('', '', '')) -> str:
    terms = sorted(terms)
    count = len(terms)
    if count == 0:
        return 'something else'
    if count == 1:
        joined = prefixes[0] + terms[0]
    elif count == 2:
        joined = prefixes[1] + f'{terms[0]} or {terms[1]}'
    else:
        joined = prefixes[2] + sep.join(terms[0:-1]) + last_sep + terms[-1]
    return joined

def join_expecteds(expecteds: frozenset[str]) -> str:
    return join_nl(expecteds, prefixes=('', 'either ', 'one of '))


#
# Descriptions of failed alternatives
#

def supplant_result(new_result: Result, base_result: Result | None) -> Result:
    return new_result

def combine_result(new_result: Result, base_result: Result | None) -> Result:
    return new_result.aggregate(base_result)

def with_desc(description: str, p: Parser, aggregate=combine_result) -> Parser:
    "Adds description to what a failing p expected, keeping what p itself reported."
    def p_with_desc(stream, index) -> Result:
        result = p(stream, index)
        if result.status:
            return result
        return aggregate(Result.failure(index, description), result)
    return Parser(p_with_desc)

def with_label(description: str, p: Parser) -> Parser:
    "Replaces what a failing p expected with description."
    return with_desc(description, p, aggregate=supplant_result)

# Parser.desc() loses the failures of the inner parsers of a generator
def generate(fn) -> Parser:
    """
    Creates a parser from a generator function
    """
    if isinstance(fn, str):
        return lambda f: with_desc(fn, generate(f))

    @Parser
    @wraps(fn)
    def generated(stream, index):
        iterator = fn()

        result = None
        value = None
        try:
            while True:
                next_parser = iterator.send(value)
                result = next_parser(stream, index).aggregate(result)
                if not result.status:
                    return result
                value = result.value
                index = result.index
        except StopIteration as stop:
            returned = stop.value
            if isinstance(returned, Parser):
                return returned(stream, index).aggregate(result)

            return Result.success(index, returned).aggregate(result)

    return generated


#
# Handling Parsy ParseError
#

def parse_error_message(e: ParseError, rich=True, short=False) -> str:
    """Describes a parse failure with the text around it and a pointer to the failing character.

    With rich, the message carries console markup; short gives one line
    and implies plain text.

    """
    start_context = max(e.index - 5, 0)
    end_context = min(e.index + 6, len(e.stream))
    joined = join_expecteds(e.expected)
    cont = '...' if e.index > 8 else ''
    pad = 3 if e.index > 8 else 0

    parsed = cont + e.stream[start_context:e.index]
    error = e.stream[e.index] if e.index < len(e.stream) else ''
    rest = e.stream[(e.index + 1):end_context]
    where = f'character {e.index + 1}' if error else 'the end of the text'
    indent = '     ' + ' ' * (e.index - start_context + pad)
    mark = '^'

    mesg = f'I expected to see {joined} at {where}:\n'

    if short:
        return f'Expected {joined} at {where}: "{parsed}*{error}{rest}"'
    if rich:
        return f'{mesg}    "[#71716f]{parsed}[/][#ff0f0f bold]{error}[/]{rest}"\n{indent}[#ff0f0f bold]{mark}[/]'
    return f'{mesg}    "{parsed}{error}{rest}"\n{indent}{mark}'
