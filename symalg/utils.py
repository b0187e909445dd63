from __future__ import annotations

from collections.abc   import Iterable
from typing            import Callable, Generator

from symalg.env        import environment
from symalg.exceptions import ConstructionError
from symalg.protocols  import Renderable


#
# Sequences and Collections
#

def irange(
        start_or_stop: int,
        stop: int | None = None,
        *,
        step=1,
        exclude: Callable[[int], bool] | Iterable[int] | None = None,
) -> Generator[int, None, None]:
    """Inclusive integer range.

    Parameters
    ----------
      start_or_stop - if the only argument, an integer giving the stop (inclusive)
          of the sequence; if stop is also supplied, this is the start.
      stop - if missing, start from 1 (unlike the builtin range that starts from 0);
          otherwise, the sequence goes up to and including this value.
      step - a non-zero integer giving the spacing between successive values of the
          sequence; it can be negative if stop < start.
      exclude - either a set of integers or a predicate taking integers to boolean
          values; values in the set or for which the predicate returns true are skipped.

    Returns an iterator over the resulting range.

    """
    if step == 0:
        raise ConstructionError('irange requires a non-zero step.')

    if exclude is not None and not callable(exclude):
        exclude_values = set(exclude)
        exclude = lambda x: x in exclude_values

    if stop is None:
        stop = start_or_stop
        start = 1
    else:
        start = start_or_stop

    if (stop - start) * step < 0:
        raise ConstructionError(f'irange {start}:{stop} and step {step} have inconsistent direction.')

    sign = 1 if step >= 0 else -1

    def generate_from_irange() -> Generator[int, None, None]:
        value = start
        while (value - stop) * sign <= 0:
            if exclude is None or not exclude(value):
                yield value
            value += step

    return generate_from_irange()


#
# Higher-Order Functions
#

def every(func, iterable):
    "Returns true if f(x) is truthy for every x in iterable."
    return all(map(func, iterable))

def some(func, iterable):
    "Returns true if f(x) is truthy for some x in iterable."
    return any(map(func, iterable))


#
# Environment
#

def show(x, *, print_it=True, render=True):
    "Shows values, or lists of them, in the REPL in a more presentable fashion."
    if render and isinstance(x, Renderable):
        out = x.__symalg_repr__()
    elif isinstance(x, (list, tuple)):
        out = '[' + ', '.join(str(xi) for xi in x) + ']'
    else:
        out = str(x)
    if print_it:
        environment.console.print(out)
        return
    return out


#
# Info tags
#

setattr(every, '__info__', 'utilities')
setattr(some, '__info__', 'utilities')
setattr(irange, '__info__', 'utilities::irange')
setattr(show, '__info__', 'utilities::show')
