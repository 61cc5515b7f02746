from __future__ import annotations

import inspect
from functools import reduce, wraps
from typing import Any, Callable, Generator, Iterable, Tuple, TypeVar

from .computation import Computation, bind, return_, run
from .errors import MalformedCallError
from .functions import curry
from .ops import HasOps

A = TypeVar('A')
B = TypeVar('B')

Computations = Generator[Computation[Any], Any, A]


def sequence(iterable: Iterable[Computation[A]]) -> Computation[Tuple[A, ...]]:
    """
    Run each computation in ``iterable`` from left to right
    and collect the results

    Example:
        >>> run(identity_m, sequence([return_(v) for v in range(3)]))
        (0, 1, 2)
        >>> run(list_m, sequence([value([0, 1]), value(['a'])]))
        [(0, 'a'), (1, 'a')]

    Args:
        iterable: The computations to collect results from
    Return:
        computation of the tuple of collected results
    """
    def combine(gs: Computation[Tuple[A, ...]],
                g: Computation[A]) -> Computation[Tuple[A, ...]]:
        return bind(gs, lambda xs: bind(g, lambda x: return_(xs + (x, ))))

    return reduce(combine, iterable, return_(()))


@curry
def for_each(f: Callable[[A], Computation[B]],
             iterable: Iterable[A]) -> Computation[Tuple[B, ...]]:
    """
    Map each element in ``iterable`` to a computation by applying ``f``,
    run them from left to right and collect the results

    Example:
        >>> run(identity_m, for_each(lambda v: return_(v * 2), range(3)))
        (0, 2, 4)

    Args:
        f: Function to map over ``iterable``
        iterable: Iterable to map ``f`` over
    Return:
        computation of the tuple of results
    """
    return sequence(f(x) for x in iterable)


@curry
def filter_(f: Callable[[A], Computation[bool]],
            iterable: Iterable[A]) -> Computation[Tuple[A, ...]]:
    """
    Keep the elements of ``iterable`` for which the computation
    returned by ``f`` produces ``True``, running the computations
    from left to right

    Example:
        >>> run(identity_m, filter_(lambda v: return_(v % 2 == 0), range(4)))
        (0, 2)

    Args:
        f: Function from an element to a computation of ``bool``
        iterable: Iterable to filter
    Return:
        computation of the tuple of kept elements
    """
    def combine(gs: Computation[Tuple[A, ...]],
                gx: Tuple[Computation[bool], A]) -> Computation[Tuple[A, ...]]:
        g, x = gx
        return bind(
            gs, lambda xs: bind(g, lambda b: return_(xs + (x, ) if b else xs))
        )

    xs = tuple(iterable)
    return reduce(combine, zip((f(x) for x in xs), xs), return_(()))


def with_effect(f: Callable[..., Computations[A]]
                ) -> Callable[..., Computation[A]]:
    """
    Decorator for generator functions that yield computations and
    return a final result. Each yielded computation is bound, and its
    result is sent back into the generator.

    Monads such as the list monad call a continuation more than once,
    while a generator can only be resumed once. Every continuation
    therefore replays a fresh generator with the results received so
    far, so the generator must not have side effects of its own.

    Example:
        >>> @with_effect
        ... def pairs():
        ...     x = yield value([0, 1])
        ...     y = yield value(['a', 'b'])
        ...     return (x, y)
        >>> run(list_m, pairs())
        [(0, 'a'), (0, 'b'), (1, 'a'), (1, 'b')]

    Args:
        f: generator function to decorate
    Return:
        function returning a computation that chains the yielded \
            computations with `bind`
    """
    @wraps(f)
    def decorator(*args, **kwargs) -> Computation[A]:
        def resume(received: Tuple[Any, ...]) -> Computation[A]:
            g = f(*args, **kwargs)
            if not inspect.isgenerator(g):
                raise MalformedCallError(
                    f'{f!r} must be a generator function, returned {g!r}'
                )
            try:
                yielded = next(g)
                for v in received:
                    yielded = g.send(v)
            except StopIteration as e:
                return return_(e.value)
            finally:
                g.close()
            if not isinstance(yielded, Computation):
                raise MalformedCallError(
                    f'{f!r} must yield computations, yielded {yielded!r}'
                )
            return bind(yielded, lambda v: resume(received + (v, )))

        def run_generator(ops: HasOps) -> Any:
            return run(ops, resume(()))

        return Computation(run_generator)

    return decorator


__all__ = ['sequence', 'for_each', 'filter_', 'with_effect', 'Computations']
