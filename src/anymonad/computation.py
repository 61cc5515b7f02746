from __future__ import annotations

from functools import reduce
from typing import Any, Callable, Generic, List, TypeVar

from .errors import MalformedCallError
from .functions import always
from .immutable import Immutable
from .ops import HasOps, operation

A = TypeVar('A')
B = TypeVar('B')


class Computation(Generic[A], Immutable):
    """
    A computation that produces an ``A`` in whatever monad it is
    eventually run in. Wraps a function from an operation set to
    a monadic value of that operation set's monad.

    Example:
        >>> from anymonad import identity_m, list_m
        >>> c = return_(2).and_then(lambda v: return_(v + 1))
        >>> c.run(identity_m)
        3
        >>> c.run(list_m)
        [3]
    """
    f: Callable[[HasOps], Any]

    def __call__(self, ops: HasOps) -> Any:
        return self.f(ops)

    def run(self, ops: HasOps) -> Any:
        """
        Run this computation in the monad defined by ``ops``

        Args:
            ops: operation set to run with
        Return:
            monadic value of the monad defined by ``ops``
        """
        return run(ops, self)

    def and_then(self, f: Callable[[A], Computation[B]]) -> Computation[B]:
        """
        Pass the result of this computation to ``f``

        Example:
            >>> return_(2).and_then(lambda v: return_(v * 2)).run(identity_m)
            4

        Args:
            f: function from the result of this computation \
                to a new computation
        Return:
            computation that runs this computation, then ``f``
        """
        return bind(self, f)

    def map(self, f: Callable[[A], B]) -> Computation[B]:
        """
        Apply ``f`` to the result of this computation

        Example:
            >>> return_(2).map(str).run(list_m)
            ['2']
        """
        return map_(f, self)

    def __rshift__(self, other: Computation[B]) -> Computation[B]:
        if not isinstance(other, Computation):
            return NotImplemented
        return then(self, other)


def run(ops: HasOps, g: Computation[A]) -> Any:
    """
    Run ``g`` in the monad defined by ``ops``. Nothing is validated:
    missing operations are reported when they are first needed.

    Example:
        >>> run(identity_m, bind(return_(2), lambda v: return_(v + 1)))
        3

    Args:
        ops: operation set to run ``g`` with
        g: computation to run
    Return:
        monadic value of the monad defined by ``ops``
    """
    return g(ops)


def return_(v: A) -> Computation[A]:
    """
    Lift a pure value into a computation

    Example:
        >>> run(list_m, return_(1))
        [1]

    Args:
        v: value to lift
    Return:
        computation that runs to ``return_op`` applied to ``v``
    """
    return Computation(lambda ops: operation(ops, 'return_op')(v))


def bind(g: Computation[A], f: Callable[[A], Computation[B]]) -> Computation[B]:
    """
    Sequence ``g`` with ``f``, passing the result of ``g`` to ``f``.
    The computation returned by ``f`` is run with the same
    operation set as ``g``.

    Example:
        >>> pairs = bind(
        ...     value([0, 1]),
        ...     lambda x: bind(value(['a', 'b']), lambda y: return_((x, y)))
        ... )
        >>> run(list_m, pairs)
        [(0, 'a'), (0, 'b'), (1, 'a'), (1, 'b')]

    Args:
        g: computation to run first
        f: function from the result of ``g`` to the next computation
    Return:
        computation that runs ``g`` and then the result of ``f``
    """
    def run_bind(ops: HasOps) -> Any:
        return _run_binds(ops, g, [f])

    return Bind(run_bind, g, f)


class Bind(Computation[B]):
    """
    Computation returned by `bind`. Keeps ``sub`` and ``cont`` so that
    left-nested binds can be run one after the other instead of
    recursively.
    """
    sub: Computation[Any]
    cont: Callable[[Any], Computation[B]]


def _continuation(ops: HasOps, f: Callable[[Any], Computation[B]]
                  ) -> Callable[[Any], Any]:
    return lambda v: run(ops, f(v))


def _run_binds(ops: HasOps,
               g: Computation[Any],
               conts: List[Callable[[Any], Computation[Any]]]) -> Any:
    while isinstance(g, Bind):
        conts.append(g.cont)
        g = g.sub
    mv = run(ops, g)
    bind_op = operation(ops, 'bind_op')
    for f in reversed(conts):
        mv = bind_op(mv, _continuation(ops, f))
    return mv


def value(mv: Any) -> Computation[Any]:
    """
    Lift a monadic value that is already concrete. The resulting
    computation ignores the operation set it is run with, so it must
    only be run with the operation set that ``mv`` belongs to.

    Example:
        >>> run(list_m, bind(value([1, 2]), lambda v: return_(-v)))
        [-1, -2]

    Args:
        mv: concrete monadic value
    Return:
        computation that runs to ``mv``
    """
    return Computation(always(mv))


def bind_all(
    g: Computation[Any], *fs: Callable[[Any], Computation[Any]]
) -> Computation[Any]:
    """
    Bind ``fs`` from left to right, each function receiving the
    result of the previous step

    Example:
        >>> inc = lambda v: return_(v + 1)
        >>> run(identity_m, bind_all(return_(0), inc, inc, inc))
        3

    Args:
        g: computation to start from
        fs: functions to bind in order
    Return:
        ``bind(bind(bind(g, f1), f2), ...)``
    """
    return reduce(bind, fs, g)


def then(*gs: Computation[Any]) -> Computation[Any]:
    """
    Run ``gs`` in order, discarding all results but the last

    Example:
        >>> run(identity_m, then(return_(1), return_(2), return_(3)))
        3

    Args:
        gs: one or more computations
    Return:
        computation producing the result of the last of ``gs``
    Raises:
        MalformedCallError: if ``gs`` is empty
    """
    if not gs:
        raise MalformedCallError('then requires at least one computation')
    first, *rest = gs
    return reduce(lambda acc, g: bind(acc, always(g)), rest, first)


def map_(f: Callable[[A], B], g: Computation[A]) -> Computation[B]:
    """
    Apply ``f`` to the result of ``g``

    Args:
        f: function to apply
        g: computation whose result is passed to ``f``
    Return:
        computation producing ``f`` of the result of ``g``
    """
    return bind(g, lambda v: return_(f(v)))


__all__ = [
    'Computation',
    'run',
    'return_',
    'bind',
    'value',
    'bind_all',
    'then',
    'map_'
]
