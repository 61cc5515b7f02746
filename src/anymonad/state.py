from typing import Any, Callable, Tuple, TypeVar

from .errors import MonadMismatchError
from .immutable import Immutable
from .ops import Ops

A = TypeVar('A')
S = TypeVar('S')

StateFn = Callable[[S], Tuple[S, A]]


def run_state(m: StateFn, s: S) -> Tuple[S, Any]:
    """
    Run the state function ``m`` from the initial state ``s``

    Example:
        >>> run_state(get(), 'state')
        ('state', 'state')

    Args:
        m: state function to run
        s: initial state
    Return:
        pair of the final state and the result
    Raises:
        MonadMismatchError: if ``m`` is not a state function
    """
    if not callable(m):
        raise MonadMismatchError(
            f'expected a state function in the state monad, got {m!r}'
        )
    result = m(s)
    if not (isinstance(result, tuple) and len(result) == 2):
        raise MonadMismatchError(
            f'state function {m!r} must return a (state, value) pair, '
            f'returned {result!r}'
        )
    return result


def eval_state(m: StateFn, s: S) -> Any:
    """
    Get the result of running ``m`` from ``s``, dropping the final state
    """
    _, a = run_state(m, s)
    return a


def exec_state(m: StateFn, s: S) -> Any:
    """
    Get the final state of running ``m`` from ``s``
    """
    final_state, _ = run_state(m, s)
    return final_state


class StateOps(Ops, Immutable):
    """
    Operation set of the state monad. Monadic values are functions
    from a state to a ``(state, value)`` pair.

    Example:
        >>> counter = bind(value(get()), lambda n: value(put(n + 1)))
        >>> run(state_m, counter)(0)
        (1, None)
    """
    def return_op(self, a: A) -> StateFn:
        return lambda s: (s, a)

    def bind_op(self, m: StateFn, f: Callable[[Any], StateFn]) -> StateFn:
        """
        Thread the state through ``m`` and then through the
        state function returned by ``f``
        """
        def state(s0):
            s1, a = run_state(m, s0)
            return run_state(f(a), s1)

        return state


state_m = StateOps()


def get() -> StateFn:
    """
    Get the current state

    Example:
        >>> run_state(get(), 'state')
        ('state', 'state')
    """
    return lambda s: (s, s)


def put(s: S) -> StateFn:
    """
    Replace the current state with ``s``

    Example:
        >>> run_state(put('new'), 'old')
        ('new', None)
    """
    return lambda _: (s, None)


def modify(f: Callable[[S], S]) -> StateFn:
    """
    Replace the current state with ``f`` applied to it

    Example:
        >>> run_state(modify(lambda n: n + 1), 1)
        (2, None)
    """
    return lambda s: (f(s), None)


__all__ = [
    'StateOps',
    'state_m',
    'get',
    'put',
    'modify',
    'run_state',
    'eval_state',
    'exec_state'
]
