from typing import Any, Callable, List, Sequence, TypeVar

from .errors import MonadMismatchError
from .immutable import Immutable
from .ops import Ops

A = TypeVar('A')
B = TypeVar('B')


def _as_sequence(m: Any) -> Sequence[Any]:
    if not isinstance(m, (list, tuple)):
        raise MonadMismatchError(
            f'expected a list or tuple in the list monad, got {m!r}'
        )
    return m


class ListOps(Ops, Immutable):
    """
    Operation set of the list monad, which models computations
    with any number of results. Monadic values are lists
    (tuples are accepted as input too).

    Example:
        >>> run(list_m, bind(value([1, 2]), lambda v: value([v, -v])))
        [1, -1, 2, -2]
    """
    def return_op(self, a: A) -> List[A]:
        return [a]

    def bind_op(self, m: Sequence[A], f: Callable[[A], Sequence[B]]
                ) -> List[B]:
        """
        Apply ``f`` to every element of ``m`` and concatenate the results

        Raises:
            MonadMismatchError: if ``m`` or a result of ``f`` \
                is not a list or tuple
        """
        results: List[B] = []
        for a in _as_sequence(m):
            results.extend(_as_sequence(f(a)))
        return results


list_m = ListOps()

__all__ = ['ListOps', 'list_m']
