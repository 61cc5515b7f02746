from typing import Callable, TypeVar

from .immutable import Immutable
from .ops import Ops

A = TypeVar('A')
B = TypeVar('B')


class Identity(Ops, Immutable):
    """
    Operation set of the identity monad. Monadic values are the
    plain values themselves.

    Example:
        >>> run(identity_m, bind(return_(2), lambda v: return_(v + 1)))
        3
    """
    def return_op(self, a: A) -> A:
        return a

    def bind_op(self, m: A, f: Callable[[A], B]) -> B:
        return f(m)


identity_m = Identity()

__all__ = ['Identity', 'identity_m']
