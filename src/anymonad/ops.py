from abc import ABC, abstractmethod
from typing import Any, Callable, Dict

from typing_extensions import Protocol

from .errors import MalformedOperationSetError
from .immutable import Immutable


class HasOps(Protocol):
    """
    Structural type of anything that can run a generic computation
    """
    def return_op(self, a: Any) -> Any:
        pass

    def bind_op(self, m: Any, f: Callable[[Any], Any]) -> Any:
        pass


class Ops(ABC):
    """
    Base class for operation sets. An operation set defines one
    concrete monad by its two operations. Operations are methods,
    so an operation set can reach its own auxiliary fields and
    methods through ``self``.

    Implementations are responsible for satisfying the monad laws::

        bind_op(return_op(a), f) == f(a)
        bind_op(m, return_op) == m
        bind_op(bind_op(m, f), g) == bind_op(m, lambda x: bind_op(f(x), g))

    Example:
        >>> class Maybe(Ops, Immutable):
        ...     def return_op(self, a):
        ...         return a
        ...     def bind_op(self, m, f):
        ...         return None if m is None else f(m)
    """
    @abstractmethod
    def return_op(self, a: Any) -> Any:
        """
        Put ``a`` in the context of this monad

        Args:
            a: pure value to lift
        Return:
            monadic value wrapping ``a``
        """
        pass

    @abstractmethod
    def bind_op(self, m: Any, f: Callable[[Any], Any]) -> Any:
        """
        Chain the monadic value ``m`` with the monadic function ``f``

        Args:
            m: monadic value of this monad
            f: function from the value wrapped by ``m`` \
                to a new monadic value of this monad
        Return:
            monadic value produced by passing the value in ``m`` to ``f``
        """
        pass


class OpsRecord(Ops, Immutable):
    """
    Operation set made from plain functions that receive the
    record itself as their first argument. Keyword arguments given
    to `operations` beyond the two required ones are kept in
    ``extensions`` and can be looked up as attributes.
    """
    return_fn: Callable[..., Any]
    bind_fn: Callable[..., Any]
    extensions: Dict[str, Any]

    def __getattr__(self, name: str) -> Any:
        if name == 'extensions':
            raise AttributeError(name)
        try:
            return self.extensions[name]
        except KeyError:
            raise AttributeError(
                f'{type(self).__name__} has no attribute {name!r}'
            ) from None

    def return_op(self, a: Any) -> Any:
        return _provided(self, 'return_op', self.return_fn)(self, a)

    def bind_op(self, m: Any, f: Callable[[Any], Any]) -> Any:
        return _provided(self, 'bind_op', self.bind_fn)(self, m, f)


def _provided(ops: OpsRecord, name: str, fn: Any) -> Callable[..., Any]:
    if not callable(fn):
        raise MalformedOperationSetError(
            f'{ops!r} does not provide the operation {name!r}'
        )
    return fn


def operations(
    return_op: Callable[..., Any],
    bind_op: Callable[..., Any],
    **extensions: Any
) -> OpsRecord:
    """
    Build an operation set from two functions

    Example:
        >>> writer_m = operations(
        ...     lambda self, a: (a, self.empty),
        ...     lambda self, m, f: (lambda b: (b[0], m[1] + b[1]))(f(m[0])),
        ...     empty=''
        ... )
        >>> run(writer_m, bind(value((1, 'a')), return_))
        (1, 'a')

    Args:
        return_op: function of the operation set and a pure value
        bind_op: function of the operation set, a monadic value \
            and a monadic function
        extensions: auxiliary fields made available on the operation set
    Return:
        Operation set calling ``return_op`` and ``bind_op``
    """
    return OpsRecord(return_op, bind_op, dict(extensions))


def operation(ops: HasOps, name: str) -> Callable[..., Any]:
    """
    Look up the operation ``name`` on ``ops``

    Args:
        ops: operation set to look up ``name`` on
        name: either ``'return_op'`` or ``'bind_op'``
    Return:
        The operation
    Raises:
        MalformedOperationSetError: if ``ops`` has no callable ``name``
    """
    try:
        op = getattr(ops, name)
    except AttributeError:
        raise MalformedOperationSetError(
            f'{ops!r} does not provide the operation {name!r}'
        ) from None
    if not callable(op):
        raise MalformedOperationSetError(
            f'operation {name!r} of {ops!r} is not callable: {op!r}'
        )
    return op


__all__ = ['HasOps', 'Ops', 'OpsRecord', 'operations', 'operation']
