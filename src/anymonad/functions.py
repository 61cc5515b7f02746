import functools
import inspect
from typing import Any, Callable, Generic, Tuple, TypeVar

from .immutable import Immutable

A = TypeVar('A')


def identity(v: A) -> A:
    """
    The identity function. Gives back its argument

    Example:
        >>> identity('value')
        'value'

    Args:
        v: The value to get back

    Return:
        `v`
    """
    return v


class Always(Generic[A], Immutable):
    """
    A Callable that ignores its arguments and returns `value`.
    Used as the continuation of value-discarding binds.

    Example:
        >>> f = Always(return_(1))
        >>> f(None)
        Computation(...)
    """
    value: A

    def __call__(self, *args, **kwargs) -> A:
        return self.value


def always(value: A) -> Callable[..., A]:
    """
    Get a function that always returns `value`

    Example:
        >>> f = always(1)
        >>> f('ignored')
        1

    Args:
        value: The value to return always

    Return:
        function that always returns `value`
    """
    return Always(value)


class Composition(Immutable):
    functions: Tuple[Callable, ...]

    def __call__(self, *args, **kwargs):
        first, *rest = reversed(self.functions)
        result = first(*args, **kwargs)
        for f in rest:
            result = f(result)
        return result


def compose(
    f: Callable[[Any], Any],
    g: Callable[[Any], Any],
    *functions: Callable[[Any], Any]
) -> Callable[[Any], Any]:
    """
    Compose functions from right to left

    Example:
        >>> h = compose(str, lambda v: v * 2)
        >>> h(3)
        '6'

    Args:
        f: the outermost function in the composition
        g: the function to be composed with f
        functions: further functions, applied before `g`

    Return:
        `f` composed with `g` composed with `functions`
    """
    return Composition((f, g) + functions)


class Curry:
    _f: Callable

    def __init__(self, f: Callable):
        functools.wraps(f)(self)
        self._f = f  # type: ignore

    def __repr__(self):
        return repr(self._f)

    def __call__(self, *args, **kwargs):
        signature = inspect.signature(self._f)
        bound = signature.bind_partial(*args, **kwargs)
        bound.apply_defaults()
        missing = set(signature.parameters) - set(bound.arguments)
        if not missing:
            return self._f(*args, **kwargs)
        return Curry(functools.partial(self._f, *args, **kwargs))


def curry(f: Callable) -> Callable:
    """
    Get a version of ``f`` that can be partially applied

    Example:
        >>> doubles = curry(for_each)(lambda v: return_(v * 2))
        >>> run(identity_m, doubles(range(3)))
        (0, 2, 4)

    Args:
        f: The function to curry
    Returns:
        Curried version of ``f``
    """
    @functools.wraps(f)
    def decorator(*args, **kwargs):
        return Curry(f)(*args, **kwargs)

    return decorator


__all__ = ['curry', 'always', 'compose', 'identity']
