from typing import Any, Callable, Optional, Tuple, TypeVar, Union

from .computation import Computation, bind, return_, then, value

try:
    from hypothesis.strategies import (
        SearchStrategy,
        booleans,
        builds,
        composite,
        floats,
        integers,
        lists as lists_,
        one_of,
        recursive,
        text
    )
except ImportError:
    raise ImportError(
        'Could not import hypothesis. To use anymonad.hypothesis_strategies, '
        'install anymonad with \n\n\tpip install anymonad[test]'
    )

A = TypeVar('A')


def _everything(allow_nan: bool = False) -> Tuple[SearchStrategy[int],
                                                  SearchStrategy[bool],
                                                  SearchStrategy[str],
                                                  SearchStrategy[float]]:
    return integers(), booleans(), text(), floats(allow_nan=allow_nan)


def anything(allow_nan: bool = False
             ) -> SearchStrategy[Union[int, bool, str, float]]:
    """
    Create a search strategy that produces one of int, bool, str or floats.

    Args:
        allow_nan: whether to allow nan values
    Return:
        Search strategy that produces ints, bools, str or floats
    """
    return one_of(*_everything(allow_nan))


def unaries(return_strategy: SearchStrategy[A]
            ) -> SearchStrategy[Callable[[object], A]]:
    """
    Create a search strategy that produces functions of 1 argument
    that ignore their argument

    Example:
        >>> f = unaries(computations(integers())).example()
        >>> run(identity_m, f(None))
        2
    Args:
        return_strategy: strategy used to draw return values
    Return:
        Search strategy that produces callables of 1 argument
    """
    @composite
    def _(draw):
        a: A = draw(return_strategy)
        return lambda _: a

    return _()


def dependent_unaries(computation_strategy: SearchStrategy[Computation[Any]]
                      ) -> SearchStrategy[Callable[[Any], Computation[Any]]]:
    """
    Create a search strategy that produces functions of 1 argument
    returning computations whose results depend on that argument

    Example:
        >>> f = dependent_unaries(computations(integers())).example()
        >>> run(identity_m, f('a'))
        ('a', 0)
    Args:
        computation_strategy: strategy used to draw the computation \
            run before pairing its result with the argument
    Return:
        Search strategy that produces callables of 1 argument
    """
    @composite
    def _(draw):
        c = draw(computation_strategy)
        return lambda v: bind(c, lambda x: return_((v, x)))

    return _()


def computations(
    value_strategy: SearchStrategy[A],
    lifted: Optional[SearchStrategy[Computation[Any]]] = None
) -> SearchStrategy[Computation[Any]]:
    """
    Create a search strategy that produces generic computations built
    from `return_`, `bind` and `then`

    Example:
        >>> c = computations(integers()).example()
        >>> run(list_m, c)
        [0]
    Args:
        value_strategy: strategy used to draw values for `return_`
        lifted: optional strategy of computations made with `value`, \
            mixed in as leaves. Only run the produced computations \
            with the operation set these belong to.
    Return:
        search strategy that produces `Computation` instances
    """
    leaves = builds(return_, value_strategy)
    if lifted is not None:
        leaves = one_of(leaves, lifted)

    def extend(children):
        return one_of(
            builds(bind, children, unaries(children)),
            builds(then, children, children)
        )

    return recursive(leaves, extend, max_leaves=5)


def lists(value_strategy: SearchStrategy[A], max_size: int = 3
          ) -> SearchStrategy[Computation[Any]]:
    """
    Create a search strategy that produces lifted list monad values

    Example:
        >>> run(list_m, lists(integers()).example())
        [0, 1]
    Args:
        value_strategy: strategy used to draw elements
        max_size: maximum number of elements
    Return:
        search strategy that produces ``value(list)`` computations
    """
    return builds(value, lists_(value_strategy, max_size=max_size))


def _state_fn(new_state: Any, a: Any, keep_state: bool) -> Callable:
    if keep_state:
        return lambda s: (s, a)
    return lambda _: (new_state, a)


def states(value_strategy: SearchStrategy[A]
           ) -> SearchStrategy[Computation[Any]]:
    """
    Create a search strategy that produces lifted state monad values,
    which either keep the state or replace it

    Example:
        >>> run(state_m, states(integers()).example())(0)
        (1, 0)
    Args:
        value_strategy: strategy used to draw states and results
    Return:
        search strategy that produces ``value(state function)`` computations
    """
    return builds(
        value,
        builds(_state_fn, value_strategy, value_strategy, booleans())
    )


__all__ = [
    'anything',
    'unaries',
    'dependent_unaries',
    'computations',
    'lists',
    'states'
]
