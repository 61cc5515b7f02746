from __future__ import annotations

import inspect
from typing import Any, Callable, Dict, Iterable, Optional, Tuple, Union

from .computation import Computation, bind, run, then
from .errors import MalformedCallError
from .immutable import Immutable
from .ops import HasOps

Expression = Union[Computation[Any], Callable[..., Computation[Any]]]
Step = Tuple[Optional[str], Expression]
Environment = Dict[str, Any]

PLACEHOLDER = '_'


def _is_placeholder(name: Optional[str]) -> bool:
    return name is None or name == PLACEHOLDER


def _check_step(step: Any) -> Step:
    if isinstance(step, str):
        raise MalformedCallError(
            f'a step must be a (name, expression) pair, got {step!r}'
        )
    try:
        name, expr = step
    except (TypeError, ValueError):
        raise MalformedCallError(
            f'a step must be a (name, expression) pair, got {step!r}'
        ) from None
    if name is not None and not isinstance(name, str):
        raise MalformedCallError(f'step name must be a str, got {name!r}')
    return name, expr


def _call_with_environment(f: Callable[..., Any], env: Environment) -> Any:
    signature = inspect.signature(f)
    parameters = signature.parameters.values()
    if any(p.kind is p.VAR_KEYWORD for p in parameters):
        kwargs = dict(env)
    else:
        kwargs = {p.name: env[p.name] for p in parameters if p.name in env}
    try:
        bound = signature.bind(**kwargs)
    except TypeError as e:
        raise MalformedCallError(
            f'cannot call {f!r} with bound names {sorted(env)}: {e}'
        ) from e
    return f(*bound.args, **bound.kwargs)


def _resolve(expr: Expression, env: Environment, what: str) -> Computation:
    if isinstance(expr, Computation):
        return expr
    if not callable(expr):
        raise MalformedCallError(
            f'{what} must be a Computation or a function '
            f'returning one, got {expr!r}'
        )
    result = _call_with_environment(expr, env)
    if not isinstance(result, Computation):
        raise MalformedCallError(
            f'{what} must produce a Computation, got {result!r}'
        )
    return result


def _expand(steps: Tuple[Step, ...],
            body: Tuple[Expression, ...],
            env: Environment) -> Computation:
    if not steps:
        return then(*(_resolve(e, env, 'body expression') for e in body))
    (name, expr), *rest = steps

    def cont(v: Any) -> Computation:
        if _is_placeholder(name):
            return _expand(tuple(rest), body, env)
        return _expand(tuple(rest), body, {**env, name: v})

    return bind(_resolve(expr, env, f'step {name!r}'), cont)


def let(steps: Iterable[Step], *body: Expression) -> Computation[Any]:
    """
    Chain ``steps`` with `bind` without nesting lambdas by hand.
    Each step is a ``(name, expression)`` pair. The result of the
    expression is bound to ``name`` for the steps that follow and for
    ``body``, whose expressions are sequenced with `then`.

    Expressions are either computations or functions returning
    computations. Functions are called with the bound names they
    declare as parameters. Use ``None`` or ``'_'`` as name to discard
    the result of a step. Body expressions are not wrapped in
    `return_`; they must produce computations themselves.

    Example:
        >>> sum_ = let(
        ...     [('p1', return_(3)), ('p2', return_(2))],
        ...     lambda p1, p2: return_(p1 + p2)
        ... )
        >>> run(identity_m, sum_)
        5
        >>> run(list_m, sum_)
        [5]

    Args:
        steps: ordered ``(name, expression)`` pairs
        body: one or more expressions to run after the steps
    Return:
        computation equivalent to the nested binds of ``steps`` \
            around ``then(*body)``
    Raises:
        MalformedCallError: if ``body`` is empty or a step is malformed
    """
    checked_steps = tuple(_check_step(step) for step in steps)
    if not body:
        raise MalformedCallError('let requires at least one body expression')

    def run_let(ops: HasOps) -> Any:
        return run(ops, _expand(checked_steps, body, {}))

    return Computation(run_let)


class Let(Immutable):
    """
    Builder that accumulates the steps of a `let`

    Example:
        >>> c = (
        ...     Let()
        ...     .bind('x', value([1, 2]))
        ...     .bind('y', lambda x: value([x, x * 10]))
        ...     .in_(lambda x, y: return_((x, y)))
        ... )
        >>> run(list_m, c)
        [(1, 1), (1, 10), (2, 2), (2, 20)]
    """
    steps: Tuple[Step, ...] = ()

    def bind(self, name: Optional[str], expr: Expression) -> Let:
        """
        Add a step binding the result of ``expr`` to ``name``

        Args:
            name: name to bind the result to, or ``None``/``'_'`` \
                to discard it
            expr: computation, or function of previously bound names \
                returning a computation
        Return:
            new builder with the step appended
        """
        return Let(self.steps + (_check_step((name, expr)), ))

    def then(self, expr: Expression) -> Let:
        """
        Add a step whose result is discarded
        """
        return self.bind(None, expr)

    def in_(self, *body: Expression) -> Computation[Any]:
        """
        Finish the builder with ``body``

        Return:
            ``let(self.steps, *body)``
        """
        return let(self.steps, *body)


__all__ = ['let', 'Let', 'PLACEHOLDER']
