import logging
from typing import Any, Callable

from .immutable import Immutable
from .ops import HasOps, Ops, operation


class Traced(Ops, Immutable):
    """
    Operation set that logs every operation it performs on behalf of
    ``inner`` using a built-in `logging.Logger`, then delegates to
    ``inner``. Running a computation with ``Traced(ops)`` gives the
    same result as running it with ``ops``.

    Example:
        >>> import logging
        >>> logging.basicConfig(level=logging.DEBUG)
        >>> run(Traced(identity_m), return_(1))
        DEBUG:anymonad:Identity().return_op(1)
        1

    Attributes:
        inner: the operation set to delegate to
        logger: the logger to log to
        level: the level to log at
    """
    inner: HasOps
    logger: logging.Logger = logging.getLogger('anymonad')
    level: int = logging.DEBUG

    def return_op(self, a: Any) -> Any:
        self.logger.log(self.level, '%r.return_op(%r)', self.inner, a)
        return operation(self.inner, 'return_op')(a)

    def bind_op(self, m: Any, f: Callable[[Any], Any]) -> Any:
        self.logger.log(self.level, '%r.bind_op(%r)', self.inner, m)

        def traced(a: Any) -> Any:
            self.logger.log(self.level, 'continuing with %r', a)
            return f(a)

        return operation(self.inner, 'bind_op')(m, traced)


__all__ = ['Traced']
