class AnyMonadError(Exception):
    """
    Base class for errors raised while building or running
    generic computations
    """
    pass


class MalformedOperationSetError(AnyMonadError, AttributeError):
    """
    Raised when a running computation needs an operation that
    the supplied operation set does not provide
    """
    pass


class MonadMismatchError(AnyMonadError, TypeError):
    """
    Raised by an operation set when it is handed a monadic value
    that does not belong to its monad
    """
    pass


class MalformedCallError(AnyMonadError, TypeError):
    """
    Raised when a combinator is called with arguments it cannot
    build a computation from
    """
    pass


__all__ = [
    'AnyMonadError',
    'MalformedOperationSetError',
    'MonadMismatchError',
    'MalformedCallError'
]
