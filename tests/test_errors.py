import pytest

from anymonad import (AnyMonadError, MalformedCallError,
                      MalformedOperationSetError, MonadMismatchError, bind,
                      identity_m, let, list_m, operations, return_, run,
                      state_m, then, value)


class OnlyReturn:
    def return_op(self, a):
        return a


@pytest.mark.parametrize(
    'error, builtin',
    [
        (MalformedOperationSetError, AttributeError),
        (MonadMismatchError, TypeError),
        (MalformedCallError, TypeError)
    ]
)
def test_error_kinds(error, builtin):
    assert issubclass(error, AnyMonadError)
    assert issubclass(error, builtin)


def test_kinds_are_distinguishable():
    kinds = [MalformedOperationSetError, MonadMismatchError, MalformedCallError]
    for kind in kinds:
        others = [other for other in kinds if other is not kind]
        assert not any(issubclass(kind, other) for other in others)


def test_missing_return_op():
    with pytest.raises(MalformedOperationSetError):
        run(object(), return_(1))


def test_missing_bind_op_is_reported_when_needed():
    assert run(OnlyReturn(), return_(1)) == 1
    with pytest.raises(MalformedOperationSetError):
        run(OnlyReturn(), bind(return_(1), return_))


def test_operations_with_missing_function():
    without_return = operations(None, lambda self, m, f: f(m))
    with pytest.raises(MalformedOperationSetError):
        run(without_return, return_(1))
    without_bind = operations(lambda self, a: a, None)
    assert run(without_bind, return_(1)) == 1
    with pytest.raises(MalformedOperationSetError):
        run(without_bind, bind(return_(1), return_))


def test_ops_are_not_validated_up_front():
    assert run(object(), value('m')) == 'm'


def test_monad_mismatch():
    with pytest.raises(MonadMismatchError):
        run(list_m, bind(value(lambda s: (s, 1)), return_))
    with pytest.raises(MonadMismatchError):
        run(state_m, bind(value([1]), return_))(None)


def test_identity_accepts_any_value():
    assert run(identity_m, bind(value([1]), return_)) == [1]


def test_malformed_calls():
    with pytest.raises(MalformedCallError):
        then()
    with pytest.raises(MalformedCallError):
        let([])


def test_law_violations_are_not_reported():
    broken_m = operations(
        lambda self, a: [a, a],
        lambda self, m, f: [b for a in m for b in f(a)][:1]
    )
    assert run(broken_m, bind(return_(1), return_)) == [1]
    assert run(broken_m, return_(1)) == [1, 1]


def test_errors_from_continuations_propagate():
    def f(_):
        raise ValueError('from continuation')

    with pytest.raises(ValueError, match='from continuation'):
        run(identity_m, bind(return_(1), f))
