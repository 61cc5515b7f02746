from dataclasses import FrozenInstanceError
from unittest.mock import Mock

import pytest
from hypothesis import given

from anymonad import (Computation, MalformedCallError, bind, bind_all,
                      identity_m, list_m, map_, return_, run, state_m, then,
                      value)
from anymonad.hypothesis_strategies import anything, computations
from anymonad.state import get, modify, put


def inc(v):
    return return_(v + 1)


class TestComputation:
    def test_run_applies_computation_to_ops(self):
        ops = Mock()
        assert run(ops, Computation(lambda o: (o, 'result'))) == (
            ops, 'result'
        )

    def test_run_method_and_call(self):
        c = return_(1)
        assert c.run(list_m) == run(list_m, c) == c(list_m) == [1]

    def test_return_uses_return_op(self):
        ops = Mock()
        ops.return_op.return_value = 'wrapped'
        assert run(ops, return_(1)) == 'wrapped'
        ops.return_op.assert_called_once_with(1)

    def test_bind_does_no_work_until_run(self):
        f = Mock(return_value=return_(1))
        c = bind(return_(0), f)
        f.assert_not_called()
        assert run(identity_m, c) == 1
        f.assert_called_once_with(0)

    def test_bind_reruns_on_every_run(self):
        f = Mock(return_value=return_(1))
        c = bind(return_(0), f)
        run(identity_m, c)
        run(list_m, c)
        assert f.call_count == 2

    def test_bind_runs_continuation_with_same_ops(self):
        ops = Mock()
        ops.bind_op.side_effect = lambda m, f: f(m)
        ops.return_op.side_effect = lambda a: a
        assert run(ops, bind(return_(1), inc)) == 2
        assert ops.return_op.call_count == 2

    def test_value_ignores_ops(self):
        ops = Mock()
        assert run(ops, value('m')) == 'm'
        assert ops.method_calls == []

    def test_value_is_not_rewrapped(self):
        assert run(list_m, value([1, 2])) == [1, 2]
        assert run(list_m, return_([1, 2])) == [[1, 2]]

    def test_bind_all(self):
        assert run(identity_m, bind_all(return_(0), inc, inc, inc)) == 3

    def test_bind_all_passes_results_from_left_to_right(self):
        c = bind_all(
            value([1, 2]),
            lambda v: value([v, v * 10]),
            lambda v: return_(-v)
        )
        assert run(list_m, c) == [-1, -10, -2, -20]

    def test_bind_all_without_functions_is_identity(self):
        c = return_(1)
        assert bind_all(c) is c

    def test_then(self):
        assert run(identity_m, then(return_(1), return_(2), return_(3))) == 3

    def test_then_with_one_computation_is_identity(self):
        c = return_(1)
        assert then(c) is c

    def test_then_requires_a_computation(self):
        with pytest.raises(MalformedCallError):
            then()

    def test_then_keeps_effects_in_order(self):
        c = then(value(put(1)), value(modify(lambda s: s * 10)), value(get()))
        assert run(state_m, c)(0) == (10, 10)

    def test_long_then_does_not_overflow_stack(self):
        c = then(*[return_(i) for i in range(2000)])
        assert run(identity_m, c) == 1999
        assert run(list_m, c) == [1999]

    def test_long_bind_all_does_not_overflow_stack(self):
        c = bind_all(return_(0), *[inc] * 2000)
        assert run(identity_m, c) == 2000

    def test_then_keeps_every_branch(self):
        c = then(value([1, 2]), return_('x'))
        assert run(list_m, c) == ['x', 'x']

    def test_rshift(self):
        c = return_(1) >> return_(2) >> return_(3)
        assert run(identity_m, c) == 3

    def test_rshift_requires_computation(self):
        with pytest.raises(TypeError):
            return_(1) >> 2

    def test_and_then(self):
        assert return_(1).and_then(inc).run(identity_m) == 2

    def test_map(self):
        assert return_(2).map(str).run(list_m) == ['2']
        assert run(identity_m, map_(lambda v: v * 2, return_(2))) == 4

    def test_is_immutable(self):
        c = return_(1)
        with pytest.raises(FrozenInstanceError):
            c.f = lambda ops: None

    @given(computations(anything()), anything())
    def test_same_computation_in_different_monads(self, g, init_state):
        result = run(identity_m, g)
        assert run(list_m, g) == [result]
        assert run(state_m, g)(init_state) == (init_state, result)
