import logging

import pytest

from anymonad import (MalformedOperationSetError, Traced, bind, identity_m,
                      list_m, return_, run, state_m, then, value)
from anymonad.state import get, put


def test_result_is_unchanged():
    c = bind(value([1, 2]), lambda v: return_(v * 2))
    assert run(Traced(list_m), c) == run(list_m, c) == [2, 4]


def test_logs_operations(caplog):
    c = bind(value([1, 2]), lambda v: return_(v * 2))
    with caplog.at_level(logging.DEBUG, logger='anymonad'):
        run(Traced(list_m), c)
    assert caplog.messages == [
        'ListOps().bind_op([1, 2])',
        'continuing with 1',
        'ListOps().return_op(2)',
        'continuing with 2',
        'ListOps().return_op(4)',
    ]
    assert {r.name for r in caplog.records} == {'anymonad'}
    assert {r.levelno for r in caplog.records} == {logging.DEBUG}


def test_custom_logger_and_level(caplog):
    logger = logging.getLogger('tests.trace')
    with caplog.at_level(logging.INFO, logger='tests.trace'):
        result = run(
            Traced(identity_m, logger=logger, level=logging.INFO),
            return_(1)
        )
    assert result == 1
    assert caplog.messages == ['Identity().return_op(1)']
    assert caplog.records[0].name == 'tests.trace'
    assert caplog.records[0].levelno == logging.INFO


def test_nothing_is_logged_below_level(caplog):
    with caplog.at_level(logging.INFO, logger='anymonad'):
        run(Traced(identity_m), then(return_(1), return_(2)))
    assert caplog.records == []


def test_traces_lazy_state(caplog):
    c = bind(value(get()), lambda s: value(put(s + 1)))
    with caplog.at_level(logging.DEBUG, logger='anymonad'):
        m = run(Traced(state_m), c)
        assert 'continuing with 1' not in caplog.messages
        assert m(1) == (2, None)
    assert 'continuing with 1' in caplog.messages


def test_can_be_nested():
    c = bind(return_(1), lambda v: return_(v + 1))
    assert run(Traced(Traced(identity_m)), c) == 2


def test_malformed_inner():
    with pytest.raises(MalformedOperationSetError):
        run(Traced(object()), return_(1))
