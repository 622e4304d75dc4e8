import logging

import pytest

from pyLocalMin.utils.decorators import (compose_decorators, limit_setter,
                                         log_evaluation, sample)


def test_sample_returns_mean():
    readings = iter([1.0, 2.0, 6.0])

    @sample(3)
    def get_y():
        return next(readings)

    assert get_y() == pytest.approx(3.0)
    assert get_y.__name__ == "get_y"


def test_sample_rejects_zero_samples():
    with pytest.raises(ValueError):
        sample(0)


def test_log_evaluation(caplog):
    logger = logging.getLogger("pyLocalMin.test_decorators")
    caplog.set_level(logging.DEBUG, logger="pyLocalMin.test_decorators")

    @log_evaluation(logger)
    def f(x):
        return x * x

    assert f(3.0) == 9.0
    assert "f(args = (3.0,), kwargs = {}) = 9.0" in caplog.text


def test_limit_setter():
    seen = []

    @limit_setter(0.0, 1.0)
    def set_x(x):
        seen.append(x)

    set_x(0.5)
    with pytest.raises(ValueError):
        set_x(1.5)
    assert seen == [0.5]


def test_compose_decorators_applies_in_order():
    calls = []

    def tag(name):
        def wrap(f):
            def g(*args):
                calls.append(name)
                return f(*args)
            return g
        return wrap

    @compose_decorators(tag("outer"), tag("inner"))
    def h(x):
        return x + 1

    assert h(1) == 2
    assert calls == ["outer", "inner"]
    assert h.__name__ == "h"
