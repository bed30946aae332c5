import logging
import math

import numpy as np
import pytest

from ldual import Context, DivisionByZero, Dual
from ldual import getcontext, localcontext, setcontext
from ldual.linalg import rand, values


def test_default():
    ctx = getcontext()
    assert getcontext() is ctx
    assert ctx.divisioncheck
    assert isinstance(ctx.rng, np.random.Generator)
    assert ctx.copy().rng is ctx.rng
    assert str(ctx) == "Context(divisioncheck=True)"


def test_localcontext():
    outer = getcontext()

    with localcontext(divisioncheck=False) as ctx:
        assert getcontext() is ctx
        assert not ctx.divisioncheck
        assert ctx.rng is outer.rng

    assert getcontext() is outer

    with localcontext(Context(divisioncheck=False)) as ctx:
        assert not ctx.divisioncheck

        with localcontext() as inner:
            assert not inner.divisioncheck


def test_setcontext():
    outer = getcontext()
    ctx = Context(divisioncheck=False)

    try:
        setcontext(ctx)
        assert getcontext() is ctx
    finally:
        setcontext(outer)


def test_unchecked_division(caplog):
    with localcontext(divisioncheck=False):
        with caplog.at_level(logging.WARNING, logger="ldual.dual"):
            y = Dual(1.0, -1.0) / 0

        assert y == Dual(math.inf, -math.inf)
        assert "unchecked division" in caplog.text

        y = Dual(0.0, 1.0) / 0.0
        assert math.isnan(y.value)
        assert y.derivative == math.inf

    with pytest.raises(DivisionByZero):
        Dual(1.0, -1.0) / 0


def test_seed():
    with localcontext(seed=42):
        a = values(rand(2, 3))

    with localcontext(seed=42):
        b = values(rand(2, 3))

    with localcontext(seed=7):
        c = values(rand(2, 3))

    np.testing.assert_array_equal(a, b)
    assert not np.array_equal(a, c)
