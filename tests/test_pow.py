import math

import pytest

from ldual import DomainError, Dual
from ldual import function as ldf


def test_dual_base():
    assert Dual(3.0, 1.0) ** 2 == Dual(9.0, 6.0)
    assert Dual(3.0, 1.0) ** 0 == Dual(1.0, 0.0)
    assert Dual(2.0, 1.0) ** -1 == Dual(0.5, -0.25)
    assert Dual(4.0, 1.0) ** 0.5 == Dual(2.0, 0.25)
    assert Dual(-2.0, 1.0) ** 2 == Dual(4.0, -4.0)
    assert ldf.pow(Dual(3.0, 1.0), 2) == Dual(3.0, 1.0) ** 2

    x = Dual(1.7, 0.3)
    y = x**3
    z = x * x * x
    assert y.value == pytest.approx(z.value)
    assert y.derivative == pytest.approx(z.derivative)

    with pytest.raises(DomainError):
        Dual(-2.0, 1.0) ** 0.5


def test_dual_exponent():
    assert 2.0 ** Dual(3.0, 1.0) == Dual(8.0, math.log(2.0) * 8.0)
    assert 0 ** Dual(2.0, 1.0) == Dual(0.0, 0.0)
    assert ldf.pow(2.0, Dual(3.0, 1.0)) == 2.0 ** Dual(3.0, 1.0)

    with pytest.raises(DomainError):
        (-2) ** Dual(0.5, 1.0)

    with pytest.raises(DomainError):
        0 ** Dual(-1.0, 1.0)


def test_both_dual():
    assert Dual(2.0, 1.0) ** Dual(3.0, 0.0) == Dual(2.0, 1.0) ** 3
    assert Dual(2.0, 0.0) ** Dual(3.0, 1.0) == 2.0 ** Dual(3.0, 1.0)
    assert Dual(0.0, 1.0) ** Dual(2.0, 1.0) == Dual(0.0, 0.0)

    x = Dual(2.0, 1.0)
    y = x**x
    assert y.value == pytest.approx(4.0)
    assert y.derivative == pytest.approx(4.0 * (math.log(2.0) + 1.0))

    with pytest.raises(DomainError):
        Dual(-2.0, 1.0) ** Dual(0.5, 0.0)

    with pytest.raises(DomainError):
        ldf.pow(Dual(-2.0, 1.0), Dual(2.0, 0.0))
