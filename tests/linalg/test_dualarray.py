import numpy as np
import pytest

from ldual import DomainError, Dual, UnsupportedOperation
from ldual import linalg


def test_construction():
    a = linalg.asdualarray([[1.0, Dual(2.0, 1.0)], [3, 4]])
    assert a.shape == (2, 2)
    assert a.dtype == np.object_
    assert a[0, 0] == Dual(1.0, 0.0)
    assert a[0, 1] == Dual(2.0, 1.0)
    assert a[1, 0] == Dual(3.0, 0.0)

    assert linalg.zeros((2, 2))[1, 1] == Dual.zero()
    assert linalg.ones(3)[2] == Dual.one()

    with pytest.raises(TypeError):
        linalg.asdualarray(["a"])


def test_scale():
    a = np.array([[1.0, 2.0], [3.0, 4.0]])
    d = linalg.asdualarray([[Dual(1.0, 1.0), 2.0], [3.0, Dual(4.0, 1.0)]])
    s = Dual(2.0, 1.0)

    r = linalg.scale(s, a)
    assert r.shape == (2, 2)
    assert r[1, 0] == Dual(6.0, 3.0)

    r = linalg.scale(2.0, d)
    assert r[0, 0] == Dual(2.0, 2.0)
    assert r[0, 1] == Dual(4.0, 0.0)

    r = linalg.scale(s, d)
    assert r[1, 1] == Dual(8.0, 6.0)

    r = linalg.scale(2.0, a)
    assert all(isinstance(x, Dual) for x in r.flat)
    assert r[0, 1] == Dual(4.0, 0.0)

    assert ((s * d) == linalg.scale(s, d)).all()
    assert ((d * s) == linalg.scale(s, d)).all()
    assert ((a * s) == linalg.scale(s, a)).all()


def test_transpose():
    v = linalg.asdualarray([1.0, Dual(2.0, 1.0), 3.0])
    t = linalg.transpose(v)
    assert t.shape == (1, 3)
    assert t[0, 1] == Dual(2.0, 1.0)

    m = linalg.rand(2, 3)
    t = linalg.transpose(m)
    assert t.shape == (3, 2)
    assert t[2, 1] is m[1, 2]

    with pytest.raises(linalg.LinAlgError):
        linalg.transpose(linalg.zeros((2, 2, 2)))


def test_dot():
    a = [Dual(1.0, 1.0), Dual(2.0, 0.0), Dual(3.0, 0.0)]
    b = [4.0, 5.0, 6.0]
    assert linalg.dot(a, b) == Dual(32.0, 4.0)
    assert linalg.dot(b, a) == Dual(32.0, 4.0)
    assert linalg.dot(a, a) == Dual(14.0, 2.0)
    assert linalg.dot(a, a) == sum((x * y for x, y in zip(a, a)), Dual.zero())
    assert linalg.dot([], []) == Dual.zero()

    with pytest.raises(linalg.LinAlgError):
        linalg.dot(a, b[:2])

    with pytest.raises(linalg.LinAlgError):
        linalg.dot(linalg.ones((2, 2)), linalg.ones((2, 2)))


def test_norm():
    v = [Dual(3.0, 1.0), Dual(4.0, 0.0)]
    assert linalg.norm(v) == Dual(5.0, 0.6)
    assert linalg.norm(v, 2) == Dual(5.0, 0.6)
    assert linalg.norm([[Dual(3.0, 1.0)], [Dual(4.0, 0.0)]]) == Dual(5.0, 0.6)

    with pytest.raises(UnsupportedOperation):
        linalg.norm(v, 3)

    with pytest.raises(UnsupportedOperation):
        linalg.norm(v, "fro")

    with pytest.raises(DomainError):
        linalg.norm(linalg.zeros(3))


def test_rand():
    r = linalg.rand(2, 3, rng=np.random.default_rng(0))
    assert r.shape == (2, 3)
    assert all(x.derivative == 0.0 for x in r.flat)
    assert all(0.0 <= x.value < 1.0 for x in r.flat)

    s = linalg.rand(2, 3, rng=np.random.default_rng(0))
    assert (r == s).all()


def test_components():
    d = linalg.asdualarray([[Dual(1.0, 2.0), 3.0], [Dual(-1.5, 0.25), Dual(0.0, 7.0)]])
    values = linalg.values(d)
    derivatives = linalg.derivatives(d)
    assert values.dtype == np.float64
    np.testing.assert_array_equal(values, [[1.0, 3.0], [-1.5, 0.0]])
    np.testing.assert_array_equal(derivatives, [[2.0, 0.0], [0.25, 7.0]])

    assert (linalg.fromparts(values, derivatives) == d).all()

    r = linalg.rand(4, 2)
    assert (linalg.fromparts(linalg.values(r), linalg.derivatives(r)) == r).all()

    with pytest.raises(ValueError):
        linalg.fromparts(values, derivatives[0])
