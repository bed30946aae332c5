import itertools
import logging
from collections.abc import Iterator
from typing import Any, Literal

import numpy as np
import numpy.typing as npt

from ldual import function as ldf
from ldual.context import getcontext
from ldual.dual import Dual, asdual
from ldual.errors import UnsupportedOperation
from ldual.typing import Real

logger = logging.getLogger(__name__)


class LinAlgError(ValueError):
    """Error raised by :mod:`ldual.linalg` functions."""


def _keys(shape: tuple[int, ...]) -> Iterator[tuple[int, ...]]:
    return itertools.product(*(range(n) for n in shape))


def _emptyarray(shape: int | tuple[int, ...]) -> npt.NDArray:
    return np.empty(shape, np.object_)


def asdualarray(a: npt.ArrayLike) -> npt.NDArray:
    """Return an object array of the same shape whose elements are dual numbers.

    Plain elements are lifted to constants.

    Examples
    --------
    >>> a = asdualarray([1.0, Dual(2.0, 1.0)])
    >>> print(a[0], a[1])
    Dual(value=1.0, derivative=0.0) Dual(value=2.0, derivative=1.0)
    """
    a = np.asarray(a, np.object_)
    result = _emptyarray(a.shape)

    for key in _keys(a.shape):
        result[key] = asdual(a[key])

    return result


def zeros(shape: int | tuple[int, ...]) -> npt.NDArray:
    """Return an array of the given shape filled with :meth:`Dual.zero`."""
    result = _emptyarray(shape)

    for key in _keys(result.shape):
        result[key] = Dual.zero()

    return result


def ones(shape: int | tuple[int, ...]) -> npt.NDArray:
    """Return an array of the given shape filled with :meth:`Dual.one`."""
    result = _emptyarray(shape)

    for key in _keys(result.shape):
        result[key] = Dual.one()

    return result


def rand(*shape: int, rng: np.random.Generator | None = None) -> npt.NDArray:
    """Return an array of constants drawn from the uniform distribution on
    :math:`[0, 1)`.

    Parameters
    ----------
    *shape : int
        Dimensions of the array.
    rng : numpy.random.Generator, optional
        Source of the random values. If omitted, the generator of the current context
        is used.

    Returns
    -------
    ndarray
        Array of dual numbers whose derivatives are zero.
    """
    if rng is None:
        rng = getcontext().rng

    samples = np.asarray(rng.random(shape))
    logger.debug("drawing random dual array of shape %r", shape)
    result = _emptyarray(samples.shape)

    for key in _keys(samples.shape):
        result[key] = Dual.constant(samples[key])

    return result


def scale(s: Dual | Real, a: npt.ArrayLike) -> npt.NDArray:
    """Multiply each element of the array by the scalar.

    Both `s` and the elements of `a` may be either plain or dual numbers. The result
    is always an array of dual numbers of the same shape as `a`.

    Examples
    --------
    >>> a = scale(Dual(2.0, 1.0), [1.0, 3.0])
    >>> print(a[1])
    Dual(value=6.0, derivative=3.0)
    """
    a = np.asarray(a, np.object_)
    result = _emptyarray(a.shape)

    for key in _keys(a.shape):
        x = a[key]
        result[key] = asdual(s * x if isinstance(s, Dual) else x * s)

    return result


def transpose(a: npt.ArrayLike) -> npt.NDArray:
    """Return the transpose of the vector or matrix.

    A vector of length `n` is turned into a matrix of shape ``(1, n)``. The elements
    themselves are not modified.

    Raises
    ------
    LinAlgError
        If `a` is neither a vector nor a matrix.
    """
    a = np.asarray(a, np.object_)

    match a.ndim:
        case 1:
            return a.reshape(1, len(a))

        case 2:
            return a.T.copy()

        case _:
            raise LinAlgError("transpose is defined for vectors and matrices only")


def dot(a: npt.ArrayLike, b: npt.ArrayLike) -> Dual:
    """Return the inner product of the two vectors.

    The product is computed as the single entry of ``transpose(a) @ b``.

    Raises
    ------
    LinAlgError
        If the operands are not vectors of the same length.

    Examples
    --------
    >>> a = [Dual(1.0, 1.0), Dual(2.0, 0.0)]
    >>> print(dot(a, [3.0, 4.0]))
    Dual(value=11.0, derivative=3.0)
    """
    a = np.asarray(a, np.object_)
    b = np.asarray(b, np.object_)

    if not (a.ndim == b.ndim == 1):
        raise LinAlgError("dot is defined for vectors only")

    if len(a) != len(b):
        raise LinAlgError("dimension mismatch")

    if len(a) == 0:
        return Dual.zero()

    return asdual((transpose(a) @ b)[0])


def norm(a: npt.ArrayLike, ord: Literal[2] | Any = 2) -> Dual:
    """Return the Euclidean norm of the flattened array.

    Parameters
    ----------
    ord : {2}, default=2
        Order of the norm. Only the Euclidean norm is supported.

    Raises
    ------
    UnsupportedOperation
        If `ord` is not 2.
    DomainError
        If all elements are zero, since the norm is not differentiable there.
    """
    if ord != 2:
        raise UnsupportedOperation(f"norm of order {ord!r} is not supported")

    v = np.asarray(a, np.object_).ravel()
    return ldf.sqrt(dot(v, v))


def values(a: npt.ArrayLike) -> npt.NDArray[np.float64]:
    """Return the array of the values of the elements."""
    a = np.asarray(a, np.object_)
    result = np.empty(a.shape, np.float64)

    for key in _keys(a.shape):
        result[key] = asdual(a[key]).value

    return result


def derivatives(a: npt.ArrayLike) -> npt.NDArray[np.float64]:
    """Return the array of the derivatives of the elements.

    Plain elements are regarded as constants, whose derivatives are zero.
    """
    a = np.asarray(a, np.object_)
    result = np.empty(a.shape, np.float64)

    for key in _keys(a.shape):
        result[key] = asdual(a[key]).derivative

    return result


def fromparts(values: npt.ArrayLike, derivatives: npt.ArrayLike) -> npt.NDArray:
    """Return the array of dual numbers assembled from values and derivatives.

    This is the inverse of :func:`values` and :func:`derivatives`.

    Raises
    ------
    ValueError
        If the shapes of `values` and `derivatives` differ.
    """
    values = np.asarray(values, np.float64)
    derivatives = np.asarray(derivatives, np.float64)

    if values.shape != derivatives.shape:
        raise ValueError("shape mismatch between values and derivatives")

    result = _emptyarray(values.shape)

    for key in _keys(values.shape):
        result[key] = Dual(values[key], derivatives[key])

    return result
