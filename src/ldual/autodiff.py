"""
#################################################
Automatic differentiation (:mod:`ldual.autodiff`)
#################################################

.. currentmodule:: ldual.autodiff

This module provides forward-mode differential operators for univariate functions.

.. autosummary::
    :toctree: generated/

    deriv
    value_and_deriv

"""

from collections.abc import Callable
from typing import Any

import numpy as np

from ldual.dual import Dual, asdual
from ldual.linalg import derivatives, values


def _split(res: Any) -> tuple[Any, Any]:
    if isinstance(res, np.ndarray):
        return values(res), derivatives(res)

    res = asdual(res)
    return res.value, res.derivative


def deriv(fun: Callable[..., Any]) -> Callable[..., Any]:
    """Return a function that evaluates the derivative of the univariate function.

    Parameters
    ----------
    fun : Callable
        Differentiated function. Its first argument is the independent variable; the
        remaining arguments are passed through unchanged.

    Returns
    -------
    Callable
        Derivative of `fun`. If `fun` returns an array of dual numbers, the
        derivative is returned as an array of floats of the same shape.

    Warnings
    --------
    `fun` must not contain conditional branches on the value of its argument, since
    the derivative of only one branch is propagated.

    Examples
    --------
    >>> from ldual import function as ldf
    >>> f = lambda x: x**2 + ldf.sqrt(x + 3)
    >>> df = deriv(f)
    >>> print(format(df(1.2), ".6g"))
    2.64398
    """

    def result(x, *args, **kwargs):
        return _split(fun(Dual.variable(x), *args, **kwargs))[1]

    return result


def value_and_deriv(fun: Callable[..., Any]) -> Callable[..., tuple[Any, Any]]:
    """Return a function that evaluates both the univariate function and its
    derivative.

    Examples
    --------
    >>> from ldual import function as ldf
    >>> f = value_and_deriv(lambda x: ldf.cos(2 * x) + 3 * x)
    >>> print(*(format(v, ".4f") for v in f(1.0)))
    2.5839 1.1814
    """

    def result(x, *args, **kwargs):
        return _split(fun(Dual.variable(x), *args, **kwargs))

    return result
