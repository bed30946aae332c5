"""
##############################################
Mathematical functions (:mod:`ldual.function`)
##############################################

.. currentmodule:: ldual.function

This module provides elementary functions accepting both plain numbers and dual
numbers. Plain numbers are evaluated with :mod:`math` (or :mod:`mpmath` for
multiprecision numbers); dual numbers additionally carry the derivative by the chain
rule.

Trigonometric functions
=======================

.. autosummary::
    :toctree: generated/

    cos
    sin
    tan

Hyperbolic functions
====================

.. autosummary::
    :toctree: generated/

    cosh
    sinh
    tanh

Power, exponents, and logarithmic functions
===========================================

.. autosummary::
    :toctree: generated/

    exp
    log
    log10
    pow
    sqrt

Miscellaneous
=============

.. autosummary::
    :toctree: generated/

    abs

"""

import math
from typing import TYPE_CHECKING, Any, overload

import mpmath
import mpmath.ctx_mp_python

if TYPE_CHECKING:
    from ldual.dual import Dual


@overload
def sin(x: "Dual", /) -> "Dual": ...


@overload
def sin(x: float | int, /) -> float: ...


@overload
def sin(x: Any, /) -> Any: ...


def sin(x, /):
    """Sine.

    Examples
    --------
    >>> from ldual import Dual
    >>> print(format(sin(0.5), ".6f"))
    0.479426
    >>> print(format(sin(Dual(0.5, 1.0)), ".6f"))
    Dual(value=0.479426, derivative=0.877583)
    """
    if fun := getattr(type(x), "_ldual_overload_", None):
        if (res := fun(x, sin, x)) is not NotImplemented:
            return res

        raise TypeError

    match x:
        case mpmath.ctx_mp_python.mpnumeric():
            return mpmath.sin(x)

        case float() | int():
            return math.sin(x)

        case _:
            raise TypeError


@overload
def cos(x: "Dual", /) -> "Dual": ...


@overload
def cos(x: float | int, /) -> float: ...


@overload
def cos(x: Any, /) -> Any: ...


def cos(x, /):
    """Cosine.

    Examples
    --------
    >>> from ldual import Dual
    >>> print(format(cos(Dual(0.5, 1.0)), ".6f"))
    Dual(value=0.877583, derivative=-0.479426)
    """
    if fun := getattr(type(x), "_ldual_overload_", None):
        if (res := fun(x, cos, x)) is not NotImplemented:
            return res

        raise TypeError

    match x:
        case mpmath.ctx_mp_python.mpnumeric():
            return mpmath.cos(x)

        case float() | int():
            return math.cos(x)

        case _:
            raise TypeError


@overload
def tan(x: "Dual", /) -> "Dual": ...


@overload
def tan(x: float | int, /) -> float: ...


@overload
def tan(x: Any, /) -> Any: ...


def tan(x, /):
    """Tangent.

    Raises
    ------
    SingularityError
        If `x` is a dual number whose value is an odd multiple of :math:`\\pi/2`.

    Examples
    --------
    >>> from ldual import Dual
    >>> print(format(tan(Dual(0.0, 1.0)), ".6f"))
    Dual(value=0.000000, derivative=1.000000)
    """
    if fun := getattr(type(x), "_ldual_overload_", None):
        if (res := fun(x, tan, x)) is not NotImplemented:
            return res

        raise TypeError

    match x:
        case mpmath.ctx_mp_python.mpnumeric():
            return mpmath.tan(x)

        case float() | int():
            return math.tan(x)

        case _:
            raise TypeError


@overload
def exp(x: "Dual", /) -> "Dual": ...


@overload
def exp(x: float | int, /) -> float: ...


@overload
def exp(x: Any, /) -> Any: ...


def exp(x, /):
    """Exponential.

    Examples
    --------
    >>> from ldual import Dual
    >>> print(format(exp(2), ".6f"))
    7.389056
    >>> print(format(exp(Dual(1.0, 2.0)), ".6f"))
    Dual(value=2.718282, derivative=5.436564)
    """
    if fun := getattr(type(x), "_ldual_overload_", None):
        if (res := fun(x, exp, x)) is not NotImplemented:
            return res

        raise TypeError

    match x:
        case mpmath.ctx_mp_python.mpnumeric():
            return mpmath.exp(x)

        case float() | int():
            return math.exp(x)

        case _:
            raise TypeError


@overload
def log(x: "Dual", base: float | int | None = ..., /) -> "Dual": ...


@overload
def log(x: float | int, base: float | int | None = ..., /) -> float: ...


@overload
def log(x: Any, base: Any = ..., /) -> Any: ...


def log(x, base=None, /):
    """Logarithm to the given base, or natural logarithm if `base` is omitted.

    Raises
    ------
    DomainError
        If `x` is a dual number whose value is not positive, or `base` is not a valid
        base.

    Examples
    --------
    >>> from ldual import Dual
    >>> print(format(log(5), ".6f"))
    1.609438
    >>> print(format(log(Dual(2.0, 1.0)), ".6f"))
    Dual(value=0.693147, derivative=0.500000)
    """
    if fun := getattr(type(x), "_ldual_overload_", None):
        if (res := fun(x, log, x, base)) is not NotImplemented:
            return res

        raise TypeError

    match x:
        case mpmath.ctx_mp_python.mpnumeric():
            return mpmath.log(x) if base is None else mpmath.log(x, base)

        case float() | int():
            return math.log(x) if base is None else math.log(x, base)

        case _:
            raise TypeError


def log10(x, /):
    """Base-10 logarithm.

    This is a shorthand for ``log(x, 10)``.

    Examples
    --------
    >>> from ldual import Dual
    >>> print(format(log10(Dual(100.0, 1.0)), ".6f"))
    Dual(value=2.000000, derivative=0.004343)
    """
    return log(x, 10)


@overload
def sqrt(x: "Dual", /) -> "Dual": ...


@overload
def sqrt(x: float | int, /) -> float: ...


@overload
def sqrt(x: Any, /) -> Any: ...


def sqrt(x, /):
    """Square root.

    Raises
    ------
    DomainError
        If `x` is a dual number whose value is not positive.

    Examples
    --------
    >>> from ldual import Dual
    >>> print(format(sqrt(2.0), ".6f"))
    1.414214
    >>> print(format(sqrt(Dual(4.0, 1.0)), ".6f"))
    Dual(value=2.000000, derivative=0.250000)
    """
    if fun := getattr(type(x), "_ldual_overload_", None):
        if (res := fun(x, sqrt, x)) is not NotImplemented:
            return res

        raise TypeError

    match x:
        case mpmath.ctx_mp_python.mpnumeric():
            return mpmath.sqrt(x)

        case float() | int():
            return math.sqrt(x)

        case _:
            raise TypeError


@overload
def abs(x: "Dual", /) -> "Dual": ...


@overload
def abs(x: float | int, /) -> float: ...


@overload
def abs(x: Any, /) -> Any: ...


def abs(x, /):
    """Absolute value.

    Raises
    ------
    DomainError
        If `x` is a dual number whose value is zero.

    Examples
    --------
    >>> from ldual import Dual
    >>> print(format(abs(Dual(-3.0, 1.0)), ".6f"))
    Dual(value=3.000000, derivative=-1.000000)
    """
    if fun := getattr(type(x), "_ldual_overload_", None):
        if (res := fun(x, abs, x)) is not NotImplemented:
            return res

        raise TypeError

    match x:
        case mpmath.ctx_mp_python.mpnumeric():
            return mpmath.fabs(x)

        case float() | int():
            return math.fabs(x)

        case _:
            raise TypeError


@overload
def sinh(x: "Dual", /) -> "Dual": ...


@overload
def sinh(x: float | int, /) -> float: ...


@overload
def sinh(x: Any, /) -> Any: ...


def sinh(x, /):
    """Hyperbolic sine.

    For a dual number, the result is composed as ``(exp(x) - exp(-x)) / 2``.

    Examples
    --------
    >>> from ldual import Dual
    >>> print(format(sinh(Dual(0.0, 1.0)), ".6f"))
    Dual(value=0.000000, derivative=1.000000)
    """
    if fun := getattr(type(x), "_ldual_overload_", None):
        if (res := fun(x, sinh, x)) is not NotImplemented:
            return res

        raise TypeError

    match x:
        case mpmath.ctx_mp_python.mpnumeric():
            return mpmath.sinh(x)

        case float() | int():
            return math.sinh(x)

        case _:
            raise TypeError


@overload
def cosh(x: "Dual", /) -> "Dual": ...


@overload
def cosh(x: float | int, /) -> float: ...


@overload
def cosh(x: Any, /) -> Any: ...


def cosh(x, /):
    """Hyperbolic cosine.

    For a dual number, the result is composed as ``(exp(x) + exp(-x)) / 2``.
    """
    if fun := getattr(type(x), "_ldual_overload_", None):
        if (res := fun(x, cosh, x)) is not NotImplemented:
            return res

        raise TypeError

    match x:
        case mpmath.ctx_mp_python.mpnumeric():
            return mpmath.cosh(x)

        case float() | int():
            return math.cosh(x)

        case _:
            raise TypeError


@overload
def tanh(x: "Dual", /) -> "Dual": ...


@overload
def tanh(x: float | int, /) -> float: ...


@overload
def tanh(x: Any, /) -> Any: ...


def tanh(x, /):
    """Hyperbolic tangent.

    For a dual number, the result is composed as ``(e2x - 1) / (e2x + 1)`` with
    ``e2x = exp(2 * x)``.

    Examples
    --------
    >>> from ldual import Dual
    >>> print(format(tanh(Dual(0.0, 1.0)), ".6f"))
    Dual(value=0.000000, derivative=1.000000)
    """
    if fun := getattr(type(x), "_ldual_overload_", None):
        if (res := fun(x, tanh, x)) is not NotImplemented:
            return res

        raise TypeError

    match x:
        case mpmath.ctx_mp_python.mpnumeric():
            return mpmath.tanh(x)

        case float() | int():
            return math.tanh(x)

        case _:
            raise TypeError


@overload
def pow(x: "Dual | float | int", y: "Dual", /) -> "Dual": ...


@overload
def pow(x: "Dual", y: float | int, /) -> "Dual": ...


@overload
def pow(x: float | int, y: float | int, /) -> float: ...


@overload
def pow(x: Any, y: Any, /) -> Any: ...


def pow(x, y, /):
    """`x` raised to the power `y`.

    Raises
    ------
    DomainError
        If the base is negative while the exponent is a dual number, or the real
        power is undefined.

    Notes
    -----
    Let :math:`x=a+a'\\varepsilon` and :math:`y=b+b'\\varepsilon`. If only the
    exponent is a dual number, the derivative is :math:`b'a^b\\log a`. If only the
    base is a dual number, the derivative is :math:`a'ba^{b-1}`. If both are dual
    numbers, the derivative is :math:`a^b(b'\\log a+a'b/a)`. A zero base gives a zero
    derivative whenever the exponent is a dual number.

    Examples
    --------
    >>> from ldual import Dual
    >>> print(format(pow(3.25, 1.25), ".6f"))
    4.363693
    >>> print(format(pow(Dual(3.0, 1.0), 2), ".6f"))
    Dual(value=9.000000, derivative=6.000000)
    >>> print(format(pow(2.0, Dual(3.0, 1.0)), ".6f"))
    Dual(value=8.000000, derivative=5.545177)
    """
    for z in (x, y):
        if fun := getattr(type(z), "_ldual_overload_", None):
            if (res := fun(z, pow, x, y)) is not NotImplemented:
                return res

    mpnumeric = mpmath.ctx_mp_python.mpnumeric

    match x, y:
        case (mpnumeric(), _) | (_, mpnumeric()):
            return mpmath.power(x, y)

        case (float() | int(), float() | int()):
            return math.pow(x, y)

        case _:
            raise TypeError
