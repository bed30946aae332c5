"""
################################
Dual numbers (:mod:`ldual.dual`)
################################

.. currentmodule:: ldual.dual

.. autosummary::
    :toctree: generated/

    Dual
    asdual

"""

import logging
import math
import numbers
from typing import Any, Final, Self, final

import numpy as np

from ldual import function as ldf
from ldual.context import getcontext
from ldual.errors import DivisionByZero, DomainError, SingularityError
from ldual.typing import Real, Scalar

logger = logging.getLogger(__name__)

_HALF_PI: Final = math.pi / 2


def _realpow(x: float, y: float) -> float:
    try:
        return math.pow(x, y)
    except ValueError:
        raise DomainError(f"{x!r} ** {y!r} is not a real number") from None


@final
class Dual(Scalar):
    r"""Dual number carrying a value and its derivative.

    Parameters
    ----------
    value : float
        Value of the function at the point of evaluation.
    derivative : float, default=0.0
        Derivative with respect to the independent variable at the same point.

    Attributes
    ----------
    value : float
    derivative : float

    See Also
    --------
    asdual

    Notes
    -----
    Instances of this class behave like elements of the ring
    :math:`\mathbb{R}[\varepsilon]/(\varepsilon^2)`. A function :math:`f` applied to
    :math:`a+a'\varepsilon` gives :math:`f(a)+f'(a)a'\varepsilon`, so the derivative
    is carried along by the chain rule.

    Instances are immutable. Both components are stored as :class:`float`.

    Examples
    --------
    >>> from ldual import function as ldf
    >>> x = Dual.variable(1.0)
    >>> y = ldf.cos(2 * x) + 3 * x
    >>> print(format(y, ".4f"))
    Dual(value=2.5839, derivative=1.1814)
    """

    __slots__ = ("_value", "_derivative")
    _value: float
    _derivative: float

    def __init__(self, value: Real, derivative: Real = 0.0):
        if isinstance(value, Dual) or isinstance(derivative, Dual):
            raise TypeError("nesting Dual is not supported")

        self._value = float(value)
        self._derivative = float(derivative)

    @classmethod
    def constant(cls, value: Real) -> Self:
        """Lift the plain number to a dual number with zero derivative."""
        return cls(value, 0.0)

    @classmethod
    def variable(cls, value: Real) -> Self:
        """Return the independent variable evaluated at `value`."""
        return cls(value, 1.0)

    @classmethod
    def zero(cls) -> Self:
        """Return the additive identity."""
        return cls(0.0, 0.0)

    @classmethod
    def one(cls) -> Self:
        """Return the multiplicative identity."""
        return cls(1.0, 0.0)

    @property
    def value(self) -> float:
        return self._value

    @property
    def derivative(self) -> float:
        return self._derivative

    def reciprocal(self) -> Self:
        """Return the reciprocal of the dual number.

        Raises
        ------
        DivisionByZero
            If the value is zero.
        """
        if self._value == 0:
            raise DivisionByZero("reciprocal of a dual number whose value is zero")

        return self.__class__(1.0 / self._value, -self._derivative / self._value**2)

    def sin(self) -> Self:
        return ldf.sin(self)

    def cos(self) -> Self:
        return ldf.cos(self)

    def tan(self) -> Self:
        return ldf.tan(self)

    def exp(self) -> Self:
        return ldf.exp(self)

    def log(self) -> Self:
        return ldf.log(self)

    def log10(self) -> Self:
        return ldf.log10(self)

    def sqrt(self) -> Self:
        return ldf.sqrt(self)

    def sinh(self) -> Self:
        return ldf.sinh(self)

    def cosh(self) -> Self:
        return ldf.cosh(self)

    def tanh(self) -> Self:
        return ldf.tanh(self)

    def _is_acceptable(self, value: object) -> bool:
        return isinstance(value, Dual | numbers.Real)

    def _ldual_overload_(self, fun, *args, **kwargs):
        match fun:
            case ldf.sin:
                return self.__sin()

            case ldf.cos:
                return self.__cos()

            case ldf.tan:
                return self.__tan()

            case ldf.exp:
                return self.__exp()

            case ldf.log:
                return self.__log(*args[1:])

            case ldf.sqrt:
                return self.__sqrt()

            case ldf.abs:
                return self.__abs()

            case ldf.sinh:
                return self.__sinh()

            case ldf.cosh:
                return self.__cosh()

            case ldf.tanh:
                return self.__tanh()

            case ldf.pow:
                return self.__pow(*args)

        return NotImplemented

    def __sin(self) -> Self:
        a = self._value
        return self.__class__(math.sin(a), math.cos(a) * self._derivative)

    def __cos(self) -> Self:
        a = self._value
        return self.__class__(math.cos(a), -math.sin(a) * self._derivative)

    def __tan(self) -> Self:
        a = self._value

        if math.fmod(a, _HALF_PI) == 0 and math.trunc(a / _HALF_PI) % 2 == 1:
            raise SingularityError(f"tangent is not differentiable at {a!r}")

        return self.__class__(math.tan(a), self._derivative / math.cos(a) ** 2)

    def __exp(self) -> Self:
        p = math.exp(self._value)
        return self.__class__(p, p * self._derivative)

    def __log(self, base: Any = None) -> Self:
        self.__ensurepositive("logarithm")
        a = self._value

        if base is None:
            return self.__class__(math.log(a), self._derivative / a)

        if isinstance(base, Dual) or not isinstance(base, numbers.Real):
            raise TypeError("base of the logarithm must be a plain real number")

        if base <= 0 or base == 1:
            raise DomainError(f"invalid base of the logarithm: {base!r}")

        derivative = self._derivative / (math.log(base) * a)
        return self.__class__(math.log(a, base), derivative)

    def __sqrt(self) -> Self:
        self.__ensurepositive("square root")
        s = math.sqrt(self._value)
        return self.__class__(s, self._derivative / (2 * s))

    def __abs(self) -> Self:
        a = self._value

        if a == 0:
            raise DomainError("absolute value is not differentiable at 0")

        return self.__class__(math.fabs(a), self._derivative * (a / math.fabs(a)))

    def __sinh(self) -> Self:
        return (ldf.exp(self) - ldf.exp(-self)) / 2

    def __cosh(self) -> Self:
        return (ldf.exp(self) + ldf.exp(-self)) / 2

    def __tanh(self) -> Self:
        e2x = ldf.exp(2 * self)
        return (e2x - 1.0) / (e2x + 1.0)

    def __pow(self, x: Any, y: Any) -> Self:
        if not (self._is_acceptable(x) and self._is_acceptable(y)):
            return NotImplemented

        match x, y:
            case Dual(), Dual():
                a = x._value

                if a < 0:
                    raise DomainError(f"negative base of the power: {a!r}")

                common = _realpow(a, y._value)

                if a == 0:
                    return self.__class__(common, 0.0)

                tmp = math.log(a) * y._derivative + (y._value / a) * x._derivative
                return self.__class__(common, common * tmp)

            case Dual(), _:
                a = x._value

                if y == 0:
                    return self.__class__(_realpow(a, y), 0.0)

                derivative = x._derivative * (y * _realpow(a, y - 1))
                return self.__class__(_realpow(a, y), derivative)

            case _:
                if x < 0:
                    raise DomainError(f"negative base of the power: {x!r}")

                common = _realpow(x, y._value)

                if x == 0:
                    return self.__class__(common, 0.0)

                return self.__class__(common, y._derivative * math.log(x) * common)

    def __ensurepositive(self, name: str) -> None:
        if self._value == 0:
            raise DomainError(f"{name} is not differentiable at 0")

        if self._value < 0:
            raise DomainError(f"{name} is not defined at {self._value!r}")

    def __repr__(self) -> str:
        return f"{type(self).__name__}(value={self._value!r}, derivative={self._derivative!r})"

    def __str__(self) -> str:
        return f"{type(self).__name__}(value={self._value}, derivative={self._derivative})"

    def __format__(self, format_spec: str) -> str:
        value = format(self._value, format_spec)
        derivative = format(self._derivative, format_spec)
        return f"{type(self).__name__}(value={value}, derivative={derivative})"

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented

        return (
            other._value == self._value  # type: ignore
            and other._derivative == self._derivative  # type: ignore
        )

    def __hash__(self) -> int:
        return hash((self._value, self._derivative))

    def __add__(self, rhs: Self | Real) -> Self:
        if not self._is_acceptable(rhs):
            return NotImplemented

        if isinstance(rhs, Dual):
            return self.__class__(
                self._value + rhs._value, self._derivative + rhs._derivative
            )

        return self.__class__(self._value + rhs, self._derivative)

    def __sub__(self, rhs: Self | Real) -> Self:
        if not self._is_acceptable(rhs):
            return NotImplemented

        if isinstance(rhs, Dual):
            return self.__class__(
                self._value - rhs._value, self._derivative - rhs._derivative
            )

        return self.__class__(self._value - rhs, self._derivative)

    def __mul__(self, rhs: Self | Real) -> Self:
        if not self._is_acceptable(rhs):
            return NotImplemented

        if isinstance(rhs, Dual):
            derivative = self._value * rhs._derivative + self._derivative * rhs._value
            return self.__class__(self._value * rhs._value, derivative)

        return self.__class__(self._value * rhs, self._derivative * rhs)

    def __truediv__(self, rhs: Self | Real) -> Self:
        if not self._is_acceptable(rhs):
            return NotImplemented

        if isinstance(rhs, Dual):
            if rhs._value == 0:
                raise DivisionByZero("value of the denominator is zero")

            return self * rhs.reciprocal()

        if rhs == 0:
            return self.__divzero(rhs)

        return self.__class__(self._value / rhs, self._derivative / rhs)

    def __divzero(self, rhs: Real) -> Self:
        if getcontext().divisioncheck:
            raise DivisionByZero("division of a dual number by zero")

        logger.warning("unchecked division of %r by zero", self)

        with np.errstate(divide="ignore", invalid="ignore"):
            value = np.float64(self._value) / rhs
            derivative = np.float64(self._derivative) / rhs

        return self.__class__(value, derivative)

    def __pow__(self, rhs: Self | Real) -> Self:
        if not self._is_acceptable(rhs):
            return NotImplemented

        return ldf.pow(self, rhs)

    def __neg__(self) -> Self:
        return self.__class__(-self._value, -self._derivative)

    def __pos__(self) -> Self:
        return self.__class__(self._value, self._derivative)

    def __abs__(self) -> Self:
        return ldf.abs(self)

    def __radd__(self, lhs: Real) -> Self:
        if not self._is_acceptable(lhs):
            return NotImplemented

        return self.__class__(lhs + self._value, self._derivative)

    def __rsub__(self, lhs: Real) -> Self:
        if not self._is_acceptable(lhs):
            return NotImplemented

        return self.__class__(lhs - self._value, -self._derivative)

    def __rmul__(self, lhs: Real) -> Self:
        if not self._is_acceptable(lhs):
            return NotImplemented

        return self.__class__(lhs * self._value, lhs * self._derivative)

    def __rtruediv__(self, lhs: Real) -> Self:
        if not self._is_acceptable(lhs):
            return NotImplemented

        if self._value == 0:
            raise DivisionByZero("value of the denominator is zero")

        derivative = -lhs * self._derivative / self._value**2
        return self.__class__(lhs / self._value, derivative)

    def __rpow__(self, lhs: Real) -> Self:
        if not self._is_acceptable(lhs):
            return NotImplemented

        return ldf.pow(lhs, self)


def asdual(x: Dual | Real) -> Dual:
    """Return `x` if it is a dual number, and otherwise lift it to a constant.

    Raises
    ------
    TypeError
        If `x` is neither a dual number nor a real number.
    """
    if isinstance(x, Dual):
        return x

    if not isinstance(x, numbers.Real):
        raise TypeError(f"cannot convert {type(x).__name__} to Dual")

    return Dual.constant(x)
