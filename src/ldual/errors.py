"""
############################
Errors (:mod:`ldual.errors`)
############################

.. currentmodule:: ldual.errors

Exceptions raised when an operation on dual numbers has no well-defined value or
derivative. Each of them is raised before anything is computed.

.. autosummary::
    :toctree: generated/

    DualError
    DivisionByZero
    DomainError
    SingularityError
    UnsupportedOperation

"""


class DualError(ArithmeticError):
    """Base class of the errors raised by :mod:`ldual`."""


class DivisionByZero(DualError, ZeroDivisionError):
    """Error raised when the real part of a denominator is zero."""


class DomainError(DualError, ValueError):
    """Error raised when an argument lies outside the domain of differentiability.

    Examples are the logarithm, the square root and the absolute value at zero, and
    powers with a negative base.
    """


class SingularityError(DualError, ValueError):
    """Error raised when a function is evaluated at one of its poles."""


class UnsupportedOperation(DualError, ValueError):
    """Error raised when a requested variant of an operation is not implemented."""
