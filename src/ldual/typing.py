"""
############################
Typing (:mod:`ldual.typing`)
############################

This module provides type definitions commonly used between modules.

.. autoclass:: Scalar
    :show-inheritance:
    :no-members:

.. data:: Real

    Plain (non-dual) real scalars accepted as operands of dual arithmetic.

"""

import numbers
from abc import abstractmethod
from typing import Protocol, Self, TypeAlias

Real: TypeAlias = numbers.Real | float | int


class Scalar(Protocol):
    """Protocol that ensures scalar-like behavior.

    Objects implementing this protocol must have four arithmetic operations and
    power defined, and four arithmetic operations must be compatible with plain
    real numbers.
    """

    __slots__ = ()

    @abstractmethod
    def __add__(self, rhs: Self | float | int) -> Self: ...

    @abstractmethod
    def __sub__(self, rhs: Self | float | int) -> Self: ...

    @abstractmethod
    def __mul__(self, rhs: Self | float | int) -> Self: ...

    @abstractmethod
    def __truediv__(self, rhs: Self | float | int) -> Self: ...

    @abstractmethod
    def __pow__(self, rhs: Self | float | int) -> Self: ...

    @abstractmethod
    def __radd__(self, lhs: Self | float | int) -> Self: ...

    @abstractmethod
    def __rsub__(self, lhs: Self | float | int) -> Self: ...

    @abstractmethod
    def __rmul__(self, lhs: Self | float | int) -> Self: ...

    @abstractmethod
    def __rtruediv__(self, lhs: Self | float | int) -> Self: ...

    @abstractmethod
    def __neg__(self) -> Self: ...

    @abstractmethod
    def __pos__(self) -> Self: ...
