"""
##############################
Context (:mod:`ldual.context`)
##############################

.. currentmodule:: ldual.context

This module provides the settings shared by all dual-number operations of the
active thread.

.. autosummary::
    :toctree: generated/

    Context
    getcontext
    localcontext
    setcontext

"""

import contextlib
import contextvars
import logging
from typing import Self

import numpy as np

logger = logging.getLogger(__name__)


class Context:
    """Create a new context.

    Parameters
    ----------
    divisioncheck : bool, default=True
        If ``True``, dividing a dual number by a plain zero raises
        :class:`~ldual.errors.DivisionByZero`, as every other division does. If
        ``False``, the quotient follows IEEE 754 (infinities or NaN) and a warning is
        logged.
    seed : int | None, default=None
        Seed of the random generator used by :func:`ldual.linalg.rand`.
    rng : numpy.random.Generator, optional
        Random generator to share instead of creating a new one from `seed`.
    """

    __slots__ = ("_divisioncheck", "_rng")
    _divisioncheck: bool
    _rng: np.random.Generator

    def __init__(
        self,
        divisioncheck: bool = True,
        seed: int | None = None,
        *,
        rng: np.random.Generator | None = None,
    ):
        self._divisioncheck = divisioncheck
        self._rng = rng if rng is not None else np.random.default_rng(seed)
        logger.debug("created %s (seed=%r)", self, seed)

    @property
    def divisioncheck(self) -> bool:
        return self._divisioncheck

    @property
    def rng(self) -> np.random.Generator:
        return self._rng

    def copy(self) -> Self:
        """Return a copy sharing the random generator of the context."""
        return self.__class__(self._divisioncheck, rng=self._rng)

    def __str__(self):
        return f"{type(self).__name__}(divisioncheck={self._divisioncheck!r})"

    def __copy__(self) -> Self:
        return self.copy()


_var: contextvars.ContextVar[Context] = contextvars.ContextVar("ldual")


def getcontext() -> Context:
    """Return the current context for the active thread."""
    if context := _var.get(None):
        return context

    context = Context()
    _var.set(context)
    return context


def setcontext(ctx: Context) -> None:
    """Set the current context for the active thread to `ctx`."""
    _var.set(ctx)


@contextlib.contextmanager
def localcontext(
    ctx: Context | None = None,
    *,
    divisioncheck: bool | None = None,
    seed: int | None = None,
):
    """Return a context manager that will set the current context for the active thread
    to a copy of `ctx` on entry to the with-statement and restore the previous context
    when exiting the with-statement.

    Keyword arguments override the corresponding settings of the copy. Passing `seed`
    gives the copy a fresh random generator seeded with it.

    Examples
    --------
    >>> from ldual import Dual
    >>> with localcontext(divisioncheck=False):
    ...     print(Dual(1.0, 1.0) / 0)
    Dual(value=inf, derivative=inf)
    """
    if ctx is None:
        ctx = getcontext()

    if divisioncheck is None:
        divisioncheck = ctx._divisioncheck

    if seed is None:
        ctx = Context(divisioncheck, rng=ctx._rng)
    else:
        ctx = Context(divisioncheck, seed)

    token = _var.set(ctx)

    try:
        yield ctx
    finally:
        _var.reset(token)
