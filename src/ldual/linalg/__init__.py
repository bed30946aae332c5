"""
############################################
Arrays of dual numbers (:mod:`ldual.linalg`)
############################################

.. currentmodule:: ldual.linalg

This module composes dual numbers into vectors and matrices. Arrays are NumPy
arrays of ``dtype=object`` whose elements are :class:`~ldual.Dual`, so the usual
NumPy operators and ufuncs apply the rules of dual arithmetic element-wise.

Construction
============

.. autosummary::
    :toctree: generated/

    asdualarray
    fromparts
    ones
    rand
    zeros

Operations
==========

.. autosummary::
    :toctree: generated/

    dot
    norm
    scale
    transpose

Components
==========

.. autosummary::
    :toctree: generated/

    derivatives
    values

Miscellaneous
=============

.. autosummary::
    :toctree: generated/

    LinAlgError

"""

from .dualarray import (
    LinAlgError,
    asdualarray,
    derivatives,
    dot,
    fromparts,
    norm,
    ones,
    rand,
    scale,
    transpose,
    values,
    zeros,
)

__all__ = [
    "LinAlgError",
    "asdualarray",
    "derivatives",
    "dot",
    "fromparts",
    "norm",
    "ones",
    "rand",
    "scale",
    "transpose",
    "values",
    "zeros",
]
