import logging

from .context import Context, getcontext, localcontext, setcontext
from .dual import Dual, asdual
from .errors import (
    DivisionByZero,
    DomainError,
    DualError,
    SingularityError,
    UnsupportedOperation,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Context",
    "getcontext",
    "localcontext",
    "setcontext",
    "Dual",
    "asdual",
    "DivisionByZero",
    "DomainError",
    "DualError",
    "SingularityError",
    "UnsupportedOperation",
]
