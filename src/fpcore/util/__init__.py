from .functions import identity, noop, resolved, then, throws
from .typing import AsyncThunk, AsyncUnaryFunction, Thunk, UnaryFunction

__all__ = (
    "AsyncThunk",
    "AsyncUnaryFunction",
    "Thunk",
    "UnaryFunction",
    "identity",
    "noop",
    "resolved",
    "then",
    "throws",
)
