from typing import Awaitable, Callable, TypeVar

_TArg = TypeVar("_TArg")
_TResult = TypeVar("_TResult")

UnaryFunction = Callable[[_TArg], _TResult]
AsyncUnaryFunction = Callable[[_TArg], Awaitable[_TResult]]
Thunk = Callable[[], _TResult]
AsyncThunk = Callable[[], Awaitable[_TResult]]
