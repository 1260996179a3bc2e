"""
Free-function forms of the :class:`~fpcore.result.Result` methods, for use
with :func:`~fpcore.pipe`. See :mod:`fpcore.operators.option`.
"""

from __future__ import annotations

import typing

from ..result import Result
from ..util.typing import AsyncThunk, AsyncUnaryFunction, Thunk, UnaryFunction

if typing.TYPE_CHECKING:
    from ..option import Option

_E = typing.TypeVar("_E")
_T = typing.TypeVar("_T")
_F = typing.TypeVar("_F")
_U = typing.TypeVar("_U")
_R = typing.TypeVar("_R")

ResultOperator = UnaryFunction[Result[_E, _T], _R]

__all__ = [
    "ResultOperator",
    "chain",
    "chain_async",
    "is_err",
    "is_ok",
    "map",
    "map_async",
    "map_err",
    "map_err_async",
    "match",
    "to_option",
    "unwrap",
    "unwrap_err",
    "unwrap_or",
    "unwrap_or_else",
    "unwrap_or_else_async",
]


def map(f: UnaryFunction[_T, _U]) -> ResultOperator[_E, _T, Result[_E, _U]]:
    return lambda r: r.map(f)


def map_async(
    f: AsyncUnaryFunction[_T, _U]
) -> ResultOperator[_E, _T, typing.Awaitable[Result[_E, _U]]]:
    return lambda r: r.map_async(f)


def map_err(f: UnaryFunction[_E, _F]) -> ResultOperator[_E, _T, Result[_F, _T]]:
    return lambda r: r.map_err(f)


def map_err_async(
    f: AsyncUnaryFunction[_E, _F]
) -> ResultOperator[_E, _T, typing.Awaitable[Result[_F, _T]]]:
    return lambda r: r.map_err_async(f)


def chain(
    f: typing.Callable[[_T], Result[_F, _U]]
) -> ResultOperator[_E, _T, Result[_E | _F, _U]]:
    return lambda r: r.chain(f)


def chain_async(
    f: typing.Callable[[_T], typing.Awaitable[Result[_F, _U]]]
) -> ResultOperator[_E, _T, typing.Awaitable[Result[_E | _F, _U]]]:
    return lambda r: r.chain_async(f)


def match(
    *, ok: typing.Callable[[_T], _R], err: typing.Callable[[_E], _R]
) -> ResultOperator[_E, _T, _R]:
    return lambda r: r.match(ok=ok, err=err)


def unwrap() -> ResultOperator[typing.Any, _T, _T]:
    return lambda r: r.unwrap()


def unwrap_err() -> ResultOperator[_E, typing.Any, _E]:
    return lambda r: r.unwrap_err()


def unwrap_or(fallback: _U) -> ResultOperator[typing.Any, _T, _T | _U]:
    return lambda r: r.unwrap_or(fallback)


def unwrap_or_else(f: Thunk[_U]) -> ResultOperator[typing.Any, _T, _T | _U]:
    return lambda r: r.unwrap_or_else(f)


def unwrap_or_else_async(
    f: AsyncThunk[_U]
) -> ResultOperator[typing.Any, _T, typing.Awaitable[_T | _U]]:
    return lambda r: r.unwrap_or_else_async(f)


def is_err() -> ResultOperator[typing.Any, typing.Any, bool]:
    return lambda r: r.is_err()


def is_ok() -> ResultOperator[typing.Any, typing.Any, bool]:
    return lambda r: r.is_ok()


def to_option() -> ResultOperator[typing.Any, _T, Option[_T]]:
    """Converts ``Ok(value)`` to ``Some(value)`` and any ``Err`` to ``Nothing``."""
    return lambda r: r.to_option()
