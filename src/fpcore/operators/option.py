"""
Free-function forms of the :class:`~fpcore.option.Option` methods.

Each operator takes the arguments of the method of the same name and
returns a function of a single Option that calls that method, so the two
forms always agree. They are meant to be composed with
:func:`~fpcore.pipe`::

    from fpcore import pipe, some
    from fpcore.operators import option

    pipe(some(2), option.map(lambda x: x * 2), option.unwrap_or(0))  # 4
"""

from __future__ import annotations

import typing

from ..option import Option, ValueAbsent, to_option
from ..util.typing import AsyncThunk, AsyncUnaryFunction, Thunk, UnaryFunction

if typing.TYPE_CHECKING:
    from ..result import Result

_T = typing.TypeVar("_T")
_U = typing.TypeVar("_U")
_R = typing.TypeVar("_R")

OptionOperator = UnaryFunction[Option[_T], _R]

__all__ = [
    "OptionOperator",
    "chain",
    "chain_async",
    "filter",
    "filter_async",
    "for_each",
    "for_each_async",
    "is_none",
    "is_some",
    "map",
    "map_async",
    "match",
    "of",
    "tap",
    "tap_async",
    "to_result",
    "unwrap",
    "unwrap_or",
    "unwrap_or_else",
    "unwrap_or_else_async",
]

#: Lifts a value into an Option; see :func:`fpcore.option.to_option`.
of = to_option


def map(f: UnaryFunction[_T, _U]) -> OptionOperator[_T, Option[_U]]:
    return lambda o: o.map(f)


def map_async(
    f: AsyncUnaryFunction[_T, _U]
) -> OptionOperator[_T, typing.Awaitable[Option[_U]]]:
    return lambda o: o.map_async(f)


def chain(f: typing.Callable[[_T], Option[_U]]) -> OptionOperator[_T, Option[_U]]:
    return lambda o: o.chain(f)


def chain_async(
    f: typing.Callable[[_T], typing.Awaitable[Option[_U]]]
) -> OptionOperator[_T, typing.Awaitable[Option[_U]]]:
    return lambda o: o.chain_async(f)


def filter(predicate: typing.Callable[[_T], bool]) -> OptionOperator[_T, Option[_T]]:
    return lambda o: o.filter(predicate)


def filter_async(
    predicate: typing.Callable[[_T], typing.Awaitable[bool]]
) -> OptionOperator[_T, typing.Awaitable[Option[_T]]]:
    return lambda o: o.filter_async(predicate)


def match(
    *, some: typing.Callable[[_T], _R], none: typing.Callable[[], _R]
) -> OptionOperator[_T, _R]:
    return lambda o: o.match(some=some, none=none)


def for_each(f: typing.Callable[[_T], typing.Any]) -> OptionOperator[_T, None]:
    return lambda o: o.for_each(f)


def for_each_async(
    f: typing.Callable[[_T], typing.Awaitable[typing.Any]]
) -> OptionOperator[_T, typing.Awaitable[None]]:
    return lambda o: o.for_each_async(f)


def tap(f: typing.Callable[[_T], typing.Any]) -> OptionOperator[_T, Option[_T]]:
    return lambda o: o.tap(f)


def tap_async(
    f: typing.Callable[[_T], typing.Awaitable[typing.Any]]
) -> OptionOperator[_T, typing.Awaitable[Option[_T]]]:
    return lambda o: o.tap_async(f)


def unwrap() -> OptionOperator[_T, _T]:
    return lambda o: o.unwrap()


def unwrap_or(fallback: _U) -> OptionOperator[_T, _T | _U]:
    return lambda o: o.unwrap_or(fallback)


def unwrap_or_else(f: Thunk[_U]) -> OptionOperator[_T, _T | _U]:
    return lambda o: o.unwrap_or_else(f)


def unwrap_or_else_async(
    f: AsyncThunk[_U]
) -> OptionOperator[_T, typing.Awaitable[_T | _U]]:
    return lambda o: o.unwrap_or_else_async(f)


def is_none() -> OptionOperator[typing.Any, bool]:
    return lambda o: o.is_none()


def is_some() -> OptionOperator[typing.Any, bool]:
    return lambda o: o.is_some()


def to_result() -> OptionOperator[_T, Result[ValueAbsent, _T]]:
    """Converts ``Some`` to ``Ok`` and ``Nothing`` to ``Err(ValueAbsent())``."""
    return lambda o: o.to_result()
