from __future__ import annotations

import functools
import typing

_I = typing.TypeVar("_I")
_A = typing.TypeVar("_A")
_B = typing.TypeVar("_B")
_C = typing.TypeVar("_C")
_D = typing.TypeVar("_D")
_E = typing.TypeVar("_E")
_O = typing.TypeVar("_O")

__all__ = ["Pipeable", "pipe"]


@typing.overload
def pipe(value: _I, /) -> _I:
    ...


@typing.overload
def pipe(value: _I, o1: typing.Callable[[_I], _O], /) -> _O:
    ...


@typing.overload
def pipe(
    value: _I, o1: typing.Callable[[_I], _A], o2: typing.Callable[[_A], _O], /
) -> _O:
    ...


@typing.overload
def pipe(
    value: _I,
    o1: typing.Callable[[_I], _A],
    o2: typing.Callable[[_A], _B],
    o3: typing.Callable[[_B], _O],
    /,
) -> _O:
    ...


@typing.overload
def pipe(
    value: _I,
    o1: typing.Callable[[_I], _A],
    o2: typing.Callable[[_A], _B],
    o3: typing.Callable[[_B], _C],
    o4: typing.Callable[[_C], _O],
    /,
) -> _O:
    ...


@typing.overload
def pipe(
    value: _I,
    o1: typing.Callable[[_I], _A],
    o2: typing.Callable[[_A], _B],
    o3: typing.Callable[[_B], _C],
    o4: typing.Callable[[_C], _D],
    o5: typing.Callable[[_D], _O],
    /,
) -> _O:
    ...


@typing.overload
def pipe(
    value: _I,
    o1: typing.Callable[[_I], _A],
    o2: typing.Callable[[_A], _B],
    o3: typing.Callable[[_B], _C],
    o4: typing.Callable[[_C], _D],
    o5: typing.Callable[[_D], _E],
    o6: typing.Callable[[_E], _O],
    /,
) -> _O:
    ...


@typing.overload
def pipe(
    value: typing.Any, /, *fns: typing.Callable[[typing.Any], typing.Any]
) -> typing.Any:
    ...


def pipe(
    value: typing.Any, /, *fns: typing.Callable[[typing.Any], typing.Any]
) -> typing.Any:
    """
    Threads ``value`` through ``fns`` from left to right and returns the
    last result. With no functions, ``value`` is returned unchanged.

    >>> pipe(2, lambda x: x + 1, str)
    '3'
    """
    return functools.reduce(lambda acc, f: f(acc), fns, value)


class Pipeable:
    """
    Mixin giving a data structure a ``pipe`` method, so that operators can
    be chained off an instance::

        some(2).pipe(option.map(double), option.unwrap_or(0))
    """

    __slots__ = ()

    def pipe(self, *fns: typing.Callable[[typing.Any], typing.Any]) -> typing.Any:
        return pipe(self, *fns)
