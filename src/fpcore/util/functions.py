from __future__ import annotations

import typing

_T = typing.TypeVar("_T")
_U = typing.TypeVar("_U")


def identity(value: _T) -> _T:
    return value


def noop(*args: typing.Any, **kwargs: typing.Any) -> None:
    pass


def throws(
    error_factory: typing.Callable[[], BaseException]
) -> typing.Callable[..., typing.NoReturn]:
    """
    Returns a function that raises the exception built by ``error_factory``
    each time it is called, whatever arguments it receives.

    The exception is only constructed when the returned function runs, so it
    can be passed as a ``match`` arm without doing any work up front.

    >>> fail = throws(lambda: ValueError("nope"))
    >>> fail(1, 2)
    Traceback (most recent call last):
      ...
    ValueError: nope
    """

    def _raise(*args: typing.Any, **kwargs: typing.Any) -> typing.NoReturn:
        raise error_factory()

    return _raise


async def resolved(value: _T) -> _T:
    """An awaitable that completes immediately with ``value``."""
    return value


async def then(
    awaitable: typing.Awaitable[_T], f: typing.Callable[[_T], _U]
) -> _U:
    """Awaits ``awaitable`` and passes its result through ``f``."""
    return f(await awaitable)
