from __future__ import annotations

import typing

import trio

from fpcore import Option, Result, err, none, ok, some

_T = typing.TypeVar("_T")


class CannotBeNegativeError(typing.NamedTuple):
    value: int
    tag: str = "CannotBeNegativeError"


def option_from_number(x: int) -> Option[int]:
    return some(x) if x > 0 else none()


def result_from_number(x: int) -> Result[CannotBeNegativeError, int]:
    return ok(x) if x > 0 else err(CannotBeNegativeError(x))


def run(awaitable: typing.Awaitable[_T]) -> _T:
    """Drives ``awaitable`` to completion on a fresh trio event loop."""

    async def main() -> _T:
        return await awaitable

    return trio.run(main)


async def double_async(x: int) -> int:
    await trio.lowlevel.checkpoint()
    return x * 2
