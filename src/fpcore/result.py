from __future__ import annotations

import logging
import typing

from ._pipe import Pipeable
from .exceptions import ResultUnwrapError
from .option import Option, none, some
from .util.functions import identity, resolved, then, throws

log = logging.getLogger(__name__)

_T = typing.TypeVar("_T")
_E = typing.TypeVar("_E")
_T_co = typing.TypeVar("_T_co", covariant=True)
_E_co = typing.TypeVar("_E_co", covariant=True)
_U = typing.TypeVar("_U")
_F = typing.TypeVar("_F")
_R = typing.TypeVar("_R")

__all__ = ["Err", "Ok", "Result", "err", "ok"]


class Result(Pipeable, typing.Generic[_E_co, _T_co]):
    """
    The outcome of an operation: either ``Ok(value)`` or ``Err(error)``.

    Mirrors :class:`~fpcore.option.Option` with a second channel for the
    error. Value-side operations leave an ``Err`` untouched and error-side
    operations leave an ``Ok`` untouched; the function passed in is not
    called for the side it does not apply to.

    Results are created through :func:`ok` and :func:`err`.
    """

    __slots__ = ()

    def __setattr__(self, name: str, value: typing.Any) -> None:
        raise AttributeError(f"{type(self).__name__!r} object is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__!r} object is immutable")

    def match(
        self, *, ok: typing.Callable[[_T_co], _R], err: typing.Callable[[_E_co], _R]
    ) -> _R:
        """
        Calls ``ok(value)`` for an ``Ok`` or ``err(error)`` for an ``Err``
        and returns whatever the called arm returns.
        """
        raise NotImplementedError()

    def map(self, f: typing.Callable[[_T_co], _U]) -> Result[_E_co, _U]:
        return self.match(ok=lambda value: Ok(f(value)), err=Err)  # type: ignore[misc]

    async def map_async(
        self, f: typing.Callable[[_T_co], typing.Awaitable[_U]]
    ) -> Result[_E_co, _U]:
        return await self.match(
            ok=lambda value: then(f(value), Ok),  # type: ignore[misc]
            err=lambda error: resolved(Err(error)),  # type: ignore[misc]
        )

    def map_err(self, f: typing.Callable[[_E_co], _F]) -> Result[_F, _T_co]:
        return self.match(ok=Ok, err=lambda error: Err(f(error)))  # type: ignore[misc]

    async def map_err_async(
        self, f: typing.Callable[[_E_co], typing.Awaitable[_F]]
    ) -> Result[_F, _T_co]:
        return await self.match(
            ok=lambda value: resolved(Ok(value)),  # type: ignore[misc]
            err=lambda error: then(f(error), Err),  # type: ignore[misc]
        )

    def chain(
        self, f: typing.Callable[[_T_co], Result[_F, _U]]
    ) -> Result[_E_co | _F, _U]:
        """
        Applies ``f`` to the value of an ``Ok`` and returns its Result
        directly. The error types of both Results are unioned for type
        checkers; nothing is merged at runtime.
        """
        return self.match(ok=f, err=Err)

    async def chain_async(
        self, f: typing.Callable[[_T_co], typing.Awaitable[Result[_F, _U]]]
    ) -> Result[_E_co | _F, _U]:
        return await self.match(
            ok=f,
            err=lambda error: resolved(Err(error)),  # type: ignore[misc]
        )

    def unwrap(self) -> _T_co:
        """
        Returns the value of an ``Ok``.

        :raises ResultUnwrapError: If this is an ``Err``. An exception held
            by the ``Err`` is chained as the cause.
        """
        return self.match(
            ok=identity,
            err=throws(lambda: self._unwrap_failed("Cannot unwrap in error state.")),
        )

    def unwrap_err(self) -> _E_co:
        """
        Returns the error of an ``Err``.

        :raises ResultUnwrapError: If this is an ``Ok``.
        """
        return self.match(
            ok=throws(lambda: self._unwrap_failed("Cannot unwrap error of Ok")),
            err=identity,
        )

    def unwrap_or(self, fallback: _U) -> _T_co | _U:
        return typing.cast(
            "_T_co | _U",
            self.match(ok=identity, err=lambda _: fallback),  # type: ignore[misc]
        )

    def unwrap_or_else(self, f: typing.Callable[[], _U]) -> _T_co | _U:
        return typing.cast(
            "_T_co | _U",
            self.match(ok=identity, err=lambda _: f()),  # type: ignore[misc]
        )

    async def unwrap_or_else_async(
        self, f: typing.Callable[[], typing.Awaitable[_U]]
    ) -> _T_co | _U:
        return await self.match(ok=resolved, err=lambda _: f())  # type: ignore[misc]

    def is_ok(self) -> bool:
        return self.match(ok=lambda _: True, err=lambda _: False)  # type: ignore[misc]

    def is_err(self) -> bool:
        return self.match(ok=lambda _: False, err=lambda _: True)  # type: ignore[misc]

    def to_option(self) -> Option[_T_co]:
        """
        Converts to an ``Option``: ``Ok(value)`` becomes ``Some(value)`` and
        any ``Err`` becomes ``Nothing``, dropping the error.
        """
        return self.match(ok=some, err=lambda _: none())  # type: ignore[misc]

    def _unwrap_failed(self, message: str) -> ResultUnwrapError:
        log.debug("Attempted to unwrap %r: %s", self, message)
        exc = ResultUnwrapError(self, message)
        error = self.match(ok=lambda _: None, err=identity)  # type: ignore[misc]
        if isinstance(error, BaseException):
            exc.__cause__ = error
        return exc


class Ok(Result[typing.NoReturn, _T_co]):
    """A successful :class:`Result` holding ``value``."""

    __slots__ = ("value",)
    __match_args__ = ("value",)

    value: _T_co

    def __init__(self, value: _T_co) -> None:
        object.__setattr__(self, "value", value)

    def match(
        self,
        *,
        ok: typing.Callable[[_T_co], _R],
        err: typing.Callable[[typing.NoReturn], _R],
    ) -> _R:
        return ok(self.value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Ok):
            return NotImplemented
        return bool(self.value == other.value)

    def __hash__(self) -> int:
        return hash((Ok, self.value))

    def __repr__(self) -> str:
        return f"Ok({self.value!r})"

    def __reduce__(self) -> tuple[typing.Any, ...]:
        return Ok, (self.value,)


class Err(Result[_E_co, typing.NoReturn]):
    """A failed :class:`Result` holding ``error``."""

    __slots__ = ("error",)
    __match_args__ = ("error",)

    error: _E_co

    def __init__(self, error: _E_co) -> None:
        object.__setattr__(self, "error", error)

    def match(
        self,
        *,
        ok: typing.Callable[[typing.NoReturn], _R],
        err: typing.Callable[[_E_co], _R],
    ) -> _R:
        return err(self.error)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Err):
            return NotImplemented
        return bool(self.error == other.error)

    def __hash__(self) -> int:
        return hash((Err, self.error))

    def __repr__(self) -> str:
        return f"Err({self.error!r})"

    def __reduce__(self) -> tuple[typing.Any, ...]:
        return Err, (self.error,)


@typing.overload
def ok() -> Result[typing.NoReturn, None]:
    ...


@typing.overload
def ok(value: _T) -> Result[typing.NoReturn, _T]:
    ...


def ok(value: typing.Any = None) -> Result[typing.NoReturn, typing.Any]:
    """
    Creates a successful :class:`Result`. Called without a value it
    produces ``Ok(None)``, the unit success used where an operation has
    nothing to return.
    """
    return Ok(value)


def err(error: _E) -> Result[_E, typing.NoReturn]:
    """Creates a failed :class:`Result` holding ``error``."""
    return Err(error)
