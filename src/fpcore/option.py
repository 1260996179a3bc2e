from __future__ import annotations

import logging
import typing

from ._pipe import Pipeable
from .exceptions import EmptyUnwrapError
from .util.functions import identity, noop, resolved, then, throws

if typing.TYPE_CHECKING:
    from .result import Result

log = logging.getLogger(__name__)

_T = typing.TypeVar("_T")
_T_co = typing.TypeVar("_T_co", covariant=True)
_U = typing.TypeVar("_U")
_R = typing.TypeVar("_R")

__all__ = [
    "Nothing",
    "Option",
    "Some",
    "ValueAbsent",
    "none",
    "some",
    "to_option",
]


class ValueAbsent(typing.NamedTuple):
    """Failure produced when converting a ``Nothing`` into a ``Result``."""

    type: str = "ValueAbsent"


class Option(Pipeable, typing.Generic[_T_co]):
    """
    An optional value: either ``Some(value)`` or ``Nothing``.

    Every operation leaves the receiver untouched and hands back an Option
    (or, for the effect and unwrap operations, a plain value). Operations
    are written in terms of :meth:`match`, the only place a variant exposes
    its contents.

    Options are created through :func:`some`, :func:`none` and
    :func:`to_option` rather than by instantiating this class.
    """

    __slots__ = ()

    def __setattr__(self, name: str, value: typing.Any) -> None:
        raise AttributeError(f"{type(self).__name__!r} object is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__!r} object is immutable")

    @staticmethod
    def of(value: _U | None) -> Option[_U]:
        """Alias of :func:`to_option`."""
        return to_option(value)

    def match(
        self, *, some: typing.Callable[[_T_co], _R], none: typing.Callable[[], _R]
    ) -> _R:
        """
        Calls ``some(value)`` if this is ``Some``, ``none()`` otherwise, and
        returns whatever the called arm returns.
        """
        raise NotImplementedError()

    def map(self, f: typing.Callable[[_T_co], _U]) -> Option[_U]:
        """
        Applies ``f`` to the inner value of a ``Some``. ``Nothing`` is
        returned as is and ``f`` is not called.
        """
        return self.match(
            some=lambda value: Some(f(value)),  # type: ignore[misc]
            none=none,
        )

    async def map_async(
        self, f: typing.Callable[[_T_co], typing.Awaitable[_U]]
    ) -> Option[_U]:
        return await self.match(
            some=lambda value: then(f(value), Some),  # type: ignore[misc]
            none=lambda: resolved(none()),
        )

    def chain(self, f: typing.Callable[[_T_co], Option[_U]]) -> Option[_U]:
        """
        Applies ``f`` to the inner value of a ``Some`` and returns its Option
        directly, so ``f`` may turn a ``Some`` into ``Nothing``.
        """
        return self.match(some=f, none=none)

    async def chain_async(
        self, f: typing.Callable[[_T_co], typing.Awaitable[Option[_U]]]
    ) -> Option[_U]:
        return await self.match(some=f, none=lambda: resolved(none()))

    def filter(self, predicate: typing.Callable[[_T_co], bool]) -> Option[_T_co]:
        """
        Keeps a ``Some`` whose value satisfies ``predicate``; the very same
        instance is returned in that case. Otherwise returns ``Nothing``.
        """
        return self.match(
            some=lambda value: self if predicate(value) else none(),  # type: ignore[misc]
            none=none,
        )

    async def filter_async(
        self, predicate: typing.Callable[[_T_co], typing.Awaitable[bool]]
    ) -> Option[_T_co]:
        return await self.match(
            some=lambda value: then(  # type: ignore[misc]
                predicate(value), lambda keep: self if keep else none()
            ),
            none=lambda: resolved(none()),
        )

    def for_each(self, f: typing.Callable[[_T_co], typing.Any]) -> None:
        """Calls ``f`` with the inner value of a ``Some``, for its effects."""
        self.match(some=f, none=noop)

    async def for_each_async(
        self, f: typing.Callable[[_T_co], typing.Awaitable[typing.Any]]
    ) -> None:
        await self.match(some=f, none=lambda: resolved(None))

    def tap(self, f: typing.Callable[[_T_co], typing.Any]) -> Option[_T_co]:
        """Like :meth:`for_each`, but returns this Option for further chaining."""
        self.for_each(f)
        return self

    async def tap_async(
        self, f: typing.Callable[[_T_co], typing.Awaitable[typing.Any]]
    ) -> Option[_T_co]:
        await self.for_each_async(f)
        return self

    def unwrap(self) -> _T_co:
        """
        Returns the inner value of a ``Some``.

        :raises EmptyUnwrapError: If this is ``Nothing``.

        Prefer :meth:`match` or the ``unwrap_or*`` family, which never raise.
        """
        return self.match(some=identity, none=throws(self._unwrap_failed))

    def unwrap_or(self, fallback: _U) -> _T_co | _U:
        return typing.cast(
            "_T_co | _U", self.match(some=identity, none=lambda: fallback)
        )

    def unwrap_or_else(self, f: typing.Callable[[], _U]) -> _T_co | _U:
        """
        Returns the inner value of a ``Some`` without calling ``f``, or the
        result of ``f()`` for ``Nothing``.
        """
        return typing.cast("_T_co | _U", self.match(some=identity, none=f))

    async def unwrap_or_else_async(
        self, f: typing.Callable[[], typing.Awaitable[_U]]
    ) -> _T_co | _U:
        return await self.match(some=resolved, none=f)

    def is_some(self) -> bool:
        return self.match(some=lambda _: True, none=lambda: False)  # type: ignore[misc]

    def is_none(self) -> bool:
        return self.match(some=lambda _: False, none=lambda: True)  # type: ignore[misc]

    def to_result(self) -> Result[ValueAbsent, _T_co]:
        """
        Converts to a ``Result``: ``Some(value)`` becomes ``Ok(value)`` and
        ``Nothing`` becomes ``Err(ValueAbsent())``.
        """
        from .result import err, ok

        return self.match(some=ok, none=lambda: err(ValueAbsent()))

    def _unwrap_failed(self) -> EmptyUnwrapError:
        log.debug("Attempted to unwrap %r", self)
        return EmptyUnwrapError(self)


class Some(Option[_T_co]):
    """An :class:`Option` holding ``value``."""

    __slots__ = ("value",)
    __match_args__ = ("value",)

    value: _T_co

    def __init__(self, value: _T_co) -> None:
        object.__setattr__(self, "value", value)

    def match(
        self, *, some: typing.Callable[[_T_co], _R], none: typing.Callable[[], _R]
    ) -> _R:
        return some(self.value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Some):
            return NotImplemented
        return bool(self.value == other.value)

    def __hash__(self) -> int:
        return hash((Some, self.value))

    def __repr__(self) -> str:
        return f"Some({self.value!r})"

    def __reduce__(self) -> tuple[typing.Any, ...]:
        return Some, (self.value,)


class Nothing(Option[typing.NoReturn]):
    """
    The empty :class:`Option`. There is a single instance; calling
    ``Nothing()`` returns it, as does :func:`none`.
    """

    __slots__ = ()
    __match_args__ = ()

    _instance: typing.ClassVar[Nothing | None] = None

    def __new__(cls) -> Nothing:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def match(
        self,
        *,
        some: typing.Callable[[typing.NoReturn], _R],
        none: typing.Callable[[], _R],
    ) -> _R:
        return none()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Option):
            return NotImplemented
        return isinstance(other, Nothing)

    def __hash__(self) -> int:
        return hash(Nothing)

    def __repr__(self) -> str:
        return "Nothing"

    def __reduce__(self) -> tuple[typing.Any, ...]:
        return Nothing, ()


def some(value: _T) -> Option[_T]:
    """Creates an :class:`Option` in the ``Some`` state holding ``value``."""
    return Some(value)


def none() -> Option[typing.NoReturn]:
    """Returns the :class:`Option` in the ``Nothing`` state."""
    return Nothing()


def to_option(value: _T | None) -> Option[_T]:
    """
    Lifts an arbitrary value into an :class:`Option`.

    ``None`` and the empty string become ``Nothing``; every other value,
    falsy ones such as ``0``, ``False`` or ``{}`` included, becomes
    ``Some(value)``.

    >>> to_option("")
    Nothing
    >>> to_option(0)
    Some(0)
    """
    if value is None:
        return none()

    if isinstance(value, str) and len(value) == 0:
        return none()

    return some(value)
