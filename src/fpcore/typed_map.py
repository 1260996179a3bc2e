from __future__ import annotations

import logging
import typing
from collections.abc import Mapping

from .option import Option, none, some
from .result import Result, err, ok

log = logging.getLogger(__name__)

_KT = typing.TypeVar("_KT")
_VT = typing.TypeVar("_VT")

ValidTypedMapSource = typing.Union[
    "TypedMap[_KT, _VT]",
    typing.Mapping[_KT, _VT],
    typing.Iterable[typing.Tuple[_KT, _VT]],
]

__all__ = ["KeyNotFound", "TypedMap", "create_typed_map"]


class KeyNotFound(typing.NamedTuple):
    """Failure returned by :meth:`TypedMap.delete` for an absent key."""

    type: str = "KeyNotFound"


class TypedMap(typing.Generic[_KT, _VT]):
    """
    :param entries:
        An iterable of key-value pairs, or a mapping, to seed the map with.
        The entries are copied.

    A ``dict`` wrapper whose lookups and removals answer with
    :class:`~fpcore.option.Option` and :class:`~fpcore.result.Result`
    instead of ``None``, ``KeyError`` or booleans.

    >>> m = TypedMap([("a", 1)])
    >>> m.get("a")
    Some(1)
    >>> m.get("b")
    Nothing
    >>> m.delete("b")
    Err(KeyNotFound(type='KeyNotFound'))
    """

    __slots__ = ("_container",)

    _container: typing.MutableMapping[_KT, _VT]

    def __init__(self, entries: ValidTypedMapSource[_KT, _VT] | None = None) -> None:
        self._container = {}
        if entries is not None:
            self._extend(entries)

    @classmethod
    def from_map(
        cls, mapping: typing.MutableMapping[_KT, _VT], copy: bool = True
    ) -> TypedMap[_KT, _VT]:
        """
        Wraps an existing mapping.

        By default the entries are copied, so later changes to ``mapping``
        are not seen through the wrapper. With ``copy=False`` the wrapper
        uses ``mapping`` itself as its storage: this skips the copy, but
        every outside change to ``mapping`` shows through the wrapper and
        the caller is responsible for coordinating those changes.
        """
        if copy:
            return cls(mapping)

        log.debug(
            "Wrapping %s of %d entries by reference",
            type(mapping).__name__,
            len(mapping),
        )
        return cls._shared(mapping)

    @classmethod
    def _shared(cls, mapping: typing.MutableMapping[_KT, _VT]) -> TypedMap[_KT, _VT]:
        typed_map = cls.__new__(cls)
        typed_map._container = mapping
        return typed_map

    def _extend(self, other: ValidTypedMapSource[_KT, _VT]) -> None:
        if isinstance(other, TypedMap):
            self._container.update(other._container)
        elif isinstance(other, Mapping):
            for key in other:
                self._container[key] = other[key]
        else:
            for key, value in other:
                self._container[key] = value

    def get(self, key: _KT) -> Option[_VT]:
        """Returns ``Some(value)`` if ``key`` is present, ``Nothing`` otherwise."""
        if key in self._container:
            return some(self._container[key])
        return none()

    def has(self, key: _KT) -> bool:
        return key in self._container

    def set(self, key: _KT, value: _VT) -> TypedMap[_KT, _VT]:
        """Inserts or overwrites ``key``. Returns the map for call chaining."""
        self._container[key] = value
        return self

    def delete(self, key: _KT) -> Result[KeyNotFound, None]:
        """
        Removes ``key``, returning ``Ok(None)``. If the key is absent the map
        is left unchanged and ``Err(KeyNotFound())`` is returned.
        """
        try:
            del self._container[key]
        except KeyError:
            return err(KeyNotFound())
        return ok()

    def clear(self) -> None:
        self._container.clear()

    def for_each(
        self, f: typing.Callable[[_VT, _KT, TypedMap[_KT, _VT]], typing.Any]
    ) -> None:
        """
        Calls ``f(value, key, view)`` for every entry in insertion order.
        ``view`` is a :class:`TypedMap` over the same storage as this map,
        never the underlying ``dict``.
        """
        view = type(self)._shared(self._container)
        # Entries added or removed by ``f`` do not affect this iteration.
        for key, value in list(self._container.items()):
            f(value, key, view)

    @property
    def size(self) -> int:
        return len(self._container)

    def __len__(self) -> int:
        return len(self._container)

    def __contains__(self, key: object) -> bool:
        return key in self._container

    def __repr__(self) -> str:
        return f"{type(self).__name__}({dict(self._container)})"


def create_typed_map(
    entries: ValidTypedMapSource[_KT, _VT] | None = None
) -> TypedMap[_KT, _VT]:
    """Creates a :class:`TypedMap` seeded with ``entries``."""
    return TypedMap(entries)
