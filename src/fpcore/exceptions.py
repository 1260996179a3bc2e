from __future__ import annotations

import typing

if typing.TYPE_CHECKING:
    from .option import Option
    from .result import Result

    _TYPE_CONTAINER = typing.Union[
        Option[typing.Any], Result[typing.Any, typing.Any], None
    ]

# Base Exceptions


class FPCoreError(Exception):
    """Base exception used by this module."""

    pass


_TYPE_REDUCE_RESULT = typing.Tuple[
    typing.Callable[..., object], typing.Tuple[object, ...]
]


class UnwrapError(ValueError, FPCoreError):
    """Raised when a container is unwrapped on the variant that holds no such value.

    :param container: The container that was unwrapped.
    :param string message: Description of the mismatch.
    """

    def __init__(self, container: _TYPE_CONTAINER, message: str) -> None:
        self.container = container
        super().__init__(message)

    def __reduce__(self) -> _TYPE_REDUCE_RESULT:
        # For pickling purposes. The container may hold unpicklable values.
        return self.__class__, (None, self.args[0])


# Leaf Exceptions


class EmptyUnwrapError(UnwrapError):
    """Raised when unwrapping an Option in the ``Nothing`` state."""

    def __init__(
        self,
        container: _TYPE_CONTAINER,
        message: str = "Cannot unwrap an Option of None",
    ) -> None:
        super().__init__(container, message)


class ResultUnwrapError(UnwrapError):
    """Raised when unwrapping the value of an ``Err`` or the error of an ``Ok``.

    When the unwrapped ``Err`` holds an exception it is available as
    ``__cause__``.
    """

    pass
