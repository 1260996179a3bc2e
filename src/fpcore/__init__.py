"""
Option and Result containers for absent values and failures, without None
checks or exceptions.
"""

# Set default logging handler to avoid "No handler found" warnings.
import logging
from logging import NullHandler
from typing import TextIO

from . import exceptions, operators
from ._pipe import Pipeable, pipe
from ._version import __version__
from .option import Nothing, Option, Some, ValueAbsent, none, some, to_option
from .result import Err, Ok, Result, err, ok
from .typed_map import KeyNotFound, TypedMap, create_typed_map

__license__ = "MIT"
__version__ = __version__

__all__ = (
    "Err",
    "KeyNotFound",
    "Nothing",
    "Ok",
    "Option",
    "Pipeable",
    "Result",
    "Some",
    "TypedMap",
    "ValueAbsent",
    "add_stderr_logger",
    "create_typed_map",
    "err",
    "exceptions",
    "none",
    "ok",
    "operators",
    "pipe",
    "some",
    "to_option",
)

logging.getLogger(__name__).addHandler(NullHandler())


def add_stderr_logger(level: int = logging.DEBUG) -> "logging.StreamHandler[TextIO]":
    """
    Helper for quickly adding a StreamHandler to the logger. Useful for
    debugging.

    Returns the handler after adding it.
    """
    # This method needs to be in this __init__.py to get the __name__ correct
    # even if fpcore is vendored within another package.
    logger = logging.getLogger(__name__)
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(message)s"))
    logger.addHandler(handler)
    logger.setLevel(level)
    logger.debug("Added a stderr logging handler to logger: %s", __name__)
    return handler


# ... Clean up.
del NullHandler
