from __future__ import annotations

import logging
import sys
import typing

import pytest
from hypothesis import settings

import fpcore

settings.register_profile("default", max_examples=200, deadline=None)
settings.register_profile("thorough", max_examples=2000, deadline=None)
settings.load_profile("default")

# Structural pattern matching is only valid syntax on Python 3.10+.
collect_ignore: list[str] = []
if sys.version_info < (3, 10):
    collect_ignore.append("test_pattern_matching.py")


@pytest.fixture
def fpcore_debug_log(
    caplog: pytest.LogCaptureFixture,
) -> typing.Generator[pytest.LogCaptureFixture, None, None]:
    with caplog.at_level(logging.DEBUG, logger=fpcore.__name__):
        yield caplog
