from __future__ import annotations

import logging

import pytest

import fpcore


class TestAddStderrLogger:
    def test_adds_handler(self) -> None:
        logger = logging.getLogger("fpcore")
        previous_level = logger.level
        handler = fpcore.add_stderr_logger()
        try:
            assert isinstance(handler, logging.StreamHandler)
            assert handler in logger.handlers
            assert logger.level == logging.DEBUG
        finally:
            logger.removeHandler(handler)
            logger.setLevel(previous_level)

    def test_custom_level(self) -> None:
        logger = logging.getLogger("fpcore")
        previous_level = logger.level
        handler = fpcore.add_stderr_logger(logging.WARNING)
        try:
            assert logger.level == logging.WARNING
        finally:
            logger.removeHandler(handler)
            logger.setLevel(previous_level)

    def test_null_handler_installed(self) -> None:
        logger = logging.getLogger("fpcore")
        assert any(isinstance(h, logging.NullHandler) for h in logger.handlers)


class TestPublicApi:
    @pytest.mark.parametrize("name", fpcore.__all__)
    def test_exported(self, name: str) -> None:
        assert hasattr(fpcore, name)

    def test_version(self) -> None:
        assert isinstance(fpcore.__version__, str)
