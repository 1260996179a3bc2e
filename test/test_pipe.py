from __future__ import annotations

from unittest import mock

from fpcore import Pipeable, pipe


class TestPipe:
    def test_no_functions_returns_value(self) -> None:
        sentinel = object()
        assert pipe(sentinel) is sentinel

    def test_left_to_right(self) -> None:
        assert pipe(2, lambda x: x + 1, lambda x: x * 10, str) == "30"

    def test_each_function_called_once_in_order(self) -> None:
        manager = mock.Mock()
        manager.first.return_value = "a"
        manager.second.return_value = "b"

        assert pipe("start", manager.first, manager.second) == "b"
        assert manager.mock_calls == [mock.call.first("start"), mock.call.second("a")]

    def test_many_functions(self) -> None:
        increments = [lambda x: x + 1] * 12
        assert pipe(0, *increments) == 12


class TestPipeable:
    def test_pipe_method_delegates(self) -> None:
        class Box(Pipeable):
            __slots__ = ("value",)

            def __init__(self, value: int) -> None:
                self.value = value

        box = Box(3)
        assert box.pipe() is box
        assert box.pipe(lambda b: b.value, lambda v: v * 2) == 6
