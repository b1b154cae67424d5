"""Event listeners and the dispatcher that forwards test events to them."""

from __future__ import annotations

from typing import Any

from rtfkit.message import TestMessage


class TestListener:
    """Receives test events. Every handler does nothing by default."""

    __test__ = False

    def add_report(self, test: Any, msg: TestMessage) -> None:
        """Handle an informational report."""

    def add_error(self, test: Any, msg: TestMessage) -> None:
        """Handle an error."""

    def add_failure(self, test: Any, msg: TestMessage) -> None:
        """Handle a failure."""

    def start_test(self, test: Any) -> None:
        """Handle the start of a test case."""

    def end_test(self, test: Any) -> None:
        """Handle the end of a test case."""

    def start_test_suite(self, test: Any) -> None:
        """Handle the start of a test suite."""

    def end_test_suite(self, test: Any) -> None:
        """Handle the end of a test suite."""

    def start_test_runner(self) -> None:
        """Handle the start of a runner."""

    def end_test_runner(self) -> None:
        """Handle the end of a runner."""


class TestResult:
    """Forwards every event to each registered listener once."""

    __test__ = False

    def __init__(self) -> None:
        self._listeners: dict[int, TestListener] = {}

    @property
    def listeners(self) -> list[TestListener]:
        return list(self._listeners.values())

    def add_listener(self, listener: TestListener) -> None:
        self._listeners.setdefault(id(listener), listener)

    def remove_listener(self, listener: TestListener) -> None:
        self._listeners.pop(id(listener), None)

    def reset(self) -> None:
        """Forget every listener."""
        self._listeners.clear()

    def add_report(self, test: Any, msg: TestMessage) -> None:
        for listener in self.listeners:
            listener.add_report(test, msg)

    def add_error(self, test: Any, msg: TestMessage) -> None:
        for listener in self.listeners:
            listener.add_error(test, msg)

    def add_failure(self, test: Any, msg: TestMessage) -> None:
        for listener in self.listeners:
            listener.add_failure(test, msg)

    def start_test(self, test: Any) -> None:
        for listener in self.listeners:
            listener.start_test(test)

    def end_test(self, test: Any) -> None:
        for listener in self.listeners:
            listener.end_test(test)

    def start_test_suite(self, test: Any) -> None:
        for listener in self.listeners:
            listener.start_test_suite(test)

    def end_test_suite(self, test: Any) -> None:
        for listener in self.listeners:
            listener.end_test_suite(test)

    def start_test_runner(self) -> None:
        for listener in self.listeners:
            listener.start_test_runner()

    def end_test_runner(self) -> None:
        for listener in self.listeners:
            listener.end_test_runner()