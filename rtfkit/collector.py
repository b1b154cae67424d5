"""A listener that stores every event and counts passes and failures."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any

from rtfkit.message import TestMessage
from rtfkit.result import TestListener


class EventKind(enum.Enum):
    REPORT = "report"
    ERROR = "error"
    FAILURE = "failure"
    START_TEST = "start_test"
    END_TEST = "end_test"
    START_SUITE = "start_suite"
    END_SUITE = "end_suite"


@dataclass
class ResultEvent:
    """One collected event: its kind, the test it concerns and its message."""

    kind: EventKind
    test: Any
    message: TestMessage


class TestResultCollector(TestListener):
    """Collects the events of a run for later output."""

    __test__ = False

    def __init__(self) -> None:
        self._events: list[ResultEvent] = []
        self._tests = self._passes = self._failures = 0
        self._suites = self._suite_passes = self._suite_failures = 0

    def reset(self) -> None:
        """Drop the collected events and the test-case counters."""
        self._tests = self._passes = self._failures = 0
        self._events.clear()

    def test_count(self) -> int:
        return self._tests

    def failed_count(self) -> int:
        return self._failures

    def passed_count(self) -> int:
        return self._passes

    def suite_count(self) -> int:
        return self._suites

    def failed_suite_count(self) -> int:
        return self._suite_failures

    def passed_suite_count(self) -> int:
        return self._suite_passes

    def results(self) -> list[ResultEvent]:
        return self._events

    def _push(self, kind: EventKind, test: Any, msg: TestMessage) -> None:
        self._events.append(ResultEvent(kind, test, msg))

    def add_report(self, test: Any, msg: TestMessage) -> None:
        self._push(EventKind.REPORT, test, msg)

    def add_error(self, test: Any, msg: TestMessage) -> None:
        self._push(EventKind.ERROR, test, msg)

    def add_failure(self, test: Any, msg: TestMessage) -> None:
        self._push(EventKind.FAILURE, test, msg)

    def start_test(self, test: Any) -> None:
        self._tests += 1
        self._push(EventKind.START_TEST, test, TestMessage("started"))

    def end_test(self, test: Any) -> None:
        if test.succeeded():
            self._passes += 1
        else:
            self._failures += 1
        self._push(EventKind.END_TEST, test, TestMessage("ended"))

    def start_test_suite(self, test: Any) -> None:
        self._suites += 1
        self._push(EventKind.START_SUITE, test, TestMessage("started"))

    def end_test_suite(self, test: Any) -> None:
        if test.succeeded():
            self._suite_passes += 1
        else:
            self._suite_failures += 1
        self._push(EventKind.END_SUITE, test, TestMessage("ended"))