"""Assertion helpers and the exceptions tests raise to stop early."""

from __future__ import annotations

from typing import Any

from rtfkit.message import TestMessage

_FORMAT_LIMIT = 254


class TestException(Exception):
    """Base for exceptions carrying a TestMessage."""

    __test__ = False

    def __init__(self, message: TestMessage | str) -> None:
        if isinstance(message, str):
            message = TestMessage(message)
        super().__init__(message.message)
        self.message = message


class TestFailureException(TestException):
    """Raised when a test fails."""


class TestErrorException(TestException):
    """Raised when a test hits an error."""


class FixtureException(TestException):
    """Raised when a fixture cannot be set up or has collapsed."""


def fail(msg: TestMessage) -> None:
    """Raise a failure with ``msg``."""
    raise TestFailureException(msg)


def fail_unless(condition: bool, msg: TestMessage) -> None:
    """Raise a failure with ``msg`` when ``condition`` is false."""
    if not condition:
        fail(msg)


def error(msg: TestMessage) -> None:
    """Raise an error with ``msg``."""
    raise TestErrorException(msg)


def error_unless(condition: bool, msg: TestMessage) -> None:
    """Raise an error with ``msg`` when ``condition`` is false."""
    if not condition:
        error(msg)


def _outside_testcase(function: str, msg: TestMessage) -> None:
    error(
        TestMessage(
            "asserts error with exception",
            f"{function}() is called outside a TestCase!",
            msg.source_file,
            msg.source_line,
        )
    )


def report(msg: TestMessage, test: Any) -> None:
    """Send ``msg`` as a report through the result of ``test``."""
    if test is None:
        _outside_testcase("report", msg)
    test.result.add_report(test, msg)


def test_fail(condition: bool, msg: TestMessage, testcase: Any) -> None:
    """Mark ``testcase`` failed and record ``msg`` when ``condition`` is false."""
    if testcase is None:
        _outside_testcase("test_fail", msg)
    if not condition:
        testcase.failed()
        testcase.result.add_failure(testcase, msg)


def test_check(condition: bool, msg: TestMessage, testcase: Any) -> None:
    """Record a failure when ``condition`` is false, otherwise a report."""
    if testcase is None:
        _outside_testcase("test_check", msg)
    if not condition:
        testcase.failed()
        testcase.result.add_failure(testcase, msg)
    else:
        report(msg, testcase)


test_fail.__test__ = False
test_check.__test__ = False


def format_message(fmt: str | None, *args: Any) -> str:
    """Format ``fmt`` printf-style, truncated to 254 characters."""
    if fmt is None:
        return ""
    text = fmt % args if args else fmt
    return text[:_FORMAT_LIMIT]