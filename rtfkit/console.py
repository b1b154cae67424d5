"""A listener that prints test events to the console as they happen."""

from __future__ import annotations

import os
import sys
from typing import Any, TextIO

from rtfkit.message import TestMessage
from rtfkit.result import TestListener

_BLUE = "\033[94m"
_GREEN = "\033[92m"
_RED = "\033[91m"
_GRAY = "\033[30m"
_ENDC = "\033[0m"


def _colors_supported() -> bool:
    return os.name != "nt" and "NO_COLORED_CONSOLE" not in os.environ


class ConsoleListener(TestListener):
    """Prints each event on a line; optionally shows where messages came from."""

    def __init__(
        self,
        verbose: bool = False,
        stream: TextIO | None = None,
        colored: bool | None = None,
    ) -> None:
        self.verbose = verbose
        self.hide_uncritical = False
        self._stream = stream
        if colored is None:
            colored = _colors_supported()
        self._colored = colored

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stdout

    def _c(self, code: str) -> str:
        return code if self._colored else ""

    def _emit(self, text: str) -> None:
        self.stream.write(text)
        self.stream.flush()

    def _message(self, tag_color: str, tag: str, test: Any, msg: TestMessage) -> None:
        lines = (
            f"{self._c(tag_color)}{tag}{self._c(_ENDC)}"
            f"({test.name}) {msg.message}: {msg.detail}\n"
        )
        if self.verbose and msg.source_line != 0:
            lines += (
                f"{self._c(_GRAY)}{msg.source_file} at {msg.source_line}."
                f"{self._c(_ENDC)}\n\n"
            )
        self._emit(lines)

    def _status(self, text: str) -> None:
        self._emit(f"{self._c(_BLUE)}{text}{self._c(_ENDC)}\n")

    def hide_uncritical_messages(self) -> None:
        """From now on print only errors and failures."""
        self.hide_uncritical = True

    def add_report(self, test: Any, msg: TestMessage) -> None:
        if self.hide_uncritical:
            return
        self._message(_GREEN, "[INFO]  ", test, msg)

    def add_error(self, test: Any, msg: TestMessage) -> None:
        self._message(_RED, "[ERROR] ", test, msg)

    def add_failure(self, test: Any, msg: TestMessage) -> None:
        self._message(_RED, "[FAIL]  ", test, msg)

    def start_test(self, test: Any) -> None:
        if self.hide_uncritical:
            return
        self._status(f"Test case {test.name} started...")

    def end_test(self, test: Any) -> None:
        if self.hide_uncritical:
            return
        outcome = "passed!" if test.succeeded() else "failed!"
        self._status(f"Test case {test.name} {outcome}")

    def start_test_suite(self, test: Any) -> None:
        if self.hide_uncritical:
            return
        self._status(f"Test suite {test.name} started...")

    def end_test_suite(self, test: Any) -> None:
        if self.hide_uncritical:
            return
        outcome = "passed!" if test.succeeded() else "failed!"
        self._status(f"Test suite {test.name} {outcome}")

    def start_test_runner(self) -> None:
        if self.hide_uncritical:
            return
        self._status("Starting test runner.")

    def end_test_runner(self) -> None:
        if self.hide_uncritical:
            return
        self._status("Ending test runner.")