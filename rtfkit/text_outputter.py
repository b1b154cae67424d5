"""Writes the events gathered by a collector as a plain-text report."""

from __future__ import annotations

from pathlib import Path

from rtfkit.collector import EventKind, TestResultCollector

_TAGS = {
    EventKind.REPORT: "[INFO]  ",
    EventKind.FAILURE: "[FAIL]  ",
    EventKind.ERROR: "[ERROR] ",
}


class TextOutputter:
    """Renders a collector's events and summary as text."""

    def __init__(self, collector: TestResultCollector, verbose: bool = False) -> None:
        self.collector = collector
        self.verbose = verbose

    def _lines(self, summary: bool):
        for event in self.collector.results():
            name = event.test.name
            if event.kind is EventKind.START_SUITE:
                yield f"Test suite {name} started...\n"
            elif event.kind is EventKind.END_SUITE:
                outcome = "passed!" if event.test.succeeded() else "failed!"
                yield f"Test suite {name} {outcome}\n"
            elif event.kind is EventKind.START_TEST:
                yield f"Test case {name} started...\n"
            elif event.kind is EventKind.END_TEST:
                outcome = "passed!" if event.test.succeeded() else "failed!"
                yield f"Test case {name} {outcome}\n"
            else:
                msg = event.message
                yield f"{_TAGS[event.kind]}({name}) {msg.message}: {msg.detail}\n"
                if self.verbose and msg.source_line != 0:
                    yield f"{msg.source_file} at {msg.source_line}.\n\n"

        if summary:
            c = self.collector
            yield "\n---------- summary -----------\n"
            if c.suite_count():
                yield f"Total number of test suites  : {c.suite_count()}\n"
                yield f"Number of passed test suites : {c.passed_suite_count()}\n"
                yield f"Number of failed test suites : {c.failed_suite_count()}\n"
            yield f"Total number of test cases   : {c.test_count()}\n"
            yield f"Number of passed test cases  : {c.passed_count()}\n"
            yield f"Number of failed test cases  : {c.failed_count()}\n"

    def render(self, summary: bool = False) -> str:
        """Return the report, followed by counts when ``summary`` is true."""
        return "".join(self._lines(summary))

    def write(self, filename: str | Path, summary: bool = False) -> None:
        """Write the report to ``filename``.

        Raises ValueError for an empty file name and OSError when the file
        cannot be opened.
        """
        if not str(filename):
            raise ValueError("Cannot open the file. Empty file name.")
        with open(filename, "w", encoding="utf-8") as handle:
            handle.write(self.render(summary))