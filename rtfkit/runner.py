"""Runs a list of tests one after another."""

from __future__ import annotations

from typing import Any

from rtfkit.testcase import Test


class TestRunner:
    """Runs its tests in order until done or interrupted."""

    __test__ = False

    def __init__(self) -> None:
        self.tests: list[Test] = []
        self.current: Test | None = None
        self.interrupted = False

    def add_test(self, test: Test) -> None:
        """Append ``test`` unless this very test is already present."""
        if not any(existing is test for existing in self.tests):
            self.tests.append(test)

    def remove_test(self, test: Test) -> None:
        self.tests = [existing for existing in self.tests if existing is not test]

    def reset(self) -> None:
        """Drop every test."""
        self.tests.clear()

    def run(self, result: Any) -> None:
        """Run each test against ``result`` between runner start and end events."""
        self.interrupted = False
        result.start_test_runner()
        for test in list(self.tests):
            if self.interrupted:
                break
            self.current = test
            test.run(result)
        result.end_test_runner()
        self.current = None

    def interrupt(self) -> None:
        """Interrupt the running test and skip the remaining ones."""
        if self.current is not None:
            self.current.interrupt()
        self.interrupted = True