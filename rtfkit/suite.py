"""Test suites: ordered groups of tests sharing fixtures."""

from __future__ import annotations

import inspect
from typing import Any

from rtfkit.asserter import (
    FixtureException,
    TestErrorException,
    TestFailureException,
)
from rtfkit.fixture import FixtureEvents, FixtureManager
from rtfkit.message import TestMessage
from rtfkit.testcase import Test


def _here() -> tuple[str, int]:
    frame = inspect.currentframe()
    caller = frame.f_back if frame is not None else None
    return __file__, (caller.f_lineno if caller is not None else 0)


class TestSuite(Test, FixtureEvents):
    """Runs its tests in order, restarting fixtures that collapse."""

    __test__ = False

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.tests: list[Test] = []
        self.fixture_managers: list[FixtureManager] = []
        self.successful = True
        self.fixture_ok = True
        self.result: Any = None
        self.fixture_message = TestMessage()
        self.current: Test | None = None

    def __len__(self) -> int:
        return len(self.tests)

    def add_test(self, test: Test) -> None:
        """Append ``test`` unless this very test is already present."""
        if not any(existing is test for existing in self.tests):
            self.tests.append(test)

    def remove_test(self, test: Test) -> None:
        self.tests = [existing for existing in self.tests if existing is not test]

    def reset(self) -> None:
        """Drop every test and clear the run state."""
        self.tests.clear()
        self.successful = self.fixture_ok = True
        self.result = None
        self.fixture_message = TestMessage()

    def succeeded(self) -> bool:
        return self.successful

    def setup(self) -> bool:
        """Set up fixtures in order, stopping at the first that fails."""
        return all(manager.setup() for manager in self.fixture_managers)

    def tear_down(self) -> None:
        """Tear down fixtures in reverse order."""
        for manager in reversed(self.fixture_managers):
            manager.tear_down()

    def _check_fixtures(self) -> bool:
        return all(manager.check() for manager in self.fixture_managers)

    def _restart_fixtures(self, result: Any) -> None:
        self.successful = False
        source_file, source_line = _here()
        result.add_report(
            self,
            TestMessage("reports", "restarting fixture setup", source_file, source_line),
        )
        self.tear_down()
        if not self.setup():
            raise FixtureException(TestMessage("setup() failed!"))
        if not self._check_fixtures():
            source_file, source_line = _here()
            raise FixtureException(
                TestMessage("Fixture collapsed", "check() failed", source_file, source_line)
            )
        self.fixture_ok = True

    def run(self, result: Any) -> None:
        """Set up fixtures, run every test, tear down, reporting to ``result``."""
        self.result = result
        self.successful = self.fixture_ok = True
        self.interrupted = False
        self.fixture_message = TestMessage()
        try:
            result.start_test_suite(self)
            if not self.setup():
                result.add_error(self, TestMessage("setup() failed!"))
                self.successful = False
                result.end_test_suite(self)
                return

            for test in list(self.tests):
                self.current = test
                if self.interrupted:
                    raise TestFailureException(TestMessage("interrupted!"))
                if not self.fixture_ok:
                    result.add_error(self, self.fixture_message)
                if not self._check_fixtures():
                    source_file, source_line = _here()
                    result.add_error(
                        self,
                        TestMessage("Fixture collapsed", "check() failed", source_file, source_line),
                    )
                    self.fixture_ok = False
                if not self.fixture_ok:
                    self._restart_fixtures(result)
                test.run(result)
                self.successful = test.succeeded() and self.successful
        except TestFailureException as exc:
            self.successful = False
            result.add_failure(self, exc.message)
        except (TestErrorException, FixtureException) as exc:
            self.successful = False
            result.add_error(self, exc.message)
        except Exception as exc:
            self.successful = False
            result.add_error(self, TestMessage(str(exc)))

        try:
            self.tear_down()
        except TestErrorException as exc:
            self.successful = False
            result.add_error(self, exc.message)
        except Exception as exc:
            self.successful = False
            result.add_error(self, TestMessage(str(exc)))

        result.end_test_suite(self)
        self.current = None

    def add_fixture_manager(self, manager: FixtureManager) -> None:
        """Attach ``manager`` and make this suite its dispatcher."""
        manager.dispatcher = self
        self.fixture_managers.append(manager)

    def fixture_collapsed(self, reason: TestMessage) -> None:
        """Record a collapse; the fixture is restarted before the next test."""
        self.fixture_ok = False
        self.fixture_message = reason

    def interrupt(self) -> None:
        if self.current is not None:
            self.current.interrupt()
        self.interrupted = True