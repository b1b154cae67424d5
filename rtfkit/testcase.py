"""Test cases: the unit of work that runners and suites execute."""

from __future__ import annotations

import abc
import inspect
from typing import Any

from rtfkit import arguments
from rtfkit.asserter import TestErrorException, TestFailureException
from rtfkit.message import TestMessage


def _here() -> tuple[str, int]:
    frame = inspect.currentframe()
    caller = frame.f_back if frame is not None else None
    return __file__, (caller.f_lineno if caller is not None else 0)


class Test(abc.ABC):
    """Anything that can be run against a TestResult."""

    __test__ = False

    def __init__(self, name: str, description: str = "") -> None:
        self.name = name
        self.description = description
        self.interrupted = False

    @abc.abstractmethod
    def succeeded(self) -> bool:
        """Whether the last run was successful."""

    @abc.abstractmethod
    def run(self, result: Any) -> None:
        """Run and send every event to ``result``."""

    def interrupt(self) -> None:
        """Ask a running test to stop as soon as it can."""
        self.interrupted = True


class TestCase(Test):
    """A single test; subclasses put their body in ``run_once``."""

    __test__ = False

    def __init__(
        self,
        name: str,
        param: str = "",
        environment: str = "",
        repetition: int = 0,
    ) -> None:
        super().__init__(name)
        self.param = param
        self.environment = environment
        self.repetition = repetition
        self.successful = True
        self.result: Any = None
        self.argv: list[str] = []

    def failed(self) -> None:
        """Mark this test case as failed."""
        self.successful = False

    def succeeded(self) -> bool:
        return self.successful

    def setup(self, argv: list[str]) -> bool:
        """Prepare the test; ``argv`` is the name followed by the parsed param."""
        self.argv = list(argv)
        return True

    def tear_down(self) -> None:
        """Release whatever ``setup`` acquired."""
        self.argv = []

    @abc.abstractmethod
    def run_once(self) -> None:
        """The body of the test, run once per repetition."""

    def run(self, result: Any) -> None:
        """Set up, run ``repetition + 1`` times, tear down, reporting to ``result``."""
        self.result = result
        self.successful = True
        self.interrupted = False
        try:
            result.start_test(self)
            argv = arguments.parse(f"{self.name} {self.param}")
            if not self.setup(argv):
                result.add_error(self, TestMessage("setup() failed!"))
                self.successful = False
                result.end_test(self)
                return
            for _ in range(self.repetition + 1):
                if not self.successful or self.interrupted:
                    break
                self.run_once()
        except TestFailureException as exc:
            self.successful = False
            result.add_failure(self, exc.message)
        except TestErrorException as exc:
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

        result.end_test(self)

    def interrupt(self) -> None:
        """Stop further repetitions and report the interruption."""
        self.interrupted = True
        if self.result is not None:
            source_file, source_line = _here()
            self.result.add_report(
                self,
                TestMessage(
                    "TestCase interrupted",
                    "An interrupt signal received",
                    source_file,
                    source_line,
                ),
            )