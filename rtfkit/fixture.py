"""Fixtures that prepare and check shared state for a suite."""

from __future__ import annotations

from rtfkit import arguments
from rtfkit.message import TestMessage


class FixtureEvents:
    """Receives notice that a fixture has collapsed."""

    def fixture_collapsed(self, reason: TestMessage) -> None:
        """Handle a collapsed fixture; does nothing by default."""


class FixtureManager:
    """Sets up, checks and tears down a fixture; subclasses override the hooks."""

    def __init__(self, param: str = "", dispatcher: FixtureEvents | None = None) -> None:
        self.param = param
        self.dispatcher = dispatcher

    def setup(self) -> bool:
        """Parse ``param`` into arguments and pass them to ``setup_with_args``."""
        return self.setup_with_args(arguments.parse(self.param))

    def setup_with_args(self, argv: list[str]) -> bool:
        """Set up the fixture from parsed arguments."""
        return True

    def tear_down(self) -> None:
        """Release the fixture."""

    def check(self) -> bool:
        """Whether the fixture is still in good shape."""
        return True