"""Messages attached to test events."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class TestMessage:
    """A message with optional detail and the source location that issued it."""

    __test__ = False

    message: str = ""
    detail: str = ""
    source_file: str = ""
    source_line: int = 0

    def clear(self) -> None:
        """Reset every field to its empty value."""
        self.message = ""
        self.detail = ""
        self.source_file = ""
        self.source_line = 0