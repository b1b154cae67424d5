"""A process-wide store of errors and warnings."""

from __future__ import annotations


class ErrorLogger:
    """Collects error and warning messages; use ``ErrorLogger.instance()``."""

    _instance: ErrorLogger | None = None

    def __init__(self) -> None:
        self._errors: list[str] = []
        self._warnings: list[str] = []

    @classmethod
    def instance(cls) -> ErrorLogger:
        """Return the shared logger, creating it on first use."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    def add_warning(self, message: str) -> None:
        self._warnings.append(message)

    def add_error(self, message: str) -> None:
        self._errors.append(message)

    def last_error(self) -> str:
        """Return the most recent error, or an empty string."""
        return self._errors[-1] if self._errors else ""

    def last_warning(self) -> str:
        """Return the most recent warning, or an empty string."""
        return self._warnings[-1] if self._warnings else ""

    def reset(self) -> None:
        self._errors.clear()
        self._warnings.clear()

    def error_count(self) -> int:
        return len(self._errors)

    def warning_count(self) -> int:
        return len(self._warnings)