"""Write test cases and suites with shared fixtures, run them, and report the results."""

__version__ = "0.1.0"