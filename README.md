# rtfkit

rtfkit is a small framework for writing test cases and grouping them into suites that share fixtures. It runs them and reports what happened to the console or to a text file. It also provides a small command-line option parser.

## Installing

```
pip install .
```

To run the package's own tests:

```
pip install ".[test]"
pytest
```

## Writing a test case

Subclass `rtfkit.testcase.TestCase` and put the body of the test in `run_once`.

The constructor is `TestCase(name, param="", environment="", repetition=0)`. `run` calls `run_once` up to `repetition + 1` times. It stops early once the test has failed or been interrupted.

Before the first run, `setup(argv)` is called with the test name followed by `param`, split into words. Double quotes group words together. If `setup` returns false, an error is reported and the test ends. `tear_down` is always called afterwards.

```python
from rtfkit import asserter
from rtfkit.message import TestMessage
from rtfkit.testcase import TestCase


class AdditionTest(TestCase):
    def run_once(self):
        asserter.test_check(1 + 1 == 2, TestMessage("checking addition"), self)
        asserter.fail_unless(2 * 2 == 4, TestMessage("multiplication broke"))
```

A `TestMessage` has four fields: `message`, `detail`, `source_file` and `source_line`.

The helpers in `rtfkit.asserter` are:

- `fail(msg)` and `fail_unless(condition, msg)` raise `TestFailureException`. The test case records this as a failure.
- `error(msg)` and `error_unless(condition, msg)` raise `TestErrorException`. The test case records this as an error.
- `test_fail(condition, msg, testcase)` marks the test failed and records a failure when the condition is false. The test keeps running.
- `test_check(condition, msg, testcase)` does the same when the condition is false, and records `msg` as a report otherwise.
- `report(msg, test)` records an informational report.
- `format_message(fmt, *args)` formats printf-style and truncates the result to 254 characters.

If the test passed to `report`, `test_fail` or `test_check` is `None`, they raise `TestErrorException`.

Any other exception raised in `run_once` is recorded as an error carrying the exception's text.

## Suites and fixtures

A `rtfkit.suite.TestSuite` runs its tests in order. Its fixture handling works like this:

- Subclass `rtfkit.fixture.FixtureManager` and override any of these hooks:
  - `setup_with_args(argv)`: receives the manager's `param`, split into words.
  - `tear_down()`
  - `check()`
- The suite sets its fixtures up in order before the first test and tears them down in reverse order at the end.
- Before each test, the suite calls every manager's `check()`.
- A fixture has collapsed when a check fails, or when something calls `fixture_collapsed(reason)` on the suite. The suite then marks itself unsuccessful, tears the fixtures down and sets them up again.
- If that restart fails, the suite stops with an error.

```python
from rtfkit.fixture import FixtureManager
from rtfkit.suite import TestSuite

suite = TestSuite("arithmetic")
suite.add_fixture_manager(FixtureManager())
suite.add_test(AdditionTest("addition"))
```

## Running and reporting

`rtfkit.result.TestResult` forwards every event to its listeners. The event handlers are defined by `rtfkit.result.TestListener`.

Three listeners are provided:

- `rtfkit.collector.TestResultCollector` stores every event as a `ResultEvent`, tagged with an `EventKind`, and counts passed and failed test cases and suites.
- `rtfkit.console.ConsoleListener(verbose=False, stream=None, colored=None)` prints events as they happen.
  - Colours are used unless running on Windows or `NO_COLORED_CONSOLE` is set in the environment.
  - `hide_uncritical_messages()` limits output to errors and failures.
- `rtfkit.text_outputter.TextOutputter(collector, verbose=False)` turns a collector's events into text.
  - `render(summary)` returns the text.
  - `write(filename, summary)` writes it to a file. It raises `ValueError` for an empty file name.

```python
from rtfkit.collector import TestResultCollector
from rtfkit.console import ConsoleListener
from rtfkit.result import TestResult
from rtfkit.runner import TestRunner
from rtfkit.text_outputter import TextOutputter

result = TestResult()
collector = TestResultCollector()
result.add_listener(collector)
result.add_listener(ConsoleListener(verbose=True))

runner = TestRunner()
runner.add_test(suite)
runner.run(result)

print(collector.passed_count(), "of", collector.test_count(), "passed")
TextOutputter(collector).write("results.txt", summary=True)
```

`TestRunner.interrupt()` interrupts the running test and skips the remaining ones. `TestSuite.interrupt()` does the same within a suite.

`rtfkit.error_logger.ErrorLogger.instance()` returns a shared store of error and warning strings.

## Command-line options

`rtfkit.cmdline.Parser` parses options for your own tools.

- Declare options with:
  - `add(name, short_name, description)` for flags.
  - `add_value(name, short_name, description, required, default, reader)` for options that take a value.
- Readers check values:
  - `in_range(low, high)` accepts values between `low` and `high`, inclusive.
  - `one_of(*values)` accepts only the values given.
- Parse with:
  - `parse(args)`: the program name comes first. It returns whether there were no errors.
  - `parse_line(text)`
  - `parse_check(args)`: prints usage and exits on `--help` or on errors.
- After parsing:
  - `exist(name)`, `get(name)` and `rest()` read the results.
  - `error()` and `error_full()` return the errors.
  - `usage()` returns the usage text.

Misuse of the parser raises `CmdlineError`, for example declaring the same option twice or asking for an unknown one.

## What is not included

rtfkit is a library only. It has:

- no command that discovers and runs tests from files,
- no loading of test plugins or suite description files,
- no JUnit XML output.

Tests are written as Python classes and run from your own code.