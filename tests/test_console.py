import io

from rtfkit.console import ConsoleListener
from rtfkit.message import TestMessage


class _Dummy:
    def __init__(self, name, ok=True):
        self.name = name
        self.ok = ok

    def succeeded(self):
        return self.ok


def _listener(**kwargs):
    out = io.StringIO()
    return ConsoleListener(stream=out, colored=False, **kwargs), out


def test_report_line():
    listener, out = _listener()
    listener.add_report(_Dummy("t"), TestMessage("hello", "world"))
    assert out.getvalue() == "[INFO]  (t) hello: world\n"


def test_error_and_failure_tags():
    listener, out = _listener()
    listener.add_error(_Dummy("t"), TestMessage("a", "b"))
    listener.add_failure(_Dummy("t"), TestMessage("c", "d"))
    lines = out.getvalue().splitlines()
    assert lines == ["[ERROR] (t) a: b", "[FAIL]  (t) c: d"]


def test_verbose_shows_source_location():
    listener, out = _listener(verbose=True)
    listener.add_error(_Dummy("t"), TestMessage("m", "d", "file.py", 12))
    assert out.getvalue().endswith("file.py at 12.\n\n")


def test_verbose_skips_zero_line():
    listener, out = _listener(verbose=True)
    listener.add_error(_Dummy("t"), TestMessage("m", "d", "file.py", 0))
    assert "file.py" not in out.getvalue()


def test_non_verbose_hides_location():
    listener, out = _listener()
    listener.add_failure(_Dummy("t"), TestMessage("m", "d", "file.py", 12))
    assert "file.py" not in out.getvalue()


def test_test_case_lifecycle():
    listener, out = _listener()
    listener.start_test(_Dummy("case"))
    listener.end_test(_Dummy("case", ok=True))
    listener.end_test(_Dummy("case", ok=False))
    assert out.getvalue().splitlines() == [
        "Test case case started...",
        "Test case case passed!",
        "Test case case failed!",
    ]


def test_suite_and_runner_lifecycle():
    listener, out = _listener()
    listener.start_test_runner()
    listener.start_test_suite(_Dummy("s"))
    listener.end_test_suite(_Dummy("s", ok=False))
    listener.end_test_runner()
    assert out.getvalue().splitlines() == [
        "Starting test runner.",
        "Test suite s started...",
        "Test suite s failed!",
        "Ending test runner.",
    ]


def test_hide_uncritical_keeps_only_errors_and_failures():
    listener, out = _listener()
    listener.hide_uncritical_messages()
    test = _Dummy("t")
    listener.start_test_runner()
    listener.start_test(test)
    listener.add_report(test, TestMessage("r", "x"))
    listener.add_error(test, TestMessage("e", "x"))
    listener.add_failure(test, TestMessage("f", "x"))
    listener.end_test(test)
    listener.end_test_runner()
    assert out.getvalue().splitlines() == ["[ERROR] (t) e: x", "[FAIL]  (t) f: x"]


def test_colored_output_wraps_tags():
    out = io.StringIO()
    listener = ConsoleListener(stream=out, colored=True)
    listener.add_error(_Dummy("t"), TestMessage("m", "d"))
    assert out.getvalue() == "\033[91m[ERROR] \033[0m(t) m: d\n"