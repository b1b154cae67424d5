import pytest

from rtfkit import asserter
from rtfkit.asserter import TestErrorException
from rtfkit.collector import EventKind, TestResultCollector
from rtfkit.message import TestMessage
from rtfkit.result import TestResult
from rtfkit.testcase import TestCase


class Recorder(TestCase):
    def __init__(self, name, param="", action=None, setup_ok=True,
                 repetition=0, teardown_action=None):
        super().__init__(name, param, repetition=repetition)
        self.action = action
        self.teardown_action = teardown_action
        self.setup_ok = setup_ok
        self.runs = 0
        self.argv = None
        self.torn_down = False

    def setup(self, argv):
        self.argv = argv
        return self.setup_ok

    def tear_down(self):
        self.torn_down = True
        if self.teardown_action:
            self.teardown_action(self)

    def run_once(self):
        self.runs += 1
        if self.action:
            self.action(self)


def run_case(case):
    result = TestResult()
    collector = TestResultCollector()
    result.add_listener(collector)
    case.run(result)
    return collector


def kinds(collector):
    return [event.kind for event in collector.results()]


def test_passing_case():
    case = Recorder("ok")
    collector = run_case(case)
    assert case.succeeded()
    assert case.runs == 1
    assert kinds(collector) == [EventKind.START_TEST, EventKind.END_TEST]
    assert collector.passed_count() == 1
    assert collector.failed_count() == 0


def test_setup_receives_name_and_parsed_param():
    case = Recorder("mytest", 'a "b c"')
    run_case(case)
    assert case.argv == ["mytest", "a", "b c"]


def test_empty_param_gives_only_name():
    case = Recorder("solo")
    run_case(case)
    assert case.argv == ["solo"]


def test_failure_exception_is_recorded():
    def body(case):
        asserter.fail(TestMessage("broken", "detail"))

    case = Recorder("f", action=body)
    collector = run_case(case)
    assert not case.succeeded()
    failures = [e for e in collector.results() if e.kind is EventKind.FAILURE]
    assert [e.message.message for e in failures] == ["broken"]
    assert case.torn_down
    assert collector.failed_count() == 1


def test_error_exception_is_recorded():
    def body(case):
        asserter.error(TestMessage("oops"))

    case = Recorder("e", action=body)
    collector = run_case(case)
    errors = [e for e in collector.results() if e.kind is EventKind.ERROR]
    assert [e.message.message for e in errors] == ["oops"]
    assert not case.succeeded()


def test_other_exception_becomes_error():
    def body(case):
        raise ValueError("boom")

    case = Recorder("v", action=body)
    collector = run_case(case)
    errors = [e for e in collector.results() if e.kind is EventKind.ERROR]
    assert [e.message.message for e in errors] == ["boom"]


def test_setup_failure_skips_body_and_teardown():
    case = Recorder("s", setup_ok=False)
    collector = run_case(case)
    assert case.runs == 0
    assert not case.torn_down
    assert not case.succeeded()
    assert kinds(collector) == [EventKind.START_TEST, EventKind.ERROR, EventKind.END_TEST]
    assert collector.results()[1].message.message == "setup() failed!"


def test_repetition_runs_body_repeatedly():
    case = Recorder("r", repetition=2)
    run_case(case)
    assert case.runs == 3
    assert case.succeeded()


def test_soft_failure_stops_repetition():
    def body(case):
        asserter.test_fail(False, TestMessage("bad"), case)

    case = Recorder("r", action=body, repetition=2)
    collector = run_case(case)
    assert case.runs == 1
    assert not case.succeeded()
    assert EventKind.FAILURE in kinds(collector)


def test_teardown_error_marks_failure():
    def cleanup(case):
        raise TestErrorException(TestMessage("cleanup failed"))

    case = Recorder("t", teardown_action=cleanup)
    collector = run_case(case)
    assert not case.succeeded()
    errors = [e.message.message for e in collector.results() if e.kind is EventKind.ERROR]
    assert errors == ["cleanup failed"]
    assert kinds(collector)[-1] is EventKind.END_TEST


def test_interrupt_stops_repetitions_and_reports():
    case = Recorder("i", action=lambda c: c.interrupt(), repetition=3)
    collector = run_case(case)
    assert case.runs == 1
    reports = [e for e in collector.results() if e.kind is EventKind.REPORT]
    assert reports[0].message.message == "TestCase interrupted"
    assert reports[0].message.detail == "An interrupt signal received"


def test_run_resets_success_state():
    case = Recorder("again")
    case.failed()
    assert not case.succeeded()
    run_case(case)
    assert case.succeeded()


def test_abstract_case_cannot_be_instantiated():
    with pytest.raises(TypeError):
        TestCase("plain")