from rtfkit.fixture import FixtureEvents, FixtureManager
from rtfkit.message import TestMessage


class ArgsFixture(FixtureManager):
    def __init__(self, param=""):
        super().__init__(param)
        self.argv = None

    def setup_with_args(self, argv):
        self.argv = argv
        return len(argv) > 1


class Listener(FixtureEvents):
    def __init__(self):
        self.reasons = []

    def fixture_collapsed(self, reason):
        self.reasons.append(reason)


class Collapsing(FixtureManager):
    def check(self):
        self.dispatcher.fixture_collapsed(TestMessage("lost", "robot gone"))
        return False


def test_default_hooks_succeed():
    manager = FixtureManager()
    assert manager.setup() is True
    assert manager.check() is True
    assert manager.dispatcher is None
    assert manager.param == ""


def test_setup_parses_param():
    manager = ArgsFixture('x "y z"')
    assert FixtureManager.setup(manager) is True
    assert manager.argv == ["x", "y z"]


def test_setup_with_empty_param():
    manager = ArgsFixture()
    assert FixtureManager.setup(manager) is False
    assert manager.argv == [""]


def test_param_can_be_changed():
    manager = ArgsFixture("a")
    manager.param = "a b"
    assert FixtureManager.setup(manager) is True
    assert manager.argv == ["a", "b"]


def test_dispatcher_receives_collapse():
    listener = Listener()
    manager = FixtureManager(dispatcher=listener)
    assert manager.dispatcher is listener
    assert manager.check() is True
    manager.dispatcher.fixture_collapsed(TestMessage("lost", "robot gone"))
    assert [r.message for r in listener.reasons] == ["lost"]
    assert listener.reasons[0].detail == "robot gone"


def test_base_events_ignore_collapse():
    events = FixtureEvents()
    manager = Collapsing(dispatcher=events)
    assert manager.check() is False