"""Shared fixtures: hosts, recording callbacks and contexts."""

from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest

from evented.config import configure_logging
from evented.events import Events


class Host(Events):
    """Plain object carrying the events capability."""


class Recorder:
    """Records the receiver and arguments of each method call."""

    def __init__(self) -> None:
        self.calls: list[tuple[object, tuple]] = []

    def handle(self, *args):
        self.calls.append((self, args))


class RecordingHost(Events):
    def __init__(self) -> None:
        self.calls: list[tuple[object, tuple]] = []

    def handle(self, *args):
        self.calls.append((self, args))


@pytest.fixture(autouse=True, scope="session")
def _quiet_logging():
    configure_logging("WARNING", "console")


@pytest.fixture
def events():
    return Host()


@pytest.fixture
def target1():
    return Host()


@pytest.fixture
def target2():
    return Host()


@pytest.fixture
def callback1():
    return MagicMock(name="callback1")


@pytest.fixture
def callback2():
    return MagicMock(name="callback2")


@pytest.fixture
def context1():
    return SimpleNamespace(name="context1")


@pytest.fixture
def context2():
    return SimpleNamespace(name="context2")


@pytest.fixture
def recorder():
    return Recorder()


@pytest.fixture
def recording_host():
    return RecordingHost()
