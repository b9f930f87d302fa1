import io

import pytest
from rich.console import Console

from pomodoro.config import SessionConfig
from pomodoro.constants import ECHO_NOTIFIER, LIBNOTIFY_NOTIFIER
from pomodoro.pattern import parse_pattern


class RecordingSleep:
    def __init__(self):
        self.calls = []

    def __call__(self, seconds):
        self.calls.append(seconds)

    @property
    def total(self):
        return sum(self.calls)


class RecordingBackend:
    def __init__(self, name, fail=False):
        self.name = name
        self.fail = fail
        self.messages = []

    def deliver(self, summary, body, display_ms=None):
        if self.fail:
            raise OSError("backend unavailable")
        self.messages.append((summary, body, display_ms))


@pytest.fixture
def console():
    return Console(file=io.StringIO(), width=200, highlight=False)


@pytest.fixture
def sleep():
    return RecordingSleep()


@pytest.fixture
def make_config():
    def _make(pattern="", notifiers=(ECHO_NOTIFIER,), repeat=False,
              dry_run=False, show_intro=False):
        return SessionConfig(
            notifiers=frozenset(notifiers),
            repeat=repeat,
            dry_run=dry_run,
            pattern=parse_pattern(pattern),
            show_intro=show_intro,
        )
    return _make


@pytest.fixture
def echo_backend():
    return RecordingBackend(ECHO_NOTIFIER)


@pytest.fixture
def desktop_backend():
    return RecordingBackend(LIBNOTIFY_NOTIFIER)


@pytest.fixture
def broken_backend():
    return RecordingBackend(LIBNOTIFY_NOTIFIER, fail=True)
