"""Unit tests for the session controller's repeat and restart loop."""

import io

import pytest

from pomodoro.constants import (
    ECHO_NOTIFIER,
    LIBNOTIFY_NOTIFIER,
    RESTART_QUESTION,
    RESTART_SUMMARY,
)
from pomodoro.controller import INTRO, SessionController
from pomodoro.notifier import ConsoleBackend, Notifier
from pomodoro.prompt import confirm, read_key


class StopSession(Exception):
    pass


class RecordingSequencer:
    def __init__(self, max_runs=None):
        self.max_runs = max_runs
        self.patterns = []

    def run(self, pattern, config):
        if self.max_runs is not None and len(self.patterns) >= self.max_runs:
            raise StopSession
        self.patterns.append(pattern)
        return len(pattern)


def answers(*keys):
    keys = list(keys)

    def _confirm():
        return keys.pop(0)
    return _confirm


@pytest.fixture
def notifier(echo_backend):
    return Notifier([echo_backend])


class TestSessionController:
    def test_declined_restart_exits_zero(self, notifier, echo_backend, make_config):
        sequencer = RecordingSequencer()
        controller = SessionController(sequencer, notifier, answers(False))
        config = make_config("p,10")
        assert controller.main_loop(config) == 0
        assert sequencer.patterns == [config.pattern]
        assert echo_backend.messages == []

    def test_accepted_restart_runs_again(self, notifier, echo_backend, make_config):
        sequencer = RecordingSequencer()
        controller = SessionController(sequencer, notifier, answers(True, False))
        config = make_config("p,10")
        assert controller.main_loop(config) == 0
        assert len(sequencer.patterns) == 2
        assert echo_backend.messages == [(RESTART_SUMMARY, "", None)]

    def test_desktop_only_runs_once(self, desktop_backend, make_config):
        def never_asked():
            raise AssertionError("no prompt without a console")

        sequencer = RecordingSequencer()
        controller = SessionController(
            sequencer, Notifier([desktop_backend]), never_asked)
        config = make_config("p,10", notifiers=(LIBNOTIFY_NOTIFIER,))
        assert controller.main_loop(config) == 0
        assert len(sequencer.patterns) == 1

    def test_repeat_loops_without_prompt(self, notifier, echo_backend, make_config):
        def never_asked():
            raise AssertionError("repeat never prompts")

        sequencer = RecordingSequencer(max_runs=3)
        controller = SessionController(sequencer, notifier, never_asked)
        with pytest.raises(StopSession):
            controller.main_loop(make_config("p,10", repeat=True))
        assert len(sequencer.patterns) == 3
        assert echo_backend.messages == [(RESTART_SUMMARY, "", None)] * 3

    def test_empty_pattern_with_repeat_ends_session(self, notifier, echo_backend,
                                                    make_config):
        def never_asked():
            raise AssertionError("empty pattern never prompts")

        sequencer = RecordingSequencer(max_runs=2)
        controller = SessionController(sequencer, notifier, never_asked)
        assert controller.main_loop(make_config("", repeat=True)) == 0
        assert sequencer.patterns == [()]
        assert echo_backend.messages == []

    def test_intro_before_empty_pattern_still_plays(self, notifier, make_config):
        sequencer = RecordingSequencer(max_runs=3)
        controller = SessionController(sequencer, notifier)
        config = make_config("", repeat=True, show_intro=True)
        assert controller.main_loop(config) == 0
        assert sequencer.patterns == [INTRO, ()]

    def test_intro_plays_first(self, notifier, make_config):
        sequencer = RecordingSequencer()
        controller = SessionController(sequencer, notifier, answers(False))
        config = make_config("p,10", show_intro=True)
        controller.main_loop(config)
        assert sequencer.patterns == [INTRO]

    def test_intro_plays_only_once_with_repeat(self, notifier, make_config):
        # The intro is one-shot: later cycles play the configured pattern
        # instead of replaying the introduction.
        sequencer = RecordingSequencer(max_runs=3)
        controller = SessionController(sequencer, notifier)
        config = make_config("p,10", repeat=True, show_intro=True)
        with pytest.raises(StopSession):
            controller.main_loop(config)
        assert sequencer.patterns == [INTRO, config.pattern, config.pattern]
        assert config.show_intro is False

    def test_intro_not_replayed_after_restart(self, notifier, make_config):
        sequencer = RecordingSequencer()
        controller = SessionController(sequencer, notifier, answers(True, False))
        config = make_config("p,10", show_intro=True)
        controller.main_loop(config)
        assert sequencer.patterns == [INTRO, config.pattern]

    def test_default_prompt_uses_console(self, console, monkeypatch, make_config):
        monkeypatch.setattr("sys.stdin", io.StringIO("n\n"))
        notifier = Notifier([ConsoleBackend(console)])
        controller = SessionController(RecordingSequencer(), notifier)
        assert controller.main_loop(make_config("p,10")) == 0
        assert RESTART_QUESTION in console.file.getvalue()


class TestPrompt:
    @pytest.mark.parametrize("key, expected", [
        ("y", True),
        ("Y", True),
        ("n", False),
        ("", False),
        ("\n", False),
        ("x", False),
    ])
    def test_confirm(self, console, key, expected):
        assert confirm(console, "Again? ", read=lambda: key) is expected
        assert console.file.getvalue().startswith("Again? ")

    def test_read_key_without_terminal(self):
        assert read_key(io.StringIO("yes\n")) == "y"
        assert read_key(io.StringIO("")) == ""
