#!/usr/bin/env python3

from pomodoro.constants import (
    ECHO_NOTIFIER,
    INTRO_PATTERN,
    RESTART_QUESTION,
    RESTART_SUMMARY,
)
from pomodoro.logger import logger
from pomodoro.pattern import parse_pattern
from pomodoro.prompt import confirm

INTRO = parse_pattern(INTRO_PATTERN)


class SessionController:
    """Runs the sequencer until the session ends; returns the exit status."""

    def __init__(self, sequencer, notifier, confirm_restart=None):
        self.sequencer = sequencer
        self.notifier = notifier
        self.confirm_restart = confirm_restart or self._ask_restart

    def main_loop(self, config) -> int:
        crr_session = 1
        while True:
            logger.debug("Session started", extra={"session": crr_session})
            if config.show_intro:
                pattern = INTRO
                # the introduction is played once per process
                config.show_intro = False
            else:
                pattern = config.pattern
            self.sequencer.run(pattern, config)
            logger.debug("Session completed", extra={"session": crr_session})

            # an empty pattern ends the session, repeat or not
            if not pattern:
                logger.info("Pattern is empty. Nothing to repeat.")
                return 0

            if not config.repeat and not self._restart_requested(config):
                return 0

            self.notifier.notify(RESTART_SUMMARY, "")
            crr_session += 1

    def _restart_requested(self, config) -> bool:
        # no way to ask without a text channel
        if ECHO_NOTIFIER not in config.notifiers:
            return False
        return self.confirm_restart()

    def _ask_restart(self) -> bool:
        console = self.notifier.console
        answer = confirm(console.console, RESTART_QUESTION)
        console.echo()
        return answer
