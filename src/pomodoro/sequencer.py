#!/usr/bin/env python3

from pomodoro.constants import ECHO_NOTIFIER
from pomodoro.logger import logger
from pomodoro.messages import message_for


class Sequencer:
    """
    Plays a pattern: announces each period, then waits it out.

    Periods are processed strictly in order and unconditionally; a failed
    notification is logged by the notifier and the timer carries on.
    """

    def __init__(self, notifier, waiter):
        self.notifier = notifier
        self.waiter = waiter

    def run(self, pattern, config) -> int:
        show_progress = ECHO_NOTIFIER in config.notifiers

        for index, period in enumerate(pattern, start=1):
            logger.debug(
                "Period started",
                extra={
                    "period_index": index,
                    "periods_total": len(pattern),
                    "period": period.kind.name.lower(),
                    "seconds": period.duration_seconds,
                }
            )
            self.notifier.announce(message_for(period))
            self.waiter.wait(period.duration_seconds,
                             config.dry_run, show_progress)

        return len(pattern)
