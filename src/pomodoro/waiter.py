#!/usr/bin/env python3

import time

from rich.live import Live
from rich.text import Text

from pomodoro.constants import DRY_RUN_PAUSE_SECONDS, PROGRESS_MIN_SECONDS
from pomodoro.notifier import ConsoleBackend
from pomodoro.pattern import format_duration


def remaining_line(remaining_s: int) -> Text:
    return Text.assemble(
        "Time remaining: ",
        (format_duration(remaining_s), "bold red"),
    )


class Waiter:
    """Blocks for the length of a period, optionally counting down."""

    def __init__(self, output: ConsoleBackend = None, sleep=time.sleep):
        # dry-run notes are printed even when the console notifier is off
        self.output = output or ConsoleBackend()
        self.sleep = sleep

    def wait(self, duration_s: int, dry_run: bool, show_progress: bool):
        if dry_run:
            self.output.echo(f"dry-run: would sleep for {duration_s} seconds")
            self.output.echo()
            self.sleep(DRY_RUN_PAUSE_SECONDS)
        elif show_progress and duration_s >= PROGRESS_MIN_SECONDS:
            self.countdown(duration_s)
        else:
            self.sleep(duration_s)

    def countdown(self, duration_s: int):
        with Live(
            remaining_line(duration_s),
            console=self.output.console,
            auto_refresh=False,
        ) as live:
            for remaining_s in range(duration_s, 0, -1):
                live.update(remaining_line(remaining_s), refresh=True)
                self.sleep(1)
        self.output.echo()
