#!/usr/bin/env python3
"""
Message catalog: what is said when a period begins.

Introduction texts follow Francesco Cirillo's description of the technique
(https://francescocirillo.com/pages/pomodoro-technique).
"""

from dataclasses import dataclass
from typing import Optional

from pomodoro.constants import ECHO_NOTIFIER
from pomodoro.pattern import Period, PeriodKind, format_duration


@dataclass(frozen=True)
class Message:
    summary: str
    body: str
    # on-screen time requested from the desktop backend, None for its default
    display_ms: Optional[int] = None
    # backend name -> (summary, body) replacing the shared text
    overrides: tuple = ()

    def text_for(self, backend: str) -> tuple:
        return dict(self.overrides).get(backend, (self.summary, self.body))


@dataclass(frozen=True)
class MessageTemplate:
    summary: str
    body: str
    display_ms: Optional[int] = None
    overrides: tuple = ()

    def render(self, duration_seconds: int) -> Message:
        duration = format_duration(duration_seconds)
        return Message(
            summary=self.summary,
            body=self.body.format(duration=duration),
            display_ms=self.display_ms,
            overrides=tuple(
                (backend, (summary, body.format(duration=duration)))
                for backend, (summary, body) in self.overrides
            ),
        )


CATALOG = {
    PeriodKind.INTRO0: MessageTemplate(
        "Hey there!",
        "This little introduction will help you get started with the "
        "Pomodoro Technique.",
        9500,
        overrides=(
            (ECHO_NOTIFIER, (
                "Welcome!",
                "This little introduction will help you get started with the "
                "[red]Pomodoro Technique[/red].\n"
                "If you want to revisit this later, call pomodoro with the -i switch.",
            )),
        ),
    ),
    PeriodKind.INTRO1: MessageTemplate(
        "Please follow along",
        "The fundamentals of the Pomodoro Technique are simple yet incredibly "
        "effective. A full cycle will take about 2 hours of time.",
        6500,
    ),
    PeriodKind.INTRO2: MessageTemplate(
        "Choose a task you'd like to get done",
        "Something big, something small, something you've been putting off "
        "for a million years: it doesn't matter.\n"
        "What matters is that it's something that deserves your full, "
        "undivided attention.\n"
        "Please prepare your work environment for a distraction-less "
        "experience. You have {duration}.",
        15000,
    ),
    PeriodKind.INTRO3: MessageTemplate(
        "The Pomodoro timer will be set for 25 minutes",
        "Make a small oath to yourself: I will spend 25 minutes on this task "
        "and I will not interrupt myself.\n"
        "You can do it! After all, it's just 25 minutes.",
        10000,
    ),
    PeriodKind.INTRO4: MessageTemplate(
        "Work on the task until the Pomodoro rings",
        "Immerse yourself in the task for the next 25 minutes.\n"
        "If you suddenly realize you have something else you need to do, "
        "write the task down on a sheet of paper.",
        10000,
    ),
    PeriodKind.INTRO5: MessageTemplate(
        "Congratulations! You have just spent an entire, interruption-less "
        "Pomodoro on a task",
        "Please put a checkmark on a paper.",
    ),
    PeriodKind.INTRO6: MessageTemplate(
        "Take a short break!",
        "Breathe, meditate, grab a cup of coffee, go for a short walk or do "
        "something else relaxing (i.e., not work-related).\n"
        "Your brain will thank you later. Be back in {duration}.",
        8000,
    ),
    PeriodKind.INTRO7: MessageTemplate(
        "Ready again?",
        "We will now repeat this another three times.",
    ),
    PeriodKind.INTRO8: MessageTemplate(
        "Pomodoro cycle complete!",
        "Final checkmark. Since you have completed four pomodoros, you should "
        "now take a longer break. 20 minutes is good.\n"
        "Your brain will use this time to assimilate new information and "
        "rest before the next round of Pomodoros.",
        10000,
    ),
    PeriodKind.REMINDER: MessageTemplate(
        "Pomodoro incoming",
        "Next pomodoro will begin in {duration}.",
    ),
    PeriodKind.POMODORO: MessageTemplate(
        "Pomodoro begins now",
        "Please focus for {duration}.",
    ),
    PeriodKind.BREAK: MessageTemplate(
        "End of pomodoro",
        "Please take a {duration} break.",
    ),
    PeriodKind.FINISH: MessageTemplate(
        "End of pomodoro cycle",
        "Please stand up and take a {duration} break.",
    ),
}


def message_for(period: Period) -> Message:
    return CATALOG[period.kind].render(period.duration_seconds)
