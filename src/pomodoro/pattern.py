#!/usr/bin/env python3
"""Period patterns: the ``kind,seconds:kind,seconds`` mini-language."""

from dataclasses import dataclass
from enum import Enum

from pomodoro.errors import MalformedPatternError

PERIOD_SEPARATOR = ":"
FIELD_SEPARATOR = ","


class PeriodKind(Enum):
    REMINDER = "r"
    POMODORO = "p"
    BREAK = "b"
    FINISH = "f"
    INTRO0 = "i0"
    INTRO1 = "i1"
    INTRO2 = "i2"
    INTRO3 = "i3"
    INTRO4 = "i4"
    INTRO5 = "i5"
    INTRO6 = "i6"
    INTRO7 = "i7"
    INTRO8 = "i8"

    @property
    def code(self) -> str:
        return self.value


@dataclass(frozen=True)
class Period:
    kind: PeriodKind
    duration_seconds: int

    def __str__(self):
        return f"{self.kind.code}{FIELD_SEPARATOR}{self.duration_seconds}"


def format_duration(seconds: int) -> str:
    """Human readable duration. Minutes are truncated, never rounded."""
    if seconds < 60:
        return f"{seconds} seconds"
    if seconds == 60:
        return "1 minute"
    return f"{seconds // 60} minutes"


def parse_period(token: str) -> Period:
    code, sep, duration = token.partition(FIELD_SEPARATOR)
    if not sep:
        raise MalformedPatternError(token, "expected '<kind>,<seconds>'")

    try:
        kind = PeriodKind(code)
    except ValueError:
        raise MalformedPatternError(
            token, f"unknown period kind '{code}'") from None

    # isdigit() also accepts non-ASCII digits and int() accepts signs and
    # underscores, so check explicitly
    if not (duration.isascii() and duration.isdigit()):
        raise MalformedPatternError(
            token, f"duration '{duration}' is not a non-negative integer")

    return Period(kind, int(duration))


def parse_pattern(raw: str) -> tuple:
    """
    Parses a pattern string into an immutable tuple of periods.

    Raises MalformedPatternError on the first bad token; nothing is returned
    for a partially valid pattern. An empty string is an empty pattern.
    """
    raw = raw.strip()
    if not raw:
        return ()
    return tuple(parse_period(token) for token in raw.split(PERIOD_SEPARATOR))


def format_pattern(periods) -> str:
    return PERIOD_SEPARATOR.join(str(period) for period in periods)
