#!/usr/bin/env python3

import shutil
import subprocess

from rich.console import Console

from pomodoro.constants import (
    ECHO_NOTIFIER,
    LIBNOTIFY_NOTIFIER,
    NOTIFIER_ALIASES,
    DEFAULT_ICON_FILE,
    FALLBACK_ICON_NAME,
)
from pomodoro.errors import MissingCapabilityError, UnknownNotifierError
from pomodoro.logger import logger

NOTIFY_SEND = "notify-send"


def parse_notifiers(raw: str) -> frozenset:
    """Maps a comma separated notifier list to canonical backend names."""
    names = set()
    for name in raw.split(','):
        name = name.strip()
        if not name:
            continue
        try:
            names.add(NOTIFIER_ALIASES[name])
        except KeyError:
            raise UnknownNotifierError(name, NOTIFIER_ALIASES) from None
    return frozenset(names)


def desktop_available() -> bool:
    return shutil.which(NOTIFY_SEND) is not None


def ensure_desktop_available():
    if not desktop_available():
        raise MissingCapabilityError(
            f"{LIBNOTIFY_NOTIFIER} notifier selected, but {NOTIFY_SEND} not found.\n"
            "Please install libnotify tools (libnotify-bin package on Debian systems)."
        )


def resolve_icon(icon=None) -> str:
    if icon:
        return str(icon)
    if DEFAULT_ICON_FILE.exists():
        return str(DEFAULT_ICON_FILE)
    return FALLBACK_ICON_NAME


class ConsoleBackend:
    name = ECHO_NOTIFIER

    def __init__(self, console: Console = None):
        self.console = console or Console(highlight=False)

    def deliver(self, summary: str, body: str, display_ms=None):
        self.console.print(f"[bold]-> {summary}[/bold]")
        self.console.print(body)
        self.console.print()

    def echo(self, renderable="", **kwargs):
        self.console.print(renderable, **kwargs)


class DesktopBackend:
    name = LIBNOTIFY_NOTIFIER

    def __init__(self, icon=None):
        self.icon = resolve_icon(icon)

    def command(self, summary: str, body: str, display_ms=None) -> list:
        cmd = [NOTIFY_SEND, '-i', self.icon]
        if display_ms is not None:
            cmd += ['-t', str(display_ms)]
        return cmd + [summary, body]

    def deliver(self, summary: str, body: str, display_ms=None):
        subprocess.Popen(self.command(summary, body, display_ms))


class Notifier:
    """Delivers every message to all active backends, one after another."""

    def __init__(self, backends):
        self.backends = list(backends)

    @classmethod
    def from_names(cls, names, console: Console = None, icon=None):
        backends = []
        if ECHO_NOTIFIER in names:
            backends.append(ConsoleBackend(console))
        if LIBNOTIFY_NOTIFIER in names:
            backends.append(DesktopBackend(icon))
        return cls(backends)

    @property
    def names(self) -> frozenset:
        return frozenset(backend.name for backend in self.backends)

    @property
    def console(self):
        """The console backend, if one is active."""
        for backend in self.backends:
            if backend.name == ECHO_NOTIFIER:
                return backend
        return None

    def notify(self, summary: str, body: str, display_ms=None):
        for backend in self.backends:
            self._deliver(backend, summary, body, display_ms)

    def announce(self, message):
        for backend in self.backends:
            summary, body = message.text_for(backend.name)
            self._deliver(backend, summary, body, message.display_ms)

    def _deliver(self, backend, summary, body, display_ms):
        try:
            backend.deliver(summary, body, display_ms)
        except Exception as e:
            logger.error(f"Failed to send {backend.name} notification: {e}")
