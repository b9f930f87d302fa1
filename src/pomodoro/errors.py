#!/usr/bin/env python3


class PomodoroError(Exception):
    """Base class for errors that abort the timer before it starts."""


class ConfigurationError(PomodoroError):
    pass


class MalformedPatternError(ConfigurationError):
    def __init__(self, token: str, reason: str):
        self.token = token
        super().__init__(f"Invalid period '{token}' in pattern: {reason}.")


class UnknownNotifierError(ConfigurationError):
    def __init__(self, name: str, known):
        self.name = name
        super().__init__(
            f"Unknown notifier '{name}'. Choose from: {', '.join(known)}.")


class MissingCapabilityError(PomodoroError):
    pass
