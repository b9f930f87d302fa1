#!/usr/bin/env python3

import configparser
from dataclasses import dataclass
from pathlib import Path

from pomodoro.constants import ARGUMENTS_CONFIG, SETTINGS_SECTION
from pomodoro.logger import logger
from pomodoro.notifier import parse_notifiers
from pomodoro.pattern import format_pattern, parse_pattern

SETTINGS_TEMPLATE = """\
# Any of echo,libnotify
notifier={notifier}

# Set to 1 to have pomodoro repeat by default
repeat={repeat}

# See help (pomodoro -h)
pattern={pattern}
"""


@dataclass
class SessionConfig:
    notifiers: frozenset
    repeat: bool
    dry_run: bool
    pattern: tuple
    show_intro: bool = False


# --- Configuration Loading ---
def get_default_settings() -> dict:
    """Generates the default settings dictionary from the single source of truth."""
    return {key: config['default'] for key, config in ARGUMENTS_CONFIG.items()}


def persisted_keys() -> list:
    return [key for key, config in ARGUMENTS_CONFIG.items() if config.get('group')]


def load_settings(config_file) -> dict:
    """
    Loads settings from the settings file, using ARGUMENTS_CONFIG for defaults.
    """
    settings = get_default_settings()
    config_file_path = Path(config_file)

    if not config_file_path.exists():
        logger.debug(f"Settings file not found at {config_file_path}. Using default settings.")
        return settings

    logger.debug(f"Loading settings from {config_file_path}")
    parser = configparser.ConfigParser(delimiters=("=",), interpolation=None)
    try:
        parser.read_string(
            f"[{SETTINGS_SECTION}]\n" + config_file_path.read_text(),
            source=str(config_file_path)
        )
    except (configparser.Error, OSError) as e:
        logger.error(f"Error reading settings file {config_file_path}: {e}. Using defaults.")
        return settings

    section = parser[SETTINGS_SECTION]
    for key in persisted_keys():
        if key not in section:
            continue
        arg_config = ARGUMENTS_CONFIG[key]
        try:
            if arg_config.get('action') == 'store_true':
                value = section.getboolean(key)
            else:
                value = section.get(key)
            settings[key] = value
        except ValueError as e:
            logger.debug(f"Could not parse '{key}' from settings file: {e}. Using default.")

    return settings


def write_settings(config_file, config: SessionConfig):
    config_file_path = Path(config_file)
    config_file_path.parent.mkdir(parents=True, exist_ok=True)
    config_file_path.write_text(SETTINGS_TEMPLATE.format(
        notifier=",".join(sorted(config.notifiers)),
        repeat=1 if config.repeat else 0,
        pattern=format_pattern(config.pattern),
    ))
    logger.debug(f"Settings written to {config_file_path}")


# --- Settings layering: Defaults -> Settings file -> CLI Args ---
def provided_flags(argv) -> set:
    flags = set()
    for arg in argv:
        if arg.startswith('--'):
            flags.add(arg.split('=', 1)[0])
        elif arg.startswith('-') and len(arg) > 1:
            # bundled short flags such as -rd; stop at one taking a value
            for char in arg[1:]:
                flags.add(f"-{char}")
                if char in ('p', 'n'):
                    break
    return flags


def was_provided(arg_config: dict, flags: set) -> bool:
    return any(arg_config.get(name) in flags for name in ('short', 'long'))


def is_naked_launch(flags: set) -> bool:
    return not any(
        was_provided(arg_config, flags)
        for arg_config in ARGUMENTS_CONFIG.values()
        if arg_config.get('naked', True) is False
    )


def apply_cli_overrides(settings: dict, flags: set, args) -> dict:
    settings = dict(settings)
    for dest, arg_config in ARGUMENTS_CONFIG.items():
        if was_provided(arg_config, flags):
            value = getattr(args, dest)
            settings[dest] = value
            logger.debug(f"CLI override: '{dest}' set to '{value}'")
    return settings


def build_session_config(settings: dict) -> SessionConfig:
    """Validates effective settings; raises ConfigurationError subclasses."""
    return SessionConfig(
        notifiers=parse_notifiers(settings['notifier']),
        repeat=bool(settings['repeat']),
        dry_run=bool(settings['dry_run']),
        pattern=parse_pattern(settings['pattern']),
        show_intro=bool(settings['intro']),
    )
