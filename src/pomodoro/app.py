#!/usr/bin/env python3

import argparse
import sys
from pathlib import Path

from rich.console import Console

from pomodoro.config import (
    apply_cli_overrides,
    build_session_config,
    is_naked_launch,
    load_settings,
    persisted_keys,
    provided_flags,
    write_settings,
)
from pomodoro.constants import (
    ARGUMENTS_CONFIG,
    DEFAULT_CONFIG_FILE,
    DEFAULT_LOG_FILE,
    LIBNOTIFY_NOTIFIER,
)
from pomodoro.controller import SessionController
from pomodoro.errors import PomodoroError
from pomodoro.logger import setup_logging, logger
from pomodoro.notifier import ConsoleBackend, Notifier, ensure_desktop_available
from pomodoro.sequencer import Sequencer
from pomodoro.waiter import Waiter

EXIT_USAGE = 1
EXIT_INTERRUPTED = 130


class UsageArgumentParser(argparse.ArgumentParser):
    """Any usage problem, -h included, exits with status 1."""

    def error(self, message):
        self.print_help(sys.stderr)
        self.exit(EXIT_USAGE, f"\n{self.prog}: error: {message}\n")


def build_parser() -> argparse.ArgumentParser:
    parser = UsageArgumentParser(
        prog="pomodoro",
        description=f"Runs a simple pomodoro timer with notifications. "
                    f"Settings: '{DEFAULT_CONFIG_FILE}', Log: '{DEFAULT_LOG_FILE}'.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
        add_help=False,
        # flags are detected from raw argv, so only full option names
        allow_abbrev=False,
    )

    # --- Dynamically build parser from ARGUMENTS_CONFIG ---
    for dest, config in ARGUMENTS_CONFIG.items():
        names = [config[name] for name in ('short', 'long') if name in config]

        kwargs = {'dest': dest,
                  'help': config['help'], 'default': config['default']}
        if 'type' in config:
            kwargs['type'] = config['type']
        if 'action' in config:
            kwargs['action'] = config['action']

        parser.add_argument(*names, **kwargs)

    # Add arguments not in the main config system
    parser.add_argument("-h", "--help", action="store_true",
                        help="Print this help.")
    parser.add_argument("--config-file", type=str,
                        default=str(DEFAULT_CONFIG_FILE), help="Path to settings file.")
    parser.add_argument("--log-file", type=str,
                        default=str(DEFAULT_LOG_FILE), help="Path to log file.")
    parser.add_argument("--icon", type=str, default=None,
                        help="Icon file or icon name for desktop notifications.")
    parser.add_argument("--verbose", action="store_true",
                        help="Enable verbose output to console.")
    return parser


def main(argv=None, console: Console = None, sleep=None) -> int:
    argv = sys.argv[1:] if argv is None else list(argv)
    parser = build_parser()
    args = parser.parse_args(argv)
    flags = provided_flags(argv)

    # --- Settings layering: Defaults -> Settings file -> CLI Args ---
    first_use = not Path(args.config_file).exists()
    settings = load_settings(args.config_file)

    if args.help:
        # show what a run would use, not the built-in defaults
        parser.set_defaults(**{key: settings[key] for key in persisted_keys()})
        parser.print_help()
        return EXIT_USAGE

    setup_logging(args.log_file, args.verbose)
    logger.debug(f"User provided flags: {flags}")
    settings = apply_cli_overrides(settings, flags, args)
    logger.debug(f"Effective settings: {settings}")

    try:
        config = build_session_config(settings)
        if LIBNOTIFY_NOTIFIER in config.notifiers:
            ensure_desktop_available()
    except PomodoroError as e:
        logger.error(f"{e}")
        return EXIT_USAGE

    if first_use:
        # Smart config: options given at first start become the defaults.
        write_settings(args.config_file, config)
        if is_naked_launch(flags):
            # On first use, but only if no options given, show the tour.
            config.show_intro = True

    console = console or Console(highlight=False)
    notifier = Notifier.from_names(config.notifiers, console, args.icon)
    output = notifier.console or ConsoleBackend(console)
    waiter = Waiter(output) if sleep is None else Waiter(output, sleep)
    controller = SessionController(Sequencer(notifier, waiter), notifier)

    try:
        return controller.main_loop(config)
    except KeyboardInterrupt:
        console.print()
        logger.info("Exiting...")
        return EXIT_INTERRUPTED


def run():
    sys.exit(main())


if __name__ == "__main__":
    run()
