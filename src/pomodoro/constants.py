#!/usr/bin/env python3

from pathlib import Path
import argparse

APP_NAME = "pomodoro"
DEFAULT_CONFIG_DIR = Path.home() / ".config" / APP_NAME
DEFAULT_DATA_DIR = Path.home() / ".local" / "share" / APP_NAME
DEFAULT_CONFIG_FILE = DEFAULT_CONFIG_DIR / "rc"
DEFAULT_LOG_FILE = DEFAULT_DATA_DIR / f"{APP_NAME}.log"
DEFAULT_ICON_FILE = DEFAULT_CONFIG_DIR / "icon.png"
# freedesktop icon naming spec, used when no icon file is installed
FALLBACK_ICON_NAME = "appointment-soon"

# Settings file has no section header; one is supplied when reading it.
SETTINGS_SECTION = "settings"

# --- Notifier backends ---
ECHO_NOTIFIER = "echo"
LIBNOTIFY_NOTIFIER = "libnotify"
NOTIFIER_ALIASES = {
    "echo": ECHO_NOTIFIER,
    "console": ECHO_NOTIFIER,
    "libnotify": LIBNOTIFY_NOTIFIER,
    "desktop": LIBNOTIFY_NOTIFIER,
}

# --- Canonical patterns ---
DEFAULT_PATTERN = (
    "r,60:p,1500:b,180:r,15:p,1500:b,180:r,15:p,1500:b,180:r,15:p,1500:f,1200"
)
INTRO_PATTERN = (
    "i0,10:i1,7:i2,60:i3,11:i4,11:p,1500:i5,6:i6,285:i7,15:"
    "p,1500:b,285:r,15:p,1500:b,285:r,15:p,1500:i8,11:f,1200"
)

# Countdowns shorter than this are slept through without a progress line.
PROGRESS_MIN_SECONDS = 30
DRY_RUN_PAUSE_SECONDS = 1

RESTART_QUESTION = "Would you like to restart the cycle now (y/n)? "
RESTART_SUMMARY = "Restarting Pomodoro cycle..."

# --- Argument and Configuration Single Source of Truth ---
# - 'group': the setting is persisted in the settings file under this key.
# - 'default': the ultimate fallback value.
# - 'naked': False if passing the flag means the launch is not "naked".
# - 'type', 'action', 'help', 'short', 'long': build the argparse parser.
ARGUMENTS_CONFIG = {
    'repeat': {
        'group': SETTINGS_SECTION,
        'default': False,
        'short': '-r',
        'long': '--repeat',
        'action': 'store_true',
        'naked': False,
        'help': "Repeat. Restart the pomodoro timer after the last (break) period."
    },
    'pattern': {
        'group': SETTINGS_SECTION,
        'default': DEFAULT_PATTERN,
        'type': str,
        'short': '-p',
        'long': '--pattern',
        'naked': False,
        'help': """Set period sequence to PATTERN: a colon-separated list of
                 period descriptions. A period description is a kind code
                 (any of r[eminder], p[omodoro], b[reak], f[inish]) followed
                 by a comma and an integral number of seconds."""
    },
    'notifier': {
        'group': SETTINGS_SECTION,
        'default': f"{ECHO_NOTIFIER},{LIBNOTIFY_NOTIFIER}",
        'type': str,
        'short': '-n',
        'long': '--notifier',
        'naked': False,
        'help': "Comma separated list of notifiers to use (any of echo,libnotify)."
    },
    'dry_run': {
        'default': False,
        'short': '-d',
        'long': '--dry-run',
        'action': 'store_true',
        'naked': False,
        'help': "Dry-run. Sleep for 1 second instead of each period's duration."
    },
    'intro': {
        'default': False,
        'short': '-i',
        'action': 'store_true',
        'help': argparse.SUPPRESS
    },
}
