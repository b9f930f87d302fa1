#!/usr/bin/env python3

import logging
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler

from pomodoro.constants import APP_NAME

logger = logging.getLogger(APP_NAME)
logger.setLevel(logging.DEBUG)


class ExtraDataFormatter(logging.Formatter):
    def format(self, record):
        s = super().format(record)

        if hasattr(record, 'session'):
            s += f" - Session: #{record.session}"
        if hasattr(record, 'period_index') and hasattr(record, 'periods_total'):
            s += f" - Period: {record.period_index}/{record.periods_total}"
        if hasattr(record, 'period'):
            s += f" ({record.period})"
        if hasattr(record, 'seconds'):
            s += f" - Duration: {record.seconds} seconds"
        return s


def setup_logging(log_file_path_str: str, verbose: bool):
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    log_file_path = Path(log_file_path_str)
    log_file_path.parent.mkdir(parents=True, exist_ok=True)

    fh = logging.FileHandler(log_file_path)
    fh.setLevel(logging.DEBUG)

    # stderr keeps log lines out of the countdown on stdout
    rh = RichHandler(
        console=Console(stderr=True),
        rich_tracebacks=True,
        show_path=False,
        show_level=False,
        log_time_format='[%H:%M:%S]'
    )
    rh.setLevel(logging.DEBUG if verbose else logging.INFO)

    fh_formatter = ExtraDataFormatter(
        '%(asctime)s - %(levelname)s - %(message)s'
    )
    fh.setFormatter(fh_formatter)

    logger.addHandler(fh)
    logger.addHandler(rh)
