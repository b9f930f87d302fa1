#!/usr/bin/env python3

import sys
import termios
import tty

from rich.console import Console


def read_key(stream=None) -> str:
    """Reads a single keypress without waiting for Enter."""
    stream = stream or sys.stdin
    if not stream.isatty():
        return stream.readline()[:1]

    old_settings = termios.tcgetattr(stream)
    try:
        tty.setcbreak(stream.fileno())
        char = stream.read(1)
    finally:
        termios.tcsetattr(stream, termios.TCSADRAIN, old_settings)
    return char


def confirm(console: Console, question: str, read=read_key) -> bool:
    """Single keypress yes/no question, defaulting to no."""
    console.print(question, end="")
    answer = read()
    console.print(answer.strip())
    return answer in ('y', 'Y')
