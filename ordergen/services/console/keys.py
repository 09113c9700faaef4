"""Single keystroke reading from the console."""
import os
import sys
from contextlib import contextmanager
from typing import Iterator, Optional, TextIO

if os.name == "nt":
    import msvcrt
else:
    import termios
    import tty


@contextmanager
def cbreak_terminal(stream: Optional[TextIO] = None) -> Iterator[None]:
    """
    Put a terminal in cbreak mode (no Enter needed, no echo) for the block.

    The saved terminal attributes are restored on the way out, however the
    block exits. Does nothing on Windows or when the stream is not a TTY.
    """
    stream = stream or sys.stdin
    if os.name == "nt" or not stream.isatty():
        yield
        return

    fd = stream.fileno()
    old_settings = termios.tcgetattr(fd)
    try:
        tty.setcbreak(fd)
        yield
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, old_settings)


def read_key(stream: Optional[TextIO] = None) -> str:
    """
    Block until one character is available and return it.

    Keys arrive one at a time only inside cbreak_terminal(). Returns an empty
    string at end of input.
    """
    if os.name == "nt":
        return msvcrt.getwch()

    stream = stream or sys.stdin
    return stream.read(1)
