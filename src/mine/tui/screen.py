"""
Terminal session handling.

The game needs the terminal in cbreak mode (keys arrive one at a time,
without echo) and drawn on the alternate screen buffer with the cursor
hidden. Both are process-wide settings, so they are acquired for the
duration of a ``with`` block and always restored afterwards.
"""
import logging
import sys
import termios
import tty
from contextlib import contextmanager
from typing import Iterator, Optional, TextIO

from rich.console import Console

logger = logging.getLogger(__name__)


@contextmanager
def cbreak_mode(stream: Optional[TextIO] = None) -> Iterator[TextIO]:
    """
    Put the terminal behind ``stream`` into cbreak mode.

    Raises:
        termios.error: If the stream is not a terminal.
    """
    stream = stream if stream is not None else sys.stdin
    fd = stream.fileno()
    saved = termios.tcgetattr(fd)
    try:
        tty.setcbreak(fd)
        yield stream
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, saved)


@contextmanager
def terminal_session(
    console: Console, stream: Optional[TextIO] = None
) -> Iterator[TextIO]:
    """Cbreak input plus the alternate screen with a hidden cursor."""
    with cbreak_mode(stream) as keys:
        logger.debug("Entering alternate screen")
        try:
            with console.screen(hide_cursor=True):
                yield keys
        finally:
            logger.debug("Terminal restored")
