"""
Keyboard input for the terminal game.

Reads single keypresses from a terminal in cbreak mode and maps them to
game commands. Vim-style and arrow keys both move the cursor.
"""
import sys
from enum import Enum
from typing import Dict, Optional, TextIO

from ..game import Action


ESCAPE = "\x1b"

ARROW_UP = "\x1b[A"
ARROW_DOWN = "\x1b[B"
ARROW_RIGHT = "\x1b[C"
ARROW_LEFT = "\x1b[D"


class Command(Enum):
    """A player command; every command but QUIT wraps a field action."""

    UP = Action.CURSOR_UP
    DOWN = Action.CURSOR_DOWN
    LEFT = Action.CURSOR_LEFT
    RIGHT = Action.CURSOR_RIGHT

    EDGE_UP = Action.CURSOR_TO_EDGE_UP
    EDGE_DOWN = Action.CURSOR_TO_EDGE_DOWN
    EDGE_LEFT = Action.CURSOR_TO_EDGE_LEFT
    EDGE_RIGHT = Action.CURSOR_TO_EDGE_RIGHT

    FLAG = Action.FLAG
    REVEAL = Action.REVEAL

    QUIT = None

    @property
    def action(self) -> Optional[Action]:
        return self.value


KEYMAP: Dict[str, Command] = {
    # h j k l and arrows
    "h": Command.LEFT,
    ARROW_LEFT: Command.LEFT,
    "j": Command.DOWN,
    ARROW_DOWN: Command.DOWN,
    "k": Command.UP,
    ARROW_UP: Command.UP,
    "l": Command.RIGHT,
    ARROW_RIGHT: Command.RIGHT,
    # jumps to the edges
    "H": Command.EDGE_LEFT,
    "0": Command.EDGE_LEFT,
    "L": Command.EDGE_RIGHT,
    "$": Command.EDGE_RIGHT,
    "g": Command.EDGE_UP,
    "G": Command.EDGE_DOWN,
    "f": Command.FLAG,
    " ": Command.FLAG,
    "r": Command.REVEAL,
    "\r": Command.REVEAL,
    "\n": Command.REVEAL,
    "\t": Command.REVEAL,
    "q": Command.QUIT,
    "Q": Command.QUIT,
    "\x03": Command.QUIT,
    # end of input
    "": Command.QUIT,
}


def read_key(stream: TextIO) -> str:
    """
    Read one keypress from ``stream``.

    Arrow keys arrive as three-character escape sequences and are returned
    whole. Any other key after Esc is returned together with it as one
    unbound two-character key, so a lone Esc waits for the next keypress.
    Returns an empty string at end of input.
    """
    key = stream.read(1)
    if key != ESCAPE:
        return key
    key += stream.read(1)
    if key == ESCAPE + "[":
        key += stream.read(1)
    return key


def parse_key(key: str) -> Optional[Command]:
    """Map a keypress to a command, or None when the key is unbound."""
    return KEYMAP.get(key)


class KeyReader:
    """Blocking source of keypresses and commands."""

    def __init__(self, stream: Optional[TextIO] = None) -> None:
        self.stream = stream if stream is not None else sys.stdin

    def read_key(self) -> str:
        return read_key(self.stream)

    def read_command(self) -> Optional[Command]:
        """Block until the next key and return its command."""
        return parse_key(self.read_key())

    def wait(self) -> None:
        """Block until any key is pressed."""
        self.read_key()
