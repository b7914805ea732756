"""
Terminal game loop.

Ties the keyboard, the field and the renderer together: draw, wait for a
key, apply it to the field, repeat until the game is won, lost or quit.
"""
import logging
from typing import Optional, TextIO

from rich.console import Console
from rich.prompt import IntPrompt
from rich.text import Text

from ..game import Field, FieldConfig, GameState, InvalidConfiguration
from .keys import Command, KeyReader
from .render import render_screen

logger = logging.getLogger(__name__)


# ============================================================================
# Game Loop
# ============================================================================

class Game:
    """
    One game session on an already constructed field.

    Pressing reveal twice in a row on the same cell also reveals around it
    (see ``Field.reveal_from_cell``).
    """

    def __init__(self, field: Field, reader: KeyReader, console: Console) -> None:
        self.field = field
        self.reader = reader
        self.console = console
        self._previous: Optional[Command] = None

    def draw(self) -> None:
        self.console.clear()
        self.console.print(render_screen(self.field))

    def apply(self, command: Command) -> None:
        """Apply one non-quit command to the field."""
        logger.debug("Command %s at %s", command.name, self.field.cursor)
        self.field.apply_action(command.action)
        if command is Command.REVEAL and self._previous is Command.REVEAL:
            self.field.reveal_from_cell(*self.field.cursor)

    def run(self) -> GameState:
        """
        Play until the game ends or the player quits.

        Returns:
            The final game state; PLAYING when the player quit.
        """
        self.draw()
        while True:
            command = self.reader.read_command()
            if command is Command.QUIT:
                logger.info("Player quit")
                return GameState.PLAYING
            if command is not None:
                self.apply(command)
            self._previous = command

            state = self.field.game_state
            if state is not GameState.PLAYING:
                self.field.reveal_all()
                self.draw()
                logger.info("Game finished: %s", state.name)
                self.reader.wait()
                return state
            self.draw()


# ============================================================================
# Welcome Screen
# ============================================================================

def welcome_text() -> Text:
    code = "bold color(224)"
    text = Text()
    text.append("\nMINESWEEPER\n\n", style="bold italic color(27)")
    text.append("press ", style="italic")
    text.append("RETURN", style=code)
    text.append(" to start (with default values)\n", style="italic")
    text.append("or press ", style="italic")
    text.append("SPACE", style=code)
    text.append(" to provide custom field parameters\n\n", style="italic")
    text.append("Did you know you can use\n")
    text.append("mine", style=code)
    text.append(" height width mines\n", style="italic color(224)")
    text.append("Use ")
    text.append("mine", style=code)
    text.append(" --help", style="italic color(224)")
    text.append(" to see all available options.\n")
    return text


def prompt_number(
    console: Console, tag: str, minimum: int, stream: Optional[TextIO] = None
) -> int:
    """Ask for an integer until one of at least ``minimum`` is given."""
    while True:
        value = IntPrompt.ask(
            f"[italic]{tag}[/italic] ->", console=console, stream=stream
        )
        if value >= minimum:
            return value
        console.print(f"[red]{tag} must be at least {minimum}[/red]")


def prompt_config(console: Console, stream: Optional[TextIO] = None) -> FieldConfig:
    """Ask for height, width and mines until they make a valid field."""
    while True:
        height = prompt_number(console, "height", 1, stream)
        width = prompt_number(console, "width", 1, stream)
        mines = prompt_number(console, "mines", 0, stream)
        try:
            return FieldConfig(height, width, mines)
        except InvalidConfiguration as exc:
            console.print(f"[red]{exc}[/red]")


def welcome(console: Console, reader: KeyReader) -> bool:
    """
    Show the welcome screen and wait for a key.

    Returns:
        True if the player asked to enter custom field parameters.
    """
    console.clear()
    console.print(welcome_text())
    return reader.read_key() == " "
