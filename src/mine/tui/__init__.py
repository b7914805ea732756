"""
Terminal front end for the Minesweeper game.

Keyboard input, rendering with rich and the game loop.
"""
from .app import Game, prompt_config, welcome
from .keys import Command, KeyReader, parse_key, read_key
from .render import field_to_plain, render_field, render_screen
from .screen import cbreak_mode, terminal_session

__all__ = [
    "Command",
    "Game",
    "KeyReader",
    "cbreak_mode",
    "field_to_plain",
    "parse_key",
    "prompt_config",
    "read_key",
    "render_field",
    "render_screen",
    "terminal_session",
    "welcome",
]
