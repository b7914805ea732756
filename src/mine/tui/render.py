"""
Rendering of the field for the terminal.

Markers:
    .    hidden cell
    F    flagged cell
    M    revealed mine
    0-8  revealed cell with its adjacent mine count

Every cell takes two columns. The cursor cell gets a yellow background,
revealed cells that are also flagged are shown reversed.
"""
from typing import Dict

from rich.console import Group
from rich.style import Style
from rich.text import Text

from ..game import Field, GameState
from ..game.cell import FLAGGED_OBSERVATION, HIDDEN_OBSERVATION, MINE_OBSERVATION


# ============================================================================
# Styles
# ============================================================================

PLAIN_STYLE = Style()
MINE_STYLE = Style(color="red", bold=True)
FLAG_STYLE = Style(color="red", bold=True, italic=True, reverse=True)
FLAGGED_REVEALED_STYLE = Style(reverse=True)
CURSOR_STYLE = Style(bgcolor="yellow")

STATUS_STYLE = Style(color="color(238)")
WIN_STYLE = Style(color="color(178)", bold=True)
LOSS_STYLE = Style(color="color(75)", bold=True)
HINT_STYLE = Style(italic=True)

MARKERS: Dict[int, str] = {
    HIDDEN_OBSERVATION: ".",
    FLAGGED_OBSERVATION: "F",
    MINE_OBSERVATION: "M",
}


def marker(value: int) -> str:
    """Marker for an observation value."""
    return MARKERS.get(value, str(value))


def number_style(count: int) -> Style:
    # 8 * 30 stays inside the 256 colour range
    return Style(color=f"color({count * 30})")


def value_style(value: int) -> Style:
    """Style for an observation value, ignoring cursor and flag overlays."""
    if value == HIDDEN_OBSERVATION:
        return PLAIN_STYLE
    if value == FLAGGED_OBSERVATION:
        return FLAG_STYLE
    if value == MINE_OBSERVATION:
        return MINE_STYLE
    return number_style(value)


# ============================================================================
# Field Rendering
# ============================================================================

def render_field(field: Field) -> Text:
    """Render the grid as styled rich text, one line per row."""
    obs = field.get_observation()
    cursor_x, cursor_y = field.cursor
    text = Text()
    for y in range(field.height):
        if y:
            text.append("\n")
        for x in range(field.width):
            value = int(obs[y, x])
            style = value_style(value)
            cell = field.get_cell(x, y)
            if cell.is_revealed and cell.is_flagged:
                style += FLAGGED_REVEALED_STYLE
            if (x, y) == (cursor_x, cursor_y):
                style += CURSOR_STYLE
            text.append(" " + marker(value), style=style)
    return text


def field_to_plain(field: Field) -> str:
    """Render the grid without styles or cursor, for logs and tests."""
    obs = field.get_observation()
    return "\n".join(
        "".join(" " + marker(int(value)) for value in row) for row in obs
    )


def status_line(field: Field) -> Text:
    return Text(
        f"{field.mines_left} out of {field.total_mines} mines left",
        style=STATUS_STYLE,
    )


def render_screen(field: Field) -> Group:
    """
    Full screen for the current game state.

    While playing this is the status line above the grid. Once the game
    is won or lost the banner replaces the status line and an exit hint is
    shown below the grid.
    """
    state = field.game_state
    if state is GameState.PLAYING:
        return Group(status_line(field), render_field(field))

    if state is GameState.WON:
        banner = Text("YOU WON!!!", style=WIN_STYLE)
    else:
        banner = Text("GAME OVER", style=LOSS_STYLE)
    return Group(
        banner,
        render_field(field),
        Text("press any key to exit", style=HINT_STYLE),
    )
