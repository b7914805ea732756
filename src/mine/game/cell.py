"""
Cell module for Minesweeper game.

Represents individual cells of the field with their content (mine/number)
and the player-facing flags (revealed/flagged).
"""
from enum import Enum, auto
from dataclasses import dataclass


# ============================================================================
# Constants
# ============================================================================

class CellState(Enum):
    """Display classification of a cell."""

    HIDDEN = auto()
    FLAGGED = auto()
    MINE = auto()
    NUMBER = auto()


HIDDEN_OBSERVATION = -1
FLAGGED_OBSERVATION = -2
MINE_OBSERVATION = 9


# ============================================================================
# Cell Data Class
# ============================================================================

@dataclass
class Cell:
    """
    Represents a single cell in the Minesweeper grid.

    Revealing is one-way: once a cell is revealed it stays revealed.
    Flagging can be toggled at any time, even on a revealed cell.

    Attributes:
        is_mine: Whether this cell contains a mine.
        adjacent_mines: Count of mines in neighboring cells (0-8).
        is_revealed: Whether the cell has been revealed.
        is_flagged: Whether the player has flagged the cell.
    """

    is_mine: bool = False
    adjacent_mines: int = 0
    is_revealed: bool = False
    is_flagged: bool = False

    def reveal(self) -> None:
        """Reveal this cell."""
        self.is_revealed = True

    def toggle_flag(self) -> None:
        """Toggle flag on this cell."""
        self.is_flagged = not self.is_flagged

    @property
    def is_hidden(self) -> bool:
        """Check if cell is still hidden."""
        return not self.is_revealed

    @property
    def state(self) -> CellState:
        """
        Classify the cell for display.

        A revealed cell keeps its revealed classification even when it is
        also flagged.
        """
        if not self.is_revealed:
            return CellState.FLAGGED if self.is_flagged else CellState.HIDDEN
        if self.is_mine:
            return CellState.MINE
        return CellState.NUMBER

    def to_observation(self) -> int:
        """
        Convert cell to a numeric observation value.

        Returns:
            -1: Hidden cell
            -2: Flagged (hidden) cell
            0-8: Revealed cell with adjacent mine count
            9: Revealed mine
        """
        state = self.state
        if state is CellState.HIDDEN:
            return HIDDEN_OBSERVATION
        if state is CellState.FLAGGED:
            return FLAGGED_OBSERVATION
        if state is CellState.MINE:
            return MINE_OBSERVATION
        return self.adjacent_mines
