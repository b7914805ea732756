"""
Field module for Minesweeper game.

Implements the play field with mine placement, neighbour counts,
cursor movement, cell revealing and game state management.
"""
import logging
import random
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Dict, List, Optional, Tuple

import numpy as np

from .cell import Cell

logger = logging.getLogger(__name__)

Position = Tuple[int, int]


# ============================================================================
# Constants
# ============================================================================

class InvalidConfiguration(ValueError):
    """Field dimensions or mine count cannot make a playable field."""


class GameState(Enum):
    """Possible states of the game."""

    PLAYING = auto()
    WON = auto()
    LOST = auto()


class Edge(Enum):
    """Field edges the cursor can jump to."""

    LEFT = auto()
    RIGHT = auto()
    UP = auto()
    DOWN = auto()


class Action(Enum):
    """Player actions that can be applied at the cursor."""

    CURSOR_UP = auto()
    CURSOR_DOWN = auto()
    CURSOR_LEFT = auto()
    CURSOR_RIGHT = auto()

    CURSOR_TO_EDGE_UP = auto()
    CURSOR_TO_EDGE_DOWN = auto()
    CURSOR_TO_EDGE_LEFT = auto()
    CURSOR_TO_EDGE_RIGHT = auto()

    FLAG = auto()
    REVEAL = auto()
    REVEAL_AROUND = auto()


@dataclass(frozen=True)
class FieldConfig:
    """
    Configuration for a Minesweeper field.

    Attributes:
        height: Number of rows.
        width: Number of columns.
        mines: Total mines to place.
    """

    height: int = 9
    width: int = 9
    mines: int = 10

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are valid."""
        if self.width < 1 or self.height < 1:
            raise InvalidConfiguration(
                f"Field dimensions must be positive (got {self.height}x{self.width})"
            )
        if self.mines < 0:
            raise InvalidConfiguration("Number of mines cannot be negative")
        if self.mines > self.cell_count:
            raise InvalidConfiguration(
                f"Too many mines: {self.mines} (max {self.cell_count})"
            )

    @property
    def cell_count(self) -> int:
        """Total number of cells."""
        return self.height * self.width


# Preset difficulty levels
BEGINNER = FieldConfig(9, 9, 10)
INTERMEDIATE = FieldConfig(16, 16, 40)
EXPERT = FieldConfig(16, 30, 99)

PRESETS: Dict[str, FieldConfig] = {
    "beginner": BEGINNER,
    "intermediate": INTERMEDIATE,
    "expert": EXPERT,
}


# ============================================================================
# Field Class
# ============================================================================

@dataclass
class Field:
    """
    Minesweeper play field.

    Cells are stored in a flat, row-major list (``index = y * width + x``).
    Mines are laid out once at construction and never move.
    """

    config: FieldConfig = field(default_factory=FieldConfig)
    rng: random.Random = field(default_factory=random.Random, repr=False)
    _cells: List[Cell] = field(default_factory=list, init=False, repr=False)
    _cursor: Position = field(default=(0, 0), init=False)
    _game_over: bool = field(default=False, init=False)

    def __post_init__(self) -> None:
        """Lay out the mines after dataclass creation."""
        self._place_mines()
        self._calculate_adjacent_mines()
        logger.info(
            "New field %dx%d with %d mines",
            self.config.height, self.config.width, self.config.mines,
        )

    @classmethod
    def create(
        cls,
        height: int,
        width: int,
        mines: int,
        rng: Optional[random.Random] = None,
    ) -> "Field":
        """
        Build a field from its dimensions and mine count.

        Raises:
            InvalidConfiguration: If the values cannot make a field.
        """
        config = FieldConfig(height, width, mines)
        if rng is None:
            return cls(config)
        return cls(config, rng)

    # ========================================================================
    # Grid Initialization (Low-level)
    # ========================================================================

    def _place_mines(self) -> None:
        """Shuffle exactly ``mines`` mine flags over the cells."""
        total = self.config.cell_count
        is_mine = [True] * self.config.mines + [False] * (total - self.config.mines)
        self.rng.shuffle(is_mine)
        self._cells = [Cell(is_mine=mine) for mine in is_mine]

    def _calculate_adjacent_mines(self) -> None:
        """Calculate adjacent mine counts for all cells."""
        for y in range(self.config.height):
            for x in range(self.config.width):
                self._cell_at(x, y).adjacent_mines = self._count_adjacent_mines(x, y)

    def _count_adjacent_mines(self, x: int, y: int) -> int:
        """Count mines adjacent to a specific cell."""
        return sum(
            1 for nx, ny in self._get_neighbors(x, y) if self._cell_at(nx, ny).is_mine
        )

    # ========================================================================
    # Neighbor Utilities (Low-level)
    # ========================================================================

    def _get_neighbors(
        self, x: int, y: int, include_self: bool = False
    ) -> List[Position]:
        """
        Get valid neighboring cell positions.

        Args:
            x: Column of center cell.
            y: Row of center cell.
            include_self: Also return the center cell itself.

        Returns:
            List of (x, y) tuples inside the field, row by row.
        """
        neighbors = []
        for delta_y in (-1, 0, 1):
            for delta_x in (-1, 0, 1):
                if delta_x == 0 and delta_y == 0 and not include_self:
                    continue
                new_x = x + delta_x
                new_y = y + delta_y
                if self.is_valid_position(new_x, new_y):
                    neighbors.append((new_x, new_y))
        return neighbors

    def is_valid_position(self, x: int, y: int) -> bool:
        """Check if position is within field bounds."""
        return 0 <= x < self.config.width and 0 <= y < self.config.height

    def _index(self, x: int, y: int) -> int:
        if not self.is_valid_position(x, y):
            raise IndexError(
                f"Position ({x}, {y}) is outside the "
                f"{self.config.width}x{self.config.height} field"
            )
        return y * self.config.width + x

    def _cell_at(self, x: int, y: int) -> Cell:
        return self._cells[self._index(x, y)]

    # ========================================================================
    # Game Actions (Mid-level)
    # ========================================================================

    def reveal(self, x: int, y: int) -> None:
        """
        Reveal the cell at the given position.

        Flagged cells are never revealed. Revealing a mine ends the game.
        Revealing a cell without adjacent mines also reveals its neighbours,
        cascading through every connected zero cell. The cascade stops at
        flagged cells too.

        Args:
            x: Column to reveal.
            y: Row to reveal.
        """
        target = self._cell_at(x, y)
        if target.is_flagged:
            return

        target.reveal()
        if target.is_mine:
            if not self._game_over:
                logger.info("Mine revealed at (%d, %d)", x, y)
            self._game_over = True

        revealed = 0
        stack = [(x, y)]
        while stack:
            cx, cy = stack.pop()
            cell = self._cell_at(cx, cy)
            if cell.is_mine or cell.adjacent_mines != 0:
                continue
            for nx, ny in self._get_neighbors(cx, cy):
                neighbor = self._cell_at(nx, ny)
                if neighbor.is_revealed or neighbor.is_flagged:
                    continue
                neighbor.reveal()
                revealed += 1
                stack.append((nx, ny))

        if revealed:
            logger.debug("Reveal at (%d, %d) cascaded to %d cells", x, y, revealed)

    def reveal_from_cell(self, x: int, y: int) -> None:
        """
        Chord action: reveal around a cell whose mines are all flagged.

        Looks at the 3x3 block centred on the cell. When the number of
        mines in the block equals the number of flags, every unflagged cell
        of the block is revealed (cascading as usual).

        Args:
            x: Column of the center cell.
            y: Row of the center cell.
        """
        self._index(x, y)
        block = self._get_neighbors(x, y, include_self=True)
        mines = sum(1 for bx, by in block if self._cell_at(bx, by).is_mine)
        flags = sum(1 for bx, by in block if self._cell_at(bx, by).is_flagged)
        if mines != flags:
            return

        for bx, by in block:
            if not self._cell_at(bx, by).is_flagged:
                self.reveal(bx, by)

    def flag(self, x: int, y: int) -> None:
        """Toggle the flag on a cell, revealed or not."""
        self._cell_at(x, y).toggle_flag()

    def reveal_all(self) -> None:
        """Reveal every cell, without mine checks or cascades."""
        for cell in self._cells:
            cell.reveal()

    # ========================================================================
    # Cursor
    # ========================================================================

    def _valid_translation(self, dx: int, dy: int) -> bool:
        x, y = self._cursor
        return self.is_valid_position(x + dx, y + dy)

    def translate_x(self, dx: int) -> None:
        """Move the cursor horizontally; ignored if it would leave the field."""
        if self._valid_translation(dx, 0):
            x, y = self._cursor
            self._cursor = (x + dx, y)

    def translate_y(self, dy: int) -> None:
        """Move the cursor vertically; ignored if it would leave the field."""
        if self._valid_translation(0, dy):
            x, y = self._cursor
            self._cursor = (x, y + dy)

    def move_cursor_to_edge(self, edge: Edge) -> None:
        """Jump the cursor to one of the field's edges."""
        x, y = self._cursor
        if edge is Edge.LEFT:
            x = 0
        elif edge is Edge.RIGHT:
            x = self.config.width - 1
        elif edge is Edge.UP:
            y = 0
        elif edge is Edge.DOWN:
            y = self.config.height - 1
        self._cursor = (x, y)

    def apply_action(self, action: Action) -> None:
        """Apply a player action at the current cursor position."""
        x, y = self._cursor
        if action is Action.CURSOR_UP:
            self.translate_y(-1)
        elif action is Action.CURSOR_DOWN:
            self.translate_y(1)
        elif action is Action.CURSOR_LEFT:
            self.translate_x(-1)
        elif action is Action.CURSOR_RIGHT:
            self.translate_x(1)
        elif action is Action.CURSOR_TO_EDGE_UP:
            self.move_cursor_to_edge(Edge.UP)
        elif action is Action.CURSOR_TO_EDGE_DOWN:
            self.move_cursor_to_edge(Edge.DOWN)
        elif action is Action.CURSOR_TO_EDGE_LEFT:
            self.move_cursor_to_edge(Edge.LEFT)
        elif action is Action.CURSOR_TO_EDGE_RIGHT:
            self.move_cursor_to_edge(Edge.RIGHT)
        elif action is Action.FLAG:
            self.flag(x, y)
        elif action is Action.REVEAL:
            self.reveal(x, y)
        elif action is Action.REVEAL_AROUND:
            self.reveal_from_cell(x, y)

    # ========================================================================
    # State Accessors (High-level)
    # ========================================================================

    @property
    def height(self) -> int:
        return self.config.height

    @property
    def width(self) -> int:
        return self.config.width

    @property
    def dimensions(self) -> Tuple[int, int]:
        """Field size as (height, width)."""
        return self.config.height, self.config.width

    @property
    def cursor(self) -> Position:
        """Current cursor position as (x, y)."""
        return self._cursor

    @property
    def cells(self) -> Tuple[Cell, ...]:
        """All cells in row-major order."""
        return tuple(self._cells)

    @property
    def game_over(self) -> bool:
        """True once a mine has been revealed by the player."""
        return self._game_over

    @property
    def total_flags(self) -> int:
        return sum(1 for cell in self._cells if cell.is_flagged)

    @property
    def total_mines(self) -> int:
        return sum(1 for cell in self._cells if cell.is_mine)

    @property
    def mines_left(self) -> int:
        """Mines minus flags placed; negative when over-flagged."""
        return self.total_mines - self.total_flags

    def has_won(self) -> bool:
        """Check if every non-mine cell has been revealed."""
        return all(cell.is_revealed for cell in self._cells if not cell.is_mine)

    @property
    def game_state(self) -> GameState:
        """Get current game state."""
        if self._game_over:
            return GameState.LOST
        if self.has_won():
            return GameState.WON
        return GameState.PLAYING

    def get_cell(self, x: int, y: int) -> Cell:
        """
        Get cell at position.

        Raises:
            IndexError: If the position is outside the field.
        """
        return self._cell_at(x, y)

    def get_observation(self) -> np.ndarray:
        """
        Get field state as a numpy array.

        Returns:
            ``(height, width)`` int8 array where:
                -1 = hidden
                -2 = flagged
                0-8 = revealed with adjacent count
                9 = revealed mine
        """
        obs = np.fromiter(
            (cell.to_observation() for cell in self._cells),
            dtype=np.int8,
            count=len(self._cells),
        )
        return obs.reshape(self.config.height, self.config.width)
