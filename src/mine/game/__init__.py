"""
Minesweeper game module.

Provides core game logic including field management and cell state.
"""
from .cell import Cell, CellState
from .field import (
    Action,
    Edge,
    Field,
    FieldConfig,
    GameState,
    InvalidConfiguration,
    BEGINNER,
    INTERMEDIATE,
    EXPERT,
    PRESETS,
)

__all__ = [
    "Action",
    "Cell",
    "CellState",
    "Edge",
    "Field",
    "FieldConfig",
    "GameState",
    "InvalidConfiguration",
    "BEGINNER",
    "INTERMEDIATE",
    "EXPERT",
    "PRESETS",
]
