"""
Pytest configuration and shared fixtures.
"""
import io
import random
import sys
from pathlib import Path
from typing import Callable, Iterable, List, Tuple

import pytest

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from rich.console import Console

from mine.game import Cell, Field, FieldConfig


class FixedLayout:
    """Stand-in random source whose shuffle puts the mines on given (x, y) positions."""

    def __init__(self, width: int, mines_at: Iterable[Tuple[int, int]]) -> None:
        self.width = width
        self.mines_at = list(mines_at)

    def shuffle(self, x: List[bool]) -> None:
        x[:] = [False] * len(x)
        for mx, my in self.mines_at:
            x[my * self.width + mx] = True


# ============================================================================
# Field Fixtures
# ============================================================================

@pytest.fixture
def make_field() -> Callable[..., Field]:
    """Factory for fields with mines on fixed positions."""
    def _make(height: int, width: int, mines_at: Iterable[Tuple[int, int]] = ()) -> Field:
        mines_at = list(mines_at)
        return Field.create(height, width, len(mines_at), rng=FixedLayout(width, mines_at))
    return _make


@pytest.fixture
def default_field() -> Field:
    """Create a default 9x9 field with 10 mines."""
    return Field(rng=random.Random(1234))


@pytest.fixture
def corner_mine_field(make_field) -> Field:
    """3x3 field with a single mine in the top-left corner."""
    return make_field(3, 3, [(0, 0)])


@pytest.fixture
def empty_field(make_field) -> Field:
    """Create a field with no mines for cascade testing."""
    return make_field(5, 5)


# ============================================================================
# Cell Fixtures
# ============================================================================

@pytest.fixture
def hidden_cell() -> Cell:
    """Create a hidden cell."""
    return Cell()


@pytest.fixture
def mine_cell() -> Cell:
    """Create a cell containing a mine."""
    return Cell(is_mine=True)


# ============================================================================
# Configuration Fixtures
# ============================================================================

@pytest.fixture
def valid_config() -> FieldConfig:
    """Create a valid field configuration."""
    return FieldConfig(9, 9, 10)


# ============================================================================
# Terminal Fixtures
# ============================================================================

@pytest.fixture
def console() -> Console:
    """Console writing plain text into a buffer."""
    return Console(file=io.StringIO(), width=80, color_system=None)
