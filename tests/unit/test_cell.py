"""
Unit tests for Cell class.

Tests cell reveal/flag behavior, display state and observation conversion.
"""
import pytest
from mine.game import Cell, CellState


# ============================================================================
# Cell Initialization Tests
# ============================================================================

class TestCellInitialization:
    """Test cell creation and default values."""

    def test_default_cell_is_not_mine(self) -> None:
        """New cell should not be a mine by default."""
        cell = Cell()
        assert cell.is_mine is False

    def test_default_cell_is_hidden(self) -> None:
        """New cell should be hidden and unflagged by default."""
        cell = Cell()
        assert cell.is_revealed is False
        assert cell.is_flagged is False
        assert cell.is_hidden is True
        assert cell.state == CellState.HIDDEN

    def test_default_cell_has_zero_adjacent_mines(self) -> None:
        """New cell should have 0 adjacent mines by default."""
        assert Cell().adjacent_mines == 0


# ============================================================================
# Cell Reveal Tests
# ============================================================================

class TestCellReveal:
    """Test cell reveal behavior."""

    def test_reveal_marks_cell_revealed(self, hidden_cell: Cell) -> None:
        """Revealing a cell should set its revealed flag."""
        hidden_cell.reveal()
        assert hidden_cell.is_revealed is True
        assert hidden_cell.is_hidden is False

    def test_reveal_is_idempotent(self, hidden_cell: Cell) -> None:
        """Revealing twice leaves the cell revealed."""
        hidden_cell.reveal()
        hidden_cell.reveal()
        assert hidden_cell.is_revealed is True

    def test_reveal_returns_nothing(self, hidden_cell: Cell) -> None:
        """Reveal is a pure side effect."""
        assert hidden_cell.reveal() is None

    def test_reveal_keeps_flag(self, hidden_cell: Cell) -> None:
        """Revealing a flagged cell directly does not clear the flag."""
        hidden_cell.toggle_flag()
        hidden_cell.reveal()
        assert hidden_cell.is_revealed is True
        assert hidden_cell.is_flagged is True


# ============================================================================
# Cell Flag Tests
# ============================================================================

class TestCellFlag:
    """Test cell flagging behavior."""

    def test_flag_changes_state_to_flagged(self, hidden_cell: Cell) -> None:
        """Flagging a hidden cell should show it as flagged."""
        hidden_cell.toggle_flag()
        assert hidden_cell.is_flagged is True
        assert hidden_cell.state == CellState.FLAGGED

    def test_unflag_returns_to_hidden(self, hidden_cell: Cell) -> None:
        """Unflagging a cell should return it to hidden."""
        hidden_cell.toggle_flag()
        hidden_cell.toggle_flag()
        assert hidden_cell.is_flagged is False
        assert hidden_cell.state == CellState.HIDDEN

    def test_flag_revealed_cell_is_allowed(self, hidden_cell: Cell) -> None:
        """Flags can be toggled on revealed cells too."""
        hidden_cell.reveal()
        hidden_cell.toggle_flag()
        assert hidden_cell.is_flagged is True
        assert hidden_cell.is_revealed is True


# ============================================================================
# Cell State Tests
# ============================================================================

class TestCellState:
    """Test display classification."""

    def test_revealed_mine_state(self, mine_cell: Cell) -> None:
        """Revealed mine is classified as MINE."""
        mine_cell.reveal()
        assert mine_cell.state == CellState.MINE

    def test_revealed_number_state(self) -> None:
        """Revealed safe cell is classified as NUMBER."""
        cell = Cell(adjacent_mines=2)
        cell.reveal()
        assert cell.state == CellState.NUMBER

    def test_revealed_and_flagged_keeps_revealed_state(self, mine_cell: Cell) -> None:
        """A flag on a revealed cell does not hide its content."""
        mine_cell.toggle_flag()
        mine_cell.reveal()
        assert mine_cell.state == CellState.MINE


# ============================================================================
# Cell Observation Tests
# ============================================================================

class TestCellObservation:
    """Test numeric observation values."""

    def test_hidden_cell_observation_is_negative_one(
        self, hidden_cell: Cell
    ) -> None:
        """Hidden cell should return -1 for observation."""
        assert hidden_cell.to_observation() == -1

    def test_flagged_cell_observation_is_negative_two(
        self, hidden_cell: Cell
    ) -> None:
        """Flagged cell should return -2 for observation."""
        hidden_cell.toggle_flag()
        assert hidden_cell.to_observation() == -2

    def test_hidden_mine_observation_is_negative_one(self, mine_cell: Cell) -> None:
        """Hidden mines do not leak through the observation."""
        assert mine_cell.to_observation() == -1

    @pytest.mark.parametrize("count", range(0, 9))
    def test_revealed_cell_observation_matches_adjacent_count(
        self, count: int
    ) -> None:
        """Revealed cell returns its adjacent mine count."""
        cell = Cell(adjacent_mines=count)
        cell.reveal()
        assert cell.to_observation() == count

    def test_revealed_mine_observation_is_nine(self, mine_cell: Cell) -> None:
        """Revealed mine should return 9 for observation."""
        mine_cell.reveal()
        assert mine_cell.to_observation() == 9
