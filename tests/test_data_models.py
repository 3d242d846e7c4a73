"""Tests for core data models."""

import pytest
from dataclasses import FrozenInstanceError

from maze_solver.core.data_models import ACTIONS, Position


class TestPosition:
    """Test Position value semantics."""

    def test_value_equality_and_hash(self):
        """Positions with the same coordinates are equal and hash alike."""
        assert Position(2, 3) == Position(2, 3)
        assert Position(2, 3) != Position(3, 2)
        assert hash(Position(2, 3)) == hash(Position(2, 3))
        assert len({Position(1, 1), Position(1, 1), Position(0, 1)}) == 2

    def test_translation(self):
        """Adding an offset produces a new position."""
        origin = Position(4, 4)
        moved = origin + Position(-1, 2)

        assert moved == Position(3, 6)
        assert origin == Position(4, 4)

    def test_translation_rejects_other_types(self):
        """Only positions can be added to positions."""
        with pytest.raises(TypeError):
            Position(0, 0) + (1, 1)

    def test_immutable(self):
        """Positions cannot be modified in place."""
        position = Position(1, 1)
        with pytest.raises(FrozenInstanceError):
            position.col = 5

    def test_manhattan_distance(self):
        """Manhattan distance is symmetric and ignores direction."""
        assert Position(0, 0).manhattan_distance(Position(3, 4)) == 7
        assert Position(3, 4).manhattan_distance(Position(0, 0)) == 7
        assert Position(2, 2).manhattan_distance(Position(2, 2)) == 0

    def test_str(self):
        assert str(Position(1, 2)) == "(1, 2)"


class TestActions:
    """Test the action table."""

    def test_offsets(self):
        """Each action moves one cell in its direction, row 0 at the top."""
        assert ACTIONS["U"] == Position(0, -1)
        assert ACTIONS["D"] == Position(0, 1)
        assert ACTIONS["L"] == Position(-1, 0)
        assert ACTIONS["R"] == Position(1, 0)
        assert list(ACTIONS) == ["U", "D", "L", "R"]

    def test_read_only(self):
        """The action table cannot be mutated."""
        with pytest.raises(TypeError):
            ACTIONS["X"] = Position(1, 1)
