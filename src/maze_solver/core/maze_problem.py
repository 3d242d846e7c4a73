"""Maze pathfinding problem definition.

Specifies the grid maze problem: its actions, transitions, entry costs, goal
test, and solution test. A MazeProblem is fed to a search algorithm to find a
solution, and can independently check any candidate solution.
"""

import logging
from dataclasses import dataclass
from typing import Dict, FrozenSet, Iterator, Mapping, Optional, Sequence

import numpy as np

from maze_solver.core.data_models import (
    ACTIONS, CELL_SYMBOLS, DEFAULT_COSTS, DIFFICULT, GOAL, INITIAL, KEY, WALL,
    Position,
)

logger = logging.getLogger(__name__)


class MazeConfigurationError(ValueError):
    """Raised when a maze cannot be turned into a valid problem."""
    pass


@dataclass(frozen=True)
class MazeTestResult:
    """Outcome of testing a candidate solution.

    cost is the total entry cost of the solution when is_solution is True,
    -1 otherwise.
    """
    is_solution: bool
    cost: int

    def __iter__(self) -> Iterator:
        return iter((self.is_solution, self.cost))


_INVALID = MazeTestResult(False, -1)


class MazeProblem:
    """Grid maze with an initial cell, an optional key, and goal cells.

    Cell symbols:
        'X' wall, '.' open, 'M' difficult terrain, 'I' initial state,
        'K' key, 'G' goal.

    For example, a valid maze might look like::

        maze = [
            "XXXXXXX",
            "XI....X",
            "X.MMM.X",
            "X.XGX.X",
            "XXXXXXX",
        ]
    """

    def __init__(self, maze: Sequence[str], costs: Optional[Mapping[str, int]] = None):
        """Build the problem and locate its initial, key, and goal states.

        Args:
            maze: Rows of the maze, all of equal length
            costs: Entry costs keyed by 'open' and 'difficult'; missing keys
                fall back to the defaults

        Raises:
            MazeConfigurationError: If the maze is malformed
        """
        if maze is None or len(maze) == 0:
            raise MazeConfigurationError("Maze must have at least one row")

        widths = {len(row) for row in maze}
        if len(widths) != 1 or 0 in widths:
            raise MazeConfigurationError(
                f"Maze rows must be non-empty and of equal length, got widths {sorted(widths)}"
            )

        self.costs = self._resolve_costs(costs)
        self.grid = np.array([list(row) for row in maze], dtype='<U1')
        self.rows, self.cols = self.grid.shape

        initial: Optional[Position] = None
        key: Optional[Position] = None
        goals = set()

        for row in range(self.rows):
            for col in range(self.cols):
                symbol = self.grid[row, col]
                if symbol not in CELL_SYMBOLS:
                    raise MazeConfigurationError(
                        f"Unrecognized maze symbol {symbol!r} at ({col}, {row})"
                    )
                if symbol == INITIAL:
                    if initial is not None:
                        raise MazeConfigurationError(
                            f"Maze has more than one initial state: {initial} and ({col}, {row})"
                        )
                    initial = Position(col, row)
                elif symbol == KEY:
                    if key is not None:
                        raise MazeConfigurationError(
                            f"Maze has more than one key: {key} and ({col}, {row})"
                        )
                    key = Position(col, row)
                elif symbol == GOAL:
                    goals.add(Position(col, row))

        if initial is None:
            raise MazeConfigurationError("Maze has no initial state")
        if not goals:
            raise MazeConfigurationError("Maze has no goal states")

        self._initial_state = initial
        self._key_state = key
        self._goal_states = frozenset(goals)

        logger.debug(f"Maze problem built: {self.cols}x{self.rows}, initial={initial}, "
                     f"key={key}, goals={len(goals)}")

    @classmethod
    def from_config(cls, maze: Sequence[str]) -> 'MazeProblem':
        """Build a problem using entry costs from the active configuration."""
        from maze_solver.config import configured_costs

        return cls(maze, costs=configured_costs())

    @staticmethod
    def _resolve_costs(costs: Optional[Mapping[str, int]]) -> Dict[str, int]:
        resolved = dict(DEFAULT_COSTS)
        if costs:
            for name, value in costs.items():
                if name not in DEFAULT_COSTS:
                    raise MazeConfigurationError(f"Unknown terrain cost {name!r}")
                if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
                    raise MazeConfigurationError(
                        f"Terrain cost {name!r} must be a positive integer, got {value!r}"
                    )
                resolved[name] = value
        return resolved

    # Accessors
    # -------------------------------------------------------------------------

    @property
    def initial_state(self) -> Position:
        return self._initial_state

    @property
    def key_state(self) -> Optional[Position]:
        """The key's position, or None if the maze has no key."""
        return self._key_state

    @property
    def goal_states(self) -> FrozenSet[Position]:
        return self._goal_states

    def in_bounds(self, state: Position) -> bool:
        return 0 <= state.row < self.rows and 0 <= state.col < self.cols

    def cell_at(self, state: Position) -> str:
        return str(self.grid[state.row, state.col])

    def is_wall(self, state: Position) -> bool:
        return self.cell_at(state) == WALL

    # Problem interface
    # -------------------------------------------------------------------------

    def is_goal_state(self, state: Position) -> bool:
        return state in self._goal_states

    def get_cost(self, state: Position) -> int:
        """Cost of moving into the given state."""
        if self.cell_at(state) == DIFFICULT:
            return self.costs["difficult"]
        return self.costs["open"]

    def get_transitions(self, state: Position) -> Dict[str, Position]:
        """Map each legal action from state to the state it leads to.

        An action is legal when its target lies inside the maze and is not a
        wall. Actions are tried in ACTIONS order.
        """
        result: Dict[str, Position] = {}
        for action, offset in ACTIONS.items():
            new_state = state + offset
            if self.in_bounds(new_state) and not self.is_wall(new_state):
                result[action] = new_state
        return result

    def test_solution(self, possible_solution: Optional[Sequence[str]]) -> MazeTestResult:
        """Replay a candidate action sequence from the initial state.

        Args:
            possible_solution: Actions such as ["U", "D", "D", "L"]

        Returns:
            MazeTestResult; a solution ends on a goal having entered the key
            cell along the way (when the maze has a key). Any sequence that is
            empty, uses an unknown action, or leaves the open cells of the
            maze is reported as (False, -1).
        """
        if not possible_solution:
            return _INVALID

        state = self._initial_state
        cost = 0
        has_key = self._key_state is None

        for action in possible_solution:
            offset = ACTIONS.get(action) if isinstance(action, str) else None
            if offset is None:
                return _INVALID
            state = state + offset
            if not self.in_bounds(state) or self.is_wall(state):
                return _INVALID
            if state == self._key_state:
                has_key = True
            cost += self.get_cost(state)

        if self.is_goal_state(state) and has_key:
            return MazeTestResult(True, cost)
        return _INVALID

    def __repr__(self) -> str:
        return (f"MazeProblem(cols={self.cols}, rows={self.rows}, "
                f"initial={self._initial_state}, key={self._key_state}, "
                f"goals={len(self._goal_states)})")
