"""Manhattan-distance heuristics for the two search phases.

- Single target: distance to the key (phase one)
- Nearest goal: minimum distance over every goal state (phase two)
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, Iterable

import numpy as np

from maze_solver.core.data_models import Position

logger = logging.getLogger(__name__)


class BaseHeuristic(ABC):
    """Abstract base class for heuristics."""

    def __init__(self, name: str):
        """Initialize heuristic.

        Args:
            name: Name of the heuristic
        """
        self.name = name
        self.computation_count = 0

    @abstractmethod
    def compute(self, state: Position) -> int:
        """Estimate the remaining cost from state.

        Args:
            state: Position being evaluated

        Returns:
            Non-negative integer estimate
        """
        pass

    def __call__(self, state: Position) -> int:
        """Compute heuristic and count the evaluation."""
        self.computation_count += 1
        return self.compute(state)

    def get_stats(self) -> Dict[str, Any]:
        """Get computation statistics."""
        return {
            'name': self.name,
            'computation_count': self.computation_count,
        }


class ManhattanHeuristic(BaseHeuristic):
    """Manhattan distance to a single target."""

    def __init__(self, target: Position):
        super().__init__("Manhattan")
        self.target = target

    def compute(self, state: Position) -> int:
        return state.manhattan_distance(self.target)


class NearestGoalHeuristic(BaseHeuristic):
    """Minimum Manhattan distance over a set of goal states.

    Goals are held as an (n, 2) array of (col, row) so each evaluation is a
    single vectorised reduction.
    """

    def __init__(self, goals: Iterable[Position]):
        super().__init__("NearestGoalManhattan")
        goal_list = sorted(goals, key=lambda p: (p.row, p.col))
        if not goal_list:
            raise ValueError("NearestGoalHeuristic requires at least one goal")
        self.goals = np.array([(g.col, g.row) for g in goal_list], dtype=np.int64)

    def compute(self, state: Position) -> int:
        distances = np.abs(self.goals - (state.col, state.row)).sum(axis=1)
        return int(distances.min())


def create_heuristic(targets: Iterable[Position]) -> BaseHeuristic:
    """Factory function to create the heuristic for a set of targets.

    Args:
        targets: Positions the search phase is heading for

    Returns:
        ManhattanHeuristic for a single target, NearestGoalHeuristic otherwise
    """
    targets = list(targets)
    if len(targets) == 1:
        heuristic: BaseHeuristic = ManhattanHeuristic(targets[0])
    else:
        heuristic = NearestGoalHeuristic(targets)
    logger.debug(f"Using {heuristic.name} heuristic over {len(targets)} target(s)")
    return heuristic
