"""Maze representation: positions, actions, and the problem definition."""

from .data_models import Position, ACTIONS, DEFAULT_COSTS
from .maze_problem import MazeProblem, MazeTestResult, MazeConfigurationError

__all__ = [
    'Position',
    'ACTIONS',
    'DEFAULT_COSTS',
    'MazeProblem',
    'MazeTestResult',
    'MazeConfigurationError'
]
