"""Key-then-goal maze pathfinding.

Build a MazeProblem from the rows of a maze and hand it to a Pathfinder::

    problem = MazeProblem(["XXXX", "XIGX", "XXXX"])
    actions = Pathfinder().solve(problem)
    problem.test_solution(actions)
"""

from maze_solver.core.data_models import Position, ACTIONS
from maze_solver.core.maze_problem import MazeProblem, MazeTestResult, MazeConfigurationError
from maze_solver.search.astar import Pathfinder, SearchConfig, SearchResult, create_pathfinder, solve

__version__ = "0.1.0"

__all__ = [
    'Position',
    'ACTIONS',
    'MazeProblem',
    'MazeTestResult',
    'MazeConfigurationError',
    'Pathfinder',
    'SearchConfig',
    'SearchResult',
    'create_pathfinder',
    'solve'
]
