"""Search algorithms for the maze solver.

This module implements the two-phase A* search that first reaches the key
and then the nearest goal, guided by Manhattan-distance heuristics.
"""

from .heuristics import BaseHeuristic, ManhattanHeuristic, NearestGoalHeuristic, create_heuristic
from .astar import (
    Frontier, Pathfinder, SearchNode, SearchResult, SearchConfig, PhaseResult,
    create_pathfinder, solve
)

__all__ = [
    'BaseHeuristic',
    'ManhattanHeuristic',
    'NearestGoalHeuristic',
    'create_heuristic',
    'Frontier',
    'Pathfinder',
    'SearchNode',
    'SearchResult',
    'SearchConfig',
    'PhaseResult',
    'create_pathfinder',
    'solve'
]
