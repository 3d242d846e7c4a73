"""Two-phase A* search for key-then-goal maze problems.

The first phase searches from the initial state to the key with a
single-target Manhattan heuristic; the second phase searches from the key
(or from the initial state, when the maze has no key) to the nearest goal
with a nearest-goal Manhattan heuristic. Both come from create_heuristic,
which uses the single-target form when there is only one goal. Each phase
has its own frontier and visited set, and the two phases' action sequences
are concatenated.
"""

import heapq
import itertools
import logging
import time
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, Set, Tuple

from maze_solver.core.data_models import Action, Position
from maze_solver.core.maze_problem import MazeProblem
from maze_solver.search.heuristics import BaseHeuristic, create_heuristic

logger = logging.getLogger(__name__)


@dataclass(eq=False)
class SearchNode:
    """Node in the search tree.

    A node only links to its parent. Parent links are fixed at construction,
    so the nodes always form a tree rooted at the node with no parent.
    """
    state: Position
    action: Optional[Action] = None  # Action that led to this node
    parent: Optional['SearchNode'] = field(default=None, repr=False)
    cost_so_far: int = 0  # g(n)
    priority: int = 0  # g(n) + h(n)

    def __lt__(self, other: 'SearchNode') -> bool:
        """Comparison for priority queue (lower priority value pops first)."""
        return self.priority < other.priority

    @property
    def depth(self) -> int:
        depth = 0
        node = self
        while node.parent is not None:
            depth += 1
            node = node.parent
        return depth

    def get_action_sequence(self) -> List[Action]:
        """Get the sequence of actions from the root to this node."""
        actions = []
        node = self
        while node.parent is not None:
            actions.append(node.action)
            node = node.parent
        return list(reversed(actions))


class Frontier:
    """Priority queue of search nodes, lowest priority first.

    Entries are (priority, insertion number, node) so nodes of equal priority
    pop in the order they were pushed.
    """

    def __init__(self):
        self._heap: List[Tuple[int, int, SearchNode]] = []
        self._sequence = itertools.count()

    def push(self, node: SearchNode) -> None:
        heapq.heappush(self._heap, (node.priority, next(self._sequence), node))

    def pop(self) -> SearchNode:
        return heapq.heappop(self._heap)[2]

    def __len__(self) -> int:
        return len(self._heap)


@dataclass
class SearchStatistics:
    """Counters for a single search phase."""
    nodes_expanded: int = 0
    nodes_generated: int = 0
    max_frontier_size: int = 0
    states_visited: int = 0
    heuristic_computations: int = 0

    def update_frontier_size(self, size: int) -> None:
        if size > self.max_frontier_size:
            self.max_frontier_size = size

    def to_dict(self) -> Dict[str, Any]:
        """Convert statistics to dictionary."""
        return {
            'nodes_expanded': self.nodes_expanded,
            'nodes_generated': self.nodes_generated,
            'max_frontier_size': self.max_frontier_size,
            'states_visited': self.states_visited,
            'heuristic_computations': self.heuristic_computations
        }


@dataclass
class PhaseResult:
    """Outcome of one phase of the search."""
    name: str
    success: bool
    node: Optional[SearchNode] = None  # Terminal node when successful
    statistics: SearchStatistics = field(default_factory=SearchStatistics)
    termination_reason: str = "unknown"


@dataclass
class SearchResult:
    """Result from a full two-phase search."""
    success: bool
    actions: Optional[List[Action]] = None  # None means no solution
    cost: int = -1
    nodes_expanded: int = 0
    nodes_generated: int = 0
    computation_time: float = 0.0
    termination_reason: str = "unknown"
    phase_stats: Dict[str, Dict[str, Any]] = field(default_factory=dict)


@dataclass
class SearchConfig:
    """Configuration for the pathfinder."""
    # Per-phase expansion limit; None searches until the frontier is exhausted
    max_nodes_expanded: Optional[int] = None


class Pathfinder:
    """Best-first tree search over a MazeProblem, key first then goal.

    Frontier ties are broken by insertion order: among nodes with equal
    priority, the one pushed first is expanded first.
    """

    def __init__(self, config: Optional[SearchConfig] = None):
        """Initialize pathfinder.

        Args:
            config: Search configuration parameters
        """
        self.config = config or SearchConfig()
        self.phase_results: List[PhaseResult] = []
        self.last_result: Optional[SearchResult] = None

        logger.debug(f"Pathfinder initialized with max_nodes_expanded={self.config.max_nodes_expanded}")

    def solve(self, problem: MazeProblem) -> Optional[List[Action]]:
        """Return the actions leading from the initial state, through the key,
        to a goal, or None if there is no such path.
        """
        return self.search(problem).actions

    def search(self, problem: MazeProblem) -> SearchResult:
        """Search for a key-then-goal path through the maze.

        Args:
            problem: Maze problem to solve

        Returns:
            SearchResult with the action sequence and statistics
        """
        start_time = time.perf_counter()
        self.phase_results = []

        logger.info(f"Starting search: {problem}")

        actions: List[Action] = []
        cost = 0
        start = problem.initial_state
        key = problem.key_state

        if key is not None:
            key_phase = self._run_phase(
                "key", problem, start, create_heuristic([key]),
                lambda state: state == key
            )
            self.phase_results.append(key_phase)
            if not key_phase.success:
                reason = key_phase.termination_reason
                if reason == "search_exhausted":
                    reason = "key_unreachable"
                return self._finish(self._create_failure_result(start_time, reason))

            actions.extend(key_phase.node.get_action_sequence())
            cost += key_phase.node.cost_so_far
            start = key

        goal_phase = self._run_phase(
            "goal", problem, start, create_heuristic(problem.goal_states),
            problem.is_goal_state
        )
        self.phase_results.append(goal_phase)
        if not goal_phase.success:
            reason = goal_phase.termination_reason
            if reason == "search_exhausted":
                reason = "goal_unreachable"
            return self._finish(self._create_failure_result(start_time, reason))

        actions.extend(goal_phase.node.get_action_sequence())
        cost += goal_phase.node.cost_so_far

        return self._finish(self._create_success_result(start_time, actions, cost))

    def _run_phase(self, name: str, problem: MazeProblem, start: Position,
                   heuristic: BaseHeuristic,
                   is_target: Callable[[Position], bool]) -> PhaseResult:
        """Run one best-first search from start until is_target holds.

        A state enters the visited set when a node whose successors include
        an unvisited state is expanded, not when the state is discovered.
        """
        stats = SearchStatistics()
        frontier = Frontier()
        visited: Set[Position] = set()
        limit = self.config.max_nodes_expanded

        root = SearchNode(state=start)
        frontier.push(root)

        logger.debug(f"Phase '{name}' starting from {start}")

        while frontier:
            if limit is not None and stats.nodes_expanded >= limit:
                logger.warning(f"Phase '{name}' stopped after {stats.nodes_expanded} expansions")
                return self._end_phase(name, None, stats, heuristic, visited, "max_nodes_reached")

            expanding = frontier.pop()
            stats.nodes_expanded += 1

            for action, successor in problem.get_transitions(expanding.state).items():
                if successor in visited:
                    continue
                visited.add(expanding.state)

                step_cost = problem.get_cost(successor)
                cost_so_far = expanding.cost_so_far + step_cost
                child = SearchNode(
                    state=successor,
                    action=action,
                    parent=expanding,
                    cost_so_far=cost_so_far,
                    priority=cost_so_far + heuristic(successor)
                )
                stats.nodes_generated += 1

                if is_target(child.state):
                    return self._end_phase(name, child, stats, heuristic, visited, "target_reached")
                frontier.push(child)

            stats.update_frontier_size(len(frontier))

        return self._end_phase(name, None, stats, heuristic, visited, "search_exhausted")

    def _end_phase(self, name: str, node: Optional[SearchNode], stats: SearchStatistics,
                   heuristic: BaseHeuristic, visited: Set[Position],
                   termination_reason: str) -> PhaseResult:
        stats.states_visited = len(visited)
        stats.heuristic_computations = heuristic.computation_count
        if node is not None:
            logger.debug(f"Phase '{name}' reached {node.state} at cost {node.cost_so_far} "
                         f"after {stats.nodes_expanded} expansions")
        else:
            logger.debug(f"Phase '{name}' failed ({termination_reason}) "
                         f"after {stats.nodes_expanded} expansions")
        return PhaseResult(
            name=name,
            success=node is not None,
            node=node,
            statistics=stats,
            termination_reason=termination_reason
        )

    def _collect_phase_stats(self) -> Dict[str, Dict[str, Any]]:
        return {phase.name: phase.statistics.to_dict() for phase in self.phase_results}

    def _create_success_result(self, start_time: float, actions: List[Action],
                               cost: int) -> SearchResult:
        """Create successful search result."""
        return SearchResult(
            success=True,
            actions=actions,
            cost=cost,
            nodes_expanded=sum(p.statistics.nodes_expanded for p in self.phase_results),
            nodes_generated=sum(p.statistics.nodes_generated for p in self.phase_results),
            computation_time=time.perf_counter() - start_time,
            termination_reason="goal_reached",
            phase_stats=self._collect_phase_stats()
        )

    def _create_failure_result(self, start_time: float, termination_reason: str) -> SearchResult:
        """Create search result for a maze with no solution."""
        return SearchResult(
            success=False,
            actions=None,
            cost=-1,
            nodes_expanded=sum(p.statistics.nodes_expanded for p in self.phase_results),
            nodes_generated=sum(p.statistics.nodes_generated for p in self.phase_results),
            computation_time=time.perf_counter() - start_time,
            termination_reason=termination_reason,
            phase_stats=self._collect_phase_stats()
        )

    def _finish(self, result: SearchResult) -> SearchResult:
        self.last_result = result
        if result.success:
            logger.info(f"Search succeeded: {len(result.actions)} actions, cost {result.cost}, "
                        f"{result.nodes_expanded} nodes expanded in {result.computation_time:.4f}s")
        else:
            logger.info(f"No solution: {result.termination_reason} "
                        f"({result.nodes_expanded} nodes expanded)")
        return result

    def get_search_stats(self) -> Dict[str, Any]:
        """Get statistics of the most recent search."""
        result = self.last_result
        return {
            'success': result.success if result else False,
            'cost': result.cost if result else -1,
            'nodes_expanded': result.nodes_expanded if result else 0,
            'nodes_generated': result.nodes_generated if result else 0,
            'termination_reason': result.termination_reason if result else None,
            'phases': self._collect_phase_stats(),
            'config': {
                'max_nodes_expanded': self.config.max_nodes_expanded
            }
        }


def create_pathfinder(max_nodes_expanded: Optional[int] = None) -> Pathfinder:
    """Factory function to create a pathfinder.

    Values not given explicitly are taken from the global configuration's
    search.pathfinder group when one is loaded.

    Args:
        max_nodes_expanded: Per-phase expansion limit (None for no limit)

    Returns:
        Configured Pathfinder instance
    """
    if max_nodes_expanded is None:
        from maze_solver.config import configured_max_nodes_expanded

        max_nodes_expanded = configured_max_nodes_expanded()

    return Pathfinder(SearchConfig(max_nodes_expanded=max_nodes_expanded))


def solve(problem: MazeProblem) -> Optional[List[Action]]:
    """Solve a maze with a default pathfinder.

    Returns:
        Actions such as ["R", "D", ...], or None if the maze has no solution
    """
    return create_pathfinder().solve(problem)
