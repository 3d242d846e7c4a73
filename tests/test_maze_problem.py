"""Tests for the maze problem definition."""

import pytest

from maze_solver.core.data_models import Position
from maze_solver.core.maze_problem import MazeConfigurationError, MazeProblem, MazeTestResult


SIMPLE_MAZE = [
    "XXXXX",
    "XI..X",
    "X.X.X",
    "X.G.X",
    "XXXXX",
]

KEY_MAZE = [
    "XXXXXX",
    "XK.I.X",
    "XXX.XX",
    "XG...X",
    "XXXXXX",
]


class TestMazeConstruction:
    """Test building problems from maze rows."""

    def test_locates_states(self):
        """Initial, key, and goal states are found by symbol."""
        problem = MazeProblem(KEY_MAZE)

        assert problem.rows == 5
        assert problem.cols == 6
        assert problem.initial_state == Position(3, 1)
        assert problem.key_state == Position(1, 1)
        assert problem.goal_states == frozenset({Position(1, 3)})

    def test_no_key(self):
        """A maze without 'K' has no key state."""
        problem = MazeProblem(SIMPLE_MAZE)
        assert problem.key_state is None

    def test_multiple_goals(self):
        problem = MazeProblem(["GIG"])
        assert problem.goal_states == frozenset({Position(0, 0), Position(2, 0)})

    @pytest.mark.parametrize("maze, message", [
        (["XIZGX"], "Unrecognized maze symbol"),
        (["X..GX"], "no initial state"),
        (["XIIGX"], "more than one initial state"),
        (["IKKG"], "more than one key"),
        (["XI..X"], "no goal states"),
        (["XIG", "XX"], "equal length"),
        ([], "at least one row"),
    ])
    def test_malformed_maze(self, maze, message):
        """Malformed mazes are rejected before any search can run."""
        with pytest.raises(MazeConfigurationError, match=message):
            MazeProblem(maze)

    def test_configuration_error_is_value_error(self):
        with pytest.raises(ValueError):
            MazeProblem(["?"])

    @pytest.mark.parametrize("costs", [
        {"open": 0},
        {"difficult": -3},
        {"difficult": 2.5},
        {"open": True},
        {"lava": 10},
    ])
    def test_invalid_costs(self, costs):
        """Terrain costs must be positive integers for known terrains."""
        with pytest.raises(MazeConfigurationError):
            MazeProblem(SIMPLE_MAZE, costs=costs)


class TestTransitions:
    """Test transition and cost queries."""

    @pytest.fixture
    def problem(self):
        return MazeProblem(SIMPLE_MAZE)

    def test_transitions_exclude_walls(self, problem):
        """Only moves onto non-wall cells are offered."""
        transitions = problem.get_transitions(Position(1, 1))

        assert transitions == {"D": Position(1, 2), "R": Position(2, 1)}

    def test_transitions_order(self, problem):
        """Transitions follow the action table order."""
        transitions = problem.get_transitions(Position(3, 2))
        assert list(transitions) == ["U", "D"]

    def test_transitions_respect_bounds(self):
        """Moves off the edge of a borderless maze are excluded."""
        problem = MazeProblem(["I.", ".G"])

        assert problem.get_transitions(Position(0, 0)) == {
            "D": Position(0, 1),
            "R": Position(1, 0),
        }
        assert problem.get_transitions(Position(1, 1)) == {
            "U": Position(1, 0),
            "L": Position(0, 1),
        }

    def test_costs(self):
        """Difficult terrain costs more to enter than open cells."""
        problem = MazeProblem(["IMKG"])

        assert problem.get_cost(Position(1, 0)) == 3
        assert problem.get_cost(Position(2, 0)) == 1
        assert problem.get_cost(Position(3, 0)) == 1

    def test_custom_costs(self):
        problem = MazeProblem(["IM.G"], costs={"difficult": 7})

        assert problem.get_cost(Position(1, 0)) == 7
        assert problem.get_cost(Position(2, 0)) == 1

    def test_goal_test(self, problem):
        assert problem.is_goal_state(Position(2, 3))
        assert not problem.is_goal_state(Position(1, 1))


class TestSolutionTesting:
    """Test replaying candidate solutions."""

    @pytest.fixture
    def problem(self):
        return MazeProblem(SIMPLE_MAZE)

    @pytest.fixture
    def key_problem(self):
        return MazeProblem(KEY_MAZE)

    def test_valid_solution(self, problem):
        """A path ending on a goal is a solution with its entry cost."""
        result = problem.test_solution(["D", "D", "R"])

        assert result == MazeTestResult(True, 3)
        is_solution, cost = result
        assert is_solution is True
        assert cost == 3

    def test_longer_route(self, problem):
        result = problem.test_solution(["R", "R", "D", "D", "L"])
        assert result == MazeTestResult(True, 5)

    @pytest.mark.parametrize("actions", [None, []])
    def test_absent_or_empty(self, problem, actions):
        assert problem.test_solution(actions) == MazeTestResult(False, -1)

    def test_wall(self, problem):
        """Stepping into a wall invalidates the sequence."""
        assert problem.test_solution(["U"]) == MazeTestResult(False, -1)
        assert problem.test_solution(["R", "D", "D"]) == MazeTestResult(False, -1)

    def test_out_of_bounds(self):
        """Leaving a borderless maze invalidates the sequence."""
        problem = MazeProblem(["IG"])
        assert problem.test_solution(["L", "R", "R"]) == MazeTestResult(False, -1)

    def test_unknown_action(self, problem):
        assert problem.test_solution(["D", "Q", "R"]) == MazeTestResult(False, -1)
        assert problem.test_solution(["D", None, "R"]) == MazeTestResult(False, -1)

    def test_not_ending_on_goal(self, problem):
        """Passing over a goal is not enough; the path must end there."""
        assert problem.test_solution(["D", "D"]) == MazeTestResult(False, -1)
        assert problem.test_solution(["D", "D", "R", "R"]) == MazeTestResult(False, -1)

    def test_key_required(self, key_problem):
        """A maze with a key needs the key collected before the goal counts."""
        assert key_problem.test_solution(["D", "D", "L", "L"]) == MazeTestResult(False, -1)

        result = key_problem.test_solution(["L", "L", "R", "R", "D", "D", "L", "L"])
        assert result == MazeTestResult(True, 8)

    def test_difficult_terrain_cost(self):
        problem = MazeProblem(["IMMG"])
        assert problem.test_solution(["R", "R", "R"]) == MazeTestResult(True, 7)
