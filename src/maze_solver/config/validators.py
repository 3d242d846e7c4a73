"""Configuration validation for the maze solver."""

import logging
from typing import Any

from omegaconf import DictConfig

logger = logging.getLogger(__name__)


class ConfigValidationError(Exception):
    """Exception raised when configuration validation fails."""
    pass


def _is_positive_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


def validate_config(config: DictConfig) -> None:
    """Validate the complete configuration.

    Args:
        config: Configuration to validate

    Raises:
        ConfigValidationError: If validation fails
    """
    try:
        validate_maze_config(config.get('maze', {}))
        validate_search_config(config.get('search', {}))

        logger.info("Configuration validation passed")

    except ConfigValidationError:
        raise
    except Exception as e:
        raise ConfigValidationError(f"Configuration validation failed: {e}") from e


def validate_maze_config(maze_config: DictConfig) -> None:
    """Validate maze configuration section.

    Args:
        maze_config: Maze configuration section
    """
    if not maze_config:
        return

    costs = maze_config.get('costs', {})
    if costs:
        for name, value in costs.items():
            if name not in ('open', 'difficult'):
                raise ConfigValidationError(f"maze.costs has unknown terrain '{name}'")
            if not _is_positive_int(value):
                raise ConfigValidationError(
                    f"maze.costs.{name} must be positive integer, got {value}"
                )

        if costs.get('difficult', 3) <= costs.get('open', 1):
            logger.warning(
                f"maze.costs.difficult ({costs.get('difficult', 3)}) is not greater than "
                f"maze.costs.open ({costs.get('open', 1)})"
            )


def validate_search_config(search_config: DictConfig) -> None:
    """Validate search configuration section.

    Args:
        search_config: Search configuration section
    """
    if not search_config:
        return

    pathfinder_config = search_config.get('pathfinder', {})
    if pathfinder_config:
        max_nodes = pathfinder_config.get('max_nodes_expanded', None)
        if max_nodes is not None and not _is_positive_int(max_nodes):
            raise ConfigValidationError(
                f"pathfinder.max_nodes_expanded must be null or positive integer, got {max_nodes}"
            )
