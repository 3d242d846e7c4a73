"""Configuration management for the maze solver.

This module provides Hydra-based loading of terrain costs and pathfinder
limits, with runtime overrides and validation.
"""

from .config_manager import (
    ConfigManager, load_config, get_config, get_parameter, reset_config,
    configured_costs, configured_max_nodes_expanded
)
from .validators import validate_config, ConfigValidationError

__all__ = [
    'ConfigManager',
    'load_config',
    'get_config',
    'get_parameter',
    'reset_config',
    'configured_costs',
    'configured_max_nodes_expanded',
    'validate_config',
    'ConfigValidationError'
]
