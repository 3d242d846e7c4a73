"""Hydra-backed configuration for terrain costs and pathfinder limits.

The configuration directory holds a ``config.yaml`` with two groups::

    maze:
      costs: {open: 1, difficult: 3}
    search:
      pathfinder: {max_nodes_expanded: null}

Loading composes the file with Hydra, applies command-line style overrides
(``maze.costs.difficult=5``), validates the result, and installs it as the
active configuration. ``MazeProblem.from_config`` and ``create_pathfinder``
read the active configuration through ``configured_costs`` and
``configured_max_nodes_expanded``.
"""

import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from hydra import compose, initialize_config_dir
from hydra.core.global_hydra import GlobalHydra
from omegaconf import DictConfig, OmegaConf

from .validators import validate_config

logger = logging.getLogger(__name__)

# <project root>/conf
DEFAULT_CONFIG_DIR = Path(__file__).resolve().parents[3] / "conf"

_active_config: Optional[DictConfig] = None


class ConfigManager:
    """Composes the maze solver configuration from one directory."""

    def __init__(self, config_dir: Optional[Union[str, Path]] = None):
        self.config_dir = Path(config_dir or DEFAULT_CONFIG_DIR).resolve()
        if not self.config_dir.is_dir():
            raise FileNotFoundError(f"Configuration directory not found: {self.config_dir}")

        self.config: Optional[DictConfig] = None
        logger.debug(f"Reading configuration from {self.config_dir}")

    def load_config(self,
                    config_name: str = "config",
                    overrides: Optional[List[str]] = None,
                    validate: bool = True) -> DictConfig:
        """Compose a configuration file and make it the active configuration.

        Args:
            config_name: Config file name without the .yaml suffix
            overrides: Hydra override strings, e.g. ["maze.costs.difficult=5"]
            validate: Check costs and limits before installing the result

        Returns:
            The composed configuration

        Raises:
            ConfigValidationError: If validation is enabled and a value is invalid
        """
        global _active_config

        overrides = list(overrides or [])
        GlobalHydra.instance().clear()

        try:
            with initialize_config_dir(config_dir=str(self.config_dir), version_base=None):
                cfg = compose(config_name=config_name, overrides=overrides)
            if validate:
                validate_config(cfg)
        except Exception as e:
            logger.error(f"Could not load '{config_name}' from {self.config_dir}: {e}")
            raise

        self.config = cfg
        _active_config = cfg

        if overrides:
            logger.info(f"Loaded configuration '{config_name}' with overrides {overrides}")
        else:
            logger.info(f"Loaded configuration '{config_name}'")
        return cfg

    def get_parameter(self, key: str, default: Any = None) -> Any:
        """Look up a dotted key such as 'maze.costs.difficult'."""
        if self.config is None:
            raise RuntimeError("No configuration loaded. Call load_config() first.")

        return OmegaConf.select(self.config, key, default=default)


def load_config(config_name: str = "config",
                overrides: Optional[List[str]] = None,
                config_dir: Optional[Union[str, Path]] = None,
                validate: bool = True) -> DictConfig:
    """Load a configuration and make it the active one."""
    return ConfigManager(config_dir).load_config(config_name, overrides, validate)


def get_config() -> Optional[DictConfig]:
    """Get the active configuration, or None if nothing is loaded."""
    return _active_config


def reset_config() -> None:
    """Forget the active configuration."""
    global _active_config
    _active_config = None


def get_parameter(key: str, default: Any = None) -> Any:
    """Look up a dotted key in the active configuration.

    Returns default when the key is missing or no configuration is loaded.
    """
    if _active_config is None:
        return default
    return OmegaConf.select(_active_config, key, default=default)


def configured_costs() -> Optional[Dict[str, Any]]:
    """Terrain entry costs from the active configuration.

    Returns:
        Mapping such as {'open': 1, 'difficult': 3}, or None when no costs
        are configured. Terrains left out keep their built-in cost.
    """
    costs = get_parameter('maze.costs')
    if costs is None:
        return None
    return OmegaConf.to_container(costs)


def configured_max_nodes_expanded() -> Optional[int]:
    """Per-phase expansion limit from the active configuration (None for no limit)."""
    value = get_parameter('search.pathfinder.max_nodes_expanded')
    return None if value is None else int(value)
