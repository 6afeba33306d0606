"""
Configuration Management

Loads toolkit configuration from a YAML file and environment variables.
Policy constants of the core (numeric type threshold, chart point limit)
are fixed in code and deliberately not configurable here.
"""

import copy
import os
from pathlib import Path
from typing import Any, Dict, Optional, Union

from dotenv import load_dotenv

from .utils.file_utils import load_config as load_yaml_config
from .utils.logging_utils import get_logger
from .utils.stats_utils import to_number

logger = get_logger(__name__)

PROJECT_ROOT = Path(__file__).parent.parent

DEFAULT_CONFIG: Dict[str, Any] = {
    'logging': {
        'level': 'INFO',
        'colorize': True,
        'file': {
            'enabled': False,
            'path': 'logs/linebalance.log',
        },
    },
    'solver': {
        'cycle_time': None,
    },
    'summarizer': {
        'patterns': ['*.csv', '*.txt'],
        'show_progress': True,
    },
    'output': {
        'dir': 'outputs',
        'json_indent': 2,
    },
}


def _deep_update(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    for key, value in overrides.items():
        if isinstance(value, dict) and isinstance(base.get(key), dict):
            _deep_update(base[key], value)
        else:
            base[key] = value
    return base


class Config:
    """
    Toolkit configuration manager.

    Loads configuration from:
    1. Built-in defaults (``DEFAULT_CONFIG``)
    2. YAML file (config/linebalance_config.yaml)
    3. Environment variables (.env)

    Example:
        >>> config = Config()
        >>> print(config.get('output.dir'))
        outputs
    """

    def __init__(self, config_file: Optional[Union[str, Path]] = None):
        """
        Initialize configuration.

        Args:
            config_file: Path to YAML config file (optional)

        Raises:
            ValueError: If LINEBALANCE_CYCLE_TIME is set but not numeric
        """
        env_path = PROJECT_ROOT / '.env'
        if env_path.exists():
            load_dotenv(env_path)
            logger.info(f"Loaded environment variables from: {env_path}")

        if config_file is None:
            config_file = PROJECT_ROOT / 'config' / 'linebalance_config.yaml'

        self.config = copy.deepcopy(DEFAULT_CONFIG)
        if Path(config_file).exists():
            _deep_update(self.config, load_yaml_config(config_file))
        else:
            logger.debug(f"Config file not found, using defaults: {config_file}")

        self._apply_env_overrides()

    def _apply_env_overrides(self):
        """Apply environment variable overrides to config."""
        if os.getenv('LOG_LEVEL'):
            self.set('logging.level', os.getenv('LOG_LEVEL'))

        cycle_time = os.getenv('LINEBALANCE_CYCLE_TIME')
        if cycle_time:
            value = to_number(cycle_time)
            if value is None:
                raise ValueError(f"LINEBALANCE_CYCLE_TIME must be a number, got {cycle_time!r}")
            self.set('solver.cycle_time', value)

        if os.getenv('LINEBALANCE_OUTPUT_DIR'):
            self.set('output.dir', os.getenv('LINEBALANCE_OUTPUT_DIR'))

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get a configuration value using dot notation.

        Args:
            key: Config key (e.g., 'logging.level')
            default: Default value if key not found

        Returns:
            Configuration value

        Example:
            >>> config.get('logging.level')
            'INFO'
            >>> config.get('nonexistent.key', 'default')
            'default'
        """
        value = self.config

        for k in key.split('.'):
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default

        return value

    def set(self, key: str, value: Any):
        """
        Set a configuration value using dot notation.

        Args:
            key: Config key (e.g., 'output.dir')
            value: Value to set
        """
        keys = key.split('.')
        config = self.config

        for k in keys[:-1]:
            if not isinstance(config.get(k), dict):
                config[k] = {}
            config = config[k]

        config[keys[-1]] = value

    def get_stage_config(self, stage: str) -> Dict[str, Any]:
        """
        Get configuration for one section.

        Args:
            stage: Section name ('logging', 'solver', 'summarizer', 'output')

        Returns:
            Section configuration dictionary
        """
        return self.config.get(stage, {})

    def to_dict(self) -> Dict[str, Any]:
        """Get the full configuration as a dictionary."""
        return copy.deepcopy(self.config)


# Global config instance
_global_config = None


def get_config(config_file: Optional[Union[str, Path]] = None) -> Config:
    """
    Get or create the global configuration instance.

    Args:
        config_file: Path to config file. An explicit path always reloads
            the global instance from that file.

    Returns:
        Config instance

    Raises:
        ValueError: If an environment override is not a valid value
    """
    global _global_config

    if _global_config is None or config_file is not None:
        _global_config = Config(config_file)

    return _global_config
