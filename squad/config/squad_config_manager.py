"""
Configuration manager for SQUAD interpolation.
Handles loading and validation of interpolation options from YAML.
"""

import yaml
import logging
from dataclasses import fields, replace
from pathlib import Path
from typing import Any, Dict, Union

# Project Imports
from .squad_config_schemas import SquadConfig
from ..utils.quaternion_utils import UNIT_NORM_POLICIES

logger = logging.getLogger(__name__)

OUTPUT_FORMATS = ('tuple', 'array', 'quaternion')


class SquadConfigManager:
    """
    Configuration manager for SQUAD interpolation options.
    Handles configuration loading and path resolution.
    """

    def __init__(self, project_root: Path = None):
        """Initialize the configuration manager."""
        if project_root is None:
            self.project_root = Path(__file__).parent.parent.parent
        else:
            self.project_root = Path(project_root)

        self.config_dir = self.project_root / "config"

    def load_config(self, config_path: Union[str, Path]) -> SquadConfig:
        """
        Load SQUAD configuration from YAML file.

        The file may hold the options at top level or under a 'squad' key.
        Missing options keep their defaults.

        Args:
            config_path: Path to configuration YAML file

        Returns:
            SquadConfig: Loaded configuration
        """
        config_path = Path(config_path)

        # Resolve relative paths
        if not config_path.is_absolute():
            config_path = self.config_dir / config_path

        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        logger.info(f"Loading SQUAD config from: {config_path}")

        with open(config_path, 'r') as f:
            data = yaml.safe_load(f) or {}

        if not isinstance(data, dict):
            raise ValueError(f"Configuration file must contain a mapping: {config_path}")

        if 'squad' in data:
            data = data['squad'] or {}

        config = self.config_from_dict(data)
        logger.info(f"Loaded SQUAD config: {config}")
        return config

    def config_from_dict(self, data: Dict[str, Any]) -> SquadConfig:
        """
        Build a validated SquadConfig from a plain dictionary.

        Args:
            data: Option names mapped to values

        Returns:
            SquadConfig: Validated configuration
        """
        known = {f.name for f in fields(SquadConfig)}
        unknown = set(data) - known
        if unknown:
            raise ValueError(f"Unknown SQUAD config options: {sorted(unknown)}")

        return self.validate(SquadConfig(**data))

    @staticmethod
    def validate(config: SquadConfig) -> SquadConfig:
        """
        Check every option and return a copy with the tolerance as a float.

        The given config is left unchanged. Raises ValueError if any option
        holds an unsupported value.
        """
        if config.unit_norm_policy not in UNIT_NORM_POLICIES:
            raise ValueError(
                f"unit_norm_policy must be one of {UNIT_NORM_POLICIES}, got '{config.unit_norm_policy}'"
            )
        if config.output_format not in OUTPUT_FORMATS:
            raise ValueError(
                f"output_format must be one of {OUTPUT_FORMATS}, got '{config.output_format}'"
            )
        try:
            tolerance = float(config.unit_norm_tolerance)
        except (TypeError, ValueError) as e:
            raise ValueError(f"unit_norm_tolerance must be a number: {e}") from e
        if not tolerance >= 0.0:
            raise ValueError(f"unit_norm_tolerance must be non-negative, got {tolerance}")
        return replace(config, unit_norm_tolerance=tolerance)
