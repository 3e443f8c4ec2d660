"""
Configuration module for SQUAD interpolation.
"""

from .squad_config_schemas import SquadConfig
from .squad_config_manager import SquadConfigManager, OUTPUT_FORMATS

__all__ = [
    'SquadConfig',
    'SquadConfigManager',
    'OUTPUT_FORMATS',
]
