"""Configuration management for the search engine.

Hydra composes ``conf/config.yaml`` with command-line overrides; OmegaConf
holds the result and the validators check the ``search`` and ``logging``
sections.
"""

from .config_manager import ConfigManager, ConfigContext, load_config, get_config, get_parameter
from .validators import validate_config, ConfigValidationError

__all__ = [
    'ConfigManager',
    'ConfigContext',
    'load_config',
    'get_config',
    'get_parameter',
    'validate_config',
    'ConfigValidationError'
]
