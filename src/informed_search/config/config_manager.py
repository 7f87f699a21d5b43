"""Loading the search configuration with Hydra.

The configuration is composed from ``conf/config.yaml`` with
``initialize_config_dir`` + ``compose``, validated, and remembered as the
active configuration so that ``get_config``/``get_parameter`` can reach it
without passing it around.
"""

import logging
from typing import Any, Dict, List, Optional, Union
from pathlib import Path
from omegaconf import DictConfig, OmegaConf, open_dict
from hydra import compose, initialize_config_dir
from hydra.core.global_hydra import GlobalHydra

from .validators import validate_config

logger = logging.getLogger(__name__)

# <project root>/conf, next to src/
DEFAULT_CONFIG_DIR = Path(__file__).resolve().parents[3] / "conf"

_active_config: Optional[DictConfig] = None


class ConfigManager:
    """Composes, validates and edits one search configuration."""

    def __init__(self, config_dir: Optional[Union[str, Path]] = None):
        self.config_dir = Path(config_dir or DEFAULT_CONFIG_DIR).resolve()
        self.config: Optional[DictConfig] = None

        if not self.config_dir.is_dir():
            raise FileNotFoundError(f"Configuration directory not found: {self.config_dir}")

        logger.debug(f"Using configuration directory {self.config_dir}")

    def load_config(self,
                    config_name: str = "config",
                    overrides: Optional[List[str]] = None,
                    validate: bool = True) -> DictConfig:
        """Compose ``config_name`` with Hydra and make it the active configuration.

        Args:
            config_name: Config file name without the ``.yaml`` suffix
            overrides: Hydra ``key=value`` overrides, e.g. ``search.algorithm=rbfs``
            validate: Run ``validate_config`` on the composed result

        Raises:
            ConfigValidationError: If validation is on and a setting is invalid
        """
        global _active_config

        # Hydra refuses to initialize twice in one process.
        GlobalHydra.instance().clear()

        with initialize_config_dir(config_dir=str(self.config_dir), version_base=None):
            cfg = compose(config_name=config_name, overrides=overrides or [])

        if validate:
            validate_config(cfg)

        self.config = cfg
        _active_config = cfg

        logger.info(f"Loaded configuration '{config_name}' from {self.config_dir}"
                    + (f" with overrides {overrides}" if overrides else ""))
        return cfg

    def get_config(self) -> Optional[DictConfig]:
        return self.config

    def get_parameter(self, key: str, default: Any = None) -> Any:
        """Look up a dotted key such as ``search.weight``."""
        return OmegaConf.select(self._require_config(), key, default=default)

    def set_parameter(self, key: str, value: Any) -> None:
        """Set a dotted key, creating it when the configuration lacks it.

        Composed configurations are in struct mode, so new keys are only
        accepted inside ``open_dict``.
        """
        config = self._require_config()
        with open_dict(config):
            OmegaConf.update(config, key, value)

        logger.debug(f"Set {key} = {value!r}")

    def _require_config(self) -> DictConfig:
        if self.config is None:
            raise RuntimeError("No configuration loaded. Call load_config() first.")
        return self.config


def load_config(config_name: str = "config",
                overrides: Optional[List[str]] = None,
                config_dir: Optional[Union[str, Path]] = None,
                validate: bool = True) -> DictConfig:
    """Compose a configuration and make it the active one.

    Raises:
        FileNotFoundError: If the configuration directory does not exist
    """
    return ConfigManager(config_dir).load_config(config_name, overrides, validate)


def get_config() -> Optional[DictConfig]:
    """The configuration loaded last, or None."""
    return _active_config


def get_parameter(key: str, default: Any = None) -> Any:
    """Look up a dotted key in the active configuration."""
    if _active_config is None:
        logger.warning(f"No configuration loaded; '{key}' falls back to {default!r}")
        return default

    return OmegaConf.select(_active_config, key, default=default)


class ConfigContext:
    """Temporarily override dotted keys of a configuration.

    Keys that did not exist before entering are removed again on exit::

        with ConfigContext(**{"search.algorithm": "rbfs"}) as cfg:
            Searcher(SearchConfig.from_config(cfg)).search(problem)
    """

    _ABSENT = object()

    def __init__(self, config: Optional[DictConfig] = None, **changes):
        self.config = config if config is not None else get_config()
        self.changes = changes
        self._saved: Dict[str, Any] = {}

    def __enter__(self) -> DictConfig:
        if self.config is None:
            raise RuntimeError("No configuration loaded. Call load_config() first.")

        with open_dict(self.config):
            for key, value in self.changes.items():
                self._saved[key] = OmegaConf.select(self.config, key, default=self._ABSENT)
                OmegaConf.update(self.config, key, value)

        return self.config

    def __exit__(self, exc_type, exc_val, exc_tb):
        with open_dict(self.config):
            for key, value in self._saved.items():
                if value is not self._ABSENT:
                    OmegaConf.update(self.config, key, value)
                    continue
                parent_key, _, leaf = key.rpartition('.')
                parent = OmegaConf.select(self.config, parent_key) if parent_key else self.config
                if isinstance(parent, DictConfig) and leaf in parent:
                    del parent[leaf]
        self._saved.clear()
