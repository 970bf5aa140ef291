import copy
import logging
import os
from pathlib import Path
from typing import Any

import yaml
from omegaconf import OmegaConf
from omegaconf.errors import InterpolationResolutionError

from clausecheck.constants import (
    CONFIG_ENV_VAR,
    DEFAULT_CONFIG_FILE,
    DEFAULT_CURRENT_TIME,
    USERDATA_KEYS,
)
from clausecheck.errors import ConfigError

logger = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ConfigLoader:
    """Load and merge YAML configuration with defaults."""

    def __init__(self) -> None:
        """Initialize ConfigLoader with built-in defaults."""
        self.BUILT_IN_DEFAULTS = {
            "root_dir": ".",
            "current_time": DEFAULT_CURRENT_TIME,
            "engine": None,
            "loader": None,
            "log_level": "INFO",
        }

    def load_config(self, config_path: str | None = None) -> dict[str, Any]:
        """Load configuration from YAML file.

        Parameters
        ----------
        config_path : str | None
            Path to YAML config file. If None, checks CLAUSECHECK_CONFIG env
            var, then falls back to clausecheck.yaml

        Returns
        -------
        dict[str, Any]
            Parsed configuration with defaults and suites sections,
            with all variable interpolations resolved

        Raises
        ------
        ConfigError
            If the file is not valid YAML or variables cannot be resolved
        """
        if config_path is None:
            config_path = os.environ.get(CONFIG_ENV_VAR, DEFAULT_CONFIG_FILE)

        config_file = Path(config_path)

        if not config_file.exists():
            logger.debug("No config file at %s, using built-in defaults", config_file)
            return {"defaults": {}}

        try:
            cfg = OmegaConf.load(config_file)
        except yaml.YAMLError as e:
            logger.error("Failed to parse YAML config file %s: %s", config_file, e)
            raise ConfigError(f"Invalid YAML in {config_file}: {e}") from e
        except OSError as e:
            logger.error("Failed to read config file %s: %s", config_file, e)
            raise ConfigError(f"Failed to read config file {config_file}: {e}") from e

        if cfg is None:
            return {"defaults": {}}

        if not OmegaConf.is_dict(cfg):
            raise ConfigError(f"Config file {config_file} must contain a mapping")

        try:
            config = OmegaConf.to_container(cfg, resolve=True, throw_on_missing=True)
        except (InterpolationResolutionError, ValueError, KeyError) as e:
            logger.error("Failed to resolve interpolations in %s: %s", config_file, e)
            raise ConfigError(f"Unresolved interpolation in {config_file}: {e}") from e

        config.setdefault("defaults", {})
        return config

    def get_suite_config(
        self,
        config: dict[str, Any],
        suite_name: str | None = None,
        overrides: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        """Get merged configuration for a specific suite or defaults.

        Parameters
        ----------
        config : dict[str, Any]
            Full configuration from YAML
        suite_name : str | None
            Name of suite configuration to use, or None for defaults only
        overrides : dict[str, Any] | None
            Values taking precedence over the file; None values are ignored

        Returns
        -------
        dict[str, Any]
            Merged configuration (built-in defaults + YAML defaults + suite
            settings + overrides)

        Raises
        ------
        ConfigError
            If the suite is not defined
        """
        merged = copy.deepcopy(self.BUILT_IN_DEFAULTS)

        for key, value in (config.get("defaults") or {}).items():
            merged[key] = value

        if suite_name is not None:
            suites = config.get("suites") or {}

            if suite_name not in suites:
                available = list(suites.keys())

                if not available:
                    raise ConfigError(
                        f"Suite '{suite_name}' not found in configuration. "
                        f"No suites are defined in the config file."
                    )

                raise ConfigError(
                    f"Suite '{suite_name}' not found in configuration. Available suites: {available}"
                )

            for key, value in (suites[suite_name] or {}).items():
                merged[key] = value

        for key, value in (overrides or {}).items():
            if value is not None:
                merged[key] = value

        return merged

    def validate_config(self, config: dict[str, Any]) -> None:
        """Validate configuration has required fields and correct types.

        Parameters
        ----------
        config : dict[str, Any]
            Merged configuration to validate

        Raises
        ------
        ConfigError
            If configuration is invalid
        """
        for field in ("root_dir", "current_time", "log_level"):
            if not isinstance(config.get(field), str) or config[field] == "":
                raise ConfigError(f"{field} must be a non-empty string")

        if config["log_level"].upper() not in LOG_LEVELS:
            raise ConfigError(
                f"log_level must be one of {list(LOG_LEVELS)}, got {config['log_level']!r}"
            )

        for field in ("engine", "loader"):
            value = config.get(field)

            if value is None or value == "":
                raise ConfigError(f"{field} is required")

            if not isinstance(value, str) or ":" not in value:
                raise ConfigError(f"{field} must be an import string 'module:attribute'")

    def to_userdata(self, config: dict[str, Any]) -> dict[str, str]:
        """Select the settings forwarded to behave as userdata.

        Parameters
        ----------
        config : dict[str, Any]
            Merged configuration

        Returns
        -------
        dict[str, str]
            Userdata entries with string values, None values omitted
        """
        return {
            key: str(config[key]) for key in USERDATA_KEYS if config.get(key) is not None
        }
