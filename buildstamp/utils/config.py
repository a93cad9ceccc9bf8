"""
Build configuration loading.

Reads the optional YAML file that drives build-info generation and
merges command-line overrides on top of it.
"""

import logging
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from pydantic import ValidationError

from ..core.models import BuildConfig


logger = logging.getLogger(__name__)

DEFAULT_CONFIG_NAME = "buildstamp.yaml"


def load_config(config_path: Optional[str] = None,
                overrides: Optional[Dict[str, Any]] = None) -> BuildConfig:
    """
    Load build configuration from file or use defaults.

    Args:
        config_path: Path to YAML configuration file (buildstamp.yaml in
            the current directory is used if present and no path is given)
        overrides: Values that take precedence over the file; None values
            are ignored

    Returns:
        BuildConfig: Validated configuration

    Raises:
        RuntimeError: If the file cannot be read or is invalid.
    """
    data: Dict[str, Any] = {}

    if config_path:
        path = Path(config_path)
        if not path.exists():
            raise RuntimeError(f"Configuration file not found: {path}")
    else:
        path = Path.cwd() / DEFAULT_CONFIG_NAME

    if path.exists():
        try:
            with open(path, 'r') as f:
                loaded = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            raise RuntimeError(f"Cannot read {path}: {e}") from e

        if loaded is None:
            loaded = {}
        if not isinstance(loaded, dict):
            raise RuntimeError(f"{path} must contain a mapping, got {type(loaded).__name__}")

        logger.debug(f"Loaded build configuration from {path}")
        data.update(loaded)

    if overrides:
        data.update({k: v for k, v in overrides.items() if v is not None})

    try:
        return BuildConfig(**data)
    except ValidationError as e:
        raise RuntimeError(f"Invalid build configuration: {e}") from e
