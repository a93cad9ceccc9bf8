"""
Loader for the build record baked into the package.

The generated ``version_info`` module carries a ``BUILD_INFO`` dict
written at build time. It is validated once, on first access, and the
same immutable BuildInfo is returned for the rest of the process.
"""

import logging
from functools import lru_cache
from types import ModuleType
from typing import Any, Mapping

from .models import BuildInfo


logger = logging.getLogger(__name__)


def load_build_info(source: Mapping[str, Any]) -> BuildInfo:
    """
    Build a BuildInfo record from a BUILD_INFO mapping.

    Args:
        source: Field name -> value mapping

    Returns:
        BuildInfo: Validated, immutable record

    Raises:
        pydantic.ValidationError: If required fields are missing.
    """
    return BuildInfo(**{k: v for k, v in source.items() if k in BuildInfo.model_fields})


def load_from_module(module: ModuleType) -> BuildInfo:
    """Build a BuildInfo record from a generated version_info module."""
    build_info = getattr(module, "BUILD_INFO", None)
    if not isinstance(build_info, dict):
        raise RuntimeError(f"{module.__name__} does not define a BUILD_INFO dict")

    return load_build_info(build_info)


@lru_cache(maxsize=None)
def get_build_info() -> BuildInfo:
    """
    Get the process-wide build record.

    Returns:
        BuildInfo: Record baked into this package at build time
    """
    from .. import version_info

    info = load_from_module(version_info)
    logger.debug(f"Loaded build info for {info.git_describe} ({info.git_commit_hash})")
    return info
