"""
buildstamp

A minimal library that bakes build provenance (toolchain, platform,
user, git state) into the package at build time and reports it at
runtime.
"""

__version__ = "1.0.0"

from .core.arithmetic import add
from .core.loader import get_build_info
from .core.models import BuildInfo
from .core.reporter import BuildInfoReporter, dump_build_info

__all__ = ["add", "BuildInfo", "BuildInfoReporter", "dump_build_info", "get_build_info"]
