"""
Data models for build provenance using Pydantic for validation.
"""

import re
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


PROJECT_NAME_RE = re.compile(r"[A-Za-z0-9][A-Za-z0-9 ._-]*")


class BuildInfo(BaseModel):
    """Build provenance baked into the package at build time."""

    model_config = ConfigDict(frozen=True)

    version: Optional[str] = Field(None, description="Project version, omitted from some reports")
    build_type: str = Field(..., description="Build configuration (e.g., Debug, Release)")
    build_timestamp: str = Field(..., description="When the build was configured")
    build_user: str = Field(..., description="Account that ran the build")
    build_host: str = Field(..., description="System description of the build machine")

    # Platform
    target_system: str = Field(..., description="OS the build targets")
    target_architecture: str = Field(..., description="CPU architecture the build targets")
    host_system: str = Field(..., description="OS the build ran on")

    # Toolchain
    compiler_id: str = Field(..., description="Toolchain vendor (e.g., CPython, GNU)")
    compiler_version: str = Field(..., description="Toolchain version string")

    # Source control
    git_describe: str = Field(..., description="Human-readable git description")
    git_commit_hash: str = Field(..., description="Abbreviated commit hash")

    def without_version(self) -> "BuildInfo":
        """Return a copy that reports no version."""
        return self.model_copy(update={"version": None})

    def to_dict(self) -> Dict[str, Optional[str]]:
        """Plain dict in the shape of the generated BUILD_INFO."""
        return self.model_dump()


class BuildConfig(BaseModel):
    """Build-time settings for generating the baked build record."""

    # YAML reads `version: 1.0` as a float
    model_config = ConfigDict(coerce_numbers_to_str=True)

    project: str = "buildstamp"
    version: Optional[str] = None
    build_type: Optional[str] = None
    output: str = Field("buildstamp/version_info.py", description="Generated module path")
    sources: List[str] = Field(default_factory=list, description="Paths whose changes trigger regeneration")

    @field_validator('project')
    @classmethod
    def validate_project(cls, v):
        """Project name is written into the generated module's docstring."""
        if not PROJECT_NAME_RE.fullmatch(v):
            raise ValueError(
                "project may only contain letters, digits, spaces, '.', '_' and '-'"
            )
        return v

    @field_validator('output')
    @classmethod
    def validate_output(cls, v):
        """Generated file must be a Python module."""
        if not v.endswith(".py"):
            raise ValueError("output must be a .py file")
        return v
