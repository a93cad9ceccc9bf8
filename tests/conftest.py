"""
Test fixtures and utilities for the buildstamp test suite.

Provides common build records, configurations and helpers
used across multiple test modules.
"""

import pytest

from buildstamp.core.loader import get_build_info
from buildstamp.core.models import BuildConfig, BuildInfo


SCENARIO_FIELDS = dict(
    build_type="Release",
    build_timestamp="2024-01-01T00:00:00Z",
    build_user="ci",
    build_host="runner-1",
    target_system="Linux",
    target_architecture="x86_64",
    host_system="Linux",
    compiler_id="GNU",
    compiler_version="13.2",
    git_describe="v1.0.0",
    git_commit_hash="abc123",
)

SCENARIO_REPORT = (
    "Build Information\n"
    "-----------------\n"
    "Build    : Release (2024-01-01T00:00:00Z)\n"
    "User     : ci @ runner-1\n"
    "\n"
    "Platform : Linux x86_64\n"
    "Host     : Linux\n"
    "\n"
    "Compiler : GNU 13.2\n"
    "\n"
    "Source   : v1.0.0\n"
    "Commit   : abc123\n"
)


@pytest.fixture
def scenario_build_info():
    """Build record without a version."""
    return BuildInfo(**SCENARIO_FIELDS)


@pytest.fixture
def versioned_build_info():
    """Build record that tracks a version."""
    return BuildInfo(version="2.3.4", **SCENARIO_FIELDS)


@pytest.fixture
def build_config():
    """Configuration writing into a package subdirectory."""
    return BuildConfig(
        project="sample",
        version="0.9.0",
        build_type="Debug",
        output="sample/version_info.py",
        sources=["sample"]
    )


@pytest.fixture
def fresh_build_info():
    """Clear the cached process-wide record before and after a test."""
    get_build_info.cache_clear()
    yield
    get_build_info.cache_clear()
