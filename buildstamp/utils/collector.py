"""
Build environment collection.

Inspects the machine running the build for the provenance recorded in
the generated version_info module: timestamp, build type, toolchain,
platform, user and git state. Every lookup has a fallback value, so
collection never fails.
"""

import logging
import os
import platform
import subprocess
from datetime import datetime
from pathlib import Path
from typing import Optional, Tuple

from ..core.models import BuildInfo


logger = logging.getLogger(__name__)

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S %Z"
UNKNOWN = "unknown"
NO_GIT = "no-git"


def collect_build_info(build_type: Optional[str] = None,
                       version: Optional[str] = None,
                       source_dir: Optional[Path] = None) -> BuildInfo:
    """
    Collect build provenance for the current environment.

    Args:
        build_type: Build configuration name (stored uppercased)
        version: Project version to record (optional)
        source_dir: Repository root used for git commands (defaults to cwd)

    Returns:
        BuildInfo: Record describing this build
    """
    source_dir = Path(source_dir) if source_dir else Path.cwd()
    git_hash, git_describe = get_git_info(source_dir)

    info = BuildInfo(
        version=version,
        build_type=normalize_build_type(build_type),
        build_timestamp=build_timestamp(),
        build_user=get_build_user(),
        build_host=get_build_host(),
        target_system=platform.system() or UNKNOWN,
        target_architecture=platform.machine() or UNKNOWN,
        host_system=platform.system() or UNKNOWN,
        compiler_id=platform.python_implementation(),
        compiler_version=platform.python_version(),
        git_describe=git_describe,
        git_commit_hash=git_hash,
    )

    logger.info(f"Collected build info: {info.build_type} {info.git_describe} on {info.build_host}")
    return info


def build_timestamp(now: Optional[datetime] = None) -> str:
    """Local time of the build with its timezone name."""
    now = now or datetime.now()
    return now.astimezone().strftime(TIMESTAMP_FORMAT)


def normalize_build_type(build_type: Optional[str]) -> str:
    """Uppercase the build type, UNKNOWN when not given."""
    value = (build_type or "").strip().upper()
    return value or "UNKNOWN"


def get_build_user() -> str:
    """User account running the build (USER, then USERNAME)."""
    for var in ("USER", "USERNAME"):
        value = os.environ.get(var)
        if value:
            return value
    return UNKNOWN


def get_build_host() -> str:
    """System description of the build machine, e.g. Linux-6.8.0-40-generic."""
    system = platform.system()
    release = platform.release()
    if not system:
        return UNKNOWN
    return f"{system}-{release}" if release else system


def get_git_info(repo_dir: Path) -> Tuple[str, str]:
    """
    Get the abbreviated commit hash and describe string of a repository.

    Args:
        repo_dir: Directory to run git in

    Returns:
        tuple: (commit_hash, describe), or ("unknown", "no-git") when
        git is unavailable or repo_dir is not a repository
    """
    if not (Path(repo_dir) / ".git").exists():
        return UNKNOWN, NO_GIT

    commit_hash = _run_git(["rev-parse", "--short", "HEAD"], repo_dir)
    describe = _run_git(["describe", "--tags", "--always", "--dirty"], repo_dir)

    if commit_hash is None or describe is None:
        return UNKNOWN, NO_GIT

    return commit_hash, describe


def _run_git(args, cwd: Path) -> Optional[str]:
    """Run a git command and return its stripped stdout, None on failure."""
    try:
        result = subprocess.run(
            ["git", *args],
            cwd=str(cwd),
            capture_output=True,
            text=True,
            timeout=10
        )
    except (FileNotFoundError, subprocess.SubprocessError, OSError) as e:
        logger.debug(f"git {' '.join(args)} failed: {e}")
        return None

    if result.returncode != 0:
        logger.debug(f"git {' '.join(args)} exited {result.returncode}: {result.stderr.strip()}")
        return None

    return result.stdout.strip()
