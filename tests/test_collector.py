"""
Unit tests for build environment collection.

Subprocess and platform lookups are mocked so the tests do not
depend on the machine running them.
"""

import re
import subprocess
from unittest.mock import Mock, patch

import pytest

from buildstamp.utils.collector import (
    collect_build_info, get_build_host, get_build_user, get_git_info,
    normalize_build_type, build_timestamp
)


@pytest.fixture
def git_repo(tmp_path):
    """Directory that looks like a git checkout."""
    (tmp_path / ".git").mkdir()
    return tmp_path


class TestBuildType:
    """Test build type normalization."""

    def test_uppercased(self):
        assert normalize_build_type("Release") == "RELEASE"
        assert normalize_build_type(" relwithdebinfo ") == "RELWITHDEBINFO"

    def test_missing(self):
        assert normalize_build_type(None) == "UNKNOWN"
        assert normalize_build_type("") == "UNKNOWN"


class TestBuildUser:
    """Test build user detection."""

    def test_unix_user(self, monkeypatch):
        monkeypatch.setenv("USER", "alice")
        monkeypatch.setenv("USERNAME", "ALICE-WIN")
        assert get_build_user() == "alice"

    def test_windows_user(self, monkeypatch):
        monkeypatch.delenv("USER", raising=False)
        monkeypatch.setenv("USERNAME", "bob")
        assert get_build_user() == "bob"

    def test_no_user(self, monkeypatch):
        monkeypatch.delenv("USER", raising=False)
        monkeypatch.delenv("USERNAME", raising=False)
        assert get_build_user() == "unknown"


class TestBuildHost:
    """Test build host description."""

    @patch('platform.release', return_value="6.8.0-40-generic")
    @patch('platform.system', return_value="Linux")
    def test_system_and_release(self, mock_system, mock_release):
        assert get_build_host() == "Linux-6.8.0-40-generic"

    @patch('platform.release', return_value="")
    @patch('platform.system', return_value="")
    def test_unknown(self, mock_system, mock_release):
        assert get_build_host() == "unknown"


class TestTimestamp:
    """Test build timestamp formatting."""

    def test_format(self):
        """Test date, time and timezone name."""
        assert re.match(r"^\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2} \S+", build_timestamp())


class TestGitInfo:
    """Test git probing."""

    def test_not_a_repository(self, tmp_path):
        """Test directories without .git fall back."""
        assert get_git_info(tmp_path) == ("unknown", "no-git")

    @patch('subprocess.run')
    def test_success(self, mock_run, git_repo):
        """Test hash and describe output are stripped."""
        mock_run.side_effect = [
            Mock(returncode=0, stdout="abc1234\n", stderr=""),
            Mock(returncode=0, stdout="v1.2.0-3-gabc1234-dirty\n", stderr=""),
        ]

        assert get_git_info(git_repo) == ("abc1234", "v1.2.0-3-gabc1234-dirty")

        commands = [call.args[0] for call in mock_run.call_args_list]
        assert commands[0] == ["git", "rev-parse", "--short", "HEAD"]
        assert commands[1] == ["git", "describe", "--tags", "--always", "--dirty"]

    @patch('subprocess.run', side_effect=FileNotFoundError("git"))
    def test_git_missing(self, mock_run, git_repo):
        """Test a missing git executable falls back."""
        assert get_git_info(git_repo) == ("unknown", "no-git")

    @patch('subprocess.run', side_effect=subprocess.TimeoutExpired("git", 10))
    def test_git_timeout(self, mock_run, git_repo):
        """Test a hung git falls back."""
        assert get_git_info(git_repo) == ("unknown", "no-git")

    @patch('subprocess.run')
    def test_git_error(self, mock_run, git_repo):
        """Test a failing git command falls back."""
        mock_run.return_value = Mock(returncode=128, stdout="", stderr="fatal: not a git repository")

        assert get_git_info(git_repo) == ("unknown", "no-git")


class TestCollectBuildInfo:
    """Test full collection."""

    @patch('platform.python_version', return_value="3.12.1")
    @patch('platform.python_implementation', return_value="CPython")
    @patch('platform.machine', return_value="x86_64")
    @patch('platform.system', return_value="Linux")
    def test_collect(self, mock_system, mock_machine, mock_impl, mock_version,
                     tmp_path, monkeypatch):
        """Test collected fields in a directory without git."""
        monkeypatch.setenv("USER", "ci")

        info = collect_build_info(build_type="Release", version="1.4.0", source_dir=tmp_path)

        assert info.version == "1.4.0"
        assert info.build_type == "RELEASE"
        assert info.build_user == "ci"
        assert info.target_system == "Linux"
        assert info.target_architecture == "x86_64"
        assert info.host_system == "Linux"
        assert info.compiler_id == "CPython"
        assert info.compiler_version == "3.12.1"
        assert info.git_describe == "no-git"
        assert info.git_commit_hash == "unknown"

    def test_collect_defaults(self, tmp_path):
        """Test collection without a build type or version."""
        info = collect_build_info(source_dir=tmp_path)

        assert info.build_type == "UNKNOWN"
        assert info.version is None
        assert info.build_timestamp
