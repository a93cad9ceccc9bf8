"""
Generator for the version_info module.

Writes collected build provenance into a Python module that the package
imports at runtime, so the record is baked in rather than looked up when
the program runs.
"""

import logging
import os
import stat
import tempfile
from pathlib import Path
from typing import Iterable, List, Optional

from jinja2 import Template

from ..core.models import BuildConfig, BuildInfo
from .collector import collect_build_info


logger = logging.getLogger(__name__)


VERSION_INFO_TEMPLATE = '''"""
Version information for {{ project }}
Generated during build process by buildstamp.utils.generator
DO NOT EDIT IT DIRECTLY!
"""

__version__ = {{ q.version }}
__build_type__ = {{ q.build_type }}
__build_timestamp__ = {{ q.build_timestamp }}
__build_user__ = {{ q.build_user }}
__build_host__ = {{ q.build_host }}
__target_system__ = {{ q.target_system }}
__target_architecture__ = {{ q.target_architecture }}
__host_system__ = {{ q.host_system }}
__compiler_id__ = {{ q.compiler_id }}
__compiler_version__ = {{ q.compiler_version }}
__git_describe__ = {{ q.git_describe }}
__commit_hash__ = {{ q.git_commit_hash }}

BUILD_INFO = {
    'version': __version__,
    'build_type': __build_type__,
    'build_timestamp': __build_timestamp__,
    'build_user': __build_user__,
    'build_host': __build_host__,
    'target_system': __target_system__,
    'target_architecture': __target_architecture__,
    'host_system': __host_system__,
    'compiler_id': __compiler_id__,
    'compiler_version': __compiler_version__,
    'git_describe': __git_describe__,
    'git_commit_hash': __commit_hash__,
}
'''


def _file_mode(output: Path) -> int:
    """Mode of the file being replaced, or 0666 masked by the umask."""
    if output.exists():
        return stat.S_IMODE(output.stat().st_mode)

    umask = os.umask(0)
    os.umask(umask)
    return 0o666 & ~umask


class VersionInfoGenerator:
    """
    Generates and refreshes the version_info module.

    Initial generation happens only when the module is missing; after
    that it is regenerated when any watched source is newer than it.
    """

    def __init__(self, config: BuildConfig, source_dir: Optional[Path] = None):
        """
        Initialize generator.

        Args:
            config: Build configuration
            source_dir: Repository root; relative paths in config resolve
                against it (defaults to cwd)
        """
        self.config = config
        self.source_dir = Path(source_dir) if source_dir else Path.cwd()
        self.template = Template(VERSION_INFO_TEMPLATE, keep_trailing_newline=True)

    @property
    def output_path(self) -> Path:
        return self._resolve(self.config.output)

    def render(self, info: BuildInfo) -> str:
        """Render module source for a build record."""
        quoted = {name: repr(value) for name, value in info.to_dict().items()}
        return self.template.render(project=self.config.project, q=quoted)

    def generate(self, force: bool = False) -> Optional[Path]:
        """
        Generate the module if missing or out of date.

        Args:
            force: Regenerate even if the module is up to date

        Returns:
            Optional[Path]: Path written, or None if nothing was done

        Raises:
            RuntimeError: If the module cannot be written.
        """
        output = self.output_path

        if output.exists() and not force and not self.is_stale():
            logger.info(f"Build information is up to date: {output}")
            return None

        if output.exists():
            logger.info(f"Regenerating build information: {output}")
        else:
            logger.info(f"Generating initial build information: {output}")

        info = collect_build_info(
            build_type=self.config.build_type,
            version=self.config.version,
            source_dir=self.source_dir
        )
        self.write(info, output)
        return output

    def write(self, info: BuildInfo, output: Optional[Path] = None) -> Path:
        """Write rendered module source, replacing any previous file atomically."""
        output = Path(output) if output else self.output_path
        content = self.render(info)

        tmp_name = None
        try:
            output.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(dir=str(output.parent), suffix=".tmp")
            with os.fdopen(fd, 'w', encoding='utf-8') as f:
                f.write(content)
            # mkstemp creates files 0600
            os.chmod(tmp_name, _file_mode(output))
            os.replace(tmp_name, output)
        except OSError as e:
            if tmp_name and os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise RuntimeError(f"Failed to write {output}: {e}") from e

        return output

    def is_stale(self) -> bool:
        """Whether any watched source is newer than the generated module."""
        output = self.output_path
        if not output.exists():
            return True

        generated_at = output.stat().st_mtime
        for source in self._watched_files():
            if source.stat().st_mtime > generated_at:
                logger.debug(f"{source} is newer than {output}")
                return True

        return False

    def _watched_files(self) -> Iterable[Path]:
        output = self.output_path.resolve()
        files: List[Path] = []

        for entry in self.config.sources:
            path = self._resolve(entry)
            if path.is_dir():
                files.extend(p for p in sorted(path.rglob("*.py")) if p.is_file())
            elif path.is_file():
                files.append(path)
            else:
                logger.warning(f"Watched source does not exist: {path}")

        return [f for f in files if f.resolve() != output]

    def _resolve(self, path: str) -> Path:
        candidate = Path(path)
        if candidate.is_absolute():
            return candidate
        return self.source_dir / candidate


def generate_version_info(config: BuildConfig,
                          force: bool = False,
                          source_dir: Optional[Path] = None) -> Optional[Path]:
    """Generate the version_info module for a configuration."""
    return VersionInfoGenerator(config, source_dir).generate(force=force)
