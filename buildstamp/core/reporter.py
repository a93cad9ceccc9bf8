"""
Build information reporter.

Renders a BuildInfo record as a fixed, line-oriented key/value report
and writes it to a text sink (standard output by default).
"""

import sys
from typing import List, Optional, TextIO

from .loader import get_build_info
from .models import BuildInfo


HEADER = "Build Information"
LABEL_WIDTH = 9


def _line(label: str, value: str) -> str:
    return f"{label:<{LABEL_WIDTH}}: {value}\n"


class BuildInfoReporter:
    """
    Formats build provenance for humans.

    The reporter only reads its record, so one instance can be shared
    and called from several threads, each with its own sink.
    """

    def __init__(self, build_info: BuildInfo):
        """
        Initialize the reporter.

        Args:
            build_info: Record to report on
        """
        self.build_info = build_info

    def render(self) -> str:
        """
        Render the report.

        Returns:
            str: Report text, every line terminated by a newline
        """
        info = self.build_info
        lines: List[str] = [
            f"{HEADER}\n",
            f"{'-' * len(HEADER)}\n",
        ]

        if info.version is not None:
            lines.append(_line("Version", info.version))

        lines.append(_line("Build", f"{info.build_type} ({info.build_timestamp})"))
        lines.append(_line("User", f"{info.build_user} @ {info.build_host}"))
        lines.append("\n")

        lines.append(_line("Platform", f"{info.target_system} {info.target_architecture}"))
        lines.append(_line("Host", info.host_system))
        lines.append("\n")

        lines.append(_line("Compiler", f"{info.compiler_id} {info.compiler_version}"))
        lines.append("\n")

        lines.append(_line("Source", info.git_describe))
        lines.append(_line("Commit", info.git_commit_hash))

        return "".join(lines)

    def dump(self, sink: Optional[TextIO] = None) -> None:
        """
        Write the report to a sink.

        Args:
            sink: Writable text stream (defaults to sys.stdout)

        Raises:
            OSError: If the sink fails to accept the write.
        """
        if sink is None:
            sink = sys.stdout

        sink.write(self.render())


def dump_build_info(sink: Optional[TextIO] = None,
                    build_info: Optional[BuildInfo] = None) -> None:
    """
    Write the build report for this package.

    Args:
        sink: Writable text stream (defaults to sys.stdout)
        build_info: Record to report (defaults to the baked-in record)
    """
    if build_info is None:
        build_info = get_build_info()

    BuildInfoReporter(build_info).dump(sink)
