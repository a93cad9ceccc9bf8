"""
Command Line Interface for buildstamp.

Run without a command to print the build report, or use the commands
below to inspect the baked record and regenerate it at build time.
"""

import logging
import sys
from typing import Optional, Tuple

import click
from rich.console import Console
from rich.markup import escape

from . import __version__
from .core.arithmetic import add
from .core.loader import get_build_info
from .core.reporter import BuildInfoReporter, dump_build_info
from .utils.config import load_config
from .utils.generator import generate_version_info


console = Console()
logger = logging.getLogger(__name__)


@click.group(invoke_without_command=True)
@click.version_option(version=__version__)
@click.option('--verbose', '-v', is_flag=True, help="Enable verbose output")
@click.pass_context
def cli(ctx, verbose: bool):
    """
    buildstamp

    Reports the build provenance baked into this package.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s"
    )

    if ctx.invoked_subcommand is None:
        run_default()


def run_default() -> None:
    """
    Library report followed by the executable's own report.

    Always returns normally so the program exits 0; a broken baked
    record is reported instead of printed.
    """
    logger.debug(f"add(1, 2) = {add(1, 2)}")

    try:
        info = get_build_info()
    except Exception as e:
        console.print(f"[red]Failed to load build information: {escape(str(e))}[/red]")
        return

    dump_build_info(build_info=info)
    dump_build_info(build_info=info.without_version())


@cli.command()
@click.option('--no-version', is_flag=True, help="Omit the Version line")
@click.option('--json', 'as_json', is_flag=True, help="Print the record as JSON")
def show(no_version: bool, as_json: bool):
    """Print the build information report."""
    try:
        info = get_build_info()
    except Exception as e:
        console.print(f"[red]Failed to load build information: {escape(str(e))}[/red]")
        sys.exit(1)

    if no_version:
        info = info.without_version()

    if as_json:
        click.echo(info.model_dump_json(indent=2))
        return

    BuildInfoReporter(info).dump()


@cli.command('add')
@click.argument('left', type=int)
@click.argument('right', type=int)
def add_command(left: int, right: int):
    """Add two integers with 32-bit wrapping."""
    click.echo(add(left, right))


@cli.command()
@click.option('--config', '-c', 'config_path', help="Path to configuration file")
@click.option('--output', '-o', help="Generated module path")
@click.option('--build-type', '-t', help="Build configuration (e.g., Debug, Release)")
@click.option('--project-version', help="Version to record")
@click.option('--source', '-s', 'sources', multiple=True, help="Path whose changes trigger regeneration")
@click.option('--force', is_flag=True, help="Regenerate even if up to date")
def generate(config_path: Optional[str], output: Optional[str], build_type: Optional[str],
             project_version: Optional[str], sources: Tuple[str, ...], force: bool):
    """
    Generate the version_info module.

    Collects the build environment (toolchain, platform, user, git) and
    writes it as a Python module. The module is only rewritten when it is
    missing, when a watched source is newer, or with --force.
    """
    try:
        config = load_config(config_path, overrides={
            'output': output,
            'build_type': build_type,
            'version': project_version,
            'sources': list(sources) or None,
        })

        written = generate_version_info(config, force=force)

    except Exception as e:
        console.print(f"[red]Generation failed: {escape(str(e))}[/red]")
        sys.exit(1)

    if written:
        console.print(f"[green]Build information written to {written}[/green]")
    else:
        console.print(f"[yellow]Build information is up to date: {config.output}[/yellow]")


def main():
    """Main CLI entry point."""
    cli()


if __name__ == "__main__":
    main()
