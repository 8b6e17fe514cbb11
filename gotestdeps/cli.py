"""Click CLI: print the module dependency graph with test-only modules highlighted."""

from __future__ import annotations

import logging
from pathlib import Path

import click

from gotestdeps import __version__
from gotestdeps.errors import ResolverError
from gotestdeps.models import GraphConfig
from gotestdeps.pipeline import run_graph


class ResolutionFailed(click.ClickException):
    exit_code = 1


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(version=__version__)
@click.option("-C", "--dir", "work_dir", type=click.Path(exists=True, file_okay=False, path_type=Path), default=".", help="Module directory")
@click.option("--pattern", "-p", default="./...", show_default=True, help="Package pattern to load")
@click.option("-o", "--output", default="-", help="Output file (default: stdout)")
@click.option("--parallel/--no-parallel", default=False, help="Run both package loads concurrently")
@click.option("--verbose", "-v", is_flag=True, help="Debug logging on stderr")
def cli(work_dir: Path, pattern: str, output: str, parallel: bool, verbose: bool):
    """Print the Go module dependency graph as a Mermaid diagram.

    Modules that are present only because of tests are highlighted.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    config = GraphConfig(work_dir=work_dir, pattern=pattern, parallel=parallel)

    def progress(stage: str, current: int, total: int):
        if verbose:
            click.echo(f"  {stage}: {current}/{total}", err=True)

    try:
        result = run_graph(config, progress=progress)
    except ResolverError as e:
        raise ResolutionFailed(str(e)) from e

    with click.open_file(output, "w") as out:
        out.write(result.text)


def main():
    cli()


if __name__ == "__main__":
    main()
