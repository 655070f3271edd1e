"""
certmap CLI - Main entry point.

This module registers all CLI commands. Each command is implemented
in its own module under cli/commands/.
"""

import logging
from pathlib import Path

import click

from ..config import load_config
from ..core.errors import CertmapError
from .commands import filter as filter_cmd
from .commands import graph, path, search, tracks, validate
from .utils import AppContext, fail


@click.group()
@click.version_option(package_name="certmap")
@click.option("-c", "--config", "config_path", type=click.Path(dir_okay=False, path_type=Path),
              default=None, help="Config file (default: ./certmap.yaml)")
@click.option("-d", "--data", "data_path", type=click.Path(exists=True, dir_okay=False, path_type=Path),
              default=None, help="Catalog file to use instead of the bundled one")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.pass_context
def main(ctx: click.Context, config_path: Path | None, data_path: Path | None, verbose: bool):
    """certmap: IT certification paths as a graph.

    Validates a certification catalog and explores one vendor's
    certifications and the links between them.

    \b
    Quick Start:
      certmap validate
      certmap filter --vendor Azure --level Associate
      certmap graph --vendor AWS --output aws.html
      certmap path aws-saa
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    try:
        config = load_config(config_path)
    except CertmapError as e:
        fail(e)
    ctx.obj = AppContext(config=config, data_path=data_path)


# Register commands
main.add_command(validate.validate)
main.add_command(graph.graph)
main.add_command(filter_cmd.filter_certs, name="filter")
main.add_command(search.search)
main.add_command(path.path)
main.add_command(tracks.tracks)

if __name__ == "__main__":
    main()
