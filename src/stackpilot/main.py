"""stackpilot CLI entry point."""

import click

from . import __version__
from .commands import create, paths, status


@click.group()
@click.version_option(version=__version__, prog_name="stackpilot")
def cli():
    """stackpilot - create CloudFormation stacks fed by their parent stacks' outputs."""
    pass


# Register subcommands
cli.add_command(create)
cli.add_command(status)
cli.add_command(paths)


if __name__ == "__main__":
    cli()
