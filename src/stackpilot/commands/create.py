"""Create command - create a stack and wait for it."""

import sys
from pathlib import Path

import click

from stackpilot.commands.common import handle_result, make_stack, stack_options
from stackpilot.models import DEFAULT_POLL_INTERVAL, DEFAULT_TIMEOUT_SECONDS, StackConfig


@click.command()
@click.argument("name")
@stack_options
@click.option(
    "--parent",
    "parents",
    multiple=True,
    help="Parent stack whose outputs feed this stack's parameters (repeatable, later wins)",
)
@click.option(
    "--environment",
    "-e",
    default=None,
    help="Stage tag value (default: stack name)",
)
@click.option(
    "--timeout",
    type=click.IntRange(min=0),
    default=DEFAULT_TIMEOUT_SECONDS,
    show_default=True,
    help="Seconds to wait for CREATE_COMPLETE",
)
@click.option(
    "--poll-interval",
    type=click.IntRange(min=1),
    default=DEFAULT_POLL_INTERVAL,
    show_default=True,
    help="Seconds between status checks",
)
def create(
    name: str,
    app_name: str | None,
    root: Path | None,
    region: str,
    profile: str | None,
    parents: tuple[str, ...],
    environment: str | None,
    timeout: int,
    poll_interval: int,
) -> None:
    """Create stack NAME from cloud_formation/<app-name>.json.

    Outputs of --parent stacks become parameters when the template declares
    them. Values in cloud_formation/parameters/NAME.yml take precedence and
    the merged values are written back there before submitting.

    \b
    Examples:
      stackpilot create web-prod --app-name web --parent vpc-prod
      stackpilot create web-prod -a web --parent vpc-prod --parent db-prod --timeout 3600
    """
    config = StackConfig(
        parent_stacks=parents,
        environment=environment,
        timeout_seconds=timeout,
        poll_interval=poll_interval,
    )
    stack = make_stack(name, app_name, root, region, profile, config)

    if not handle_result(stack.create()):
        sys.exit(1)
