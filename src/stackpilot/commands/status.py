"""Status commands - inspect a stack and its local files."""

from pathlib import Path

import click

from stackpilot.commands.common import (
    echo_key_value,
    echo_section,
    handle_result,
    json_option,
    make_stack,
    stack_options,
    to_json,
)


@click.command()
@click.argument("name")
@stack_options
@json_option
def status(
    name: str,
    app_name: str | None,
    root: Path | None,
    region: str,
    profile: str | None,
    as_json: bool,
) -> None:
    """Show CloudFormation status, outputs and parameters of stack NAME.

    \b
    Examples:
      stackpilot status web-prod
      stackpilot status web-prod --json
    """
    stack = make_stack(name, app_name, root, region, profile)
    description = handle_result(stack.status())

    if as_json:
        click.echo(to_json(description))
        return

    click.secho(f"Stack {description.name}", bold=True)
    echo_key_value("Status", description.status, indent=1)
    echo_key_value("State", description.state.value, indent=1)
    if description.creation_time:
        echo_key_value("Created", description.creation_time.isoformat(), indent=1)
    if description.status_reason:
        echo_key_value("Reason", description.status_reason, indent=1)

    echo_section(f"Parameters ({len(description.parameters)})")
    for key, value in sorted(description.parameters.items()):
        echo_key_value(key, value, indent=1)
    if not description.parameters:
        click.echo("  (none)")

    echo_section(f"Outputs ({len(description.outputs)})")
    for key, value in sorted(description.outputs.items()):
        echo_key_value(key, value, indent=1)
    if not description.outputs:
        click.echo("  (none)")

    click.echo()


@click.command()
@click.argument("name")
@stack_options
def paths(
    name: str,
    app_name: str | None,
    root: Path | None,
    region: str,
    profile: str | None,
) -> None:
    """Print the template and override file paths used for stack NAME."""
    stack = make_stack(name, app_name, root, region, profile)
    echo_key_value("Template", stack.template_file)
    echo_key_value("Parameters", stack.parameters_file)
