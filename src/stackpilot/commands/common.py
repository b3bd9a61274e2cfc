"""Shared CLI utilities.

Common options, Stack construction, error handling, output formatting.
"""

import json
import sys
from collections.abc import Callable
from dataclasses import asdict, is_dataclass
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Any, ParamSpec, TypeVar

import click

from stackpilot.lib.aws import AwsContext
from stackpilot.lib.errors import (
    PersistenceError,
    StackNotFoundError,
    SubmissionError,
    TemplateLoadError,
)
from stackpilot.lib.progress import ClickInteractiveLogger
from stackpilot.lib.result import Err, Ok, Result
from stackpilot.models import StackConfig, StackIdentity
from stackpilot.workflows import Stack

DEFAULT_REGION = "us-east-1"

P = ParamSpec("P")
T = TypeVar("T")


def region_option(fn: Callable[P, T]) -> Callable[P, T]:
    """Add --region/-r option."""
    return click.option(
        "--region",
        "-r",
        default=DEFAULT_REGION,
        show_default=True,
        help="AWS region",
    )(fn)


def profile_option(fn: Callable[P, T]) -> Callable[P, T]:
    """Add --profile/-p option."""
    return click.option(
        "--profile",
        "-p",
        default=None,
        help="AWS profile",
    )(fn)


def app_name_option(fn: Callable[P, T]) -> Callable[P, T]:
    """Add --app-name/-a option. Defaults to the stack name."""
    return click.option(
        "--app-name",
        "-a",
        default=None,
        help="Template name under cloud_formation/ (default: stack name)",
    )(fn)


def root_option(fn: Callable[P, T]) -> Callable[P, T]:
    """Add --root option."""
    return click.option(
        "--root",
        type=click.Path(file_okay=False, path_type=Path),
        default=None,
        help="Project directory containing cloud_formation/ (default: cwd)",
    )(fn)


def json_option(fn: Callable[P, T]) -> Callable[P, T]:
    """Add --json flag for JSON output."""
    return click.option(
        "--json",
        "as_json",
        is_flag=True,
        help="Output as JSON",
    )(fn)


def aws_options(fn: Callable[P, T]) -> Callable[P, T]:
    """Add all AWS-related options (region, profile)."""
    fn = region_option(fn)
    fn = profile_option(fn)
    return fn


def stack_options(fn: Callable[P, T]) -> Callable[P, T]:
    """Add options every stack command needs (app name, root, region, profile)."""
    fn = app_name_option(fn)
    fn = root_option(fn)
    fn = aws_options(fn)
    return fn


def make_context(region: str, profile: str | None) -> AwsContext:
    """Create AwsContext from CLI options."""
    return AwsContext(region=region, profile=profile)


def make_stack(
    name: str,
    app_name: str | None,
    root: Path | None,
    region: str,
    profile: str | None,
    config: StackConfig | None = None,
) -> Stack:
    """Build a Stack wired to real AWS and terminal output."""
    ctx = make_context(region, profile)
    return Stack(
        identity=StackIdentity(name=name, app_name=app_name or name),
        client=ctx.stacks,
        ilog=ClickInteractiveLogger(),
        config=config or StackConfig(),
        root=root,
    )


def handle_result(result: Result[T, Any]) -> T:
    """Handle a Result, exiting on error with appropriate message.

    On Ok: returns the value
    On Err: prints error and exits with code 1
    """
    match result:
        case Ok(value):
            return value
        case Err(error):
            handle_error(error)
    sys.exit(1)


def handle_error(error: Any) -> None:
    """Print error message and exit."""
    message = _format_error(error)
    click.secho(f"Error: {message}", fg="red", err=True)
    sys.exit(1)


def _format_error(error: Any) -> str:
    """Format error for display."""
    match error:
        case TemplateLoadError(path, reason):
            return f"Could not load template {path}: {reason}"

        case PersistenceError(path, reason):
            return f"Parameter override file {path} is unusable: {reason}. Fix or remove it and retry."

        case SubmissionError(stack_name, code, reason):
            return f"CloudFormation rejected stack '{stack_name}': {code} - {reason}"

        case StackNotFoundError(stack_name):
            return f"Stack '{stack_name}' does not exist."

        case _:
            return str(error)


def to_json(obj: Any) -> str:
    """Convert object to JSON string."""
    return json.dumps(_to_serializable(obj), indent=2)


def _to_serializable(obj: Any) -> Any:
    """Convert object to JSON-serializable form."""
    if obj is None:
        return None
    if isinstance(obj, (str, int, float, bool)):
        return obj
    if isinstance(obj, Enum):
        return obj.value
    if isinstance(obj, datetime):
        return obj.isoformat()
    if isinstance(obj, dict):
        return {k: _to_serializable(v) for k, v in obj.items()}
    if isinstance(obj, (list, tuple)):
        return [_to_serializable(v) for v in obj]
    if is_dataclass(obj) and not isinstance(obj, type):
        return _to_serializable(asdict(obj))
    return str(obj)


def echo_key_value(key: str, value: Any, indent: int = 0) -> None:
    """Print a key-value pair with optional indentation."""
    prefix = "  " * indent
    click.echo(f"{prefix}{key}: {value}")


def echo_section(title: str) -> None:
    """Print a section header."""
    click.echo()
    click.secho(title, bold=True)
    click.echo("-" * len(title))
