"""Interactive progress output.

Workflows report through an InteractiveLogger handed to them:

    with ilog.start("Creating stack web-prod") as step:
        step.note("Waiting...")
        step.success("Stack web-prod created.")

A step that exits without success() is shown as failed.
"""

from collections.abc import Iterator
from contextlib import AbstractContextManager, contextmanager
from dataclasses import dataclass
from typing import Protocol

import click


class Step(Protocol):
    def note(self, message: str) -> None: ...

    def success(self, message: str | None = None) -> None: ...


class InteractiveLogger(Protocol):
    def start(self, message: str) -> AbstractContextManager[Step]: ...


@dataclass
class ClickStep:
    """Step rendered with click."""

    message: str
    succeeded: bool = False

    def note(self, message: str) -> None:
        click.echo(f"  {message}")

    def success(self, message: str | None = None) -> None:
        self.succeeded = True
        click.secho(f"✓ {message or self.message}", fg="green", bold=True)


class ClickInteractiveLogger:
    """InteractiveLogger that writes to the terminal."""

    @contextmanager
    def start(self, message: str) -> Iterator[ClickStep]:
        click.secho(f"→ {message}", bold=True)
        step = ClickStep(message)
        try:
            yield step
        finally:
            if not step.succeeded:
                click.secho(f"✗ {message}", fg="red", bold=True, err=True)
