"""Wait for a stack to reach a state.

Polls describe_stacks at a fixed interval until the stack reaches the
target state, lands in a terminal failure state, or the deadline passes.
Only the deadline stops the loop; there is no external cancel.
"""

import time

import click

from stackpilot.lib.cfn import StackClient
from stackpilot.lib.errors import PollTimeout, RemoteTerminalFailure, WaitError
from stackpilot.lib.progress import Step
from stackpilot.lib.result import Err, Ok, Result
from stackpilot.models import DEFAULT_POLL_INTERVAL, StackState


def wait_for_state(
    client: StackClient,
    name: str,
    target: StackState,
    verb: str,
    timeout_seconds: int,
    step: Step,
    poll_interval: int = DEFAULT_POLL_INTERVAL,
) -> bool:
    """Block until ``name`` reaches ``target``. False on failure or timeout.

    ``verb`` is the past tense used in progress notes ("created").
    """
    match _poll(client, name, target, verb, timeout_seconds, step, poll_interval):
        case Ok(_):
            return True
        case Err(PollTimeout(stack_name, _, timeout)):
            _notify(
                step,
                f"Giving up waiting for {stack_name} to be {verb} after {timeout}s. "
                "It may still be in progress; run again to pick it up.",
            )
            return False
        case Err(RemoteTerminalFailure(stack_name, status, reason)):
            _notify(step, f"Stack {stack_name} was not {verb}: {status} - {reason}")
            return False
    return False


def _poll(
    client: StackClient,
    name: str,
    target: StackState,
    verb: str,
    timeout_seconds: int,
    step: Step,
    poll_interval: int,
) -> Result[None, WaitError]:
    started = time.monotonic()
    deadline = started + timeout_seconds

    while True:
        description = client.describe(name)
        status = description.status if description else "NOT_FOUND"
        state = StackState.from_status(description.status if description else None)

        if state == target:
            return Ok(None)

        # NOT_CREATED right after submission is eventual consistency, keep polling
        if state == StackState.CREATE_FAILED:
            return Err(RemoteTerminalFailure(name, status, client.failure_reason(name)))

        elapsed = int(time.monotonic() - started)
        _notify(step, f"Waiting for {name} to be {verb}... status: {status} ({elapsed}s)")

        now = time.monotonic()
        if now >= deadline:
            return Err(PollTimeout(name, target.value, timeout_seconds))
        # last sleep is shortened so the final poll lands on the deadline
        time.sleep(min(poll_interval, deadline - now))


def _notify(step: Step, message: str) -> None:
    """Progress output is best-effort; a broken sink must not stop polling."""
    try:
        step.note(message)
    except Exception as e:
        click.echo(f"{message} (progress output failed: {e})", err=True)
