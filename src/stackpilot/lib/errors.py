"""Error types for stackpilot.

Errors are frozen dataclasses returned inside ``Err`` rather than raised.
The CLI layer pattern matches on them to print a readable message.
"""

from dataclasses import dataclass
from pathlib import Path

# =============================================================================
# Local File Errors
# =============================================================================


@dataclass(frozen=True, slots=True)
class TemplateLoadError:
    """Template file is missing, unreadable or not valid JSON."""

    path: Path
    reason: str


@dataclass(frozen=True, slots=True)
class PersistenceError:
    """Parameter override file could not be read or written."""

    path: Path
    reason: str


# =============================================================================
# CloudFormation Errors
# =============================================================================


@dataclass(frozen=True, slots=True)
class SubmissionError:
    """CloudFormation rejected the create_stack request."""

    stack_name: str
    code: str
    reason: str


@dataclass(frozen=True, slots=True)
class StackNotFoundError:
    """Stack does not exist."""

    stack_name: str


@dataclass(frozen=True, slots=True)
class PollTimeout:
    """Stack did not reach the target state before the deadline."""

    stack_name: str
    target: str
    timeout_seconds: int


@dataclass(frozen=True, slots=True)
class RemoteTerminalFailure:
    """Stack landed in a terminal failure status while waiting."""

    stack_name: str
    status: str
    reason: str


# =============================================================================
# Type Aliases for Error Unions
# =============================================================================

type CreateError = TemplateLoadError | PersistenceError | SubmissionError
type WaitError = PollTimeout | RemoteTerminalFailure
