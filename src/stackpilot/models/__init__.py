"""stackpilot data models.

Pure data structures. Rendering to boto3 shapes lives here so the rest of
the code never builds CloudFormation dicts by hand.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import StrEnum
from typing import Any, Self

DEFAULT_TIMEOUT_SECONDS = 1800
DEFAULT_POLL_INTERVAL = 5

STAGE_TAG = "ah_stage"
DEFAULT_CAPABILITIES = ("CAPABILITY_IAM",)

_SUCCESS_STATUSES = frozenset({"CREATE_COMPLETE", "UPDATE_COMPLETE", "IMPORT_COMPLETE"})


class StackState(StrEnum):
    """Provider-independent view of a stack's lifecycle."""

    NOT_CREATED = "not_created"
    CREATING = "creating"
    CREATE_COMPLETE = "create_complete"
    CREATE_FAILED = "create_failed"

    @classmethod
    def from_status(cls, status: str | None) -> Self:
        """Map a CloudFormation StackStatus onto a StackState."""
        if status is None or status == "DELETE_COMPLETE":
            return cls.NOT_CREATED
        if status in _SUCCESS_STATUSES:
            return cls.CREATE_COMPLETE
        if (
            status.endswith("_IN_PROGRESS")
            and "ROLLBACK" not in status
            and not status.startswith("DELETE")
        ):
            return cls.CREATING
        return cls.CREATE_FAILED


@dataclass(frozen=True)
class StackIdentity:
    """Stack name plus the application whose template it is built from."""

    name: str
    app_name: str


@dataclass(frozen=True)
class StackConfig:
    """Orchestration settings for one stack."""

    parent_stacks: tuple[str, ...] = ()
    environment: str | None = None  # defaults to the stack name
    timeout_seconds: int = DEFAULT_TIMEOUT_SECONDS
    poll_interval: int = DEFAULT_POLL_INTERVAL


@dataclass(frozen=True)
class Parameter:
    """A single stack parameter."""

    key: str
    value: str

    def to_cfn(self) -> dict[str, str]:
        return {"ParameterKey": self.key, "ParameterValue": self.value}


@dataclass(frozen=True)
class StackCreateRequest:
    """Everything CloudFormation needs to create a stack."""

    name: str
    template_body: str
    tags: dict[str, str] = field(default_factory=dict)
    parameters: tuple[Parameter, ...] = ()
    capabilities: tuple[str, ...] = DEFAULT_CAPABILITIES

    def to_cfn_kwargs(self) -> dict[str, Any]:
        """Keyword arguments for CloudFormation.Client.create_stack."""
        kwargs: dict[str, Any] = {
            "StackName": self.name,
            "TemplateBody": self.template_body,
            "Capabilities": list(self.capabilities),
        }
        if self.parameters:
            kwargs["Parameters"] = [p.to_cfn() for p in self.parameters]
        if self.tags:
            kwargs["Tags"] = [{"Key": k, "Value": v} for k, v in self.tags.items()]
        return kwargs


@dataclass(frozen=True)
class StackDescription:
    """Snapshot of a stack as returned by describe_stacks."""

    name: str
    status: str
    creation_time: datetime | None = None
    outputs: dict[str, str] = field(default_factory=dict)
    parameters: dict[str, str] = field(default_factory=dict)
    status_reason: str | None = None

    @property
    def state(self) -> StackState:
        return StackState.from_status(self.status)

    @classmethod
    def from_cfn(cls, stack: dict[str, Any]) -> Self:
        """Build from one entry of a describe_stacks "Stacks" list."""
        return cls(
            name=stack["StackName"],
            status=stack["StackStatus"],
            creation_time=stack.get("CreationTime"),
            outputs={o["OutputKey"]: o["OutputValue"] for o in stack.get("Outputs", [])},
            parameters={
                p["ParameterKey"]: p.get("ParameterValue", "") for p in stack.get("Parameters", [])
            },
            status_reason=stack.get("StackStatusReason"),
        )
