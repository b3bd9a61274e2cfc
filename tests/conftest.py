"""Shared pytest fixtures for stackpilot tests."""

import json
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field
from pathlib import Path

import pytest
from moto import mock_aws

from stackpilot.lib.cfn import StackClient
from stackpilot.lib.result import Ok
from stackpilot.models import StackCreateRequest, StackDescription

# Child template: declares Parent1 only
APP_TEMPLATE = {
    "AWSTemplateFormatVersion": "2010-09-09",
    "Description": "web-app test template",
    "Parameters": {
        "Parent1": {"Type": "String", "Default": "unset"},
    },
    "Resources": {
        "Topic": {"Type": "AWS::SNS::Topic"},
    },
}

# Parent template exporting two literal outputs
PARENT_TEMPLATE = {
    "AWSTemplateFormatVersion": "2010-09-09",
    "Resources": {
        "Topic": {"Type": "AWS::SNS::Topic"},
    },
    "Outputs": {
        "Parent1": {"Value": "parents value"},
        "Parent2": {"Value": "other value"},
    },
}


@pytest.fixture
def aws_credentials(monkeypatch: pytest.MonkeyPatch) -> None:
    """Mock AWS credentials for moto."""
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", "testing")
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "testing")
    monkeypatch.setenv("AWS_SECURITY_TOKEN", "testing")
    monkeypatch.setenv("AWS_SESSION_TOKEN", "testing")
    monkeypatch.setenv("AWS_DEFAULT_REGION", "us-east-1")


@pytest.fixture
def cfn_client(aws_credentials: None):
    """Create mocked CloudFormation client."""
    import boto3

    with mock_aws():
        client = boto3.client("cloudformation", region_name="us-east-1")
        yield client


@pytest.fixture
def stack_client(cfn_client) -> StackClient:
    return StackClient(cfn_client)


@pytest.fixture
def project_root(tmp_path: Path) -> Path:
    """Project directory with cloud_formation/web-app.json."""
    template_dir = tmp_path / "cloud_formation"
    template_dir.mkdir()
    (template_dir / "web-app.json").write_text(json.dumps(APP_TEMPLATE, indent=2))
    return tmp_path


# =============================================================================
# Fakes
# =============================================================================


@dataclass
class RecordingStep:
    message: str
    notes: list[str] = field(default_factory=list)
    succeeded: bool = False
    success_message: str | None = None

    def note(self, message: str) -> None:
        self.notes.append(message)

    def success(self, message: str | None = None) -> None:
        self.succeeded = True
        self.success_message = message


class RecordingLogger:
    """InteractiveLogger that keeps every step for assertions."""

    def __init__(self) -> None:
        self.steps: list[RecordingStep] = []

    @contextmanager
    def start(self, message: str) -> Iterator[RecordingStep]:
        step = RecordingStep(message)
        self.steps.append(step)
        yield step


class FakeStackClient:
    """In-memory StackClient.

    ``stacks`` holds pre-existing stacks (parents). After create() the new
    stack reports ``statuses`` one per describe call, repeating the last.
    """

    def __init__(
        self,
        existing: bool = False,
        statuses: tuple[str, ...] = ("CREATE_COMPLETE",),
        stacks: dict[str, StackDescription] | None = None,
    ) -> None:
        self.existing = existing
        self.statuses = list(statuses)
        self.stacks = dict(stacks or {})
        self.create_calls: list[StackCreateRequest] = []
        self.describe_calls: list[str] = []

    def exists(self, name: str) -> bool:
        return self.existing

    def describe(self, name: str) -> StackDescription | None:
        self.describe_calls.append(name)
        if name in self.stacks:
            return self.stacks[name]
        if not self.create_calls:
            return None
        status = self.statuses.pop(0) if len(self.statuses) > 1 else self.statuses[0]
        return StackDescription(name=name, status=status)

    def create(self, request: StackCreateRequest):
        self.create_calls.append(request)
        return Ok(f"arn:aws:cloudformation:us-east-1:123456789012:stack/{request.name}/abc")

    def failure_reason(self, name: str) -> str:
        return "Resource creation cancelled"


class FakeClock:
    """Stands in for the time module inside the poller."""

    def __init__(self) -> None:
        self.now = 0.0
        self.sleeps: list[float] = []

    def monotonic(self) -> float:
        return self.now

    def sleep(self, seconds: float) -> None:
        self.sleeps.append(seconds)
        self.now += seconds


@pytest.fixture
def ilog() -> RecordingLogger:
    return RecordingLogger()


@pytest.fixture
def fake_time(monkeypatch: pytest.MonkeyPatch) -> FakeClock:
    clock = FakeClock()
    monkeypatch.setattr("stackpilot.lib.poller.time", clock)
    return clock
