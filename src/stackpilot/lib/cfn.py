"""CloudFormation operations.

StackClient is the only code that talks to the CloudFormation API.
It is handed a boto3 client rather than building one, so tests can pass
a moto-backed client or a fake.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from botocore.exceptions import ClientError

from stackpilot.lib.errors import SubmissionError
from stackpilot.lib.result import Err, Ok, Result
from stackpilot.models import StackCreateRequest, StackDescription

if TYPE_CHECKING:
    from mypy_boto3_cloudformation import CloudFormationClient


def _is_not_found(e: ClientError) -> bool:
    return "does not exist" in str(e)


@dataclass
class StackClient:
    """Thin request/response boundary around a CloudFormation client."""

    cfn: CloudFormationClient

    def exists(self, name: str) -> bool:
        """Check if stack exists (and is not deleted)."""
        try:
            response = self.cfn.describe_stacks(StackName=name)
        except ClientError as e:
            if _is_not_found(e):
                return False
            raise
        if response["Stacks"]:
            return response["Stacks"][0]["StackStatus"] != "DELETE_COMPLETE"
        return False

    def describe(self, name: str) -> StackDescription | None:
        """Describe a stack, or None if doesn't exist."""
        try:
            response = self.cfn.describe_stacks(StackName=name)
        except ClientError as e:
            if _is_not_found(e):
                return None
            raise
        if not response["Stacks"]:
            return None
        return StackDescription.from_cfn(response["Stacks"][0])

    def create(self, request: StackCreateRequest) -> Result[str, SubmissionError]:
        """Submit create_stack. Returns the stack id; does not wait."""
        try:
            response = self.cfn.create_stack(**request.to_cfn_kwargs())
        except ClientError as e:
            error = e.response.get("Error", {})
            return Err(
                SubmissionError(
                    request.name,
                    error.get("Code", "Unknown"),
                    error.get("Message", str(e)),
                )
            )
        return Ok(response["StackId"])

    def failure_reason(self, name: str) -> str:
        """Try to extract failure reason from stack events."""
        try:
            response = self.cfn.describe_stack_events(StackName=name)
        except ClientError:
            return "Could not retrieve failure reason"
        for event in response.get("StackEvents", []):
            status = event.get("ResourceStatus", "")
            if "FAILED" in status and event.get("ResourceStatusReason"):
                return event["ResourceStatusReason"]
        return "Unknown failure reason"
