"""AWS session and client management.

AwsContext is created once at CLI entry. Workflows never see it: they
receive a StackClient built from ``ctx.stacks``.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import cached_property
from typing import TYPE_CHECKING

import boto3

from stackpilot.lib.cfn import StackClient

if TYPE_CHECKING:
    from mypy_boto3_cloudformation import CloudFormationClient


@dataclass
class AwsContext:
    """AWS session and clients. Created once at CLI entry.

    Example:
        ctx = AwsContext(region="us-east-1", profile="dev")
        ctx.stacks.exists("my-stack")
    """

    region: str
    profile: str | None = None

    @cached_property
    def session(self) -> boto3.Session:
        """Boto3 session configured with region and profile."""
        return boto3.Session(region_name=self.region, profile_name=self.profile)

    @cached_property
    def cfn(self) -> CloudFormationClient:
        """CloudFormation client."""
        return self.session.client("cloudformation")

    @cached_property
    def stacks(self) -> StackClient:
        """StackClient over the CloudFormation client."""
        return StackClient(self.cfn)
