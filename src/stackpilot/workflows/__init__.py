"""Workflows layer - orchestrate operations into user intents."""

from stackpilot.workflows.stack import Stack

__all__ = [
    "Stack",
]
