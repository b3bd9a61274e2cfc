"""CLI commands."""

from stackpilot.commands.create import create
from stackpilot.commands.status import paths, status

__all__ = [
    "create",
    "paths",
    "status",
]
