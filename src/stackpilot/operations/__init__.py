"""Operations layer - single-purpose steps composed by workflows."""

from stackpilot.operations.parameters import ParameterSet, build_parameters
from stackpilot.operations.parents import resolve_parent_outputs

__all__ = [
    "ParameterSet",
    "build_parameters",
    "resolve_parent_outputs",
]
