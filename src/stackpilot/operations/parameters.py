"""Stack parameter building.

Pure data transformation: no AWS calls, no filesystem.
"""

from collections.abc import Collection, Mapping
from dataclasses import dataclass

from stackpilot.models import Parameter


@dataclass(frozen=True, slots=True)
class ParameterSet:
    """Merged override map and the parameters submitted from it."""

    overrides: dict[str, str]
    parameters: tuple[Parameter, ...]


def build_parameters(
    parent_outputs: Mapping[str, str],
    existing_overrides: Mapping[str, str],
    template_parameters: Collection[str] | None = None,
) -> ParameterSet:
    """Merge parent outputs under existing overrides.

    Existing override values are never replaced. Parent outputs only fill
    keys the overrides don't have, and if ``template_parameters`` is given,
    only keys the template declares as parameters.
    """
    merged = dict(existing_overrides)
    for key, value in parent_outputs.items():
        if key in merged:
            continue
        if template_parameters is not None and key not in template_parameters:
            continue
        merged[key] = value

    parameters = tuple(Parameter(key, merged[key]) for key in sorted(merged))
    return ParameterSet(overrides=merged, parameters=parameters)
