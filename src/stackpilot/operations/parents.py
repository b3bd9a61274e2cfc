"""Parent stack output resolution."""

from collections.abc import Iterable

from stackpilot.lib.cfn import StackClient


def resolve_parent_outputs(client: StackClient, parent_names: Iterable[str]) -> dict[str, str]:
    """Merge the outputs of every parent stack into one map.

    Parents are queried in order. A missing parent, or one without
    outputs, contributes nothing. When two parents export the same key
    the later parent wins.
    """
    outputs: dict[str, str] = {}
    for name in parent_names:
        description = client.describe(name)
        if description is None:
            continue
        outputs.update(description.outputs)
    return outputs
