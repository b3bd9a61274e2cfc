"""Parameter override files.

One YAML document per stack holding a flat ``parameter -> value`` map.
Values here win over anything imported from parent stacks, so operators
can edit the file between runs.

save() replaces the whole file; callers merge before saving.
"""

from collections.abc import Hashable
from pathlib import Path

import yaml

from stackpilot.lib.errors import PersistenceError
from stackpilot.lib.result import Err, Ok, Result
from stackpilot.lib.storage import file

_SCALARS = (str, int, float, bool)


class _UniqueKeyLoader(yaml.SafeLoader):
    """SafeLoader that rejects repeated keys instead of keeping the last one."""

    def construct_mapping(self, node, deep=False):
        seen = set()
        for key_node, _ in node.value:
            key = self.construct_object(key_node, deep=deep)
            if isinstance(key, Hashable) and key in seen:
                raise yaml.constructor.ConstructorError(
                    "while constructing a mapping",
                    node.start_mark,
                    f"found duplicate key {key!r}",
                    key_node.start_mark,
                )
            if isinstance(key, Hashable):
                seen.add(key)
        return super().construct_mapping(node, deep=deep)


def load(path: Path) -> Result[dict[str, str], PersistenceError]:
    """Load overrides. A missing or empty file is an empty map."""
    try:
        raw = file.read(path)
    except OSError as e:
        return Err(PersistenceError(path, f"Could not read file: {e}"))
    except UnicodeDecodeError as e:
        return Err(PersistenceError(path, f"File is not valid UTF-8: {e}"))
    if raw is None:
        return Ok({})

    try:
        data = yaml.load(raw, Loader=_UniqueKeyLoader)
    except yaml.YAMLError as e:
        return Err(PersistenceError(path, f"Invalid YAML: {e}"))

    if data is None:
        return Ok({})
    if not isinstance(data, dict):
        return Err(PersistenceError(path, f"Expected a mapping, got {type(data).__name__}"))

    overrides: dict[str, str] = {}
    for key, value in data.items():
        if not isinstance(key, str):
            return Err(PersistenceError(path, f"Parameter name {key!r} is not a string"))
        # bool is checked before str() so YAML true/false keep their spelling
        if isinstance(value, bool):
            overrides[key] = "true" if value else "false"
        elif isinstance(value, _SCALARS):
            overrides[key] = str(value)
        else:
            return Err(PersistenceError(path, f"Value for {key!r} must be a scalar"))
    return Ok(overrides)


def save(path: Path, overrides: dict[str, str]) -> Result[None, PersistenceError]:
    """Write the full override map atomically."""
    data = yaml.safe_dump(dict(overrides), default_flow_style=False, sort_keys=True)
    try:
        file.write_atomic(path, data)
    except OSError as e:
        return Err(PersistenceError(path, f"Could not write file: {e}"))
    return Ok(None)
