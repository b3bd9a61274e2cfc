"""CloudFormation template loading."""

import json
from dataclasses import dataclass
from pathlib import Path

from stackpilot.lib.errors import TemplateLoadError
from stackpilot.lib.result import Err, Ok, Result


@dataclass(frozen=True)
class Template:
    """A template body and the parameter names it declares."""

    path: Path
    body: str
    parameter_names: frozenset[str]


def load_template(path: Path) -> Result[Template, TemplateLoadError]:
    """Read a JSON template from disk.

    The body is passed to CloudFormation verbatim. It is only parsed to
    find the keys of the top-level ``Parameters`` object.
    """
    try:
        body = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return Err(TemplateLoadError(path, "Template file not found"))
    except OSError as e:
        return Err(TemplateLoadError(path, str(e)))
    except UnicodeDecodeError as e:
        return Err(TemplateLoadError(path, f"File is not valid UTF-8: {e}"))

    try:
        document = json.loads(body)
    except json.JSONDecodeError as e:
        return Err(TemplateLoadError(path, f"Invalid JSON: {e}"))
    if not isinstance(document, dict):
        return Err(TemplateLoadError(path, "Template must be a JSON object"))

    parameters = document.get("Parameters") or {}
    if not isinstance(parameters, dict):
        return Err(TemplateLoadError(path, "Parameters section must be an object"))

    return Ok(Template(path=path, body=body, parameter_names=frozenset(parameters)))
