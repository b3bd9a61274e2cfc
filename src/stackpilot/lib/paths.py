"""Project-relative paths for templates and parameter overrides.

Layout under the project root (the working directory by default):

    cloud_formation/<app_name>.json
    cloud_formation/parameters/<stack_name>.yml
"""

from pathlib import Path

TEMPLATE_DIR = "cloud_formation"
PARAMETERS_DIR = "parameters"
TEMPLATE_SUFFIX = ".json"
PARAMETERS_SUFFIX = ".yml"


def project_root(root: Path | None = None) -> Path:
    return root if root is not None else Path.cwd()


def template_dir(root: Path | None = None) -> Path:
    """<root>/cloud_formation/"""
    return project_root(root) / TEMPLATE_DIR


def template_path(app_name: str, root: Path | None = None) -> Path:
    """Template file for an application."""
    return template_dir(root) / f"{app_name}{TEMPLATE_SUFFIX}"


def parameters_path(stack_name: str, root: Path | None = None) -> Path:
    """Override file for a stack."""
    return template_dir(root) / PARAMETERS_DIR / f"{stack_name}{PARAMETERS_SUFFIX}"
