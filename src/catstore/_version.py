"""Version lookup for catstore."""

import tomllib
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _metadata_version
from pathlib import Path

_PYPROJECT = Path(__file__).parent.parent.parent / "pyproject.toml"


def get_version() -> str:
    """Installed distribution version, else the ``[project]`` version of a source checkout."""
    try:
        return _metadata_version("catstore")
    except PackageNotFoundError:
        pass
    if _PYPROJECT.exists():
        with open(_PYPROJECT, "rb") as f:
            project = tomllib.load(f).get("project", {})
        if project.get("name") == "catstore" and "version" in project:
            return str(project["version"])
    return "0.0.0"
