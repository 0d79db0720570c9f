"""Version and description of the installed dynfmt distribution."""

from importlib import metadata
from pathlib import Path
import tomllib

from pydantic import BaseModel

DISTRIBUTION = "dynfmt"
UNKNOWN_VERSION = "Version not available"
UNKNOWN_DESCRIPTION = "Project description not available"


class ProjectInfo(BaseModel):
    """Name, version and summary of the dynfmt distribution."""

    description: str
    version: str


def get_project_info() -> ProjectInfo:
    """Describe the running copy of dynfmt.

    Installed copies report their distribution metadata. A source checkout
    that was never installed falls back to its ``pyproject.toml``.

    Returns:
        ProjectInfo: A Pydantic model containing description and version.

    """
    try:
        dist = metadata.metadata(DISTRIBUTION)
    except metadata.PackageNotFoundError:
        return _from_pyproject(Path(__file__).parents[2] / "pyproject.toml")

    return ProjectInfo(
        description=dist.get("Summary") or UNKNOWN_DESCRIPTION,
        version=dist.get("Version") or UNKNOWN_VERSION,
    )


def _from_pyproject(pyproject_path: Path) -> ProjectInfo:
    if not pyproject_path.is_file():
        return ProjectInfo(description=UNKNOWN_DESCRIPTION, version=UNKNOWN_VERSION)

    try:
        with pyproject_path.open("rb") as f:
            project = tomllib.load(f).get("project", {})
    except (OSError, tomllib.TOMLDecodeError) as e:
        return ProjectInfo(
            description=f"Error reading project info: {e}", version=UNKNOWN_VERSION
        )

    return ProjectInfo(
        description=project.get("description", UNKNOWN_DESCRIPTION),
        version=project.get("version", UNKNOWN_VERSION),
    )
