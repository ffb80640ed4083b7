from pathlib import Path

PROJECT_MARKER = "pyproject.toml"


class ProjectRootNotFound(Exception):
    pass


def get_project_root_dir(start: Path | None = None) -> Path:
    """Nearest directory at or above start holding a pyproject.toml.

    Defaults to searching upwards from this package, which only finds a
    root for source checkouts and editable installs.
    """
    current = (start or Path(__file__).parent).resolve()

    for directory in (current, *current.parents):
        if (directory / PROJECT_MARKER).is_file():
            return directory

    raise ProjectRootNotFound(f"No {PROJECT_MARKER} above {current}")
