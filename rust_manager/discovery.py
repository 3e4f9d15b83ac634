import logging
from pathlib import Path

from rust_manager.models import ProjectCollection
from rust_manager.utils.manifest import read_manifest

logger = logging.getLogger(__name__)


class HomeDirectoryNotFoundError(RuntimeError):
    """Raised when the user's home directory cannot be resolved."""


def get_projects_root(root_dirname: str = "rust") -> Path:
    """Get the directory under the user's home that holds the projects.

    Args:
        root_dirname: Name of the directory under the home directory

    Returns:
        Path to the projects root. It is not checked for existence.

    Raises:
        HomeDirectoryNotFoundError: If the home directory cannot be resolved
    """
    try:
        home = Path.home()
    except (RuntimeError, KeyError) as e:
        raise HomeDirectoryNotFoundError("Could not find home directory") from e
    return home / root_dirname


def find_projects(
    root: Path, manifest_filename: str = "Cargo.toml"
) -> ProjectCollection:
    """Find projects in the immediate subdirectories of a root directory.

    A subdirectory is a project when it contains a manifest that names a
    package. Nested directories are never inspected. When two manifests
    declare the same name, the one read last wins.

    Args:
        root: Directory to scan
        manifest_filename: Manifest file expected in each project directory

    Returns:
        Collection of the discovered projects, empty if root cannot be read
    """
    projects = ProjectCollection()
    try:
        entries = list(root.iterdir())
    except OSError:
        logger.error(f"Could not read directory: {root}")
        return projects

    for entry in entries:
        if not entry.is_dir():
            continue

        manifest_path = entry / manifest_filename
        if not manifest_path.exists():
            continue

        info = read_manifest(manifest_path)
        if info is None:
            continue

        if info.name in projects:
            logger.debug(
                f"Project {info.name!r} at {info.path} replaces {projects[info.name].path}"
            )
        projects.add(info)

    logger.info(f"Found {len(projects)} projects in {root}")
    return projects
