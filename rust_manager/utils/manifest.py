import logging
import tomllib
from pathlib import Path
from typing import Optional

from rust_manager.models import ProjectInfo

logger = logging.getLogger(__name__)


def read_manifest(path: Path) -> Optional[ProjectInfo]:
    """Read a Cargo.toml manifest and extract the project it describes.

    The package name is required; the description is optional and ignored
    when it is not a string. Any other fields are ignored.

    Args:
        path: Path to the manifest file

    Returns:
        ProjectInfo for the manifest's parent directory, or None if the file
        cannot be read or does not describe a named package
    """
    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, tomllib.TOMLDecodeError) as e:
        logger.debug(f"Skipping unreadable manifest {path}: {e}")
        return None

    package = data.get("package")
    if not isinstance(package, dict):
        logger.debug(f"Skipping manifest without a [package] table: {path}")
        return None

    name = package.get("name")
    if not isinstance(name, str) or not name:
        logger.debug(f"Skipping manifest without a package name: {path}")
        return None

    description = package.get("description")
    if not isinstance(description, str):
        description = None

    return ProjectInfo(name=name, description=description, path=path.parent)
