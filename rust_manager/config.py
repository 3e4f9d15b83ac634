import os
import yaml
from pathlib import Path
from typing import Any, Dict
from dotenv import dotenv_values, find_dotenv
import logging

logger = logging.getLogger(__name__)

DEFAULT_ROOT_DIRNAME = "rust"
DEFAULT_MANIFEST_FILENAME = "Cargo.toml"
DEFAULT_RUN_SUBDIR = "target/release"
DEFAULT_LOG_LEVEL = "WARNING"


def get_package_root() -> Path:
    """Get the package directory holding the bundled config.yaml.

    Returns:
        Path to the rust_manager package directory
    """
    return Path(__file__).parent


def get_config() -> Dict[str, Any]:
    """Get configuration by merging config.yaml and environment variables.
    Environment variables from .env take precedence over config.yaml values.

    Returns:
        Dictionary containing merged configuration
    """
    config_path = Path(
        os.getenv(
            "RUST_MANAGER_CONFIG_PATH", str(get_package_root() / "config.yaml")
        )
    )
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path, "r") as f:
        config = yaml.safe_load(f) or {}

    dotenv_path = find_dotenv(usecwd=True)
    if not dotenv_path:
        logger.debug("No .env file found")
    else:
        env_vars = dotenv_values(dotenv_path)
        # Environment variables take precedence over config file
        config.update(env_vars)

    return config  # type: ignore[no-any-return]


def _section(config: dict, name: str) -> dict:
    """Get a config section, ignoring values that are not mappings."""
    section = config.get(name)
    if not isinstance(section, dict):
        if section is not None:
            logger.warning(f"Ignoring config section {name!r}: expected a mapping")
        return {}
    return section


def get_projects_params(config: dict) -> dict:
    """Get project discovery parameters from config with defaults.

    Args:
        config: Config dictionary containing a `projects` section

    Returns:
        Dictionary with the following keys:
        - root_dirname: Directory under the home directory to scan (default: rust)
        - manifest_filename: Manifest probed in each project directory (default: Cargo.toml)
        - run_subdir: Build output location suggested for each project (default: target/release)
    """
    projects = _section(config, "projects")
    return {
        "root_dirname": projects.get("root_dirname", DEFAULT_ROOT_DIRNAME),
        "manifest_filename": projects.get(
            "manifest_filename", DEFAULT_MANIFEST_FILENAME
        ),
        "run_subdir": projects.get("run_subdir", DEFAULT_RUN_SUBDIR),
    }


def get_session_params(config: dict) -> dict:
    """Get interactive session parameters from config with defaults."""
    session = _section(config, "session")
    return {
        "redraw_menu": bool(session.get("redraw_menu", False)),
    }


def get_logging_params(config: dict) -> dict:
    """Get logging parameters, letting RUST_MANAGER_LOG_LEVEL from .env win."""
    logging_config = _section(config, "logging")
    level = config.get("RUST_MANAGER_LOG_LEVEL") or logging_config.get(
        "level", DEFAULT_LOG_LEVEL
    )
    return {"level": str(level).upper()}
