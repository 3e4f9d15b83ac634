"""Shared test fixtures and utilities."""

import pytest
from pathlib import Path
from typing import Callable, Optional


@pytest.fixture(autouse=True)
def setup_config(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Path:
    """Point the configuration at a temporary config.yaml.

    The working directory is moved to tmp_path so no stray .env file is picked up.
    """
    config_path = tmp_path / "config.yaml"
    config_path.write_text(
        """
projects:
    root_dirname: rust
    manifest_filename: Cargo.toml
    run_subdir: target/release
session:
    redraw_menu: false
logging:
    level: WARNING
"""
    )
    monkeypatch.setenv("RUST_MANAGER_CONFIG_PATH", str(config_path))
    monkeypatch.chdir(tmp_path)
    return config_path


@pytest.fixture
def projects_root(tmp_path: Path) -> Path:
    """Create an empty projects root directory."""
    root = tmp_path / "rust"
    root.mkdir()
    return root


@pytest.fixture
def make_project(projects_root: Path) -> Callable[..., Path]:
    """Create a project directory with a Cargo.toml under the projects root."""

    def _make_project(
        dirname: str,
        name: Optional[str] = None,
        description: Optional[str] = None,
        content: Optional[str] = None,
    ) -> Path:
        project_dir = projects_root / dirname
        project_dir.mkdir(parents=True)
        if content is None:
            lines = ["[package]"]
            if name is not None:
                lines.append(f'name = "{name}"')
            lines.append('version = "0.1.0"')
            if description is not None:
                lines.append(f'description = "{description}"')
            content = "\n".join(lines) + "\n"
        (project_dir / "Cargo.toml").write_text(content)
        return project_dir

    return _make_project
