"""Command line entry point for rust-manager.

Running without arguments (or with `--list` / `-l`) lists the projects found
under ~/rust and opens the interactive menu. `--help` is provided by Fire.
"""

import logging
import sys
from typing import List, Optional

import fire

from .config import (
    get_config,
    get_logging_params,
    get_projects_params,
    get_session_params,
)
from .discovery import HomeDirectoryNotFoundError, find_projects, get_projects_root
from .models import ProjectCollection, ProjectInfo
from .session import InteractiveSession, format_project_details, parse_selection

logger = logging.getLogger(__name__)

INTERRUPT_MESSAGE = "\nProgram interrupted. Exiting..."
MISSING_ROOT_MESSAGE = "Sorry, no Rust projects found."


def setup_logging(log_level: str) -> None:
    """Configure logging with the specified level."""
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


class ProjectManagerCLI:
    """A manual and manager of the Rust projects under ~/rust."""

    def __init__(self) -> None:
        self.config = get_config()
        self.projects_params = get_projects_params(self.config)
        self.session_params = get_session_params(self.config)
        self.default_log_level = get_logging_params(self.config)["level"]

    def _discover(self) -> Optional[ProjectCollection]:
        """Scan the projects root, or return None if it does not exist."""
        root = get_projects_root(self.projects_params["root_dirname"])
        if not root.exists():
            logger.info(f"Projects root {root} does not exist")
            print(MISSING_ROOT_MESSAGE)
            return None
        return find_projects(root, self.projects_params["manifest_filename"])

    def list(self, log_level: Optional[str] = None) -> None:
        """
        List all available projects and browse their details interactively.

        Args:
            log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        """
        setup_logging(log_level or self.default_log_level)

        projects = self._discover()
        if projects is None:
            return

        session = InteractiveSession(
            projects,
            run_subdir=self.projects_params["run_subdir"],
            redraw_menu=self.session_params["redraw_menu"],
        )
        session.run()

    def show(self, selection: str | int, log_level: Optional[str] = None) -> None:
        """
        Print the details of one project without entering the menu.

        Args:
            selection: 1-based menu number or project name
            log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        """
        setup_logging(log_level or self.default_log_level)

        projects = self._discover()
        if projects is None:
            return

        info = _select_project(projects, selection)
        if info is None:
            print(f"No project matching {selection!r}.", file=sys.stderr)
            sys.exit(1)

        for line in format_project_details(info, self.projects_params["run_subdir"]):
            print(line)


def _select_project(
    projects: ProjectCollection, selection: str | int
) -> Optional[ProjectInfo]:
    """Resolve a selection by name first, then by 1-based position."""
    key = str(selection).strip()
    if key in projects:
        return projects[key]
    index = parse_selection(key)
    if index is not None and 1 <= index <= len(projects):
        return projects.nth(index - 1)
    return None


def _normalize_args(args: List[str]) -> List[str]:
    """Map the bare invocation, the `--list` / `-l` flags and option-only
    invocations to `list`. Help requests are left to Fire."""
    if not args:
        return ["list"]
    if args[0] in ("--list", "-l"):
        return ["list", *args[1:]]
    if args[0].startswith("-") and args[0] not in ("--help", "-h"):
        return ["list", *args]
    return args


def main(argv: Optional[List[str]] = None) -> None:
    args = _normalize_args(sys.argv[1:] if argv is None else list(argv))
    try:
        fire.Fire(ProjectManagerCLI, command=args, name="rust-manager")
    except KeyboardInterrupt:
        print(INTERRUPT_MESSAGE)
        sys.exit(0)
    except HomeDirectoryNotFoundError as e:
        print(e, file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
