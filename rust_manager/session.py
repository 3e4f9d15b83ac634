"""Interactive project menu.

The session lists the discovered projects as a numbered menu and reads
selections from standard input until the user quits:

    LISTING -> AWAITING_INPUT -> SHOWING_DETAIL -> AWAITING_INPUT ... -> EXITING

With ``redraw_menu`` enabled the menu is listed again after every detail
view. Interrupts are not handled here; they propagate to the CLI entry point.
"""

import logging
import re
from enum import Enum
from typing import Callable, List, Optional

from rust_manager.models import ProjectCollection, ProjectInfo

logger = logging.getLogger(__name__)

NO_PROJECTS_MESSAGE = "No Rust projects found."
MENU_HINT = "Enter the number of the project to view details, or 'q' to quit:"
PROMPT = "> "
EXIT_MESSAGE = "Exiting program..."
INVALID_SELECTION_MESSAGE = "Invalid selection. Please enter a valid project number."
INVALID_INPUT_MESSAGE = "Please enter a valid number or 'q' to quit."

_NUMBER_RE = re.compile(r"\+?[0-9]+")


class SessionState(Enum):
    LISTING = "listing"
    AWAITING_INPUT = "awaiting_input"
    SHOWING_DETAIL = "showing_detail"
    EXITING = "exiting"


def parse_selection(text: str) -> Optional[int]:
    """Parse a menu number made of ASCII digits, or return None."""
    text = text.strip()
    if not _NUMBER_RE.fullmatch(text):
        return None
    return int(text)


def format_project_line(index: int, info: ProjectInfo) -> str:
    """Format one menu entry. `index` is 1-based."""
    return f"{index}. {info.name} - {info.display_description}"


def format_project_details(
    info: ProjectInfo, run_subdir: str = "target/release"
) -> List[str]:
    return [
        "",
        "Project Details:",
        f"Project Name: {info.name}",
        f"Description: {info.display_description}",
        f"Path: {info.path}",
        f"You can run this project from: {info.run_path(run_subdir)}",
    ]


class InteractiveSession:
    def __init__(
        self,
        projects: ProjectCollection,
        run_subdir: str = "target/release",
        redraw_menu: bool = False,
        read_line: Optional[Callable[[str], str]] = None,
    ) -> None:
        """
        Initialize the session.

        Args:
            projects: Projects to offer in the menu
            run_subdir: Build output location shown in detail views
            redraw_menu: If True, list the menu again after each detail view
            read_line: Prompts and reads one line of input. Defaults to `input`
        """
        self.projects = projects
        self.run_subdir = run_subdir
        self.redraw_menu = redraw_menu
        self.read_line = read_line or input
        self.state = SessionState.LISTING
        self.selected: Optional[ProjectInfo] = None

    def run(self) -> None:
        """Run the menu loop until the user quits or input ends."""
        if not self.projects:
            print(NO_PROJECTS_MESSAGE)
            self.state = SessionState.EXITING
            return

        self.state = SessionState.LISTING
        while self.state is not SessionState.EXITING:
            if self.state is SessionState.LISTING:
                self.show_listing()
                self.state = SessionState.AWAITING_INPUT
            elif self.state is SessionState.AWAITING_INPUT:
                try:
                    line = self.read_line(PROMPT)
                except EOFError:
                    print()
                    line = "q"
                self.state = self.handle_input(line)
            elif self.state is SessionState.SHOWING_DETAIL:
                self.show_selected()
                self.state = (
                    SessionState.LISTING
                    if self.redraw_menu
                    else SessionState.AWAITING_INPUT
                )

    def handle_input(self, line: str) -> SessionState:
        """Interpret one line of input and return the next state."""
        text = line.strip()

        if text.lower() == "q":
            print(EXIT_MESSAGE)
            return SessionState.EXITING

        index = parse_selection(text)
        if index is None:
            print(INVALID_INPUT_MESSAGE)
            return SessionState.AWAITING_INPUT

        if not 1 <= index <= len(self.projects):
            logger.debug(f"Selection {index} outside 1..{len(self.projects)}")
            print(INVALID_SELECTION_MESSAGE)
            return SessionState.AWAITING_INPUT

        self.selected = self.projects.nth(index - 1)
        return SessionState.SHOWING_DETAIL

    def show_listing(self) -> None:
        for index, info in enumerate(self.projects.values(), start=1):
            print(format_project_line(index, info))
        print(MENU_HINT)

    def show_selected(self) -> None:
        if self.selected is None:
            raise RuntimeError("No project selected")
        self.show_details(self.selected)

    def show_details(self, info: ProjectInfo) -> None:
        for line in format_project_details(info, self.run_subdir):
            print(line)
