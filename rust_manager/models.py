from collections.abc import Iterator, Mapping
from pathlib import Path
from typing import Dict, Optional

from pydantic import BaseModel, ConfigDict, Field

NO_DESCRIPTION = "No description"


class ProjectInfo(BaseModel):
    """A project discovered from its manifest."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1)
    description: Optional[str] = None
    path: Path = Field(description="Directory containing the manifest")

    @property
    def display_description(self) -> str:
        return self.description if self.description is not None else NO_DESCRIPTION

    def run_path(self, run_subdir: str = "target/release") -> Path:
        """Conventional build output location. Not checked for existence."""
        return self.path / run_subdir


class ProjectCollection(Mapping[str, ProjectInfo]):
    """Projects keyed by name, iterated in lexicographic name order.

    Adding a project under a name that is already present replaces the
    earlier entry.
    """

    def __init__(self) -> None:
        self._projects: Dict[str, ProjectInfo] = {}

    def add(self, info: ProjectInfo) -> None:
        self._projects[info.name] = info

    def nth(self, index: int) -> ProjectInfo:
        """Get the project at a 0-based position in name order.

        Raises:
            IndexError: If index is outside the collection
        """
        if index < 0 or index >= len(self._projects):
            raise IndexError(f"No project at position {index}")
        return self._projects[sorted(self._projects)[index]]

    def __getitem__(self, name: str) -> ProjectInfo:
        return self._projects[name]

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._projects))

    def __len__(self) -> int:
        return len(self._projects)

    def __repr__(self) -> str:
        return f"ProjectCollection({list(self)!r})"
