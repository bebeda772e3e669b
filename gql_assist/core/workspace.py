"""Host workspace lookups.

The schema loader asks the host for the active workspace and its root
directory through these protocols. `DirectoryLocator` is the adapter used
on a plain file system; `FixedLocator` and `StaticWorkspace` stand in for a
host in tests.

Example usage:
    from gql_assist.core.workspace import DirectoryLocator

    schema = Schema(DirectoryLocator("./my-project"))
"""

from pathlib import Path
from typing import Protocol, runtime_checkable


@runtime_checkable
class Workspace(Protocol):
    """A project open in the host environment."""

    name: str

    def root_path(self) -> Path | None:
        """The workspace root directory, if it has one."""
        ...


@runtime_checkable
class WorkspaceLocator(Protocol):
    """Finds the workspace the user is currently working in."""

    def active_workspace(self) -> Workspace | None:
        ...


class DirectoryWorkspace:
    """A workspace rooted at a directory on disk."""

    def __init__(self, root: str | Path):
        self.root = Path(root).resolve()
        self.name = self.root.name or str(self.root)

    def root_path(self) -> Path | None:
        return self.root


class DirectoryLocator:
    """Always reports the same directory as the active workspace."""

    def __init__(self, root: str | Path = "."):
        self.workspace = DirectoryWorkspace(root)

    def active_workspace(self) -> Workspace | None:
        return self.workspace


class StaticWorkspace:
    """A workspace with a fixed name and (possibly missing) root."""

    def __init__(self, name: str, root: str | Path | None = None):
        self.name = name
        self.root = Path(root) if root is not None else None

    def root_path(self) -> Path | None:
        return self.root


class FixedLocator:
    """Reports a fixed workspace, or none at all."""

    def __init__(self, workspace: Workspace | None = None):
        self.workspace = workspace

    def active_workspace(self) -> Workspace | None:
        return self.workspace
