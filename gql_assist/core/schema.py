"""Schema cache and loader.

Finds `schema.graphql` in the root of the active workspace, parses it, and
keeps the parsed snapshot until the file's modification time moves past
the one recorded when it was parsed.

Nothing here raises when the schema is unavailable: completion runs on
every keystroke, so the reason goes to the diagnostic sink and the debug
log instead, and the query returns an empty result. Only unexpected
OSErrors (e.g. permission denied while reading) propagate.

Example usage:
    schema = Schema(DirectoryLocator("./project")).with_diagnostic_sink(print)
    for member in schema.fields_in("Query"):
        print(member.name)
"""

import logging
import os
import threading
from collections.abc import Callable, Iterator
from pathlib import Path

from .errors import NoActiveWorkspace, NoBasePath, SchemaFileMissing, SchemaUnavailable
from .ir import DefinedMember
from .parser import SchemaParser, SchemaSnapshot
from .settings import AssistSettings
from .workspace import WorkspaceLocator

logger = logging.getLogger(__name__)

DiagnosticSink = Callable[[str], None]


def file_mtime(path: Path) -> int:
    """Modification time of a file in nanoseconds."""
    return os.stat(path).st_mtime_ns


class Schema:
    """Cached access to the schema of the active workspace."""

    def __init__(
        self,
        locator: WorkspaceLocator,
        settings: AssistSettings | None = None,
        parser: SchemaParser | None = None,
        mtime: Callable[[Path], int] = file_mtime,
    ):
        """Initialize the loader.

        Args:
            locator: Host lookup for the active workspace
            settings: Where the schema lives; defaults to `schema.graphql`
            parser: The SDL parser to use
            mtime: Modification time source, replaceable in tests
        """
        self.locator = locator
        self.settings = settings or AssistSettings()
        self.parser = parser or SchemaParser(self.settings.schema_file)
        self._mtime = mtime
        self._sink: DiagnosticSink | None = None
        self._lock = threading.Lock()
        self._cache: SchemaSnapshot | None = None
        self._cache_path: Path | None = None

    def with_diagnostic_sink(self, sink: DiagnosticSink) -> "Schema":
        """Send human-readable failure messages to `sink`."""
        self._sink = sink
        return self

    def type_names(self) -> set[str]:
        """Names of all declared types, or an empty set without a schema."""
        snapshot = self.snapshot()
        if snapshot is None:
            return set()
        return snapshot.type_names()

    def fields_in(self, type_name: str) -> Iterator[DefinedMember]:
        """Fields or input values of a type, in declaration order."""
        snapshot = self.snapshot()
        if snapshot is None:
            return iter(())
        if snapshot.get_type(type_name) is None and type_name not in snapshot.extensions:
            self._diagnose(f"no type {type_name} in schema at {snapshot.source}")
            return iter(())
        return snapshot.members(type_name)

    def snapshot(self) -> SchemaSnapshot | None:
        """The current schema snapshot, or None (with a diagnostic)."""
        try:
            return self._load()
        except SchemaUnavailable as e:
            self._diagnose(e.message)
            return None

    def invalidate(self):
        """Forget the cached snapshot so the next query re-parses."""
        with self._lock:
            self._cache = None
            self._cache_path = None

    def schema_path(self) -> Path:
        """Resolve the schema file location in the active workspace."""
        workspace = self.locator.active_workspace()
        if workspace is None:
            raise NoActiveWorkspace()
        root = workspace.root_path()
        if root is None:
            raise NoBasePath(workspace.name)
        return Path(root) / self.settings.schema_file

    def _load(self) -> SchemaSnapshot:
        path = self.schema_path()
        if not path.exists():
            raise SchemaFileMissing(path)
        with self._lock:
            modified = self._mtime(path)
            if (
                self._cache is None
                or self._cache_path != path
                or modified > self._cache.modified
            ):
                logger.debug("reload schema %s", path)
                self._cache = self.parser.parse_file(path, modified)
                self._cache_path = path
            return self._cache

    def _diagnose(self, message: str):
        logger.debug(message)
        if self._sink is not None:
            self._sink(message)
