"""Reasons a GraphQL schema can be unavailable.

These are soft failures: the loader raises them internally and turns them
into diagnostic messages, so callers only ever see an empty result.
"""


class SchemaUnavailable(Exception):
    """Base class for all 'no schema right now' conditions."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class NoActiveWorkspace(SchemaUnavailable):
    """The host has no active workspace."""

    def __init__(self):
        super().__init__("no active workspace")


class NoBasePath(SchemaUnavailable):
    """The active workspace has no root directory."""

    def __init__(self, workspace_name: str):
        self.workspace_name = workspace_name
        super().__init__(f"no base path in workspace {workspace_name}")


class SchemaFileMissing(SchemaUnavailable):
    """There is no schema file at the expected location."""

    def __init__(self, path):
        self.path = path
        super().__init__(f"no GraphQL schema found at {path}")


class SchemaParseError(SchemaUnavailable):
    """The SDL document could not be parsed."""

    def __init__(self, source, detail: str):
        self.source = source
        self.detail = detail
        super().__init__(f"parsing of schema at {source} failed:\n{detail}")
