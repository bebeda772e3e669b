"""Core modules for schema loading and declaration projection."""

from .errors import (
    NoActiveWorkspace,
    NoBasePath,
    SchemaFileMissing,
    SchemaParseError,
    SchemaUnavailable,
)
from .ir import (
    DefinedMember,
    ListOf,
    NamedType,
    NonNullOf,
    Parameter,
    TypeExpression,
    members_in,
    type_expression,
)
from .keywords import JAVA_KEYWORDS, reserved_words
from .parser import SchemaParser, SchemaSnapshot
from .projector import Declarations, JavaProjector
from .schema import Schema
from .settings import AssistSettings
from .suggestions import Suggestion, SuggestionProvider
from .type_mapping import TypeMapping, TypeMappingRegistry
from .workspace import (
    DirectoryLocator,
    DirectoryWorkspace,
    FixedLocator,
    StaticWorkspace,
    Workspace,
    WorkspaceLocator,
)

__all__ = [
    # Errors
    "SchemaUnavailable",
    "NoActiveWorkspace",
    "NoBasePath",
    "SchemaFileMissing",
    "SchemaParseError",
    # IR types
    "DefinedMember",
    "ListOf",
    "NamedType",
    "NonNullOf",
    "Parameter",
    "TypeExpression",
    "members_in",
    "type_expression",
    # Parser
    "SchemaParser",
    "SchemaSnapshot",
    # Loader
    "Schema",
    "AssistSettings",
    # Workspace
    "Workspace",
    "WorkspaceLocator",
    "DirectoryLocator",
    "DirectoryWorkspace",
    "FixedLocator",
    "StaticWorkspace",
    # Projection
    "Declarations",
    "JavaProjector",
    "JAVA_KEYWORDS",
    "reserved_words",
    "TypeMapping",
    "TypeMappingRegistry",
    # Suggestions
    "Suggestion",
    "SuggestionProvider",
]
