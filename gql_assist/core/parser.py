"""GraphQL SDL parser using graphql-core.

Parses a schema document into an immutable SchemaSnapshot: the declared
types by name, the `extend` blocks that add to them, and the modification
time of the source the snapshot was built from.
"""

import logging
from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType

from graphql import (
    DirectiveDefinitionNode,
    DocumentNode,
    ExecutableDefinitionNode,
    GraphQLSyntaxError,
    ScalarTypeDefinitionNode,
    Source,
    TypeDefinitionNode,
    TypeExtensionNode,
    parse,
)

from .errors import SchemaParseError
from .ir import DefinedMember, members_in

logger = logging.getLogger(__name__)


def _is_blank(text: str) -> bool:
    """True for a document with nothing but whitespace and comments."""
    return all(
        not line.strip() or line.lstrip().startswith("#")
        for line in text.lstrip("\ufeff").splitlines()
    )


@dataclass(frozen=True)
class SchemaSnapshot:
    """A parsed schema document at one point in time.

    Snapshots are never mutated; the cache replaces them whole.
    """
    types: Mapping[str, TypeDefinitionNode] = field(
        default_factory=lambda: MappingProxyType({})
    )
    extensions: Mapping[str, tuple[TypeExtensionNode, ...]] = field(
        default_factory=lambda: MappingProxyType({})
    )
    scalars: frozenset[str] = frozenset()
    directives: frozenset[str] = frozenset()
    modified: int = 0
    source: str = ""

    def type_names(self) -> set[str]:
        """Names of the declared object, interface, union, enum and input types."""
        return set(self.types)

    def get_type(self, name: str) -> TypeDefinitionNode | None:
        return self.types.get(name)

    def members(self, name: str) -> Iterator[DefinedMember]:
        """Members of a type: its own, then those added by `extend` blocks."""
        definition = self.types.get(name)
        if definition is not None:
            yield from members_in(definition)
        for extension in self.extensions.get(name, ()):
            yield from members_in(extension)


class SchemaParser:
    """Parses SDL documents into SchemaSnapshots."""

    def __init__(self, source_name: str = "schema.graphql"):
        self.source_name = source_name

    def parse_file(self, path: Path, modified: int | None = None) -> SchemaSnapshot:
        """Read and parse a schema file.

        OSError from reading the file propagates; only content problems
        become a SchemaParseError.
        """
        path = Path(path)
        if modified is None:
            modified = path.stat().st_mtime_ns
        try:
            text = path.read_text(encoding="utf-8")
        except UnicodeDecodeError as e:
            raise SchemaParseError(path, str(e)) from e
        return self._parse(text, str(path), modified)

    def parse_text(self, text: str, modified: int = 0) -> SchemaSnapshot:
        """Parse SDL text."""
        return self._parse(text, self.source_name, modified)

    def _parse(self, text: str, source: str, modified: int) -> SchemaSnapshot:
        logger.debug("parsing schema %s", source)
        if _is_blank(text):
            return SchemaSnapshot(modified=modified, source=source)
        try:
            document = parse(Source(text, source))
        except GraphQLSyntaxError as e:
            raise SchemaParseError(source, e.message) from e
        return self._build(document, source, modified)

    @staticmethod
    def _build(document: DocumentNode, source: str, modified: int) -> SchemaSnapshot:
        """Collect the type system definitions of a parsed document."""
        types: dict[str, TypeDefinitionNode] = {}
        extensions: dict[str, list[TypeExtensionNode]] = {}
        scalars: set[str] = set()
        directives: set[str] = set()

        for definition in document.definitions:
            if isinstance(definition, ExecutableDefinitionNode):
                raise SchemaParseError(
                    source,
                    f"{definition.kind} is not allowed in a schema definition document",
                )
            if isinstance(definition, ScalarTypeDefinitionNode):
                name = definition.name.value
                if name in scalars or name in types:
                    raise SchemaParseError(source, f"type '{name}' is defined more than once")
                scalars.add(name)
            elif isinstance(definition, TypeDefinitionNode):
                name = definition.name.value
                if name in types or name in scalars:
                    raise SchemaParseError(source, f"type '{name}' is defined more than once")
                types[name] = definition
            elif isinstance(definition, TypeExtensionNode):
                extensions.setdefault(definition.name.value, []).append(definition)
            elif isinstance(definition, DirectiveDefinitionNode):
                name = definition.name.value
                if name in directives:
                    raise SchemaParseError(
                        source, f"directive '@{name}' is defined more than once"
                    )
                directives.add(name)

        return SchemaSnapshot(
            types=MappingProxyType(types),
            extensions=MappingProxyType(
                {name: tuple(nodes) for name, nodes in extensions.items()}
            ),
            scalars=frozenset(scalars),
            directives=frozenset(directives),
            modified=modified,
            source=source,
        )
