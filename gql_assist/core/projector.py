"""Projection of schema members into Java declarations.

Turns a DefinedMember into the single-line snippets offered as
completions:

    @Query @NonNull List<Person> people(@NonNull Integer first);
    @Id @NonNull String id;
"""

from dataclasses import dataclass

from .ir import DefinedMember, ListOf, NamedType, NonNullOf, Parameter, TypeExpression, named_type
from .keywords import JAVA_KEYWORDS
from .type_mapping import TypeMappingRegistry

NON_NULL = "@NonNull "


@dataclass(frozen=True)
class Declarations:
    """Both declaration forms of one member."""
    method: str
    field: str


class JavaProjector:
    """Projects GraphQL members and type expressions into Java source text."""

    def __init__(
        self,
        type_mapping: TypeMappingRegistry | None = None,
        reserved: frozenset[str] | None = None,
    ):
        self.type_mapping = type_mapping or TypeMappingRegistry()
        self.reserved = JAVA_KEYWORDS if reserved is None else reserved

    def project_type(self, expression: TypeExpression) -> str:
        """Render a type expression, e.g. `[ID!]!` as `@Id @NonNull List<@NonNull String>`.

        The marker of the terminal type (like `@Id`) goes in front of the
        whole type, before any `@NonNull`.
        """
        marker = self.type_mapping.resolve(named_type(expression).name).marker
        rendered = self._render(expression)
        return f"{marker} {rendered}" if marker else rendered

    def _render(self, expression: TypeExpression) -> str:
        if isinstance(expression, NonNullOf):
            return NON_NULL + self._render(expression.of_type)
        if isinstance(expression, ListOf):
            return f"List<{self._render(expression.of_type)}>"
        if isinstance(expression, NamedType):
            return self.type_mapping.resolve(expression.name).target_name
        raise TypeError(f"Expected a type expression, got {type(expression).__name__}")

    def parameter_declaration(self, param: Parameter) -> str:
        """Render one parameter, renaming it if it is a reserved word.

        A renamed parameter keeps its GraphQL name in a `@Name` annotation.
        """
        annotations = ""
        name = param.name
        if name in self.reserved:
            annotations = f'@Name("{name}") '
            name += "_"
        return annotations + self.project_type(param.type) + " " + name

    def parameters(self, member: DefinedMember) -> str:
        return ", ".join(self.parameter_declaration(p) for p in member.parameters)

    def method_declaration(self, member: DefinedMember) -> str:
        return (
            f"@{member.container_type} {self.project_type(member.type)} "
            f"{member.name}({self.parameters(member)});"
        )

    def field_declaration(self, member: DefinedMember) -> str:
        return f"{self.project_type(member.type)} {member.name};"

    def project(self, member: DefinedMember) -> Declarations:
        return Declarations(
            method=self.method_declaration(member),
            field=self.field_declaration(member),
        )
