"""Intermediate Representation (IR) for schema members.

This module defines the dataclasses the projector works on: a tagged
variant for GraphQL type expressions, and the descriptors built from the
fields and input values of a type definition.
"""

from collections.abc import Iterator
from dataclasses import dataclass, field

from graphql import (
    FieldDefinitionNode,
    InputValueDefinitionNode,
    ListTypeNode,
    NamedTypeNode,
    Node,
    NonNullTypeNode,
    print_ast,
)


@dataclass(frozen=True)
class NamedType:
    """A reference to a named type, e.g. `String`."""
    name: str


@dataclass(frozen=True)
class ListOf:
    """A list wrapper, e.g. `[String]`."""
    of_type: "TypeExpression"


@dataclass(frozen=True)
class NonNullOf:
    """A non-null wrapper, e.g. `String!`."""
    of_type: "TypeExpression"


TypeExpression = NamedType | ListOf | NonNullOf


def type_expression(node: Node) -> TypeExpression:
    """Convert a graphql-core type node into a TypeExpression."""
    if isinstance(node, NonNullTypeNode):
        return NonNullOf(type_expression(node.type))
    if isinstance(node, ListTypeNode):
        return ListOf(type_expression(node.type))
    if isinstance(node, NamedTypeNode):
        return NamedType(node.name.value)
    raise TypeError(f"Expected a type node, got {type(node).__name__}")


def named_type(expression: TypeExpression) -> NamedType:
    """Return the terminal named type of an expression."""
    while isinstance(expression, (ListOf, NonNullOf)):
        expression = expression.of_type
    if not isinstance(expression, NamedType):
        raise TypeError(f"Expected a type expression, got {type(expression).__name__}")
    return expression


def _description(node) -> str:
    return node.description.value if node.description else ""


@dataclass(frozen=True)
class Parameter:
    """An argument of a field (an input value definition)."""
    name: str
    type: TypeExpression
    description: str = ""
    # SDL literal of the default, e.g. '10' or '"abc"'
    default_value: str | None = None

    @classmethod
    def of(cls, node: InputValueDefinitionNode) -> "Parameter":
        return cls(
            name=node.name.value,
            type=type_expression(node.type),
            description=_description(node),
            default_value=print_ast(node.default_value) if node.default_value else None,
        )


@dataclass(frozen=True)
class DefinedMember:
    """A field or input value declared in a type.

    Only fields take parameters; for input values `parameters` is empty.
    """
    container_type: str
    name: str
    type: TypeExpression
    description: str = ""
    parameters: tuple[Parameter, ...] = field(default_factory=tuple)
    is_field: bool = True

    @classmethod
    def of(cls, container_type: str, node: Node) -> "DefinedMember":
        """Build a descriptor from a field or input value definition node."""
        if isinstance(node, FieldDefinitionNode):
            return cls(
                container_type=container_type,
                name=node.name.value,
                type=type_expression(node.type),
                description=_description(node),
                parameters=tuple(Parameter.of(arg) for arg in node.arguments or ()),
            )
        if isinstance(node, InputValueDefinitionNode):
            return cls(
                container_type=container_type,
                name=node.name.value,
                type=type_expression(node.type),
                description=_description(node),
                is_field=False,
            )
        raise TypeError(
            f"Expected a field or input value definition, got {type(node).__name__}"
        )


def members_in(type_definition: Node) -> Iterator[DefinedMember]:
    """Yield the members of a type definition or extension, in order.

    Object, interface and input types have members; enums, unions and
    scalars have none.
    """
    container = type_definition.name.value
    for node in getattr(type_definition, "fields", None) or ():
        yield DefinedMember.of(container, node)
