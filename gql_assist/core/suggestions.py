"""Completion suggestions built from the schema.

Two places get suggestions: a typesafe client API interface, which is
offered the `Query` and `Mutation` fields as annotated methods, and a class
named after a schema type, which is offered that type's members as
fields. Members the class already declares are left out.
"""

from collections.abc import Iterable
from dataclasses import dataclass
from itertools import chain

from .ir import DefinedMember
from .projector import JavaProjector
from .schema import Schema

OPERATION_TYPES = ("Query", "Mutation")


@dataclass(frozen=True)
class Suggestion:
    """One completion entry.

    Attributes:
        lookup: The text inserted when the suggestion is chosen
        presentable: The member name shown in the list
        tail: The description, shown after the name
        type_text: Where the member comes from, e.g. "GraphQL Query"
    """
    lookup: str
    presentable: str
    tail: str
    type_text: str


class SuggestionProvider:
    """Builds suggestions for client APIs and type classes."""

    def __init__(self, schema: Schema, projector: JavaProjector | None = None):
        self.schema = schema
        self.projector = projector or JavaProjector()

    def api_suggestions(self, existing: Iterable[str] = ()) -> list[Suggestion]:
        """Method declarations for the operations not yet in the API."""
        snapshot = self.schema.snapshot()
        if snapshot is None:
            return []
        existing = set(existing)
        members = chain.from_iterable(snapshot.members(name) for name in OPERATION_TYPES)
        return [
            self._suggestion(self.projector.method_declaration(member), member)
            for member in members
            if member.name not in existing
        ]

    def type_suggestions(self, type_name: str, existing: Iterable[str] = ()) -> list[Suggestion]:
        """Field declarations for the members a type class does not declare yet."""
        if type_name not in self.schema.type_names():
            return []
        existing = set(existing)
        return [
            self._suggestion(self.projector.field_declaration(member), member)
            for member in self.schema.fields_in(type_name)
            if member.name not in existing
        ]

    @staticmethod
    def _suggestion(lookup: str, member: DefinedMember) -> Suggestion:
        return Suggestion(
            lookup=lookup,
            presentable=member.name,
            tail=" " + member.description,
            type_text="GraphQL " + member.container_type,
        )
