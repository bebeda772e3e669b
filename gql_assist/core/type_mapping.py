"""Mapping of GraphQL built-in types to target language types.

Names without a registered mapping pass through unchanged: a GraphQL
`String` or a schema's own `Person` type keep their names in Java.

Example usage:
    from gql_assist.core.type_mapping import TypeMapping, TypeMappingRegistry

    registry = TypeMappingRegistry()
    registry.register("Long", TypeMapping("java.lang.Long"))
    registry.resolve("ID")  # TypeMapping(target_name="String", marker="@Id")
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class TypeMapping:
    """How one GraphQL type name appears in the target language.

    Attributes:
        target_name: The type name to emit (e.g., "Integer")
        marker: An annotation put in front of the whole type (e.g., "@Id")
    """
    target_name: str
    marker: str = ""


class TypeMappingRegistry:
    """Registry of GraphQL type name to target type mappings.

    Example:
        registry = TypeMappingRegistry()
        registry.get("Int").target_name  # "Integer"
    """

    def __init__(self):
        self._mappings: dict[str, TypeMapping] = {}
        self._register_defaults()

    def _register_defaults(self):
        """Register the built-in Java mappings."""
        self.register("Int", TypeMapping("Integer"))
        self.register("ID", TypeMapping("String", marker="@Id"))

    def register(self, sdl_name: str, mapping: TypeMapping):
        """Register a mapping for a GraphQL type name."""
        self._mappings[sdl_name] = mapping

    def get(self, sdl_name: str) -> TypeMapping | None:
        """Get the mapping for a type name, or None if not registered."""
        return self._mappings.get(sdl_name)

    def has(self, sdl_name: str) -> bool:
        return sdl_name in self._mappings

    def resolve(self, sdl_name: str) -> TypeMapping:
        """Get the mapping for a type name, defaulting to the name itself."""
        return self._mappings.get(sdl_name) or TypeMapping(sdl_name)
