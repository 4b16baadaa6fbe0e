"""Intermediate Representation (IR) for generated artifacts.

This module defines dataclasses that describe each artifact the generator
emits (object types, inputs, enums and operations) together with the
canonical type descriptor their fields and arguments resolve to.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class ArtifactCategory(str, Enum):
    """Kind of generated artifact, in generation order."""

    INPUT = "input"
    ENUM = "enum"
    TYPE = "type"
    QUERY = "query"
    MUTATION = "mutation"

    @property
    def template_name(self) -> str:
        """Name of the template shared by every artifact of this category."""
        if self in (ArtifactCategory.QUERY, ArtifactCategory.MUTATION):
            return "operation"
        return self.value

    @property
    def is_operation(self) -> bool:
        return self in (ArtifactCategory.QUERY, ArtifactCategory.MUTATION)


# Fixed processing order: inputs, enums, object types, queries, mutations
CATEGORY_ORDER = (
    ArtifactCategory.INPUT,
    ArtifactCategory.ENUM,
    ArtifactCategory.TYPE,
    ArtifactCategory.QUERY,
    ArtifactCategory.MUTATION,
)


@dataclass(frozen=True)
class IRTypeRef:
    """Canonical shape of a field, argument or operation result type."""
    base_name: str
    nullable: bool = True
    is_array: bool = False


@dataclass
class IRField:
    """Represents a field of an object/input type or an operation argument."""
    name: str
    type_ref: IRTypeRef
    mapped_type: str
    description: str | None = None

    def to_template_data(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "graphql_type": self.type_ref.base_name,
            "type": self.mapped_type,
            "is_nullable": self.type_ref.nullable,
            "is_array": self.type_ref.is_array,
        }


@dataclass
class IREnumValue:
    """Represents a single value in a GraphQL enum."""
    name: str
    description: str | None = None


@dataclass
class IRObjectType:
    """Represents a GraphQL object type that is not a root container."""
    name: str
    fields: list[IRField]
    description: str | None = None

    category = ArtifactCategory.TYPE

    def referenced_types(self) -> set[str]:
        return {f.type_ref.base_name for f in self.fields}

    def to_template_data(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "fields": [f.to_template_data() for f in self.fields],
        }


@dataclass
class IRInputType(IRObjectType):
    """Represents a GraphQL input object type."""

    category = ArtifactCategory.INPUT


@dataclass
class IREnum:
    """Represents a GraphQL enum type."""
    name: str
    values: list[IREnumValue]
    description: str | None = None

    category = ArtifactCategory.ENUM

    def referenced_types(self) -> set[str]:
        return set()

    def to_template_data(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "values": [
                {"name": v.name, "description": v.description} for v in self.values
            ],
        }


@dataclass
class IROperation:
    """Represents a single field of the query or mutation root."""
    name: str
    operation_type: ArtifactCategory  # QUERY or MUTATION
    type_ref: IRTypeRef
    mapped_type: str
    arguments: list[IRField] = field(default_factory=list)
    description: str | None = None

    @property
    def category(self) -> ArtifactCategory:
        return self.operation_type

    def referenced_types(self) -> set[str]:
        names = {self.type_ref.base_name}
        names.update(a.type_ref.base_name for a in self.arguments)
        return names

    def to_template_data(self) -> dict[str, Any]:
        arguments = [a.to_template_data() for a in self.arguments]
        return {
            "name": self.name,
            "description": self.description,
            "operation_type": self.operation_type.value,
            "graphql_type": self.type_ref.base_name,
            "type": self.mapped_type,
            "is_nullable": self.type_ref.nullable,
            "is_array": self.type_ref.is_array,
            "arguments": arguments,
            "has_arguments": len(arguments) > 0,
        }


IRArtifact = IRObjectType | IRInputType | IREnum | IROperation


@dataclass
class IRArtifactSet:
    """All artifacts extracted from one schema document, grouped by category."""
    inputs: list[IRInputType] = field(default_factory=list)
    enums: list[IREnum] = field(default_factory=list)
    types: list[IRObjectType] = field(default_factory=list)
    queries: list[IROperation] = field(default_factory=list)
    mutations: list[IROperation] = field(default_factory=list)

    def by_category(self, category: ArtifactCategory) -> list:
        """Return the artifact list holding the given category."""
        return {
            ArtifactCategory.INPUT: self.inputs,
            ArtifactCategory.ENUM: self.enums,
            ArtifactCategory.TYPE: self.types,
            ArtifactCategory.QUERY: self.queries,
            ArtifactCategory.MUTATION: self.mutations,
        }[category]

    @property
    def all_artifacts(self) -> list[IRArtifact]:
        """Return every artifact in generation order."""
        result: list[IRArtifact] = []
        for category in CATEGORY_ORDER:
            result.extend(self.by_category(category))
        return result

    def __len__(self) -> int:
        return len(self.all_artifacts)
