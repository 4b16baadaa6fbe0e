"""Classification of schema definitions into generated artifacts.

Walks a parsed document once and produces an ``IRArtifactSet``.
"""

import logging
from collections.abc import Iterable

from graphql import (
    DocumentNode,
    EnumTypeDefinitionNode,
    InputObjectTypeDefinitionNode,
    ObjectTypeDefinitionNode,
    TypeNode,
)

from .config import GeneratorConfig
from .errors import DuplicateRootOperation, MissingRootOperation, UnsupportedTypeShape
from .ir import (
    CATEGORY_ORDER,
    ArtifactCategory,
    IRArtifactSet,
    IREnum,
    IREnumValue,
    IRField,
    IRInputType,
    IRObjectType,
    IROperation,
)
from .resolver import resolve_type

logger = logging.getLogger(__name__)


def _description(node) -> str | None:
    return node.description.value if node.description else None


class ArtifactExtractor:
    """Builds artifact records from a GraphQL document AST."""

    def __init__(self, config: GeneratorConfig | None = None):
        self.config = config or GeneratorConfig()

    def extract(
        self,
        document: DocumentNode,
        categories: Iterable[ArtifactCategory] = CATEGORY_ORDER,
    ) -> IRArtifactSet:
        """Extract the requested artifact categories from ``document``.

        Raises:
            MissingRootOperation: an operation category was requested but its
                root type is not defined.
            DuplicateRootOperation: a requested root type is defined twice.
            UnsupportedTypeShape: a field or argument type cannot be resolved.
        """
        wanted = set(categories)
        result = IRArtifactSet()
        roots: dict[str, list[ObjectTypeDefinitionNode]] = {}
        root_names = {self.config.query_root, self.config.mutation_root}

        for definition in document.definitions:
            if isinstance(definition, ObjectTypeDefinitionNode):
                name = definition.name.value
                if name in root_names:
                    roots.setdefault(name, []).append(definition)
                if name in self.config.reserved_names or name in root_names:
                    continue
                if ArtifactCategory.TYPE in wanted:
                    result.types.append(self._process_object_type(definition))
            elif isinstance(definition, InputObjectTypeDefinitionNode):
                if ArtifactCategory.INPUT in wanted:
                    result.inputs.append(self._process_input_type(definition))
            elif isinstance(definition, EnumTypeDefinitionNode):
                if ArtifactCategory.ENUM in wanted:
                    result.enums.append(self._process_enum(definition))

        for category in (ArtifactCategory.QUERY, ArtifactCategory.MUTATION):
            if category not in wanted:
                continue
            root = self._find_root(roots, category)
            result.by_category(category).extend(self._process_operations(root, category))

        logger.debug(
            "Extracted %d inputs, %d enums, %d types, %d queries, %d mutations",
            len(result.inputs),
            len(result.enums),
            len(result.types),
            len(result.queries),
            len(result.mutations),
        )
        return result

    def locate(self, document: DocumentNode) -> dict[str, ArtifactCategory]:
        """Return the category of every type, input and enum in ``document``.

        Fields are not resolved, so this never fails on unsupported shapes.
        """
        root_names = {self.config.query_root, self.config.mutation_root}
        located = {}
        for definition in document.definitions:
            if isinstance(definition, ObjectTypeDefinitionNode):
                name = definition.name.value
                if name not in self.config.reserved_names and name not in root_names:
                    located[name] = ArtifactCategory.TYPE
            elif isinstance(definition, InputObjectTypeDefinitionNode):
                located[definition.name.value] = ArtifactCategory.INPUT
            elif isinstance(definition, EnumTypeDefinitionNode):
                located[definition.name.value] = ArtifactCategory.ENUM
        return located

    def _find_root(
        self, roots: dict[str, list[ObjectTypeDefinitionNode]], category: ArtifactCategory
    ) -> ObjectTypeDefinitionNode:
        root_name = self.config.root_name(category)
        found = roots.get(root_name, [])
        if not found:
            raise MissingRootOperation(root_name, category.value)
        if len(found) > 1:
            raise DuplicateRootOperation(root_name, len(found))
        return found[0]

    def _resolve_field(self, name: str, type_node: TypeNode, description, owner: str) -> IRField:
        type_ref = self._resolve(type_node, f"{owner}.{name}")
        return IRField(
            name=name,
            type_ref=type_ref,
            mapped_type=self.config.scalar_map.map(type_ref.base_name),
            description=description,
        )

    def _resolve(self, type_node: TypeNode, context: str):
        try:
            return resolve_type(type_node)
        except UnsupportedTypeShape as e:
            raise UnsupportedTypeShape(e.type_repr, context) from e

    def _process_fields(self, field_nodes, owner: str) -> list[IRField]:
        """Process field or argument definitions into IRField list."""
        return [
            self._resolve_field(node.name.value, node.type, _description(node), owner)
            for node in field_nodes or ()
        ]

    def _process_object_type(self, node: ObjectTypeDefinitionNode) -> IRObjectType:
        name = node.name.value
        return IRObjectType(
            name=name,
            fields=self._process_fields(node.fields, name),
            description=_description(node),
        )

    def _process_input_type(self, node: InputObjectTypeDefinitionNode) -> IRInputType:
        name = node.name.value
        return IRInputType(
            name=name,
            fields=self._process_fields(node.fields, name),
            description=_description(node),
        )

    def _process_enum(self, node: EnumTypeDefinitionNode) -> IREnum:
        values = [
            IREnumValue(name=v.name.value, description=_description(v))
            for v in node.values or ()
        ]
        return IREnum(
            name=node.name.value,
            values=values,
            description=_description(node),
        )

    def _process_operations(
        self, node: ObjectTypeDefinitionNode, category: ArtifactCategory
    ) -> list[IROperation]:
        """Process the Query or Mutation root into operations."""
        root_name = node.name.value
        operations = []
        for field in node.fields or ():
            op_name = field.name.value
            type_ref = self._resolve(field.type, f"{root_name}.{op_name}")
            operations.append(
                IROperation(
                    name=op_name,
                    operation_type=category,
                    type_ref=type_ref,
                    mapped_type=self.config.scalar_map.map(type_ref.base_name),
                    arguments=self._process_fields(field.arguments, f"{root_name}.{op_name}"),
                    description=_description(field),
                )
            )
        return operations
