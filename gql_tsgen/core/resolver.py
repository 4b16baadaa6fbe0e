"""Normalization of GraphQL type nodes into ``IRTypeRef`` descriptors.

Only four shapes are recognized:

    T          -> (T, nullable, single)
    T!         -> (T, non-null, single)
    [T], [T!]  -> (T, nullable, array)
    [T]!, [T!]! -> (T, non-null, array)

Anything else (``[[T]]``, ``T!!`` built by hand, ...) raises
``UnsupportedTypeShape``.
"""

from graphql import ListTypeNode, NamedTypeNode, NonNullTypeNode, TypeNode, print_ast

from .errors import UnsupportedTypeShape
from .ir import IRTypeRef


def _describe(type_node) -> str:
    if isinstance(type_node, (NamedTypeNode, ListTypeNode, NonNullTypeNode)):
        return print_ast(type_node)
    return repr(type_node)


def _list_item_name(item_node: TypeNode, outer: TypeNode) -> str:
    """Return the element name of a list whose item is ``T`` or ``T!``."""
    if isinstance(item_node, NamedTypeNode):
        return item_node.name.value
    if isinstance(item_node, NonNullTypeNode) and isinstance(item_node.type, NamedTypeNode):
        return item_node.type.name.value
    raise UnsupportedTypeShape(_describe(outer))


def resolve_type(type_node: TypeNode) -> IRTypeRef:
    """Resolve a field or argument type node into its canonical descriptor."""
    if isinstance(type_node, NamedTypeNode):
        return IRTypeRef(type_node.name.value, nullable=True, is_array=False)

    if isinstance(type_node, NonNullTypeNode):
        inner = type_node.type
        if isinstance(inner, NamedTypeNode):
            return IRTypeRef(inner.name.value, nullable=False, is_array=False)
        if isinstance(inner, ListTypeNode):
            return IRTypeRef(
                _list_item_name(inner.type, type_node), nullable=False, is_array=True
            )
        raise UnsupportedTypeShape(_describe(type_node))

    if isinstance(type_node, ListTypeNode):
        return IRTypeRef(
            _list_item_name(type_node.type, type_node), nullable=True, is_array=True
        )

    raise UnsupportedTypeShape(_describe(type_node))
