"""Scalar mapping from GraphQL type names to TypeScript primitives.

Example usage:
    from gql_tsgen.core.scalars import DEFAULT_SCALAR_MAP

    DEFAULT_SCALAR_MAP.map("Int")       # "number"
    DEFAULT_SCALAR_MAP.map("Product")   # "Product" (reference to a generated type)

    # Add a custom scalar without touching the defaults
    scalars = DEFAULT_SCALAR_MAP.with_overrides({"Upload": "File"})
"""

from collections.abc import Iterator, Mapping
from types import MappingProxyType

DEFAULT_SCALARS: Mapping[str, str] = MappingProxyType({
    "ID": "string",
    "String": "string",
    "Float": "number",
    "Int": "number",
    "Boolean": "boolean",
    "DateTime": "Date",
    "Dictionary": "{ [key: string]: any }",
})


class ScalarMap(Mapping):
    """Read-only table of scalar names to target type names.

    Lookups through ``map`` are total: names missing from the table are
    returned unchanged, since they refer to another generated artifact.
    """

    def __init__(self, table: Mapping[str, str] | None = None):
        self._table = MappingProxyType(dict(DEFAULT_SCALARS if table is None else table))

    def __getitem__(self, name: str) -> str:
        return self._table[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._table)

    def __len__(self) -> int:
        return len(self._table)

    def __repr__(self) -> str:
        return f"ScalarMap({dict(self._table)!r})"

    def map(self, name: str) -> str:
        """Return the target type for ``name``, or ``name`` itself if unknown."""
        return self._table.get(name, name)

    def is_scalar(self, name: str) -> bool:
        """Check if ``name`` maps to a primitive rather than an artifact."""
        return name in self._table

    def with_overrides(self, overrides: Mapping[str, str]) -> "ScalarMap":
        """Return a new map with ``overrides`` added or replacing entries."""
        table = dict(self._table)
        table.update(overrides)
        return ScalarMap(table)


DEFAULT_SCALAR_MAP = ScalarMap()
