"""Generator configuration.

A single immutable ``GeneratorConfig`` is built once per run and handed to
the extractor and writer at construction.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from types import MappingProxyType

from .ir import ArtifactCategory
from .scalars import DEFAULT_SCALAR_MAP, ScalarMap

# Root container names and placeholders that never become object types
RESERVED_NAMES = frozenset({"Query", "Mutation", "Subscription", "root"})

OUTPUT_DIRECTORIES: Mapping[ArtifactCategory, str] = MappingProxyType({
    ArtifactCategory.INPUT: "inputs",
    ArtifactCategory.ENUM: "types",
    ArtifactCategory.TYPE: "types",
    ArtifactCategory.QUERY: "resolvers/queries",
    ArtifactCategory.MUTATION: "resolvers/mutations",
})


@dataclass(frozen=True)
class GeneratorConfig:
    """Settings shared by every stage of the pipeline."""
    scalar_map: ScalarMap = field(default_factory=lambda: DEFAULT_SCALAR_MAP)
    reserved_names: frozenset[str] = RESERVED_NAMES
    query_root: str = "Query"
    mutation_root: str = "Mutation"
    file_extension: str = ".ts"
    directories: Mapping[ArtifactCategory, str] = field(
        default_factory=lambda: OUTPUT_DIRECTORIES
    )

    def root_name(self, category: ArtifactCategory) -> str:
        """Return the root container name for an operation category."""
        if category is ArtifactCategory.QUERY:
            return self.query_root
        if category is ArtifactCategory.MUTATION:
            return self.mutation_root
        raise ValueError(f"{category.value} is not an operation category")

    def with_scalars(self, overrides: Mapping[str, str]) -> "GeneratorConfig":
        """Return a copy whose scalar map includes ``overrides``."""
        return replace(self, scalar_map=self.scalar_map.with_overrides(overrides))
