"""Code generator for GraphQL schemas.

Runs the pipeline Parse -> Extract -> Render -> Write:

    generator = CodeGenerator(FileSystemSink("./generated"))
    files = generator.generate_from_path("schema.graphql")

Every artifact is extracted before the first file is written, so schema
errors (unsupported type shapes, missing root types) never leave a
partially generated tree behind. Write failures do.
"""

import logging
import posixpath
from collections.abc import Iterable

from graphql import DocumentNode

from .config import GeneratorConfig
from .extractor import ArtifactExtractor
from .hooks import HookChain
from .ir import CATEGORY_ORDER, ArtifactCategory, IRArtifact
from .parser import load_schema
from .renderer import JinjaRenderer, Renderer
from .writer import ArtifactWriter, OutputFile, OutputSink

logger = logging.getLogger(__name__)


class CodeGenerator:
    """Generates one TypeScript file per schema artifact."""

    def __init__(
        self,
        sink: OutputSink,
        config: GeneratorConfig | None = None,
        renderer: Renderer | None = None,
        hooks: HookChain | None = None,
    ):
        """Initialize the code generator.

        Args:
            sink: Destination for generated files
            config: Scalar table, root names and output layout
            renderer: Template renderer; defaults to the packaged Jinja2 templates
            hooks: Optional pre/post generation hooks
        """
        self.config = config or GeneratorConfig()
        self.renderer = renderer or JinjaRenderer()
        self.hooks = hooks or HookChain()
        self.extractor = ArtifactExtractor(self.config)
        self.writer = ArtifactWriter(sink, self.config)

    def generate_from_path(
        self,
        schema_path: str,
        categories: Iterable[ArtifactCategory] = CATEGORY_ORDER,
    ) -> list[OutputFile]:
        """Parse the schema file and generate every requested artifact."""
        return self.generate(load_schema(schema_path), categories)

    def generate(
        self,
        document: DocumentNode,
        categories: Iterable[ArtifactCategory] = CATEGORY_ORDER,
    ) -> list[OutputFile]:
        """Generate files for ``document`` and return them in write order.

        Imports point at every type, input and enum defined in the document,
        including categories not generated in this run. Artifacts dropped by
        a pre-generate hook are not imported.
        """
        categories = tuple(categories)
        artifacts = self.extractor.extract(document, categories)
        artifacts = self.hooks.apply_pre(artifacts)

        kept = {artifact.name for artifact in artifacts.all_artifacts}
        locations = {
            name: self.writer.module_path_for(name, category)
            for name, category in self.extractor.locate(document).items()
            if category not in categories or name in kept
        }

        files = []
        for artifact in artifacts.all_artifacts:
            files.append(self._generate_artifact(artifact, locations))
        logger.info("Generated %d files", len(files))
        return files

    def render(self, artifact: IRArtifact, locations: dict[str, str]) -> str:
        """Render ``artifact`` with import paths resolved against ``locations``."""
        data = artifact.to_template_data()
        data["imports"] = self._imports_for(artifact, locations)
        return self.renderer.render(artifact.category.template_name, data)

    def _generate_artifact(self, artifact: IRArtifact, locations: dict[str, str]) -> OutputFile:
        path = self.writer.path_for(artifact)
        content = self.render(artifact, locations)
        content = self.hooks.apply_post(path, content)
        return self.writer.write(artifact, content)

    def _imports_for(self, artifact: IRArtifact, locations: dict[str, str]) -> list[dict[str, str]]:
        """Return the generated artifacts referenced by ``artifact``."""
        own_dir = self.writer.directory_for(artifact)
        imports = []
        for name in sorted(artifact.referenced_types()):
            if name == artifact.name or name not in locations:
                continue
            if self.config.scalar_map.is_scalar(name):
                continue
            path = posixpath.relpath(locations[name], own_dir)
            if not path.startswith("."):
                path = "./" + path
            imports.append({"name": name, "path": path})
        return imports

