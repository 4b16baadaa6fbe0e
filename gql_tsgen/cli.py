"""Command-line interface for gql-tsgen."""

import logging
from collections import Counter
from pathlib import Path

import click

from .core.config import GeneratorConfig
from .core.generator import CodeGenerator
from .core.hooks import ExcludePrefix, HeaderComment, HookChain
from .core.ir import CATEGORY_ORDER, ArtifactCategory
from .core.renderer import JinjaRenderer
from .core.writer import FileSystemSink, MemorySink


def parse_scalar_overrides(values: tuple[str, ...]) -> dict[str, str]:
    """Parse repeated NAME=TYPE options into a mapping."""
    overrides = {}
    for value in values:
        name, sep, target = value.partition("=")
        if not sep or not name.strip() or not target.strip():
            raise click.BadParameter(
                f"expected NAME=TYPE, got {value!r}", param_hint="--scalar"
            )
        overrides[name.strip()] = target.strip()
    return overrides


@click.group()
@click.version_option()
def main():
    """GraphQL to TypeScript code generator.

    Generate one TypeScript file per type, input, enum and operation
    declared in a GraphQL schema.
    """
    pass


@main.command()
@click.option(
    "--schema",
    "-s",
    required=True,
    type=click.Path(exists=True, dir_okay=False),
    help="Path to GraphQL schema file.",
)
@click.option(
    "--output",
    "-o",
    "--output-directory",
    "output",
    required=True,
    type=click.Path(file_okay=False),
    help="Output directory for generated code.",
)
@click.option(
    "--template-dir",
    "-t",
    type=click.Path(exists=True, file_okay=False),
    help="Directory with templates overriding the built-in ones.",
)
@click.option(
    "--scalar",
    "scalars",
    multiple=True,
    metavar="NAME=TYPE",
    help="Map a GraphQL scalar to a TypeScript type (repeatable).",
)
@click.option(
    "--category",
    "-c",
    "categories",
    multiple=True,
    type=click.Choice([c.value for c in CATEGORY_ORDER]),
    help="Only generate these artifact categories (repeatable).",
)
@click.option(
    "--exclude-prefix",
    help="Skip types, inputs and enums whose name starts with this prefix.",
)
@click.option(
    "--header",
    help="Comment to put at the top of every generated file.",
)
@click.option(
    "--dry-run",
    is_flag=True,
    help="Render everything but only list the files that would be written.",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose output.",
)
def generate(
    schema: str,
    output: str,
    template_dir: str | None,
    scalars: tuple[str, ...],
    categories: tuple[str, ...],
    exclude_prefix: str | None,
    header: str | None,
    dry_run: bool,
    verbose: bool,
):
    """Generate TypeScript code from a GraphQL schema.

    Examples:

        gql-tsgen generate --schema ./schema.graphql --output ./generated

        gql-tsgen generate -s ./schema.graphql -o ./src -c type -c enum

        gql-tsgen generate -s ./schema.graphql -o ./src --scalar Upload=File
    """
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s: %(message)s")

    schema_path = Path(schema).resolve()
    output_path = Path(output).resolve()

    config = GeneratorConfig()
    if scalars:
        config = config.with_scalars(parse_scalar_overrides(scalars))

    hooks = HookChain()
    if exclude_prefix:
        hooks.pre.append(ExcludePrefix(exclude_prefix))
    if header:
        hooks.post.append(HeaderComment(header))

    selected = [ArtifactCategory(c) for c in categories] or list(CATEGORY_ORDER)

    if verbose:
        click.echo(f"Schema: {schema_path}")
        click.echo(f"Output: {output_path}")
        click.echo(f"Categories: {', '.join(c.value for c in selected)}")

    sink = MemorySink() if dry_run else FileSystemSink(str(output_path))
    generator = CodeGenerator(
        sink,
        config=config,
        renderer=JinjaRenderer(template_dir),
        hooks=hooks,
    )

    click.echo("Generating code...")
    files = generator.generate_from_path(str(schema_path), selected)

    if verbose:
        counts = Counter(f.relative_path.rsplit("/", 1)[0] for f in files)
        for directory in sorted(counts):
            click.echo(f"  {directory}/: {counts[directory]}")

    if dry_run:
        for output_file in files:
            click.echo(output_file.relative_path)
        click.echo(f"Dry run: {len(files)} files not written")
    else:
        click.echo(f"Done! Generated {len(files)} files in {output_path}")


if __name__ == "__main__":
    main()
