"""Template rendering for generated artifacts.

The pipeline only depends on the ``Renderer`` protocol. ``JinjaRenderer``
implements it with Jinja2 and supports custom templates:

    renderer = JinjaRenderer(template_dir="./my_templates")

Template lookup order:
1. User's template directory (if provided)
2. Package default templates

Available templates to override:
    - type.ts.j2: object types
    - input.ts.j2: input types
    - enum.ts.j2: enums
    - operation.ts.j2: query and mutation resolvers
"""

import re
from pathlib import Path
from typing import Any, Protocol, runtime_checkable

from jinja2 import (
    ChoiceLoader,
    Environment,
    FileSystemLoader,
    PackageLoader,
    StrictUndefined,
    select_autoescape,
)

TEMPLATE_SUFFIX = ".ts.j2"


def pascal_case(name: str) -> str:
    """Convert camelCase or snake_case to PascalCase."""
    return "".join(word[:1].upper() + word[1:] for word in name.split("_") if word)


def safe_comment(text: str) -> str:
    """Make text safe for a JSDoc block.

    Closing comment markers are broken up and trailing whitespace is removed
    from every line.
    """
    if not text:
        return ""
    text = text.replace("\r", "").replace("*/", "*\\/")
    return "\n".join(line.rstrip() for line in text.strip().split("\n"))


def doc_lines(text: str) -> list[str]:
    """Split a description into lines suitable for `` * `` prefixes."""
    return safe_comment(text).split("\n") if text else []


def ts_type(type_name: str, is_array: bool = False) -> str:
    """Build the TypeScript type expression for a mapped type name."""
    if not is_array:
        return type_name
    # Composite types like "{ [key: string]: any }" need the generic form
    if re.search(r"\W", type_name):
        return f"Array<{type_name}>"
    return f"{type_name}[]"


def ts_field(data: dict[str, Any]) -> str:
    """Build a property or argument declaration from a field record.

    Nullable fields are optional and also accept ``null``.
    """
    type_expr = ts_type(data["type"], data["is_array"])
    if data["is_nullable"]:
        return f"{data['name']}?: {type_expr} | null"
    return f"{data['name']}: {type_expr}"


@runtime_checkable
class Renderer(Protocol):
    """Protocol for turning a template name and data record into text."""

    def render(self, template_name: str, data: dict[str, Any]) -> str:
        """Render ``template_name`` with ``data`` and return the text."""
        ...


class JinjaRenderer:
    """Renders the packaged (or user-supplied) Jinja2 templates."""

    def __init__(self, template_dir: str | None = None):
        """Initialize the renderer.

        Args:
            template_dir: Optional directory with custom Jinja2 templates.
                          Templates here override the built-in templates.
        """
        self.template_dir = template_dir

        # Build template loader - custom templates take precedence
        loaders = []
        if template_dir:
            template_path = Path(template_dir)
            if template_path.is_dir():
                loaders.append(FileSystemLoader(str(template_path)))
        loaders.append(PackageLoader("gql_tsgen", "templates"))

        self.env = Environment(
            loader=ChoiceLoader(loaders),
            autoescape=select_autoescape(),
            undefined=StrictUndefined,
            keep_trailing_newline=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )
        # Register custom filters
        self.env.filters["pascal_case"] = pascal_case
        self.env.filters["safe_comment"] = safe_comment
        self.env.filters["doc_lines"] = doc_lines
        self.env.filters["ts_type"] = ts_type
        self.env.filters["ts_field"] = ts_field

    def render(self, template_name: str, data: dict[str, Any]) -> str:
        template = self.env.get_template(template_name + TEMPLATE_SUFFIX)
        return template.render(data)
