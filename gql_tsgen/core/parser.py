"""GraphQL schema loading using graphql-core.

Reads an SDL document and returns its AST.
"""

import logging

from graphql import DocumentNode, GraphQLSyntaxError, Source, parse

from .errors import ParseError

logger = logging.getLogger(__name__)


def parse_schema(content: str, source_name: str = "GraphQL request") -> DocumentNode:
    """Parse SDL text into a document AST.

    Raises:
        ParseError: if the text is not valid SDL.
    """
    try:
        return parse(Source(content, source_name))
    except GraphQLSyntaxError as e:
        raise ParseError(e.message, source_name) from e


def load_schema(schema_path: str) -> DocumentNode:
    """Read and parse the schema file at ``schema_path``."""
    with open(schema_path, encoding="utf-8") as f:
        content = f.read()
    document = parse_schema(content, schema_path)
    logger.info("Parsed %s (%d definitions)", schema_path, len(document.definitions))
    return document
