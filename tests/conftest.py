"""Shared fixtures for the test suite."""

from pathlib import Path

import pytest

from gql_tsgen.core.parser import parse_schema

EXAMPLES_DIR = Path(__file__).resolve().parent.parent / "examples"

WIDGET_SCHEMA = '''
"""A thing you can buy"""
type Widget {
    """Unique identifier"""
    id: ID!
    name: String
    tags: [String!]
}

type Query {
    """All widgets"""
    widgets: [Widget!]!
}

type Mutation {
    createWidget(
        """Name of the new widget"""
        input: String!
    ): Widget!
}
'''


@pytest.fixture
def widget_schema():
    """Document for a minimal schema with one type and two operations."""
    return parse_schema(WIDGET_SCHEMA)


@pytest.fixture
def shop_schema_path():
    """Path to the example shop schema."""
    return str(EXAMPLES_DIR / "shop.graphql")
