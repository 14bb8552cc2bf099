"""Shared fixtures for graphql-sources tests."""

from typing import Optional

import pytest
from graphql import parse

from graphql_sources.models import RawSource


def make_source(text: str, location: Optional[str] = None) -> RawSource:
    """Build a RawSource with a parsed document."""
    return RawSource(raw_text=text, document=parse(text), location=location)


@pytest.fixture
def source_factory():
    """Provide the make_source helper to tests."""
    return make_source


@pytest.fixture
def graphql_project(tmp_path):
    """A small project with GraphQL and Typescript documents."""
    queries = tmp_path / "queries"
    queries.mkdir()

    (queries / "product.graphql").write_text(
        "fragment ProductFields on Product {\n  id\n  title\n}\n\n"
        "query Product($id: ID!) {\n  product(id: $id) {\n    ...ProductFields\n  }\n}\n"
    )
    (queries / "duplicate.gql").write_text(
        "query Product($id: ID!) {\n  product(id: $id) {\n    ...ProductFields\n  }\n}\n"
    )
    (queries / "empty.graphql").write_text("\n\n")

    components = tmp_path / "components"
    components.mkdir()
    (components / "cart.ts").write_text(
        "import { gql } from '@apollo/client';\n\n"
        "export const CART_QUERY = gql`\n"
        "  query Cart {\n"
        "    cart { id }\n"
        "  }\n"
        "`;\n"
    )
    (components / "readme.md").write_text("query NotCollected { id }\n")

    return tmp_path
