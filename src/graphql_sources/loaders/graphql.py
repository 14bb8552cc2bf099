"""GraphQL file loader - handles .graphql and .gql files."""

from __future__ import annotations

from pathlib import Path

from .base import BaseLoader


class GraphQLLoader(BaseLoader):
    """
    Loader for native GraphQL files.

    The entire file content is treated as a single GraphQL document.
    """

    extensions = [".graphql", ".gql"]

    def extract(self, file_path: Path, content: str) -> list[str]:
        """Return the whole file as one document, or nothing if it is blank."""
        if not content.strip():
            return []

        return [content]
