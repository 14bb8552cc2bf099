"""Typescript loader - handles GraphQL templates embedded in Typescript files."""

from __future__ import annotations

import re
import textwrap
from pathlib import Path

from .base import BaseLoader


class TypescriptLoader(BaseLoader):
    """
    Loader for Typescript files containing GraphQL in template literals.

    Supports template patterns like:
        export const QUERY = `#graphql
            query { ... }
        `;

    Supports gql patterns like:
        const QUERY = gql`
            query { ... }
        `;

        const QUERY = graphql`
            fragment F on T { ... }
        ` as const;

    Supports call patterns like:
        const QUERY = graphql(`
            query { ... }
        `);

    Interpolations such as ``${FRAGMENT}`` are removed; the referenced
    fragments are picked up from the templates that define them.
    """

    extensions = [".ts", ".tsx"]

    # Template literal starting with a #graphql marker comment
    GRAPHQL_TEMPLATE_PATTERN = re.compile(r"`#graphql\b(.*?)`", re.DOTALL)

    # gql`...` / graphql`...` tagged templates and gql(`...`) / graphql(`...`) calls
    GRAPHQL_TAG_PATTERN = re.compile(r"\b(?:gql|graphql)\s*(?:\(\s*)?`(.*?)`", re.DOTALL)

    INTERPOLATION_PATTERN = re.compile(r"\$\{[^}]*\}")

    def extract(self, file_path: Path, content: str) -> list[str]:
        """
        Extract every GraphQL template from Typescript content.

        Args:
            file_path: Path to the Typescript file
            content: Typescript file content

        Returns:
            Template bodies in the order they appear in the file
        """
        matches: list[re.Match] = []
        for pattern in [self.GRAPHQL_TEMPLATE_PATTERN, self.GRAPHQL_TAG_PATTERN]:
            matches.extend(pattern.finditer(content))
        matches.sort(key=lambda match: match.start())

        templates: list[str] = []
        end = 0

        for match in matches:
            # Skip matches nested inside a template we already took
            if match.start() < end:
                continue
            end = match.end()

            body = self.INTERPOLATION_PATTERN.sub("", match.group(1))
            body = textwrap.dedent(body).strip()
            if body:
                templates.append(body)

        return templates
