"""Source expander - splits packed sources into one source per definition."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Optional

from graphql import DocumentNode, parse
from graphql.error import GraphQLSyntaxError

from .errors import DefinitionMismatchError, MissingDataError, SourceLoadError
from .models import RawSource

logger = logging.getLogger(__name__)

SEPARATOR = "\n#-#\n"
"""Marker placed between definitions packed into a single source text."""


def expand_sources(sources: Iterable[RawSource]) -> list[RawSource]:
    """
    Split every packed source into one source per definition.

    Segment ``i`` of the raw text is paired with ``document.definitions[i]``;
    the location is copied unchanged. Output keeps the input order, with the
    segments of each source emitted contiguously.

    Args:
        sources: Raw sources as received from the host

    Returns:
        Expanded list of single-definition sources

    Raises:
        MissingDataError: A source has no raw text or no parsed document
        DefinitionMismatchError: Segment and definition counts differ
    """
    expanded: list[RawSource] = []

    for source in sources:
        if source.document is None:
            raise MissingDataError("source has no parsed document", source.location)
        if source.raw_text is None:
            raise MissingDataError("source has no raw text", source.location)

        segments = source.raw_text.split(SEPARATOR)
        definitions = source.document.definitions

        if len(segments) != len(definitions):
            raise DefinitionMismatchError(
                len(segments), len(definitions), source.location
            )

        for segment, definition in zip(segments, definitions):
            expanded.append(
                RawSource(
                    raw_text=segment,
                    document=DocumentNode(definitions=(definition,)),
                    location=source.location,
                )
            )

    logger.debug("Expanded sources into %d definition sources", len(expanded))
    return expanded


def pack_documents(chunks: Iterable[str], location: Optional[str] = None) -> RawSource:
    """
    Pack GraphQL text chunks into a single source, one segment per definition.

    Each chunk is parsed and the source text of every definition it contains
    is joined with ``SEPARATOR``. A ``#-#`` comment line inside a definition
    is shortened to ``#`` so it cannot be taken for the separator. The packed
    text is parsed again so that its definitions line up with the segments
    ``expand_sources`` produces.

    Args:
        chunks: GraphQL documents (each may hold several definitions)
        location: Origin recorded on the resulting source

    Returns:
        A packed RawSource

    Raises:
        SourceLoadError: A chunk (or the packed text) is not valid GraphQL
    """
    segments: list[str] = []

    for chunk in chunks:
        document = _parse(chunk, location)
        for definition in document.definitions:
            segments.append(_escape_separator(chunk[definition.loc.start:definition.loc.end]))

    packed = SEPARATOR.join(segments)
    return RawSource(raw_text=packed, document=_parse(packed, location), location=location)


def _escape_separator(segment: str) -> str:
    """Rewrite ``#-#`` comment lines in a definition to a bare ``#``."""
    while SEPARATOR in segment:
        segment = segment.replace(SEPARATOR, "\n#\n")
    return segment


def _parse(text: str, location: Optional[str]) -> DocumentNode:
    """Parse GraphQL text, wrapping syntax errors with the source location."""
    try:
        return parse(text)
    except GraphQLSyntaxError as e:
        raise SourceLoadError(location, e) from e
