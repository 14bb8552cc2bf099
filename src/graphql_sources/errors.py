"""Exceptions raised while loading and processing GraphQL sources."""

from __future__ import annotations

from typing import Optional


class SourceProcessingError(Exception):
    """Base class for all errors raised by graphql-sources."""


class MissingDataError(SourceProcessingError):
    """A source has no raw text or no parsed document."""

    def __init__(self, message: str, location: Optional[str] = None) -> None:
        self.location = location
        if location:
            message = f"{location}: {message}"
        super().__init__(message)


class DefinitionMismatchError(MissingDataError):
    """The packed text segments do not line up with the document definitions."""

    def __init__(
        self,
        segment_count: int,
        definition_count: int,
        location: Optional[str] = None,
    ) -> None:
        self.segment_count = segment_count
        self.definition_count = definition_count
        super().__init__(
            f"source has {segment_count} text segment(s) "
            f"but {definition_count} definition(s)",
            location=location,
        )


class HashCollisionError(SourceProcessingError):
    """No hash prefix within the search bound is unique across all sources."""

    def __init__(self, max_length: int, source_count: int) -> None:
        self.max_length = max_length
        self.source_count = source_count
        super().__init__(
            f"could not find a unique hash prefix of at most {max_length} "
            f"characters for {source_count} sources"
        )


class SourceLoadError(SourceProcessingError):
    """A GraphQL chunk could not be parsed while loading a source."""

    def __init__(self, location: Optional[str], error: Exception) -> None:
        self.location = location
        self.error = error
        prefix = f"{location}: " if location else ""
        super().__init__(f"{prefix}{error}")
