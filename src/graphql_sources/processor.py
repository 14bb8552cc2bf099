"""Source processor - runs the expand, dedup, shorten and extract stages."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field

from .dedup import deduplicate_sources
from .definitions import extract_operations
from .expander import expand_sources
from .models import RawSource, SourceWithOperations
from .shortener import MAX_HASH_LENGTH, shorten_hashes

logger = logging.getLogger(__name__)


@dataclass
class ProcessingReport:
    """Result of processing a batch of sources."""

    input_count: int = 0
    expanded_count: int = 0
    retained_count: int = 0
    hash_length: int = 0
    results: list[SourceWithOperations] = field(default_factory=list)

    @property
    def duplicate_count(self) -> int:
        """Number of expanded sources dropped as duplicates."""
        return self.expanded_count - self.retained_count

    @property
    def operation_count(self) -> int:
        """Total number of extracted operations and fragments."""
        return sum(len(result.operations) for result in self.results)

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON output."""
        return {
            "summary": {
                "input_sources": self.input_count,
                "expanded_sources": self.expanded_count,
                "retained_sources": self.retained_count,
                "duplicates": self.duplicate_count,
                "emitted_sources": len(self.results),
                "operations": self.operation_count,
                "hash_length": self.hash_length,
            },
            "sources": [result.to_dict() for result in self.results],
        }


class SourceProcessor:
    """
    Turns raw GraphQL sources into deduplicated, named definitions.

    Performs:
    1. Expansion of packed sources into one source per definition
    2. Deduplication by content hash
    3. Re-keying by the shortest collision-free hash prefix
    4. Extraction of named operations and fragments
    """

    def __init__(self, max_hash_length: int = MAX_HASH_LENGTH) -> None:
        """
        Initialize the processor.

        Args:
            max_hash_length: Upper bound for the identifier prefix search
        """
        self.max_hash_length = max_hash_length

    def process(self, sources: Iterable[RawSource]) -> ProcessingReport:
        """
        Process a batch of sources.

        Any error aborts the whole batch; no partial report is returned.

        Args:
            sources: Raw sources from the host

        Returns:
            Report with stage counts and the extracted results
        """
        sources = list(sources)
        report = ProcessingReport(input_count=len(sources))

        expanded = expand_sources(sources)
        report.expanded_count = len(expanded)

        hashed = deduplicate_sources(expanded)
        report.retained_count = len(hashed)

        report.hash_length, keyed = shorten_hashes(hashed, self.max_hash_length)

        report.results = extract_operations(keyed)

        logger.debug(
            "Processed %d sources: %d expanded, %d retained, %d emitted",
            report.input_count,
            report.expanded_count,
            report.retained_count,
            len(report.results),
        )
        return report


def process_sources(sources: Iterable[RawSource]) -> list[SourceWithOperations]:
    """
    Deduplicate sources and extract their named definitions.

    Args:
        sources: Raw sources from the host

    Returns:
        Retained sources with their operations, in first-seen order
    """
    return SourceProcessor().process(sources).results
