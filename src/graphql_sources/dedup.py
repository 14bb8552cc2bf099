"""Content deduplicator - drops sources whose raw text was already seen."""

from __future__ import annotations

import hashlib
import logging
from collections.abc import Iterable

from .models import RawSource

logger = logging.getLogger(__name__)

HASH_ALGORITHM = "sha256"


def content_hash(text: str) -> str:
    """
    Hash source text with a fresh digest.

    Args:
        text: Raw source text

    Returns:
        Lowercase hex digest (64 characters for SHA-256)
    """
    hasher = hashlib.new(HASH_ALGORITHM)
    hasher.update(text.encode("utf-8"))
    return hasher.hexdigest()


def deduplicate_sources(sources: Iterable[RawSource]) -> list[tuple[str, RawSource]]:
    """
    Keep the first source for every distinct raw text.

    Only byte-identical texts are considered duplicates; whitespace or
    formatting differences produce distinct hashes.

    Args:
        sources: Expanded sources in traversal order

    Returns:
        ``(hash, source)`` pairs in first-seen order
    """
    seen: dict[str, RawSource] = {}
    skipped = 0

    for source in sources:
        digest = content_hash(source.raw_text)
        if digest in seen:
            skipped += 1
            continue
        seen[digest] = source

    if skipped:
        logger.debug("Dropped %d duplicate sources", skipped)

    return list(seen.items())
