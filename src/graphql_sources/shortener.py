"""Identifier shortener - re-keys sources by the shortest unique hash prefix."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence

from .errors import HashCollisionError
from .models import RawSource

logger = logging.getLogger(__name__)

MAX_HASH_LENGTH = 32
"""Longest prefix the search will try before giving up."""


def find_hash_length(hashes: Iterable[str], max_length: int = MAX_HASH_LENGTH) -> int:
    """
    Find the smallest prefix length at which all hashes stay distinct.

    Args:
        hashes: Full content hashes, already unique
        max_length: Upper bound for the prefix length

    Returns:
        Minimal prefix length (1 when there are fewer than two hashes)

    Raises:
        HashCollisionError: No length up to ``max_length`` is collision-free
    """
    hashes = list(hashes)

    for length in range(1, max_length + 1):
        seen: set[str] = set()
        for digest in hashes:
            prefix = digest[:length]
            if prefix in seen:
                break
            seen.add(prefix)
        else:
            return length

    raise HashCollisionError(max_length, len(hashes))


def rekey_by_prefix(
    hashed: Sequence[tuple[str, RawSource]],
    hash_length: int,
) -> dict[str, RawSource]:
    """Map ``hash[:hash_length]`` to each source, keeping the input order."""
    return {digest[:hash_length]: source for digest, source in hashed}


def shorten_hashes(
    hashed: Sequence[tuple[str, RawSource]],
    max_length: int = MAX_HASH_LENGTH,
) -> tuple[int, dict[str, RawSource]]:
    """
    Re-key deduplicated sources by their shortest unique hash prefix.

    Args:
        hashed: ``(hash, source)`` pairs from the deduplicator
        max_length: Upper bound for the prefix length

    Returns:
        The chosen prefix length and the ordered mapping of short
        identifier to source
    """
    hash_length = find_hash_length((digest for digest, _ in hashed), max_length)
    logger.debug("Using %d-character identifiers for %d sources", hash_length, len(hashed))
    return hash_length, rekey_by_prefix(hashed, hash_length)
