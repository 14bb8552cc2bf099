"""Tests for content-hash deduplication."""

import hashlib

from graphql_sources.dedup import content_hash, deduplicate_sources


class TestContentHash:
    """Test hashing of source text."""

    def test_sha256_hex_digest(self):
        expected = hashlib.sha256("query Foo { id }".encode("utf-8")).hexdigest()

        assert content_hash("query Foo { id }") == expected
        assert len(content_hash("query Foo { id }")) == 64

    def test_hash_is_stable_across_calls(self):
        assert content_hash("query A { a }") == content_hash("query A { a }")

    def test_unicode_text_is_hashed_as_utf8(self):
        text = 'query Ünïcode { field(arg: "✓") }'
        assert content_hash(text) == hashlib.sha256(text.encode("utf-8")).hexdigest()


class TestDeduplicateSources:
    """Test removal of sources with identical text."""

    def test_identical_text_keeps_first_location(self, source_factory):
        first = source_factory("query Foo { id }", location="a.graphql")
        second = source_factory("query Foo { id }", location="b.graphql")

        hashed = deduplicate_sources([first, second])

        assert len(hashed) == 1
        digest, source = hashed[0]
        assert digest == content_hash("query Foo { id }")
        assert source is first

    def test_whitespace_differences_are_kept(self, source_factory):
        compact = source_factory("query Foo { id }")
        spaced = source_factory("query Foo {  id }")

        hashed = deduplicate_sources([compact, spaced])

        assert [source for _, source in hashed] == [compact, spaced]

    def test_first_seen_order_is_preserved(self, source_factory):
        a = source_factory("query A { a }")
        b = source_factory("query B { b }")
        c = source_factory("query C { c }")

        hashed = deduplicate_sources([b, a, b, c, a])

        assert [source for _, source in hashed] == [b, a, c]

    def test_deduplication_is_idempotent(self, source_factory):
        sources = [
            source_factory("query A { a }"),
            source_factory("query B { b }"),
            source_factory("query A { a }"),
        ]

        once = deduplicate_sources(sources)
        twice = deduplicate_sources([source for _, source in once])

        assert twice == once

    def test_empty_input(self):
        assert deduplicate_sources([]) == []
