"""Tests for named definition extraction."""

from graphql import DocumentNode, NameNode, OperationDefinitionNode, OperationType, parse

from graphql_sources.definitions import extract_operations, initial_name
from graphql_sources.models import RawSource


def first_definition(text):
    return parse(text).definitions[0]


class TestInitialName:
    """Test generated identifiers for definitions."""

    def test_named_query(self):
        assert initial_name(first_definition("query Foo { id }")) == "FooDocument"

    def test_named_mutation_and_subscription(self):
        assert initial_name(first_definition("mutation Save { save }")) == "SaveDocument"
        assert initial_name(first_definition("subscription Tick { tick }")) == "TickDocument"

    def test_fragment(self):
        assert initial_name(first_definition("fragment Bar on T { x }")) == "BarFragmentDoc"

    def test_anonymous_operation(self):
        assert initial_name(first_definition("{ id }")) is None
        assert initial_name(first_definition("query { id }")) is None

    def test_empty_name_is_treated_as_missing(self):
        definition = OperationDefinitionNode(
            operation=OperationType.QUERY,
            name=NameNode(value=""),
            variable_definitions=(),
            directives=(),
            selection_set=first_definition("{ id }").selection_set,
        )
        assert initial_name(definition) is None

    def test_type_definition_is_ignored(self):
        assert initial_name(first_definition("type Query { id: ID }")) is None


class TestExtractOperations:
    """Test extraction over keyed sources."""

    def test_extracts_in_document_order(self):
        document = parse("fragment F on T { x }\nquery Q { id }")
        source = RawSource(raw_text="packed", document=document, location="a.graphql")

        results = extract_operations({"ab": source})

        assert len(results) == 1
        assert results[0].identifier == "ab"
        assert results[0].source is source
        assert [op.initial_name for op in results[0].operations] == ["FFragmentDoc", "QDocument"]
        assert results[0].operations[0].definition is document.definitions[0]

    def test_anonymous_only_source_is_dropped(self):
        anonymous = RawSource(raw_text="{ id }", document=parse("{ id }"))
        named = RawSource(raw_text="query Foo { id }", document=parse("query Foo { id }"))

        results = extract_operations({"a": anonymous, "b": named})

        assert [result.identifier for result in results] == ["b"]

    def test_schema_only_source_is_dropped(self):
        source = RawSource(raw_text="type Query { id: ID }", document=parse("type Query { id: ID }"))

        assert extract_operations({"a": source}) == []

    def test_source_without_definitions_is_dropped(self):
        source = RawSource(raw_text="", document=DocumentNode(definitions=()))

        assert extract_operations({"a": source}) == []

    def test_anonymous_definitions_are_skipped_but_named_kept(self):
        document = parse("{ id }\nquery Named { id }")
        source = RawSource(raw_text="mixed", document=document)

        results = extract_operations({"a": source})

        assert [op.initial_name for op in results[0].operations] == ["NamedDocument"]

    def test_order_follows_mapping(self):
        sources = {
            key: RawSource(raw_text=text, document=parse(text))
            for key, text in [("c", "query C { c }"), ("a", "query A { a }"), ("b", "query B { b }")]
        }

        results = extract_operations(sources)

        assert [result.identifier for result in results] == ["c", "a", "b"]

    def test_to_dict(self):
        source = RawSource(raw_text="query Foo { id }", document=parse("query Foo { id }"), location="foo.graphql")

        data = extract_operations({"7": source})[0].to_dict()

        assert data["identifier"] == "7"
        assert data["location"] == "foo.graphql"
        assert data["raw_text"] == "query Foo { id }"
        assert data["operations"][0]["initial_name"] == "FooDocument"
        assert data["operations"][0]["name"] == "Foo"
        assert data["operations"][0]["kind"] == "operation_definition"
        assert "query Foo" in data["operations"][0]["definition"]
