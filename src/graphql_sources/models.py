"""Data model shared by the loaders and the processing pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Union

from graphql import (
    DocumentNode,
    FragmentDefinitionNode,
    OperationDefinitionNode,
    print_ast,
)

ExecutableDefinition = Union[OperationDefinitionNode, FragmentDefinitionNode]


@dataclass(frozen=True)
class RawSource:
    """A GraphQL document as handed over by the host."""

    raw_text: Optional[str]
    """Raw document text, possibly several definitions packed with the separator."""

    document: Optional[DocumentNode] = None
    """Parsed syntax tree of ``raw_text``."""

    location: Optional[str] = None
    """Opaque origin of the source (usually a file path)."""


@dataclass(frozen=True)
class OperationOrFragment:
    """A named operation or fragment picked out of a source."""

    initial_name: str
    """Generated identifier, e.g. ``FooDocument`` or ``BarFragmentDoc``."""

    definition: ExecutableDefinition
    """The AST node the name was derived from."""

    @property
    def kind(self) -> str:
        """AST kind of the definition (``operation_definition`` or ``fragment_definition``)."""
        return self.definition.kind

    @property
    def name(self) -> str:
        """Name of the definition as written in the document."""
        return self.definition.name.value

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON output."""
        return {
            "initial_name": self.initial_name,
            "kind": self.kind,
            "name": self.name,
            "definition": print_ast(self.definition),
        }


@dataclass(frozen=True)
class SourceWithOperations:
    """A retained source together with the definitions extracted from it."""

    source: RawSource
    operations: list[OperationOrFragment] = field(default_factory=list)
    identifier: str = ""
    """Short content hash prefix the source is keyed by."""

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON output."""
        return {
            "identifier": self.identifier,
            "location": self.source.location,
            "raw_text": self.source.raw_text,
            "operations": [operation.to_dict() for operation in self.operations],
        }
