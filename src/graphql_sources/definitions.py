"""Definition extractor - collects named operations and fragments per source."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Optional

from graphql import DefinitionNode, FragmentDefinitionNode, OperationDefinitionNode

from .models import OperationOrFragment, RawSource, SourceWithOperations

logger = logging.getLogger(__name__)

OPERATION_SUFFIX = "Document"
FRAGMENT_SUFFIX = "FragmentDoc"


def initial_name(definition: DefinitionNode) -> Optional[str]:
    """
    Build the generated identifier for a definition.

    Args:
        definition: Any top-level document definition

    Returns:
        ``<Name>FragmentDoc`` for fragments, ``<Name>Document`` for operations,
        None for other kinds and for anonymous definitions
    """
    if not isinstance(definition, (OperationDefinitionNode, FragmentDefinitionNode)):
        return None

    # Empty names are treated the same as missing ones
    if definition.name is None or not definition.name.value:
        return None

    if isinstance(definition, FragmentDefinitionNode):
        return f"{definition.name.value}{FRAGMENT_SUFFIX}"
    return f"{definition.name.value}{OPERATION_SUFFIX}"


def extract_operations(keyed: Mapping[str, RawSource]) -> list[SourceWithOperations]:
    """
    Extract named definitions from every source.

    Sources without a single named operation or fragment are dropped.

    Args:
        keyed: Sources keyed by short identifier, in first-seen order

    Returns:
        One SourceWithOperations per source that had named definitions
    """
    results: list[SourceWithOperations] = []

    for identifier, source in keyed.items():
        definitions = source.document.definitions if source.document else ()
        operations: list[OperationOrFragment] = []

        for definition in definitions:
            name = initial_name(definition)
            if name is None:
                continue
            operations.append(OperationOrFragment(initial_name=name, definition=definition))

        if not operations:
            logger.debug("Skipping %s: no named definitions", source.location or identifier)
            continue

        results.append(
            SourceWithOperations(source=source, operations=operations, identifier=identifier)
        )

    return results
