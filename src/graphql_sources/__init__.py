"""GraphQL Sources - deduplicate GraphQL documents and extract named definitions."""

from .errors import (
    DefinitionMismatchError,
    HashCollisionError,
    MissingDataError,
    SourceLoadError,
    SourceProcessingError,
)
from .models import OperationOrFragment, RawSource, SourceWithOperations
from .processor import ProcessingReport, SourceProcessor, process_sources

__version__ = "0.1.0"

__all__ = [
    "DefinitionMismatchError",
    "HashCollisionError",
    "MissingDataError",
    "OperationOrFragment",
    "ProcessingReport",
    "RawSource",
    "SourceLoadError",
    "SourceProcessingError",
    "SourceProcessor",
    "SourceWithOperations",
    "process_sources",
]
