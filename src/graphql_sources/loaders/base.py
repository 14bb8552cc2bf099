"""Base loader interface for reading GraphQL sources from files."""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional

from ..expander import pack_documents
from ..models import RawSource


class BaseLoader(ABC):
    """Abstract base class for source loaders."""

    extensions: list[str] = []
    """File extensions this loader handles (e.g., ['.graphql'])."""

    @abstractmethod
    def extract(self, file_path: Path, content: str) -> list[str]:
        """
        Extract the GraphQL documents contained in file content.

        Args:
            file_path: Path to the source file
            content: Raw content of the file

        Returns:
            GraphQL document texts in file order
        """
        ...

    def load(self, file_path: Path, content: str) -> Optional[RawSource]:
        """
        Load file content as a single packed source.

        Args:
            file_path: Path to the source file
            content: Raw content of the file

        Returns:
            Packed RawSource, or None if the file holds no GraphQL

        Raises:
            SourceLoadError: Extracted GraphQL could not be parsed
        """
        chunks = [chunk for chunk in self.extract(file_path, content) if chunk.strip()]
        if not chunks:
            return None

        return pack_documents(chunks, location=str(file_path))

    def can_handle(self, file_path: Path) -> bool:
        """
        Check if this loader can handle the given file.

        Args:
            file_path: Path to check

        Returns:
            True if this loader should handle the file
        """
        return file_path.suffix.lower() in self.extensions
