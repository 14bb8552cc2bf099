"""Source collector - scans files and loads GraphQL sources."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from .loaders import BaseLoader, GraphQLLoader, TypescriptLoader
from .models import RawSource

logger = logging.getLogger(__name__)


class SourceCollector:
    """
    Collects GraphQL sources from various file types.

    Uses a registry of loaders to handle different file formats. Files are
    visited in sorted order so repeated runs yield the same source order.
    """

    def __init__(self) -> None:
        """Initialize with default loaders."""
        self._loaders: dict[str, BaseLoader] = {}
        self._register_default_loaders()

    def _register_default_loaders(self) -> None:
        """Register the built-in loaders."""
        self.register_loader(GraphQLLoader())
        self.register_loader(TypescriptLoader())

    def register_loader(self, loader: BaseLoader) -> None:
        """
        Register a custom loader.

        Args:
            loader: Loader instance to register
        """
        for ext in loader.extensions:
            self._loaders[ext.lower()] = loader

    def get_loader(self, file_path: Path) -> Optional[BaseLoader]:
        """
        Get the appropriate loader for a file.

        Args:
            file_path: Path to the file

        Returns:
            Loader if one is registered for this file type, None otherwise
        """
        return self._loaders.get(file_path.suffix.lower())

    def collect(
        self,
        paths: list[Path],
        extensions: Optional[list[str]] = None,
    ) -> list[RawSource]:
        """
        Collect all GraphQL sources from the given paths.

        Args:
            paths: List of files or directories to scan
            extensions: Optional list of extensions to filter by (e.g., ['.graphql'])

        Returns:
            One packed source per file that contains GraphQL

        Raises:
            SourceLoadError: A file contains GraphQL that does not parse
        """
        if extensions:
            extensions = [normalize_extension(ext) for ext in extensions]

        files: list[Path] = []
        for path in paths:
            if path.is_file():
                files.append(path)
            elif path.is_dir():
                files.extend(self._scan_directory(path, extensions))

        sources: list[RawSource] = []
        seen: set[Path] = set()

        for file_path in files:
            resolved = file_path.resolve()
            if resolved in seen:
                continue
            seen.add(resolved)

            source = self._process_file(file_path, extensions)
            if source is not None:
                sources.append(source)

        logger.debug("Collected %d sources from %d files", len(sources), len(seen))
        return sources

    def _process_file(
        self,
        file_path: Path,
        extensions: Optional[list[str]] = None,
    ) -> Optional[RawSource]:
        """
        Process a single file.

        Args:
            file_path: Path to the file
            extensions: Optional extension filter

        Returns:
            Packed source, or None if the file is skipped or holds no GraphQL
        """
        if extensions and file_path.suffix.lower() not in extensions:
            return None

        loader = self.get_loader(file_path)
        if not loader:
            return None

        try:
            content = file_path.read_text(encoding="utf-8")
        except UnicodeDecodeError:
            logger.warning("Skipping %s: not valid UTF-8", file_path)
            return None
        except OSError as e:
            logger.warning("Could not read %s: %s", file_path, e)
            return None

        return loader.load(file_path, content)

    def _scan_directory(
        self,
        directory: Path,
        extensions: Optional[list[str]] = None,
    ) -> list[Path]:
        """List matching files below a directory, sorted by path."""
        target_extensions = extensions or list(self._loaders.keys())

        files: set[Path] = set()
        for ext in target_extensions:
            for file_path in directory.rglob(f"*{ext}"):
                if file_path.is_file():
                    files.add(file_path)

        return sorted(files)

    def collect_from_content(
        self,
        content: str,
        file_path: Path,
    ) -> Optional[RawSource]:
        """
        Load a source from provided content (useful for testing or piped input).

        Args:
            content: File content
            file_path: Virtual path for the content (used to determine loader)

        Returns:
            Packed source, or None if the content holds no GraphQL
        """
        loader = self.get_loader(file_path)
        if not loader:
            # Default to the GraphQL loader for unknown types
            loader = GraphQLLoader()

        return loader.load(file_path, content)

    @property
    def supported_extensions(self) -> list[str]:
        """Get list of supported file extensions."""
        return list(self._loaders.keys())


def normalize_extension(ext: str) -> str:
    """Lowercase an extension and make sure it starts with a dot."""
    ext = ext.lower()
    return ext if ext.startswith(".") else f".{ext}"
