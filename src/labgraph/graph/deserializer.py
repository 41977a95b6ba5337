"""DomainFile - Read documentation files from disk.

This module provides the infrastructure for turning files and
directories into parsed Documents.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from pathlib import Path

from labgraph.graph.diagnostics import DiagnosticLog, WarningKind
from labgraph.graph.document import Document
from labgraph.graph.parsers import DocumentValidationError, FrontmatterParser

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DomainContext:
    """A file being deserialized.

    Attributes:
        source_id: Path of the file as text, kept on the parsed document.
    """

    source_id: str


class DomainFile:
    """Deserializer for files and directories.

    Can deserialize:
    - A single file
    - All matching files in a directory
    """

    def __init__(
        self,
        path: Path | str,
        patterns: list[str] | None = None,
        recursive: bool = True,
        skip_dirs: list[str] | None = None,
        skip_files: list[str] | None = None,
    ) -> None:
        """Initialize file deserializer.

        Args:
            path: Path to file or directory.
            patterns: Glob patterns for directory (default: ["*.md"]).
            recursive: Whether to search subdirectories.
            skip_dirs: Directory names to skip (e.g., ["drafts"]).
            skip_files: File names to skip (e.g., ["README.md"]).
        """
        self.path = Path(path)
        self.patterns = patterns or ["*.md"]
        self.recursive = recursive
        self.skip_dirs = skip_dirs or []
        self.skip_files = skip_files or []

    def _should_skip(self, file_path: Path) -> bool:
        """Check if a file should be skipped based on skip_dirs and skip_files."""
        if file_path.name in self.skip_files:
            return True
        try:
            parts = file_path.relative_to(self.path).parts[:-1]
        except ValueError:
            parts = file_path.parts[:-1]
        return any(part in self.skip_dirs for part in parts)

    def iterate_sources(self) -> Iterator[tuple[DomainContext, str]]:
        """Iterate over file sources.

        Yields:
            Tuples of (DomainContext, file_content), sorted by path.
        """
        if self.path.is_file():
            if not self._should_skip(self.path):
                yield self._read_file(self.path)
        elif self.path.is_dir():
            seen: set[Path] = set()
            for pattern in self.patterns:
                file_iter = self.path.rglob(pattern) if self.recursive else self.path.glob(pattern)
                for file_path in sorted(file_iter):
                    if file_path in seen:
                        continue
                    seen.add(file_path)
                    if file_path.is_file() and not self._should_skip(file_path):
                        yield self._read_file(file_path)
        else:
            logger.warning("Documentation path not found: %s", self.path)

    def _read_file(self, file_path: Path) -> tuple[DomainContext, str]:
        content = file_path.read_text(encoding="utf-8")
        ctx = DomainContext(source_id=str(file_path))
        return ctx, content

    def deserialize(
        self,
        parser: FrontmatterParser | None = None,
        diagnostics: DiagnosticLog | None = None,
    ) -> Iterator[Document]:
        """Parse every source into a Document.

        A file that fails validation is logged, recorded as an
        invalid-document warning and skipped.

        Args:
            parser: Parser to use (default FrontmatterParser()).
            diagnostics: Optional log shared with the graph build.

        Yields:
            Documents in path order.
        """
        parser = parser or FrontmatterParser()
        log = diagnostics if diagnostics is not None else DiagnosticLog()
        for ctx, content in self.iterate_sources():
            try:
                yield parser.parse(content, ctx.source_id, log)
            except DocumentValidationError as e:
                logger.error("Error parsing %s: %s", ctx.source_id, e)
                log.warn(
                    WarningKind.INVALID_DOCUMENT,
                    ctx.source_id,
                    "; ".join(e.errors),
                    locations=(ctx.source_id,),
                    level=logging.DEBUG,
                )


def load_documents(
    paths: Iterable[Path | str],
    patterns: list[str] | None = None,
    skip_dirs: list[str] | None = None,
    skip_files: list[str] | None = None,
    diagnostics: DiagnosticLog | None = None,
) -> list[Document]:
    """Load and parse documents from several files or directories.

    Args:
        paths: Files or directories, read in the given order.
        patterns: Glob patterns for directories.
        skip_dirs: Directory names to skip.
        skip_files: File names to skip.
        diagnostics: Optional log receiving parse warnings.

    Returns:
        Parsed documents; invalid files are left out.
    """
    documents: list[Document] = []
    for path in paths:
        domain_file = DomainFile(
            path,
            patterns=patterns,
            recursive=True,
            skip_dirs=skip_dirs,
            skip_files=skip_files,
        )
        loaded = list(domain_file.deserialize(diagnostics=diagnostics))
        logger.info("Parsed %d documents from %s", len(loaded), path)
        documents.extend(loaded)
    return documents


__all__ = ["DomainContext", "DomainFile", "load_documents"]
