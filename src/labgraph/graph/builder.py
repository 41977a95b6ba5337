"""Graph Builder - Constructs a DocumentGraph from parsed documents.

This module provides the builder pattern for running every graph stage
in dependency order:

    documents -> identity index -> (groups | relationships)
              -> (links, breadcrumbs, statistics) -> DocumentGraph

Each stage receives the previous stage's index and nothing else touches
it while the stage runs.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

from labgraph.graph.breadcrumbs import generate_breadcrumbs
from labgraph.graph.diagnostics import DiagnosticLog, IntegrityWarning, WarningKind
from labgraph.graph.document import Document, DocumentType
from labgraph.graph.grouper import group_by_type
from labgraph.graph.indexer import index_by_id
from labgraph.graph.linker import DEFAULT_LAYOUT, SiteLayout, process_all_links
from labgraph.graph.metrics import (
    DigestLimits,
    LatestItems,
    Statistics,
    calculate_statistics,
    get_latest_items,
)
from labgraph.graph.resolver import build_relationships

logger = logging.getLogger(__name__)


@dataclass
class DocumentGraph:
    """Container for the complete document graph.

    This is the snapshot handed to a renderer.

    Attributes:
        documents: Documents in load order, duplicates included.
        index: ID to decorated document.
        groups: Type name to documents, newest first.
        statistics: Site-wide counts.
        latest: Most recent documents per category.
        diagnostics: Integrity warnings raised while building.
    """

    documents: list[Document] = field(default_factory=list)
    index: dict[str, Document] = field(default_factory=dict, repr=False)
    groups: dict[str, list[Document]] = field(default_factory=dict, repr=False)
    statistics: Statistics = field(default_factory=Statistics)
    latest: LatestItems = field(default_factory=LatestItems, repr=False)
    diagnostics: DiagnosticLog = field(default_factory=DiagnosticLog, repr=False)

    @property
    def total_pages(self) -> int:
        """Number of documents supplied to the build."""
        return len(self.documents)

    def find_by_id(self, doc_id: str) -> Document | None:
        """Find a document by ID.

        Args:
            doc_id: The document ID to find.

        Returns:
            The indexed Document, or None if not found.
        """
        return self.index.get(doc_id)

    def all_documents(self) -> Iterator[Document]:
        """Iterate indexed documents (one per ID)."""
        yield from self.index.values()

    def documents_by_type(self, doc_type: DocumentType | str) -> list[Document]:
        """Get the group for a type, newest first.

        Args:
            doc_type: A DocumentType or its name.

        Returns:
            The documents of that type (empty for unknown types).
        """
        key = doc_type.value if isinstance(doc_type, DocumentType) else doc_type
        return list(self.groups.get(key, []))

    def document_count(self) -> int:
        """Return the number of distinct document IDs."""
        return len(self.index)

    def warnings(self, kind: WarningKind | None = None) -> list[IntegrityWarning]:
        """Get integrity warnings, optionally of a single kind."""
        if kind is None:
            return list(self.diagnostics.iter_entries())
        return self.diagnostics.by_kind(kind)

    def has_warnings(self) -> bool:
        return bool(self.diagnostics)


def aggregate_documents(
    documents: Iterable[Document],
    diagnostics: DiagnosticLog | None = None,
    limits: DigestLimits | None = None,
) -> DocumentGraph:
    """Aggregate and index documents.

    Runs indexing, grouping, relationship resolution, statistics and the
    latest digest. URLs, link rewriting and breadcrumbs are left to
    GraphBuilder.build().

    Args:
        documents: Documents in load order.
        diagnostics: Optional log shared with the caller.
        limits: Sizes of the latest lists.

    Returns:
        DocumentGraph without link-stage fields.
    """
    documents = list(documents)
    log = diagnostics if diagnostics is not None else DiagnosticLog()

    base_index = index_by_id(documents, log)
    groups = group_by_type(documents, log)
    index = build_relationships(documents, base_index, log)
    statistics = calculate_statistics(groups)
    latest = get_latest_items(groups, limits)

    return DocumentGraph(
        documents=documents,
        index=index,
        groups=groups,
        statistics=statistics,
        latest=latest,
        diagnostics=log,
    )


class GraphBuilder:
    """Builder for constructing a DocumentGraph.

    Usage:
        builder = GraphBuilder()
        for document in documents:
            builder.add_document(document)
        graph = builder.build()
    """

    def __init__(
        self,
        layout: SiteLayout | None = None,
        limits: DigestLimits | None = None,
        diagnostics: DiagnosticLog | None = None,
    ) -> None:
        """Initialize the graph builder.

        Args:
            layout: Site layout used for URLs (defaults to /pages/<id>.html).
            limits: Sizes of the latest lists.
            diagnostics: Log to record into; a fresh one by default.
        """
        self.layout = layout or DEFAULT_LAYOUT
        self.limits = limits or DigestLimits()
        self.diagnostics = diagnostics if diagnostics is not None else DiagnosticLog()
        self._documents: list[Document] = []

    def add_document(self, document: Document) -> None:
        """Queue a document for the build."""
        self._documents.append(document)

    def add_documents(self, documents: Iterable[Document]) -> None:
        for document in documents:
            self.add_document(document)

    def build(self) -> DocumentGraph:
        """Build the final DocumentGraph.

        Returns:
            Graph whose documents carry resolved links, backlinks, URLs,
            rewritten internal links and breadcrumbs.
        """
        graph = aggregate_documents(self._documents, self.diagnostics, self.limits)

        process_all_links(graph.documents, graph.index, graph.diagnostics, self.layout)
        for document in graph.documents:
            document.breadcrumbs = generate_breadcrumbs(document, graph.index, self.layout)

        logger.info(
            "Built graph: %d documents, %d projects (%d active), %d warnings",
            graph.total_pages,
            graph.statistics.total_projects,
            graph.statistics.active_projects,
            len(graph.diagnostics),
        )
        return graph


__all__ = ["DocumentGraph", "GraphBuilder", "aggregate_documents"]
