"""Identity indexing of documents by ID."""

from __future__ import annotations

from collections.abc import Iterable

from labgraph.graph.diagnostics import DiagnosticLog, WarningKind
from labgraph.graph.document import Document


def index_by_id(
    documents: Iterable[Document],
    diagnostics: DiagnosticLog | None = None,
) -> dict[str, Document]:
    """Create an index of documents keyed by ID.

    A repeated ID is reported with both source locations and the later
    document replaces the earlier one. ID format is not checked here.

    Args:
        documents: Documents in load order.
        diagnostics: Optional log receiving duplicate-id warnings.

    Returns:
        Dict mapping each ID to the last document supplied with it.
    """
    log = diagnostics if diagnostics is not None else DiagnosticLog()
    index: dict[str, Document] = {}
    for document in documents:
        existing = index.get(document.id)
        if existing is not None:
            log.warn(
                WarningKind.DUPLICATE_ID,
                document.id,
                f"Duplicate document ID found: {document.id}",
                locations=(f"Existing: {existing.location}", f"New: {document.location}"),
            )
        index[document.id] = document
    return index


__all__ = ["index_by_id"]
