"""Type grouping - partition documents by category, newest first."""

from __future__ import annotations

from collections.abc import Iterable

from labgraph.graph.diagnostics import DiagnosticLog, WarningKind
from labgraph.graph.document import DOCUMENT_TYPES, Document


def group_by_type(
    documents: Iterable[Document],
    diagnostics: DiagnosticLog | None = None,
) -> dict[str, list[Document]]:
    """Group documents by their type.

    Every known type gets a bucket, even when empty. Documents with an
    unknown type are left out and reported.

    Args:
        documents: Documents in load order.
        diagnostics: Optional log receiving unknown-type warnings.

    Returns:
        Dict mapping each type name to its documents, sorted by date
        descending. Same-day documents keep their input order.
    """
    log = diagnostics if diagnostics is not None else DiagnosticLog()
    groups: dict[str, list[Document]] = {doc_type: [] for doc_type in DOCUMENT_TYPES}

    for document in documents:
        bucket = groups.get(document.type)
        if bucket is None:
            log.warn(
                WarningKind.UNKNOWN_TYPE,
                document.id,
                f"Unknown document type: {document.type}",
                locations=(document.location,),
            )
            continue
        bucket.append(document)

    # list.sort is stable; reverse=True keeps ties in input order
    for bucket in groups.values():
        bucket.sort(key=lambda d: d.date, reverse=True)

    return groups


__all__ = ["group_by_type"]
