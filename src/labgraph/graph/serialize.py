"""Graph Serialization - Export a DocumentGraph to JSON-compatible dicts.

Resolved references and backlinks are written as IDs, never as nested
documents, so the output stays finite when documents reference each
other in cycles.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from labgraph.graph.builder import DocumentGraph
    from labgraph.graph.document import Document


def _ids(documents: list[Document] | None) -> list[str]:
    return [d.id for d in documents or []]


def serialize_document(document: Document, include_content: bool = False) -> dict[str, Any]:
    """Serialize a Document to a JSON-compatible dict.

    Args:
        document: The document to serialize.
        include_content: Whether to include the markdown body.

    Returns:
        Dict suitable for JSON serialization.
    """
    result: dict[str, Any] = {
        "id": document.id,
        "type": document.type,
        "title": document.title,
        "date": document.date,
        "status": document.status,
        "lab": document.lab,
        "authors": list(document.authors),
        "tags": list(document.tags),
        "links": document.links.to_dict(),
        "url": document.url,
    }

    if document.file_path:
        result["file_path"] = document.file_path

    resolved: dict[str, Any] = {}
    if document.project_page is not None:
        resolved["project"] = document.project_page.id
    if document.experiment_page is not None:
        resolved["experiment"] = document.experiment_page.id
    if document.parent_page is not None:
        resolved["parent"] = document.parent_page.id
    if document.enables_pages is not None:
        resolved["enables"] = _ids(document.enables_pages)
    if document.related_pages is not None:
        resolved["related"] = _ids(document.related_pages)
    if resolved:
        result["resolved"] = resolved

    if document.linked_from is not None:
        result["linked_from"] = {
            "milestones": _ids(document.linked_from.milestones),
            "experiments": _ids(document.linked_from.experiments),
            "insights": _ids(document.linked_from.insights),
            "decisions": _ids(document.linked_from.decisions),
            "synthesis": _ids(document.linked_from.synthesis),
            "related": _ids(document.linked_from.related),
        }

    if document.breadcrumbs is not None:
        result["breadcrumbs"] = [crumb.to_dict() for crumb in document.breadcrumbs]

    if include_content:
        result["raw_content"] = document.raw_content

    return result


def serialize_graph(graph: DocumentGraph, include_content: bool = False) -> dict[str, Any]:
    """Serialize a DocumentGraph to a JSON-compatible dict.

    Args:
        graph: The graph to serialize.
        include_content: Whether to include markdown bodies.

    Returns:
        Dict with documents, groups, statistics, digest and warnings.
    """
    documents = {
        doc.id: serialize_document(doc, include_content=include_content)
        for doc in graph.all_documents()
    }
    return {
        "documents": documents,
        "groups": {doc_type: _ids(docs) for doc_type, docs in graph.groups.items()},
        "statistics": graph.statistics.to_dict(),
        "latest": graph.latest.to_dict(),
        "warnings": [
            {
                "kind": w.kind.value,
                "document_id": w.document_id,
                "message": w.message,
                "target_id": w.target_id,
                "locations": list(w.locations),
            }
            for w in graph.diagnostics.iter_entries()
        ],
        "metadata": {
            "total_pages": graph.total_pages,
            "document_count": graph.document_count(),
        },
    }


__all__ = ["serialize_document", "serialize_graph"]
