"""Test helpers for black-box graph testing.

This module provides factories and string conversion helpers for testing
the graph through observable output rather than internal state.
"""

from __future__ import annotations

from labgraph.graph.builder import DocumentGraph, GraphBuilder
from labgraph.graph.document import DOCUMENT_TYPES, Document, DocumentLinks


# === Document Factory ===


def make_document(
    doc_id: str,
    doc_type: str = "project",
    title: str = "",
    date: str = "2024-01-01",
    status: str = "active",
    project: str | None = None,
    experiment: str | None = None,
    parent: str | None = None,
    enables: list[str] | None = None,
    related: list[str] | None = None,
    raw_content: str = "",
    file_path: str | None = None,
    strict_type: bool = True,
) -> Document:
    """Factory for creating test documents.

    Args:
        doc_id: Document ID (e.g., "proj-a")
        doc_type: Document type (project, experiment, ...)
        title: Title (defaults to doc_id if empty)
        date: Date as YYYY-MM-DD
        status: Lifecycle status
        project: links.project
        experiment: links.experiment
        parent: links.parent
        enables: links.enables
        related: links.related
        raw_content: Markdown body
        file_path: Source path (defaults to docs/<id>.md)
        strict_type: Reject unknown types (set False to build bad input)

    Returns:
        Document ready for GraphBuilder.add_document()

    Raises:
        ValueError: If doc_type is unknown and strict_type is set.
    """
    if strict_type and doc_type not in DOCUMENT_TYPES:
        raise ValueError(f"Invalid type '{doc_type}'. Must be one of: {DOCUMENT_TYPES}")

    return Document(
        id=doc_id,
        type=doc_type,
        title=title or doc_id,
        date=date,
        status=status,
        lab="sunrise",
        authors=["A. Researcher"],
        tags=[],
        links=DocumentLinks(
            project=project,
            experiment=experiment,
            parent=parent,
            enables=enables,
            related=related,
        ),
        raw_content=raw_content,
        file_path=file_path or f"docs/{doc_id}.md",
    )


def build_graph(*documents: Document) -> DocumentGraph:
    """Build a graph from documents with the default builder."""
    builder = GraphBuilder()
    builder.add_documents(documents)
    return builder.build()


# === String Conversion Helpers ===


def ids_string(documents: list[Document] | None) -> str:
    """Comma-separated IDs, or empty string."""
    return ", ".join(d.id for d in documents or [])


def backlinks_string(document: Document) -> str:
    """Backlinks as 'bucket:id' pairs in bucket order."""
    if document.linked_from is None:
        return ""
    return ", ".join(f"{kind.value}:{src.id}" for kind, src in document.linked_from.iter_items())


def breadcrumbs_string(document: Document) -> str:
    """Breadcrumb titles joined with ' > ', current page starred."""
    return " > ".join(
        f"{crumb.title}*" if crumb.current else crumb.title for crumb in document.breadcrumbs or []
    )


# === Markdown Fixtures ===


def note_text(
    doc_id: str,
    doc_type: str = "project",
    date: str = "2024-03-01",
    status: str = "active",
    links: str = "{}",
    body: str | None = None,
) -> str:
    """Markdown source of a note with frontmatter and complete sections."""
    from labgraph.graph.parsers import REQUIRED_SECTIONS

    if body is None:
        body = "\n".join(f"## {s}\n\nText.\n" for s in REQUIRED_SECTIONS.get(doc_type, ()))
    return (
        "---\n"
        f"id: {doc_id}\n"
        f"type: {doc_type}\n"
        f"title: Title of {doc_id}\n"
        f"date: {date}\n"
        f"status: {status}\n"
        "lab: sunrise\n"
        "authors:\n"
        "  - A. Researcher\n"
        "tags: [graph]\n"
        f"links: {links}\n"
        "---\n"
        f"{body}"
    )
