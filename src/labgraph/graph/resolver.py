"""Relationship resolution - forward references and backlinks.

Decorates the documents held by an identity index:
- Forward pass: declared link IDs become resolved documents
  (project_page, experiment_page, parent_page, enables_pages, related_pages).
- Backward pass: each resolved declaration is recorded on its target's
  linked_from buckets.

Both passes read only the declared links, so their order does not matter.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from labgraph.graph.diagnostics import DiagnosticLog, WarningKind
from labgraph.graph.document import Document
from labgraph.graph.relations import BacklinkKind, Backlinks, LinkKind, backlink_kind_for


def build_relationships(
    documents: Iterable[Document],
    index: dict[str, Document],
    diagnostics: DiagnosticLog | None = None,
) -> dict[str, Document]:
    """Build forward and reverse relationships between documents.

    Ownership of the index passes to this function: the documents it
    holds are decorated in place and the returned mapping is the one
    later stages must use.

    Every document in the sequence gets empty backlink buckets, but only
    indexed documents resolve links or appear as backlinks. A record
    superseded by a later one with the same id is left unlinked, so
    backlink symmetry holds for indexed documents only.

    Args:
        documents: Documents in load order.
        index: Identity index from index_by_id().
        diagnostics: Optional log receiving unresolved-reference entries.

    Returns:
        Index whose documents carry resolved links and backlinks.
    """
    documents = list(documents)
    log = diagnostics if diagnostics is not None else DiagnosticLog()
    enhanced = dict(index)
    # Superseded duplicates are not part of the graph
    sources = [doc for doc in documents if enhanced.get(doc.id) is doc]

    for document in documents:
        document.linked_from = Backlinks()
    for document in enhanced.values():
        document.linked_from = Backlinks()

    for document in sources:
        _resolve_forward(document, enhanced, log)

    for document in sources:
        _record_backlinks(document, enhanced)

    return enhanced


def _find(index: dict[str, Document], target_id: object) -> Document | None:
    """Return the indexed document for an id; ids that are not strings never match."""
    if not isinstance(target_id, str):
        return None
    return index.get(target_id)


def _lookup(
    source: Document,
    kind: LinkKind,
    target_id: object,
    index: dict[str, Document],
    log: DiagnosticLog,
) -> Document | None:
    """Find a link target, noting the reference when it is missing."""
    target = _find(index, target_id)
    if target is None:
        log.warn(
            WarningKind.UNRESOLVED_REFERENCE,
            source.id,
            f"links.{kind.value} references missing document {target_id}",
            target_id=str(target_id),
            locations=(source.location,),
            level=logging.DEBUG,
        )
    return target


def _resolve_forward(source: Document, index: dict[str, Document], log: DiagnosticLog) -> None:
    """Attach resolved link targets to a single document."""
    links = source.links

    if links.project is not None:
        target = _lookup(source, LinkKind.PROJECT, links.project, index, log)
        if target is not None:
            source.project_page = target

    if links.experiment is not None:
        target = _lookup(source, LinkKind.EXPERIMENT, links.experiment, index, log)
        if target is not None:
            source.experiment_page = target

    if links.parent is not None:
        target = _lookup(source, LinkKind.PARENT, links.parent, index, log)
        if target is not None:
            source.parent_page = target

    if links.enables is not None:
        resolved = (_lookup(source, LinkKind.ENABLES, i, index, log) for i in links.enables)
        source.enables_pages = [t for t in resolved if t is not None]

    if links.related is not None:
        resolved = (_lookup(source, LinkKind.RELATED, i, index, log) for i in links.related)
        source.related_pages = [t for t in resolved if t is not None]


def _record_backlinks(source: Document, index: dict[str, Document]) -> None:
    """Push source onto the linked_from buckets of the documents it names."""
    links = source.links

    if links.project is not None:
        project = _find(index, links.project)
        kind = backlink_kind_for(source.kind)
        if project is not None and project.linked_from is not None and kind is not None:
            project.linked_from.add(kind, source)

    if links.related is not None:
        for related_id in links.related:
            target = _find(index, related_id)
            if target is not None and target.linked_from is not None:
                target.linked_from.add(BacklinkKind.RELATED, source)


__all__ = ["build_relationships"]
