"""Relations - Link kinds and backlink semantics.

This module defines the typed relationships between documents:
- LinkKind: Declared outgoing link fields
- BacklinkKind: Buckets of reverse links stored on the target
- Backlinks: The six backlink buckets of one document
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Iterator

from labgraph.graph.document import DocumentType

if TYPE_CHECKING:
    from labgraph.graph.document import Document


class LinkKind(Enum):
    """Declared link fields of a document.

    Single-valued kinds resolve to one document; list-valued kinds
    resolve to a filtered list.
    """

    PROJECT = "project"
    EXPERIMENT = "experiment"
    PARENT = "parent"
    ENABLES = "enables"
    RELATED = "related"

    def is_list(self) -> bool:
        """Check if this link field holds a list of IDs."""
        return self in (LinkKind.ENABLES, LinkKind.RELATED)


class BacklinkKind(Enum):
    """Backlink buckets on a referenced document."""

    MILESTONES = "milestones"
    EXPERIMENTS = "experiments"
    INSIGHTS = "insights"
    DECISIONS = "decisions"
    SYNTHESIS = "synthesis"
    RELATED = "related"


def backlink_kind_for(doc_type: DocumentType | None) -> BacklinkKind | None:
    """Choose the bucket a project-directed link is recorded under.

    Args:
        doc_type: Type of the document declaring links.project.

    Returns:
        The matching bucket, or None for types that are not tracked
        (projects, daily notes and unknown types).
    """
    if doc_type is DocumentType.MILESTONE:
        return BacklinkKind.MILESTONES
    elif doc_type is DocumentType.EXPERIMENT:
        return BacklinkKind.EXPERIMENTS
    elif doc_type is DocumentType.INSIGHT:
        return BacklinkKind.INSIGHTS
    elif doc_type is DocumentType.DECISION:
        return BacklinkKind.DECISIONS
    elif doc_type is DocumentType.SYNTHESIS:
        return BacklinkKind.SYNTHESIS
    else:
        return None


@dataclass
class Backlinks:
    """Documents that declared a reference to this one, by kind.

    Attributes:
        milestones: Milestones whose links.project names this document.
        experiments: Experiments whose links.project names this document.
        insights: Insights whose links.project names this document.
        decisions: Decisions whose links.project names this document.
        synthesis: Syntheses whose links.project names this document.
        related: Any document listing this one in links.related.
    """

    milestones: list[Document] = field(default_factory=list)
    experiments: list[Document] = field(default_factory=list)
    insights: list[Document] = field(default_factory=list)
    decisions: list[Document] = field(default_factory=list)
    synthesis: list[Document] = field(default_factory=list)
    related: list[Document] = field(default_factory=list)

    def bucket(self, kind: BacklinkKind) -> list[Document]:
        """Return the mutable list for a backlink kind."""
        return getattr(self, kind.value)

    def add(self, kind: BacklinkKind, source: Document) -> None:
        """Record source under the given bucket."""
        self.bucket(kind).append(source)

    def iter_items(self) -> Iterator[tuple[BacklinkKind, Document]]:
        """Iterate (kind, source) pairs in bucket order."""
        for kind in BacklinkKind:
            for source in self.bucket(kind):
                yield kind, source

    def count(self) -> int:
        """Total number of backlinks across all buckets."""
        return sum(len(self.bucket(kind)) for kind in BacklinkKind)

    def is_empty(self) -> bool:
        return self.count() == 0


__all__ = ["BacklinkKind", "Backlinks", "LinkKind", "backlink_kind_for"]
