"""Document - The typed research note at the centre of the graph.

This module provides the core data structures:
- DocumentType: Closed set of semantic categories
- DocumentStatus: Closed set of lifecycle states
- DocumentLinks: Declared outgoing relationships (all optional)
- Document: One note with its metadata, body and derived graph fields
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from labgraph.graph.breadcrumbs import Breadcrumb
    from labgraph.graph.relations import Backlinks


class DocumentType(Enum):
    """Types of documents in the research graph."""

    PROJECT = "project"
    MILESTONE = "milestone"
    EXPERIMENT = "experiment"
    DAILY_NOTE = "daily-note"
    INSIGHT = "insight"
    DECISION = "decision"
    SYNTHESIS = "synthesis"

    @classmethod
    def parse(cls, value: str | None) -> DocumentType | None:
        """Return the matching type, or None for unknown values."""
        for member in cls:
            if member.value == value:
                return member
        return None

    def requires_project(self) -> bool:
        """Check if documents of this type must declare links.project."""
        return self in (DocumentType.MILESTONE, DocumentType.EXPERIMENT, DocumentType.SYNTHESIS)


class DocumentStatus(Enum):
    """Lifecycle status of a document."""

    PLANNED = "planned"
    ACTIVE = "active"
    IN_PROGRESS = "in-progress"
    PAUSED = "paused"
    COMPLETED = "completed"
    ABANDONED = "abandoned"


DOCUMENT_TYPES: tuple[str, ...] = tuple(t.value for t in DocumentType)
DOCUMENT_STATUSES: tuple[str, ...] = tuple(s.value for s in DocumentStatus)


@dataclass
class DocumentLinks:
    """Declared outgoing relationships of a document.

    Absent single-valued links are None. Absent list-valued links are None
    as well, which is distinct from a declared empty list.

    Attributes:
        project: ID of the owning project.
        experiment: ID of the experiment (used by daily notes).
        parent: ID of the parent document.
        enables: IDs of documents this one enables.
        related: IDs of related documents.
    """

    project: str | None = None
    experiment: str | None = None
    parent: str | None = None
    enables: list[str] | None = None
    related: list[str] | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> DocumentLinks:
        """Create links from a frontmatter mapping."""
        if not data:
            return cls()
        enables = data.get("enables")
        related = data.get("related")
        return cls(
            project=data.get("project") or None,
            experiment=data.get("experiment") or None,
            parent=data.get("parent") or None,
            enables=list(enables) if enables is not None else None,
            related=list(related) if related is not None else None,
        )

    def to_dict(self) -> dict[str, Any]:
        """Return only the declared links."""
        result: dict[str, Any] = {}
        for key in ("project", "experiment", "parent", "enables", "related"):
            value = getattr(self, key)
            if value is not None:
                result[key] = list(value) if isinstance(value, list) else value
        return result


@dataclass(eq=False)
class Document:
    """A research note and its place in the graph.

    Equality is identity: two documents with the same id are still
    different records (the index keeps the last one supplied).

    Attributes:
        id: Unique identifier within a build.
        type: Category name; unknown values are tolerated and reported.
        title: Display title.
        date: Calendar date as ``YYYY-MM-DD``.
        status: Lifecycle status name.
        lab: Owning lab.
        authors: Non-empty ordered list of authors.
        tags: Free-form tags.
        links: Declared outgoing relationships.
        raw_content: Markdown body.
        content: Rendered body, opaque to the graph.
        file_path: Where the document was loaded from, if anywhere.
    """

    id: str
    type: str
    title: str = ""
    date: str = ""
    status: str = ""
    lab: str = ""
    authors: list[str] = field(default_factory=list)
    tags: list[str] = field(default_factory=list)
    links: DocumentLinks = field(default_factory=DocumentLinks)
    raw_content: str = ""
    content: str | None = None
    file_path: str | None = None

    # Derived fields, populated by the graph stages
    url: str | None = field(default=None, repr=False)
    project_page: Document | None = field(default=None, repr=False)
    experiment_page: Document | None = field(default=None, repr=False)
    parent_page: Document | None = field(default=None, repr=False)
    enables_pages: list[Document] | None = field(default=None, repr=False)
    related_pages: list[Document] | None = field(default=None, repr=False)
    linked_from: Backlinks | None = field(default=None, repr=False)
    breadcrumbs: list[Breadcrumb] | None = field(default=None, repr=False)

    @property
    def kind(self) -> DocumentType | None:
        """The parsed document type, or None if unknown."""
        return DocumentType.parse(self.type)

    @property
    def location(self) -> str:
        """Source location for diagnostics."""
        return self.file_path or f"<{self.id}>"

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Document:
        """Create a document from an already-validated record."""
        return cls(
            id=data["id"],
            type=data["type"],
            title=data.get("title", ""),
            date=str(data.get("date", "")),
            status=data.get("status", ""),
            lab=data.get("lab", ""),
            authors=list(data.get("authors") or []),
            tags=list(data.get("tags") or []),
            links=DocumentLinks.from_dict(data.get("links")),
            raw_content=data.get("raw_content", ""),
            content=data.get("content"),
            file_path=data.get("file_path"),
        )


__all__ = [
    "DOCUMENT_STATUSES",
    "DOCUMENT_TYPES",
    "Document",
    "DocumentLinks",
    "DocumentStatus",
    "DocumentType",
]
