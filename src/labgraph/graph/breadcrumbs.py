"""Breadcrumb navigation derived from resolved forward references."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from labgraph.graph.document import Document, DocumentType
from labgraph.graph.linker import DEFAULT_LAYOUT, SiteLayout

HOME_TITLE = "Home"


@dataclass(frozen=True)
class Breadcrumb:
    """One entry of a breadcrumb trail.

    Attributes:
        title: Display title.
        url: Site path of the entry.
        current: True only for the page the trail belongs to.
    """

    title: str
    url: str | None
    current: bool = False

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {"title": self.title, "url": self.url}
        if self.current:
            result["current"] = True
        return result


def generate_breadcrumbs(
    document: Document,
    index: dict[str, Document] | None = None,
    layout: SiteLayout = DEFAULT_LAYOUT,
) -> list[Breadcrumb]:
    """Generate the breadcrumb trail for a document.

    The trail is Home, then the resolved project, then the resolved
    experiment (daily notes only), then the resolved parent, then the
    document itself. Each relationship is followed one level only, so a
    parent's own parent never appears and cycles cannot loop.

    Args:
        document: Document whose forward references are resolved.
        index: Identity index; unused by the trail itself, accepted so all
            link stages share one calling convention.
        layout: Site layout for URLs not yet assigned.

    Returns:
        Ordered breadcrumbs from root to the current page.
    """
    breadcrumbs = [Breadcrumb(title=HOME_TITLE, url=layout.home_path)]

    if document.project_page is not None:
        breadcrumbs.append(_crumb(document.project_page, layout))

    if document.kind is DocumentType.DAILY_NOTE and document.experiment_page is not None:
        breadcrumbs.append(_crumb(document.experiment_page, layout))

    if document.parent_page is not None:
        breadcrumbs.append(_crumb(document.parent_page, layout))

    breadcrumbs.append(
        Breadcrumb(
            title=document.title,
            url=document.url or layout.page_url(document),
            current=True,
        )
    )
    return breadcrumbs


def _crumb(target: Document, layout: SiteLayout) -> Breadcrumb:
    return Breadcrumb(title=target.title, url=target.url or layout.page_url(target))


__all__ = ["HOME_TITLE", "Breadcrumb", "generate_breadcrumbs"]
