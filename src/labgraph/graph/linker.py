"""Linker - URLs, internal link rewriting and the sitemap.

Documents reference each other in their markdown bodies with bare IDs,
e.g. ``[see results](exp-1)``. This module turns such references into
site paths and derives the per-document URL they point at.
"""

from __future__ import annotations

import re
import xml.etree.ElementTree as ET
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from labgraph.graph.diagnostics import DiagnosticLog, WarningKind
from labgraph.graph.document import Document, DocumentStatus, DocumentType

DEFAULT_BASE_URL = "https://sunriselabs.io"

# [text](target) or [text](target "title")
LINK_PATTERN = re.compile(r'\[([^\]]+)\]\(([^)\s]+)(?:\s+"([^"]*)")?\)')

EXTERNAL_PREFIXES = ("http://", "https://", "/", "#", "mailto:")

SITEMAP_NAMESPACE = "http://www.sitemaps.org/schemas/sitemap/0.9"


@dataclass(frozen=True)
class SiteLayout:
    """Where pages live on the generated site.

    Attributes:
        home_path: Path of the home page.
        pages_dir: Directory holding every other page.
        page_extension: File extension of generated pages.
        home_id: Document ID (or type) that marks the home page.
    """

    home_path: str = "/index.html"
    pages_dir: str = "/pages"
    page_extension: str = ".html"
    home_id: str = "index"

    @classmethod
    def from_config(cls, site_config: dict[str, Any] | None) -> SiteLayout:
        """Create a layout from the [site] config section."""
        site_config = site_config or {}
        return cls(
            home_path=site_config.get("home_path", cls.home_path),
            pages_dir=site_config.get("pages_dir", cls.pages_dir).rstrip("/"),
            page_extension=site_config.get("page_extension", cls.page_extension),
            home_id=site_config.get("home_id", cls.home_id),
        )

    def page_url(self, document: Document | None) -> str | None:
        """Generate the URL path for a document.

        Args:
            document: Document to locate, or None.

        Returns:
            The home path for the home page, a path under pages_dir for
            everything else, or None when no document is given.
        """
        if document is None:
            return None
        if document.id == self.home_id or document.type == self.home_id:
            return self.home_path
        return f"{self.pages_dir}/{document.id}{self.page_extension}"


DEFAULT_LAYOUT = SiteLayout()


def get_page_url(document: Document | None, layout: SiteLayout = DEFAULT_LAYOUT) -> str | None:
    """Generate the URL path for a document with the given layout."""
    return layout.page_url(document)


def is_external_target(target: str) -> bool:
    """Check if a link target is already a URL, path, anchor or email."""
    return target.startswith(EXTERNAL_PREFIXES)


def resolve_internal_links(
    content: str,
    index: dict[str, Document],
    diagnostics: DiagnosticLog | None = None,
    source_id: str = "",
    layout: SiteLayout = DEFAULT_LAYOUT,
) -> str:
    """Resolve internal ID references in markdown content to URLs.

    Links whose target is not a known ID are left untouched and reported.
    Already-resolved links are skipped, so running this twice is safe.

    Args:
        content: Markdown text.
        index: Identity index used to look targets up.
        diagnostics: Optional log receiving unresolved-link warnings.
        source_id: ID of the document being rewritten, for reporting.
        layout: Site layout used to build URLs.

    Returns:
        Content with resolved links.
    """
    if not content:
        return content
    log = diagnostics if diagnostics is not None else DiagnosticLog()

    def replace(match: re.Match[str]) -> str:
        text, target, title = match.group(1), match.group(2), match.group(3)
        if is_external_target(target):
            return match.group(0)

        target_document = index.get(target)
        if target_document is None:
            log.warn(
                WarningKind.UNRESOLVED_LINK,
                source_id or "<content>",
                f"Could not resolve internal link: {target}",
                target_id=target,
            )
            return match.group(0)

        url = target_document.url or layout.page_url(target_document)
        if title:
            return f'[{text}]({url} "{title}")'
        return f"[{text}]({url})"

    return LINK_PATTERN.sub(replace, content)


def assign_urls(documents: Iterable[Document], layout: SiteLayout = DEFAULT_LAYOUT) -> None:
    """Set the url field of every document."""
    for document in documents:
        document.url = layout.page_url(document)


def process_all_links(
    documents: list[Document],
    index: dict[str, Document],
    diagnostics: DiagnosticLog | None = None,
    layout: SiteLayout = DEFAULT_LAYOUT,
) -> list[Document]:
    """Assign URLs and rewrite internal links of every document.

    URLs are assigned to the whole index first so that link rewriting
    never depends on document order.

    Args:
        documents: Documents in load order.
        index: Identity index.
        diagnostics: Optional log receiving unresolved-link warnings.
        layout: Site layout used to build URLs.

    Returns:
        The same documents, updated in place.
    """
    assign_urls(index.values(), layout)
    assign_urls(documents, layout)

    for document in documents:
        if document.raw_content:
            document.raw_content = resolve_internal_links(
                document.raw_content,
                index,
                diagnostics=diagnostics,
                source_id=document.id,
                layout=layout,
            )
    return documents


@dataclass(frozen=True)
class SitemapEntry:
    """One URL of the sitemap."""

    url: str
    lastmod: str
    changefreq: str
    priority: float


def build_sitemap(
    documents: Iterable[Document],
    base_url: str = DEFAULT_BASE_URL,
    layout: SiteLayout = DEFAULT_LAYOUT,
) -> list[SitemapEntry]:
    """Build a sitemap of all documents.

    Args:
        documents: Documents to list.
        base_url: Absolute site URL prefixed to each document path.
        layout: Used for documents whose url has not been assigned.

    Returns:
        One SitemapEntry per document, in input order.
    """
    base_url = base_url.rstrip("/")
    entries = []
    for document in documents:
        path = document.url or layout.page_url(document)
        entries.append(
            SitemapEntry(
                url=f"{base_url}{path}",
                lastmod=document.date,
                changefreq=(
                    "monthly" if document.status == DocumentStatus.COMPLETED.value else "weekly"
                ),
                priority=0.9 if document.kind is DocumentType.PROJECT else 0.7,
            )
        )
    return entries


def sitemap_to_xml(entries: Iterable[SitemapEntry]) -> str:
    """Render sitemap entries as a sitemaps.org urlset document."""
    urlset = ET.Element("urlset", xmlns=SITEMAP_NAMESPACE)
    for entry in entries:
        url = ET.SubElement(urlset, "url")
        ET.SubElement(url, "loc").text = entry.url
        if entry.lastmod:
            ET.SubElement(url, "lastmod").text = entry.lastmod
        ET.SubElement(url, "changefreq").text = entry.changefreq
        ET.SubElement(url, "priority").text = f"{entry.priority:.1f}"
    ET.indent(urlset)
    body = ET.tostring(urlset, encoding="unicode")
    return f'<?xml version="1.0" encoding="UTF-8"?>\n{body}\n'


__all__ = [
    "DEFAULT_BASE_URL",
    "DEFAULT_LAYOUT",
    "SiteLayout",
    "SitemapEntry",
    "assign_urls",
    "build_sitemap",
    "get_page_url",
    "is_external_target",
    "process_all_links",
    "resolve_internal_links",
    "sitemap_to_xml",
]
