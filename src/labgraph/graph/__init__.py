"""Graph module - Core document graph data structures.

Exports:
- Document, DocumentLinks: Typed research notes and their declared links
- DocumentType, DocumentStatus: Closed category and status sets
- LinkKind, BacklinkKind, Backlinks: Relationship semantics
- DiagnosticLog, IntegrityWarning, WarningKind: Non-fatal build warnings
- index_by_id, group_by_type, build_relationships: Aggregation stages
- resolve_internal_links, generate_breadcrumbs: Link stages
- calculate_statistics, get_latest_items: Summary views

Note: DocumentGraph is in labgraph.graph.builder (use graph.factory.build_graph()
to build one from disk)
"""

from labgraph.graph.breadcrumbs import Breadcrumb, generate_breadcrumbs
from labgraph.graph.diagnostics import DiagnosticLog, IntegrityWarning, WarningKind
from labgraph.graph.document import Document, DocumentLinks, DocumentStatus, DocumentType
from labgraph.graph.grouper import group_by_type
from labgraph.graph.indexer import index_by_id
from labgraph.graph.linker import SiteLayout, get_page_url, resolve_internal_links
from labgraph.graph.metrics import (
    DigestLimits,
    LatestItems,
    Statistics,
    calculate_statistics,
    get_latest_items,
)
from labgraph.graph.relations import BacklinkKind, Backlinks, LinkKind
from labgraph.graph.resolver import build_relationships

__all__ = [
    "BacklinkKind",
    "Backlinks",
    "Breadcrumb",
    "DiagnosticLog",
    "DigestLimits",
    "Document",
    "DocumentLinks",
    "DocumentStatus",
    "DocumentType",
    "IntegrityWarning",
    "LatestItems",
    "LinkKind",
    "SiteLayout",
    "Statistics",
    "WarningKind",
    "build_relationships",
    "calculate_statistics",
    "generate_breadcrumbs",
    "get_latest_items",
    "get_page_url",
    "group_by_type",
    "index_by_id",
    "resolve_internal_links",
]
