"""
labgraph - Research notes graph builder

labgraph indexes a corpus of typed research notes (projects, milestones,
experiments, daily notes, insights, decisions and syntheses), resolves
the links between them and produces a navigable graph for a site
renderer: backlinks, breadcrumbs, statistics and a sitemap.
"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("labgraph")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"  # Not installed
__license__ = "MIT"

from labgraph.graph.builder import DocumentGraph, GraphBuilder, aggregate_documents
from labgraph.graph.document import Document, DocumentLinks, DocumentType
from labgraph.graph.factory import build_graph

__all__ = [
    "__version__",
    "Document",
    "DocumentGraph",
    "DocumentLinks",
    "DocumentType",
    "GraphBuilder",
    "aggregate_documents",
    "build_graph",
]
