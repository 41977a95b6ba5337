"""Graph Factory - Shared utility for building a DocumentGraph from disk.

Commands should use build_graph() instead of reading files themselves.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from labgraph.config import get_config, get_docs_directories
from labgraph.graph.builder import DocumentGraph, GraphBuilder
from labgraph.graph.deserializer import load_documents
from labgraph.graph.diagnostics import DiagnosticLog
from labgraph.graph.linker import SiteLayout
from labgraph.graph.metrics import DigestLimits

logger = logging.getLogger(__name__)


def build_graph(
    config: dict[str, Any] | None = None,
    doc_dirs: list[Path] | None = None,
    config_path: Path | None = None,
    base_dir: Path | None = None,
) -> DocumentGraph:
    """Build a DocumentGraph from documentation directories.

    Args:
        config: Pre-loaded config dict (optional).
        doc_dirs: Explicit documentation directories (optional).
        config_path: Path to config file (optional).
        base_dir: Base for relative directories (defaults to cwd).

    Returns:
        Complete DocumentGraph. Parse failures and integrity problems are
        in graph.diagnostics.

    Priority:
        doc_dirs > config > config_path > defaults
    """
    base_dir = base_dir or Path.cwd()

    if config is None:
        config = get_config(config_path, base_dir)

    if doc_dirs is None:
        doc_dirs = get_docs_directories(None, config, base_dir)

    if not doc_dirs:
        logger.warning("No documentation directories found; building an empty graph")

    docs_config = config.get("docs", {})
    diagnostics = DiagnosticLog()
    documents = load_documents(
        doc_dirs,
        patterns=docs_config.get("patterns"),
        skip_dirs=docs_config.get("skip_dirs"),
        skip_files=docs_config.get("skip_files"),
        diagnostics=diagnostics,
    )

    builder = GraphBuilder(
        layout=SiteLayout.from_config(config.get("site")),
        limits=DigestLimits.from_config(config.get("digest")),
        diagnostics=diagnostics,
    )
    builder.add_documents(documents)
    return builder.build()


__all__ = ["build_graph"]
