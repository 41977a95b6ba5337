"""
labgraph.commands.build - Build the document graph.

Loads every note, builds the graph and either prints a summary or writes
the serialized graph as JSON for a renderer.
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Any

from labgraph.config import get_config, get_docs_directories
from labgraph.graph.builder import DocumentGraph
from labgraph.graph.factory import build_graph
from labgraph.graph.serialize import serialize_graph


def load_configuration(args: argparse.Namespace) -> dict[str, Any]:
    """Load configuration from --config or by discovery."""
    return get_config(getattr(args, "config", None), Path.cwd())


def load_graph(args: argparse.Namespace) -> tuple[DocumentGraph, dict[str, Any]]:
    """Build the graph for the directories selected by args.

    Returns:
        Tuple of (graph, effective config).
    """
    config = load_configuration(args)
    doc_dirs = get_docs_directories(getattr(args, "docs_dir", None), config, Path.cwd())
    return build_graph(config=config, doc_dirs=doc_dirs), config


def print_summary(graph: DocumentGraph) -> None:
    """Print document counts per category."""
    stats = graph.statistics
    print(f"✓ Indexed {graph.total_pages} pages ({graph.document_count()} unique IDs)")
    print(f"✓ Projects: {stats.total_projects} ({stats.active_projects} active)")
    print(f"✓ Milestones: {stats.total_milestones}")
    print(f"✓ Experiments: {stats.total_experiments}")
    print(f"✓ Daily notes: {stats.total_daily_notes}")
    print(f"✓ Insights: {stats.total_insights}")
    print(f"✓ Decisions: {stats.total_decisions}")
    print(f"✓ Syntheses: {stats.total_syntheses}")
    if graph.has_warnings():
        print(f"⚠️  {len(graph.diagnostics)} warnings (run 'labgraph validate' for details)")


def run(args: argparse.Namespace) -> int:
    """
    Run the build command.

    Args:
        args: Parsed command line arguments

    Returns:
        Exit code (0 for success)
    """
    graph, _config = load_graph(args)

    if args.json or args.output:
        text = json.dumps(serialize_graph(graph, include_content=args.content), indent=2)
        if args.output:
            args.output.write_text(text + "\n", encoding="utf-8")
            if not args.quiet:
                print(f"Wrote graph with {graph.document_count()} documents to {args.output}")
        else:
            print(text)
        return 0

    if graph.total_pages == 0:
        print("Warning: No documents found to process!", file=sys.stderr)

    if not args.quiet:
        print_summary(graph)
    return 0
