"""
labgraph.commands.validate - Validate documents command.

Parses every note, builds the graph and reports invalid files, duplicate
IDs, unknown types, missing sections and unresolved references.
"""

from __future__ import annotations

import argparse
import json

from labgraph.commands.build import load_graph
from labgraph.graph.diagnostics import IntegrityWarning, WarningKind

# Warning kinds that fail validation without --strict
FAILING_KINDS = (WarningKind.INVALID_DOCUMENT,)


def _warning_dict(warning: IntegrityWarning) -> dict:
    return {
        "kind": warning.kind.value,
        "document_id": warning.document_id,
        "message": warning.message,
        "target_id": warning.target_id,
        "locations": list(warning.locations),
    }


def run(args: argparse.Namespace) -> int:
    """
    Run the validate command.

    Args:
        args: Parsed command line arguments

    Returns:
        Exit code (1 when a file failed validation, or with --strict when
        any warning was recorded)
    """
    graph, _config = load_graph(args)
    warnings = graph.warnings()
    errors = [w for w in warnings if w.kind in FAILING_KINDS]
    failed = bool(errors) or (args.strict and bool(warnings))

    if args.json:
        print(
            json.dumps(
                {
                    "valid": not failed,
                    "documents": graph.total_pages,
                    "warnings": [_warning_dict(w) for w in warnings],
                },
                indent=2,
            )
        )
        return 1 if failed else 0

    if warnings and not args.quiet:
        print()
        for warning in sorted(warnings, key=lambda w: (w.kind.value, w.document_id)):
            print(warning)
            print()

    if not args.quiet:
        print("─" * 60)
        print(f"✓ {graph.total_pages} documents parsed")
        if errors:
            print(f"❌ {len(errors)} invalid documents")
        other = len(warnings) - len(errors)
        if other:
            print(f"⚠️  {other} warnings")
        if not warnings:
            print("✓ All documents valid")

    return 1 if failed else 0
