"""
labgraph.commands.stats - Show statistics and the latest digest.
"""

from __future__ import annotations

import argparse
import json

from labgraph.commands.build import load_graph


def run(args: argparse.Namespace) -> int:
    """Run the stats command."""
    graph, _config = load_graph(args)

    if args.json:
        print(
            json.dumps(
                {
                    "statistics": graph.statistics.to_dict(),
                    "latest": graph.latest.to_dict(),
                    "total_pages": graph.total_pages,
                },
                indent=2,
            )
        )
        return 0

    for key, value in graph.statistics.to_dict().items():
        print(f"{key.replace('_', ' ').capitalize():<20} {value}")

    latest = graph.latest
    for heading, documents in (
        ("Latest projects", latest.latest_projects),
        ("Latest milestones", latest.latest_milestones),
        ("Latest experiments", latest.latest_experiments),
        ("Latest insights", latest.latest_insights),
    ):
        if documents:
            print(f"\n{heading}:")
            for document in documents:
                print(f"  {document.date}  {document.id}  {document.title}")
    return 0
