"""
labgraph.commands.sitemap - Write sitemap.xml for the generated site.
"""

from __future__ import annotations

import argparse

from labgraph.commands.build import load_graph
from labgraph.graph.linker import SiteLayout, build_sitemap, sitemap_to_xml


def run(args: argparse.Namespace) -> int:
    """Run the sitemap command."""
    graph, config = load_graph(args)
    site_config = config.get("site", {})
    base_url = args.base_url or site_config.get("base_url", "")

    entries = build_sitemap(
        graph.all_documents(),
        base_url=base_url,
        layout=SiteLayout.from_config(site_config),
    )
    xml = sitemap_to_xml(entries)

    if args.output:
        args.output.write_text(xml, encoding="utf-8")
        if not args.quiet:
            print(f"Wrote {len(entries)} URLs to {args.output}")
    else:
        print(xml, end="")
    return 0
