"""
labgraph.commands - CLI command implementations
"""

__all__ = [
    "build",
    "sitemap",
    "stats",
    "validate",
]
