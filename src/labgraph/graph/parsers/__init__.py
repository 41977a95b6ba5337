"""Parsers that turn source files into Document records.

Exports:
- FrontmatterParser: Markdown with a YAML frontmatter header
- DocumentValidationError: Raised for notes with invalid frontmatter
- parse_document: Parse one note with the default parser
"""

from labgraph.graph.parsers.frontmatter import (
    REQUIRED_SECTIONS,
    DocumentValidationError,
    FrontmatterParser,
    parse_document,
)

__all__ = [
    "REQUIRED_SECTIONS",
    "DocumentValidationError",
    "FrontmatterParser",
    "parse_document",
]
