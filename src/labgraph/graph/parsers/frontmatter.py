"""FrontmatterParser - Markdown documents with a YAML header.

Splits a research note into its frontmatter mapping and markdown body,
validates the frontmatter and produces a Document. A note that fails
validation raises DocumentValidationError listing every problem found.
"""

from __future__ import annotations

import datetime
import re
from typing import Any

import yaml

from labgraph.graph.diagnostics import DiagnosticLog, WarningKind
from labgraph.graph.document import (
    DOCUMENT_STATUSES,
    DOCUMENT_TYPES,
    Document,
    DocumentType,
)

LINK_FIELDS = ("project", "experiment", "parent", "enables", "related")

REQUIRED_SECTIONS: dict[str, tuple[str, ...]] = {
    "project": ("Objective", "Research Scope", "Key Questions"),
    "milestone": ("Milestone Summary", "Outcome", "Enables"),
    "experiment": ("Research Question", "Hypothesis", "Method"),
    "daily-note": ("Focus", "Actions", "Observations"),
    "insight": ("Insight", "Evidence"),
    "decision": ("Decision", "Rationale"),
    "synthesis": ("What Was Established", "Key Decisions", "Resulting System Posture"),
}


class DocumentValidationError(ValueError):
    """Frontmatter of a document is invalid.

    Attributes:
        file_path: Source of the document.
        errors: Every problem found, in check order.
    """

    def __init__(self, file_path: str, errors: list[str]) -> None:
        self.file_path = file_path
        self.errors = list(errors)
        details = "\n".join(f"  - {e}" for e in self.errors)
        super().__init__(f"Validation errors in {file_path}:\n{details}")


class FrontmatterParser:
    """Parser for markdown documents with YAML frontmatter.

    Format:
        ---
        id: exp-1
        type: experiment
        ...
        ---
        ## Research Question
        ...
    """

    FRONTMATTER_PATTERN = re.compile(r"\A---[ \t]*\r?\n(.*?)^---[ \t]*(?:\r?\n|\Z)", re.S | re.M)
    DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")

    def split(self, text: str) -> tuple[dict[str, Any], str]:
        """Split text into frontmatter data and body.

        Args:
            text: Whole file content.

        Returns:
            Tuple of (frontmatter mapping, markdown body). Text without a
            frontmatter block yields an empty mapping and the full text.
        """
        match = self.FRONTMATTER_PATTERN.match(text)
        if not match:
            return {}, text
        data = yaml.safe_load(match.group(1)) or {}
        body = text[match.end():]
        return data, body

    def normalize_date(self, value: Any) -> Any:
        """Turn YAML dates into ``YYYY-MM-DD`` strings."""
        if isinstance(value, datetime.datetime):
            return value.date().isoformat()
        if isinstance(value, datetime.date):
            return value.isoformat()
        return value

    def validate(self, data: Any, file_path: str) -> None:
        """Validate frontmatter, normalizing the date in place.

        Args:
            data: Parsed frontmatter.
            file_path: Source for error reporting.

        Raises:
            DocumentValidationError: If any check fails.
        """
        if not isinstance(data, dict):
            raise DocumentValidationError(file_path, ["Frontmatter must be a mapping"])

        errors: list[str] = []

        for key in ("id", "type", "title", "date", "status", "lab"):
            if not data.get(key):
                errors.append(f"Missing required field: {key}")

        authors = data.get("authors")
        if not isinstance(authors, list) or not authors:
            errors.append("Missing or invalid required field: authors (must be non-empty array)")
        if not isinstance(data.get("tags"), list):
            errors.append("Missing or invalid required field: tags (must be array)")
        links = data.get("links")
        if not isinstance(links, dict):
            errors.append("Missing or invalid required field: links (must be object)")

        doc_type = data.get("type")
        if doc_type and doc_type not in DOCUMENT_TYPES:
            errors.append(f"Invalid type: {doc_type}. Must be one of: {', '.join(DOCUMENT_TYPES)}")

        status = data.get("status")
        if status and status not in DOCUMENT_STATUSES:
            errors.append(
                f"Invalid status: {status}. Must be one of: {', '.join(DOCUMENT_STATUSES)}"
            )

        if data.get("date"):
            data["date"] = self.normalize_date(data["date"])
            if not isinstance(data["date"], str) or not self.DATE_PATTERN.match(data["date"]):
                errors.append(f"Invalid date format: {data['date']}. Must be YYYY-MM-DD")

        if isinstance(links, dict):
            for key in links:
                if key not in LINK_FIELDS:
                    errors.append(
                        f"Invalid links field: {key}. Valid fields: {', '.join(LINK_FIELDS)}"
                    )
            for key in ("project", "experiment", "parent"):
                if links.get(key) is not None and not isinstance(links[key], str):
                    errors.append(f"links.{key} must be a string")
            for key in ("enables", "related"):
                value = links.get(key)
                if value is None:
                    continue
                if not isinstance(value, list):
                    errors.append(f"links.{key} must be an array")
                elif not all(isinstance(item, str) for item in value):
                    errors.append(f"links.{key} entries must be strings")

            kind = DocumentType.parse(doc_type)
            if kind is not None and kind.requires_project() and not links.get("project"):
                errors.append(f"{doc_type} pages require links.project to be set")

        if errors:
            raise DocumentValidationError(file_path, errors)

    def missing_sections(self, doc_type: str, body: str) -> list[str]:
        """Return the required ``##`` sections absent from the body."""
        missing = []
        for section in REQUIRED_SECTIONS.get(doc_type, ()):
            pattern = re.compile(rf"^##\s+{re.escape(section)}", re.M)
            if not pattern.search(body):
                missing.append(section)
        return missing

    def parse(
        self,
        text: str,
        file_path: str,
        diagnostics: DiagnosticLog | None = None,
    ) -> Document:
        """Parse one markdown document.

        Args:
            text: Whole file content.
            file_path: Source path, kept on the document.
            diagnostics: Optional log receiving missing-sections warnings.

        Returns:
            The parsed Document. Its rendered content is left unset.

        Raises:
            DocumentValidationError: If the frontmatter is invalid or
                cannot be read as YAML.
        """
        try:
            data, body = self.split(text)
        except yaml.YAMLError as e:
            raise DocumentValidationError(file_path, [f"Invalid YAML frontmatter: {e}"]) from e

        self.validate(data, file_path)

        missing = self.missing_sections(data["type"], body)
        if missing and diagnostics is not None:
            diagnostics.warn(
                WarningKind.MISSING_SECTIONS,
                str(data["id"]),
                f"Missing required sections: {', '.join(missing)}",
                locations=(file_path,),
            )

        record = dict(data)
        record["id"] = str(data["id"])
        record["raw_content"] = body
        record["file_path"] = file_path
        return Document.from_dict(record)


def parse_document(
    text: str,
    file_path: str = "<string>",
    diagnostics: DiagnosticLog | None = None,
) -> Document:
    """Parse one markdown document with the default parser."""
    return FrontmatterParser().parse(text, file_path, diagnostics)


__all__ = [
    "REQUIRED_SECTIONS",
    "DocumentValidationError",
    "FrontmatterParser",
    "parse_document",
]
