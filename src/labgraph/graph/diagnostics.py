"""Integrity diagnostics for graph builds.

This module provides dataclasses for recording the non-fatal anomalies
found while building the graph. Nothing here raises: every anomaly is
kept as a value and logged, and the build carries on.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import Enum

logger = logging.getLogger(__name__)


class WarningKind(Enum):
    """Categories of integrity warnings."""

    DUPLICATE_ID = "duplicate-id"
    UNKNOWN_TYPE = "unknown-type"
    UNRESOLVED_REFERENCE = "unresolved-reference"
    UNRESOLVED_LINK = "unresolved-link"
    MISSING_SECTIONS = "missing-sections"
    INVALID_DOCUMENT = "invalid-document"


@dataclass(frozen=True)
class IntegrityWarning:
    """A single non-fatal anomaly.

    Attributes:
        kind: Category of the warning.
        document_id: ID of the document the warning is about.
        message: Human-readable description.
        target_id: Referenced ID, for unresolved references and links.
        locations: Source locations involved (both files for duplicates).
    """

    kind: WarningKind
    document_id: str
    message: str
    target_id: str | None = None
    locations: tuple[str, ...] = field(default_factory=tuple)

    def __str__(self) -> str:
        """Human-readable representation."""
        text = f"[{self.kind.value}] {self.document_id}: {self.message}"
        for location in self.locations:
            text += f"\n   {location}"
        return text


class DiagnosticLog:
    """Append-only record of integrity warnings for one build.

    Example:
        >>> log = DiagnosticLog()
        >>> log.warn(WarningKind.UNKNOWN_TYPE, "note-1", "Unknown type: memo")
        >>> len(log)
        1
    """

    def __init__(self) -> None:
        self._entries: list[IntegrityWarning] = []

    def record(self, warning: IntegrityWarning, level: int = logging.WARNING) -> None:
        """Append a warning and emit it on the module logger.

        Args:
            warning: The warning to keep.
            level: Logging level used when emitting it.
        """
        self._entries.append(warning)
        logger.log(level, "%s", warning)

    def warn(
        self,
        kind: WarningKind,
        document_id: str,
        message: str,
        target_id: str | None = None,
        locations: tuple[str, ...] = (),
        level: int = logging.WARNING,
    ) -> IntegrityWarning:
        """Build, record and return a warning."""
        warning = IntegrityWarning(
            kind=kind,
            document_id=document_id,
            message=message,
            target_id=target_id,
            locations=tuple(locations),
        )
        self.record(warning, level=level)
        return warning

    def iter_entries(self) -> Iterator[IntegrityWarning]:
        """Iterate over all warnings in the order they were recorded."""
        yield from self._entries

    def by_kind(self, kind: WarningKind) -> list[IntegrityWarning]:
        """Return the warnings of one category."""
        return [w for w in self._entries if w.kind == kind]

    def extend(self, other: DiagnosticLog) -> None:
        """Append another log's entries without re-emitting them."""
        self._entries.extend(other.iter_entries())

    def __len__(self) -> int:
        return len(self._entries)

    def __bool__(self) -> bool:
        return bool(self._entries)


__all__ = ["DiagnosticLog", "IntegrityWarning", "WarningKind"]
