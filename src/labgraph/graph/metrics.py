"""Statistics and digest data structures.

This module derives summary views from the type groups:
- Statistics: Totals per category plus project status breakdown
- DigestLimits: How many items each "latest" list keeps
- LatestItems: Most recent documents per category

Both are pure functions of the groups, which are already sorted newest
first, so nothing here sorts again.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any

from labgraph.graph.document import Document, DocumentStatus, DocumentType

ACTIVE_STATUSES = (DocumentStatus.ACTIVE.value, DocumentStatus.IN_PROGRESS.value)
LISTED_PROJECT_STATUSES = ACTIVE_STATUSES + (DocumentStatus.COMPLETED.value,)


@dataclass
class Statistics:
    """Site-wide counts.

    Attributes:
        total_projects: Number of projects.
        active_projects: Projects that are active or in progress.
        completed_projects: Projects that are completed.
        total_milestones: Number of milestones.
        total_experiments: Number of experiments.
        total_insights: Number of insights.
        total_decisions: Number of decisions.
        total_daily_notes: Number of daily notes.
        total_syntheses: Number of syntheses.
    """

    total_projects: int = 0
    active_projects: int = 0
    completed_projects: int = 0
    total_milestones: int = 0
    total_experiments: int = 0
    total_insights: int = 0
    total_decisions: int = 0
    total_daily_notes: int = 0
    total_syntheses: int = 0

    def to_dict(self) -> dict[str, int]:
        return asdict(self)


@dataclass(frozen=True)
class DigestLimits:
    """Sizes of the "latest" lists."""

    projects: int = 10
    insights: int = 6
    milestones: int = 6
    experiments: int = 6

    @classmethod
    def from_config(cls, digest_config: dict[str, Any] | None) -> DigestLimits:
        """Create limits from the [digest] config section."""
        digest_config = digest_config or {}
        return cls(
            projects=int(digest_config.get("latest_projects", cls.projects)),
            insights=int(digest_config.get("latest_insights", cls.insights)),
            milestones=int(digest_config.get("latest_milestones", cls.milestones)),
            experiments=int(digest_config.get("latest_experiments", cls.experiments)),
        )


@dataclass
class LatestItems:
    """Most recent documents for summary display."""

    latest_projects: list[Document] = field(default_factory=list)
    latest_insights: list[Document] = field(default_factory=list)
    latest_milestones: list[Document] = field(default_factory=list)
    latest_experiments: list[Document] = field(default_factory=list)

    def to_dict(self) -> dict[str, list[str]]:
        """Return the digest as lists of document IDs."""
        return {
            "latest_projects": [d.id for d in self.latest_projects],
            "latest_insights": [d.id for d in self.latest_insights],
            "latest_milestones": [d.id for d in self.latest_milestones],
            "latest_experiments": [d.id for d in self.latest_experiments],
        }


def _group(groups: dict[str, list[Document]], doc_type: DocumentType) -> list[Document]:
    return groups.get(doc_type.value, [])


def calculate_statistics(groups: dict[str, list[Document]]) -> Statistics:
    """Calculate site-wide statistics.

    Args:
        groups: Documents grouped by type, as from group_by_type().

    Returns:
        Statistics for the groups.
    """
    projects = _group(groups, DocumentType.PROJECT)
    return Statistics(
        total_projects=len(projects),
        active_projects=sum(1 for p in projects if p.status in ACTIVE_STATUSES),
        completed_projects=sum(
            1 for p in projects if p.status == DocumentStatus.COMPLETED.value
        ),
        total_milestones=len(_group(groups, DocumentType.MILESTONE)),
        total_experiments=len(_group(groups, DocumentType.EXPERIMENT)),
        total_insights=len(_group(groups, DocumentType.INSIGHT)),
        total_decisions=len(_group(groups, DocumentType.DECISION)),
        total_daily_notes=len(_group(groups, DocumentType.DAILY_NOTE)),
        total_syntheses=len(_group(groups, DocumentType.SYNTHESIS)),
    )


def get_latest_items(
    groups: dict[str, list[Document]],
    limits: DigestLimits | None = None,
) -> LatestItems:
    """Get the latest items for the home page.

    Projects are listed only when active, in progress or completed.

    Args:
        groups: Documents grouped by type, newest first.
        limits: Sizes of each list (defaults: 10 projects, 6 of the rest).

    Returns:
        LatestItems slices of the groups.
    """
    limits = limits or DigestLimits()
    listed_projects = [
        p for p in _group(groups, DocumentType.PROJECT) if p.status in LISTED_PROJECT_STATUSES
    ]
    return LatestItems(
        latest_projects=listed_projects[: limits.projects],
        latest_insights=_group(groups, DocumentType.INSIGHT)[: limits.insights],
        latest_milestones=_group(groups, DocumentType.MILESTONE)[: limits.milestones],
        latest_experiments=_group(groups, DocumentType.EXPERIMENT)[: limits.experiments],
    )


__all__ = [
    "DigestLimits",
    "LatestItems",
    "Statistics",
    "calculate_statistics",
    "get_latest_items",
]
