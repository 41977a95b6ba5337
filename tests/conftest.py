"""Pytest fixtures shared by the test suite."""

import pytest


@pytest.fixture
def project_graph():
    """Project with an experiment, a milestone and a daily note."""
    from tests.graph_test_helpers import build_graph, make_document

    return build_graph(
        make_document("proj-a", "project", title="Project A", date="2024-01-01"),
        make_document(
            "exp-1", "experiment", title="Experiment 1", date="2024-02-01", project="proj-a"
        ),
        make_document(
            "ms-1", "milestone", title="Milestone 1", date="2024-03-01", project="proj-a"
        ),
        make_document(
            "note-1",
            "daily-note",
            title="Day 1",
            date="2024-02-02",
            project="proj-a",
            experiment="exp-1",
        ),
    )


@pytest.fixture
def docs_dir(tmp_path):
    """Documentation directory with a small, valid corpus."""
    from tests.graph_test_helpers import note_text

    root = tmp_path / "documentation"
    (root / "alpha").mkdir(parents=True)
    (root / "alpha" / "proj-a.md").write_text(note_text("proj-a", "project"))
    (root / "alpha" / "exp-1.md").write_text(
        note_text(
            "exp-1",
            "experiment",
            date="2024-03-02",
            links="{project: proj-a}",
        )
    )
    (root / "alpha" / "ins-1.md").write_text(
        note_text(
            "ins-1",
            "insight",
            date="2024-03-05",
            links="{project: proj-a, related: [exp-1]}",
            body="## Insight\n\nSee [the run](exp-1).\n\n## Evidence\n\nData.\n",
        )
    )
    return root
