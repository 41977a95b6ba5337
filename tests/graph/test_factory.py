"""Tests for build_graph() - building a graph from disk."""

from labgraph.config import DEFAULT_CONFIG, merge_configs
from labgraph.graph.factory import build_graph


class TestBuildGraph:
    def test_builds_from_explicit_dirs(self, docs_dir):
        graph = build_graph(config=DEFAULT_CONFIG, doc_dirs=[docs_dir])

        assert graph.total_pages == 3
        assert not graph.has_warnings()
        proj = graph.find_by_id("proj-a")
        assert [d.id for d in proj.linked_from.experiments] == ["exp-1"]
        assert [d.id for d in proj.linked_from.insights] == ["ins-1"]
        exp = graph.find_by_id("exp-1")
        assert [d.id for d in exp.linked_from.related] == ["ins-1"]

    def test_internal_links_rewritten_from_files(self, docs_dir):
        graph = build_graph(config=DEFAULT_CONFIG, doc_dirs=[docs_dir])

        assert "[the run](/pages/exp-1.html)" in graph.find_by_id("ins-1").raw_content

    def test_dirs_from_config(self, docs_dir):
        graph = build_graph(config=DEFAULT_CONFIG, base_dir=docs_dir.parent)

        assert graph.document_count() == 3

    def test_site_and_digest_config(self, docs_dir):
        config = merge_configs(
            DEFAULT_CONFIG,
            {"site": {"pages_dir": "/notes"}, "digest": {"latest_experiments": 0}},
        )

        graph = build_graph(config=config, doc_dirs=[docs_dir])

        assert graph.find_by_id("exp-1").url == "/notes/exp-1.html"
        assert graph.latest.latest_experiments == []

    def test_config_file(self, docs_dir):
        config_path = docs_dir.parent / ".labgraph.toml"
        config_path.write_text('[docs]\nskip_files = ["ins-1.md"]\n')

        graph = build_graph(config_path=config_path, base_dir=docs_dir.parent)

        assert sorted(graph.index) == ["exp-1", "proj-a"]

    def test_no_directories(self, tmp_path):
        graph = build_graph(config=DEFAULT_CONFIG, base_dir=tmp_path)

        assert graph.total_pages == 0
        assert graph.statistics.total_projects == 0

    def test_invalid_file_in_diagnostics(self, docs_dir):
        (docs_dir / "broken.md").write_text("---\nid: [x\n---\n")

        graph = build_graph(config=DEFAULT_CONFIG, doc_dirs=[docs_dir])

        assert graph.total_pages == 3
        assert [w.kind.value for w in graph.warnings()] == ["invalid-document"]
