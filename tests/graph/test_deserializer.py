"""Tests for DomainFile and load_documents."""

from labgraph.graph import DiagnosticLog, WarningKind
from labgraph.graph.deserializer import DomainFile, load_documents
from tests.graph_test_helpers import note_text


class TestDomainFile:
    def test_reads_directory_recursively_in_path_order(self, docs_dir):
        docs = list(DomainFile(docs_dir).deserialize())

        assert [d.id for d in docs] == ["exp-1", "ins-1", "proj-a"]
        assert docs[0].file_path.endswith("exp-1.md")

    def test_non_recursive(self, docs_dir):
        (docs_dir / "top.md").write_text(note_text("top"))

        docs = list(DomainFile(docs_dir, recursive=False).deserialize())

        assert [d.id for d in docs] == ["top"]

    def test_sources_carry_path(self, docs_dir):
        sources = list(DomainFile(docs_dir / "alpha" / "proj-a.md").iterate_sources())

        assert [ctx.source_id for ctx, _ in sources] == [str(docs_dir / "alpha" / "proj-a.md")]
        assert sources[0][1].startswith("---\nid: proj-a")

    def test_single_file(self, docs_dir):
        docs = list(DomainFile(docs_dir / "alpha" / "proj-a.md").deserialize())

        assert [d.id for d in docs] == ["proj-a"]

    def test_skip_dirs_and_files(self, docs_dir):
        (docs_dir / "drafts").mkdir()
        (docs_dir / "drafts" / "draft.md").write_text(note_text("draft"))
        (docs_dir / "README.md").write_text("# Notes\n")

        domain_file = DomainFile(docs_dir, skip_dirs=["drafts"], skip_files=["README.md"])
        docs = list(domain_file.deserialize())

        assert "draft" not in [d.id for d in docs]
        assert len(docs) == 3

    def test_patterns(self, docs_dir):
        (docs_dir / "extra.markdown").write_text(note_text("extra"))

        docs = list(DomainFile(docs_dir, patterns=["*.markdown"]).deserialize())

        assert [d.id for d in docs] == ["extra"]

    def test_invalid_file_skipped_and_recorded(self, docs_dir):
        (docs_dir / "alpha" / "bad.md").write_text("---\nid: bad\ntype: project\n---\n")
        log = DiagnosticLog()

        docs = list(DomainFile(docs_dir).deserialize(diagnostics=log))

        assert "bad" not in [d.id for d in docs]
        invalid = log.by_kind(WarningKind.INVALID_DOCUMENT)
        assert len(invalid) == 1
        assert invalid[0].document_id.endswith("bad.md")
        assert "Missing required field: title" in invalid[0].message

    def test_missing_path_yields_nothing(self, tmp_path):
        assert list(DomainFile(tmp_path / "nope").deserialize()) == []


class TestLoadDocuments:
    def test_paths_in_given_order(self, docs_dir, tmp_path):
        other = tmp_path / "other"
        other.mkdir()
        (other / "a-first.md").write_text(note_text("a-first"))

        docs = load_documents([other, docs_dir])

        assert [d.id for d in docs] == ["a-first", "exp-1", "ins-1", "proj-a"]

    def test_missing_sections_recorded(self, tmp_path):
        (tmp_path / "p.md").write_text(note_text("p", body="## Objective\n"))
        log = DiagnosticLog()

        docs = load_documents([tmp_path], diagnostics=log)

        assert [d.id for d in docs] == ["p"]
        assert [w.document_id for w in log.by_kind(WarningKind.MISSING_SECTIONS)] == ["p"]
