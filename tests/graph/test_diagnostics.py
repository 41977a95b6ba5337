"""Tests for DiagnosticLog and IntegrityWarning."""

import logging

from labgraph.graph import DiagnosticLog, WarningKind
from tests.graph_test_helpers import build_graph, make_document


class TestDiagnosticLog:
    def test_warn_records_and_logs(self, caplog):
        log = DiagnosticLog()

        with caplog.at_level(logging.WARNING, logger="labgraph.graph.diagnostics"):
            warning = log.warn(WarningKind.UNKNOWN_TYPE, "memo", "Unknown document type: memo")

        assert list(log.iter_entries()) == [warning]
        assert "[unknown-type] memo: Unknown document type: memo" in caplog.text

    def test_debug_level_not_shown_at_warning(self, caplog):
        log = DiagnosticLog()

        with caplog.at_level(logging.WARNING, logger="labgraph.graph.diagnostics"):
            log.warn(WarningKind.UNRESOLVED_REFERENCE, "a", "missing", level=logging.DEBUG)

        assert len(log) == 1
        assert caplog.text == ""

    def test_extend_and_by_kind(self):
        first, second = DiagnosticLog(), DiagnosticLog()
        first.warn(WarningKind.DUPLICATE_ID, "a", "dup")
        second.warn(WarningKind.UNRESOLVED_LINK, "b", "link", target_id="x")

        first.extend(second)

        assert len(first) == 2
        assert [w.target_id for w in first.by_kind(WarningKind.UNRESOLVED_LINK)] == ["x"]

    def test_str_lists_locations(self):
        log = DiagnosticLog()
        warning = log.warn(
            WarningKind.DUPLICATE_ID, "a", "dup", locations=("Existing: x.md", "New: y.md")
        )

        assert str(warning) == "[duplicate-id] a: dup\n   Existing: x.md\n   New: y.md"

    def test_empty_is_falsy(self):
        assert not DiagnosticLog()


class TestBuildLogging:
    def test_unresolved_reference_logged_at_debug(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="labgraph"):
            build_graph(make_document("exp-1", "experiment", project="ghost"))

        records = [r for r in caplog.records if "ghost" in r.getMessage()]
        assert [r.levelno for r in records] == [logging.DEBUG]
