"""Tests for the phase runner and the end-to-end filtering pipeline."""

import pytest

from subgraph_filter.cli import build_default_phases, run_filter
from subgraph_filter.graph_model import Selection
from subgraph_filter.phases.ingestion import split_lines
from subgraph_filter.pipeline import PipelinePhase, PipelineRunner


class _EchoPhase(PipelinePhase):
    phase_name = "echo"

    def run(self, context):
        return {"seen": sorted(context)}


class _BrokenPhase(PipelinePhase):
    phase_name = "broken"

    def run(self, context):
        return ["not", "a", "dict"]


class TestPipelineRunner:
    def test_results_are_merged_into_context(self):
        result = PipelineRunner([_EchoPhase()]).run({"a": 1})
        assert result["a"] == 1
        assert result["seen"] == ["a"]

    def test_phase_log_records_each_phase(self):
        result = PipelineRunner([_EchoPhase(), _EchoPhase()]).run({"a": 1})
        log = result["phase_log"]
        assert [entry["phase"] for entry in log] == ["echo", "echo"]
        assert log[0]["produced"] == ["seen"]
        assert all(entry["seconds"] >= 0 for entry in log)

    def test_default_pipeline_logs_every_phase(self, chain_lines):
        log = run_filter(lines=chain_lines)["phase_log"]
        assert [entry["phase"] for entry in log] == [
            "ingestion",
            "indexing",
            "reachability",
            "emission",
            "report",
        ]
        assert log[-1]["produced"] == ["filter_report"]

    def test_initial_context_is_not_mutated(self):
        initial = {"a": 1}
        PipelineRunner([_EchoPhase()]).run(initial)
        assert initial == {"a": 1}

    def test_non_dict_result_is_rejected(self):
        with pytest.raises(TypeError, match="broken"):
            PipelineRunner([_BrokenPhase()]).run({})

    def test_default_phase_order(self):
        names = [phase.phase_name for phase in build_default_phases()]
        assert names == ["ingestion", "indexing", "reachability", "emission", "report"]


class TestRunFilter:
    def test_scenario_with_root(self):
        lines = ["a -> b", "b -> c", "c -> d", "x -> b", "nothing -> x", "far -> nothing"]
        context = run_filter(lines=lines, selection=Selection(inclusions=["b"]))
        assert context["output_lines"] == [
            "a -> b",
            "b -> c",
            "c -> d",
            "x -> b",
            "nothing -> x",
        ]

    def test_scenario_with_root_and_exclusion(self):
        lines = ["a -> b", "b -> c", "c -> d", "x -> b"]
        selection = Selection(inclusions=["b"], exclusions=["c"])
        context = run_filter(lines=lines, selection=selection)
        assert context["output_lines"] == ["a -> b", "b -> c", "x -> b"]

    def test_no_roots_removes_excluded_nodes(self, chain_lines):
        context = run_filter(lines=chain_lines, selection=Selection(exclusions=["c"]))
        assert context["output_lines"] == [
            "digraph G {",
            "  rankdir=LR;",
            '  a [label="<name> Alpha|<out> a"];',
            '  b [label="<name> Beta"];',
            '  d [label="<name> Delta"];',
            "  a -> b;",
            "  x -> b;",
            "}",
        ]

    def test_filtering_is_idempotent(self, chain_lines):
        for selection in (
            Selection(inclusions=["b"]),
            Selection(inclusions=["b"], exclusions=["c"]),
            Selection(exclusions=["x"]),
            Selection(inclusions=["a"], no_dups=True),
        ):
            first = run_filter(lines=chain_lines, selection=selection)["output_lines"]
            second = run_filter(lines=first, selection=selection)["output_lines"]
            assert second == first

    def test_nodups_end_to_end(self):
        lines = ["a -> b", "a -> b"]
        assert run_filter(lines=lines, selection=Selection(inclusions=["a"]))[
            "output_lines"
        ] == lines
        assert run_filter(lines=lines, selection=Selection(inclusions=["a"], no_dups=True))[
            "output_lines"
        ] == ["a -> b"]

    def test_reads_input_file(self, tmp_path, chain_lines):
        path = tmp_path / "graph.dot"
        path.write_text("\n".join(chain_lines) + "\n", encoding="utf-8")
        context = run_filter(input_path=str(path), selection=Selection(inclusions=["c"]))
        assert context["lines"] == chain_lines
        assert "  c -> d;" in context["output_lines"]

    def test_missing_input_raises_oserror(self, tmp_path):
        with pytest.raises(OSError):
            run_filter(input_path=str(tmp_path / "absent.dot"))

    def test_report_counts_and_warnings(self, chain_lines):
        selection = Selection(inclusions=["b", "ghost"], exclusions=["phantom"])
        report = run_filter(lines=chain_lines, selection=selection)["filter_report"]
        assert report["node_count"] == 5
        assert report["edge_count"] == 4
        assert report["label_count"] == 3
        assert report["kept_count"] == 6
        assert report["input_line_count"] == len(chain_lines)
        assert report["warnings"] == [
            "inclusion root 'ghost' does not appear in any edge",
            "exclusion 'phantom' does not appear in any edge",
        ]


class TestLineIngestion:
    def test_split_keeps_carriage_returns(self):
        assert split_lines("a -> b;\r\n}\r\n") == ["a -> b;\r", "}\r"]

    def test_split_only_on_line_feed(self):
        assert split_lines('z [label="A\x0cB"];\nx y') == ['z [label="A\x0cB"];', "x y"]

    def test_missing_final_newline_keeps_last_line(self):
        assert split_lines("a\nb") == ["a", "b"]
        assert split_lines("") == []

    def test_form_feed_inside_dropped_label_does_not_leak(self, tmp_path):
        path = tmp_path / "graph.dot"
        path.write_bytes(b'a -> b;\nz [label="<name> A\x0cB"];\n')
        context = run_filter(input_path=str(path), selection=Selection(inclusions=["a"]))
        assert context["output_lines"] == ["a -> b;"]

    def test_undecodable_bytes_are_read(self, tmp_path):
        path = tmp_path / "graph.dot"
        path.write_bytes(b'a -> b;\na [label="<name> caf\xe9"];\n')
        context = run_filter(input_path=str(path), selection=Selection(inclusions=["a"]))
        assert len(context["output_lines"]) == 2
        assert context["graph_index"].names == {"a": "caf\udce9"}
