"""Tests for adjacency index construction."""

from subgraph_filter.graph_index import GraphIndexBuilder
from subgraph_filter.line_classifier import classify_line


def build(lines):
    return GraphIndexBuilder().add_lines(classify_line(line) for line in lines)


class TestGraphIndexBuilder:
    def test_forward_and_reverse_follow_input_order(self):
        index = build(["a -> b", "a -> c", "d -> c"]).build()
        assert index.forward == {"a": ["b", "c"], "d": ["c"]}
        assert index.reverse == {"b": ["a"], "c": ["a", "d"]}

    def test_duplicate_edges_are_kept(self):
        index = build(["a -> b", "a:p1 -> b:p2", "a -> b"]).build()
        assert index.forward["a"] == ["b", "b", "b"]
        assert index.reverse["b"] == ["a", "a", "a"]

    def test_labels_are_collected_as_names(self, chain_lines):
        index = build(chain_lines).build()
        assert index.names == {"a": "Alpha", "b": "Beta", "d": "Delta"}

    def test_other_lines_are_ignored(self):
        index = build(["digraph G {", "  node [shape=box];", "}"]).build()
        assert index.forward == {}
        assert index.reverse == {}

    def test_nodes_cover_both_mappings(self, chain_lines):
        index = build(chain_lines).build()
        assert sorted(index.nodes()) == ["a", "b", "c", "d", "x"]
        assert len(index.nodes()) == len(set(index.nodes()))

    def test_built_index_is_detached_from_builder(self):
        builder = build(["a -> b"])
        index = builder.build()
        builder.add_edge("a", "c")
        assert index.forward == {"a": ["b"]}

    def test_to_json_counts(self, chain_lines):
        assert build(chain_lines).to_json() == {
            "node_count": 5,
            "edge_count": 4,
            "label_count": 3,
        }
