"""Builder for forward and reverse adjacency of a graph description."""

from typing import Any, Dict, Iterable, List

from .graph_model import EDGE, LABEL, ClassifiedLine, GraphIndex


class GraphIndexBuilder:
    """Owns adjacency mappings while lines are being classified."""

    def __init__(self) -> None:
        self._forward: Dict[str, List[str]] = {}
        self._reverse: Dict[str, List[str]] = {}
        self._names: Dict[str, str] = {}
        self._edge_count = 0

    def add_edge(self, left: str, right: str) -> None:
        self._forward.setdefault(left, []).append(right)
        self._reverse.setdefault(right, []).append(left)
        self._edge_count += 1

    def add_label(self, node_id: str, name: str) -> None:
        self._names[node_id] = name

    def add_line(self, line: ClassifiedLine) -> None:
        if line.kind == EDGE:
            self.add_edge(line.left, line.right)
        elif line.kind == LABEL:
            self.add_label(line.node_id, line.name)

    def add_lines(self, lines: Iterable[ClassifiedLine]) -> "GraphIndexBuilder":
        for line in lines:
            self.add_line(line)
        return self

    def build(self) -> GraphIndex:
        return GraphIndex(
            forward={node: list(targets) for node, targets in self._forward.items()},
            reverse={node: list(sources) for node, sources in self._reverse.items()},
            names=dict(self._names),
        )

    def to_json(self) -> Dict[str, Any]:
        nodes = set(self._forward) | set(self._reverse)
        return {
            "node_count": len(nodes),
            "edge_count": self._edge_count,
            "label_count": len(self._names),
        }
