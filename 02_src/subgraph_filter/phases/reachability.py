"""Reachability phase: turns the caller's selection into a keep-count store."""

from typing import Any, Dict

from ..graph_model import GraphIndex, Selection
from ..pipeline import PipelinePhase
from ..reachability import ANCESTOR_DEPTH, select_nodes


class ReachabilityPhase(PipelinePhase):
    phase_name = "reachability"

    def __init__(self, ancestor_depth: int = ANCESTOR_DEPTH) -> None:
        self._ancestor_depth = ancestor_depth

    def run(self, context: Dict[str, Any]) -> Dict[str, Any]:
        index: GraphIndex = context["graph_index"]
        selection: Selection = context.get("selection") or Selection()
        store = select_nodes(
            index,
            selection.inclusions,
            selection.exclusions,
            ancestor_depth=self._ancestor_depth,
        )
        return {"keep_counts": store}
