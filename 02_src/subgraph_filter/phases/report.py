"""Summary phase: counts and warnings for a finished filtering run."""

from typing import Any, Dict, List

from ..graph_model import GraphIndex, Selection
from ..pipeline import PipelinePhase
from ..reachability import is_kept


class FilterReportPhase(PipelinePhase):
    phase_name = "report"

    def run(self, context: Dict[str, Any]) -> Dict[str, Any]:
        index: GraphIndex = context["graph_index"]
        selection: Selection = context.get("selection") or Selection()
        store = context["keep_counts"]
        known_nodes = set(index.nodes())

        warnings: List[str] = []
        for root in selection.inclusions:
            if root not in known_nodes:
                warnings.append(f"inclusion root '{root}' does not appear in any edge")
        for node in selection.exclusions:
            if node not in known_nodes:
                warnings.append(f"exclusion '{node}' does not appear in any edge")

        report = dict(context.get("index_report", {}))
        report.update(
            {
                "kept_count": sum(1 for node in store if is_kept(store, node)),
                "input_line_count": len(context["lines"]),
                "output_line_count": len(context["output_lines"]),
                "warnings": warnings,
            }
        )
        return {"filter_report": report}
