"""Emission phase: selects the original lines that belong in the output."""

from typing import Any, Dict

from ..emitter import emit_selected
from ..graph_model import Selection
from ..pipeline import PipelinePhase


class SelectiveEmissionPhase(PipelinePhase):
    phase_name = "emission"

    def run(self, context: Dict[str, Any]) -> Dict[str, Any]:
        selection: Selection = context.get("selection") or Selection()
        output_lines = emit_selected(
            context["lines"],
            context["keep_counts"],
            no_dups=selection.no_dups,
        )
        return {"output_lines": output_lines}
