"""Indexing phase: classifies every line and builds the adjacency index."""

import logging
from typing import Any, Dict

from ..graph_index import GraphIndexBuilder
from ..line_classifier import classify_line
from ..pipeline import PipelinePhase

logger = logging.getLogger(__name__)


class GraphIndexPhase(PipelinePhase):
    phase_name = "indexing"

    def run(self, context: Dict[str, Any]) -> Dict[str, Any]:
        builder = GraphIndexBuilder()
        builder.add_lines(classify_line(line) for line in context["lines"])
        index_report = builder.to_json()
        logger.debug(
            "Indexed %(node_count)d nodes, %(edge_count)d edges, %(label_count)d labels",
            index_report,
        )
        return {"graph_index": builder.build(), "index_report": index_report}
