"""Core package for extracting subgraphs from line-oriented graph descriptions."""

from .graph_index import GraphIndexBuilder
from .graph_model import ClassifiedLine, GraphIndex, Selection
from .pipeline import PipelinePhase, PipelineRunner
from .reachability import ANCESTOR_DEPTH, select_nodes

__all__ = [
    "ClassifiedLine",
    "GraphIndex",
    "GraphIndexBuilder",
    "Selection",
    "PipelinePhase",
    "PipelineRunner",
    "ANCESTOR_DEPTH",
    "select_nodes",
]
