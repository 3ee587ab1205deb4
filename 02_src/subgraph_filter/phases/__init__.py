"""Pipeline phases for subgraph filtering."""

from .emission import SelectiveEmissionPhase
from .indexing import GraphIndexPhase
from .ingestion import LineIngestionPhase
from .reachability import ReachabilityPhase
from .report import FilterReportPhase

__all__ = [
    "LineIngestionPhase",
    "GraphIndexPhase",
    "ReachabilityPhase",
    "SelectiveEmissionPhase",
    "FilterReportPhase",
]
