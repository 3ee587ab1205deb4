"""Data model primitives for the subgraph filter."""

from dataclasses import dataclass, field
from typing import Dict, List

EDGE = "edge"
LABEL = "label"
OTHER = "other"


@dataclass
class ClassifiedLine:
    kind: str
    raw: str
    left: str = ""
    right: str = ""
    node_id: str = ""
    name: str = ""


@dataclass
class GraphIndex:
    forward: Dict[str, List[str]] = field(default_factory=dict)
    reverse: Dict[str, List[str]] = field(default_factory=dict)
    names: Dict[str, str] = field(default_factory=dict)

    def nodes(self) -> List[str]:
        seen = dict.fromkeys(self.forward)
        seen.update(dict.fromkeys(self.reverse))
        return list(seen)


@dataclass
class Selection:
    inclusions: List[str] = field(default_factory=list)
    exclusions: List[str] = field(default_factory=list)
    no_dups: bool = False
