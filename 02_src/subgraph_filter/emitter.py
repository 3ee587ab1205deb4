"""Selective re-emission of the original lines for a keep set."""

from collections import Counter
from typing import Iterable, List, Set

from .graph_model import EDGE, LABEL
from .line_classifier import classify_line
from .reachability import is_kept

MARKER_SEPARATOR = "::"


def edge_marker(left: str, right: str) -> str:
    # ports are already stripped from both ids
    return f"{left}{MARKER_SEPARATOR}{right}"


def emit_selected(lines: Iterable[str], store: Counter, no_dups: bool = False) -> List[str]:
    """Return the original lines that survive filtering, in input order.

    Edges need both endpoints kept, label lines need their node kept, and
    anything else (graph attributes, braces, comments) is always emitted.
    """
    emitted: List[str] = []
    already: Set[str] = set()

    for line in lines:
        classified = classify_line(line)
        if classified.kind == EDGE:
            if not (is_kept(store, classified.left) and is_kept(store, classified.right)):
                continue
            if no_dups:
                marker = edge_marker(classified.left, classified.right)
                if marker in already:
                    continue
                already.add(marker)
            emitted.append(line)
        elif classified.kind == LABEL:
            if is_kept(store, classified.node_id):
                emitted.append(line)
        else:
            emitted.append(line)
    return emitted
