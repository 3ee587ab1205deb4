"""Keep-set computation: descendants with exclusion cut-offs plus bounded ancestors.

Both traversals walk depth-first in the same order a recursive walk would,
checking whether a neighbour is already in the store at the moment it is
reached. An explicit stack replaces recursion so long chains do not run into
the interpreter recursion limit.
"""

import logging
from collections import Counter
from typing import AbstractSet, Dict, Iterable, List, Sequence

from .graph_model import GraphIndex

logger = logging.getLogger(__name__)

# how many parent levels are pulled in above every inclusion root
ANCESTOR_DEPTH = 2

_DONE = object()


def include_descendants(
    root: str,
    exclude: AbstractSet[str],
    forward: Dict[str, List[str]],
    store: Counter,
) -> None:
    assert store is not None and root, "descendant traversal needs a store and a root"

    store[root] += 1
    if root in exclude:
        return

    stack = [iter(forward.get(root, ()))]
    while stack:
        child = next(stack[-1], _DONE)
        if child is _DONE:
            stack.pop()
            continue
        if child in store:
            continue
        store[child] += 1
        if child not in exclude:
            stack.append(iter(forward.get(child, ())))


def include_ancestors(
    root: str,
    reverse: Dict[str, List[str]],
    max_depth: int,
    store: Counter,
) -> None:
    assert store is not None and max_depth >= 0, "ancestor traversal needs a store and a depth"

    store[root] += 1
    if max_depth == 0:
        return

    stack = [(iter(reverse.get(root, ())), max_depth - 1)]
    while stack:
        parents, depth = stack[-1]
        parent = next(parents, _DONE)
        if parent is _DONE:
            stack.pop()
            continue
        if parent in store:
            continue
        store[parent] += 1
        if depth > 0:
            stack.append((iter(reverse.get(parent, ())), depth - 1))


def select_nodes(
    index: GraphIndex,
    inclusions: Sequence[str],
    exclusions: Iterable[str],
    ancestor_depth: int = ANCESTOR_DEPTH,
) -> Counter:
    """Return the keep-count store for a run.

    With inclusion roots, every root contributes its descendants (descent
    stops at excluded nodes, which stay kept) and ``ancestor_depth`` levels of
    parents. Without roots, every node of the index is kept and excluded ids
    are removed outright.
    """
    exclusions = list(exclusions)
    store: Counter = Counter()

    if inclusions:
        exclude = frozenset(exclusions)
        for root in inclusions:
            include_descendants(root, exclude, index.forward, store)
            include_ancestors(root, index.reverse, ancestor_depth, store)
        logger.debug("kept %d nodes from %d roots", len(store), len(inclusions))
        return store

    for node in index.forward:
        store[node] += 1
    for node in index.reverse:
        store[node] += 1
    for node in exclusions:
        store.pop(node, None)
    logger.debug("kept %d nodes without roots", len(store))
    return store


def is_kept(store: Counter, node: str) -> bool:
    return store.get(node, 0) > 0
