"""Resolution of inclusion/exclusion lists from CLI tokens and sidecar files."""

import logging
from pathlib import Path
from typing import List, Sequence

from .config import TEXT_ENCODING, TEXT_ERRORS, FilterSettings
from .graph_model import Selection

logger = logging.getLogger(__name__)

INCLUDE_PREFIX = "+"
EXCLUDE_PREFIX = "-"
NO_DUPS_TOKEN = "nodups"


def parse_selectors(tokens: Sequence[str]) -> Selection:
    """Split CLI tokens into inclusions, exclusions and the ``nodups`` switch.

    ``+id`` includes, ``-id`` excludes, a bare ``nodups`` (any case) turns on
    duplicate-edge suppression and any other bare token is an inclusion.
    """
    selection = Selection()
    for token in tokens:
        if token.startswith(INCLUDE_PREFIX):
            target, node_id = selection.inclusions, token[1:]
        elif token.startswith(EXCLUDE_PREFIX):
            target, node_id = selection.exclusions, token[1:]
        elif token.lower() == NO_DUPS_TOKEN:
            selection.no_dups = True
            continue
        else:
            target, node_id = selection.inclusions, token

        if not node_id:
            logger.warning("Ignoring selector without a node id: %r", token)
            continue
        target.append(node_id)
    return selection


def read_id_list(path: Path) -> List[str]:
    result: List[str] = []
    for line in path.read_text(encoding=TEXT_ENCODING, errors=TEXT_ERRORS).splitlines():
        fields = line.split()
        if fields:
            result.append(fields[0])
    return result


def _read_optional_list(path: Path) -> List[str]:
    try:
        ids = read_id_list(path)
    except OSError as exc:
        logger.debug("No sidecar list at %s: %s", path, exc)
        return []
    logger.debug("Loaded %d ids from %s", len(ids), path)
    return ids


def load_selection(tokens: Sequence[str], settings: FilterSettings) -> Selection:
    selection = parse_selectors(tokens)
    selection.inclusions.extend(_read_optional_list(Path(settings.include_file)))
    selection.exclusions.extend(_read_optional_list(Path(settings.exclude_file)))
    return selection
