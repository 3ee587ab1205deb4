"""Classification of raw graph-description lines into edges and labels."""

from typing import Tuple

from .graph_model import EDGE, LABEL, OTHER, ClassifiedLine

CONNECTOR = "->"
PORT_SEPARATOR = ":"
LABEL_MARKER = " [label="
NAME_OPEN = "<name> "
NAME_CLOSE = '"];'
NAME_SEPARATOR = "|"
ATTRIBUTE_STARTS = ("[", ";", "/", "*")
SPACES = " \t"


def normalize_line(line: str) -> str:
    # a CR left over from a CRLF terminator is not part of the line
    return line.rstrip("\r").replace("\t", " ").strip(" ")


def remove_attributes(text: str) -> str:
    """Drop trailing attribute syntax from the right side of an edge.

    Each marker is applied in turn; a marker found at position 0 is ignored.
    """
    for marker in ATTRIBUTE_STARTS:
        index = text.find(marker)
        if index > 0:
            text = text[:index]
    return text


def get_between(text: str, left: str, right: str) -> str:
    if left:
        start = text.find(left)
        if start < 0:
            return ""
        text = text[start + len(left):]
    if right:
        end = text.find(right)
        if end < 0:
            return ""
        text = text[:end]
    return text.strip(" \t\r\n")


def classify_edge(line: str) -> Tuple[bool, str, str]:
    parts = normalize_line(line).strip(" \t;").split(CONNECTOR)
    if len(parts) != 2:
        return False, "", ""
    left = parts[0].split(PORT_SEPARATOR)[0].strip(SPACES)
    right = remove_attributes(parts[1].split(PORT_SEPARATOR)[0]).strip(SPACES)
    return True, left, right


def classify_label(line: str) -> Tuple[bool, str, str]:
    normalized = normalize_line(line)
    if LABEL_MARKER not in normalized:
        return False, "", ""
    node_id = get_between(normalized, "", " [")
    name = get_between(normalized, NAME_OPEN, NAME_CLOSE)
    name = name.split(NAME_SEPARATOR)[0].strip(SPACES)
    return True, node_id, name


def classify_line(line: str) -> ClassifiedLine:
    is_edge, left, right = classify_edge(line)
    if is_edge:
        return ClassifiedLine(kind=EDGE, raw=line, left=left, right=right)
    is_label, node_id, name = classify_label(line)
    if is_label:
        return ClassifiedLine(kind=LABEL, raw=line, node_id=node_id, name=name)
    return ClassifiedLine(kind=OTHER, raw=line)
