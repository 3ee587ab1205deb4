"""Input ingestion phase: loads the original lines of a graph description."""

from pathlib import Path
from typing import Any, Dict, List

from ..config import TEXT_ENCODING, TEXT_ERRORS
from ..pipeline import PipelinePhase


def split_lines(text: str) -> List[str]:
    """Split on LF only; CR and other separators stay inside their line.

    The empty tail after a final newline is not a line of its own.
    """
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return lines


class LineIngestionPhase(PipelinePhase):
    phase_name = "ingestion"

    def run(self, context: Dict[str, Any]) -> Dict[str, Any]:
        if "lines" in context:
            return {"lines": list(context["lines"])}
        input_path = Path(str(context["input_path"]))
        return {"lines": self._read_lines(input_path)}

    @staticmethod
    def _read_lines(input_path: Path) -> List[str]:
        # OSError is left to the caller, which decides how to report it
        with open(input_path, encoding=TEXT_ENCODING, errors=TEXT_ERRORS, newline="") as handle:
            return split_lines(handle.read())
