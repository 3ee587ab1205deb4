"""CLI entrypoint helpers for subgraph filtering runs."""

import argparse
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List, Sequence

from .config import TEXT_ENCODING, TEXT_ERRORS, FilterSettings, load_settings
from .graph_model import Selection
from .logging_config import setup_logging
from .phases import (
    FilterReportPhase,
    GraphIndexPhase,
    LineIngestionPhase,
    ReachabilityPhase,
    SelectiveEmissionPhase,
)
from .pipeline import PipelinePhase, PipelineRunner
from .selection import load_selection

logger = logging.getLogger(__name__)

USAGE_EXIT_CODE = 7
USAGE = "subgraph-filter <input-path> <output-path> [+include | -exclude | nodups | id ...]"


def build_default_phases() -> List[PipelinePhase]:
    return [
        LineIngestionPhase(),
        GraphIndexPhase(),
        ReachabilityPhase(),
        SelectiveEmissionPhase(),
        FilterReportPhase(),
    ]


def run_filter(
    input_path: str = "",
    selection: Selection | None = None,
    lines: Sequence[str] | None = None,
) -> Dict[str, Any]:
    initial_context: Dict[str, Any] = {
        "input_path": input_path,
        "selection": selection or Selection(),
    }
    if lines is not None:
        initial_context["lines"] = list(lines)
    runner = PipelineRunner(phases=build_default_phases())
    return runner.run(initial_context)


def write_output(output_path: Path, lines: Sequence[str]) -> None:
    # assembled in memory so the file is only created once filtering succeeded
    text = "".join(f"{line}\n" for line in lines)
    with open(output_path, "w", encoding=TEXT_ENCODING, errors=TEXT_ERRORS, newline="") as handle:
        handle.write(text)


def parse_args(argv: List[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Extract a subgraph from a graph description, keeping original lines.",
        usage=USAGE,
    )
    parser.add_argument("input_path", help="Graph description to filter.")
    parser.add_argument("output_path", help="Where to write the filtered lines.")
    parser.add_argument(
        "selectors",
        nargs=argparse.REMAINDER,
        help="'+id' includes a root, '-id' excludes a node, 'nodups' drops repeated edges; "
        "any other token is an inclusion root.",
    )
    return parser.parse_args(argv)


def main(argv: List[str] | None = None, settings: FilterSettings | None = None) -> int:
    argv = list(sys.argv[1:] if argv is None else argv)
    settings = settings or load_settings()
    setup_logging(settings.log_level)

    if len(argv) < 2:
        print("not enough arguments")
        print(f"usage: {USAGE}")
        return USAGE_EXIT_CODE

    args = parse_args(argv)
    selection = load_selection(args.selectors, settings)
    logger.debug(
        "Selection: %d inclusions, %d exclusions, nodups=%s",
        len(selection.inclusions),
        len(selection.exclusions),
        selection.no_dups,
    )

    # I/O failures are reported on the console but still exit with status 0
    try:
        final_context = run_filter(input_path=args.input_path, selection=selection)
    except OSError as exc:
        print("failed to open file", args.input_path, ", due to:", exc)
        return 0

    output_path = Path(args.output_path)
    try:
        write_output(output_path, final_context["output_lines"])
    except OSError as exc:
        print("failed to create file", args.output_path, ", due to:", exc)
        return 0

    report = final_context["filter_report"]
    print(f"Filtered graph saved to: {output_path.resolve()}")
    print(
        "Counts:",
        f"nodes={report['node_count']}",
        f"edges={report['edge_count']}",
        f"labels={report['label_count']}",
        f"kept={report['kept_count']}",
        f"lines={report['output_line_count']}/{report['input_line_count']}",
    )
    for warning in report["warnings"]:
        logger.warning(warning)
    return 0


if __name__ == "__main__":
    sys.exit(main())
