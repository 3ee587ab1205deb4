"""Phase abstraction and the sequential runner that threads a context dict."""

import logging
import time
from abc import ABC, abstractmethod
from typing import Any, Dict, Iterable, List

logger = logging.getLogger(__name__)


class PipelinePhase(ABC):
    phase_name: str

    @abstractmethod
    def run(self, context: Dict[str, Any]) -> Dict[str, Any]:
        raise NotImplementedError


class PipelineRunner:
    """Runs phases in order and records what each one contributed.

    The final context carries ``phase_log``: one entry per phase with its
    name, the context keys it produced and its wall-clock duration.
    """

    def __init__(self, phases: Iterable[PipelinePhase]) -> None:
        self.phases: List[PipelinePhase] = list(phases)

    def run(self, context: Dict[str, Any]) -> Dict[str, Any]:
        current = dict(context)
        phase_log: List[Dict[str, Any]] = []
        for phase in self.phases:
            started = time.perf_counter()
            phase_result = phase.run(current)
            if not isinstance(phase_result, dict):
                raise TypeError(f"Phase '{phase.phase_name}' must return dict context.")
            elapsed = time.perf_counter() - started
            current.update(phase_result)
            phase_log.append(
                {
                    "phase": phase.phase_name,
                    "produced": sorted(phase_result),
                    "seconds": elapsed,
                }
            )
            logger.debug(
                "Phase %s produced %s in %.4fs",
                phase.phase_name,
                ", ".join(sorted(phase_result)) or "nothing",
                elapsed,
            )
        current["phase_log"] = phase_log
        return current
