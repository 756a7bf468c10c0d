"""Severity threshold ladders for the task memory heuristics.

Two ladders of four breakpoints each are read from the heuristic params:
- memory_ratio_severity: avg physical memory / container memory, descending
- container_memory_severity: multiples of the default container size, ascending
"""
import logging
from dataclasses import dataclass
from typing import Mapping
from typing import Optional
from typing import Tuple

from mapreduce_memory_analyzer.utils.conversions import ONE_MB
from mapreduce_memory_analyzer.utils.params import get_param

logger = logging.getLogger(__name__)

MEM_RATIO_SEVERITY = "memory_ratio_severity"
CONTAINER_MEM_SEVERITY = "container_memory_severity"

CONTAINER_MEMORY_DEFAULT_BYTES = 2048 * ONE_MB

DEFAULT_MEMORY_RATIO_LIMITS = (0.6, 0.5, 0.4, 0.3)
DEFAULT_CONTAINER_MEMORY_LIMITS = (1.1, 1.5, 2.0, 2.5)

ThresholdLadder = Tuple[float, float, float, float]


def _load_ladder(
    params: Mapping[str, str],
    key: str,
    default: ThresholdLadder,
    heuristic_name: str,
) -> ThresholdLadder:
    limits = default
    if params.get(key) is not None:
        conf_limits = get_param(params[key], len(default))
        if conf_limits is not None:
            limits = tuple(conf_limits)
    logger.info(
        f"{heuristic_name} will use {key} with the following threshold settings: "
        f"{list(limits)}"
    )
    return limits


@dataclass(frozen=True)
class ThresholdConfig:
    """Ladders in effect for one heuristic instance. Container limits are in bytes."""

    memory_ratio_limits: ThresholdLadder = DEFAULT_MEMORY_RATIO_LIMITS
    container_memory_limits: ThresholdLadder = tuple(
        limit * CONTAINER_MEMORY_DEFAULT_BYTES
        for limit in DEFAULT_CONTAINER_MEMORY_LIMITS
    )

    @classmethod
    def from_params(
        cls, params: Optional[Mapping[str, str]], heuristic_name: str = ""
    ) -> "ThresholdConfig":
        """Resolve both ladders from params, keeping defaults for bad entries."""
        params = params or {}
        memory_ratio_limits = _load_ladder(
            params, MEM_RATIO_SEVERITY, DEFAULT_MEMORY_RATIO_LIMITS, heuristic_name
        )
        memory_limits = _load_ladder(
            params,
            CONTAINER_MEM_SEVERITY,
            DEFAULT_CONTAINER_MEMORY_LIMITS,
            heuristic_name,
        )
        return cls(
            memory_ratio_limits=memory_ratio_limits,
            container_memory_limits=tuple(
                limit * CONTAINER_MEMORY_DEFAULT_BYTES for limit in memory_limits
            ),
        )
