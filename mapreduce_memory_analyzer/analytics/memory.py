"""Container memory efficiency heuristics for MapReduce tasks.

A job is flagged when its tasks use a small fraction of the container
memory they requested AND the requested container is large compared to the
default container size. Both signals have to agree: the final severity is
the lower of the two.
"""
import logging
from typing import Callable
from typing import Dict
from typing import List
from typing import Optional
from typing import Sequence
from typing import Tuple

from mapreduce_memory_analyzer.config.heuristic_conf import HeuristicConfigurationData
from mapreduce_memory_analyzer.config.heuristic_conf import MAPPER_MEMORY
from mapreduce_memory_analyzer.config.heuristic_conf import REDUCER_MEMORY
from mapreduce_memory_analyzer.config.thresholds import ThresholdConfig
from mapreduce_memory_analyzer.models.heuristic_result import HeuristicResult
from mapreduce_memory_analyzer.models.heuristic_result import heuristic_score
from mapreduce_memory_analyzer.models.severity import Severity
from mapreduce_memory_analyzer.models.task_data import JobRecord
from mapreduce_memory_analyzer.models.task_data import TaskSample
from mapreduce_memory_analyzer.utils.conversions import byte_count_to_display_size
from mapreduce_memory_analyzer.utils.conversions import bytes_to_mb
from mapreduce_memory_analyzer.utils.conversions import readable_timespan

from .base import BaseHeuristic
from .container_memory import resolve_container_memory
from .memory_stats import TaskMemoryStats
from .memory_stats import aggregate_samples

logger = logging.getLogger(__name__)

MAP_MEMORY_CONF = "mapreduce.map.memory.mb"
REDUCE_MEMORY_CONF = "mapreduce.reduce.memory.mb"

TaskSelector = Callable[[JobRecord], Sequence[TaskSample]]


def select_map_tasks(job: JobRecord) -> Sequence[TaskSample]:
    return job.map_tasks


def select_reduce_tasks(job: JobRecord) -> Sequence[TaskSample]:
    return job.reduce_tasks


def get_memory_ratio_severity(ratio: float, thresholds: ThresholdConfig) -> Severity:
    return Severity.get_severity_descending(ratio, *thresholds.memory_ratio_limits)


def get_container_memory_severity(
    container_memory_bytes: int, thresholds: ThresholdConfig
) -> Severity:
    return Severity.get_severity_ascending(
        container_memory_bytes, *thresholds.container_memory_limits
    )


def classify_memory_severity(
    avg_physical_bytes: int, container_memory_bytes: int, thresholds: ThresholdConfig
) -> Severity:
    """Lower of the usage ratio severity and the container size severity."""
    ratio = avg_physical_bytes / container_memory_bytes
    sev_ratio = get_memory_ratio_severity(ratio, thresholds)
    # Severity is reduced if the requested container memory is close to default
    sev_container = get_container_memory_severity(container_memory_bytes, thresholds)
    return Severity.min(sev_ratio, sev_container)


def build_details(
    stats: TaskMemoryStats, container_memory_bytes: int
) -> List[Tuple[str, str]]:
    return [
        ("Number of tasks", str(stats.num_tasks)),
        ("Avg task runtime", readable_timespan(stats.avg_runtime_ms)),
        ("Avg Physical Memory (MB)", str(bytes_to_mb(stats.avg_physical_bytes))),
        ("Max Physical Memory (MB)", str(bytes_to_mb(stats.max_physical_bytes))),
        ("Min Physical Memory (MB)", str(bytes_to_mb(stats.min_physical_bytes))),
        ("Avg Virtual Memory (MB)", str(bytes_to_mb(stats.avg_virtual_bytes))),
        (
            "Requested Container Memory",
            byte_count_to_display_size(container_memory_bytes),
        ),
    ]


class TaskMemoryHeuristic(BaseHeuristic):
    """
    Memory efficiency of the containers of one kind of task.

    Which tasks are evaluated is decided by task_selector, so the same
    heuristic serves map and reduce tasks.
    """

    def __init__(
        self,
        container_memory_conf: str,
        heuristic_name: str,
        heuristic_conf: Optional[HeuristicConfigurationData],
        task_selector: TaskSelector,
    ):
        self._container_memory_conf = container_memory_conf
        self._heuristic_name = heuristic_name
        self._heuristic_conf = heuristic_conf
        self._task_selector = task_selector
        self.thresholds = ThresholdConfig.from_params(
            heuristic_conf.params if heuristic_conf else None, heuristic_name
        )

    @property
    def heuristic_name(self) -> str:
        return self._heuristic_name

    def apply(self, job: JobRecord) -> Optional[HeuristicResult]:
        if not job.succeeded:
            return None

        container_mem = resolve_container_memory(
            job.configuration, self._container_memory_conf
        )
        tasks = self._task_selector(job)
        stats = aggregate_samples(tasks)

        if stats.num_tasks == 0:
            severity = Severity.NONE
        else:
            severity = classify_memory_severity(
                stats.avg_physical_bytes, container_mem, self.thresholds
            )
        logger.debug(
            f"{self._heuristic_name} on {job.job_id}: {severity.name} "
            f"(avg {stats.avg_physical_bytes} of {container_mem} bytes)"
        )

        result = HeuristicResult(
            heuristic_name=self._heuristic_name,
            severity=severity,
            score=heuristic_score(severity, stats.num_tasks),
        )
        for label, value in build_details(stats, container_mem):
            result.add_detail(label, value)
        return result


def mapper_memory_heuristic(
    heuristic_conf: Optional[HeuristicConfigurationData] = None,
) -> TaskMemoryHeuristic:
    return TaskMemoryHeuristic(
        MAP_MEMORY_CONF,
        heuristic_conf.heuristic_name if heuristic_conf else "Mapper Memory",
        heuristic_conf,
        select_map_tasks,
    )


def reducer_memory_heuristic(
    heuristic_conf: Optional[HeuristicConfigurationData] = None,
) -> TaskMemoryHeuristic:
    return TaskMemoryHeuristic(
        REDUCE_MEMORY_CONF,
        heuristic_conf.heuristic_name if heuristic_conf else "Reducer Memory",
        heuristic_conf,
        select_reduce_tasks,
    )


HEURISTIC_FACTORIES: Dict[
    str, Callable[[Optional[HeuristicConfigurationData]], TaskMemoryHeuristic]
] = {
    MAPPER_MEMORY: mapper_memory_heuristic,
    REDUCER_MEMORY: reducer_memory_heuristic,
}


def build_heuristics(
    heuristic_confs: Sequence[HeuristicConfigurationData],
) -> List[BaseHeuristic]:
    """Instantiate the configured heuristics, in configuration order."""
    return [HEURISTIC_FACTORIES[conf.class_name](conf) for conf in heuristic_confs]
