"""Memory statistics of the sampled tasks of a job.

Upstream collectors mark a representative subset of tasks as sampled to
bound evaluation cost; only those take part in the averages and extremes.
The task count still covers every task handed in.
"""
import sys
from dataclasses import dataclass
from typing import List
from typing import Sequence

import numpy as np

from mapreduce_memory_analyzer.models.task_data import TaskSample

# Cold start value for the minimum, never reported
_NO_SAMPLE = sys.maxsize


@dataclass(frozen=True)
class TaskMemoryStats:
    num_tasks: int
    avg_physical_bytes: int
    avg_virtual_bytes: int
    avg_runtime_ms: int
    min_physical_bytes: int
    max_physical_bytes: int


def _average(values: List[int]) -> int:
    if not values:
        return 0
    samples = np.asarray(values, dtype=np.int64)
    return int(samples.sum() // samples.size)


def aggregate_samples(tasks: Sequence[TaskSample]) -> TaskMemoryStats:
    task_pmems = []
    task_vmems = []
    runtimes_ms = []
    task_pmin = _NO_SAMPLE
    task_pmax = 0
    for task in tasks:
        if task.is_sampled:
            runtimes_ms.append(task.total_run_time_ms)
            task_pmem = task.physical_memory_bytes
            task_vmem = task.virtual_memory_bytes
            task_pmems.append(task_pmem)
            task_pmin = min(task_pmin, task_pmem)
            task_pmax = max(task_pmax, task_pmem)
            task_vmems.append(task_vmem)

    if task_pmin == _NO_SAMPLE:
        task_pmin = 0

    return TaskMemoryStats(
        num_tasks=len(tasks),
        avg_physical_bytes=_average(task_pmems),
        avg_virtual_bytes=_average(task_vmems),
        avg_runtime_ms=_average(runtimes_ms),
        min_physical_bytes=task_pmin,
        max_physical_bytes=task_pmax,
    )
