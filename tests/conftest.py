import pytest

from mapreduce_memory_analyzer.models.task_data import JobRecord
from mapreduce_memory_analyzer.models.task_data import TaskSample

MB = 1024 * 1024


@pytest.fixture
def make_task():
    counter = {"n": 0}

    def _make_task(pmem_mb=1024, vmem_mb=2048, runtime_ms=60000, sampled=True):
        counter["n"] += 1
        return TaskSample(
            task_id=f"task_{counter['n']:06d}",
            is_sampled=sampled,
            total_run_time_ms=runtime_ms,
            counters={
                "PHYSICAL_MEMORY_BYTES": pmem_mb * MB,
                "VIRTUAL_MEMORY_BYTES": vmem_mb * MB,
            },
        )

    return _make_task


@pytest.fixture
def make_job():
    def _make_job(map_tasks=(), reduce_tasks=(), configuration=None, succeeded=True):
        return JobRecord(
            job_id="job_1700000000000_0001",
            succeeded=succeeded,
            configuration=configuration
            if configuration is not None
            else {
                "mapreduce.map.memory.mb": "2048",
                "mapreduce.reduce.memory.mb": "4096",
            },
            map_tasks=list(map_tasks),
            reduce_tasks=list(reduce_tasks),
        )

    return _make_job
