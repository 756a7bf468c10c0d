import pytest

from mapreduce_memory_analyzer.analytics.memory_stats import aggregate_samples
from mapreduce_memory_analyzer.errors import MissingCounterError
from mapreduce_memory_analyzer.models.task_data import TaskSample

MB = 1024 * 1024


def test_only_sampled_tasks_are_aggregated(make_task):
    tasks = [
        make_task(pmem_mb=1000, vmem_mb=2000, runtime_ms=1000),
        make_task(pmem_mb=3000, vmem_mb=4000, runtime_ms=3000),
        make_task(pmem_mb=9000, vmem_mb=9000, runtime_ms=9000, sampled=False),
    ]
    stats = aggregate_samples(tasks)
    assert stats.num_tasks == 3
    assert stats.avg_physical_bytes == 2000 * MB
    assert stats.avg_virtual_bytes == 3000 * MB
    assert stats.avg_runtime_ms == 2000
    assert stats.min_physical_bytes == 1000 * MB
    assert stats.max_physical_bytes == 3000 * MB


def test_averages_truncate():
    tasks = [
        TaskSample(
            task_id=f"t{i}",
            is_sampled=True,
            total_run_time_ms=runtime,
            counters={"PHYSICAL_MEMORY_BYTES": pmem, "VIRTUAL_MEMORY_BYTES": 0},
        )
        for i, (runtime, pmem) in enumerate([(1, 1), (2, 2)])
    ]
    stats = aggregate_samples(tasks)
    assert stats.avg_runtime_ms == 1
    assert stats.avg_physical_bytes == 1


def test_no_sampled_tasks_report_zero(make_task):
    stats = aggregate_samples([make_task(sampled=False), make_task(sampled=False)])
    assert stats.num_tasks == 2
    assert stats.avg_physical_bytes == 0
    assert stats.avg_virtual_bytes == 0
    assert stats.avg_runtime_ms == 0
    assert stats.min_physical_bytes == 0
    assert stats.max_physical_bytes == 0


def test_empty_task_list():
    stats = aggregate_samples([])
    assert stats.num_tasks == 0
    assert stats.min_physical_bytes == 0


def test_genuine_zero_sample_is_the_minimum(make_task):
    stats = aggregate_samples([make_task(pmem_mb=0), make_task(pmem_mb=512)])
    assert stats.min_physical_bytes == 0
    assert stats.max_physical_bytes == 512 * MB


def test_unsampled_task_counters_are_not_read():
    task = TaskSample(task_id="t0", is_sampled=False, total_run_time_ms=5)
    assert aggregate_samples([task]).num_tasks == 1


def test_sampled_task_without_counters_fails():
    task = TaskSample(task_id="t0", is_sampled=True, total_run_time_ms=5)
    with pytest.raises(MissingCounterError):
        aggregate_samples([task])
