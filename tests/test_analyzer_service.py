from mapreduce_memory_analyzer import analyze_job
from mapreduce_memory_analyzer import analyze_jobs
from mapreduce_memory_analyzer.analytics.memory import mapper_memory_heuristic
from mapreduce_memory_analyzer.analytics.memory import reducer_memory_heuristic
from mapreduce_memory_analyzer.analyzer_service import AnalyzerService
from mapreduce_memory_analyzer.models.severity import Severity

MB = 1024 * 1024


def _job_dict(job_id="job_1", succeeded=True, map_memory="8192"):
    return {
        "jobId": job_id,
        "succeeded": succeeded,
        "configuration": {
            "mapreduce.map.memory.mb": map_memory,
            "mapreduce.reduce.memory.mb": "2048",
        },
        "mapTasks": [
            {
                "taskId": "m0",
                "isSampled": True,
                "totalRunTimeMs": 60000,
                "counters": {
                    "PHYSICAL_MEMORY_BYTES": 1000 * MB,
                    "VIRTUAL_MEMORY_BYTES": 2000 * MB,
                },
            }
        ],
        "reduceTasks": [
            {
                "taskId": "r0",
                "isSampled": True,
                "totalRunTimeMs": 60000,
                "counters": {
                    "PHYSICAL_MEMORY_BYTES": 1500 * MB,
                    "VIRTUAL_MEMORY_BYTES": 2000 * MB,
                },
            }
        ],
    }


def test_runs_every_heuristic(make_task, make_job):
    service = AnalyzerService([mapper_memory_heuristic(), reducer_memory_heuristic()])
    job = make_job(map_tasks=[make_task()], reduce_tasks=[make_task()])
    analysis = service.analyze(job)
    assert [r.heuristic_name for r in analysis.results] == [
        "Mapper Memory",
        "Reducer Memory",
    ]
    assert analysis.errors == {}


def test_failing_heuristic_does_not_stop_others(make_task, make_job):
    service = AnalyzerService([mapper_memory_heuristic(), reducer_memory_heuristic()])
    job = make_job(
        map_tasks=[make_task()],
        reduce_tasks=[make_task()],
        configuration={"mapreduce.reduce.memory.mb": "2048"},
    )
    analysis = service.analyze(job)
    assert [r.heuristic_name for r in analysis.results] == ["Reducer Memory"]
    assert "Mapper Memory" in analysis.errors
    assert "mapreduce.map.memory.mb" in analysis.errors["Mapper Memory"]


def test_analyze_job_from_dict():
    analysis = analyze_job(_job_dict())
    assert analysis.job_id == "job_1"
    assert analysis.severity is Severity.CRITICAL
    assert analysis.score == 4
    as_dict = analysis.to_dict()
    assert as_dict["severity"] == "CRITICAL"
    assert as_dict["results"][0]["details"][0] == {
        "name": "Number of tasks",
        "value": "1",
    }


def test_failed_job_yields_no_results():
    analysis = analyze_job(_job_dict(succeeded=False))
    assert analysis.results == []
    assert analysis.severity is Severity.NONE


def test_analyze_jobs_isolates_bad_configuration():
    good, bad = analyze_jobs(
        [_job_dict("job_good"), _job_dict("job_bad", map_memory="${nope}")]
    )
    assert good.errors == {}
    assert list(bad.errors) == ["Mapper Memory"]
    assert [r.heuristic_name for r in bad.results] == ["Reducer Memory"]


def test_zero_container_size_fails_only_its_own_job():
    zero, good = analyze_jobs(
        [_job_dict("job_zero", map_memory="0"), _job_dict("job_good")]
    )
    assert "must be positive" in zero.errors["Mapper Memory"]
    assert [r.heuristic_name for r in zero.results] == ["Reducer Memory"]
    assert good.errors == {}
    assert good.severity is Severity.CRITICAL


def test_null_counter_fails_only_its_own_job():
    broken = _job_dict("job_null_counter")
    broken["mapTasks"][0]["counters"]["PHYSICAL_MEMORY_BYTES"] = None
    broken_analysis, good = analyze_jobs([broken, _job_dict("job_good")])
    assert "PHYSICAL_MEMORY_BYTES" in broken_analysis.errors["Mapper Memory"]
    assert good.errors == {}
    assert len(good.results) == 2
