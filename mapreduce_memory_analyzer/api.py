from pathlib import Path
from typing import Any
from typing import Dict
from typing import Iterable
from typing import List
from typing import Optional
from typing import Union

from mapreduce_memory_analyzer.analytics.memory import build_heuristics
from mapreduce_memory_analyzer.analyzer_service import AnalyzerService
from mapreduce_memory_analyzer.analyzer_service import JobAnalysis
from mapreduce_memory_analyzer.config.heuristic_conf import load_heuristic_configuration
from mapreduce_memory_analyzer.models.task_data import JobRecord


def create_analyzer(config_path: Optional[Union[str, Path]] = None) -> AnalyzerService:
    """Build an analyzer from a heuristic configuration file, or the defaults."""
    return AnalyzerService(build_heuristics(load_heuristic_configuration(config_path)))


def analyze_job(
    job: Union[JobRecord, Dict[str, Any]],
    config_path: Optional[Union[str, Path]] = None,
) -> JobAnalysis:
    """
    A high-level function to evaluate the container memory efficiency of a job.

    :param job: A JobRecord, or its camelCase dictionary form.
    :param config_path: Optional YAML heuristic configuration. Built-in mapper
                        and reducer memory heuristics are used when omitted.
    :return: A JobAnalysis holding one result per applicable heuristic.
    """
    if isinstance(job, dict):
        job = JobRecord.from_dict(job)
    return create_analyzer(config_path).analyze(job)


def analyze_jobs(
    jobs: Iterable[Union[JobRecord, Dict[str, Any]]],
    config_path: Optional[Union[str, Path]] = None,
) -> List[JobAnalysis]:
    """Evaluate many jobs against one analyzer instance."""
    analyzer = create_analyzer(config_path)
    return [
        analyzer.analyze(JobRecord.from_dict(job) if isinstance(job, dict) else job)
        for job in jobs
    ]
