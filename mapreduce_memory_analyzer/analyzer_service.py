import logging
from dataclasses import dataclass
from dataclasses import field
from typing import Any
from typing import Dict
from typing import List
from typing import Sequence

from mapreduce_memory_analyzer.analytics.base import BaseHeuristic
from mapreduce_memory_analyzer.models.heuristic_result import HeuristicResult
from mapreduce_memory_analyzer.models.severity import Severity
from mapreduce_memory_analyzer.models.task_data import JobRecord

logger = logging.getLogger(__name__)


@dataclass
class JobAnalysis:
    """Results of all applicable heuristics for one job."""

    job_id: str
    results: List[HeuristicResult] = field(default_factory=list)
    errors: Dict[str, str] = field(default_factory=dict)

    @property
    def severity(self) -> Severity:
        """Worst severity across heuristics; NONE when nothing applied."""
        if not self.results:
            return Severity.NONE
        return Severity.max(*(result.severity for result in self.results))

    @property
    def score(self) -> int:
        return sum(result.score for result in self.results)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "job_id": self.job_id,
            "severity": self.severity.name,
            "score": self.score,
            "results": [result.to_dict() for result in self.results],
            "errors": dict(self.errors),
        }


class AnalyzerService:
    """Runs a fixed set of heuristics over jobs."""

    def __init__(self, heuristics: Sequence[BaseHeuristic]):
        self.heuristics = list(heuristics)

    def analyze(self, job: JobRecord) -> JobAnalysis:
        """
        Applies every heuristic to the job. A heuristic failing on bad job data
        is recorded in the analysis errors and does not stop the others.
        """
        analysis = JobAnalysis(job_id=job.job_id)
        for heuristic in self.heuristics:
            try:
                result = heuristic.apply(job)
            except (ValueError, KeyError) as e:
                logger.error(
                    f"{heuristic.heuristic_name} failed for job {job.job_id}: {e}"
                )
                analysis.errors[heuristic.heuristic_name] = str(e)
                continue
            if result is None:
                logger.debug(
                    f"{heuristic.heuristic_name} does not apply to job {job.job_id}"
                )
                continue
            analysis.results.append(result)
        return analysis
