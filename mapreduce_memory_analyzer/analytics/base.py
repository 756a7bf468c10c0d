from abc import ABC
from abc import abstractmethod
from typing import Optional

from mapreduce_memory_analyzer.models.heuristic_result import HeuristicResult
from mapreduce_memory_analyzer.models.task_data import JobRecord


class BaseHeuristic(ABC):
    """Abstract base class for all job heuristics."""

    @property
    @abstractmethod
    def heuristic_name(self) -> str:
        pass

    @abstractmethod
    def apply(self, job: JobRecord) -> Optional[HeuristicResult]:
        """Evaluates the job, returning None when the heuristic does not apply."""
        pass
