from dataclasses import dataclass
from dataclasses import field
from typing import Any
from typing import Dict
from typing import List
from typing import Tuple

from mapreduce_memory_analyzer.models.severity import Severity


@dataclass
class HeuristicResult:
    """
    Verdict of one heuristic for one job, with ordered diagnostic details.
    """

    heuristic_name: str
    severity: Severity
    score: int = 0
    details: List[Tuple[str, str]] = field(default_factory=list)

    def add_detail(self, label: str, value: str) -> None:
        self.details.append((label, value))

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "heuristic_name": self.heuristic_name,
            "severity": self.severity.name,
            "score": self.score,
            "details": [{"name": label, "value": value} for label, value in self.details],
        }


def heuristic_score(severity: Severity, num_tasks: int) -> int:
    """Weight a severity by the number of tasks it affects."""
    return int(severity) * num_tasks
