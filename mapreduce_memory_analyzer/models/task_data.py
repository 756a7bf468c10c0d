"""Data models for MapReduce jobs and their tasks.

This module contains dataclasses for:
- TaskSample: Counters and runtime of one executed task
- JobRecord: A completed job with its configuration and task lists
"""

from dataclasses import asdict
from dataclasses import dataclass
from dataclasses import field
from enum import Enum
from typing import Any
from typing import Dict
from typing import List

from mapreduce_memory_analyzer.errors import MissingCounterError
from mapreduce_memory_analyzer.utils.conversions import camelcase


class CounterName(str, Enum):
    """Task counters read by the memory heuristics."""

    PHYSICAL_MEMORY_BYTES = "PHYSICAL_MEMORY_BYTES"
    VIRTUAL_MEMORY_BYTES = "VIRTUAL_MEMORY_BYTES"


@camelcase
@dataclass(frozen=True)
class TaskSample:
    """Represents one executed map or reduce task."""

    task_id: str
    is_sampled: bool
    total_run_time_ms: int  # in ms
    counters: Dict[str, int] = field(default_factory=dict)

    def get_counter(self, name: CounterName) -> int:
        """Value of a counter; missing or non-numeric counters are a collector bug."""
        key = name.value if isinstance(name, CounterName) else name
        value = self.counters.get(key)
        if value is None:
            raise MissingCounterError(self.task_id, key)
        try:
            return int(value)
        except (TypeError, ValueError):
            raise MissingCounterError(self.task_id, key) from None

    @property
    def physical_memory_bytes(self) -> int:
        return self.get_counter(CounterName.PHYSICAL_MEMORY_BYTES)

    @property
    def virtual_memory_bytes(self) -> int:
        return self.get_counter(CounterName.VIRTUAL_MEMORY_BYTES)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TaskSample":
        """Create TaskSample from dictionary with camelCase keys."""
        return cls(**data)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return asdict(self)


@dataclass(frozen=True)
class JobRecord:
    """Represents a completed MapReduce job."""

    job_id: str
    succeeded: bool
    configuration: Dict[str, str] = field(default_factory=dict)
    map_tasks: List[TaskSample] = field(default_factory=list)
    reduce_tasks: List[TaskSample] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "JobRecord":
        """Create JobRecord from dictionary with nested task conversion."""

        def _tasks(key: str) -> List[TaskSample]:
            return [
                TaskSample.from_dict(task) if isinstance(task, dict) else task
                for task in data.get(key, [])
            ]

        return cls(
            job_id=data["jobId"],
            succeeded=bool(data["succeeded"]),
            configuration={
                str(k): str(v) for k, v in (data.get("configuration") or {}).items()
            },
            map_tasks=_tasks("mapTasks"),
            reduce_tasks=_tasks("reduceTasks"),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return asdict(self)
