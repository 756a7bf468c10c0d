from mapreduce_memory_analyzer.models.heuristic_result import HeuristicResult
from mapreduce_memory_analyzer.models.severity import Severity
from mapreduce_memory_analyzer.models.task_data import CounterName
from mapreduce_memory_analyzer.models.task_data import JobRecord
from mapreduce_memory_analyzer.models.task_data import TaskSample
