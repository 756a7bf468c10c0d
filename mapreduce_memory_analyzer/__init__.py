"""MapReduce Memory Analyzer: container memory efficiency of completed jobs."""

from mapreduce_memory_analyzer.api import analyze_job
from mapreduce_memory_analyzer.api import analyze_jobs
from mapreduce_memory_analyzer.models.severity import Severity

__version__ = "0.1.0"

__all__ = ["analyze_job", "analyze_jobs", "Severity", "__version__"]
