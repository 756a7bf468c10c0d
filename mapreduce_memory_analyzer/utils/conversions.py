"""Data conversion utilities for the MapReduce Memory Analyzer.

This module provides conversion functions between different data formats:
- camelCase job dumps to snake_case dataclass fields
- Byte counts to human readable sizes
- Millisecond durations to human readable timespans
"""
import re
from typing import Any
from typing import Type
from typing import TypeVar

T = TypeVar("T")

ONE_KB = 1024
ONE_MB = ONE_KB * 1024
ONE_GB = ONE_MB * 1024
ONE_TB = ONE_GB * 1024
ONE_PB = ONE_TB * 1024
ONE_EB = ONE_PB * 1024

_DISPLAY_UNITS = [
    (ONE_EB, "EB"),
    (ONE_PB, "PB"),
    (ONE_TB, "TB"),
    (ONE_GB, "GB"),
    (ONE_MB, "MB"),
    (ONE_KB, "KB"),
]


def camel_to_snake(name: str) -> str:
    """
    Converts a camelCase string to snake_case, correctly handling acronyms.
    """
    name = re.sub(r"(?<=[a-z0-9])([A-Z])", r"_\1", name)
    name = re.sub(r"([A-Z])([A-Z][a-z])", r"\1_\2", name)
    return name.lower()


def camelcase(cls: Type[T]) -> Type[T]:
    """
    Decorator to allow a dataclass to be initialized from camelCase keys.
    Must be placed above the @dataclass decorator.
    """
    original_init = cls.__init__

    def __init__(self, *args, **kwargs: Any):
        if args:
            raise TypeError(
                f"{cls.__name__} only supports keyword arguments for initialization."
            )

        # Convert the incoming camelCase keys to snake_case.
        snake_case_kwargs = {camel_to_snake(k): v for k, v in kwargs.items()}
        # Call the original dataclass __init__ with the corrected keys.
        original_init(self, **snake_case_kwargs)

    cls.__init__ = __init__
    return cls


def bytes_to_mb(num_bytes: int) -> int:
    """Whole MiB in a byte count, truncated."""
    return int(num_bytes) // ONE_MB


def byte_count_to_display_size(size: int) -> str:
    """Render a byte count in the largest binary unit, e.g. '2.00 GB'."""
    for unit_size, unit in _DISPLAY_UNITS:
        if size >= unit_size:
            return f"{size / unit_size:.2f} {unit}"
    return f"{size} bytes"


def readable_timespan(milliseconds: int) -> str:
    """Render a duration as e.g. '1 hr 3 min 12 sec'."""
    seconds = int(milliseconds) // 1000
    if seconds <= 0:
        return "0 sec"
    hours, seconds = divmod(seconds, 3600)
    minutes, seconds = divmod(seconds, 60)

    parts = []
    if hours:
        parts.append(f"{hours} hr")
    if minutes:
        parts.append(f"{minutes} min")
    if seconds:
        parts.append(f"{seconds} sec")
    return " ".join(parts)
