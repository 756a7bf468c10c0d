import pytest

from mapreduce_memory_analyzer.utils.conversions import ONE_GB
from mapreduce_memory_analyzer.utils.conversions import ONE_MB
from mapreduce_memory_analyzer.utils.conversions import byte_count_to_display_size
from mapreduce_memory_analyzer.utils.conversions import bytes_to_mb
from mapreduce_memory_analyzer.utils.conversions import camel_to_snake
from mapreduce_memory_analyzer.utils.conversions import readable_timespan


@pytest.mark.parametrize(
    "size, expected",
    [
        (0, "0 bytes"),
        (512, "512 bytes"),
        (1024, "1.00 KB"),
        (1536 * ONE_MB, "1.50 GB"),
        (2 * ONE_GB, "2.00 GB"),
        (4096 * ONE_MB, "4.00 GB"),
        (700 * ONE_MB, "700.00 MB"),
    ],
)
def test_byte_count_to_display_size(size, expected):
    assert byte_count_to_display_size(size) == expected


@pytest.mark.parametrize(
    "ms, expected",
    [
        (0, "0 sec"),
        (999, "0 sec"),
        (12000, "12 sec"),
        (192000, "3 min 12 sec"),
        (3600000, "1 hr"),
        (3792000, "1 hr 3 min 12 sec"),
    ],
)
def test_readable_timespan(ms, expected):
    assert readable_timespan(ms) == expected


def test_bytes_to_mb_truncates():
    assert bytes_to_mb(ONE_MB * 3 - 1) == 2
    assert bytes_to_mb(0) == 0


def test_camel_to_snake():
    assert camel_to_snake("totalRunTimeMs") == "total_run_time_ms"
    assert camel_to_snake("isSampled") == "is_sampled"
    assert camel_to_snake("task_id") == "task_id"
