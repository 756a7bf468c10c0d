import re
from typing import Mapping

from mapreduce_memory_analyzer.errors import ContainerMemoryConfigError
from mapreduce_memory_analyzer.utils.conversions import ONE_MB

_INTEGER = re.compile(r"-?[0-9]+")


def _parse_mb(value: str) -> int:
    value = value.strip()
    if not _INTEGER.fullmatch(value):
        raise ValueError(f"invalid integer: {value!r}")
    return int(value)


def resolve_container_memory(configuration: Mapping[str, str], key: str) -> int:
    """
    Requested container memory in bytes, read as MiB from configuration[key].

    Some jobs set the value to a reference like "${OTHER_KEY}"; one level
    of such indirection is resolved against the same configuration.
    The resolved size must be a positive integer.
    """
    container_size_str = configuration.get(key)
    if container_size_str is None:
        raise ContainerMemoryConfigError(key, None, "key is not set")

    try:
        container_mem = _parse_mb(container_size_str)
    except ValueError:
        if not container_size_str.startswith("$"):
            raise ContainerMemoryConfigError(
                key, container_size_str, "not an integer"
            ) from None
        start = container_size_str.find("{")
        end = container_size_str.find("}")
        if start < 0 or end <= start:
            raise ContainerMemoryConfigError(
                key, container_size_str, "malformed variable reference"
            ) from None
        real_container_conf = container_size_str[start + 1 : end]
        referenced = configuration.get(real_container_conf)
        if referenced is None:
            raise ContainerMemoryConfigError(
                key, container_size_str, f"{real_container_conf} is not set"
            ) from None
        try:
            container_mem = _parse_mb(referenced)
        except ValueError:
            raise ContainerMemoryConfigError(
                key,
                container_size_str,
                f"{real_container_conf}={referenced!r} is not an integer",
            ) from None

    if container_mem <= 0:
        raise ContainerMemoryConfigError(key, container_size_str, "must be positive")

    return container_mem * ONE_MB
