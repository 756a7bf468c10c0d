"""Exceptions raised while evaluating a job."""


class ContainerMemoryConfigError(ValueError):
    """The requested container memory could not be read from the job configuration."""

    def __init__(self, key: str, value, reason: str):
        self.key = key
        self.value = value
        super().__init__(f"Cannot resolve container memory from {key}={value!r}: {reason}")


class MissingCounterError(KeyError):
    """A task does not expose a counter the heuristic depends on."""

    def __init__(self, task_id: str, counter: str):
        self.task_id = task_id
        self.counter = counter
        super().__init__(f"Task {task_id} has no usable counter {counter}")

    def __str__(self) -> str:
        return self.args[0]
