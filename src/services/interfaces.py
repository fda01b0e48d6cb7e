"""Capabilities OuterService needs from its collaborators."""

from typing import Protocol, runtime_checkable


@runtime_checkable
class InnerProcessor(Protocol):
    """Anything that can run the inner processing step."""

    def inner_processing(self, a: str, b: str) -> None:
        ...


@runtime_checkable
class StepProcessor(Protocol):
    """Anything that can transform a step value."""

    def process_step(self, value: int) -> int:
        ...
