from abc import ABC, abstractmethod
from typing import Any


class Queue(ABC):
    """Minimal queue interface implemented by `BinaryHeap`."""

    @abstractmethod
    def enqueue(self, e: Any) -> None:
        ...

    @abstractmethod
    def dequeue(self) -> Any:
        ...

    @abstractmethod
    def peek(self) -> Any:
        ...
