from src.binary_heap import (
    BinaryHeap,
    ConfigurationError,
    EmptyContainerError,
    Ordering,
    Queue,
)
