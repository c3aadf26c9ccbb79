from src.binary_heap.binary_heap import BinaryHeap
from src.binary_heap.exceptions import ConfigurationError, EmptyContainerError
from src.binary_heap.ordering import Ordering
from src.binary_heap.queue import Queue

Queue.register(BinaryHeap)
