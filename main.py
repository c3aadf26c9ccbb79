from src.binary_heap import BinaryHeap, Ordering


data = [10, 34, 23, 5, 23, 4567, 34, 23423, 764]

# Only the first six elements are taken into the heap
print("Creating binary heap...")
heap = BinaryHeap(data, size=6)
print(heap)

print(f"Ascending: {heap.sort()}")

heap.change_ordering(Ordering.DESCENDING)
print(f"Descending: {heap.sort()}")
