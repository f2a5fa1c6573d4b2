from huff_errors import QueueCapacityError


class MinHeap:
    """
    Fixed-capacity binary min-heap of tree nodes keyed on node.freq.

    Equal weights are never swapped, and when both children tie the left one
    wins. Compressor and decompressor must see the same order.
    """

    def __init__(self, capacity: int):
        self.capacity = capacity
        self._nodes = []

    def __len__(self):
        return len(self._nodes)

    def is_empty(self) -> bool:
        return not self._nodes

    def insert(self, node):
        if len(self._nodes) >= self.capacity:
            raise QueueCapacityError(f"heap full (capacity={self.capacity})")
        nodes = self._nodes
        nodes.append(node)
        i = len(nodes) - 1
        while i and node.freq < nodes[(i - 1) // 2].freq:
            nodes[i] = nodes[(i - 1) // 2]
            i = (i - 1) // 2
        nodes[i] = node

    def extract_min(self):
        """Remove and return the lowest-weight node, or None when empty."""
        nodes = self._nodes
        if not nodes:
            return None
        root = nodes[0]
        last = nodes.pop()
        if nodes:
            nodes[0] = last
            self._sift_down(0)
        return root

    def _sift_down(self, i: int):
        nodes = self._nodes
        n = len(nodes)
        while True:
            smallest = i
            left, right = 2 * i + 1, 2 * i + 2
            if left < n and nodes[left].freq < nodes[smallest].freq:
                smallest = left
            if right < n and nodes[right].freq < nodes[smallest].freq:
                smallest = right
            if smallest == i:
                return
            nodes[i], nodes[smallest] = nodes[smallest], nodes[i]
            i = smallest
