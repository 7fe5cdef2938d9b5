"""
pqueue.py

Priority queue of tree nodes used while building a Huffman tree.
"""


from bisect import bisect_left
from typing import List, Optional

from .models import Node


class PriorityQueue:
    """
    Nodes ordered by ascending frequency.

    A new node goes in front of the first node whose frequency is greater than
    or equal to its own, so among equal frequencies the newest node comes first.
    """
    def __init__(self) -> None:
        self.queue: List[Node] = []
        self._frequencies: List[int] = []

    def enqueue(self, node: Node) -> None:
        """
        Add a node to the queue.

        Args:
            node (Node): The node to enqueue.
        """
        index = bisect_left(self._frequencies, node.frequency)
        self.queue.insert(index, node)
        self._frequencies.insert(index, node.frequency)

    def dequeue(self) -> Optional[Node]:
        """
        Remove the lowest-frequency node.

        Returns:
            Optional[Node]: The first node in the queue, or None if the queue is empty.
        """
        if not self.queue:
            return None
        self._frequencies.pop(0)
        return self.queue.pop(0)

    def size(self) -> int:
        return len(self.queue)

    def __len__(self) -> int:
        return self.size()
