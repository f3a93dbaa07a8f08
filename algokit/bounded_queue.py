"""A first-in, first-out queue with a fixed capacity."""

from collections import deque

__all__ = ["QueueFull", "QueueEmpty", "BoundedQueue"]


class QueueFull(Exception):
    """Raised when pushing onto a queue that is at capacity."""


class QueueEmpty(Exception):
    """Raised when reading from a queue that holds nothing."""


class BoundedQueue:
    """A FIFO queue holding at most ``max_size`` items."""

    def __init__(self, max_size=16):
        if max_size < 1:
            raise ValueError("max_size must be at least 1")
        self.max_size = max_size
        self._items = deque()

    def push(self, value):
        """Append ``value`` at the back; raise QueueFull if there is no room."""
        if len(self._items) >= self.max_size:
            raise QueueFull(f"queue is full ({self.max_size} items)")
        self._items.append(value)

    def pop(self):
        """Remove and return the front item; raise QueueEmpty if there is none."""
        if not self._items:
            raise QueueEmpty("queue is empty")
        return self._items.popleft()

    def front(self):
        """Return the front item without removing it; raise QueueEmpty if there is none."""
        if not self._items:
            raise QueueEmpty("queue is empty")
        return self._items[0]

    def __len__(self):
        return len(self._items)