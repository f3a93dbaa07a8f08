"""A last-in, first-out stack with a fixed capacity."""

__all__ = ["StackOverflow", "StackUnderflow", "BoundedStack"]


class StackOverflow(Exception):
    """Raised when pushing onto a stack that is at capacity."""


class StackUnderflow(Exception):
    """Raised when reading from a stack that holds nothing."""


class BoundedStack:
    """A LIFO stack holding at most ``size`` items."""

    def __init__(self, size):
        if size < 0:
            raise ValueError("size must not be negative")
        self.size = size
        self._items = []

    def push(self, value):
        """Put ``value`` on top; raise StackOverflow if there is no room."""
        if len(self._items) >= self.size:
            raise StackOverflow(f"stack is full ({self.size} items)")
        self._items.append(value)

    def pop(self):
        """Remove and return the top item; raise StackUnderflow if there is none."""
        if not self._items:
            raise StackUnderflow("stack is empty")
        return self._items.pop()

    def peek(self):
        """Return the top item without removing it; raise StackUnderflow if there is none."""
        if not self._items:
            raise StackUnderflow("stack is empty")
        return self._items[-1]

    def is_empty(self):
        return not self._items

    def __len__(self):
        return len(self._items)