"""
Containers that enforce single ownership of the buffers coroutines hand back
and forth with runtimes.
"""

from threading import Lock


class OwnedCell:
    """
    Holds at most one value. Taking the value empties the cell, so the value
    has exactly one owner at any time: either the cell or whoever took it.

    Taking is atomic. If two call sites race to take the value, only one of
    them gets it; the other sees an empty cell.
    """

    def __init__(self, value=None):
        self._value = value
        self._lock = Lock()

    def take(self):
        "Removes and returns the value, or None if the cell is empty."
        with self._lock:
            value, self._value = self._value, None
            return value

    def put(self, value):
        with self._lock:
            self._value = value

    def peek(self):
        return self._value

    def empty(self):
        return self._value is None

    def __repr__(self):
        state = "empty" if self.empty() else repr(self._value)
        return f"OwnedCell({state})"
