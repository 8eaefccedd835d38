"""Thread-safe entity id allocation."""

import itertools
import threading


class EntityIdAllocator:
    """Hands out unique, monotonically increasing entity ids.

    One allocator is owned by each Game. Allocation is guarded by a lock so
    ids stay unique and ordered even when an embedding application builds
    entities from several threads.
    """

    def __init__(self, start: int = 1):
        """Initialize allocator.

        Args:
            start: First id to hand out (must be >= 0)
        """
        if start < 0:
            raise ValueError(f"Invalid start: {start} (must be >= 0)")
        self._counter = itertools.count(start)
        self._lock = threading.Lock()
        self._last: int | None = None

    def next_id(self) -> int:
        """Allocate the next id.

        Returns:
            An id strictly greater than every id allocated before it
        """
        with self._lock:
            self._last = next(self._counter)
            return self._last

    def last_id(self) -> int | None:
        """Return the most recently allocated id, or None if none yet."""
        with self._lock:
            return self._last
