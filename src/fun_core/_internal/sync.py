"""aiologic primitives backing memoization."""

from __future__ import annotations

from collections import OrderedDict
from collections.abc import Callable, Hashable

import aiologic

__all__ = ['KeyedOnceCache', 'Lazy', 'OnceCell']


class OnceCell[T]:
    """A cell that can be written to exactly once.

    Thread-safe using aiologic.Lock. Reads after the value is set take no
    lock. If the initializer raises, the cell stays unset and the next
    caller retries.

    Examples:
        >>> cell: OnceCell[int] = OnceCell()
        >>> cell.get_or_init(lambda: 42)
        42
        >>> cell.get_or_init(lambda: 100)
        42
    """

    __slots__ = ('_is_set', '_lock', '_value')

    def __init__(self) -> None:
        self._lock = aiologic.Lock()
        self._value: T | None = None
        self._is_set = False

    def get_or_init(self, init: Callable[[], T]) -> T:
        """Get the value, or initialize it with the given function.

        Thread-safe: only one thread will call init() successfully.

        Args:
            init: Function to call to initialize the value.

        Returns:
            The stored or newly initialized value.
        """
        if self._is_set:
            return self._value  # type: ignore[return-value]

        with self._lock:
            if not self._is_set:
                self._value = init()
                self._is_set = True
            return self._value  # type: ignore[return-value]

    def is_set(self) -> bool:
        """Check if the value has been set."""
        return self._is_set


class Lazy[T]:
    """A lazily initialized value.

    The initialization function is called at most once, on first access.

    Examples:
        >>> lazy = Lazy(lambda: 42)
        >>> lazy.is_initialized()
        False
        >>> lazy.get()
        42
    """

    __slots__ = ('_cell', '_init')

    def __init__(self, init: Callable[[], T]) -> None:
        self._cell: OnceCell[T] = OnceCell()
        self._init = init

    def get(self) -> T:
        """Get the value, initializing if necessary."""
        return self._cell.get_or_init(self._init)

    def is_initialized(self) -> bool:
        """Check if the value has been initialized."""
        return self._cell.is_set()


class KeyedOnceCache[K: Hashable, V]:
    """A bounded LRU map of OnceCells.

    Each key is computed at most once while it stays cached, even under
    concurrent callers. A hit reads the cell without locking; only a miss
    takes the map lock (to insert the cell) and then the cell's own lock
    (to compute the value). Least recently used keys are evicted once
    `maxsize` is exceeded.

    Args:
        maxsize: Maximum number of cached keys. None means unbounded.
    """

    __slots__ = ('_cells', '_lock', 'maxsize')

    def __init__(self, maxsize: int | None = None) -> None:
        if maxsize is not None and maxsize <= 0:
            raise ValueError(f'maxsize must be positive or None, got {maxsize}')
        self.maxsize = maxsize
        self._lock = aiologic.Lock()
        self._cells: OrderedDict[K, OnceCell[V]] = OrderedDict()

    def __len__(self) -> int:
        return len(self._cells)

    def __contains__(self, key: object) -> bool:
        cell = self._cells.get(key)  # type: ignore[call-overload]
        return cell is not None and cell.is_set()

    def peek(self, key: K) -> OnceCell[V] | None:
        """Return the cell for key if it holds a value, without locking."""
        cell = self._cells.get(key)
        if cell is None or not cell.is_set():
            return None
        try:
            self._cells.move_to_end(key)
        except KeyError:
            pass  # evicted by a concurrent insert; the cell is still valid
        return cell

    def cell_for(self, key: K) -> OnceCell[V]:
        """Return the cell for key, inserting an empty one if missing."""
        with self._lock:
            cell = self._cells.get(key)
            if cell is None:
                cell = OnceCell()
                self._cells[key] = cell
                if self.maxsize is not None:
                    while len(self._cells) > self.maxsize:
                        self._cells.popitem(last=False)
            return cell

    def get_or_compute(self, key: K, compute: Callable[[K], V]) -> V:
        """Return the cached value for key, computing it on a miss.

        Args:
            key: Cache key, passed to compute.
            compute: Function producing the value for key.

        Returns:
            The cached or newly computed value.
        """
        cell = self.peek(key)
        if cell is not None:
            return cell.get_or_init(lambda: compute(key))
        return self.cell_for(key).get_or_init(lambda: compute(key))

    def clear(self) -> None:
        """Drop every cached key."""
        with self._lock:
            self._cells.clear()
