"""A bucketed set keyed on object identity."""

from __future__ import annotations

from .errors import ErrorCode, TaskworksError

__all__ = ["IdentitySet"]


class IdentitySet:
    """Set of objects compared by identity, spread over ``2 ** index_bits`` buckets.

    Not thread safe.
    """

    def __init__(self, index_bits):
        if not isinstance(index_bits, int) or index_bits < 0:
            raise TaskworksError(ErrorCode.INVAL, "index_bits must be a non-negative int")
        self._mask = (1 << index_bits) - 1
        self._buckets = [[] for _ in range(self._mask + 1)]
        self._count = 0

    def _bucket(self, item):
        return self._buckets[id(item) & self._mask]

    def insert(self, item):
        """Add ``item``; raise :class:`TaskworksError` if it is already present."""
        if not self.try_insert(item):
            raise TaskworksError(ErrorCode.INVAL, "object already in set")

    def try_insert(self, item):
        """Add ``item`` if absent; return whether it was added."""
        if item in self:
            return False
        self._bucket(item).insert(0, item)
        self._count += 1
        return True

    def remove(self, item):
        """Remove ``item``; raise :class:`TaskworksError` if it is absent."""
        bucket = self._bucket(item)
        for pos, entry in enumerate(bucket):
            if entry is item:
                del bucket[pos]
                self._count -= 1
                return
        raise TaskworksError(ErrorCode.INVAL, "object not in set")

    def __contains__(self, item):
        return any(entry is item for entry in self._bucket(item))

    def __len__(self):
        return self._count

    def __iter__(self):
        for bucket in self._buckets:
            yield from list(bucket)