"""Ordered, in-memory store for classified key-value pairs.

Keys keep the position of their first occurrence; values follow the last
write.  A store is filled once by :meth:`RecordStore.from_lines` and then
sealed, after which it only answers lookups.
"""

from __future__ import annotations

from typing import Dict, Iterable, Iterator, List, Optional, Tuple

from .classifier import LineClassifier
from .errors import StoreSealedError
from .models import Record


class RecordStore:
    """Insertion-ordered key-value store.

    Keeps the keys in first-seen order alongside a key → value mapping.
    Every key in the order has exactly one mapping entry.
    """

    def __init__(self) -> None:
        self._keys: List[str] = []
        self._index: Dict[str, int] = {}
        self._values: Dict[str, str] = {}
        self._sealed = False
        self.lines_read = 0

    @classmethod
    def from_lines(
        cls,
        lines: Iterable[str],
        classifier: Optional[LineClassifier] = None,
    ) -> "RecordStore":
        """Build and seal a store from a single forward pass over *lines*."""
        classifier = classifier or LineClassifier()
        store = cls()
        for line in lines:
            store.lines_read += 1
            pair = classifier.classify(line)
            if pair is not None:
                store.insert(*pair)
        store.seal()
        return store

    # ------------------------------------------------------------------
    # Build phase
    # ------------------------------------------------------------------

    def insert(self, key: str, value: str) -> int:
        """Store *value* under *key* and return the key's order index.

        A new key is appended to the order; an existing key only has its
        value replaced.
        """
        if self._sealed:
            raise StoreSealedError(f"cannot insert {key!r} into a sealed store")
        index = self._index.get(key)
        if index is None:
            index = len(self._keys)
            self._keys.append(key)
            self._index[key] = index
        self._values[key] = value
        return index

    def seal(self) -> None:
        """End the build phase; further inserts raise :class:`StoreSealedError`."""
        self._sealed = True

    @property
    def sealed(self) -> bool:
        return self._sealed

    # ------------------------------------------------------------------
    # Query phase
    # ------------------------------------------------------------------

    def get(self, key: str) -> Optional[Tuple[int, str]]:
        """Return ``(index, value)`` for *key*, or ``None`` if absent."""
        index = self._index.get(key)
        if index is None:
            return None
        return index, self._values[key]

    def record(self, key: str) -> Optional[Record]:
        """Return the :class:`Record` for *key*, or ``None`` if absent."""
        found = self.get(key)
        if found is None:
            return None
        index, value = found
        return Record(index=index, key=key, value=value)

    def all(self) -> List[Record]:
        """Return every record in ascending order index."""
        return [
            Record(index=i, key=key, value=self._values[key])
            for i, key in enumerate(self._keys)
        ]

    def keys(self) -> List[str]:
        """Return the keys in first-seen order."""
        return list(self._keys)

    def __iter__(self) -> Iterator[Record]:
        return iter(self.all())

    def __contains__(self, key: object) -> bool:
        return key in self._index

    def __len__(self) -> int:
        return len(self._keys)
