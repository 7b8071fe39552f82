"""
suspect_index.py
================
Hash map from clue text to suspect name.

Open hashing: a fixed array of buckets, each holding a singly linked chain
of (clue, suspect) entries. The bucket is chosen with the djb2 string hash
over the clue's UTF-8 bytes. The table is never resized; the clue
vocabulary is tiny, so chains stay short.

The index is filled once from case_data.CLUE_SUSPECTS before exploration
starts and is only queried afterwards (during exploration, to name the
suspect behind a new clue, and by the accusation judge).
"""

from __future__ import annotations

import logging
from typing import Iterator, List, Mapping, Optional, Tuple

from config import GAME_CONFIG

logger = logging.getLogger("detective_quest.suspect_index")

_HASH_MASK = 0xFFFFFFFFFFFFFFFF  # wrap like a 64-bit unsigned long


def djb2(text: str, seed: int = GAME_CONFIG.hash_seed) -> int:
    """
    djb2 hash of `text`: hash = hash * 33 + byte, over its UTF-8 bytes.

    Example:
        >>> djb2("")
        5381
        >>> djb2("a")
        177670
    """
    value = seed
    for byte in text.encode("utf-8"):
        value = (value * 33 + byte) & _HASH_MASK
    return value


class _Entry:
    __slots__ = ("clue", "suspect", "next")

    def __init__(self, clue: str, suspect: str, next: Optional["_Entry"]) -> None:
        self.clue = clue
        self.suspect = suspect
        self.next = next


class SuspectIndex:
    """
    Chained hash map clue -> suspect.

    Each clue maps to at most one suspect; putting the same clue again
    overwrites the previous suspect (last write wins).

    Attributes:
        bucket_count: Number of buckets, fixed at construction.
    """

    def __init__(self, bucket_count: int = GAME_CONFIG.bucket_count) -> None:
        if bucket_count < 1:
            raise ValueError(f"bucket_count must be positive, got {bucket_count}")
        self.bucket_count = bucket_count
        self._buckets: List[Optional[_Entry]] = [None] * bucket_count
        self._size = 0

    @classmethod
    def from_mapping(
        cls,
        mapping: Mapping[str, str],
        bucket_count: int = GAME_CONFIG.bucket_count,
    ) -> "SuspectIndex":
        """Build an index pre-populated with every (clue, suspect) pair of `mapping`."""
        index = cls(bucket_count)
        for clue, suspect in mapping.items():
            index.put(clue, suspect)
        logger.info(
            "SuspectIndex loaded — entries=%d, buckets=%d", len(index), bucket_count
        )
        return index

    def bucket_for(self, clue: str) -> int:
        """Index of the bucket `clue` hashes to."""
        return djb2(clue) % self.bucket_count

    # ------------------------------------------------------------------
    # Core operations
    # ------------------------------------------------------------------

    def put(self, clue: str, suspect: str) -> None:
        """Link `clue` to `suspect`, overwriting any earlier link for that clue."""
        bucket = self.bucket_for(clue)
        entry = self._find(bucket, clue)
        if entry is not None:
            logger.debug(
                "Overwriting suspect for %r: %r -> %r", clue, entry.suspect, suspect
            )
            entry.suspect = suspect
            return

        self._buckets[bucket] = _Entry(clue, suspect, self._buckets[bucket])
        self._size += 1
        logger.debug("Linked %r -> %r in bucket %d", clue, suspect, bucket)

    def get(self, clue: str) -> Optional[str]:
        """Return the suspect linked to `clue`, or None if the clue is unknown."""
        entry = self._find(self.bucket_for(clue), clue)
        return entry.suspect if entry is not None else None

    def _find(self, bucket: int, clue: str) -> Optional[_Entry]:
        entry = self._buckets[bucket]
        while entry is not None:
            if entry.clue == clue:
                return entry
            entry = entry.next
        return None

    # ------------------------------------------------------------------
    # Introspection and teardown
    # ------------------------------------------------------------------

    def items(self) -> Iterator[Tuple[str, str]]:
        """Yield (clue, suspect) pairs bucket by bucket, chain order within a bucket."""
        for head in self._buckets:
            entry = head
            while entry is not None:
                yield entry.clue, entry.suspect
                entry = entry.next

    def chain_length(self, bucket: int) -> int:
        length = 0
        entry = self._buckets[bucket]
        while entry is not None:
            length += 1
            entry = entry.next
        return length

    def clear(self) -> int:
        """
        Release every entry of every chain.

        Returns:
            Number of entries released.
        """
        released = 0
        for bucket, head in enumerate(self._buckets):
            entry = head
            while entry is not None:
                following = entry.next
                entry.next = None
                released += 1
                entry = following
            self._buckets[bucket] = None
        self._size = 0
        return released

    def __contains__(self, clue: object) -> bool:
        return isinstance(clue, str) and self.get(clue) is not None

    def __len__(self) -> int:
        return self._size
