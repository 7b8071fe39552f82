"""
clue_set.py
===========
Ordered, duplicate-free collection of clue texts.

ClueSet is a plain (unbalanced) binary search tree keyed by the clue text
under normal string ordering. The clue vocabulary is small and fixed, so
the shape depending on insertion order is harmless and no rebalancing is
done.

Public API summary:
    clues = ClueSet()
    clues.insert(text)   → bool (True if newly added)
    clues.contains(text) → bool   (also: text in clues)
    clues.in_order()     → list of texts, ascending
    clues.clear()        → int (nodes released)
"""

from __future__ import annotations

import logging
from typing import Iterable, Iterator, List, Optional

logger = logging.getLogger("detective_quest.clue_set")


class _ClueNode:
    __slots__ = ("text", "left", "right")

    def __init__(self, text: str) -> None:
        self.text = text
        self.left: Optional[_ClueNode] = None
        self.right: Optional[_ClueNode] = None


class ClueSet:
    """
    Binary search tree of distinct clue texts.

    Every clue in a node's left subtree compares less than the node's text
    and every clue in its right subtree compares greater. Equal texts are
    never stored twice.
    """

    def __init__(self, clues: Iterable[str] = ()) -> None:
        self._root: Optional[_ClueNode] = None
        self._size = 0
        for text in clues:
            self.insert(text)

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def insert(self, text: str) -> bool:
        """
        Add `text` at the position dictated by its ordering.

        Returns:
            True if the clue was added, False if it was already present
            (the set is left unchanged).
        """
        if self._root is None:
            self._root = _ClueNode(text)
            self._size = 1
            logger.debug("Clue inserted as root: %r", text)
            return True

        node = self._root
        while True:
            if text == node.text:
                logger.debug("Clue already present: %r", text)
                return False
            if text < node.text:
                if node.left is None:
                    node.left = _ClueNode(text)
                    break
                node = node.left
            else:
                if node.right is None:
                    node.right = _ClueNode(text)
                    break
                node = node.right

        self._size += 1
        logger.debug("Clue inserted: %r (size=%d)", text, self._size)
        return True

    def clear(self) -> int:
        """
        Release every node, children before parents.

        Returns:
            Number of nodes released.
        """
        released = 0
        stack = [(self._root, False)] if self._root is not None else []
        while stack:
            node, children_done = stack.pop()
            if children_done:
                node.left = None
                node.right = None
                released += 1
                continue
            stack.append((node, True))
            if node.right is not None:
                stack.append((node.right, False))
            if node.left is not None:
                stack.append((node.left, False))

        self._root = None
        self._size = 0
        return released

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def contains(self, text: str) -> bool:
        node = self._root
        while node is not None:
            if text == node.text:
                return True
            node = node.left if text < node.text else node.right
        return False

    def in_order(self) -> List[str]:
        """Return the collected clues in ascending lexicographic order."""
        return list(self)

    def __iter__(self) -> Iterator[str]:
        stack: List[_ClueNode] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.text
            node = node.right

    def __contains__(self, text: object) -> bool:
        return isinstance(text, str) and self.contains(text)

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"ClueSet({self.in_order()!r})"
