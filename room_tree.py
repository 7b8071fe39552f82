"""
room_tree.py
============
Construction, traversal and teardown of the mansion's room tree.

The tree is built exactly once from a RoomSpec and is read-only afterwards.
Every room is owned by its parent alone, so teardown is a plain post-order
walk that unlinks each node once.
"""

from __future__ import annotations

import logging
from typing import Dict, Iterator, List, Optional, Set

from case_data import MANSION_LAYOUT
from models import Room, RoomSpec

logger = logging.getLogger("detective_quest.room_tree")


def create_room(name: str) -> Room:
    """
    Allocate a new childless room.

    A MemoryError here is fatal; it is left to propagate so the entry point
    can report it and terminate.
    """
    return Room(name=name)


def build_room_tree(spec: RoomSpec) -> Room:
    """
    Build the room tree described by `spec` and return its root.

    Rooms are created top-down and wired to their parent as they are made,
    using an explicit stack so deep layouts cannot hit the recursion limit.

    Raises:
        ValueError: if two rooms in the layout share a name.
    """
    seen: Set[str] = set()

    def _make(node_spec: RoomSpec) -> Room:
        if node_spec.name in seen:
            raise ValueError(f"Duplicate room name in layout: {node_spec.name!r}")
        seen.add(node_spec.name)
        return create_room(node_spec.name)

    root  = _make(spec)
    stack = [(root, spec)]
    while stack:
        room, node_spec = stack.pop()
        if node_spec.left is not None:
            room.left = _make(node_spec.left)
            stack.append((room.left, node_spec.left))
        if node_spec.right is not None:
            room.right = _make(node_spec.right)
            stack.append((room.right, node_spec.right))

    logger.debug("Room tree built: root=%s, rooms=%d", root.name, len(seen))
    return root


def build_mansion(layout: Optional[Dict] = None) -> Room:
    """Validate `layout` (default: the reference mansion) and build its tree."""
    spec = RoomSpec.model_validate(layout if layout is not None else MANSION_LAYOUT)
    return build_room_tree(spec)


def iter_rooms(root: Optional[Room]) -> Iterator[Room]:
    """Yield every room in pre-order (room, then left subtree, then right)."""
    stack: List[Room] = [root] if root is not None else []
    while stack:
        room = stack.pop()
        yield room
        if room.right is not None:
            stack.append(room.right)
        if room.left is not None:
            stack.append(room.left)


def find_room(root: Optional[Room], name: str) -> Optional[Room]:
    return next((room for room in iter_rooms(root) if room.name == name), None)


def release_tree(root: Optional[Room]) -> int:
    """
    Unlink every room below and including `root`, children before parents.

    Returns:
        Number of rooms released.
    """
    released = 0
    stack: List[tuple] = [(root, False)] if root is not None else []
    while stack:
        room, children_done = stack.pop()
        if children_done:
            room.left = None
            room.right = None
            released += 1
            continue
        stack.append((room, True))
        if room.right is not None:
            stack.append((room.right, False))
        if room.left is not None:
            stack.append((room.left, False))

    logger.debug("Room tree released: %d rooms", released)
    return released
